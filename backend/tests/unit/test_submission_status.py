"""Unit tests for SubmissionStatus values and transitions."""

from lectorflow.domain.submissions import SubmissionStatus, parse_status, is_reopening


class TestSubmissionStatus:
    """Test status values and parsing."""

    def test_enum_values(self):
        assert SubmissionStatus.PENDING.value == "pending"
        assert SubmissionStatus.DONE.value == "done"

    def test_parse_known(self):
        assert parse_status("pending") == SubmissionStatus.PENDING
        assert parse_status("done") == SubmissionStatus.DONE

    def test_parse_unknown(self):
        """Unknown, missing and wrongly-cased values are rejected."""
        assert parse_status("archived") is None
        assert parse_status("DONE") is None
        assert parse_status("") is None
        assert parse_status(None) is None


class TestTransitions:
    """Test re-open detection."""

    def test_reopening(self):
        assert is_reopening(SubmissionStatus.DONE, SubmissionStatus.PENDING) is True
        assert is_reopening(SubmissionStatus.PENDING, SubmissionStatus.DONE) is False
        assert is_reopening(SubmissionStatus.DONE, SubmissionStatus.DONE) is False
