"""Unit tests for the notification store."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from lectorflow.models import Notification
from lectorflow.notifications.service import NotificationService
from lectorflow.notifications.types import NotificationType


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def add_notification(db_session, recipient_id="alice", read=True, age=timedelta(hours=2)):
    notification = Notification(
        recipient_id=recipient_id,
        type=NotificationType.DOCUMENT_REVIEWED.value,
        title="Document Review Complete",
        message="Your document has been reviewed",
        read=read,
        data={},
        created_at=NOW - age,
    )
    db_session.add(notification)
    db_session.commit()
    return notification


class TestCreateNotification:
    """Test notification creation."""

    def test_creates_unread_notification(self, db_session):
        service = NotificationService(db_session)

        notification = service.create_notification(
            "bob",
            NotificationType.DOCUMENT_ASSIGNED,
            "New Document Assignment",
            'You have been assigned to review "report.docx"',
            {"submission_id": "abc", "file_name": "report.docx"},
            "/review?id=abc",
        )

        stored = db_session.get(Notification, notification.id)
        assert stored.recipient_id == "bob"
        assert stored.type == "document_assigned"
        assert stored.read is False
        assert stored.data == {"submission_id": "abc", "file_name": "report.docx"}
        assert stored.action_url == "/review?id=abc"
        assert stored.created_at is not None

    def test_optional_fields_default(self, db_session):
        """data defaults to an empty payload and action_url to None."""
        notification = NotificationService(db_session).create_notification(
            "bob", "custom_event", "Title", "Message"
        )

        stored = db_session.get(Notification, notification.id)
        assert stored.type == "custom_event"
        assert stored.data == {}
        assert stored.action_url is None

    def test_store_failure_is_raised(self, db_session):
        """Store errors roll back and propagate to the caller."""
        service = NotificationService(db_session)

        with patch.object(db_session, "commit", side_effect=OperationalError("INSERT", {}, Exception("down"))):
            with pytest.raises(OperationalError):
                service.create_notification("bob", NotificationType.DOCUMENT_ASSIGNED, "t", "m")

        assert db_session.scalars(select(Notification)).all() == []


class TestListForRecipient:
    """Test recipient listing."""

    def test_only_own_notifications_newest_first(self, db_session):
        older = add_notification(db_session, "alice", age=timedelta(hours=3))
        newer = add_notification(db_session, "alice", age=timedelta(minutes=5))
        add_notification(db_session, "bob")

        result = NotificationService(db_session).list_for_recipient("alice")

        assert [n.id for n in result] == [newer.id, older.id]


class TestDeleteReadOlderThan:
    """Test bounded batch deletion."""

    def test_deletes_only_read_and_old(self, db_session):
        cutoff = NOW - timedelta(hours=1)
        add_notification(db_session, read=True, age=timedelta(hours=2))
        unread_old = add_notification(db_session, read=False, age=timedelta(hours=2))
        read_young = add_notification(db_session, read=True, age=timedelta(minutes=30))

        deleted, has_more = NotificationService(db_session).delete_read_older_than(cutoff, 500)

        assert deleted == 1
        assert has_more is False
        remaining = {n.id for n in db_session.scalars(select(Notification))}
        assert remaining == {unread_old.id, read_young.id}

    def test_respects_limit(self, db_session):
        """At most `limit` notifications go per call; the oldest first."""
        cutoff = NOW - timedelta(hours=1)
        add_notification(db_session, age=timedelta(hours=5))
        add_notification(db_session, age=timedelta(hours=4))
        newest_id = add_notification(db_session, age=timedelta(hours=3)).id

        deleted, has_more = NotificationService(db_session).delete_read_older_than(cutoff, 2)

        assert deleted == 2
        assert has_more is True
        remaining = [n.id for n in db_session.scalars(select(Notification))]
        assert remaining == [newest_id]

    def test_nothing_eligible(self, db_session):
        add_notification(db_session, read=False)

        deleted, has_more = NotificationService(db_session).delete_read_older_than(NOW, 500)

        assert (deleted, has_more) == (0, False)
