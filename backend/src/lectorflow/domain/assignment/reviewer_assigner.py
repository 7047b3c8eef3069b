"""Reviewer selection for new submissions.

A reviewer is drawn uniformly at random from every known identity except the
uploader. The random source is passed in so callers (and tests) control it.
"""

import random
from typing import Iterable, Optional


def eligible_reviewers(uploader_id: str, candidate_pool: Iterable[str]) -> list[str]:
    """Return the candidates that may review an upload by ``uploader_id``.

    Duplicates are collapsed and the result is sorted, so a seeded random
    source picks the same reviewer whatever order the pool arrived in.
    """
    return sorted({candidate for candidate in candidate_pool if candidate != uploader_id})


def assign_reviewer(
    uploader_id: str,
    candidate_pool: Iterable[str],
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """Pick a reviewer for an upload.

    Args:
        uploader_id: Identity of the user who uploaded the document
        candidate_pool: All identities known to the system
        rng: Random source (defaults to a fresh ``random.Random``)

    Returns:
        The chosen reviewer identity, or None if nobody but the uploader is known

    Example:
        >>> assign_reviewer("alice", {"alice", "bob"})
        'bob'
        >>> assign_reviewer("alice", {"alice"}) is None
        True
    """
    candidates = eligible_reviewers(uploader_id, candidate_pool)
    if not candidates:
        return None

    rng = rng or random.Random()
    return rng.choice(candidates)
