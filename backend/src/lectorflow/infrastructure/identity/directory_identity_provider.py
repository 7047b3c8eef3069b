"""Identity provider adapter backed by the identity directory table."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...domain.identity.ports import IdentityProviderPort
from ...models.user import User

logger = logging.getLogger(__name__)


class DirectoryIdentityProvider(IdentityProviderPort):
    """Lists identities from the ``user`` table provisioned by the identity provider.

    The session is shared with the submission write that follows the lookup,
    so a failed query is rolled back here before the error propagates.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_identities(self) -> List[str]:
        try:
            return list(self.db.scalars(select(User.id)))
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("Error listing identities", exc_info=True)
            raise
