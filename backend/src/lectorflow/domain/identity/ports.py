"""Identity Provider Port - Domain interface for the identity directory.

The review workflow never manages identities itself. It asks the identity
provider for the full set of known identities when it needs reviewer
candidates. Adapters implement this interface for a concrete directory.

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from typing import Sequence


class IdentityProviderPort(ABC):
    """Port interface for enumerating known identities.

    Example Usage:
        provider = DirectoryIdentityProvider(db)
        identities = provider.list_identities()
        reviewer = assign_reviewer(uploader_id, identities, rng)
    """

    @abstractmethod
    def list_identities(self) -> Sequence[str]:
        """List every identity known to the system.

        Returns:
            Identity strings (token subjects). Order is not significant.

        Raises:
            Exception: Any backend failure; callers treat lookup as best-effort.
        """
        ...
