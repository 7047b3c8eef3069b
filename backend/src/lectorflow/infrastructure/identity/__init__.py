"""Identity provider adapters"""

from .directory_identity_provider import DirectoryIdentityProvider

__all__ = ["DirectoryIdentityProvider"]
