"""Identity domain module - identity provider port"""

from .ports import IdentityProviderPort

__all__ = ["IdentityProviderPort"]
