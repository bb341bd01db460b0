from .base import JuridiskException
from .not_found import NotFoundError
from .validation import ValidationError, DuplicateUserError
from .auth import AuthenticationError
from .upstream import UpstreamUnavailableError, UpstreamError, ProviderKeyMissingError
from .internal import InternalError

__all__ = [
    "JuridiskException",
    "NotFoundError",
    "ValidationError",
    "DuplicateUserError",
    "AuthenticationError",
    "UpstreamUnavailableError",
    "UpstreamError",
    "ProviderKeyMissingError",
    "InternalError",
]
