from fastapi import status
from .base import JuridiskException


class AuthenticationError(JuridiskException):
    """Raised when the caller has no valid session"""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )
