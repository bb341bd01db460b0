from fastapi import status
from .base import JuridiskException


class ValidationError(JuridiskException):
    """Exception raised when caller input is invalid"""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )


class DuplicateUserError(ValidationError):
    """Exception raised when registering an email that already exists"""

    def __init__(self, detail: str = "En bruger med denne email findes allerede"):
        super().__init__(detail)
