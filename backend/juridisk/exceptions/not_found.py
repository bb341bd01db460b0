from fastapi import status
from .base import JuridiskException


class NotFoundError(JuridiskException):
    """Raised when a resource does not exist or is not owned by the caller

    Both cases produce the same detail so callers cannot probe for records
    belonging to other users.
    """

    def __init__(self, resource: str):
        super().__init__(
            detail=f"{resource} not found",
            status_code=status.HTTP_404_NOT_FOUND
        )
