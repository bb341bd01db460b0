from .base import JuridiskException


class InternalError(JuridiskException):
    """Opaque server-side failure, details are only logged"""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail=detail)
