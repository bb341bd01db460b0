from fastapi import status
from .base import JuridiskException


class UpstreamUnavailableError(JuridiskException):
    """The completion provider reported itself temporarily unavailable"""

    def __init__(
        self,
        detail: str = "Gemini AI er midlertidigt utilgængelig. Prøv venligst igen om et par minutter."
    ):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )


class UpstreamError(JuridiskException):
    """Any other completion provider or network failure"""

    def __init__(
        self,
        detail: str = "Der opstod en fejl ved besvarelse af spørgsmålet. Prøv venligst igen."
    ):
        super().__init__(detail=detail)


class ProviderKeyMissingError(JuridiskException):
    """The completion provider API key is not configured"""

    def __init__(self, detail: str = "Gemini API nøgle mangler"):
        super().__init__(detail=detail)
