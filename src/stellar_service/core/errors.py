"""
Service-level errors.

Only client input problems are modelled here. Failures coming from the
SDK or the gateway propagate as their own exception types.
"""

MISSING_PARAMETERS = "Missing required parameters"
MISSING_ISSUER = "Asset issuer is required for non-native assets"
MISSING_SIGNED_XDR = "Missing signed transaction XDR"


class InvalidRequestError(Exception):
    """Raised when a request is missing fields or names an unresolvable asset."""

    def __init__(self, message: str = MISSING_PARAMETERS):
        super().__init__(message)
        self.message = message


def error_message(exc: BaseException) -> str:
    """Return the exception's message, falling back to its class name."""
    return str(exc) or exc.__class__.__name__
