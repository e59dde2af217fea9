from firebase_admin import auth, exceptions
from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from pydantic import ValidationError
from utils.logging_utils import get_logger


def auth_error_to_https(error: Exception) -> HttpsError:
    """
    Translate an Authentication failure into the callable error taxonomy.

    The Admin SDK validates email and password locally and raises ValueError
    before any request is made; the backend reports the same problems as
    InvalidArgumentError. Both map to invalid-argument. An already registered
    email maps to already-exists and anything else becomes internal.
    """
    logger = get_logger(__name__)

    if isinstance(error, HttpsError):
        return error
    if isinstance(error, auth.EmailAlreadyExistsError):
        return HttpsError(
            FunctionsErrorCode.ALREADY_EXISTS,
            "The email address is already in use by another account",
        )
    if isinstance(error, ValueError):
        return HttpsError(FunctionsErrorCode.INVALID_ARGUMENT, str(error))
    if isinstance(error, exceptions.InvalidArgumentError):
        return HttpsError(FunctionsErrorCode.INVALID_ARGUMENT, str(error))

    logger.error(f"Unexpected authentication error: {str(error)}")
    return HttpsError(FunctionsErrorCode.INTERNAL, "Internal error")


def validation_error_to_https(error: ValidationError) -> HttpsError:
    """
    Convert a pydantic ValidationError into an invalid-argument error whose
    message names the first offending field.
    """
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "request"
    message = first.get("msg", "Invalid value")
    return HttpsError(FunctionsErrorCode.INVALID_ARGUMENT, f"{field}: {message}")


def internal_error(message: str = "Internal error") -> HttpsError:
    return HttpsError(FunctionsErrorCode.INTERNAL, message)
