from typing import Any, Callable

from admins.bootstrap_super_admin import bootstrap_super_admin
from admins.create_admin import create_admin
from admins.delete_admin import delete_admin
from firebase_functions import https_fn
from firebase_functions.https_fn import HttpsError
from utils.error_utils import internal_error
from utils.json_utils import to_json_serializable
from utils.logging_utils import get_logger


def handle_callable(name: str, handler: Callable, req: https_fn.CallableRequest) -> Any:
    """
    Run a callable handler and convert its result into the response payload.

    Handlers raise HttpsError for every expected failure. Anything else is
    logged and reported to the client as internal, without leaking details.
    """
    logger = get_logger(__name__)
    try:
        return to_json_serializable(handler(req))
    except HttpsError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in {name}: {str(e)}")
        raise internal_error()


@https_fn.on_call()
def createAdmin(req: https_fn.CallableRequest) -> Any:
    return handle_callable("createAdmin", create_admin, req)


@https_fn.on_call()
def deleteAdmin(req: https_fn.CallableRequest) -> Any:
    return handle_callable("deleteAdmin", delete_admin, req)


@https_fn.on_call()
def bootstrapSuperAdmin(req: https_fn.CallableRequest) -> Any:
    return handle_callable("bootstrapSuperAdmin", bootstrap_super_admin, req)
