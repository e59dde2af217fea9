from admins.claims import is_super_admin, require_caller, role_claims
from firebase_admin import auth, firestore
from firebase_admin.firestore import SERVER_TIMESTAMP
from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from google.api_core.exceptions import Conflict
from models.constants import (
    LIST_USERS_PAGE_SIZE,
    BootstrapFields,
    Collections,
    Documents,
    Roles,
    UserFields,
)
from models.data_models import BootstrapResponse
from utils.logging_utils import get_logger


def find_super_admin_account(exclude_id: str):
    """Return the uid of any account other than exclude_id holding superAdmin claims."""
    page = auth.list_users(max_results=LIST_USERS_PAGE_SIZE)
    for user in page.iterate_all():
        if user.uid != exclude_id and is_super_admin(user.custom_claims):
            return user.uid
    return None


def claim_bootstrap_marker(db: firestore.Client, caller_id: str) -> None:
    """
    Atomically record that caller_id performed the bootstrap.

    The account scan alone is check-then-act: two callers can both see no
    super admin before either sets claims. Creating the marker document fails
    for whoever comes second.

    Raises:
        HttpsError(failed-precondition): If another user already holds the marker
    """
    logger = get_logger(__name__)

    marker_ref = db.collection(Collections.SYSTEM).document(
        Documents.SUPER_ADMIN_BOOTSTRAP
    )
    try:
        marker_ref.create(
            {
                BootstrapFields.USER_ID: caller_id,
                BootstrapFields.CREATED_AT: SERVER_TIMESTAMP,
            }
        )
        logger.info(f"Bootstrap marker claimed by {caller_id}")
        return
    except Conflict:
        marker_doc = marker_ref.get()

    owner_id = (marker_doc.to_dict() or {}).get(BootstrapFields.USER_ID)
    if owner_id == caller_id:
        # An earlier attempt by the same user stopped before setting claims
        logger.info(f"Resuming bootstrap for {caller_id}")
        return

    logger.warning(f"Bootstrap already performed by {owner_id}, rejecting {caller_id}")
    raise HttpsError(
        FunctionsErrorCode.FAILED_PRECONDITION,
        "A super admin has already been bootstrapped",
    )


def bootstrap_super_admin(request) -> BootstrapResponse:
    """
    Grants the first super admin their custom claims.

    Claims can only be granted by a super admin, so the very first one is
    bootstrapped from the users document instead: this is the one place a
    document role takes part in an authorization decision. It only succeeds
    while no account holds superAdmin claims yet.

    Args:
        request: The callable request containing:
                - auth: The caller's uid and decoded ID token

    Returns:
        A BootstrapResponse. already_super_admin is set when the caller's
        token already carried the claims and nothing was changed.

    Raises:
        unauthenticated: The caller is not signed in
        permission-denied: The caller's users document is not role=superAdmin
        failed-precondition: Another account already holds superAdmin claims
    """
    logger = get_logger(__name__)

    caller_id, claims = require_caller(request)
    logger.info(f"User {caller_id} requested super admin bootstrap")

    if is_super_admin(claims):
        logger.info(f"User {caller_id} already has super admin claims")
        return BootstrapResponse(success=True, already_super_admin=True)

    db = firestore.client()
    user_doc = db.collection(Collections.USERS).document(caller_id).get()
    user_data = user_doc.to_dict() if user_doc.exists else {}

    if user_data.get(UserFields.ROLE) != Roles.SUPER_ADMIN:
        logger.warning(f"User {caller_id} is not a super admin in Firestore")
        raise HttpsError(
            FunctionsErrorCode.PERMISSION_DENIED,
            "Only the designated super admin can bootstrap claims",
        )

    existing_id = find_super_admin_account(exclude_id=caller_id)
    if existing_id:
        logger.warning(f"Super admin claims already held by {existing_id}")
        raise HttpsError(
            FunctionsErrorCode.FAILED_PRECONDITION,
            "A super admin has already been bootstrapped",
        )

    claim_bootstrap_marker(db, caller_id)

    auth.set_custom_user_claims(caller_id, role_claims(Roles.SUPER_ADMIN))
    logger.info(f"Super admin claims set for {caller_id}")

    return BootstrapResponse(success=True)
