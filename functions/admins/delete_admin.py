from admins.claims import has_role, is_super_admin, require_super_admin
from firebase_admin import auth, firestore
from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from models.constants import Collections, Roles
from models.data_models import DeleteAdminResponse
from models.pydantic_models import DeleteAdminRequest
from pydantic import ValidationError
from utils.error_utils import validation_error_to_https
from utils.logging_utils import get_logger


def delete_admin(request) -> DeleteAdminResponse:
    """
    Deletes an admin account and its users document.

    Only accounts whose claims carry role=admin can be deleted, so super admins
    and customers are out of reach, and a caller can never delete themselves.
    Deleting the Authentication account is best effort: if it is already gone
    the users document is still removed, which makes repeated calls for the
    same admin safe.

    Args:
        request: The callable request containing:
                - auth: The caller's uid and decoded ID token
                - data: adminId of the account to delete

    Returns:
        A DeleteAdminResponse for the deleted admin

    Raises:
        unauthenticated: The caller is not signed in
        permission-denied: The caller is not a super admin
        invalid-argument: adminId is missing
        failed-precondition: The target is the caller, a super admin, or an
            account without admin claims
    """
    logger = get_logger(__name__)

    caller_id, _ = require_super_admin(request)

    try:
        delete_input = DeleteAdminRequest.model_validate(request.data or {})
    except ValidationError as e:
        raise validation_error_to_https(e)

    admin_id = delete_input.admin_id
    logger.info(f"Super admin {caller_id} deleting admin {admin_id}")

    if admin_id == caller_id:
        logger.warning(f"User {caller_id} attempted to delete their own account")
        raise HttpsError(
            FunctionsErrorCode.FAILED_PRECONDITION,
            "You cannot delete your own account",
        )

    try:
        target_claims = auth.get_user(admin_id).custom_claims or {}
    except auth.UserNotFoundError:
        # Only the leftover users document remains to clean up
        logger.info(f"Authentication account {admin_id} not found, no claims to check")
        target_claims = None

    if is_super_admin(target_claims):
        logger.warning(f"User {caller_id} attempted to delete super admin {admin_id}")
        raise HttpsError(
            FunctionsErrorCode.FAILED_PRECONDITION,
            "Super admin accounts cannot be deleted",
        )

    if target_claims is not None and not has_role(target_claims, Roles.ADMIN):
        logger.warning(f"User {caller_id} attempted to delete non-admin {admin_id}")
        raise HttpsError(
            FunctionsErrorCode.FAILED_PRECONDITION,
            "Only admin accounts can be deleted",
        )

    try:
        auth.delete_user(admin_id)
        logger.info(f"Authentication account {admin_id} deleted")
    except Exception as e:
        logger.warning(f"Could not delete authentication account {admin_id}: {str(e)}")

    db = firestore.client()
    db.collection(Collections.USERS).document(admin_id).delete()
    logger.info(f"User document for admin {admin_id} deleted")

    return DeleteAdminResponse(success=True, admin_id=admin_id)
