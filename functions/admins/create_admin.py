from admins.claims import require_super_admin, role_claims
from firebase_admin import auth, firestore
from firebase_admin.firestore import SERVER_TIMESTAMP
from models.constants import Collections, Roles, UserFields
from models.data_models import AdminResponse
from models.pydantic_models import CreateAdminRequest
from pydantic import ValidationError
from utils.error_utils import auth_error_to_https, validation_error_to_https
from utils.logging_utils import get_logger


def create_admin(request) -> AdminResponse:
    """
    Creates a new admin account.

    This function:
    1. Checks the caller's claims carry role=superAdmin
    2. Validates the name, email and password
    3. Creates the Authentication account
    4. Attaches the admin role claims to it
    5. Writes the mirroring users document

    The steps are not transactional. A failure after step 3 leaves the
    Authentication account in place without a users document.

    Args:
        request: The callable request containing:
                - auth: The caller's uid and decoded ID token
                - data: name, email and password of the new admin

    Returns:
        An AdminResponse describing the new account

    Raises:
        unauthenticated: The caller is not signed in
        permission-denied: The caller is not a super admin
        invalid-argument: A field is missing or malformed, or the password is weak
        already-exists: The email is already registered
        internal: Any other Authentication failure
    """
    logger = get_logger(__name__)

    caller_id, _ = require_super_admin(request)
    logger.info(f"Super admin {caller_id} creating a new admin")

    try:
        admin_input = CreateAdminRequest.model_validate(request.data or {})
    except ValidationError as e:
        logger.warning(f"Invalid create admin request from {caller_id}: {str(e)}")
        raise validation_error_to_https(e)

    try:
        user_record = auth.create_user(
            email=admin_input.email,
            password=admin_input.password,
            display_name=admin_input.name,
        )
        auth.set_custom_user_claims(user_record.uid, role_claims(Roles.ADMIN))
    except Exception as e:
        logger.warning(f"Failed to create admin account {admin_input.email}: {str(e)}")
        raise auth_error_to_https(e)

    admin_id = user_record.uid
    logger.info(f"Authentication account {admin_id} created with admin claims")

    db = firestore.client()
    db.collection(Collections.USERS).document(admin_id).set(
        {
            UserFields.NAME: admin_input.name,
            UserFields.EMAIL: admin_input.email,
            UserFields.ROLE: Roles.ADMIN,
            UserFields.CREATED_BY: caller_id,
            UserFields.CREATED_AT: SERVER_TIMESTAMP,
        }
    )
    logger.info(f"User document created for admin {admin_id}")

    return AdminResponse(
        admin_id=admin_id,
        name=admin_input.name,
        email=admin_input.email,
        role=Roles.ADMIN,
    )
