from typing import Any, Dict, Optional

from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from models.constants import ClaimFields, Roles
from utils.logging_utils import get_logger


def role_claims(role: Roles) -> Dict[str, Any]:
    """Custom claims attached to an account holding the given role."""
    return {ClaimFields.ROLE.value: role.value, ClaimFields.ADMIN.value: True}


def has_role(claims: Optional[Dict[str, Any]], role: Roles) -> bool:
    return bool(claims) and claims.get(ClaimFields.ROLE) == role


def is_super_admin(claims: Optional[Dict[str, Any]]) -> bool:
    return has_role(claims, Roles.SUPER_ADMIN)


def require_caller(request) -> tuple[str, Dict[str, Any]]:
    """
    Return the caller's uid and decoded token claims.

    Only the signed ID token is consulted here. The token carries the custom
    claims set through the Admin SDK, unlike the users document which clients
    can be allowed to edit.

    Raises:
        HttpsError(unauthenticated): If the request carries no valid ID token
    """
    auth_context = getattr(request, "auth", None)
    uid = getattr(auth_context, "uid", None)
    if not uid:
        get_logger(__name__).warning("Rejected unauthenticated call")
        raise HttpsError(
            FunctionsErrorCode.UNAUTHENTICATED,
            "The function must be called while authenticated",
        )
    return uid, dict(getattr(auth_context, "token", None) or {})


def require_super_admin(request) -> tuple[str, Dict[str, Any]]:
    """
    Return the caller's uid and claims, requiring the superAdmin role claim.

    Raises:
        HttpsError(unauthenticated): If the request carries no valid ID token
        HttpsError(permission-denied): If the caller's claims lack role=superAdmin
    """
    uid, claims = require_caller(request)
    if not is_super_admin(claims):
        get_logger(__name__).warning(f"User {uid} is not a super admin")
        raise HttpsError(
            FunctionsErrorCode.PERMISSION_DENIED,
            "Only super admins can manage admins",
        )
    return uid, claims
