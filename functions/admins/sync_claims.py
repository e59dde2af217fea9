from admins.claims import role_claims
from firebase_admin import auth, firestore
from models.constants import Collections, QueryOperators, Roles, UserFields
from models.data_models import ClaimsSyncReport
from utils.logging_utils import get_logger


def sync_role_claims(db: firestore.Client) -> ClaimsSyncReport:
    """
    Copy the role stored in users documents onto each account's custom claims.

    Used once to migrate accounts created before roles were enforced through
    claims. Super admins are processed before admins.

    Args:
        db: Firestore client

    Returns:
        A ClaimsSyncReport listing the uids updated for each role
    """
    logger = get_logger(__name__)
    report = ClaimsSyncReport()

    for role, updated in (
        (Roles.SUPER_ADMIN, report.super_admins),
        (Roles.ADMIN, report.admins),
    ):
        users_query = db.collection(Collections.USERS).where(
            UserFields.ROLE, QueryOperators.EQUALS, role
        )
        for user_doc in users_query.stream():
            email = (user_doc.to_dict() or {}).get(UserFields.EMAIL, "")
            logger.info(f"Setting {role} claims for: {email} ({user_doc.id})")
            auth.set_custom_user_claims(user_doc.id, role_claims(role))
            updated.append(user_doc.id)

    logger.info(
        f"{len(report.super_admins)} super admins + {len(report.admins)} admins updated"
    )
    return report
