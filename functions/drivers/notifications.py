from typing import Any, Dict, Optional, Tuple

from firebase_admin import firestore
from firebase_admin.firestore import SERVER_TIMESTAMP
from models.constants import (
    MAX_BATCH_WRITES,
    ActionUrls,
    Collections,
    DriverRequestFields,
    DriverStatus,
    NotificationFields,
    NotificationPriority,
    NotificationTypes,
    QueryOperators,
    Roles,
    UserFields,
)
from utils.logging_utils import get_logger

NEW_DRIVER_TITLE = ("سائق جديد", "New driver")
STATUS_UPDATE_TITLE = ("تحديث حالة سائق", "Driver status update")

# Arabic and English templates keyed by the driver's new status
STATUS_MESSAGES = {
    DriverStatus.APPROVED: ("تم الموافقة على السائق {name}", "Driver {name} was approved"),
    DriverStatus.REJECTED: ("تم رفض طلب السائق {name}", "Driver {name}'s request was rejected"),
    DriverStatus.PENDING: ("طلب السائق {name} قيد المراجعة", "Driver {name}'s request is under review"),
    DriverStatus.SUSPENDED: ("تم إيقاف السائق {name}", "Driver {name} was suspended"),
}
GENERIC_STATUS_MESSAGE = (
    "تحديث حالة السائق {name}: {status}",
    "Driver {name} status update: {status}",
)


def driver_display_name(data: Dict[str, Any], fallback: str) -> str:
    first_name = data.get(DriverRequestFields.FIRST_NAME)
    last_name = data.get(DriverRequestFields.LAST_NAME)
    if first_name and last_name:
        return f"{first_name} {last_name}"
    return data.get(DriverRequestFields.EMAIL) or fallback


def new_driver_message(driver_name: str) -> Tuple[str, str]:
    return (
        f"السائق {driver_name} قدم طلب تسجيل جديد",
        f"Driver {driver_name} submitted a new registration request",
    )


def status_message(status: Optional[str], driver_name: str) -> Tuple[str, str]:
    """Return the (Arabic, English) message for a driver's new status."""
    arabic, english = STATUS_MESSAGES.get(status, GENERIC_STATUS_MESSAGE)
    return (
        arabic.format(name=driver_name, status=status),
        english.format(name=driver_name, status=status),
    )


def build_driver_notification(
    driver_id: str,
    title: Tuple[str, str],
    message: Tuple[str, str],
    data: Dict[str, Any],
    priority: NotificationPriority,
) -> Dict[str, Any]:
    return {
        NotificationFields.TYPE: NotificationTypes.DRIVER,
        NotificationFields.TITLE: title[0],
        NotificationFields.TITLE_EN: title[1],
        NotificationFields.MESSAGE: message[0],
        NotificationFields.MESSAGE_EN: message[1],
        NotificationFields.ACTION_URL: ActionUrls.DRIVERS,
        NotificationFields.DATA: data,
        NotificationFields.PRIORITY: priority,
        NotificationFields.IS_READ: False,
        NotificationFields.CREATED_AT: SERVER_TIMESTAMP,
        NotificationFields.RELATED_ID: driver_id,
    }


def notify_admins(db: firestore.Client, notification: Dict[str, Any]) -> int:
    """
    Write a copy of the notification into every admin's notification inbox.

    Each admin gets admin_notifications/{adminId}/notifications/{auto-id}.
    Writes are grouped into batches that respect Firestore's per-batch limit
    and every batch is committed before returning.

    Args:
        db: Firestore client
        notification: The notification document to fan out

    Returns:
        The number of notifications written
    """
    logger = get_logger(__name__)

    admins_query = db.collection(Collections.USERS).where(
        UserFields.ROLE, QueryOperators.EQUALS, Roles.ADMIN
    )
    admin_ids = [admin_doc.id for admin_doc in admins_query.stream()]

    for start in range(0, len(admin_ids), MAX_BATCH_WRITES):
        batch = db.batch()
        for admin_id in admin_ids[start : start + MAX_BATCH_WRITES]:
            notification_ref = (
                db.collection(Collections.ADMIN_NOTIFICATIONS)
                .document(admin_id)
                .collection(Collections.NOTIFICATIONS)
                .document()
            )
            batch.set(notification_ref, notification)
        batch.commit()

    logger.info(f"Notified {len(admin_ids)} admins")
    return len(admin_ids)
