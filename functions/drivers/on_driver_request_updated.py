from typing import Any, Dict, Optional

from drivers.notifications import (
    STATUS_UPDATE_TITLE,
    build_driver_notification,
    driver_display_name,
    notify_admins,
    status_message,
)
from firebase_admin import firestore
from models.constants import (
    DriverRequestFields,
    DriverStatus,
    NotificationDataFields,
    NotificationPriority,
)
from models.data_models import TriggerResult
from utils.logging_utils import get_logger
from utils.trigger_utils import event_param, run_trigger, snapshot_data


def notify_driver_status_change(
    driver_id: str, request_data: Dict[str, Any]
) -> int:
    logger = get_logger(__name__)
    db = firestore.client()

    status = request_data.get(DriverRequestFields.STATUS)
    driver_name = driver_display_name(request_data, fallback="سائق")

    notification = build_driver_notification(
        driver_id,
        title=STATUS_UPDATE_TITLE,
        message=status_message(status, driver_name),
        data={
            NotificationDataFields.DRIVER_ID: driver_id,
            NotificationDataFields.DRIVER_NAME: driver_name,
            NotificationDataFields.STATUS: status,
            NotificationDataFields.EMAIL: request_data.get(DriverRequestFields.EMAIL),
        },
        priority=(
            NotificationPriority.HIGH
            if status == DriverStatus.REJECTED
            else NotificationPriority.MEDIUM
        ),
    )

    count = notify_admins(db, notification)
    logger.info(f"Updated driver status notification for driver: {driver_id}")
    return count


def on_driver_request_updated(event) -> Optional[TriggerResult]:
    """
    Firestore trigger handler that runs when a driver request is updated.
    Admins are only notified when the status field actually changed.

    Args:
        event: The Firestore event containing the before/after change

    Returns:
        None when the status is unchanged, otherwise the TriggerResult of the
        fan-out
    """
    logger = get_logger(__name__)

    driver_id = event_param(event, "driverId")
    before = snapshot_data(event.data.before)
    after = snapshot_data(event.data.after)

    if after.get(DriverRequestFields.STATUS) == before.get(DriverRequestFields.STATUS):
        logger.info(f"Driver request {driver_id} status unchanged, skipping")
        return None

    return run_trigger(
        "updating driver notification",
        driver_id,
        notify_driver_status_change,
        driver_id,
        after,
    )
