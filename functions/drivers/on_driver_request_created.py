from typing import Any, Dict

from drivers.notifications import (
    NEW_DRIVER_TITLE,
    build_driver_notification,
    driver_display_name,
    new_driver_message,
    notify_admins,
)
from firebase_admin import firestore
from models.constants import (
    DriverRequestFields,
    NotificationDataFields,
    NotificationPriority,
)
from models.data_models import TriggerResult
from utils.logging_utils import get_logger
from utils.trigger_utils import event_param, run_trigger, snapshot_data


def notify_new_driver_request(
    driver_id: str, request_data: Dict[str, Any]
) -> int:
    logger = get_logger(__name__)
    db = firestore.client()

    driver_name = driver_display_name(request_data, fallback=NEW_DRIVER_TITLE[0])
    notification = build_driver_notification(
        driver_id,
        title=NEW_DRIVER_TITLE,
        message=new_driver_message(driver_name),
        data={
            NotificationDataFields.DRIVER_ID: driver_id,
            NotificationDataFields.DRIVER_NAME: driver_name,
            NotificationDataFields.EMAIL: request_data.get(DriverRequestFields.EMAIL),
        },
        priority=NotificationPriority.HIGH,
    )

    count = notify_admins(db, notification)
    logger.info(f"Created driver registration notification for driver: {driver_id}")
    return count


def on_driver_request_created(event) -> TriggerResult:
    """
    Firestore trigger handler that runs when a driver submits a registration
    request. Every admin receives a high priority notification.

    Args:
        event: The Firestore event containing the new document

    Returns:
        The TriggerResult of the fan-out
    """
    driver_id = event_param(event, "driverId")
    request_data = snapshot_data(event.data)

    return run_trigger(
        "creating driver notification",
        driver_id,
        notify_new_driver_request,
        driver_id,
        request_data,
    )
