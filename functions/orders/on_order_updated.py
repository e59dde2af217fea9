from typing import Any, Dict, Optional

from firebase_admin import messaging
from models.constants import (
    ORDER_NOTIFICATION_TOPIC,
    ActionUrls,
    DeliveryStatus,
    NotificationDataFields,
    OrderFields,
    PickupOptions,
)
from models.data_models import TriggerResult
from utils.logging_utils import get_logger
from utils.trigger_utils import event_param, run_trigger, snapshot_data


def is_new_delivery_order(before: Dict[str, Any], after: Dict[str, Any]) -> bool:
    """A delivery order has just moved from pending to upcoming."""
    return (
        after.get(OrderFields.PICKUP_OPTION) == PickupOptions.DELIVERY
        and after.get(OrderFields.DELIVERY_STATUS) == DeliveryStatus.UPCOMING
        and before.get(OrderFields.DELIVERY_STATUS) == DeliveryStatus.PENDING
    )


def build_new_order_message(order: Dict[str, Any]) -> messaging.Message:
    user_name = order.get(OrderFields.USER_NAME)
    return messaging.Message(
        notification=messaging.Notification(
            title="New Order!",
            body=f'New Delivery Order from "{user_name}" has been added.',
        ),
        data={NotificationDataFields.ROUTE_LOCATION.value: ActionUrls.HOME.value},
        topic=ORDER_NOTIFICATION_TOPIC,
    )


def send_new_order_notification(order: Dict[str, Any]) -> str:
    logger = get_logger(__name__)
    message_id = messaging.send(build_new_order_message(order))
    logger.info(
        f"Sent new order notification to topic {ORDER_NOTIFICATION_TOPIC}: {message_id}"
    )
    return message_id


def on_order_updated(event) -> Optional[TriggerResult]:
    """
    Firestore trigger handler that runs when an order is updated.

    Pushes a topic notification to the delivery staff when a delivery order
    becomes upcoming. Every other update is ignored.

    Args:
        event: The Firestore event containing the before/after change

    Returns:
        None when no notification is due, otherwise the TriggerResult of the send
    """
    logger = get_logger(__name__)

    order_id = event_param(event, "id")
    before = snapshot_data(event.data.before)
    after = snapshot_data(event.data.after)

    if not is_new_delivery_order(before, after):
        return None

    logger.info(f"Order {order_id} is a new delivery order")
    return run_trigger(
        "sending new order notification", order_id, send_new_order_notification, after
    )
