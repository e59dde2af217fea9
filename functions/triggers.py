from drivers.on_driver_request_created import on_driver_request_created
from drivers.on_driver_request_updated import on_driver_request_updated
from firebase_functions import firestore_fn
from models.constants import Collections
from orders.on_order_updated import on_order_updated
from reviews.on_review_written import on_review_written
from utils.trigger_utils import handle_event

# handle_event logs and swallows every failure; the platform only ever sees a
# normal return.


# Firestore trigger for order status changes
@firestore_fn.on_document_updated(document=f"{Collections.ORDERS}/{{id}}")
def senddevices(
    event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot]],
) -> None:
    """Push a topic notification when a delivery order becomes upcoming."""
    handle_event("senddevices", on_order_updated, event)


# Firestore trigger for new driver registration requests
@firestore_fn.on_document_created(
    document=f"{Collections.DRIVER_REQUESTS}/{{driverId}}"
)
def process_driver_request_creation(
    event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None],
) -> None:
    """Notify every admin about a new driver request."""
    handle_event("process_driver_request_creation", on_driver_request_created, event)


# Firestore trigger for driver request status changes
@firestore_fn.on_document_updated(
    document=f"{Collections.DRIVER_REQUESTS}/{{driverId}}"
)
def process_driver_request_update(
    event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot]],
) -> None:
    """Notify every admin when a driver request changes status."""
    handle_event("process_driver_request_update", on_driver_request_updated, event)


# Firestore trigger for review writes
@firestore_fn.on_document_written(
    document=f"{Collections.STORE_REVIEWS}/{{reviewId}}"
)
def process_review_write(
    event: firestore_fn.Event[
        firestore_fn.Change[firestore_fn.DocumentSnapshot | None]
    ],
) -> None:
    """Recalculate the reviewed store's rating on create, update and delete."""
    handle_event("process_review_write", on_review_written, event)
