from typing import Optional

from firebase_admin import firestore
from models.data_models import StoreRating, TriggerResult
from reviews.store_rating import resolve_store_id, update_store_rating
from utils.logging_utils import get_logger
from utils.trigger_utils import event_param, run_trigger, snapshot_data


def refresh_store_rating(store_id: str) -> StoreRating:
    return update_store_rating(firestore.client(), store_id)


def on_review_written(event) -> Optional[TriggerResult]:
    """
    Firestore trigger handler that runs when a review is created, updated or
    deleted, and refreshes the rating of the store it belongs to.

    Args:
        event: The Firestore event containing the before/after change

    Returns:
        None when the review has no store, otherwise the TriggerResult of the
        recalculation
    """
    logger = get_logger(__name__)

    change = event.data
    before = snapshot_data(getattr(change, "before", None))
    after = snapshot_data(getattr(change, "after", None))

    store_id = resolve_store_id(before, after)
    if not store_id:
        logger.info(
            f"Review {event_param(event, 'reviewId')} has no store, skipping rating update"
        )
        return None

    return run_trigger(
        "updating store rating", store_id, refresh_store_rating, store_id
    )
