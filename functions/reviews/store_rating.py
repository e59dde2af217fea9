import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Optional, Tuple

from firebase_admin import firestore
from firebase_admin.firestore import SERVER_TIMESTAMP
from models.constants import (
    Collections,
    QueryOperators,
    ReviewFields,
    StoreFields,
)
from models.data_models import StoreRating
from utils.logging_utils import get_logger


def is_numeric_rating(value: Any) -> bool:
    # bool is an int subclass but never a rating
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_rating(value: float) -> float:
    """
    Round to one decimal place, halves rounding away from zero.

    The exact binary value of the float is rounded, so 1.15 (stored as
    1.1499...) becomes 1.1 while 2.25 (exact) becomes 2.3.
    """
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(rounded)


def compute_store_rating(ratings: Iterable[Any]) -> Tuple[float, int]:
    """
    Compute the average rating and the number of ratings counted.

    Values that are not numbers are skipped entirely, they count towards
    neither the sum nor the total.

    Args:
        ratings: Raw rating values read from review documents

    Returns:
        A (rating, total_ratings) tuple, (0, 0) when nothing is countable
    """
    numeric = [rating for rating in ratings if is_numeric_rating(rating)]
    if not numeric:
        return 0, 0

    return round_rating(sum(numeric) / len(numeric)), len(numeric)


def resolve_store_id(
    before: Optional[Dict[str, Any]], after: Optional[Dict[str, Any]]
) -> Optional[str]:
    """
    Pick the store a review write belongs to. The post-change document wins;
    deletes only have the pre-change one.
    """
    for data in (after, before):
        store_id = (data or {}).get(ReviewFields.STORE_ID)
        if store_id:
            return store_id
    return None


def update_store_rating(db: firestore.Client, store_id: str) -> StoreRating:
    """
    Recalculate a store's rating from all of its reviews and write it back.

    The store fields are a materialized view over the store_reviews collection,
    so every call recomputes from scratch rather than applying a delta.

    Args:
        db: Firestore client
        store_id: The ID of the store to update

    Returns:
        The StoreRating that was written

    Raises:
        google.api_core.exceptions.NotFound: If the store document doesn't exist
    """
    logger = get_logger(__name__)

    reviews_query = db.collection(Collections.STORE_REVIEWS).where(
        ReviewFields.STORE_ID, QueryOperators.EQUALS, store_id
    )
    ratings = [
        (review_doc.to_dict() or {}).get(ReviewFields.RATING)
        for review_doc in reviews_query.stream()
    ]

    rating, total_ratings = compute_store_rating(ratings)

    db.collection(Collections.STORES).document(store_id).update(
        {
            StoreFields.RATING: rating,
            StoreFields.TOTAL_RATINGS: total_ratings,
            StoreFields.UPDATED_AT: SERVER_TIMESTAMP,
        }
    )
    logger.info(f"Updated store {store_id}: {rating} ({total_ratings} ratings)")

    return StoreRating(store_id=store_id, rating=rating, total_ratings=total_ratings)
