from typing import Any, Callable, Dict, Optional

from models.data_models import TriggerResult
from utils.logging_utils import get_logger


def snapshot_data(snapshot) -> Dict[str, Any]:
    """
    Return a document snapshot's fields, or an empty dict when the snapshot
    is missing (the "after" side of a delete) or the document doesn't exist.
    """
    if snapshot is None:
        return {}
    return snapshot.to_dict() or {}


def run_trigger(
    name: str, entity_id: str, handler: Callable[..., Any], *args
) -> TriggerResult:
    """
    Run a fire-and-forget trigger handler and capture its outcome.

    Background triggers must never surface an error to the platform, otherwise
    the event is reported as failed. Any exception raised by the handler is
    logged and converted into an unsuccessful TriggerResult instead.

    Args:
        name: Short description of the work, used in log lines
        entity_id: ID of the document the event is about
        handler: The function doing the work
        *args: Positional arguments passed to the handler

    Returns:
        A TriggerResult describing whether the handler completed
    """
    logger = get_logger(__name__)
    try:
        handler(*args)
    except Exception as e:
        logger.error(f"Error {name} for {entity_id}: {str(e)}")
        return TriggerResult(success=False, entity_id=entity_id, error=str(e))

    return TriggerResult(success=True, entity_id=entity_id)


def event_param(event, key: str) -> Optional[str]:
    params = getattr(event, "params", None) or {}
    return params.get(key)


def handle_event(name: str, handler: Callable[[Any], Any], event) -> None:
    """
    Platform-facing adapter for a trigger handler.

    Handlers already turn failures of their own work into a TriggerResult.
    This also covers reading the event itself, so whatever happens the
    platform sees a normal return.
    """
    logger = get_logger(__name__)
    try:
        result = handler(event)
    except Exception as e:
        logger.error(f"Unhandled error in {name}: {str(e)}")
        return None

    if isinstance(result, TriggerResult) and not result.success:
        logger.warning(f"{name} did not complete for {result.entity_id}")
    return None
