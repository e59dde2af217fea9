import enum
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_json_serializable(obj: Any) -> Any:
    """
    Convert a handler result into the plain JSON value a callable returns.

    Callable responses are encoded by the functions framework with the standard
    json module, so dataclasses, enums and datetimes must be flattened first.
    Dataclass field names are converted to camelCase.

    Args:
        obj: The object to convert

    Returns:
        A JSON serializable representation of the object
    """
    if isinstance(obj, enum.Enum):
        return obj.value
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    if is_dataclass(obj) and not isinstance(obj, type):
        # Clients read camelCase keys, the same style as the Firestore fields
        return {
            to_camel_case(k): to_json_serializable(v) for k, v in asdict(obj).items()
        }
    if isinstance(obj, dict):
        return {str(k): to_json_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_json_serializable(item) for item in obj]
    return str(obj)
