import uuid
from typing import Any, Iterable, Optional


def new_id() -> str:
    return str(uuid.uuid4())


def next_sequential_id(records: Iterable[Any]) -> int:
    """One more than the largest integer ``id`` in ``records``, or 1 if empty."""
    ids = [r.id for r in records]
    return max(ids) + 1 if ids else 1


def is_integer(value: Any) -> bool:
    """True for JSON integers, including integral floats such as ``5.0``.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def parse_int(value: Any) -> Optional[int]:
    """Integer value of a query parameter, or None when it is not numeric."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
