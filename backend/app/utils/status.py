"""
Status vocabulary helpers.
Stored statuses are enums; callers may send any casing.
"""

import enum
from typing import Any, Iterable, List, Optional, Type, TypeVar

E = TypeVar("E", bound=enum.Enum)


def normalize_status(value: Any) -> Any:
    """Strip and lower-case string input, pass everything else through."""
    if isinstance(value, enum.Enum):
        return value
    if isinstance(value, str):
        return value.strip().lower()
    return value


def status_value(value: Any) -> str:
    """Lower-case string form of a stored status (enum, string or None)."""
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        value = value.value
    return str(value).strip().lower()


def parse_status_list(enum_cls: Type[E], raw: Optional[str]) -> Optional[List[E]]:
    """
    Parse a comma separated status filter.

    Returns None when no filter was given, otherwise the recognised statuses
    (possibly empty when nothing matched).
    """
    if raw is None or not raw.strip():
        return None
    wanted: Iterable[str] = (part.strip().lower() for part in raw.split(","))
    known = {member.value: member for member in enum_cls}
    return [known[name] for name in wanted if name in known]
