"""
Output Sanitizer - strips noise from govc JSON output.

govc -json output mirrors the vSphere API object model, which is extremely
verbose for an LLM consumer. sanitize() is a total, pure, bottom-up
transformation that:

- drops keys listed in NOISY_KEYS
- drops None values, empty lists and objects left without fields
- compacts managed object references `{"type": T, "value": V}` into "T:V"

Dropped values are represented by ABSENT rather than None, because None
is itself a value that sanitization removes.

sanitize(sanitize(x)) == sanitize(x) for every input.
"""

from collections.abc import Mapping
from typing import Any


class _Absent:
    """Marker for a value that sanitization removed entirely."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


# Keys that are never useful for an agent. They appear across many vSphere
# managed object types.
#
# CONSERVATIVE list: an entry belongs here only when it is certainly pure
# noise. When in doubt, keep the field. Nulls and empty lists are already
# stripped. Review this set when new govc releases change the object model;
# it makes no claim that all noise is removed.
NOISY_KEYS: frozenset[str] = frozenset({
    # Every alarm *definition* on the object, even untriggered ones (10+
    # entries per object). triggeredAlarmState and overallStatus carry the
    # useful part.
    "declaredAlarmState",
    # Custom field schema definitions (the values live in customValue)
    "availableField",
    # Opaque numeric role IDs, meaningless without the AuthorizationManager
    "effectiveRole",
    # Internal API method names disabled on the object
    "disabledMethod",
    # Storage I/O Resource Management tuning knobs
    "iormConfiguration",
    # Internal HostDatastoreBrowser reference
    "browser",
})


def is_moref(value: Any) -> bool:
    """True for a managed object reference: exactly {"type": str, "value": str}."""
    return (
        isinstance(value, Mapping)
        and len(value) == 2
        and isinstance(value.get("type"), str)
        and isinstance(value.get("value"), str)
    )


def compact_moref(ref: Mapping[str, str]) -> str:
    """Compact a MoRef into "Type:value", keeping the type information."""
    return f"{ref['type']}:{ref['value']}"


def sanitize(data: Any, noisy_keys: frozenset[str] = NOISY_KEYS) -> Any:
    """
    Recursively sanitize a parsed govc JSON document.

    Returns the reduced value, or ABSENT when nothing worth keeping is left.
    """
    if data is None or data is ABSENT:
        return ABSENT

    if isinstance(data, list | tuple):
        if not data:
            return ABSENT

        # All-or-nothing: a list of pure MoRefs skips per-element recursion
        if all(is_moref(item) for item in data):
            return [compact_moref(item) for item in data]

        cleaned = [sanitize(item, noisy_keys) for item in data]
        kept = [item for item in cleaned if item is not ABSENT]
        return kept if kept else ABSENT

    if isinstance(data, Mapping):
        if is_moref(data):
            return compact_moref(data)

        result: dict[str, Any] = {}
        for key, value in data.items():
            if key in noisy_keys:
                continue
            cleaned = sanitize(value, noisy_keys)
            if cleaned is not ABSENT:
                result[key] = cleaned

        if not result:
            return ABSENT
        # Dropping fields can leave a bare MoRef behind; compact it now so a
        # second pass has nothing left to do.
        if is_moref(result):
            return compact_moref(result)
        return result

    # Primitives pass through
    return data
