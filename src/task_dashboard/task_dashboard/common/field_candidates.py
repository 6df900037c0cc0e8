"""First-present-wins extraction over raw documents.

Raw records carry the same value under several field names. A candidate list
is an ordered tuple of accessors; the first one returning a present,
non-empty value wins.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

Accessor = Callable[[Mapping[str, Any]], Any]


def field(name: str) -> Accessor:
    def _get(doc: Mapping[str, Any]) -> Any:
        return doc.get(name)

    _get.__name__ = f"field_{name}"
    return _get


def fields(*names: str) -> tuple[Accessor, ...]:
    return tuple(field(n) for n in names)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return True


def first_present(doc: Mapping[str, Any], accessors: Sequence[Accessor]) -> Optional[Any]:
    for accessor in accessors:
        value = accessor(doc)
        if _is_present(value):
            return value
    return None
