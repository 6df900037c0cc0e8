from __future__ import annotations

from typing import Any

from ..core.enums import CanonicalStatus


def canonicalize(raw: Any) -> CanonicalStatus:
    """Map a free-text task status onto the canonical set.

    Unknown or empty values fall back to ``IN_PROCESS``.
    """

    text = str(raw or "").strip().lower().replace("_", " ").replace("-", " ")
    if not text:
        return CanonicalStatus.IN_PROCESS
    if "complete" in text:
        return CanonicalStatus.COMPLETED
    if "cancel" in text:
        return CanonicalStatus.CANCELLED
    if "delay" in text:
        return CanonicalStatus.DELAYED
    return CanonicalStatus.IN_PROCESS
