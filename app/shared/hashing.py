"""
Assessment Hashing
Content hashes that tie a stored survey record to the assessment it carries.

Two records with the same risk level, suggestions, totals and percentage hash
the same, whenever and however often they were written.
"""

import hashlib
import json
from typing import Any

HASH_PREFIX = "sha256:"

# Record bookkeeping, not assessment content
VOLATILE_FIELDS = frozenset([
    "createdAt",
    "updatedAt",
    "assessmentHash",
    "generated_at",
])

# Percentages are stored to 1 decimal; anything past this is arithmetic noise
FLOAT_DIGITS = 10


def strip_volatile(obj: Any) -> Any:
    """Copy of obj with volatile keys removed from every nested dict."""
    if isinstance(obj, dict):
        return {k: strip_volatile(v) for k, v in obj.items() if k not in VOLATILE_FIELDS}
    if isinstance(obj, (list, tuple)):
        return [strip_volatile(v) for v in obj]
    return obj


def _normalize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _normalize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_normalize(v) for v in obj]
    if isinstance(obj, float):
        return round(obj, FLOAT_DIGITS)
    return obj


def canonicalize(obj: Any, exclude_volatile: bool = True) -> str:
    """Compact, key-sorted ASCII JSON. Same content, same string."""
    if exclude_volatile:
        obj = strip_volatile(obj)
    return json.dumps(_normalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def canonicalize_and_hash(obj: Any, exclude_volatile: bool = True) -> str:
    """"sha256:<hex>" digest of canonicalize(obj)."""
    canonical = canonicalize(obj, exclude_volatile)
    return HASH_PREFIX + hashlib.sha256(canonical.encode("utf-8")).hexdigest()
