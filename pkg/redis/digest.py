"""Deterministic SHA-256 digests for deriving cache keys."""

import dataclasses
import hashlib
import json
from typing import Any

from .constant import HASH_ENCODING, JSON_SEPARATORS


def _encode_default(obj: Any) -> Any:
    """JSON fallback for values the encoder does not know natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> bytes:
    """Serialize obj to compact, key-sorted UTF-8 JSON.

    Raises:
        TypeError: If obj holds a value JSON cannot represent
        ValueError: On circular references or NaN/Infinity floats
        RecursionError: If obj is nested deeper than the recursion limit
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=JSON_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
        default=_encode_default,
    ).encode(HASH_ENCODING)


def _digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def hash_key(key: str) -> str:
    """Return the lowercase hex SHA-256 digest of the UTF-8 bytes of key.

    Example:
        >>> hash_key("test_key")
        '92488e1e3eeecdf99f3ed2ce59233efb4b4fb612d5655c0ce9ea52b5a502e655'
    """
    return _digest(key.encode(HASH_ENCODING))


def hash_object(obj: Any) -> str:
    """Return the SHA-256 digest of obj's canonical JSON form.

    Objects that cannot be serialized (including structures nested past the
    interpreter recursion limit) hash as empty input. Callers use these
    digests as cache keys, so the result must not change shape on failure.

    Only JSON types and dataclass instances serialize. Any other class
    instance fails and therefore hashes to the same empty-input digest, so
    pass dicts or dataclasses when the digest must tell objects apart.

    Example:
        >>> hash_object({"id": 123, "name": "test"})
        'f99d2e506f11e31bc9102307e3ab14e170fbce1dbd244fb2d38f9e5753fbb397'
    """
    try:
        data = canonical_json(obj)
    except (TypeError, ValueError, RecursionError):
        data = b""
    return _digest(data)


__all__ = [
    "canonical_json",
    "hash_key",
    "hash_object",
]
