# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : serializers.py
#   file_relpath : src/checkrelay/diagnostic/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Pure JSON serialization helpers for client payloads.

This module is intentionally console- and Click-free: it takes already-shaped
envelopes and produces strings. `json.dumps()` does not add a trailing newline.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from checkrelay.diagnostic.machine.shapes import ClientDiagnosticPayload


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - Path -> str
      - IntEnum -> int value; other Enum -> Enum.value
      - object with callable .to_dict() -> normalize(.to_dict())
      - Mapping -> dict[str, normalized value]
      - list/tuple/set/frozenset -> list[normalized item]

    Args:
        obj (object): The payload to be transformed into JSON-serializable format.

    Returns:
        object: The JSON-serializable representation of the payload.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return int(obj) if isinstance(obj, int) else obj.value

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def serialize_client_payload(payload: ClientDiagnosticPayload, *, indent: int | None = None) -> str:
    """Serialize a client envelope to JSON text.

    Args:
        payload (ClientDiagnosticPayload): Envelope built by `to_client_payload`.
        indent (int | None): Pretty-print indentation; compact when ``None``.

    Returns:
        str: The JSON document.
    """
    return json.dumps(normalize_payload(payload), indent=indent)
