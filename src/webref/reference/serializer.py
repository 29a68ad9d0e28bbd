"""Wire keys for web references and lookup of keyed payloads.

A serialized reference is a JSON object with a single well-known key whose
value is the reference's UUID, e.g.::

    {"element-6066-11e4-a52e-4f735466cecf": "2f4b..."}
"""

from collections.abc import Mapping
from typing import Any

ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"
WINDOW_KEY = "window-fcc6-11e5-b4f8-330a88ab9d7f"
FRAME_KEY = "frame-075b-4da1-b6ba-e579c2d3230a"

# Order in which keys are tried when decoding
IDENTIFIER_PRIORITY: tuple[str, ...] = (ELEMENT_KEY, WINDOW_KEY, FRAME_KEY)


def find_identifier(
    payload: Any,
    keys: tuple[str, ...] = IDENTIFIER_PRIORITY,
) -> tuple[str, Any] | None:
    """Find the first of ``keys`` present in ``payload``.

    Returns:
        Tuple of (key, value), or ``None`` if ``payload`` is not a mapping or
        carries none of the keys.
    """
    if not isinstance(payload, Mapping):
        return None
    for key in keys:
        if key in payload:
            return key, payload[key]
    return None


def is_reference(v: Any) -> bool:
    """Whether ``v`` looks like a serialized web reference."""
    return find_identifier(v) is not None
