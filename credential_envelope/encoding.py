"""Wire-string encoding for serialized credentials."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections.abc import Mapping

from credential_envelope.types import REQUIRED_KEYS, SerializedCredential

logger = logging.getLogger(__name__)


def encode_wire_string(serialized: Mapping[str, bytes]) -> str:
    """Encode a serialized credential as an opaque printable string.

    Each value is base64 encoded, the map is dumped as JSON and the JSON
    is base64 encoded again.

    Parameters
    ----------
    serialized : Mapping[str, bytes]
        Raw ciphertext envelopes keyed by field name.

    Returns
    -------
    str
        Wire string.
    """
    encoded_values = {
        key: base64.b64encode(value).decode("ascii")
        for key, value in serialized.items()
    }
    document = json.dumps(encoded_values, separators=(",", ":"))
    return base64.b64encode(document.encode("utf-8")).decode("ascii")


def decode_wire_string(value: str) -> SerializedCredential | None:
    """Decode a wire string into raw ciphertext envelopes.

    Runs only structural checks; nothing is decrypted here.

    Parameters
    ----------
    value : str
        Wire string produced by :func:`encode_wire_string`.

    Returns
    -------
    SerializedCredential | None
        Raw envelopes keyed by field name, or ``None`` if the string is
        not a well-formed serialized credential.
    """
    if not isinstance(value, str):
        logger.debug("Rejected wire string: not a str")
        return None

    document = _b64decode(value)
    if document is None:
        logger.debug("Rejected wire string: outer value is not base64")
        return None
    try:
        encoded_values = json.loads(document)
    except (ValueError, RecursionError):
        logger.debug("Rejected wire string: payload is not JSON")
        return None
    if not isinstance(encoded_values, dict):
        logger.debug("Rejected wire string: payload is not an object")
        return None

    if not encoded_values:
        logger.debug("Rejected wire string: payload is empty")
        return None

    missing = [key for key in REQUIRED_KEYS if key not in encoded_values]
    if missing:
        logger.debug("Rejected wire string: missing %s", ", ".join(missing))
        return None

    serialized: SerializedCredential = {}
    for key, encoded in encoded_values.items():
        decoded = _b64decode(encoded) if isinstance(encoded, str) else None
        if not decoded:
            logger.debug("Rejected wire string: %r has no usable value", key)
            return None
        serialized[key] = decoded
    return serialized


def _b64decode(value: str) -> bytes | None:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return None
