"""Envelope cipher primitives."""

from credential_envelope.crypto.envelope import (
    EnvelopeCipher,
    derive_key_material,
    generate_surrogate_key,
)

__all__ = ["EnvelopeCipher", "derive_key_material", "generate_surrogate_key"]
