"""Tamper-evident envelopes for user credentials."""

from credential_envelope.config import Settings, get_settings
from credential_envelope.crypto import EnvelopeCipher
from credential_envelope.encoding import decode_wire_string, encode_wire_string
from credential_envelope.exceptions import (
    ConfigurationError,
    CredentialEnvelopeError,
    CryptographicError,
    InvalidCipherTextError,
    InvalidHmacError,
    InvalidKeyError,
    MissingFieldError,
)
from credential_envelope.serializer import CredentialSerializer
from credential_envelope.types import (
    IDENTIFIER_KEY,
    REQUIRED_KEYS,
    SECRET_KEY,
    WRAPPED_KEY_KEY,
    Credential,
    CredentialRecord,
    RecordFactory,
    SerializedCredential,
)

__all__ = [
    "ConfigurationError",
    "Credential",
    "CredentialEnvelopeError",
    "CredentialRecord",
    "CredentialSerializer",
    "CryptographicError",
    "EnvelopeCipher",
    "IDENTIFIER_KEY",
    "InvalidCipherTextError",
    "InvalidHmacError",
    "InvalidKeyError",
    "MissingFieldError",
    "REQUIRED_KEYS",
    "RecordFactory",
    "SECRET_KEY",
    "SerializedCredential",
    "Settings",
    "WRAPPED_KEY_KEY",
    "decode_wire_string",
    "encode_wire_string",
    "get_settings",
]
