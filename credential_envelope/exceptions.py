"""Credential envelope exception types."""

from __future__ import annotations


class CredentialEnvelopeError(Exception):
    """Base credential envelope error."""


class CryptographicError(CredentialEnvelopeError):
    """Ciphertext could not be verified or decrypted.

    Raised only for inputs that already passed structural validation.
    Callers must not treat it as an absent credential.
    """


class InvalidHmacError(CryptographicError):
    """Authentication tag did not match the ciphertext."""


class InvalidCipherTextError(CryptographicError):
    """Ciphertext envelope is malformed.

    Parameters
    ----------
    message : str
        Error message.
    length : int | None, default=None
        Length of the offending envelope if known.
    """

    def __init__(self, message: str, length: int | None = None) -> None:
        self.length = length
        super().__init__(message)


class InvalidKeyError(CredentialEnvelopeError, ValueError):
    """Key material has an unsupported length."""


class MissingFieldError(CredentialEnvelopeError, KeyError):
    """Serialized credential map lacks a required field.

    Parameters
    ----------
    field : str
        Name of the missing field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Serialized credential is missing {self.field!r}"


class ConfigurationError(CredentialEnvelopeError):
    """Settings do not provide what the caller asked for."""
