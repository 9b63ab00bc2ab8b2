"""Credential record types and serialized field names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

IDENTIFIER_KEY = "identifier-ciphertext"
SECRET_KEY = "secret-ciphertext"
WRAPPED_KEY_KEY = "wrapped-key-ciphertext"
REQUIRED_KEYS = (IDENTIFIER_KEY, SECRET_KEY, WRAPPED_KEY_KEY)

SerializedCredential = dict[str, bytes]


class CredentialRecord(Protocol):
    """Anything exposing an identifier and a secret."""

    @property
    def identifier(self) -> str: ...

    @property
    def secret(self) -> str: ...


RecordT_co = TypeVar("RecordT_co", bound=CredentialRecord, covariant=True)


class RecordFactory(Protocol[RecordT_co]):
    """Callable building a record from recovered fields."""

    def __call__(self, *, identifier: str, secret: str) -> RecordT_co: ...


@dataclass(frozen=True, slots=True)
class Credential:
    """User credential pair.

    Attributes
    ----------
    identifier : str
        User identifier, typically a username.
    secret : str
        User secret, typically a password.
    """

    identifier: str
    secret: str

    def __repr__(self) -> str:
        return f"Credential(identifier={self.identifier!r}, secret='***')"


def read_fields(record: CredentialRecord) -> tuple[str, str]:
    """Read both fields from a credential record.

    Parameters
    ----------
    record : CredentialRecord
        Record to read.

    Returns
    -------
    tuple[str, str]
        The ``(identifier, secret)`` pair.
    """
    identifier = record.identifier
    secret = record.secret
    if not isinstance(identifier, str) or not isinstance(secret, str):
        raise TypeError("Credential identifier and secret must be strings")
    return identifier, secret
