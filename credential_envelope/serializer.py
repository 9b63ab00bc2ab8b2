"""Credential serialization into tamper-evident envelopes."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from credential_envelope.config import Settings, get_settings
from credential_envelope.crypto.envelope import (
    KEY_LENGTH,
    EnvelopeCipher,
    derive_key_material,
    generate_surrogate_key,
)
from credential_envelope.encoding import decode_wire_string, encode_wire_string
from credential_envelope.exceptions import (
    ConfigurationError,
    CryptographicError,
    InvalidCipherTextError,
    MissingFieldError,
)
from credential_envelope.types import (
    IDENTIFIER_KEY,
    REQUIRED_KEYS,
    SECRET_KEY,
    WRAPPED_KEY_KEY,
    Credential,
    CredentialRecord,
    RecordFactory,
    SerializedCredential,
    read_fields,
)

logger = logging.getLogger(__name__)

# Characters removed from both ends of recovered plaintexts.
_TRIM_CHARACTERS = " \t\n\r\0\x0b"


class CredentialSerializer:
    """Serialize credentials under a master key.

    Every call to :meth:`serialize` draws a fresh surrogate key, encrypts
    both fields under it and wraps it under the master key. The
    surrogate key never outlives the call, so one instance may be shared
    between threads.

    Parameters
    ----------
    master_key_seed : bytes | str
        Seed the master key material is derived from.
    record_factory : RecordFactory, default=Credential
        Builds the record returned by :meth:`deserialize`.
    """

    def __init__(
        self,
        master_key_seed: bytes | str,
        *,
        record_factory: RecordFactory[CredentialRecord] = Credential,
    ) -> None:
        self._master_key = derive_key_material(master_key_seed)
        self._record_factory = record_factory
        self._cipher = EnvelopeCipher()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None
    ) -> "CredentialSerializer":
        """Build a serializer from settings.

        This is the only path that consults the environment; a serializer
        built directly from a seed never reads it.

        Expected variables
        ------------------
        CREDENTIAL_ENVELOPE_MASTER_KEY_SEED
            Required master key seed.

        Parameters
        ----------
        settings : Settings | None, default=None
            Settings to read. Defaults to the cached environment settings.

        Returns
        -------
        CredentialSerializer
            Configured serializer.
        """
        settings = settings or get_settings()
        if settings.master_key_seed is None:
            raise ConfigurationError(
                "CREDENTIAL_ENVELOPE_MASTER_KEY_SEED is required to create the serializer"
            )
        return cls(settings.master_key_seed.get_secret_value())

    def serialize(self, record: CredentialRecord) -> SerializedCredential:
        """Encrypt a credential into three ciphertext envelopes.

        Parameters
        ----------
        record : CredentialRecord
            Credential to encrypt.

        Returns
        -------
        SerializedCredential
            Raw envelopes keyed by field name.
        """
        identifier, secret = read_fields(record)
        surrogate_key = generate_surrogate_key()
        return {
            IDENTIFIER_KEY: self._cipher.encrypt(identifier.encode("utf-8"), surrogate_key),
            SECRET_KEY: self._cipher.encrypt(secret.encode("utf-8"), surrogate_key),
            WRAPPED_KEY_KEY: self._cipher.encrypt(surrogate_key, self._master_key),
        }

    def serialize_to_string(self, record: CredentialRecord) -> str:
        """Encrypt a credential into a wire string.

        Parameters
        ----------
        record : CredentialRecord
            Credential to encrypt.

        Returns
        -------
        str
            Printable wire string.
        """
        return encode_wire_string(self.serialize(record))

    def deserialize(self, serialized: Mapping[str, bytes]) -> CredentialRecord:
        """Decrypt three ciphertext envelopes back into a credential.

        Parameters
        ----------
        serialized : Mapping[str, bytes]
            Raw envelopes keyed by field name. Extra keys are ignored.

        Returns
        -------
        CredentialRecord
            Recovered credential.

        Raises
        ------
        MissingFieldError
            If a required field is absent.
        InvalidHmacError
            If any envelope fails authentication.
        InvalidCipherTextError
            If any envelope is malformed.
        """
        for key in REQUIRED_KEYS:
            if key not in serialized:
                raise MissingFieldError(key)

        surrogate_key = self._cipher.decrypt(serialized[WRAPPED_KEY_KEY], self._master_key)
        if len(surrogate_key) != KEY_LENGTH:
            raise InvalidCipherTextError(
                "Wrapped key does not hold valid key material",
                length=len(surrogate_key),
            )

        identifier = self._decrypt_field(serialized, IDENTIFIER_KEY, surrogate_key)
        secret = self._decrypt_field(serialized, SECRET_KEY, surrogate_key)
        return self._record_factory(identifier=identifier, secret=secret)

    def deserialize_from_string(self, value: str) -> CredentialRecord | None:
        """Decrypt a wire string back into a credential.

        Parameters
        ----------
        value : str
            Wire string produced by :meth:`serialize_to_string`.

        Returns
        -------
        CredentialRecord | None
            Recovered credential, or ``None`` if the string is not a
            well-formed serialized credential.

        Raises
        ------
        InvalidHmacError
            If a well-formed string fails authentication.
        InvalidCipherTextError
            If a well-formed string carries a malformed envelope.
        """
        serialized = decode_wire_string(value)
        if serialized is None:
            return None
        try:
            return self.deserialize(serialized)
        except CryptographicError as exc:
            logger.warning("Serialized credential failed verification: %s", exc)
            raise

    def _decrypt_field(
        self, serialized: Mapping[str, bytes], key: str, surrogate_key: bytes
    ) -> str:
        plaintext = self._cipher.decrypt(serialized[key], surrogate_key)
        try:
            text = plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidCipherTextError(f"{key} is not valid UTF-8") from exc
        return text.strip(_TRIM_CHARACTERS)
