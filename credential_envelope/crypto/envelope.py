"""Envelope encryption helpers."""

from __future__ import annotations

import hashlib
import hmac
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from credential_envelope.exceptions import (
    InvalidCipherTextError,
    InvalidHmacError,
    InvalidKeyError,
)

IV_LENGTH = 16
HMAC_LENGTH = 32
KEY_LENGTH = 32
SURROGATE_SEED_LENGTH = 32


def derive_key_material(seed: bytes | str) -> bytes:
    """Digest a seed into fixed-length key material.

    Parameters
    ----------
    seed : bytes | str
        Master key seed or random surrogate seed. Strings are UTF-8 encoded.

    Returns
    -------
    bytes
        Hex digest of the seed as 32 ASCII bytes.
    """
    if isinstance(seed, str):
        seed = seed.encode("utf-8")
    return hashlib.md5(seed).hexdigest().encode("ascii")


def generate_surrogate_key() -> bytes:
    """Generate a fresh per-serialization surrogate key.

    Returns
    -------
    bytes
        Key material derived from 32 random bytes.
    """
    return derive_key_material(os.urandom(SURROGATE_SEED_LENGTH))


class EnvelopeCipher:
    """AES-256-CTR encryption with an HMAC-SHA256 tag.

    Envelopes are laid out as ``iv || tag || ciphertext``. The tag covers
    the ciphertext only and is verified before anything is decrypted.
    The class holds no state.
    """

    @staticmethod
    def encrypt(plaintext: bytes, key: bytes) -> bytes:
        """Encrypt a byte string.

        Parameters
        ----------
        plaintext : bytes
            Value to encrypt.
        key : bytes
            32-byte key material.

        Returns
        -------
        bytes
            Envelope blob.
        """
        _check_key(key)
        iv = os.urandom(IV_LENGTH)
        encryptor = _cipher(key, iv).encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return iv + _tag(ciphertext, key) + ciphertext

    @staticmethod
    def decrypt(envelope: bytes, key: bytes) -> bytes:
        """Verify and decrypt an envelope blob.

        Parameters
        ----------
        envelope : bytes
            Blob produced by :meth:`encrypt`.
        key : bytes
            32-byte key material.

        Returns
        -------
        bytes
            Decrypted plaintext.

        Raises
        ------
        InvalidCipherTextError
            If the envelope cannot hold an IV and a tag.
        InvalidHmacError
            If the tag does not match the ciphertext under ``key``.
        """
        _check_key(key)
        if len(envelope) < IV_LENGTH + HMAC_LENGTH:
            raise InvalidCipherTextError(
                "Ciphertext is shorter than the IV and HMAC prefix",
                length=len(envelope),
            )
        iv = envelope[:IV_LENGTH]
        tag = envelope[IV_LENGTH : IV_LENGTH + HMAC_LENGTH]
        ciphertext = envelope[IV_LENGTH + HMAC_LENGTH :]

        if not hmac.compare_digest(tag, _tag(ciphertext, key)):
            raise InvalidHmacError("Ciphertext HMAC does not match")

        decryptor = _cipher(key, iv).decryptor()
        return decryptor.update(ciphertext) + decryptor.finalize()


def _cipher(key: bytes, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CTR(iv))


def _tag(ciphertext: bytes, key: bytes) -> bytes:
    return hmac.new(key, ciphertext, hashlib.sha256).digest()


def _check_key(key: bytes) -> None:
    if len(key) != KEY_LENGTH:
        raise InvalidKeyError(f"Key material must be {KEY_LENGTH} bytes")
