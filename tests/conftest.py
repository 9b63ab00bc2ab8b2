"""Pytest fixtures."""

from collections.abc import Iterator

import pytest

from credential_envelope import Credential, CredentialSerializer
from credential_envelope.config import get_settings

MASTER_KEY_SEED = "foo"


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset cached settings and drop any configured seed.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Environment monkeypatch helper.

    Yields
    ------
    None
        Applies environment overrides for each test.
    """
    get_settings.cache_clear()
    monkeypatch.delenv("CREDENTIAL_ENVELOPE_MASTER_KEY_SEED", raising=False)
    yield
    get_settings.cache_clear()


@pytest.fixture()
def serializer() -> CredentialSerializer:
    """Create a serializer with the shared test seed.

    Returns
    -------
    CredentialSerializer
        Serializer bound to ``MASTER_KEY_SEED``.
    """
    return CredentialSerializer(MASTER_KEY_SEED)


@pytest.fixture()
def credential() -> Credential:
    """Create the shared test credential.

    Returns
    -------
    Credential
        Username/password style credential.
    """
    return Credential(identifier="username-value", secret="password-value")
