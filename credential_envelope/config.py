"""Runtime configuration."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Credential envelope settings.

    Attributes
    ----------
    master_key_seed : SecretStr | None
        Seed the master key material is derived from. Instances built
        from the same seed can read each other's output.
    """

    model_config = SettingsConfigDict(env_prefix="CREDENTIAL_ENVELOPE_", extra="ignore")

    master_key_seed: SecretStr | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings.

    Returns
    -------
    Settings
        Cached settings instance.
    """
    return Settings()
