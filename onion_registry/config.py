# onion_registry/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DuplicatePolicy = Literal["allow", "reject", "upsert"]


class Settings(BaseSettings):
    # Core
    app_name: str = "Onion Node Registry"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Registry behaviour
    duplicate_policy: DuplicatePolicy = "allow"   # "allow" keeps every registration, duplicates included
    expose_private_keys: bool = True              # mounts GET /getPrivateKey/{nodeId}

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
