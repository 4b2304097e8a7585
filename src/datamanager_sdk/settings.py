"""Client settings via Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DataManagerSettings(BaseSettings):
    """Data Manager connection settings."""

    model_config = SettingsConfigDict(env_prefix="DATAMANAGER_")

    platform_url: str = "https://localhost:9443"
    server_name: str = "mds1"
    user_id: str | None = None
    password: str | None = None
    timeout: float = 30.0
    max_page_size: int = 1000
    verify_tls: bool = True
