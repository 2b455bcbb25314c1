from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    catalog_base_url: str = "https://pokeapi.co/api/v2"
    list_limit: int = 151
    list_offset: int = 0
    request_timeout: float = 10.0
    log_level: str = "INFO"
    explorer_idle_timeout: float = 1800.0
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    model_config = SettingsConfigDict(env_prefix="EXPLORER_", env_file=".env", extra="ignore")


settings = Settings()
