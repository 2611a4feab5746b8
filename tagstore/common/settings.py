# tagstore/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "tagstore"
    user: str = "tagstore"
    password: str = "tagstore"
    schema_name: Optional[str] = None
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: float = 30.0  # seconds a worker blocks waiting for a free connection
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = None

    @field_validator("echo", "pool_pre_ping", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class PaginationConfig(BaseModel):
    default_limit: int = Field(10, ge=1)
    max_limit: int = Field(100, ge=1)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "tagstore"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Flat overrides owned by the process environment --------
    database_url_override: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL"),
    )
    pool_size_override: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("DB_POOL_SIZE"),
    )

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    pagination: PaginationConfig = PaginationConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL, pool & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_pool_size(self) -> int:
        return self.pool_size_override or self.db.pool_size

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from tagstore.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
