"""
Result store configuration settings.

Selects the status/result persistence backend and the lifetimes applied to
stored records.

Dependencies: pydantic_settings
System role: Result store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResultStoreSettings(BaseSettings):
    """Settings for job status and result persistence."""

    model_config = SettingsConfigDict(
        env_prefix="RESULT_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="redis",
        description="Store backend: 'redis' (shared) or 'memory' (single process)",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/1",
        description="Redis connection URL for job records",
    )
    socket_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Redis socket timeout in seconds",
    )
    socket_connect_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Redis connect timeout in seconds",
    )
    result_ttl_seconds: int = Field(
        default=86_400,
        gt=0,
        description="Lifetime of result records (default 24 hours)",
    )
    status_ttl_seconds: int | None = Field(
        default=None,
        gt=0,
        description="Optional retention for status records (None = no expiry)",
    )
    key_prefix: str = Field(
        default="",
        description="Namespace prepended to status:/result: keys",
    )
