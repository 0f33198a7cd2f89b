"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseModel):
    """Logfire export and instrumentation."""

    # OBSERVABILITY__LOGFIRE_TOKEN; without it output stays on the console
    logfire_token: str | None = None

    # None means: export exactly when a token is set
    send_to_logfire: bool | None = None

    # Attach Logfire's FastAPI instrumentation to the app
    instrument_fastapi: bool = True


class HTTPSettings(BaseModel):
    """HTTP transport configuration."""

    # Header carrying the per-request correlation ID
    request_id_header: str = "X-Request-ID"

    # Methods written to the access log
    logged_methods: list[str] = ["GET", "PUT", "POST", "PATCH", "DELETE"]


class MetricsSettings(BaseModel):
    """Prometheus metrics configuration."""

    enabled: bool = True
    path: str = "/metrics"
    duration_buckets: list[float] = [0.003, 0.03, 0.1, 0.3, 1.5, 10]

    # Extra labels attached to every HTTP metric
    static_labels: dict[str, str] = Field(default_factory=dict)

    # Label requests by route template (/cats/{cat_id}) instead of raw path
    use_route_path: bool = True


class ShutdownSettings(BaseModel):
    """Liveness/readiness and graceful shutdown configuration."""

    liveness_endpoint: str = "/live"
    readiness_endpoint: str = "/ready"

    # When False the app stays unready until ServerState.set_ready() is called
    server_is_ready_on_start: bool = True


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested groups use ``__``:

        ENVIRONMENT=production
        PORT=8080
        METRICS__ENABLED=false
        HTTP__REQUEST_ID_HEADER=X-Correlation-ID
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False
    version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 3000

    observability: ObservabilitySettings = ObservabilitySettings()
    http: HTTPSettings = HTTPSettings()
    metrics: MetricsSettings = MetricsSettings()
    shutdown: ShutdownSettings = ShutdownSettings()

    @computed_field
    @property
    def base_url(self) -> str:
        """Base URL this server listens on."""
        return f"http://{self.host}:{self.port}"
