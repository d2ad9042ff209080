from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    remote_provider: str = "http"
    remote_endpoint_url: str = "https://bajaj-backend-abhishek.vercel.app/bfhl"
    remote_timeout_seconds: float | None = None

    max_upload_bytes: int = MAX_UPLOAD_BYTES

    session_secret_key: str = "change-me-in-production"
    session_cookie_name: str = "bfhl_form_session"
