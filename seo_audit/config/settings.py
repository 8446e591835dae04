from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Audit configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    target_directory: Path = Path(".")
    file_extensions: list[str] = ["html", "php"]

    keyword: str = "seo"
    file_size_limit_kb: float = 100.0

    report_path: Path = Path("seo_report.html")
