"""Configuration loaded from environment (.env) and defaults."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Locate the project root .env file regardless of CWD
_THIS_DIR = Path(__file__).resolve().parent          # trackfit/
_PROJECT_ROOT = _THIS_DIR.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data directory (material store lives under <data_dir>/materials)
    trackfit_data_dir: str = "./data"

    # Where CLI-generated reports go (defaults to <data_dir>/output)
    trackfit_output_dir: str | None = None

    # Static assets (header logos)
    trackfit_assets_dir: str = "./static"

    # Header logos, left / centre / right. File names are resolved against the
    # assets dir; http(s) URLs are fetched.
    trackfit_logos: str = "g20.png,railway.png,tourism.png"

    # Seconds allowed for each logo fetch before it is skipped
    trackfit_logo_timeout: float = 5.0

    # CORS origins (comma-separated). Defaults to localhost dev.
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Server port
    port: int = 8000

    @property
    def data_dir(self) -> Path:
        """Data directory as Path; relative paths resolve against the project root."""
        return _resolve(self.trackfit_data_dir)

    @property
    def output_dir(self) -> Path:
        if self.trackfit_output_dir:
            return Path(self.trackfit_output_dir).resolve()
        return self.data_dir / "output"

    @property
    def materials_dir(self) -> Path:
        return self.data_dir / "materials"

    @property
    def assets_dir(self) -> Path:
        return _resolve(self.trackfit_assets_dir)

    @property
    def logo_sources(self) -> list[str]:
        """Parse comma-separated logo sources into a list."""
        return [s.strip() for s in self.trackfit_logos.split(",") if s.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def ensure_dirs(self) -> None:
        """Ensure all data directories exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.materials_dir.mkdir(parents=True, exist_ok=True)


def _resolve(raw: str) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        return (_PROJECT_ROOT / p).resolve()
    return p.resolve()


def get_settings() -> Settings:
    settings = Settings()
    settings.ensure_dirs()
    return settings
