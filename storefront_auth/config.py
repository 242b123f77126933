import os
from dataclasses import dataclass
from typing import List, Optional

from storefront_auth.errors import ConfigError
from storefront_auth.util.time import parse_duration_seconds

# Optional: load a local .env file if present.
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


DEFAULT_JWT_EXPIRES_IN = "2h"


def _env_str(name: str) -> Optional[str]:
    """Return a stripped env var, or None when unset/blank."""
    raw = os.environ.get(name)
    if raw is None:
        return None
    v = raw.strip()
    return v or None


@dataclass(frozen=True)
class Config:
    """Runtime configuration.

    Built once at startup by `load_config()` and handed to the app factory.
    Secrets come from environment variables or a .env file, never from source.
    """

    # -----------------
    # Auth (JWT)
    # -----------------
    JWT_SECRET: Optional[str] = None
    JWT_EXPIRES_SECONDS: int = parse_duration_seconds(DEFAULT_JWT_EXPIRES_IN)

    # Reserved for partner integrations; required so deployments stay uniform.
    API_KEY: Optional[str] = None

    # -----------------
    # Database
    # -----------------
    # Postgres when the DSN is a postgres:// URL, otherwise a SQLite file path.
    DB_DSN: str = "./storefront.sqlite"

    # -----------------
    # CORS (development)
    # -----------------
    CORS_ALLOW_ORIGINS: str = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"


def load_config() -> Config:
    """Read configuration from the environment.

    Does not validate; call `validate_config` before serving.
    """
    expires_in = _env_str("JWT_EXPIRES_IN") or DEFAULT_JWT_EXPIRES_IN
    try:
        expires_seconds = parse_duration_seconds(expires_in)
    except ValueError as e:
        raise ConfigError(f"JWT_EXPIRES_IN is not a valid duration: {expires_in!r}") from e

    return Config(
        JWT_SECRET=_env_str("JWT_SECRET"),
        JWT_EXPIRES_SECONDS=expires_seconds,
        API_KEY=_env_str("API_KEY"),
        DB_DSN=(
            _env_str("STOREFRONT_DATABASE_URL")
            or _env_str("DATABASE_URL")
            or _env_str("STOREFRONT_DB_PATH")
            or Config.DB_DSN
        ),
        CORS_ALLOW_ORIGINS=os.environ.get("CORS_ALLOW_ORIGINS", Config.CORS_ALLOW_ORIGINS),
    )


def missing_required(cfg: Config) -> List[str]:
    missing: List[str] = []
    if not cfg.JWT_SECRET:
        missing.append("JWT_SECRET")
    if not cfg.API_KEY:
        missing.append("API_KEY")
    return missing


def validate_config(cfg: Config) -> Config:
    """Fail fast when required values are absent."""
    missing = missing_required(cfg)
    if missing:
        raise ConfigError(f"Missing ENV Variables ({', '.join(missing)}). Check .env file!")
    if cfg.JWT_EXPIRES_SECONDS <= 0:
        raise ConfigError("JWT_EXPIRES_IN must be a positive duration")
    return cfg
