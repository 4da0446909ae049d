from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000,http://localhost:3001"
SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name) or default
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _flag(name: str, default: str = "false") -> bool:
    return (_env(name, default) or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    google_client_id: str
    google_verify_timeout_seconds: float
    jwt_secret: str
    jwt_algorithm: str
    jwt_ttl_days: int
    allowed_origins: tuple[str, ...]
    force_https: bool
    log_level: str

    def missing_auth_settings(self) -> list[str]:
        missing = []
        if not self.google_client_id:
            missing.append("GOOGLE_CLIENT_ID")
        if not self.jwt_secret:
            missing.append("JWT_SECRET_KEY")
        return missing


def get_settings() -> Settings:
    jwt_algorithm = (_env("JWT_ALGORITHM", "HS256") or "HS256").upper()
    if jwt_algorithm not in SUPPORTED_JWT_ALGORITHMS:
        raise ValueError(
            f"JWT_ALGORITHM must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}, got {jwt_algorithm}."
        )
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        google_client_id=(_env("GOOGLE_CLIENT_ID", "") or "").strip(),
        google_verify_timeout_seconds=float(_env("GOOGLE_VERIFY_TIMEOUT_SECONDS", "10")),
        jwt_secret=_env("JWT_SECRET_KEY", "") or "",
        jwt_algorithm=jwt_algorithm,
        jwt_ttl_days=int(_env("JWT_TTL_DAYS", "730")),
        allowed_origins=_csv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS),
        force_https=_flag("FORCE_HTTPS"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
