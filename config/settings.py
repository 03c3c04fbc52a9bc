"""
Application settings loaded from environment variables.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings

_INSECURE_JWT_SECRET = "shh"


class Settings(BaseSettings):
    environment: str = "development"    # development | testing | production

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = _INSECURE_JWT_SECRET   # HMAC secret for auth tokens
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 3600           # 1 hour
    bcrypt_rounds: int = 8                   # password hashing cost factor

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./data/auth.db3"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 9000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @model_validator(mode="after")
    def require_secret_in_production(self) -> "Settings":
        """Refuse to start a production process on the development secret."""
        if self.is_production and (
            not self.jwt_secret or self.jwt_secret == _INSECURE_JWT_SECRET
        ):
            raise ValueError("JWT_SECRET must be set when ENVIRONMENT=production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


config = Settings()
