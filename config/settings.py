"""
Application settings loaded from environment variables.
"""

from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


DEFAULT_JWT_SECRET = "change-me-jwt-secret-key"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "banners"
    database_url: str = ""              # full URL, overrides the parts above
    db_pool_size: int = 10              # fixed capacity, no overflow
    db_pool_timeout: float = 30         # seconds to wait for a free connection
    db_create_tables: bool = True

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET    # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600          # 1 hour
    bcrypt_rounds: int = 10

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    def sqlalchemy_url(self) -> str:
        """
        Return the async SQLAlchemy URL for the configured database.

        ``DATABASE_URL`` wins when set; Heroku-style ``postgres://`` and
        plain ``postgresql://`` schemes are rewritten to use asyncpg.
        """
        if url := self.database_url:
            if url.startswith("postgres://"):
                return url.replace("postgres://", "postgresql+asyncpg://", 1)
            if url.startswith("postgresql://"):
                return url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        password = quote_plus(self.db_password)
        return (
            f"postgresql+asyncpg://{self.db_user}:{password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


config = Settings()
