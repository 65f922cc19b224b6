"""
Configuration management for bookgraph
"""

from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "secret"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Tokens
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "bookgraph"
    jwt_audience: str = "bookgraph-api"
    token_expiry_seconds: int | None = None  # None issues non-expiring, deterministic tokens
    token_header: str = "Token"

    # Field masking
    redaction_marker: str = "****"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 9000
    api_reload: bool = False
    graphiql: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    class Config:
        env_file = ".env"
        env_prefix = "BOOKGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
