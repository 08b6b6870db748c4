from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Cache provider: "redis" in deployments, "memory" for local dev and tests
    CACHE_PROVIDER: str = "redis"
    BROKER_CACHE_NAME: str = "broker"

    # Redis (defaults match docker-compose.yml for local dev)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 5.0

    # Companion Portfolio service, used by the seed-from-portfolio endpoint
    PORTFOLIO_URL: str = "http://portfolio-service:9080/portfolio"
    PORTFOLIO_TIMEOUT: float = 10.0

    # App
    APP_NAME: str = "Broker Query"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
