from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Minimal B2B Auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- HTTP server (scripts/run_api.py) ---
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000

    # --- Ranking guard ---
    # proposals per order are expected in the low tens; refuse absurd payloads
    RANKING_MAX_PROPOSALS: int = 200


settings = Settings()
