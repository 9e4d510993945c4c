from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "FlooringCalc Pro"
    DATABASE_URL: str = "sqlite:///./flooring.db"
    LOG_LEVEL: str = "INFO"

    # Calculation history, opt-in per request via ?save=true
    HISTORY_ENABLED: bool = True
    HISTORY_PAGE_LIMIT: int = 100

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
