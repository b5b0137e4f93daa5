from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./leavedesk.db"

    # Leave policy
    MAX_LEAVE_DAYS: int = 30

    # First run
    INIT_DB_ON_STARTUP: bool = True
    SEED_DEFAULT_USERS: bool = True

    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
