from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    API_BASE_URL: str = "https://api2.afero.net/v1/"
    API_TOKEN: str = ""
    ACCOUNT_ID: str = ""
    LOCK_TIMEOUT_MS: int = 5000
    HTTP_TIMEOUT: float = 15
    LOG_LEVEL: str = "INFO"

settings = Settings()
