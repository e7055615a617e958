# phraipets/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Phraipets"
    API_V1_STR: str = "/api/v1"

    MONGO_CONNECTION_URI: str = "mongodb://localhost:27017"
    MONGO_DATABASE_NAME: str = "phraipets"

    LOG_LEVEL: str = "INFO"
    ENV_TYPE: str = "dev"

    # Every client reads and writes the same record
    SHARED_PET_ID: str = "sharedPet"

    # Need points lost per 24 hours
    HUNGER_DECAY_PER_DAY: float = 100
    HAPPINESS_DECAY_PER_DAY: float = 50
    CLEANLINESS_DECAY_PER_DAY: float = 100
    AFFECTION_DECAY_PER_DAY: float = 10

    AFFECTION_DAILY_GAIN_CAP: int = 20
    DECAY_MIN_ELAPSED_MS: int = 1000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore",
                                      case_sensitive=False)  # case_sensitive=False for env vars


settings = Settings()
