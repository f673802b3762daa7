from decimal import Decimal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    SPLIT_TOLERANCE: Decimal = Decimal("0.01")
    NOISE_THRESHOLD: Decimal = Decimal("0.01")
    SETTLED_TOLERANCE: Decimal = Decimal("0.05")
    MAX_GROUP_PARTICIPANTS: int = 4
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        env_prefix = "SPLITLEDGER_"
        extra = "ignore"

settings = Settings()
