from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    app_name: str = "Restaurant Orders API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""
    cors_origins: List[str] = ["*"]
    seed_file: Optional[str] = None

    class Config:
        env_file = ".env"
        env_prefix = "RESTAURANT_"

settings = Settings()
