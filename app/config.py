import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Draft applied when a schema carries no $schema keyword
    DEFAULT_DRAFT: str = os.getenv("DEFAULT_DRAFT", "draft7")
    CHECK_FORMATS: bool = os.getenv("CHECK_FORMATS", "false").lower() in ("1", "true", "yes")
    MAX_BATCH_SIZE: int = int(os.getenv("MAX_BATCH_SIZE", "1000"))


settings = Settings()
