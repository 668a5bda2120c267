# session_registry/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import logging
from pathlib import Path

# Configure logging for settings module
logger = logging.getLogger(__name__)
if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - [%(levelname)s] - %(message)s'
    )

# This settings.py file is at <project>/session_registry/settings.py
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"

if DOTENV_PATH.exists():
    logger.debug(f"SETTINGS: .env file found at: {DOTENV_PATH}")
else:
    logger.debug(
        f"SETTINGS: .env file not found at: {DOTENV_PATH}. "
        "Will rely on OS env vars or defaults."
    )


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "Session Registry"
    debug_mode: bool = False

    # Logging level for the session store; forced to DEBUG in debug mode
    session_store_log_level: str = "INFO"

    store_thread_safe: bool = Field(
        default=False,
        description="Guard every store operation with a single coarse lock."
    )
    session_date_format: str = Field(
        default="%Y-%m-%d",
        description="strftime format used when a session is opened without an explicit date."
    )

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding='utf-8'
    )


# Initialize settings instance
settings = Settings()

logger.debug(
    f"SETTINGS: debug_mode={settings.debug_mode}, "
    f"session_store_log_level='{settings.session_store_log_level}', "
    f"store_thread_safe={settings.store_thread_safe}"
)
