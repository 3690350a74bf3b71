import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "BMS ISBN")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "False")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # ISBN validation
    # When false, a trailing 'X' check character is dropped along with every
    # other non-digit, so ISBN-10s ending in 'X' are rejected as wrong length.
    isbn_keep_check_x: bool = _env_flag("ISBN_KEEP_CHECK_X", "True")


settings = Settings()
