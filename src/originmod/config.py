"""Runtime settings for OriginMod config"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Where the mod config lives and how noisy we are"""

    # Fixed on-device location; override only for development/tests
    CONFIG_DIR = Path(os.getenv("ORIGINMOD_CONFIG_DIR", "/storage/emulated/0/games/originmod"))
    CONFIG_FILE = CONFIG_DIR / "config.json"

    DEBUG = os.getenv("ORIGINMOD_DEBUG", "false").lower() == "true"


settings = Settings()


def configure_logging():
    """Install a basic stderr handler for the host process."""
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
