"""Configuration management for the Meal Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Storage: "memory" keeps everything in process, "json" persists one file per entity
STORAGE_BACKEND: Final[str] = os.getenv('STORAGE_BACKEND', 'memory').lower()
SEED_DEFAULT_DATA: Final[bool] = os.getenv('SEED_DEFAULT_DATA', 'True').lower() == 'true'

# Pantry Alerts Configuration
EXPIRING_WINDOW_DAYS: Final[int] = int(os.getenv('EXPIRING_WINDOW_DAYS', '7'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
