"""
Configuration settings for the Social Media Backend
"""

import os
import logging

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD, QA or DEV
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database configuration
MEMORY_DATABASE_URL = "memory://"
# Only DEV falls back to the in-memory store; other environments must configure a database
DATABASE_URL = os.getenv("DATABASE_URL") or (MEMORY_DATABASE_URL if ENV == "DEV" else None)
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# Validation limits
PASSWORD_MIN_LENGTH = 4
MESSAGE_TEXT_MAX_LENGTH = 255

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

logger.info(f"Environment: {ENV}")

if not DATABASE_URL:
    logger.warning("DATABASE_URL not set - the server will refuse to start outside ENV=DEV")
elif DATABASE_URL == MEMORY_DATABASE_URL:
    logger.warning("Using the in-memory store, data will not persist")


def is_memory_database(url: str) -> bool:
    """Check whether a database URL selects the in-memory store"""
    return url.startswith(MEMORY_DATABASE_URL)
