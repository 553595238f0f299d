# app/core/config.py

import logging
import sys
import os

# Check if running in cloud environment (like Azure)
# If not, assume local development and try to load .env
if os.getenv("WEBSITE_SITE_NAME") is None:
    try:
        from dotenv import load_dotenv

        # Load environment variables from .env file in the project root
        dotenv_path = os.path.join(
            os.path.dirname(__file__), "..", "..", ".env"
        )  # Assumes .env is in project root
        load_dotenv(dotenv_path=dotenv_path, override=True)
    except Exception as e:
        print(f"Error loading .env file: {e}")


DEFAULT_DATABASE_URL = "sqlite:///./confessions.db"


class Settings:
    """Simple settings object to hold configuration values"""

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        self.IN_MEMORY_STORE = (
            os.getenv("CONFESSIONS_IN_MEMORY", "false").lower() == "true"
        )
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))
        self.API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        if self.DATABASE_URL == DEFAULT_DATABASE_URL and not self.IN_MEMORY_STORE:
            logging.warning(
                "DATABASE_URL environment variable not set, using local SQLite database."
            )


def configure_logging(level: str = "INFO"):
    """Configure application logging"""
    # Keep SQL statement logging quiet unless asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


# Create global settings instance
settings = Settings()
