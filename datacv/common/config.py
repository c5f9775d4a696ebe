"""
Configuration loader for the DataCV document service.

Loads all settings from environment variables (.env file).
Validates required settings and provides type-safe access.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Centralized configuration for the core document components.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== MongoDB =====
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "datacv")

    # ===== Collections =====
    TEMPLATES_COLLECTION: str = "document_templates"
    SAMPLE_CONTENT_COLLECTION: str = "sample_content"
    RESUMES_COLLECTION: str = "resumes"
    CVS_COLLECTION: str = "cvs"
    COVER_LETTERS_COLLECTION: str = "cover_letters"

    # ===== Sample Content Matching =====
    # Generic matches considered per section during initialization/preview
    SAMPLE_MATCH_LIMIT: int = int(os.getenv("SAMPLE_MATCH_LIMIT", "5"))
    # Generic samples echoed back per section by preview
    PREVIEW_SAMPLE_LIMIT: int = int(os.getenv("PREVIEW_SAMPLE_LIMIT", "2"))

    # ===== Logging =====
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required configuration is present.
        Raises ValueError if critical settings are missing.
        """
        required_settings = {
            "MONGODB_URI": cls.MONGODB_URI,
            "MONGO_DB_NAME": cls.MONGO_DB_NAME,
        }

        missing = [name for name, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required configuration: {', '.join(missing)}. "
                f"Please check your .env file."
            )

        if not cls.MONGODB_URI.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGODB_URI must use the mongodb:// or mongodb+srv:// scheme")

        if cls.SAMPLE_MATCH_LIMIT < 1:
            raise ValueError("SAMPLE_MATCH_LIMIT must be at least 1")

        if cls.PREVIEW_SAMPLE_LIMIT < 0:
            raise ValueError("PREVIEW_SAMPLE_LIMIT must not be negative")

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  MongoDB: {'✓ Configured' if cls.MONGODB_URI else '✗ Missing'}
  Database: {cls.MONGO_DB_NAME}
  Sample match limit: {cls.SAMPLE_MATCH_LIMIT}
  Preview sample limit: {cls.PREVIEW_SAMPLE_LIMIT}
  Log level: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
  Debug mode: {'On' if cls.DEBUG_MODE else 'Off'}
        """.strip()
