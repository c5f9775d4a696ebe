"""
Repository Configuration and Factory

Provides factory functions that return the repository implementations
based on the shared Config.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import Config
from .base import MongoRepositoryBase
from .document_repository import DocumentRepositoryInterface
from .sample_content_repository import SampleContentRepositoryInterface
from .template_repository import TemplateRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Built from the process-wide Config so the connection settings
    live in one place.
    """
    mongodb_uri: str
    database: str = "datacv"

    @classmethod
    def from_config(cls) -> "RepositoryConfig":
        """
        Load connection settings from Config.

        Raises:
            ValueError: If MONGODB_URI is not set
        """
        if not Config.MONGODB_URI:
            raise ValueError("MONGODB_URI is required")

        return cls(
            mongodb_uri=Config.MONGODB_URI,
            database=Config.MONGO_DB_NAME or "datacv",
        )


# Singleton repository instances
_template_repository: Optional[TemplateRepositoryInterface] = None
_sample_content_repository: Optional[SampleContentRepositoryInterface] = None
_document_repository: Optional[DocumentRepositoryInterface] = None


def get_template_repository(config: Optional[RepositoryConfig] = None) -> TemplateRepositoryInterface:
    """
    Get the template repository instance (singleton).

    Args:
        config: Connection settings (defaults to RepositoryConfig.from_config())

    Raises:
        ValueError: If MongoDB URI is not configured
    """
    global _template_repository

    if _template_repository is None:
        config = config or RepositoryConfig.from_config()
        from .template_repository import MongoTemplateRepository
        _template_repository = MongoTemplateRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
        )
        logger.info("Initialized template repository")

    return _template_repository


def get_sample_content_repository(config: Optional[RepositoryConfig] = None) -> SampleContentRepositoryInterface:
    """
    Get the sample content repository instance (singleton).

    Args:
        config: Connection settings (defaults to RepositoryConfig.from_config())

    Raises:
        ValueError: If MongoDB URI is not configured
    """
    global _sample_content_repository

    if _sample_content_repository is None:
        config = config or RepositoryConfig.from_config()
        from .sample_content_repository import MongoSampleContentRepository
        _sample_content_repository = MongoSampleContentRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
        )
        logger.info("Initialized sample content repository")

    return _sample_content_repository


def get_document_repository(config: Optional[RepositoryConfig] = None) -> DocumentRepositoryInterface:
    """
    Get the document repository instance (singleton).

    Args:
        config: Connection settings (defaults to RepositoryConfig.from_config())

    Raises:
        ValueError: If MongoDB URI is not configured
    """
    global _document_repository

    if _document_repository is None:
        config = config or RepositoryConfig.from_config()
        from .document_repository import MongoDocumentRepository
        _document_repository = MongoDocumentRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
        )
        logger.info("Initialized document repository")

    return _document_repository


def reset_repositories() -> None:
    """
    Reset every repository singleton and the pooled client.

    Used for testing or when configuration changes.
    """
    global _template_repository, _sample_content_repository, _document_repository

    MongoRepositoryBase.reset_connection()
    _template_repository = None
    _sample_content_repository = None
    _document_repository = None
    logger.info("Repository singletons reset")
