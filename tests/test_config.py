import logging

from task_api.config import get_settings, Settings
from task_api.logger import setup_logging


def test_get_settings():
    """Test that settings can be loaded"""
    settings = get_settings()
    assert settings is not None
    assert isinstance(settings, Settings)


def test_settings_default_values():
    """Test default values in settings"""
    settings = get_settings()
    assert settings.app_name == "Task Organizer API"
    assert settings.version == "1.0.0"
    assert settings.debug is False
    assert settings.https_redirect is False


def test_settings_read_environment():
    """conftest points the service at in-memory SQLite"""
    settings = get_settings()
    assert settings.database_url == "sqlite://"
    assert settings.is_sqlite
    assert settings.is_development


def test_settings_production_hides_docs():
    settings = Settings(environment="Production", database_url="mysql+pymysql://u:p@db/organizer")
    assert settings.is_development is False
    assert settings.is_sqlite is False


def test_settings_singleton():
    """Test that get_settings returns the same instance (cached)"""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2


def test_setup_logging_uses_settings_level():
    settings = Settings(log_level="debug", database_url="sqlite://")
    service_logger = setup_logging(settings)
    assert service_logger.name == "task_api"
    assert service_logger.level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    # Unknown level names fall back to INFO
    assert setup_logging(Settings(log_level="chatty", database_url="sqlite://")).level == logging.INFO
