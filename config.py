"""
Application Configuration

Centralizes all Flask and engine configuration settings.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Engine limits
    MAX_INGREDIENT_LINES = int(os.environ.get('MAX_INGREDIENT_LINES', '200'))

    # Calendar export
    ICS_PRODID = os.environ.get('ICS_PRODID', '-//MicroBatch//EN')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    MAX_INGREDIENT_LINES = 20


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
