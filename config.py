"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

import constants


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Portion counts a fresh form starts with
    DEFAULT_ORIGINAL_PORTIONS = constants.DEFAULT_ORIGINAL_PORTIONS
    DEFAULT_DESIRED_PORTIONS = constants.DEFAULT_DESIRED_PORTIONS

    # Shown instead of a scaled amount that cannot be computed
    PLACEHOLDER = '—'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'testing'


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
