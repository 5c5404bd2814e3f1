"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///menu_studio.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload settings
    UPLOAD_FOLDER = os.path.join(BASE_DIR, 'static', 'uploads')
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload
    ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

    # Restaurant used when the session carries none (auth lives elsewhere)
    DEFAULT_RESTAURANT_ID = int(os.environ.get('DEFAULT_RESTAURANT_ID', '1'))

    # Display
    CURRENCY_SYMBOL = os.environ.get('CURRENCY_SYMBOL', '$')

    # Sales tax charged on POS order subtotals
    POS_TAX_RATE = os.environ.get('POS_TAX_RATE', '0.16')

    # External model endpoint for menu photo extraction; unset = sample data
    AI_EXTRACTION_URL = os.environ.get('AI_EXTRACTION_URL', '')
    AI_API_KEY = os.environ.get('AI_API_KEY', '')
    AI_TIMEOUT = int(os.environ.get('AI_TIMEOUT', '30'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


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
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AI_EXTRACTION_URL = ''
    AI_API_KEY = ''


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
