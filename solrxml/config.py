"""Configuration module for the message generator"""
import os
import logging
from logging.handlers import RotatingFileHandler


class Config:
    """Base configuration class"""
    APP_NAME = 'solrxml'

    # XML backend: 'lxml' or 'markup'
    XML_BACKEND = os.environ.get('SOLRXML_BACKEND', 'lxml')

    # Logging configuration
    LOG_FILE = os.environ.get('SOLRXML_LOG_FILE')
    LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_MAX_BYTES = 10240
    LOG_BACKUP_COUNT = 10

    @classmethod
    def init_logging(cls, logger):
        """Initialize the package logger"""
        logger.setLevel(cls.LOG_LEVEL)


class DevelopmentConfig(Config):
    """Development configuration"""
    LOG_LEVEL = 'DEBUG'

    @classmethod
    def init_logging(cls, logger):
        super().init_logging(logger)
        logging.basicConfig(level=logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    XML_BACKEND = os.environ.get('SOLRXML_TEST_BACKEND', Config.XML_BACKEND)


class ProductionConfig(Config):
    """Production configuration"""

    @classmethod
    def init_logging(cls, logger):
        super().init_logging(logger)

        if cls.LOG_FILE:
            log_path = os.path.abspath(cls.LOG_FILE)
            # one handler per log file, however often the factory runs
            for handler in logger.handlers:
                if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
                    return

            log_dir = os.path.dirname(cls.LOG_FILE)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = RotatingFileHandler(
                cls.LOG_FILE,
                maxBytes=cls.LOG_MAX_BYTES,
                backupCount=cls.LOG_BACKUP_COUNT
            )
            file_handler.setFormatter(logging.Formatter(cls.LOG_FORMAT))
            file_handler.setLevel(logging.INFO)
            logger.addHandler(file_handler)


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': Config
}
