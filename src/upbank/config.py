import os
import logging
from typing import Any, Dict, Optional

import structlog
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class ConfigManager:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if not cls._instance:
            cls._instance = super().__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        cls._config = {
            'api': {
                'url': os.getenv('UP_API_URL', 'https://api.up.com.au/api/v1'),
                'timeout': int(os.getenv('UP_API_TIMEOUT', 30)),
                'max_retries': int(os.getenv('UP_API_MAX_RETRIES', 3)),
                'retry_delay': float(os.getenv('UP_API_RETRY_DELAY', 1)),
                'ping_timeout': int(os.getenv('UP_PING_TIMEOUT', 5))
            },
            'reports': {
                'page_size': int(os.getenv('UP_PAGE_SIZE', 100))
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL', 'INFO'),
                'format': os.getenv('LOG_FORMAT', 'console')
            }
        }

    @classmethod
    def reload(cls):
        """Re-read the environment, e.g. after it was changed in tests"""
        cls._load_config()

    @classmethod
    def get(cls, key: str, default: Optional[Any] = None) -> Any:
        """
        Retrieve a configuration value by dotted key, e.g. ``api.timeout``
        """
        value: Any = cls._config
        for k in key.split('.'):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]

        return default if value is None else value

    @classmethod
    def setup_logging(cls, debug: bool = False):
        """
        Configure stdlib logging and structlog.

        Args:
            debug: Force DEBUG level regardless of LOG_LEVEL
        """
        log_level = 'DEBUG' if debug else cls.get('logging.level', 'INFO')

        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            force=True
        )

        if cls.get('logging.format') == 'json':
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.processors.KeyValueRenderer(key_order=['event'])

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                renderer
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
