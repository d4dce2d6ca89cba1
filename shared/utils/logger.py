"""
Logging utilities for Dead Poets

Provides centralized logging configuration and utilities.
"""

import os
import copy
import logging
import logging.config
from typing import Optional, Dict, Any
import yaml
from pathlib import Path

# Default logging configuration
DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'deadpoets': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        }
    }
}

SHARED_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "logging.yml"


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a dictConfig mapping

    Tries the given path, then the shared logging.yml, then the built-in default.
    """
    for path in (config_path, SHARED_CONFIG_PATH):
        if not path or not os.path.exists(path):
            continue
        try:
            with open(path, 'r') as f:
                config = yaml.safe_load(f)
            if config:
                return config
        except (OSError, yaml.YAMLError) as e:
            print(f"Failed to load logging config from {path}: {e}")

    return copy.deepcopy(DEFAULT_LOGGING_CONFIG)


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None
) -> Dict[str, Any]:
    """
    Setup logging configuration

    Args:
        config_path: Path to a YAML logging configuration file
        log_level: Override log level
        log_format: Override log format ('default', 'detailed')

    Returns:
        The configuration that was applied
    """
    config = load_logging_config(config_path)
    config.setdefault('handlers', {})
    config.setdefault('loggers', {})

    # Apply environment-specific overrides
    environment = os.getenv('ENVIRONMENT', 'development')
    env_config = config.pop(environment, None) or {}
    for key in ('production', 'development', 'testing'):
        config.pop(key, None)

    if 'handlers' in env_config:
        config['handlers'].update(env_config['handlers'])
    if 'loggers' in env_config:
        config['loggers'].update(env_config['loggers'])

    # Override log level if specified
    if log_level:
        log_level = log_level.upper()
        for logger_config in config['loggers'].values():
            logger_config['level'] = log_level
        for handler_config in config['handlers'].values():
            handler_config['level'] = log_level
        if 'root' in config:
            config['root']['level'] = log_level

    # Override log format if specified
    if log_format and log_format in config.get('formatters', {}):
        for handler_config in config['handlers'].values():
            handler_config['formatter'] = log_format

    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        print(f"Failed to configure logging: {e}")
        logging.basicConfig(
            level=getattr(logging, log_level or 'INFO', logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    return config


class RequestLogger:
    """Logger for HTTP requests"""

    def __init__(self, name: str = "deadpoets.requests"):
        self.logger = logging.getLogger(name)

    def log_request(
        self,
        method: str,
        url: str,
        status_code: int,
        response_time: float,
        ip_address: Optional[str] = None
    ):
        """Log HTTP request"""
        self.logger.info(
            f"{method} {url} {status_code} {response_time:.3f}s",
            extra={
                'request_method': method,
                'request_url': url,
                'response_status': status_code,
                'response_time': response_time,
                'ip_address': ip_address,
                'event_type': 'http_request'
            }
        )


class AuditLogger:
    """Logger for audit events"""

    def __init__(self, name: str = "deadpoets.audit"):
        self.logger = logging.getLogger(name)

    def log_user_action(
        self,
        user_id: Optional[int],
        action: str,
        resource: str,
        resource_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """Log user action for audit trail"""
        actor = user_id if user_id is not None else "anonymous"
        self.logger.info(
            f"User {actor} performed {action} on {resource} {resource_id}",
            extra={
                'user_id': user_id,
                'action': action,
                'resource': resource,
                'resource_id': resource_id,
                'details': details or {},
                'event_type': 'user_action'
            }
        )


def get_request_logger() -> RequestLogger:
    """Get request logger instance"""
    return RequestLogger()


def get_audit_logger() -> AuditLogger:
    """Get audit logger instance"""
    return AuditLogger()
