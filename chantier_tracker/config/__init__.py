"""
Configuration module for the chantier tracker.
"""
from .logging_config import LoggingConfig, configure_logging
from .settings import (
    ChantierTrackerConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'ChantierTrackerConfig',
    'LoggingConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config'
]
