"""
Core module for audioscrobbler.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise, validate_identity, check_dependencies

__all__ = [
    'ServiceConfig',
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'validate_identity',
    'check_dependencies',
    'AudioscrobblerError',
    'ConfigurationError',
    'ConstructionError',
    'FetchError',
    'DecodeError',
    'MappingError',
    'UnsupportedRelationship',
]
