"""
User interface modules for audioscrobbler.
"""

from .cli import AudioscrobblerCLI
from .display import DisplayManager

__all__ = [
    'AudioscrobblerCLI',
    'DisplayManager'
]
