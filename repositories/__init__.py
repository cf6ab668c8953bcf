"""
Repositories Package

Persistence access for the application's models.
"""

from .option_repository import OptionRepository

__all__ = [
    'OptionRepository',
]
