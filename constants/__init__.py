"""
Constants Package

Exports option sources, enumerations and property descriptors.
"""

from .enums import OptionSource, ValueEnum, PostPermalinkType, CommentOrder, QiniuZone
from .properties import (
    PropertyDescriptor, PROPERTIES, PROPERTIES_BY_KEY, get_property,
    DEFAULT_POST_PAGE_SIZE, DEFAULT_COMMENT_PAGE_SIZE, DEFAULT_RSS_PAGE_SIZE,
    DEFAULT_LOCALE,
)

__all__ = [
    'OptionSource',
    'ValueEnum',
    'PostPermalinkType',
    'CommentOrder',
    'QiniuZone',
    'PropertyDescriptor',
    'PROPERTIES',
    'PROPERTIES_BY_KEY',
    'get_property',
    'DEFAULT_POST_PAGE_SIZE',
    'DEFAULT_COMMENT_PAGE_SIZE',
    'DEFAULT_RSS_PAGE_SIZE',
    'DEFAULT_LOCALE',
]
