"""
Enumeration Constants

Option sources, the value-enum mixin used for settings stored by an
associated primitive value, and the Qiniu storage zones.
"""

from enum import Enum


class OptionSource(str, Enum):
    """Where an option was defined."""
    SYSTEM = 'SYSTEM'
    USER = 'USER'
    THEME = 'THEME'


class ValueEnum(Enum):
    """
    Enum whose members are stored by their value rather than their name.

    Subclasses declare members with primitive values (int, str, ...) and are
    looked up from a stored setting with value_to_enum().
    """

    @classmethod
    def value_to_enum(cls, value):
        """Return the member carrying `value`, or raise ValueError."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown {cls.__name__} value: {value!r}")


class PostPermalinkType(ValueEnum):
    """How post URLs are built, stored as an integer."""
    DEFAULT = 0
    DATE = 1
    DAY = 2
    ID = 3


class CommentOrder(str, Enum):
    """Comment listing order, stored by name."""
    NEWEST = 'NEWEST'
    OLDEST = 'OLDEST'


class QiniuZone(Enum):
    """
    Qiniu object storage regions.

    The value is the region id used by the Qiniu upload endpoints;
    AUTO lets the client detect the region itself.
    """
    ZONE0 = 'z0'
    ZONE1 = 'z1'
    ZONE2 = 'z2'
    NA0 = 'na0'
    AS0 = 'as0'
    AUTO = 'auto'
