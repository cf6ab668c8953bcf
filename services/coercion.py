"""
Type Coercion Service

Decoders that turn a stored option string into a typed value. Every
decoder raises TypeCoercionError on malformed input; none of them
substitute defaults.
"""

from enum import Enum

from constants.enums import ValueEnum
from .errors import TypeCoercionError


TRUE_VALUES = {'true', '1', 'yes', 'on'}
FALSE_VALUES = {'false', '0', 'no', 'off'}


def to_str(value):
    return value


def to_int(value):
    """Parse an integer, e.g. '10' or ' -3 '."""
    try:
        return int(value.strip())
    except (ValueError, TypeError, AttributeError) as e:
        raise TypeCoercionError(value, int, str(e)) from e


def to_float(value):
    """Parse a float, rejecting nan and inf."""
    try:
        result = float(value.strip())
    except (ValueError, TypeError, AttributeError) as e:
        raise TypeCoercionError(value, float, str(e)) from e
    if result != result or result in (float('inf'), float('-inf')):
        raise TypeCoercionError(value, float, "not a finite number")
    return result


def to_bool(value):
    """Parse 'true'/'false' and the usual on/off spellings, case-insensitively."""
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise TypeCoercionError(value, bool)


def to_enum(value, enum_type):
    """Look up an enum member by name (case-insensitive)."""
    name = str(value).strip().upper()
    try:
        return enum_type[name]
    except KeyError as e:
        raise TypeCoercionError(value, enum_type) from e


def to_value_enum(value, enum_type, value_type=None):
    """
    Look up a ValueEnum member by its carried value.

    The stored string is first decoded to `value_type` (inferred from the
    first member's value when not given), then matched against member values.
    """
    if value_type is None:
        value_type = type(next(iter(enum_type)).value)
    raw = decode(value, value_type)
    try:
        return enum_type.value_to_enum(raw)
    except ValueError as e:
        raise TypeCoercionError(value, enum_type, str(e)) from e


# Primitive decoders keyed by target type
DECODERS = {
    str: to_str,
    int: to_int,
    float: to_float,
    bool: to_bool,
}


def decode(value, target):
    """
    Decode `value` into `target`.

    `target` may be a primitive type (str, int, float, bool), an Enum or
    ValueEnum subclass, or any callable taking the raw string.
    """
    if target in DECODERS:
        return DECODERS[target](value)
    if isinstance(target, type) and issubclass(target, ValueEnum):
        return to_value_enum(value, target)
    if isinstance(target, type) and issubclass(target, Enum):
        return to_enum(value, target)
    if callable(target):
        try:
            return target(value)
        except TypeCoercionError:
            raise
        except (ValueError, TypeError) as e:
            raise TypeCoercionError(value, target, str(e)) from e
    raise TypeCoercionError(value, target, "unsupported target type")


def encode(value):
    """
    Encode a typed value into its stored string form.

    The inverse of decode(): booleans become 'true'/'false', ValueEnum
    members their carried value, other enums their name.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, ValueEnum):
        return str(value.value)
    if isinstance(value, Enum):
        return value.name
    return str(value)
