"""
Services Package

Business logic modules for the blog options store.
"""

from .errors import (
    OptionError,
    InvalidArgumentError,
    MissingPropertyError,
    TypeCoercionError,
)

from .coercion import (
    decode,
    encode,
    to_str,
    to_int,
    to_float,
    to_bool,
    to_enum,
    to_value_enum,
)

from .schemas import (
    OptionParam,
    OptionOutput,
)

from .options import (
    OptionService,
    parse_locale,
    process_default_locale,
)

__all__ = [
    # Errors
    'OptionError',
    'InvalidArgumentError',
    'MissingPropertyError',
    'TypeCoercionError',
    # Coercion
    'decode',
    'encode',
    'to_str',
    'to_int',
    'to_float',
    'to_bool',
    'to_enum',
    'to_value_enum',
    # Schemas
    'OptionParam',
    'OptionOutput',
    # Options
    'OptionService',
    'parse_locale',
    'process_default_locale',
]
