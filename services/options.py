"""
Option Service

Reads and writes blog options by key or property descriptor, with typed
decoding on read. Storage errors propagate untouched; only the page size
accessors and the zone/locale resolvers fall back to defaults.
"""

import logging

from babel import Locale, UnknownLocaleError
from flask import current_app, has_app_context

from constants import properties
from constants.enums import OptionSource, QiniuZone
from models import Option
from repositories import OptionRepository
from .coercion import decode, encode, to_enum, to_value_enum
from .errors import InvalidArgumentError, MissingPropertyError, TypeCoercionError
from .schemas import OptionOutput, OptionParam

logger = logging.getLogger(__name__)


# Stored zone tokens; anything else resolves to QiniuZone.AUTO
QINIU_ZONES = {
    'z0': QiniuZone.ZONE0,
    'z1': QiniuZone.ZONE1,
    'z2': QiniuZone.ZONE2,
    'na0': QiniuZone.NA0,
    'as0': QiniuZone.AS0,
}


def _is_blank(value):
    return value is None or not str(value).strip()


def process_default_locale():
    """
    Return the fallback locale.

    BLOG_DEFAULT_LOCALE from the app config wins; otherwise the process
    locale, or en_US when the environment names none.
    """
    configured = current_app.config.get('BLOG_DEFAULT_LOCALE') if has_app_context() else None
    if configured:
        try:
            return parse_locale(configured)
        except (ValueError, TypeError, UnknownLocaleError):
            logger.warning("Invalid BLOG_DEFAULT_LOCALE %r, using process locale", configured)

    try:
        return Locale.default()
    except (ValueError, TypeError, UnknownLocaleError):
        return Locale.parse(properties.DEFAULT_LOCALE)


def parse_locale(tag):
    """
    Parse a BCP 47 ('en-US') or POSIX ('en_US.UTF-8') locale tag.

    The POSIX encoding suffix and BCP 47 extension or private-use subtags
    ('en-US-x-foo', 'de-DE-u-co-phonebk') are dropped before parsing.
    """
    tag = tag.strip().split('.', 1)[0]
    if '-' not in tag:
        return Locale.parse(tag, sep='_')

    subtags = []
    for subtag in tag.split('-'):
        # A single-character subtag starts an extension or private-use section
        if len(subtag) == 1:
            break
        subtags.append(subtag)
    return Locale.parse('-'.join(subtags), sep='-')


class OptionService:
    """
    Key-value option store.

    Keys are plain strings or PropertyDescriptor constants from
    constants.properties. Values are stored as text and decoded on read.
    """

    def __init__(self, repository=None):
        self.repository = repository or OptionRepository()

    # ============================================
    # WRITES
    # ============================================

    def save(self, key, value, source=OptionSource.USER):
        """
        Save one option.

        A blank value removes the key instead. An existing option keeps
        its original source; only the value is overwritten.
        """
        if _is_blank(key):
            raise InvalidArgumentError("Option key must not be blank")

        if _is_blank(value):
            removed = self.repository.delete_by_key(key)
            if removed:
                logger.debug("Removed option %s", key)
            return

        value = encode(value)
        option = self.repository.find_by_key(key)
        if option is not None:
            option.option_value = value
        else:
            option = Option(option_key=key, option_value=value, source=source)
            logger.debug("Creating option %s (source=%s)", key, source.value if source else None)

        self.repository.save(option)

    def save_many(self, options, source=OptionSource.USER):
        """Save a key -> value mapping, one option at a time."""
        if not options:
            return

        for key, value in options.items():
            self.save(key, value, source)

    def save_params(self, params, source=OptionSource.USER):
        """Save a list of OptionParam (or equivalent dicts)."""
        if not params:
            return

        for param in params:
            param = OptionParam.model_validate(param)
            self.save(param.option_key, param.option_value, source)

    def save_property(self, prop, value, source):
        """Save an option under a property descriptor's key."""
        if prop is None:
            raise InvalidArgumentError("Property must not be null")
        if source is None:
            raise InvalidArgumentError("Option source must not be null")

        self.save(prop.key, value, source)

    def save_properties(self, props, source):
        """Save a descriptor -> value mapping."""
        if not props:
            return

        for prop, value in props.items():
            self.save_property(prop, value, source)

    # ============================================
    # LISTING
    # ============================================

    def list_options(self):
        """Return all options as a key -> value dict."""
        return {option.option_key: option.option_value for option in self.repository.list_all()}

    def list_outputs(self):
        """Return all options as OptionOutput projections."""
        return [OptionOutput.model_validate(option) for option in self.repository.list_all()]

    # ============================================
    # RAW READS
    # ============================================

    def get_by_key(self, key):
        """Return the stored value for `key`, or None."""
        if _is_blank(key):
            raise InvalidArgumentError("Option key must not be blank")

        option = self.repository.find_by_key(key)
        return option.option_value if option is not None else None

    def get_by_key_required(self, key):
        """Return the stored value for `key`; raise MissingPropertyError if absent."""
        value = self.get_by_key(key)
        if value is None:
            raise MissingPropertyError(key)
        return value

    def get_by_property(self, prop):
        if prop is None:
            raise InvalidArgumentError("Property must not be null")
        return self.get_by_key(prop.key)

    def get_by_property_required(self, prop):
        if prop is None:
            raise InvalidArgumentError("Property must not be null")
        return self.get_by_key_required(prop.key)

    # ============================================
    # TYPED READS
    # ============================================

    def get_by_key_as(self, key, target):
        """
        Return the value for `key` decoded to `target`, or None if absent.

        Raises TypeCoercionError when the stored string does not decode.
        """
        value = self.get_by_key(key)
        if value is None:
            return None
        return decode(value, target)

    def get_by_key_or_default(self, key, target, default):
        """Like get_by_key_as(), returning `default` only when the key is absent."""
        result = self.get_by_key_as(key, target)
        return default if result is None else result

    def get_by_property_as(self, prop, target=None):
        """Decode a descriptor's value to `target` (the descriptor's value_type by default)."""
        if prop is None:
            raise InvalidArgumentError("Property must not be null")
        return self.get_by_key_as(prop.key, target or prop.value_type)

    def get_by_property_or_default(self, prop, target=None, default=None):
        """
        Decode a descriptor's value, falling back when it is absent.

        `default` falls back to the descriptor's own default.
        """
        if prop is None:
            raise InvalidArgumentError("Property must not be null")
        if default is None:
            default = prop.default
        result = self.get_by_property_as(prop, target)
        return default if result is None else result

    def get_enum_by_property(self, prop, enum_type):
        """Decode a descriptor's value to an Enum member by name."""
        value = self.get_by_property(prop)
        if value is None:
            return None
        return to_enum(value, enum_type)

    def get_enum_by_property_or_default(self, prop, enum_type, default):
        result = self.get_enum_by_property(prop, enum_type)
        return default if result is None else result

    def get_value_enum_by_property(self, prop, value_type, enum_type):
        """Decode a descriptor's value to a ValueEnum member via its carried value."""
        value = self.get_by_property(prop)
        if value is None:
            return None
        return to_value_enum(value, enum_type, value_type)

    def get_value_enum_by_property_or_default(self, prop, value_type, enum_type, default):
        result = self.get_value_enum_by_property(prop, value_type, enum_type)
        return default if result is None else result

    # ============================================
    # DERIVED SETTINGS
    # ============================================

    def _get_page_size(self, prop, fallback):
        try:
            return self.get_by_property_or_default(prop, int, fallback)
        except TypeCoercionError:
            logger.error("%s option is not a number format", prop.key, exc_info=True)
            return fallback

    def get_post_page_size(self, fallback=properties.DEFAULT_POST_PAGE_SIZE):
        """Posts per index page; never raises for a malformed setting."""
        return self._get_page_size(properties.INDEX_PAGE_SIZE, fallback)

    def get_comment_page_size(self, fallback=properties.DEFAULT_COMMENT_PAGE_SIZE):
        """Comments per page; never raises for a malformed setting."""
        return self._get_page_size(properties.COMMENT_PAGE_SIZE, fallback)

    def get_rss_page_size(self, fallback=properties.DEFAULT_RSS_PAGE_SIZE):
        """Items per RSS feed; never raises for a malformed setting."""
        return self._get_page_size(properties.RSS_PAGE_SIZE, fallback)

    def get_qiniu_zone(self):
        """Resolve the configured Qiniu zone; unknown or absent means AUTO."""
        value = self.get_by_property(properties.QINIU_ZONE)
        return QINIU_ZONES.get(value, QiniuZone.AUTO)

    def get_locale(self):
        """Resolve the blog locale, falling back to the process default."""
        value = self.get_by_property(properties.BLOG_LOCALE)
        if _is_blank(value):
            return process_default_locale()

        try:
            return parse_locale(value)
        except (ValueError, TypeError, UnknownLocaleError):
            logger.warning("Invalid %s option %r, using default locale",
                           properties.BLOG_LOCALE.key, value, exc_info=True)
            return process_default_locale()
