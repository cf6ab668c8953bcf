"""
Property Descriptor Constants

Named, typed aliases for option keys. Each descriptor carries the key the
option is stored under, the type its value decodes to, and the default
used when the option is absent.
"""

from collections import namedtuple
from types import MappingProxyType

from .enums import CommentOrder, PostPermalinkType


PropertyDescriptor = namedtuple('PropertyDescriptor', ['key', 'value_type', 'default'])


# Page size fallbacks used when the stored value is absent or malformed
DEFAULT_POST_PAGE_SIZE = 10
DEFAULT_COMMENT_PAGE_SIZE = 10
DEFAULT_RSS_PAGE_SIZE = 20

DEFAULT_LOCALE = 'en_US'


# Blog
BLOG_TITLE = PropertyDescriptor('blog_title', str, None)
BLOG_URL = PropertyDescriptor('blog_url', str, None)
BLOG_LOCALE = PropertyDescriptor('blog_locale', str, None)
BLOG_LOGO = PropertyDescriptor('blog_logo', str, None)
IS_INSTALLED = PropertyDescriptor('is_installed', bool, False)

# Posts
INDEX_PAGE_SIZE = PropertyDescriptor('post_index_page_size', int, DEFAULT_POST_PAGE_SIZE)
RSS_PAGE_SIZE = PropertyDescriptor('rss_page_size', int, DEFAULT_RSS_PAGE_SIZE)
SUMMARY_LENGTH = PropertyDescriptor('post_summary_length', int, 150)
PERMALINK_TYPE = PropertyDescriptor('post_permalink_type', PostPermalinkType, PostPermalinkType.DEFAULT)

# Comments
COMMENT_PAGE_SIZE = PropertyDescriptor('comment_page_size', int, DEFAULT_COMMENT_PAGE_SIZE)
COMMENT_NEW_NEED_CHECK = PropertyDescriptor('comment_new_need_check', bool, True)
COMMENT_ORDER = PropertyDescriptor('comment_order', CommentOrder, CommentOrder.NEWEST)

# Qiniu attachment storage
QINIU_ZONE = PropertyDescriptor('oss_qiniu_zone', str, 'auto')
QINIU_DOMAIN = PropertyDescriptor('oss_qiniu_domain', str, None)
QINIU_BUCKET = PropertyDescriptor('oss_qiniu_bucket', str, None)


# Read-only lookup of every descriptor by name
PROPERTIES = MappingProxyType({
    'BLOG_TITLE': BLOG_TITLE,
    'BLOG_URL': BLOG_URL,
    'BLOG_LOCALE': BLOG_LOCALE,
    'BLOG_LOGO': BLOG_LOGO,
    'IS_INSTALLED': IS_INSTALLED,
    'INDEX_PAGE_SIZE': INDEX_PAGE_SIZE,
    'RSS_PAGE_SIZE': RSS_PAGE_SIZE,
    'SUMMARY_LENGTH': SUMMARY_LENGTH,
    'PERMALINK_TYPE': PERMALINK_TYPE,
    'COMMENT_PAGE_SIZE': COMMENT_PAGE_SIZE,
    'COMMENT_NEW_NEED_CHECK': COMMENT_NEW_NEED_CHECK,
    'COMMENT_ORDER': COMMENT_ORDER,
    'QINIU_ZONE': QINIU_ZONE,
    'QINIU_DOMAIN': QINIU_DOMAIN,
    'QINIU_BUCKET': QINIU_BUCKET,
})

# Reverse lookup by stored key
PROPERTIES_BY_KEY = MappingProxyType({prop.key: prop for prop in PROPERTIES.values()})


def get_property(name):
    """Look up a descriptor by constant name or stored key. Returns None if unknown."""
    if not name:
        return None
    return PROPERTIES.get(name.upper()) or PROPERTIES_BY_KEY.get(name)
