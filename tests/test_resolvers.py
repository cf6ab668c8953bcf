"""
Tests for the derived settings: page sizes, Qiniu zone and locale.
"""

import logging

import pytest
from babel import Locale
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from constants import properties
from constants.enums import QiniuZone
from services import TypeCoercionError, process_default_locale


# ============================================
# PAGE SIZES
# ============================================

def test_page_sizes_default_when_absent(service):
    # Each accessor has its own default; rss absent gives 20, not the comment default of 10
    assert service.get_post_page_size() == properties.DEFAULT_POST_PAGE_SIZE
    assert service.get_comment_page_size() == properties.DEFAULT_COMMENT_PAGE_SIZE
    assert service.get_rss_page_size() == properties.DEFAULT_RSS_PAGE_SIZE


def test_page_sizes_read_stored_values(service):
    service.save_many({
        'post_index_page_size': '25',
        'comment_page_size': '5',
        'rss_page_size': '50',
    })
    assert service.get_post_page_size() == 25
    assert service.get_comment_page_size() == 5
    assert service.get_rss_page_size() == 50


def test_malformed_page_size_falls_back_and_logs(service, caplog):
    service.save('post_index_page_size', 'abc')

    with pytest.raises(TypeCoercionError):
        service.get_by_property_as(properties.INDEX_PAGE_SIZE, int)

    with caplog.at_level(logging.ERROR, logger='services.options'):
        assert service.get_post_page_size() == properties.DEFAULT_POST_PAGE_SIZE

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert 'post_index_page_size' in errors[0].getMessage()


def test_malformed_page_size_uses_explicit_fallback(service):
    service.save('rss_page_size', 'ten')
    service.save('comment_page_size', '')
    assert service.get_rss_page_size(fallback=15) == 15
    assert service.get_comment_page_size(fallback=3) == 3


# ============================================
# QINIU ZONE
# ============================================

@pytest.mark.parametrize('token,zone', [
    ('z0', QiniuZone.ZONE0),
    ('z1', QiniuZone.ZONE1),
    ('z2', QiniuZone.ZONE2),
    ('na0', QiniuZone.NA0),
    ('as0', QiniuZone.AS0),
    ('bogus', QiniuZone.AUTO),
    ('Z1', QiniuZone.AUTO),
])
def test_qiniu_zone(service, token, zone):
    service.save('oss_qiniu_zone', token)
    assert service.get_qiniu_zone() is zone


def test_qiniu_zone_absent_is_auto(service):
    assert service.get_qiniu_zone() is QiniuZone.AUTO


# ============================================
# LOCALE
# ============================================

def test_locale_parses_language_tag(service):
    service.save('blog_locale', 'en-US')
    locale = service.get_locale()
    assert locale == Locale('en', territory='US')
    assert str(locale) == 'en_US'


def test_locale_parses_posix_tag(service):
    service.save('blog_locale', 'zh_CN')
    assert str(service.get_locale()) == 'zh_CN'


def test_locale_absent_uses_process_default(service):
    assert service.get_locale() == process_default_locale()


def test_locale_unparseable_uses_process_default(service, caplog):
    service.save('blog_locale', '???')

    with caplog.at_level(logging.WARNING, logger='services.options'):
        assert service.get_locale() == process_default_locale()

    assert any('blog_locale' in r.getMessage() for r in caplog.records)


def test_locale_drops_posix_encoding(service):
    service.save('blog_locale', 'en_US.UTF-8')
    assert str(service.get_locale()) == 'en_US'


def test_locale_drops_private_use_subtags(service):
    service.save('blog_locale', 'en-US-x-foo')
    assert str(service.get_locale()) == 'en_US'

    service.save('blog_locale', 'de-DE-u-co-phonebk')
    assert str(service.get_locale()) == 'de_DE'


# ============================================
# STORAGE FAULTS
# ============================================

@pytest.fixture
def broken_store(service, monkeypatch):
    def broken(key):
        raise OperationalError('SELECT', {}, Exception('database is locked'))

    monkeypatch.setattr(service.repository, 'find_by_key', broken)
    return service


def test_page_sizes_do_not_absorb_storage_errors(broken_store):
    for accessor in (broken_store.get_post_page_size,
                     broken_store.get_comment_page_size,
                     broken_store.get_rss_page_size):
        with pytest.raises(SQLAlchemyError):
            accessor()


def test_zone_does_not_absorb_storage_errors(broken_store):
    with pytest.raises(SQLAlchemyError):
        broken_store.get_qiniu_zone()


def test_locale_does_not_absorb_storage_errors(broken_store):
    with pytest.raises(SQLAlchemyError):
        broken_store.get_locale()


def test_locale_fallback_follows_app_config(app, service):
    app.config['BLOG_DEFAULT_LOCALE'] = 'fr-FR'
    service.save('blog_locale', '???')
    assert str(service.get_locale()) == 'fr_FR'


def test_invalid_configured_locale_uses_process_locale(app, service):
    app.config['BLOG_DEFAULT_LOCALE'] = '!!'
    fallback = process_default_locale()
    app.config['BLOG_DEFAULT_LOCALE'] = None
    assert fallback == process_default_locale()
