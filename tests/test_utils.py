"""Tests for input sanitization, SSRF checks and image processing."""

import os
from io import BytesIO

import pytest
from PIL import Image

from utils import (
    sanitize_text, sanitize_url, sanitize_name, sanitize_hex_color,
    is_safe_url, safe_fetch, SSRFError, save_upload, ImageValidationError,
)


def test_sanitize_text_keeps_plain_text():
    # Escaping is left to the templates, so stored text stays raw.
    assert sanitize_text('Fish & Chips <b>') == 'Fish & Chips <b>'
    assert sanitize_text(' line one\nline\x00 two ') == 'line one\nline two'
    assert sanitize_text(None) == ''
    assert sanitize_text('abcdef', max_length=3) == 'abc'


def test_sanitize_name_does_not_escape():
    assert sanitize_name("Chef's  Fish & Chips") == "Chef's Fish & Chips"
    assert sanitize_name('Tab\tSeparated\x07Name') == 'Tab Separated Name'


def test_sanitize_url():
    assert sanitize_url('https://example.com/taco.jpg') == 'https://example.com/taco.jpg'
    assert sanitize_url('/static/uploads/a.jpg') == '/static/uploads/a.jpg'
    assert sanitize_url('javascript:alert(1)') == ''
    assert sanitize_url('//evil.example.com/x') == ''
    assert sanitize_url(None) == ''


def test_sanitize_name():
    assert sanitize_name('  Tacos \n al   Pastor ') == 'Tacos al Pastor'
    assert sanitize_name('') == 'Unnamed Item'
    assert sanitize_name('x' * 10, max_length=8) == 'xxxxx...'


def test_sanitize_hex_color():
    assert sanitize_hex_color('#f59e0b') == '#F59E0B'
    assert sanitize_hex_color('red') is None
    assert sanitize_hex_color('#FFF', default='#000000') == '#000000'


@pytest.mark.parametrize('url', [
    'http://localhost/admin',
    'http://127.0.0.1/',
    'http://10.0.0.5/image.png',
    'http://169.254.169.254/latest/meta-data',
    'ftp://example.com/file',
    'file:///etc/passwd',
    '',
])
def test_unsafe_urls_rejected(url):
    is_safe, error = is_safe_url(url)
    assert not is_safe
    assert error


def test_safe_fetch_refuses_private_address():
    with pytest.raises(SSRFError):
        safe_fetch('http://192.168.1.1/menu.jpg')


def make_image(fmt='PNG', size=(64, 48), mode='RGBA'):
    buffer = BytesIO()
    Image.new(mode, size, (200, 30, 30, 255) if mode == 'RGBA' else (200, 30, 30)).save(buffer, fmt)
    return buffer.getvalue()


def test_save_upload_reencodes_photo_as_jpeg(tmp_path):
    filename = save_upload(make_image(), str(tmp_path), 'menu-item', 7)
    assert filename.startswith('menu-item-7-')
    assert filename.endswith('.jpg')
    with Image.open(os.path.join(tmp_path, filename)) as img:
        assert img.format == 'JPEG'
        assert img.mode == 'RGB'


def test_save_upload_shrinks_logo(tmp_path):
    filename = save_upload(make_image(size=(2000, 1000)), str(tmp_path), 'logo', 1)
    assert filename.endswith('.png')
    with Image.open(os.path.join(tmp_path, filename)) as img:
        assert max(img.size) == 512


def test_save_upload_rejects_non_image(tmp_path):
    with pytest.raises(ImageValidationError):
        save_upload(b'definitely not an image', str(tmp_path), 'menu-item', 1)


def test_save_upload_rejects_unknown_kind(tmp_path):
    with pytest.raises(ValueError):
        save_upload(make_image(), str(tmp_path), 'banner', 1)
