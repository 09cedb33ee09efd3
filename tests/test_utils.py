"""
Tests for the image, sanitizer and ordering helpers.
"""

import base64
from datetime import date
from io import BytesIO

import pytest
from PIL import Image

from models import db, Collection, CollectionItem
from services import next_order
from services.serializers import to_iso
from utils.errors import ImageValidationError, ValidationError
from utils.image_handler import MAX_FILE_SIZE, decode_base64_image, validate_and_process_image
from utils.params import MAX_DB_INT, parse_image_url, parse_iso_date, parse_record_id, parse_recipe_id
from utils.sanitizer import sanitize_name, sanitize_text, sanitize_url


def image_bytes(size, mode='RGB', fmt='PNG'):
    buffer = BytesIO()
    Image.new(mode, size).save(buffer, fmt)
    return buffer.getvalue()


# ============================================
# Images
# ============================================

def test_decode_accepts_data_url_and_missing_padding():
    raw = b'\x89PNG-ish'
    encoded = base64.b64encode(raw).decode('ascii').rstrip('=')
    assert decode_base64_image(encoded) == raw
    assert decode_base64_image('data:image/png;base64,' + encoded) == raw


def test_decode_rejects_empty():
    with pytest.raises(ImageValidationError):
        decode_base64_image('   ')


def test_process_converts_to_jpeg():
    image = validate_and_process_image(image_bytes((20, 10), mode='RGBA'))
    assert image.format == 'JPEG'
    assert (image.width, image.height) == (20, 10)
    assert Image.open(BytesIO(image.data)).format == 'JPEG'


def test_process_shrinks_large_images():
    image = validate_and_process_image(image_bytes((300, 150)), max_width=100, max_height=100)
    assert (image.width, image.height) == (100, 50)


def test_process_rejects_oversized_dimensions():
    with pytest.raises(ImageValidationError):
        validate_and_process_image(image_bytes((5000, 10)))


def test_process_rejects_huge_payload():
    with pytest.raises(ImageValidationError):
        validate_and_process_image(b'0' * (MAX_FILE_SIZE + 1))


def test_process_rejects_disallowed_format():
    with pytest.raises(ImageValidationError):
        validate_and_process_image(image_bytes((10, 10), fmt='BMP'))


# ============================================
# Sanitizer
# ============================================

def test_sanitize_text_keeps_newlines():
    assert sanitize_text('  line one\nline\x00 two  ') == 'line one\nline two'
    assert sanitize_text(None) is None
    assert sanitize_text('abcdef', max_length=3) == 'abc'


def test_sanitize_name_collapses_whitespace():
    assert sanitize_name('  Sunday \n\t Roast ') == 'Sunday Roast'
    assert sanitize_name(None) == ''


@pytest.mark.parametrize('url, expected', [
    ('https://img.spoonacular.com/recipes/1-312x231.jpg', 'https://img.spoonacular.com/recipes/1-312x231.jpg'),
    ('javascript:alert(1)', None),
    ('data:image/png;base64,AAAA', None),
    ('', None),
])
def test_sanitize_url(url, expected):
    assert sanitize_url(url) == expected


# ============================================
# Ordering and serialization
# ============================================

def test_next_order_per_group(app):
    with app.app_context():
        first = Collection(user_id='u', name='A')
        second = Collection(user_id='u', name='B')
        db.session.add_all([first, second])
        db.session.flush()

        assert next_order(CollectionItem.order, CollectionItem.collection_id == first.id) == 1
        db.session.add(CollectionItem(collection_id=first.id, recipe_id=1, recipe_title='x', order=4))
        db.session.flush()

        assert next_order(CollectionItem.order, CollectionItem.collection_id == first.id) == 5
        assert next_order(CollectionItem.order, CollectionItem.collection_id == second.id) == 1
        db.session.rollback()


def test_to_iso_marks_naive_datetimes_as_utc():
    from datetime import datetime

    assert to_iso(datetime(2025, 1, 6, 12, 30)) == '2025-01-06T12:30:00+00:00'
    assert to_iso(date(2025, 1, 6)) == '2025-01-06'
    assert to_iso(None) is None


# ============================================
# Parameters
# ============================================

def test_recipe_id_bounds():
    assert parse_recipe_id(' 716429 ') == 716429
    assert parse_recipe_id(MAX_DB_INT) == MAX_DB_INT
    with pytest.raises(ValidationError):
        parse_recipe_id(MAX_DB_INT + 1)
    with pytest.raises(ValidationError):
        parse_recipe_id('99999999999999999999')


def test_record_id_out_of_range_is_none():
    assert parse_record_id('12') == 12
    assert parse_record_id(10 ** 20) is None
    assert parse_record_id(0) is None
    assert parse_record_id(True) is None


@pytest.mark.parametrize('value', ['2025-01-06', '2025-01-06T00:00:00.000Z', '2025-01-06 08:30'])
def test_iso_date_accepts_dates_and_datetimes(value):
    assert parse_iso_date(value, 'required') == date(2025, 1, 6)


@pytest.mark.parametrize('value', ['2025-01-06garbage', '06/01/2025', '2025-1-6'])
def test_iso_date_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_iso_date(value, 'required')


def test_image_url_length():
    assert parse_image_url('javascript:alert(1)', 10) is None
    assert parse_image_url('https://a.io/x', 14) == 'https://a.io/x'
    with pytest.raises(ValidationError):
        parse_image_url('https://a.io/xy', 14)
