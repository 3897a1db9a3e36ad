"""Tests for opaque pagination cursors."""

from datetime import datetime
from uuid import uuid4

import pytest

from src.pantheon.schemas.pagination import PaginatedResponse, decode_cursor, encode_cursor

pytestmark = pytest.mark.unit


def test_datetime_cursor_decodes_to_datetime():
    value = datetime(2024, 6, 1, 12, 30, 5, 123456)

    assert decode_cursor(encode_cursor(value)) == value


def test_uuid_cursor_decodes_to_uuid():
    value = uuid4()

    assert decode_cursor(encode_cursor(value)) == value


def test_other_text_stays_text():
    assert decode_cursor(encode_cursor("Summer 2024")) == "Summer 2024"


def test_garbage_cursor_rejected():
    with pytest.raises(ValueError):
        decode_cursor("not base64!!")


def test_paginated_response_defaults():
    page = PaginatedResponse[int](items=[1, 2])

    assert page.next_cursor is None
    assert page.has_more is False
