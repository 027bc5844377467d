"""Tests for comment-tolerant JSON decoding."""

import msgspec
import pytest

from pagesmith.errors import JsoncError
from pagesmith.page.jsonc import decode_object, strip_comments


def test_line_comments_removed():
    text = '{\n  // greeting\n  "a": "b" // trailing\n}'
    assert strip_comments(text) == '{\n  \n  "a": "b" \n}'


def test_block_comments_removed():
    assert strip_comments('{/* x\n y */"a": /**/"b"}') == '{"a": "b"}'


def test_comment_markers_inside_strings_are_kept():
    text = '{"url": "http://example.com/*x*/"}'
    assert strip_comments(text) == text


def test_escaped_quote_does_not_end_string():
    text = '{"a": "say \\"//hi\\""}'
    assert strip_comments(text) == text


def test_escaped_backslash_before_closing_quote():
    assert strip_comments('{"a": "x\\\\"}// c') == '{"a": "x\\\\"}'


def test_unclosed_block_comment():
    with pytest.raises(JsoncError):
        strip_comments('{"a": "b" /* never closed }')


def test_lone_slash_is_kept():
    assert strip_comments("{}/") == "{}/"


def test_decode_object():
    text = '{\n  // title\n  "title": "Hi", /* sub */ "sub": "//x"\n}'
    assert decode_object(text) == {"title": "Hi", "sub": "//x"}


def test_decode_rejects_non_string_values():
    with pytest.raises(msgspec.ValidationError):
        decode_object('{"n": 1}')


def test_decode_rejects_malformed_json():
    with pytest.raises(msgspec.DecodeError):
        decode_object('{"a": }')
