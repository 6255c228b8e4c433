"""Tests for request building and response reading"""
from types import SimpleNamespace

from identity_ocr.api_utils import build_messages, extract_text_from_choice
from identity_ocr.prompts import NAME_PROMPT, SYSTEM_PROMPT


def _choice(content):
    return SimpleNamespace(message=SimpleNamespace(content=content))


def test_build_messages_structure():
    """System message followed by a text + image user message"""
    messages = build_messages(NAME_PROMPT, "https://cdn.example.com/card.jpg")

    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1]["role"] == "user"
    text_part, image_part = messages[1]["content"]
    assert text_part == {"type": "text", "text": NAME_PROMPT}
    assert image_part == {"type": "image_url", "image_url": {"url": "https://cdn.example.com/card.jpg"}}


def test_extract_text_from_string_content():
    assert extract_text_from_choice(_choice('{"name": "王小明"}')) == '{"name": "王小明"}'


def test_extract_text_from_content_blocks():
    """Text blocks are joined; other block types are skipped"""
    content = [
        {"type": "text", "text": '{"name":'},
        {"type": "image_url", "image_url": {"url": "x"}},
        SimpleNamespace(type="text", text='"王小明"}'),
    ]

    assert extract_text_from_choice(_choice(content)) == '{"name":\n"王小明"}'


def test_extract_text_from_missing_content():
    """None content reads as an empty string"""
    assert extract_text_from_choice(_choice(None)) == ""
    assert extract_text_from_choice(SimpleNamespace()) == ""
