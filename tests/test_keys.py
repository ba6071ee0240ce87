"""
Tests for APP_KEY generation and substitution.
Run: pytest tests/test_keys.py -v
"""
import base64

import pytest

from env_detector.keys import extract_key, generate_random_key, key_length, replace_key
from env_detector.report import UnsupportedCipherError


class TestGenerate:

    def test_aes_256_key(self):
        key = generate_random_key("AES-256-CBC")
        assert key.startswith("base64:")
        assert len(key) == len("base64:") + 44
        assert len(base64.b64decode(key[len("base64:"):])) == 32

    def test_aes_128_key(self):
        key = generate_random_key("aes-128-cbc")
        assert len(base64.b64decode(key[len("base64:"):])) == 16

    def test_keys_differ(self):
        assert generate_random_key() != generate_random_key()

    def test_unknown_cipher(self):
        with pytest.raises(UnsupportedCipherError):
            key_length("DES")


class TestExtractReplace:

    def test_extract_first_key(self):
        text = "APP_NAME=x\nAPP_KEY=base64:abc=\nAPP_KEY=second\n"
        assert extract_key(text) == "base64:abc="

    def test_extract_missing(self):
        assert extract_key("APP_NAME=x\n") is None

    def test_line_must_start_with_key(self):
        assert extract_key("OLD_APP_KEY=nope\n") is None

    def test_replace_first_line_only(self):
        template = "APP_KEY=\nAPP_KEY=keep\n"
        assert replace_key("base64:new", template) == "APP_KEY=base64:new\nAPP_KEY=keep\n"

    def test_replace_is_literal(self):
        out = replace_key(r"base64:a\1b\g<0>", "APP_KEY=old\n")
        assert out == "APP_KEY=base64:a\\1b\\g<0>\n"

    def test_template_without_key_unchanged(self):
        assert replace_key("base64:x", "APP_NAME=x\n") == "APP_NAME=x\n"
