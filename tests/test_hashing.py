"""tests/test_hashing.py — Unit tests for djb2 and key normalisation."""

import pytest
from chaintable.hashing import DJB2_SEED, as_key, djb2


class TestDjb2:
    def test_empty_key_is_seed(self):
        assert djb2(b"") == DJB2_SEED == 5381

    def test_single_byte(self):
        assert djb2(b"a") == 5381 * 33 + ord("a")

    def test_two_bytes(self):
        assert djb2(b"ab") == (5381 * 33 + ord("a")) * 33 + ord("b")

    def test_deterministic(self):
        assert djb2(b"foo") == djb2(b"foo")

    def test_fits_in_64_bits(self):
        h = djb2(b"x" * 1000)
        assert 0 <= h < 2 ** 64

    def test_different_keys_usually_differ(self):
        assert djb2(b"foo") != djb2(b"bar")

    def test_embedded_nul_is_hashed(self):
        assert djb2(b"a\x00b") != djb2(b"a")


class TestAsKey:
    def test_bytes_passthrough(self):
        key = b"foo"
        assert as_key(key) is key

    def test_str_is_utf8_encoded(self):
        assert as_key("café") == "café".encode("utf-8")

    def test_bytearray_is_copied(self):
        buf = bytearray(b"foo")
        key = as_key(buf)
        buf[0] = ord("x")
        assert key == b"foo"
        assert isinstance(key, bytes)

    def test_memoryview(self):
        assert as_key(memoryview(b"bar")) == b"bar"

    def test_empty_string(self):
        assert as_key("") == b""

    @pytest.mark.parametrize("bad", [1, 1.5, None, ("a",)])
    def test_rejects_non_keys(self, bad):
        with pytest.raises(TypeError):
            as_key(bad)
