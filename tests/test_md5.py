import hashlib
import random

import pytest

from par2kit.md5 import MD5Context, MD5Hash


EMPTY_DIGEST = bytes([
    0xd4, 0x1d, 0x8c, 0xd9, 0x8f, 0x00, 0xb2, 0x04,
    0xe9, 0x80, 0x09, 0x98, 0xec, 0xf8, 0x42, 0x7e,
])


def test_update_zeros_matches_update_with_zero_buffer():
    c1 = MD5Context()
    c1.update(bytes(8))
    c2 = MD5Context()
    c2.update_zeros(8)
    assert c1.final() == c2.final()


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 200])
def test_update_zeros_various_lengths(length):
    c1 = MD5Context()
    c1.update(b"abc")
    c1.update(bytes(length))
    c2 = MD5Context()
    c2.update(b"abc")
    c2.update_zeros(length)
    assert c1.final() == c2.final()


def test_empty_string_hash():
    assert MD5Context().final().digest == EMPTY_DIGEST


def test_empty_string_hex():
    assert MD5Context().final().hex() == "7E42F8EC980980E904B2008FD98C1DD4"
    assert str(MD5Context().final()) == "7E42F8EC980980E904B2008FD98C1DD4"


def test_comparison_operators():
    hash1 = MD5Context().final()
    hash2 = MD5Hash(hash1.digest)
    assert hash1 == hash2
    assert not (hash1 != hash2)
    assert not (hash1 < hash2)
    assert not (hash1 > hash2)
    assert hash1 <= hash2
    assert hash1 >= hash2

    d1 = bytearray(hash1.digest)
    d2 = bytearray(hash1.digest)
    d1[0] = 0x0
    d2[0] = 0x1
    h1, h2 = MD5Hash(bytes(d1)), MD5Hash(bytes(d2))
    assert not (h1 == h2)
    assert h1 != h2
    assert h1 < h2
    assert not (h1 > h2)
    assert h1 <= h2
    assert not (h1 >= h2)

    d1[0] = 0x0
    d2[0] = 0x0
    d1[15] = 0x0
    d2[15] = 0x1
    h1, h2 = MD5Hash(bytes(d1)), MD5Hash(bytes(d2))
    assert not (h1 == h2)
    assert h1 != h2
    assert h1 < h2
    assert not (h1 > h2)
    assert h1 <= h2
    assert not (h1 >= h2)


def test_last_byte_dominates_ordering():
    low = MD5Hash(bytes([0xFF] * 15 + [0x00]))
    high = MD5Hash(bytes([0x00] * 15 + [0x01]))
    assert low < high


def test_random_chunking_gives_same_hash():
    rng = random.Random(345087209)
    buffer = bytes(rng.randrange(256) for _ in range(32 * 1024))

    def hash_in_chunks():
        context = MD5Context()
        offset = 0
        while offset < len(buffer):
            length = min(rng.randrange(256), len(buffer) - offset)
            context.update(buffer[offset:offset + length])
            offset += length
        return context.final()

    hash1 = hash_in_chunks()
    hash2 = hash_in_chunks()
    assert hash1 == hash2
    assert hash1.digest == hashlib.md5(buffer).digest()


@pytest.mark.parametrize("data", [b"a", b"abc", b"message digest", b"x" * 1000])
def test_agrees_with_standard_md5(data):
    context = MD5Context()
    context.update(data)
    assert context.final().digest == hashlib.md5(data).digest()


def test_fresh_context_str():
    assert str(MD5Context()) == "1032547698BADCFEEFCDAB8967452301:0000000000000000"


def test_bytes_processed_and_reset():
    context = MD5Context()
    context.update(b"hello")
    context.update_zeros(10)
    assert context.bytes_processed == 15
    context.reset()
    assert context.bytes_processed == 0
    assert context.final().digest == EMPTY_DIGEST


def test_hash_after_final_matches_final():
    context = MD5Context()
    context.update(b"some data")
    result = context.final()
    assert context.hash() == result


def test_invalid_hash_length():
    with pytest.raises(ValueError):
        MD5Hash(b"short")


def test_negative_zero_length_rejected():
    with pytest.raises(ValueError):
        MD5Context().update_zeros(-1)