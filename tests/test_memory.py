import pytest

from minishell.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert set(buf[:5]) == {ord("x")}
    assert buf[5:] == b" world"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert set(buf) == {0x41}


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert not any(buf[:4])
    assert buf[4:] == b"ef"


def test_calloc_is_zero_filled():
    buf = calloc(7, 3)
    assert len(buf) == 7 * 3
    assert not any(buf)


@pytest.mark.parametrize("count, size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_zero_sized(count, size):
    assert calloc(count, size) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    src = b"minishell"
    result = memcpy(dst, src, 4)
    assert result is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == b"......"


def test_memcpy_out_of_range():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"abc", 4)
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abcdef", 4)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    assert memmove(buf, 1, 1, 4) == original


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(b"abcd"), 2, 0, 3)


def test_memchr_finds_first():
    data = b"ls -l | grep $> out"
    index = memchr(data, ord("$"), len(data))
    assert data[index] == ord("$")
    assert ord("$") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"abc", ord("c"), 2) is None


def test_memchr_uses_low_byte():
    data = b"\x01x"
    index = memchr(data, 0x101, 2)
    assert data[index] == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abX", b"abY", 2) == 0
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign_and_antisymmetry():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_out_of_range():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)