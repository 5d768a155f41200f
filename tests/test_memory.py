import pytest

from elfnm.memory import bzero, calloc, mem_chr, mem_cmp, mem_copy, mem_move, mem_set


def test_mem_set_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = mem_set(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_mem_set_truncates_value_to_byte():
    buf = bytearray(4)
    mem_set(buf, 0x1FF, 4)
    assert buf == bytearray([0xFF] * 4)


def test_mem_set_rejects_overlong_length():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf == bytearray(b"\x00\x00\x00\x00o")


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"keep")
    bzero(buf, 0)
    assert buf == bytearray(b"keep")


def test_calloc_returns_zeroed_buffer_of_product_size():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(b == 0 for b in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_mem_copy_copies_prefix():
    dst = bytearray(b"......")
    result = mem_copy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_mem_copy_rejects_short_source():
    with pytest.raises(ValueError):
        mem_copy(bytearray(8), b"ab", 5)


def test_mem_move_forward_overlap():
    buf = bytearray(b"abcdefgh")
    mem_move(buf, 2, 0, 5)
    assert buf == bytearray(b"ababcdeh")


def test_mem_move_backward_overlap():
    buf = bytearray(b"abcdefgh")
    mem_move(buf, 0, 2, 5)
    assert buf == bytearray(b"cdefgfgh")


def test_mem_move_out_of_bounds():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_mem_chr_finds_first_occurrence():
    data = b"abcabc"
    assert mem_chr(data, ord("c"), len(data)) == data.index(b"c")


def test_mem_chr_respects_length():
    assert mem_chr(b"abcabc", ord("c"), 2) is None


def test_mem_chr_matches_low_byte():
    data = bytes([0x10, 0xFF, 0x20])
    assert mem_chr(data, 0x1FF, 3) == 1


def test_mem_cmp_equal_prefix():
    assert mem_cmp(b"abcX", b"abcY", 3) == 0


def test_mem_cmp_returns_byte_difference():
    a, b = b"abc", b"abz"
    assert mem_cmp(a, b, 3) == a[2] - b[2]
    assert mem_cmp(b, a, 3) == -mem_cmp(a, b, 3)


def test_mem_cmp_is_unsigned():
    assert mem_cmp(bytes([0x80]), bytes([0x01]), 1) > 0


def test_mem_cmp_rejects_short_buffer():
    with pytest.raises(ValueError):
        mem_cmp(b"ab", b"abc", 3)


def test_copy_then_compare_round_trip():
    src = bytes(range(16))
    dst = calloc(1, 16)
    mem_copy(dst, src, 16)
    assert mem_cmp(dst, src, 16) == 0