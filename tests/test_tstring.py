import pytest

from sctoolkit.tstring import (
    TextBuffer,
    append_file,
    read_file,
    str_hash,
    str_icmp,
    write_file,
)

LONG_TEXT = "11111111111111111111111111111111111111111111111111111111111112你好你好你好\"你好"


def test_heap_created_buffer():
    buf = TextBuffer("123")
    assert (str(buf), len(buf), buf.capacity) == ("123", 3, 32)

    buf.append("A")
    assert (str(buf), len(buf), buf.capacity) == ("123A", 4, 32)

    buf.extend(LONG_TEXT)
    assert str(buf) == "123A" + LONG_TEXT
    assert len(buf) == 4 + len(LONG_TEXT)
    assert buf.capacity == 128


def test_empty_buffer_grows():
    buf = TextBuffer()
    assert (len(buf), buf.capacity, str(buf)) == (0, 0, "")

    buf.append("w")
    assert (str(buf), len(buf), buf.capacity) == ("w", 1, 32)

    buf.extend("AN,but WAI!")
    assert (str(buf), len(buf), buf.capacity) == ("wAN,but WAI!", 12, 32)


def test_extend_empty_raises():
    buf = TextBuffer("x")
    with pytest.raises(ValueError):
        buf.extend("")
    assert str(buf) == "x"


def test_append_requires_single_char():
    buf = TextBuffer()
    with pytest.raises(ValueError):
        buf.append("ab")


def test_capacity_invariant():
    buf = TextBuffer()
    for n in range(200):
        buf.append(chr(ord("a") + n % 26))
        assert buf.capacity >= len(buf) + 1
        ratio = buf.capacity // 32
        assert buf.capacity % 32 == 0 and ratio & (ratio - 1) == 0
    assert len(buf) == 200


def test_str_hash_empty_is_one():
    assert str_hash("") == 1


def test_str_hash_values():
    assert str_hash("a") == 128
    assert str_hash("ab") == 5161


def test_str_hash_is_stable_and_32bit():
    text = "hello world, a fairly long string to hash" * 4
    assert str_hash(text) == str_hash(text)
    assert 0 < str_hash(text) <= 0xFFFFFFFF


def test_str_icmp():
    assert str_icmp("abc", "ABC") == 0
    assert str_icmp("a", "b") < 0
    assert str_icmp("b", "A") > 0
    assert str_icmp("abc", "ab") == ord("C")
    assert str_icmp("ab", "abc") == -ord("C")


def test_str_icmp_none():
    assert str_icmp(None, None) == 0
    assert str_icmp(None, "a") < 0
    assert str_icmp("a", None) > 0


def test_file_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    write_file(path, "line one\r\nline two")
    assert read_file(path) == "line one\r\nline two"
    append_file(path, "\nmore")
    assert read_file(path) == "line one\r\nline two\nmore"
    write_file(path, "fresh")
    assert read_file(path) == "fresh"


def test_append_creates_file(tmp_path):
    path = tmp_path / "new.txt"
    append_file(path, "abc")
    assert read_file(path) == "abc"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")