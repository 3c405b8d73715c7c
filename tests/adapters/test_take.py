import errno

import pytest

from jhsiao.bufio import bases, errors, mem
from jhsiao.bufio.adapters.take import Take, MAX_LIMIT

class Counting(bases.BufRead):
    """Return data 2 bytes at a time and count fill_buf() calls.

    Calls numbered in fail (1-based) raise OSError.
    """
    ReadError = OSError

    def __init__(self, data, fail=()):
        self.data = memoryview(data)
        self.fail = set(fail)
        self.calls = 0

    def fill_buf(self):
        self.calls += 1
        if self.calls in self.fail:
            raise OSError(errno.EIO, 'fail')
        return self.data[:2]

    def consume(self, amount):
        self.data = self.data[amount:]

def test_take_zero():
    r = mem.SliceReader(b'\x01\x02\x03').take(0)
    assert len(r.fill_buf()) == 0
    with pytest.raises(errors.UnexpectedEnd) as info:
        r.read_exact(bytearray(1))
    assert info.value.total_required == 1
    assert info.value.available == 0

def test_take_one():
    r = mem.SliceReader(b'\x01\x02\x03').take(1)
    assert r.fill_buf() == b'\x01'
    r.consume(1)
    assert len(r.fill_buf()) == 0
    with pytest.raises(errors.UnexpectedEnd):
        r.read_exact(bytearray(1))

def test_take_prefix():
    for data in (b'', b'a', b'hello world'):
        for limit in range(len(data) + 3):
            inner = Counting(data)
            r = inner.take(limit)
            buf = bytearray()
            assert r.read_to_end(buf) == min(len(data), limit)
            assert buf == data[:limit]
            assert len(r.fill_buf()) == 0
            assert len(r.fill_buf()) == 0

def test_take_exhausted_skips_inner():
    inner = Counting(b'abcdef')
    r = inner.take(3)
    buf = bytearray()
    r.read_to_end(buf)
    assert buf == b'abc'
    calls = inner.calls
    assert len(r.fill_buf()) == 0
    assert r.read_byte() is None
    assert inner.calls == calls

def test_take_zero_skips_inner():
    inner = Counting(b'abc', fail=[1])
    r = inner.take(0)
    assert len(r.fill_buf()) == 0
    assert inner.calls == 0

def test_take_errors_keep_limit():
    inner = Counting(b'abcdef', fail=[1])
    r = inner.take(3)
    assert r.ReadError is OSError
    with pytest.raises(OSError):
        r.fill_buf()
    assert r.limit == 3
    assert r.fill_buf() == b'ab'
    r.consume(2)
    assert r.limit == 1
    assert r.fill_buf() == b'c'

def test_take_read_exact_failure():
    r = Counting(b'abcdef', fail=[2]).take(5)
    with pytest.raises(errors.ReadingFailed):
        r.read_exact(bytearray(4))
    assert r.limit == 3

def test_take_checked_consume():
    r = mem.SliceReader(b'abc').take(2, checked=True)
    r.fill_buf()
    with pytest.raises(ValueError):
        r.consume(3)
    r.consume(1)
    with pytest.raises(ValueError):
        r.consume(2)

def test_take_unchecked_clamps():
    inner = mem.SliceReader(b'abcdef')
    r = inner.take(2, checked=False)
    r.fill_buf()
    r.consume(3)
    assert r.limit == 0
    assert len(r.fill_buf()) == 0

def test_take_limit_range():
    with pytest.raises(ValueError):
        Take(mem.empty(), -1)
    with pytest.raises(ValueError):
        Take(mem.empty(), MAX_LIMIT + 1)
    r = Take(mem.SliceReader(b'abc'), MAX_LIMIT)
    assert r.fill_buf() == b'abc'

def test_take_nested():
    r = mem.SliceReader(b'abcdef').take(4).take(2)
    assert r.ReadError is errors.Never
    buf = bytearray()
    r.read_to_end(buf)
    assert buf == b'ab'

def test_take_into_inner():
    inner = mem.SliceReader(b'abcdef')
    r = inner.take(2)
    assert r.into_inner() is inner
    r.read_byte()
    assert len(inner) == 5

def test_take_negative_consume():
    for checked in (True, False):
        r = mem.SliceReader(b'abcdef').take(2, checked=checked)
        r.fill_buf()
        with pytest.raises(ValueError):
            r.consume(-1)
        assert r.limit == 2
        buf = bytearray()
        r.read_to_end(buf)
        assert buf == b'ab'

def test_take_inner_consume_fails():
    inner = mem.SliceReader(b'ab')
    r = inner.take(5, checked=False)
    assert r.fill_buf() == b'ab'
    with pytest.raises(ValueError):
        r.consume(4)
    assert r.limit == 5
    assert len(inner) == 2
    r.consume(2)
    assert r.limit == 3

def test_take_checked_after_error():
    inner = Counting(b'abcdef', fail=[2])
    r = inner.take(5, checked=True)
    assert r.fill_buf() == b'ab'
    with pytest.raises(OSError):
        r.fill_buf()
    with pytest.raises(ValueError):
        r.consume(1)
    assert r.limit == 5
