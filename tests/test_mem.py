import numpy as np
import pytest

from jhsiao.bufio import bases, errors, mem

def test_empty():
    r = mem.empty()
    assert r.ReadError is errors.Never
    assert len(r.fill_buf()) == 0
    assert r.read_byte() is None
    r.consume(0)
    with pytest.raises(errors.UnexpectedEnd) as info:
        r.read_exact(bytearray(1))
    assert (info.value.total_required, info.value.available) == (1, 0)

def test_empty_checked_consume():
    with pytest.raises(ValueError):
        mem.Empty(checked=True).consume(1)
    mem.Empty(checked=False).consume(1)

def test_sink():
    w = mem.sink()
    assert w.WriteError is errors.Never
    w.write_all(b'discarded')
    w.flush()

def test_null():
    n = mem.null()
    assert isinstance(n, bases.BufRead)
    assert isinstance(n, bases.BufWrite)
    n.write_all(b'discarded')
    n.flush()
    assert len(n.fill_buf()) == 0
    buf = bytearray()
    assert n.read_to_end(buf) == 0

def test_slice_reader():
    r = mem.SliceReader(b'hello')
    assert len(r) == 5
    view = r.fill_buf()
    assert view.readonly
    assert view == b'hello'
    r.consume(2)
    assert r.fill_buf() == b'llo'
    assert len(r) == 3
    with pytest.raises(ValueError):
        r.consume(4)
    with pytest.raises(ValueError):
        r.consume(-1)
    r.consume(3)
    assert len(r.fill_buf()) == 0

def test_slice_reader_sources():
    arr = np.arange(4, dtype=np.uint32)
    buf = bytearray()
    assert mem.SliceReader(arr).read_to_end(buf) == arr.nbytes
    assert buf == arr.tobytes()

    data = bytearray(b'abc')
    r = mem.SliceReader(memoryview(data)[1:])
    assert r.fill_buf() == b'bc'

def test_slice_reader_short():
    r = mem.SliceReader(b'abc')
    with pytest.raises(errors.ReadExactError) as info:
        r.read_exact(bytearray(4))
    end = info.value.into_unexpected_end()
    assert end.total_required == 4
    assert end.available == 3

def test_fixed_buffer_write():
    buf = bytearray(5)
    w = mem.FixedBuffer(buf)
    assert w.WriteError is errors.BufferOverflow
    w.write_all(b'abc')
    assert w.remaining() == 2
    with pytest.raises(errors.BufferOverflow) as info:
        w.write_all(b'xyz')
    assert info.value.bytes_past_end == 1
    assert buf == b'abc\x00\x00'
    assert w.position == 3
    w.write_all(b'de')
    assert buf == b'abcde'
    assert w.remaining() == 0
    w.write_all(b'')
    with pytest.raises(errors.BufferOverflow) as info:
        w.write_all(b'1234')
    assert info.value.bytes_past_end == 4
    w.flush()

def test_fixed_buffer_read():
    r = mem.FixedBuffer(bytearray(b'hello'))
    assert r.ReadError is errors.Never
    assert r.fill_buf() == b'hello'
    r.consume(1)
    assert r.read_byte() == ord('e')
    buf = bytearray()
    assert r.read_to_end(buf) == 3
    assert buf == b'llo'
    with pytest.raises(ValueError):
        r.consume(1)

def test_fixed_buffer_shared_cursor():
    buf = bytearray(b'......')
    rw = mem.FixedBuffer(buf)
    rw.write_all(b'ab')
    assert rw.fill_buf() == b'....'
    rw.consume(2)
    rw.write_all(b'cd')
    assert buf == b'ab..cd'
    assert len(rw.fill_buf()) == 0

def test_fixed_buffer_numpy():
    arr = np.zeros(4, dtype=np.uint8)
    w = mem.FixedBuffer(arr)
    w.write_all(b'\x01\x02')
    assert arr.tolist() == [1, 2, 0, 0]

def test_fixed_buffer_readonly():
    with pytest.raises(TypeError):
        mem.FixedBuffer(b'readonly')

def test_bytearray_writer():
    w = mem.ByteArrayWriter()
    assert w.WriteError is errors.Never
    w.write_all(b'abc')
    w.write_all(memoryview(b'def'))
    w.flush()
    assert w.getvalue() == b'abcdef'

    buf = bytearray(b'>')
    mem.ByteArrayWriter(buf).write_all(b'x')
    assert buf == b'>x'

def test_bytearray_writer_rejects_immutable():
    with pytest.raises(TypeError):
        mem.ByteArrayWriter(b'>')
    with pytest.raises(TypeError):
        mem.ByteArrayWriter(memoryview(bytearray(1)))
