"""In-memory readers and writers.

None of these perform I/O.  Readers here cannot fail (ReadError is
errors.Never) though read_exact() may still raise UnexpectedEnd.
"""
__all__ = [
    'Empty',
    'Sink',
    'Null',
    'SliceReader',
    'FixedBuffer',
    'ByteArrayWriter',
    'empty',
    'sink',
    'null',
]

from jhsiao.bufio import bases, errors

def _check_consume(amount, available):
    if not 0 <= amount <= available:
        raise ValueError(
            'consume({}) but only {} bytes available'.format(amount, available))

class Empty(bases.BufRead):
    """A reader that is always at EOF."""
    ReadError = errors.Never

    def __init__(self, checked=None):
        self.checked = bases.checked(checked)

    def fill_buf(self):
        return bases.EMPTY

    def consume(self, amount):
        if self.checked:
            _check_consume(amount, 0)

class Sink(bases.BufWrite):
    """A writer that discards everything."""
    WriteError = errors.Never

    def write_all(self, data):
        pass

    def flush(self):
        pass

class Null(Empty, Sink):
    """Reader at EOF and writer that discards.  Like /dev/null."""

def empty():
    return Empty()

def sink():
    return Sink()

def null():
    return Null()

class SliceReader(bases.BufRead):
    """Read from an immutable byte sequence.

    Any C-contiguous buffer works: bytes, bytearray, memoryview,
    array.array, numpy arrays, mmap...  The data is viewed, not copied,
    so it should not be modified while being read.
    """
    ReadError = errors.Never

    def __init__(self, data):
        self.view = memoryview(data).cast('B').toreadonly()

    def __len__(self):
        """Number of unconsumed bytes."""
        return len(self.view)

    def fill_buf(self):
        return self.view

    def consume(self, amount):
        _check_consume(amount, len(self.view))
        self.view = self.view[amount:]

class FixedBuffer(bases.BufRead, bases.BufWrite):
    """A fixed-capacity mutable buffer.

    Reading and writing share a single cursor that starts at 0.
    Writing copies bytes at the cursor and advances it.  Reading returns
    the bytes after the cursor.  Writing more than remaining() bytes
    raises BufferOverflow and writes nothing.
    """
    ReadError = errors.Never
    WriteError = errors.BufferOverflow

    def __init__(self, buf):
        self.view = memoryview(buf).cast('B')
        if self.view.readonly:
            raise TypeError('FixedBuffer requires a writable buffer')
        self.position = 0

    def remaining(self):
        return len(self.view) - self.position

    def fill_buf(self):
        return self.view[self.position:]

    def consume(self, amount):
        _check_consume(amount, self.remaining())
        self.position += amount

    def write_all(self, data):
        data = memoryview(data).cast('B')
        end = self.position + len(data)
        if end > len(self.view):
            raise errors.BufferOverflow(end - len(self.view))
        self.view[self.position:end] = data
        self.position = end

    def flush(self):
        pass

class ByteArrayWriter(bases.BufWrite):
    """Append to a growable bytearray.  Never fails."""
    WriteError = errors.Never

    def __init__(self, buf=None):
        if buf is None:
            buf = bytearray()
        elif not isinstance(buf, bytearray):
            raise TypeError(
                'ByteArrayWriter requires a bytearray, not {}'.format(
                    type(buf).__name__))
        self.buf = buf

    def write_all(self, data):
        self.buf += data

    def flush(self):
        pass

    def getvalue(self):
        return bytes(self.buf)
