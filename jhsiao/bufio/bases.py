"""Buffered reader and writer contracts.

BufRead has 2 primitives: fill_buf() and consume().  fill_buf() returns
a memoryview of unsigned bytes that are available but not yet consumed,
performing I/O if needed.  An empty view means end of stream.  consume()
marks bytes from the front of that view as used.  It performs no I/O.

The view returned by fill_buf() is only valid until the next call to
fill_buf() or consume() on the same reader.  Do not keep it around.
Copy what you need (bytes(view[:n])) before calling consume().
consume(n) with n larger than the last view is a caller bug.

BufWrite has 2 primitives: write_all() and flush().  write_all() either
accepts every byte or raises.  There is no partial write.

Errors are exceptions.  `ReadError` and `WriteError` name the exception
class each side may raise.  Everything else raised is a bug and is never
wrapped.

Invariant checks that cost extra bookkeeping are controlled by CHECKED.
It defaults to __debug__ (off with python -O) and the environment
variable JHSIAO_BUFIO_CHECKED (0 or 1) overrides it.
"""
__all__ = ['BufRead', 'BufWrite', 'CHECKED', 'EMPTY', 'checked']

import os

from jhsiao.bufio import errors

CHECKED = os.environ.get(
    'JHSIAO_BUFIO_CHECKED', '1' if __debug__ else '0').strip() not in ('', '0')

EMPTY = memoryview(b'')

def checked(flag=None):
    """Return flag, or CHECKED if flag is None."""
    return CHECKED if flag is None else bool(flag)

class BufRead:
    """Pull-based buffered reader."""
    ReadError = Exception

    def fill_buf(self):
        """Return a memoryview of available bytes.

        May perform I/O if no bytes are buffered.  Bytes that were not
        consumed must be returned again.  Empty view means EOF.
        """
        raise NotImplementedError

    def consume(self, amount):
        """Mark amount bytes of the last fill_buf() view as used."""
        raise NotImplementedError

    def read_byte(self):
        """Return the next byte as an int, None at EOF."""
        data = self.fill_buf()
        if data:
            ret = data[0]
            self.consume(1)
            return ret
        return None

    def read_exact(self, buf):
        """Fill buf completely.

        buf: writable buffer (bytearray, memoryview, array, etc)

        Raise errors.UnexpectedEnd if the stream ends first and
        errors.ReadingFailed if the reader raises its ReadError.  The
        contents of buf are unspecified after an error, but no more
        bytes than needed to fill buf are ever consumed.
        """
        view = memoryview(buf).cast('B')
        required = len(view)
        pos = 0
        while pos < required:
            try:
                data = self.fill_buf()
            except self.ReadError as e:
                raise errors.ReadingFailed(e) from e
            if not data:
                raise errors.UnexpectedEnd(required, pos)
            amt = min(len(data), required - pos)
            view[pos:pos+amt] = data[:amt]
            self.consume(amt)
            pos += amt

    def read_to_end(self, buf):
        """Append everything until EOF to bytearray buf.

        Return the number of bytes appended.  If fill_buf() raises, the
        bytes appended so far stay in buf.
        """
        total = 0
        while 1:
            data = self.fill_buf()
            if not data:
                return total
            amt = len(data)
            buf.extend(data)
            total += amt
            self.consume(amt)

    def take(self, limit, checked=None):
        """Return a reader that stops after limit bytes."""
        from jhsiao.bufio.adapters.take import Take
        return Take(self, limit, checked)

    def chain(self, other):
        """Return a reader of self followed by other."""
        from jhsiao.bufio.adapters.chain import Chain
        return Chain(self, other)

    def map_read_err(self, f, error_type=Exception):
        """Return a reader raising f(e) instead of read errors e."""
        from jhsiao.bufio.adapters.maperr import MapReadErr
        return MapReadErr(self, f, error_type)

    def map_err(self, f, error_type=Exception):
        """Like map_read_err but also maps write errors.

        self must also be a BufWrite with the same error type.
        """
        from jhsiao.bufio.adapters.maperr import MapErr
        return MapErr(self, f, error_type)

    def unify_err(self, target):
        """Convert read and write errors into target with errors.into."""
        from jhsiao.bufio.adapters.maperr import UnifyErr
        return UnifyErr(self, target)

    def into_std(self):
        """Return an io.RawIOBase that reads and writes through self."""
        from jhsiao.bufio.adapters.std import AsStd
        return AsStd(self)

    def into_std_reader(self):
        """Return a readable io.RawIOBase over self."""
        from jhsiao.bufio.adapters.std import AsStdReader
        return AsStdReader(self)

    def by_ref(self):
        """Return self.

        Adapters never close or detach what they wrap, so wrapping
        self and continuing to use it after the adapter is done is fine.
        """
        return self

class BufWrite:
    """Push-based writer."""
    WriteError = Exception

    def write_all(self, data):
        """Write all of data or raise WriteError."""
        raise NotImplementedError

    def flush(self):
        """Push any buffered bytes to the underlying sink."""
        raise NotImplementedError

    def map_write_err(self, f, error_type=Exception):
        """Return a writer raising f(e) instead of write errors e."""
        from jhsiao.bufio.adapters.maperr import MapWriteErr
        return MapWriteErr(self, f, error_type)

    def into_std_writer(self):
        """Return a writable io.RawIOBase over self."""
        from jhsiao.bufio.adapters.std import AsStdWriter
        return AsStdWriter(self)

    def by_ref(self):
        """Return self."""
        return self
