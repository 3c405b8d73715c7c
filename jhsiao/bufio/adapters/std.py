"""Bridges to and from the io module.

AsStdReader, AsStdWriter and AsStd expose BufRead/BufWrite objects as
io.RawIOBase so they can be handed to anything that wants a file.
Errors are converted to OSError with errors.into.

StdBufRead and StdBufWrite go the other way: they wrap io streams as
BufRead/BufWrite with OSError as the error type.  They retry reads and
writes that were interrupted (EINTR).  Nothing else in this package
retries.
"""
__all__ = [
    'AsStdReader',
    'AsStdWriter',
    'AsStd',
    'StdWrapper',
    'StdBufRead',
    'StdBufWrite',
    'from_std_reader',
    'from_std_writer',
]

import io
import traceback

from jhsiao.bufio import bases, errnos, errors
from jhsiao.bufio.adapters import maperr

class AsStdReader(io.RawIOBase):
    """Readable raw file over a BufRead.

    readinto() performs at most 1 fill_buf() and copies whatever is
    available, so short reads are normal.
    """
    def __init__(self, reader):
        io.RawIOBase.__init__(self)
        self.reader = reader

    def into_inner(self):
        return self.reader

    def readable(self):
        return True

    def fill_buf(self):
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        try:
            return self.reader.fill_buf()
        except self.reader.ReadError as e:
            errors.reraise(errors.into(e, OSError), e)

    def consume(self, amount):
        self.reader.consume(amount)

    def readinto(self, b):
        view = memoryview(b).cast('B')
        data = self.fill_buf()
        amt = min(len(view), len(data))
        view[:amt] = data[:amt]
        self.reader.consume(amt)
        return amt

    readinto1 = readinto

    def read1(self, size=-1):
        data = self.fill_buf()
        if size is not None and 0 <= size < len(data):
            data = data[:size]
        ret = data.tobytes()
        self.reader.consume(len(ret))
        return ret

    def peek(self, size=0):
        """Return available bytes without consuming them."""
        return self.fill_buf().tobytes()

    def readall(self):
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        buf = bytearray()
        try:
            self.reader.read_to_end(buf)
        except self.reader.ReadError as e:
            errors.reraise(errors.into(e, OSError), e)
        return bytes(buf)

class AsStdWriter(io.RawIOBase):
    """Writable raw file over a BufWrite.

    write() always writes everything (write_all) and returns the byte
    count.
    """
    def __init__(self, writer):
        io.RawIOBase.__init__(self)
        self.writer = writer

    def into_inner(self):
        return self.writer

    def writable(self):
        return True

    def write(self, b):
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        try:
            self.writer.write_all(b)
        except self.writer.WriteError as e:
            errors.reraise(errors.into(e, OSError), e)
        return memoryview(b).nbytes

    def flush(self):
        io.RawIOBase.flush(self)
        try:
            self.writer.flush()
        except self.writer.WriteError as e:
            errors.reraise(errors.into(e, OSError), e)

class AsStd(AsStdReader, AsStdWriter):
    """Readable and writable raw file over a reader/writer.

    Read and write errors are unified into OSError first.
    """
    def __init__(self, rw):
        unified = maperr.UnifyErr(rw, OSError)
        AsStdReader.__init__(self, unified)
        self.writer = unified

    def into_inner(self):
        return self.reader.into_inner()

class StdWrapper(object):
    """Lifecycle of a bridge that owns an io stream.

    close() closes the stream, detach() returns it without closing.
    Either way the bridge should no longer be used.
    """
    def __init__(self, f, verbose=False):
        self.f = f
        self.verbose = verbose

    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        self.close()

    def fileno(self):
        return self.f.fileno()

    def into_inner(self):
        return self.f

    def detach(self):
        """Unwrap the stream and return it."""
        ret = self.f
        self.f = None
        return ret

    @property
    def closed(self):
        return self.f is None

    def close(self):
        """Close the underlying stream."""
        if self.f is not None:
            self.detach().close()

class StdBufRead(StdWrapper, bases.BufRead):
    """BufRead over an io stream that has peek() (io.BufferedReader).

    fill_buf() returns the stream's peek() result.  Interrupted peeks
    are retried.  Other errors are raised as-is.
    """
    ReadError = OSError

    def fill_buf(self):
        while 1:
            try:
                data = self.f.peek()
            except OSError as e:
                if not errnos.interrupted(e):
                    raise
                if self.verbose:
                    traceback.print_exc()
            else:
                return memoryview(data) if data else bases.EMPTY

    def consume(self, amount):
        # amount <= len(peek()) so this is served from the buffer
        if amount:
            self.f.read(amount)

class StdBufWrite(StdWrapper, bases.BufWrite):
    """BufWrite over a writable io stream.

    Partial writes are continued and interrupted writes are retried.
    A non-blocking stream that would block raises BlockingIOError with
    characters_written set to the number of bytes written so far.
    """
    WriteError = OSError

    def write_all(self, data):
        view = memoryview(data).cast('B')
        target = len(view)
        amt = 0
        while amt < target:
            try:
                chunk = self.f.write(view[amt:])
            except OSError as e:
                if not errnos.interrupted(e):
                    raise
                if self.verbose:
                    traceback.print_exc()
                continue
            if chunk is None:
                raise BlockingIOError(errnos.EAGAIN, 'write would block', amt)
            elif chunk == 0:
                raise OSError(errnos.EIO, 'failed to write whole buffer')
            amt += chunk

    def flush(self):
        while 1:
            try:
                return self.f.flush()
            except OSError as e:
                if not errnos.interrupted(e):
                    raise
                if self.verbose:
                    traceback.print_exc()

def from_std_reader(f, buffer_size=io.DEFAULT_BUFFER_SIZE, verbose=False):
    """Wrap a readable io stream as a BufRead.

    Streams without peek() (raw files, io.BytesIO, sockets via
    makefile('rb', 0)...) are wrapped in io.BufferedReader first.
    """
    if not hasattr(f, 'peek'):
        f = io.BufferedReader(f, buffer_size)
    return StdBufRead(f, verbose)

def from_std_writer(f, verbose=False):
    """Wrap a writable io stream as a BufWrite."""
    return StdBufWrite(f, verbose)
