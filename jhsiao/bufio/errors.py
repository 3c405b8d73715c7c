"""Error types.

Readers and writers raise exceptions instead of returning error values.
The class attributes `ReadError` and `WriteError` name the exception
type a reader or writer may raise.  Readers that can never fail use
`Never` which cannot be instantiated, so `except Never` never catches
anything.
"""
__all__ = [
    'Error',
    'Never',
    'BufferOverflow',
    'ReadExactError',
    'UnexpectedEnd',
    'ReadingFailed',
    'into',
    'common',
    'reraise',
]

from jhsiao.bufio import errnos

class Error(Exception):
    """Base class for errors raised by this package."""

class Never(Exception):
    """The error of an operation that cannot fail.

    Raises TypeError on instantiation.
    """
    def __new__(cls, *args, **kwargs):
        raise TypeError('{} cannot be instantiated'.format(cls.__name__))

class BufferOverflow(Error):
    """A fixed-capacity destination had no room for the written bytes."""
    def __init__(self, bytes_past_end):
        super().__init__(bytes_past_end)

    @property
    def bytes_past_end(self):
        return self.args[0]

    def __str__(self):
        return 'attempted to write {} bytes past the end of the buffer'.format(
            self.bytes_past_end)

class ReadExactError(Error):
    """Failure of `BufRead.read_exact`.

    Either `UnexpectedEnd` (not enough bytes) or `ReadingFailed` (the
    reader raised).  Catch the subclasses to tell them apart.
    """
    @staticmethod
    def unexpected_end(total_required, available):
        return UnexpectedEnd(total_required, available)

    def map_read_err(self, f):
        """Transform the underlying read error with f."""
        raise NotImplementedError

    def into_unexpected_end(self):
        """Return the `UnexpectedEnd` for readers that cannot fail.

        When the reader's `ReadError` is `Never`, UnexpectedEnd is the
        only possible failure so this never raises.
        """
        raise NotImplementedError

class UnexpectedEnd(ReadExactError):
    """More bytes were required than the reader had."""
    def __init__(self, total_required, available):
        super().__init__(total_required, available)

    @property
    def total_required(self):
        return self.args[0]

    @property
    def available(self):
        return self.args[1]

    @property
    def missing(self):
        """Bytes that were still needed when the stream ended."""
        return self.total_required - self.available

    def __str__(self):
        return '{} bytes were required but only {} bytes were read'.format(
            self.total_required, self.available)

    def map_read_err(self, f):
        return self

    def into_unexpected_end(self):
        return self

class ReadingFailed(ReadExactError):
    """The reader raised.  The original exception is `error`."""
    def __init__(self, error):
        super().__init__(error)

    @property
    def error(self):
        return self.args[0]

    def __str__(self):
        return 'reading failed'

    def map_read_err(self, f):
        return ReadingFailed(f(self.error))

    def into_unexpected_end(self):
        # unreachable for readers whose ReadError is Never
        raise self.error

def into(error, target):
    """Convert error into an instance of exception class target.

    Conversion order:
        1. error is already a target: returned as-is.
        2. target.from_error(error) if target defines it.
        3. OSError targets wrap error as EIO with error as __cause__.
    Anything else raises TypeError.
    """
    if isinstance(error, target):
        return error
    convert = getattr(target, 'from_error', None)
    if convert is not None:
        return convert(error)
    if issubclass(target, OSError):
        ret = target(errnos.EIO, str(error) or type(error).__name__)
        ret.__cause__ = error
        return ret
    raise TypeError('cannot convert {} into {}'.format(
        type(error).__name__, target.__name__))

def common(first, second):
    """Return the error type shared by first and second.

    Never is compatible with anything.  Raise TypeError if the types
    differ otherwise.
    """
    if first is second or second is Never:
        return first
    if first is Never:
        return second
    raise TypeError('incompatible error types: {} and {}'.format(
        first.__name__, second.__name__))

def reraise(mapped, error):
    """Raise mapped in place of error, chained to it.

    Call from the except block that caught error.  If mapped is error,
    it is re-raised as-is.
    """
    if mapped is error:
        raise error
    raise mapped from error
