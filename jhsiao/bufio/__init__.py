"""Buffered I/O generic over the error type.

Readers (bases.BufRead) expose fill_buf()/consume() and writers
(bases.BufWrite) expose write_all()/flush().  Each declares the
exception it may raise as ReadError/WriteError.  In-memory readers use
errors.Never: they cannot fail.
"""
__all__ = [
    'BufRead',
    'BufWrite',
    'Never',
    'BufferOverflow',
    'ReadExactError',
    'UnexpectedEnd',
    'ReadingFailed',
    'empty',
    'sink',
    'null',
    'SliceReader',
    'FixedBuffer',
    'ByteArrayWriter',
    'from_std_reader',
    'from_std_writer',
]

from .bases import BufRead, BufWrite
from .errors import (
    Never,
    BufferOverflow,
    ReadExactError,
    UnexpectedEnd,
    ReadingFailed,
)
from .mem import empty, sink, null, SliceReader, FixedBuffer, ByteArrayWriter
from .adapters.std import from_std_reader, from_std_writer
