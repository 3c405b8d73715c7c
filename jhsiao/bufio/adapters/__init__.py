"""Adapters wrapping readers and writers.

These are normally created through BufRead/BufWrite methods (take(),
chain(), map_read_err(), ...) rather than directly.  Adapters own what
they wrap: use the wrapped object only through the adapter until done
with it.
"""
__all__ = [
    'Take',
    'Chain',
    'MapReadErr',
    'MapWriteErr',
    'MapErr',
    'UnifyErr',
    'AsStdReader',
    'AsStdWriter',
    'AsStd',
    'StdBufRead',
    'StdBufWrite',
    'from_std_reader',
    'from_std_writer',
]

from .take import Take
from .chain import Chain
from .maperr import MapReadErr, MapWriteErr, MapErr, UnifyErr
from .std import (
    AsStdReader,
    AsStdWriter,
    AsStd,
    StdBufRead,
    StdBufWrite,
    from_std_reader,
    from_std_writer,
)
