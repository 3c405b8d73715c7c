"""Adapters that only change the error channel.

Bytes and consumption pass straight through to the wrapped object.
Mapping functions take the raised exception and return the exception
to raise instead.  The new exception is chained to the original.
"""
__all__ = ['MapReadErr', 'MapWriteErr', 'MapErr', 'UnifyErr']

from jhsiao.bufio import bases, errors

class MapReadErr(bases.BufRead):
    """Raise mapper(e) for each read error e."""
    def __init__(self, reader, mapper, error_type=Exception):
        """Initialize a MapReadErr.

        reader: BufRead
        mapper: callable(exception) -> exception
        error_type: the exception class mapper returns.
        """
        self.reader = reader
        self.mapper = mapper
        self.ReadError = error_type

    def into_inner(self):
        return self.reader

    def fill_buf(self):
        try:
            return self.reader.fill_buf()
        except self.reader.ReadError as e:
            errors.reraise(self.mapper(e), e)

    def consume(self, amount):
        self.reader.consume(amount)

class MapWriteErr(bases.BufWrite):
    """Raise mapper(e) for each write error e."""
    def __init__(self, writer, mapper, error_type=Exception):
        self.writer = writer
        self.mapper = mapper
        self.WriteError = error_type

    def into_inner(self):
        return self.writer

    def write_all(self, data):
        try:
            self.writer.write_all(data)
        except self.writer.WriteError as e:
            errors.reraise(self.mapper(e), e)

    def flush(self):
        try:
            self.writer.flush()
        except self.writer.WriteError as e:
            errors.reraise(self.mapper(e), e)

class MapErr(bases.BufRead, bases.BufWrite):
    """Map both read and write errors with the same mapper.

    io must be both a reader and a writer and its ReadError and
    WriteError must match (errors.Never matches anything).
    """
    def __init__(self, io, mapper, error_type=Exception):
        if not isinstance(io, bases.BufWrite):
            raise TypeError('MapErr requires a reader that is also a writer')
        self._inner_error = errors.common(io.ReadError, io.WriteError)
        self.io = io
        self.mapper = mapper
        self.ReadError = self.WriteError = error_type

    def into_inner(self):
        return self.io

    def fill_buf(self):
        try:
            return self.io.fill_buf()
        except self._inner_error as e:
            errors.reraise(self.mapper(e), e)

    def consume(self, amount):
        self.io.consume(amount)

    def write_all(self, data):
        try:
            self.io.write_all(data)
        except self._inner_error as e:
            errors.reraise(self.mapper(e), e)

    def flush(self):
        try:
            self.io.flush()
        except self._inner_error as e:
            errors.reraise(self.mapper(e), e)

class UnifyErr(bases.BufRead, bases.BufWrite):
    """Convert read and write errors into target with errors.into.

    Useful to give a reader/writer pair with different error types a
    single error type.
    """
    def __init__(self, io, target):
        if not isinstance(io, bases.BufWrite):
            raise TypeError('UnifyErr requires a reader that is also a writer')
        self.io = io
        self.ReadError = self.WriteError = target

    def into_inner(self):
        return self.io

    def fill_buf(self):
        try:
            return self.io.fill_buf()
        except self.io.ReadError as e:
            errors.reraise(errors.into(e, self.ReadError), e)

    def consume(self, amount):
        self.io.consume(amount)

    def write_all(self, data):
        try:
            self.io.write_all(data)
        except self.io.WriteError as e:
            errors.reraise(errors.into(e, self.WriteError), e)

    def flush(self):
        try:
            self.io.flush()
        except self.io.WriteError as e:
            errors.reraise(errors.into(e, self.WriteError), e)
