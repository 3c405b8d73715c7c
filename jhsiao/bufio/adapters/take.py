"""Limit the number of bytes read from a reader."""
__all__ = ['Take', 'MAX_LIMIT']

from jhsiao.bufio import bases

MAX_LIMIT = (1 << 64) - 1

class Take(bases.BufRead):
    """Read at most limit bytes from reader.

    The inner reader is not told about the limit, views it returns are
    truncated instead.  Once limit bytes have been consumed, fill_buf()
    returns an empty view without calling the inner reader again.
    Errors from the inner reader are not counted and a later fill_buf()
    may still succeed.
    """
    def __init__(self, reader, limit, checked=None):
        """Initialize a Take.

        reader: BufRead
            The reader to limit.
        limit: int
            Maximum number of bytes to return, 0 <= limit < 2**64.
        checked: bool or None
            Check consume() against the last returned view.  Defaults
            to bases.CHECKED.
        """
        if not 0 <= limit <= MAX_LIMIT:
            raise ValueError('limit out of range: {}'.format(limit))
        self.reader = reader
        self.limit = limit
        self.ReadError = reader.ReadError
        self.checked = bases.checked(checked)
        self._lastlen = 0

    def into_inner(self):
        return self.reader

    def fill_buf(self):
        if self.checked:
            self._lastlen = 0
        if not self.limit:
            return bases.EMPTY
        data = self.reader.fill_buf()
        if len(data) > self.limit:
            data = data[:self.limit]
        if self.checked:
            self._lastlen = len(data)
        return data

    def consume(self, amount):
        if amount < 0:
            raise ValueError('negative consume: {}'.format(amount))
        if self.checked and amount > self._lastlen:
            raise ValueError(
                'consume({}) exceeds last fill_buf() length {}'.format(
                    amount, self._lastlen))
        # inner reader may reject amount, state is unchanged then
        self.reader.consume(amount)
        if amount > self.limit:
            self.limit = 0
        else:
            self.limit -= amount
        if self.checked:
            self._lastlen -= amount
