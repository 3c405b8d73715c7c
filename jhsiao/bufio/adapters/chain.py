"""Concatenate two readers."""
__all__ = ['Chain']

from jhsiao.bufio import bases, errors

class Chain(bases.BufRead):
    """Read left until EOF, then right.

    The switch to right happens the first time left returns an empty
    view and is permanent: left is never read again.
    """
    def __init__(self, left, right):
        """Initialize a Chain.

        left, right: BufRead
            Must have the same ReadError.  errors.Never matches
            anything.  TypeError if they differ.
        """
        self.ReadError = errors.common(left.ReadError, right.ReadError)
        self.left = left
        self.right = right
        self.switched = False

    def into_inner(self):
        return self.left, self.right

    def fill_buf(self):
        if self.switched:
            return self.right.fill_buf()
        data = self.left.fill_buf()
        if not data:
            self.switched = True
            return self.right.fill_buf()
        return data

    def consume(self, amount):
        if self.switched:
            self.right.consume(amount)
        else:
            self.left.consume(amount)
