"""Define relevant errno."""
__all__ = ['EAGAIN', 'EWOULDBLOCK', 'WOULDBLOCK', 'EINTR', 'EIO', 'interrupted']
import errno
import platform

EINTR = getattr(errno, 'EINTR', 4)
EIO = getattr(errno, 'EIO', 5)
EAGAIN = getattr(errno, 'EAGAIN', 11)
EWOULDBLOCK = getattr(
    errno,
    'EWOULDBLOCK',
    10035 if platform.system() == 'Windows' else 11)

WOULDBLOCK = frozenset([EAGAIN, EWOULDBLOCK])

def interrupted(exc):
    """Return whether exc is a transient interruption that can be retried."""
    return isinstance(exc, InterruptedError) or (
        isinstance(exc, OSError) and exc.errno == EINTR)
