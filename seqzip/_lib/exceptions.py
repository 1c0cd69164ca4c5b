class ZipperError(Exception):
    """
    Base class for every error raised by seqzip
    """


class TopLevelError(ZipperError, IndexError):
    """
    The operation needs an enclosing branch and the location has none.
    """


class NotABranch(ZipperError, TypeError):
    pass


class EndOfTraversal(ZipperError):
    """
    Raised when editing the location returned once a depth-first walk
    is exhausted.
    """


class MoveError(ZipperError):
    def __init__(self, move, position):
        self.move = move
        self.position = position
        msg = "Can't move {0!r} at step {1}".format(move, position)
        super(MoveError, self).__init__(msg)
