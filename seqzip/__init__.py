from ._lib.exceptions import (
    EndOfTraversal, MoveError, NotABranch, TopLevelError, ZipperError,
)
from ._lib.path import Path
from ._lib.shapes import SEQUENCE, Shape
from ._lib.zipper import End, Loc, seq_zip, zipper

__all__ = [
    'End', 'EndOfTraversal', 'Loc', 'MoveError', 'NotABranch', 'Path',
    'SEQUENCE', 'Shape', 'TopLevelError', 'ZipperError', 'seq_zip',
    'zipper',
]
