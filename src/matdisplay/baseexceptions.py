# -*- coding: utf-8 -*-
"""
Base exceptions raised by matdisplay.

Errors that come from malformed input also derive from ``ValueError`` so that
callers not interested in the details can catch them generically.
"""

class MatDisplayError(Exception):
    """Base class for all the errors raised by this package"""

class MatrixIOError(MatDisplayError):
    """Error reading a matrix from a flat text file"""

class ShapeError(MatrixIOError, ValueError):
    """The number of elements in a file is not compatible with the number of
    columns inferred from its first line."""
    def __init__(self, nelements, ncols, path):
        self.nelements = nelements
        self.ncols = ncols
        self.path = path
        msg = ("load_matrix: %d elements and %d columns in file %s" %
               (nelements, ncols, path))
        super().__init__(msg)

class ParseError(MatrixIOError, ValueError):
    """A token in a file cannot be interpreted as a number"""
    def __init__(self, token, index, path):
        self.token = token
        self.index = index
        self.path = path
        msg = (f"Could not parse token {token!r} (element {index}) "
               f"of file {path} as a number.")
        super().__init__(msg)
