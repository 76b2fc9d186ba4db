# -*- coding: utf-8 -*-
"""
Load and save matrices as ASCII tables.

The format is a plain text file with the numbers separated by arbitrary
whitespace. The number of columns is inferred from the first line that is
not blank, and there is no header of any kind.
"""
import logging
import pathlib
import re

import numpy as np

from matdisplay.baseexceptions import MatrixIOError, ParseError, ShapeError
from matdisplay.floatformatting import fixed
from matdisplay.table import format_matrix
from matdisplay.utils import as_matrix

__all__ = ('scan_vector', 'apparent_cols', 'load_matrix',
           'load_matrix_optional', 'save_matrix')

log = logging.getLogger(__name__)

SAVE_SEP = ' '

#Plain decimal or scientific notation, plus the nan and inf written by
#save_matrix
NUMBER_RE = re.compile(r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)',
                       re.IGNORECASE)

def _read_text(path):
    raw = pathlib.Path(path).read_bytes()
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        begin, end = e.start, e.start
        while begin > 0 and not raw[begin-1:begin].isspace():
            begin -= 1
        while end < len(raw) and not raw[end:end+1].isspace():
            end += 1
        token = raw[begin:end].decode('utf-8', errors='replace')
        raise ParseError(token, len(raw[:begin].split()), path) from e

def _parse_tokens(tokens, path):
    values = np.empty(len(tokens))
    for i, token in enumerate(tokens):
        if not NUMBER_RE.fullmatch(token):
            raise ParseError(token, i, path)
        values[i] = float(token)
    return values

def scan_vector(path):
    """Read all the whitespace separated numbers in the file ``path`` into
    a flat vector."""
    return _parse_tokens(_read_text(path).split(), path)

def _apparent_cols_text(text):
    for line in text.splitlines():
        words = line.split()
        if words:
            return len(words)
    return 0

def apparent_cols(path):
    """Return the number of columns of the first non blank line of the file
    ``path``, or zero if there is none."""
    return _apparent_cols_text(_read_text(path))

def load_matrix(path):
    """Load a matrix from an ASCII file formatted as a 2D table. A
    ``ShapeError`` is raised if the number of elements in the file is not a
    multiple of the number of columns in its first line, and a
    ``ParseError`` if some element is not a number."""
    text = _read_text(path)
    v = _parse_tokens(text.split(), path)
    c = _apparent_cols_text(text)
    log.debug("Read %d elements in %d columns from %s", len(v), c, path)
    if c == 0:
        return np.empty((0, 0))
    if len(v) % c != 0:
        raise ShapeError(len(v), c, path)
    return v.reshape(-1, c)

def load_matrix_optional(path):
    """Like ``load_matrix``, but return None if the file cannot be read or
    is not a valid matrix."""
    try:
        return load_matrix(path)
    except (OSError, MatrixIOError) as e:
        log.debug("Could not load matrix from %s: %s", path, e)
        return None

def save_matrix(path, m, decimals=None):
    """Write the matrix ``m`` to ``path`` as an aligned table, one row per
    line, in a format that ``load_matrix`` can read. Entries are written
    with ``decimals`` fixed decimals, or with the shortest representation
    that reads back to the same float if it is None."""
    m = as_matrix(m)
    if decimals is None:
        show = lambda x: repr(float(x))
    else:
        show = lambda x: fixed(x, decimals)
    log.debug("Writing %dx%d matrix to %s", *m.shape, path)
    pathlib.Path(path).write_text(format_matrix(SAVE_SEP, show, m))
