# -*- coding: utf-8 -*-
"""
Align tables of strings into blocks of text.

``table`` is the low level tool: it receives cells that are already
formatted and pads them so that every column is right aligned.
``format_matrix`` stringifies numeric input first.
"""
from matdisplay.utils import as_matrix

__all__ = ('table', 'format_matrix')

def table(sep, cells):
    """Join the rows of ``cells`` with ``sep``, left padding each cell with
    spaces to the width of the widest cell of its column. Each row, including
    the last one, is terminated by a newline."""
    cells = [list(row) for row in cells]
    if not cells or not cells[0]:
        return ''
    columns = list(zip(*cells))
    widths = [max(len(cell) for cell in col) for col in columns]
    padded = [[cell.rjust(width) for cell in col]
              for width, col in zip(widths, columns)]
    return ''.join(sep.join(row) + '\n' for row in zip(*padded))

def format_matrix(sep, f, m):
    """Create a string from the matrix ``m`` using ``f`` to show each
    entry and ``sep`` to separate the columns. Any display function can be
    built this way, for example::

        disp = lambda m: print(format_matrix("  ", "{:.2f}".format, m), end='')
    """
    m = as_matrix(m)
    return table(sep, [[f(x) for x in row] for row in m])
