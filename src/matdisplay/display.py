# -*- coding: utf-8 -*-
"""
Display functions for matrices and vectors.

All functions return strings; printing is left to the caller::

    >>> print(dispf(2, 1/3 + np.eye(3)), end='')
    3x3
    1.33  0.33  0.33
    0.33  1.33  0.33
    0.33  0.33  1.33

"""
import logging
import math

import numpy as np
import pandas as pd

from matdisplay.floatformatting import fixed, is_int, show_complex
from matdisplay.table import format_matrix, table
from matdisplay.utils import as_matrix, as_row, check_decimals

__all__ = ('sdims', 'scale_exponent', 'format_fixed', 'format_scaled',
           'dispf', 'disps', 'dispcf', 'dispframe', 'vecdisp',
           'latex_format')

log = logging.getLogger(__name__)

FIXED_SEP = '  '
SCALED_SEP = ' '

def sdims(m):
    """Return the dimensions of ``m`` as ``"<rows>x<cols>"``"""
    rows, cols = as_matrix(m).shape
    return f"{rows}x{cols}"

def scale_exponent(m):
    """Return the power of ten of the entry of ``m`` with the largest
    absolute value. This is used as a common scale factor so that all the
    entries can be shown as mantissas of similar size.

    Empty matrices and matrices without any finite nonzero entry have
    exponent 0.
    """
    m = as_matrix(m)
    if m.size == 0:
        return 0
    absm = np.abs(m)
    absm = absm[np.isfinite(absm) & (absm != 0)]
    if absm.size == 0:
        return 0
    return math.floor(math.log10(absm.max()))

def format_fixed(decimals, m):
    decimals = check_decimals(decimals)
    return format_matrix(FIXED_SEP, lambda x: fixed(x, decimals), m)

def format_scaled(decimals, m):
    """Return ``"E<exponent>"`` followed by the entries of ``m`` divided by
    ``10**exponent``, where the exponent is given by ``scale_exponent``."""
    decimals = check_decimals(decimals)
    m = as_matrix(m)
    o = scale_exponent(m)
    scaled = _rescale(m, o)
    fmt = '%{}.{}f'.format(decimals + 3, decimals)
    return f"E{o}\n" + format_matrix(SCALED_SEP, lambda x: fmt % x, scaled)

def _rescale(m, o):
    if o >= 0:
        return m / np.power(10.0, o)
    # 10**-o overflows a double for subnormal entries, so scale in two steps
    step = min(-o, 300)
    return m * np.power(10.0, step) * np.power(10.0, -o - step)

def dispf(decimals, m):
    """Show a matrix with a given number of decimal places. Matrices where
    every entry is an integer are shown without decimals.

    >>> print(dispf(2, np.arange(1, 7.5, 0.5).reshape(3, 4)), end='')
    3x4
    1.00  1.50  2.00  2.50
    3.00  3.50  4.00  4.50
    5.00  5.50  6.00  6.50
    """
    m = as_matrix(m)
    d = 0 if is_int(m) else decimals
    return sdims(m) + "\n" + format_fixed(d, m)

def disps(decimals, m):
    """Show a matrix with "autoscaling" and a given number of decimal places.

    >>> print(disps(2, 120*np.arange(1, 13.).reshape(3, 4)), end='')
    3x4  E3
     0.12  0.24  0.36  0.48
     0.60  0.72  0.84  0.96
     1.08  1.20  1.32  1.44
    """
    m = as_matrix(m)
    return sdims(m) + "  " + format_scaled(decimals, m)

def dispcf(decimals, m):
    """Show a complex matrix with at most ``decimals`` decimal places."""
    m = as_matrix(m)
    decimals = check_decimals(decimals)
    return (sdims(m) + "\n" +
            format_matrix(FIXED_SEP, lambda z: show_complex(z, decimals), m))

def dispframe(decimals, df):
    """Show a dataframe like ``dispf``, with the column labels as the first
    row and the index labels as the first column.

    >>> df = pd.DataFrame({'a': [1.5, 2.0], 'b': [10.25, 3.0]}, index=['x', 'y'])
    >>> print(dispframe(2, df), end='')
    2x2
          a      b
    x  1.50  10.25
    y  2.00   3.00
    """
    if not isinstance(df, pd.DataFrame):
        df = pd.DataFrame(df)
    m = df.to_numpy(dtype=float)
    log.debug("Displaying dataframe of shape %s", m.shape)
    d = check_decimals(0 if is_int(m) else decimals)
    header = [''] + [str(col) for col in df.columns]
    body = [[str(label)] + [fixed(x, d) for x in row]
            for label, row in zip(df.index, m)]
    return sdims(m) + "\n" + table(FIXED_SEP, [header, *body])

def vecdisp(f, v):
    """Show a vector using ``f``, a function that shows matrices, e.g.
    ``functools.partial(dispf, 2)``.

    >>> print(vecdisp(functools.partial(dispf, 2), np.linspace(0, 1, 10)), end='')
    10 |> 0.00  0.11  0.22  0.33  0.44  0.56  0.67  0.78  0.89  1.00
    """
    row = as_row(v)
    s = f(row)
    # Drop the dimensions header
    for i, c in enumerate(s):
        if c in ' \n':
            s = s[i+1:]
            break
    else:
        s = ''
    return f"{row.shape[1]} |> " + ' '.join(s.splitlines()) + "\n"

def latex_format(delim, formatted):
    """Convert the output of a display function such as ``dispf`` into a
    LaTeX environment named ``delim`` ("matrix", "bmatrix", "pmatrix",
    etc.). The first line, containing the dimensions, is discarded.

    >>> latex_format("bmatrix", dispf(2, np.eye(2)))
    '\\\\begin{bmatrix}\\n1  &  0\\n\\\\\\\\\\n0  &  1\\n\\\\end{bmatrix}'
    """
    lines = formatted.splitlines()[1:]
    rows = ["  &  ".join(line.split()) for line in lines]
    body = ''.join(row + '\n' for row in _intersperse(rows, '\\\\'))
    return "\\begin{%s}\n" % delim + body + "\\end{%s}" % delim

def _intersperse(items, sep):
    for i, item in enumerate(items):
        if i:
            yield sep
        yield item
