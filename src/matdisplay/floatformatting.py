"""
floatformatting.py

Tools to format real and complex numbers. Whole numbers are shown without
decimals, which is decided numerically rather than by inspecting strings.
"""
import math

import numpy as np

from matdisplay.utils import check_decimals

def fixed(value, decimals):
    """Return ``value`` in fixed point notation with exactly ``decimals``
    digits after the point (i.e. ``printf("%.<decimals>f")``)."""
    return '%.*f' % (check_decimals(decimals), value)

def looks_like_int(value):
    """Return whether ``value`` is a finite number with no fractional part.
    Negative zero counts as an integer."""
    value = float(value)
    return math.isfinite(value) and value.is_integer()

def is_int(m):
    """Return whether all the entries of ``m`` look like integers. Matrices
    displayed with ``dispf`` are shown without decimals if this is true."""
    return all(looks_like_int(x) for x in np.ravel(m))

def is_zero(value):
    return value == 0

def is_one(value):
    return abs(value) == 1

def _show_component(value, decimals):
    if looks_like_int(value):
        return fixed(value, 0)
    return fixed(value, decimals)

def show_complex(z, decimals):
    """Return a compact representation of the complex number ``z``, with
    at most ``decimals`` digits after the point in each component.
    Components that are zero are omitted and unit imaginary parts are shown
    as a bare ``i``:

    >>> show_complex(2-3j, 2)
    '2-3i'
    >>> show_complex(0.5+1j, 2)
    '0.50+i'
    """
    a, b = z.real, z.imag
    sa = _show_component(a, decimals)
    sb = _show_component(b, decimals)
    if is_zero(a) and is_zero(b):
        return "0"
    if is_zero(b):
        return sa
    if is_zero(a) and is_one(b):
        return ("-" if b < 0 else "") + "i"
    if is_zero(a):
        return sb + "i"
    if is_one(b):
        return sa + ("-" if b < 0 else "+") + "i"
    return sa + ("" if b < 0 else "+") + sb + "i"
