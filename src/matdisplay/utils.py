"""
Collection of utilities needed in various parts of the library.
"""
import numpy as np

def as_matrix(m):
    """Return ``m`` as a two dimensional array. One dimensional inputs are
    interpreted as a single row, except empty ones, which give a ``0x0``
    matrix."""
    arr = np.asarray(m)
    if arr.ndim == 1:
        if arr.size == 0:
            return arr.reshape(0, 0)
        return arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"Expected a matrix, but got an array with "
                         f"{arr.ndim} dimensions.")
    return arr

def as_row(v):
    """Reshape the vector ``v`` into a ``1 x n`` matrix"""
    arr = np.asarray(v)
    if arr.ndim != 1:
        raise ValueError(f"Expected a vector, but got an array with "
                         f"{arr.ndim} dimensions.")
    return arr.reshape(1, -1)

def check_decimals(decimals):
    if int(decimals) != decimals or decimals < 0:
        raise ValueError(f"'decimals' must be a non negative integer, "
                         f"but it is {decimals!r}.")
    return int(decimals)
