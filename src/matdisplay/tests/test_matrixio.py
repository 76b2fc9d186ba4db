import pathlib
import tempfile

import numpy as np
import pytest
from hypothesis import given
from hypothesis.extra.numpy import arrays, array_shapes
from hypothesis.strategies import floats

from matdisplay.baseexceptions import ShapeError, ParseError, MatrixIOError
from matdisplay.matrixio import (scan_vector, apparent_cols, load_matrix,
                                 load_matrix_optional, save_matrix)

def write(tmp_path, text, name='m.txt'):
    p = tmp_path/name
    p.write_text(text)
    return p

def test_load(tmp_path):
    p = write(tmp_path, "\n   \n 1  2.5\t3\n4 5 6\n\n")
    assert apparent_cols(p) == 3
    np.testing.assert_array_equal(scan_vector(p), [1, 2.5, 3, 4, 5, 6])
    m = load_matrix(p)
    assert m.shape == (2, 3)
    np.testing.assert_array_equal(m, [[1, 2.5, 3], [4, 5, 6]])
    #Accepts str paths as well
    np.testing.assert_array_equal(load_matrix(str(p)), m)

def test_load_flat_reshape(tmp_path):
    p = write(tmp_path, "1 2 3\n4 5 6 7 8 9\n")
    np.testing.assert_array_equal(load_matrix(p),
                                  np.arange(1, 10.).reshape(3, 3))

def test_load_empty(tmp_path):
    p = write(tmp_path, "\n  \n")
    assert apparent_cols(p) == 0
    assert load_matrix(p).shape == (0, 0)

def test_shape_error(tmp_path):
    p = write(tmp_path, "1 2 3\n4 5 6\n7\n")
    with pytest.raises(ShapeError) as excinfo:
        load_matrix(p)
    e = excinfo.value
    assert (e.nelements, e.ncols) == (7, 3)
    msg = str(e)
    assert '7 elements' in msg
    assert '3 columns' in msg
    assert str(p) in msg
    assert isinstance(e, ValueError)

def test_parse_error(tmp_path):
    p = write(tmp_path, "1 2\n3 x\n")
    with pytest.raises(ParseError) as excinfo:
        load_matrix(p)
    assert excinfo.value.token == 'x'
    assert excinfo.value.index == 3
    assert isinstance(excinfo.value, MatrixIOError)
    with pytest.raises(ValueError):
        scan_vector(p)

def test_parse_rejects_non_numeric_spellings(tmp_path):
    for i, bad in enumerate(['1_000', 'infinity', '0x10', '1e', '.']):
        p = write(tmp_path, f"1 2\n3 {bad}\n", f"bad{i}")
        with pytest.raises(ParseError) as excinfo:
            load_matrix(p)
        assert excinfo.value.token == bad
        assert excinfo.value.index == 3

def test_parse_special_values(tmp_path):
    p = write(tmp_path, "nan -inf\n+1.5e3 .25\n")
    m = load_matrix(p)
    assert np.isnan(m[0, 0])
    np.testing.assert_array_equal(m[0, 1:], [-np.inf])
    np.testing.assert_array_equal(m[1], [1500, 0.25])

def test_parse_error_undecodable(tmp_path):
    p = tmp_path/'bytes.txt'
    p.write_bytes(b"1 2\n3 4\xff5\n")
    with pytest.raises(ParseError) as excinfo:
        load_matrix(p)
    assert excinfo.value.index == 3
    assert excinfo.value.token == "4\ufffd5"

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path/'nope.txt')

def test_load_optional(tmp_path):
    assert load_matrix_optional(tmp_path/'nope.txt') is None
    assert load_matrix_optional(write(tmp_path, "1 2\n3\n", 'a')) is None
    assert load_matrix_optional(write(tmp_path, "1 2\nz 3\n", 'b')) is None
    np.testing.assert_array_equal(
        load_matrix_optional(write(tmp_path, "1 2\n3 4\n", 'c')),
        [[1, 2], [3, 4]])

def test_save_fixed(tmp_path):
    p = tmp_path/'out.txt'
    m = np.array([[1.25, -3.5], [0, 10.75]])
    save_matrix(p, m, decimals=2)
    assert p.read_text() == "1.25 -3.50\n0.00 10.75\n"
    np.testing.assert_array_equal(load_matrix(p), m)

def test_save_aligned(tmp_path):
    p = tmp_path/'out.txt'
    m = np.array([[1, -10], [100, 2]])
    save_matrix(p, m, decimals=0)
    assert p.read_text() == "  1 -10\n100   2\n"
    np.testing.assert_array_equal(load_matrix(p), m)

def test_save_default(tmp_path):
    p = tmp_path/'out.txt'
    save_matrix(p, [[1, 2], [3, 4]])
    assert p.read_text() == "1.0 2.0\n3.0 4.0\n"

@given(arrays(np.float64,
              array_shapes(min_dims=2, max_dims=2, min_side=1, max_side=6),
              elements=floats(allow_nan=False)))
def test_roundtrip(m):
    with tempfile.TemporaryDirectory() as d:
        p = pathlib.Path(d)/'m.txt'
        save_matrix(p, m)
        res = load_matrix(p)
    assert res.shape == m.shape
    np.testing.assert_array_equal(res, m)
