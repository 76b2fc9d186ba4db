"""
matdisplay: human readable rendering of numeric matrices and a simple
loader and saver for ASCII tables.
"""
from matdisplay.baseexceptions import (MatDisplayError, MatrixIOError,
                                       ShapeError, ParseError)
from matdisplay.floatformatting import (fixed, looks_like_int, is_int,
                                        show_complex)
from matdisplay.table import table, format_matrix
from matdisplay.display import (sdims, scale_exponent, format_fixed,
                                format_scaled, dispf, disps, dispcf, dispframe,
                                vecdisp, latex_format)
from matdisplay.matrixio import (scan_vector, apparent_cols, load_matrix,
                                 load_matrix_optional, save_matrix)
