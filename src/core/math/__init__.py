"""
Core math modules для densemat

Численные примитивы, алгоритмы определителя и текстовый формат матрицы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT,
    # Float comparisons
    entries_close,
    is_close,
    is_valid_float,
    is_zero,
    # Validation
    validate_dimension,
    validate_index,
)

# Determinant
from src.core.math.determinant import (
    det_cofactor,
    det_lu,
    require_square,
)

# Rendering
from src.core.math.rendering import (
    format_entry,
    parse_matrix_text,
    render_entries,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT",
    # Numerical Safeguards — Float comparisons
    "entries_close",
    "is_close",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — Validation
    "validate_dimension",
    "validate_index",
    # Determinant
    "det_cofactor",
    "det_lu",
    "require_square",
    # Rendering
    "format_entry",
    "parse_matrix_text",
    "render_entries",
]
