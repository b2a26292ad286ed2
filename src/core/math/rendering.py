"""
Rendering — текстовое представление матрицы

Формат (line-oriented, bit-exact):
- entries в row-major порядке
- внутри строки элементы разделены одним пробелом
- каждая строка (включая последнюю) завершается '\\n'
- без выравнивания и padding

Форматирование элемента:
- кратчайшее round-trip представление в виде обычной десятичной записи,
  без экспоненты: 19.5 → "19.5", 1e-05 → "0.00001", 1e20 → "100000000000000000000"
- целые значения без дробной части: 1.0 → "1"
- знак нуля сохраняется: -0.0 → "-0"
- inf / -inf / nan → "inf" / "-inf" / "NaN"

Пример:
    [[1, 2], [3, 4]] → "1 2\\n3 4\\n"
"""

import math
from decimal import Decimal

from src.core.errors import DimensionMismatch
from src.core.math.numerical_safeguards import is_valid_float


def format_entry(value: float) -> str:
    """
    Форматирование одного элемента матрицы.

    Examples:
        >>> format_entry(1.0)
        '1'
        >>> format_entry(-0.5)
        '-0.5'
        >>> format_entry(2.5e-07)
        '0.00000025'
        >>> format_entry(-0.0)
        '-0'
        >>> format_entry(float("nan"))
        'NaN'
    """
    value = float(value)
    if not is_valid_float(value):
        return "NaN" if math.isnan(value) else repr(value)

    # repr даёт кратчайшие round-trip цифры, Decimal раскрывает экспоненту
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render_entries(entries: list[float], n: int) -> str:
    """
    Рендеринг row-major буфера шириной n.

    Args:
        entries: Flat-буфер длины m*n
        n: Количество столбцов

    Returns:
        Текст: m строк по n элементов, каждая строка завершается '\\n'.
        Пустая строка для m == 0 или n == 0.
    """
    if n == 0:
        return ""

    parts: list[str] = []
    for idx, value in enumerate(entries, start=1):
        # Перевод строки после каждого n-го элемента
        sep = "\n" if idx % n == 0 else " "
        parts.append(format_entry(value) + sep)
    return "".join(parts)


def parse_matrix_text(text: str) -> tuple[int, int, list[float]]:
    """
    Разбор текста в формате render_entries.

    Пустые строки игнорируются. Допускаются лишние пробелы в конце строки.

    Args:
        text: Текст матрицы

    Returns:
        (m, n, entries)

    Raises:
        DimensionMismatch: Если строки имеют разную длину
        ValueError: Если токен не является числом
    """
    rows: list[list[float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        try:
            rows.append([float(token) for token in tokens])
        except ValueError as e:
            raise ValueError(f"Invalid matrix entry on line {lineno}: {e}") from e

    if not rows:
        return 0, 0, []

    n = len(rows[0])
    for lineno, row in enumerate(rows, start=1):
        if len(row) != n:
            raise DimensionMismatch(
                f"Ragged matrix text: row {lineno} has {len(row)} entries, expected {n}"
            )

    entries = [value for row in rows for value in row]
    return len(rows), n, entries
