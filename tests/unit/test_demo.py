"""
Тесты для demo driver

Проверяет:
1. Детерминизм генерации при фиксированном seed
2. Диапазон элементов [low, high)
3. Формат вывода run_demo (базовый и extended)
4. DemoConfig валидацию и CLI коды возврата
"""

import io
import logging
import random

import pytest

from src.core.domain import Matrix, OutOfRange
from src.demo import DemoConfig, random_matrix, run_demo
from src.demo.cli import main


# =============================================================================
# ТЕСТЫ: Generator
# =============================================================================


class TestRandomMatrix:
    """Тесты random_matrix"""

    def test_shape(self):
        mat = random_matrix(2, 4, random.Random(0))
        assert mat.shape == (2, 4)

    def test_seeded_is_deterministic(self):
        first = random_matrix(3, 3, random.Random(42))
        second = random_matrix(3, 3, random.Random(42))
        assert first.entries == second.entries

    def test_different_seeds_differ(self):
        first = random_matrix(3, 3, random.Random(1))
        second = random_matrix(3, 3, random.Random(2))
        assert first.entries != second.entries

    def test_entries_in_range(self):
        mat = random_matrix(10, 10, random.Random(7))
        assert all(1.0 <= x < 20.0 for x in mat.entries)

    def test_custom_range(self):
        mat = random_matrix(4, 4, random.Random(7), low=-1.0, high=1.0)
        assert all(-1.0 <= x < 1.0 for x in mat.entries)

    def test_invalid_range_raises(self):
        with pytest.raises(ValueError, match="low must be < high"):
            random_matrix(2, 2, random.Random(0), low=5.0, high=5.0)

    def test_negative_size_raises(self):
        with pytest.raises(OutOfRange):
            random_matrix(-1, 2, random.Random(0))


# =============================================================================
# ТЕСТЫ: DemoConfig
# =============================================================================


class TestDemoConfig:
    """Тесты DemoConfig"""

    def test_defaults(self):
        config = DemoConfig()
        assert (config.rows, config.cols) == (3, 3)
        assert (config.low, config.high) == (1.0, 20.0)
        assert config.seed is None
        assert not config.extended
        assert config.method == "cofactor"

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            DemoConfig(rows=-1)

    def test_bad_range(self):
        with pytest.raises(ValueError, match="low must be < high"):
            DemoConfig(low=3.0, high=2.0)

    def test_bad_method(self):
        with pytest.raises(ValueError, match="method must be one of"):
            DemoConfig(method="qr")


# =============================================================================
# ТЕСТЫ: run_demo
# =============================================================================


class TestRunDemo:
    """Тесты run_demo"""

    def test_basic_output(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(seed=5), random.Random(5), out)

        text = out.getvalue()
        assert report.ok
        assert report.second is None
        assert text.startswith(str(report.first) + "\n")
        assert text.endswith("\n")
        assert "det(mat) = " in text

    def test_printed_matrix_parses_back(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(), random.Random(9), out)

        matrix_text = out.getvalue().split("\n\n")[0] + "\n"
        assert Matrix.parse(matrix_text).entries == report.first.entries

    def test_det_matches_report(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(method="lu"), random.Random(3), out)
        assert report.det.operation == "det_lu"
        assert report.det.value == pytest.approx(report.first.det())

    def test_cofactor_run_records_lu_reference(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(), random.Random(7), out)

        assert report.det.operation == "det"
        assert report.det_reference == report.first.det_lu()
        assert report.first.det() == pytest.approx(report.det_reference, rel=1e-9)

    def test_lu_run_has_no_reference(self):
        report = run_demo(DemoConfig(method="lu"), random.Random(7), io.StringIO())
        assert report.det_reference is None

    def test_det_mismatch_is_logged(self, monkeypatch, caplog):
        """Расхождение методов логируется, но не ломает запуск"""
        monkeypatch.setattr("src.demo.runner.is_close", lambda *args, **kwargs: False)

        with caplog.at_level(logging.WARNING, logger="densemat.demo"):
            report = run_demo(DemoConfig(), random.Random(7), io.StringIO())

        assert report.ok
        assert report.det_reference == report.first.det_lu()
        assert "det mismatch" in caplog.text

    def test_extended_output(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(extended=True), random.Random(11), out)

        text = out.getvalue()
        assert report.ok
        assert "mat + mat2 =\n" in text
        assert "mat * mat2 =\n" in text
        assert report.sum.value == report.first.add(report.second)
        assert report.product.value == report.first.mul(report.second)

    def test_non_square_reports_errors(self):
        out = io.StringIO()
        report = run_demo(DemoConfig(rows=2, cols=3, extended=True), random.Random(0), out)

        text = out.getvalue()
        assert not report.ok
        assert "det(mat) undefined: det requires a square matrix" in text
        # Второй операнд 3x2: сумма несовместима, strict-произведение допустимо
        assert "mat + mat2 undefined" in text
        assert report.det_reference is None
        assert report.product.ok
        assert report.product.value.shape == (2, 2)


# =============================================================================
# ТЕСТЫ: CLI
# =============================================================================


class TestCLI:
    """Тесты main()"""

    def test_default_run(self, capsys):
        assert main(["--seed", "1"]) == 0
        captured = capsys.readouterr()
        assert "det(mat) = " in captured.out

    def test_seed_is_reproducible(self, capsys):
        main(["--seed", "123", "--extended"])
        first = capsys.readouterr().out
        main(["--seed", "123", "--extended"])
        second = capsys.readouterr().out
        assert first == second

    def test_invalid_range_exit_code(self):
        assert main(["--low", "5", "--high", "1"]) == 2

    def test_non_square_exit_code(self, capsys):
        assert main(["--rows", "2", "--cols", "3", "--seed", "0"]) == 2
        assert "undefined" in capsys.readouterr().out

    def test_unknown_method_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["--method", "qr"])
