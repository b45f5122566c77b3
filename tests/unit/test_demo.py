"""
Тесты для консольной демонстрации

Проверяет:
1. Четыре строки отчёта и их порядок
2. Значения 46 и 62.97 в каждой строке
3. Код возврата и флаг --verbose
"""

import logging

import pytest

from src.demo.main import DEMO_FLOATS, DEMO_INTS, format_report, main


@pytest.fixture
def restore_root_logging():
    """main() перенастраивает root логгер; восстанавливаем после теста."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


EXPECTED_PREFIXES = [
    "Non-Generic Sums: ",
    "Generic Sums: ",
    "Generic Sums, type parameters inferred: ",
    "Generic Sums with Constraint: ",
]


def _split_sums(line: str) -> tuple[str, float]:
    _, sums = line.split(": ", 1)
    int_part, float_part = sums.split(" and ")
    return int_part, float(float_part)


class TestFormatReport:
    """Тесты format_report"""

    def test_four_lines_in_order(self) -> None:
        lines = format_report(DEMO_INTS, DEMO_FLOATS)
        assert len(lines) == 4
        for line, prefix in zip(lines, EXPECTED_PREFIXES):
            assert line.startswith(prefix)

    def test_every_line_reports_same_sums(self) -> None:
        for line in format_report(DEMO_INTS, DEMO_FLOATS):
            int_part, float_value = _split_sums(line)
            assert int_part == "46"
            assert float_value == pytest.approx(62.97)

    def test_custom_collections(self) -> None:
        lines = format_report({"a": 1, "b": 2}, {"a": 0.5})
        assert lines[0] == "Non-Generic Sums: 3 and 0.5"
        assert lines[3] == "Generic Sums with Constraint: 3 and 0.5"

    def test_empty_collections(self) -> None:
        lines = format_report({}, {})
        assert lines[0] == "Non-Generic Sums: 0 and 0.0"
        assert lines[1] == "Generic Sums: 0 and 0.0"
        # Вывод type arguments для пустого mapping даёт int ноль
        assert lines[2] == "Generic Sums, type parameters inferred: 0 and 0"


class TestMain:
    """Тесты точки входа"""

    def test_prints_report(self, capsys, restore_root_logging) -> None:
        assert main([]) == 0

        out_lines = capsys.readouterr().out.splitlines()
        assert out_lines == format_report(DEMO_INTS, DEMO_FLOATS)

    def test_verbose_enables_debug(self, capsys, restore_root_logging) -> None:
        assert main(["--verbose"]) == 0
        assert logging.getLogger().level == logging.DEBUG

        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 4

    def test_unknown_flag_exits(self, restore_root_logging) -> None:
        with pytest.raises(SystemExit):
            main(["--bogus"])
