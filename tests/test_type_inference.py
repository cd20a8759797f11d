from datetime import date, datetime

import pytest

from app.services.type_inference import ColumnType, infer_column_type, is_date_text
from app.services.values import display_label, is_number, parse_float


@pytest.mark.parametrize(
    "values, expected",
    [
        (["2023-01-01", "2023-02-01"], ColumnType.DATE),
        ([1, 2, 3], ColumnType.NUMBER),
        (["a", "b"], ColumnType.STRING),
        ([], ColumnType.STRING),
        (["1.5", "2", "-3e2"], ColumnType.NUMBER),
        (["15/03/2023", "01/12/2022"], ColumnType.DATE),
        ([datetime(2023, 1, 1), date(2023, 1, 2)], ColumnType.DATE),
    ],
)
def test_infer_column_type(values, expected):
    assert infer_column_type(values) == expected


def test_number_needs_strict_majority_over_dates():
    assert infer_column_type([1, "2023-01-01"]) == ColumnType.DATE
    assert infer_column_type([1, 2, "2023-01-01"]) == ColumnType.NUMBER


def test_only_first_ten_values_are_examined():
    values = ["a"] * 10 + [1, 2, 3, 4, 5]
    assert infer_column_type(values) == ColumnType.STRING


def test_blank_and_boolean_values_are_not_evidence():
    assert infer_column_type(["", None, True, False]) == ColumnType.STRING
    assert infer_column_type(["", None, "7"]) == ColumnType.NUMBER


def test_invalid_calendar_date_falls_back_to_number():
    # "2023-02-30" não é uma data válida, mas começa com um número
    assert infer_column_type(["2023-02-30"]) == ColumnType.NUMBER


def test_is_date_text():
    assert is_date_text("2023-01-01")
    assert is_date_text("2023-01-01T10:30:00")
    assert is_date_text("2023-01-01 10:30")
    assert is_date_text("31/12/2023 08:00:00.5")
    assert is_date_text("31/12/2023")
    assert is_date_text("12/31/2023")
    assert not is_date_text("2023-13-01")
    assert not is_date_text("31/31/2023")
    assert not is_date_text("em 2023-01-01")
    assert not is_date_text("janeiro")


def test_parse_float_reads_numeric_prefix():
    assert parse_float("12.5kg") == 12.5
    assert parse_float("  -3e2") == -300.0
    assert parse_float(".5") == 0.5
    assert parse_float("Infinity") is None
    assert parse_float("1e999") is None
    assert parse_float(float("inf")) is None
    assert parse_float(7) == 7.0
    assert parse_float("abc") is None
    assert parse_float(None) is None
    assert parse_float(True) is None
    assert parse_float(float("nan")) is None


def test_is_number():
    assert is_number(3)
    assert is_number(2.5)
    assert not is_number("3")
    assert not is_number(True)
    assert not is_number(float("nan"))
    assert not is_number(float("inf"))


def test_display_label():
    assert display_label(None) == "null"
    assert display_label(True) == "true"
    assert display_label(3.0) == "3"
    assert display_label(2.5) == "2.5"
    assert display_label("Norte") == "Norte"


def test_date_followed_by_free_text_is_not_a_date():
    assert not is_date_text("2023-01-01 qualquer coisa")
    assert not is_date_text("31/12/2023 fim")
    # O prefixo ainda é lido como número
    assert infer_column_type(["2023-01-01 qualquer coisa"]) == ColumnType.NUMBER


def test_display_label_extreme_magnitudes():
    assert display_label(1e20) == "100000000000000000000"
    assert display_label(1e21) == "1e+21"
    assert display_label(1.5e21) == "1.5e+21"
    assert display_label(1e-7) == "1e-7"
    assert display_label(0.000001) == "0.000001"
    assert display_label(-0.0) == "0"
    assert display_label(float("inf")) == "Infinity"
