import pytest

from app.services.analysis import AnalysisService
from app.services.statistics import compute_statistics, round_half_away


def test_median_even_and_odd():
    assert compute_statistics([1, 2, 3, 4])["median"] == 2.5
    assert compute_statistics([1, 3, 5])["median"] == 3


def test_mode_first_value_to_reach_max_count():
    assert compute_statistics([1, 1, 2, 2, 3])["mode"] == 1
    assert compute_statistics([5, 2, 2, 5, 1])["mode"] == 2


def test_mean_range_and_population_std():
    stats = compute_statistics([2, 4, 4, 4, 5, 5, 7, 9])

    assert stats["mean"] == 5
    assert stats["range"] == 7
    assert stats["standardDeviation"] == 2


def test_mean_equals_sum_over_count_rounded():
    values = [1.234, 5.678, 9.1011, 3.3]

    stats = compute_statistics(values)

    assert stats["mean"] == pytest.approx(round_half_away(sum(values) / len(values)))


def test_strings_are_not_coerced():
    assert compute_statistics(["1", "2", 3]) == {
        "mean": 3, "median": 3, "mode": 3, "range": 0, "standardDeviation": 0
    }


@pytest.mark.parametrize("values", [[], ["a", "1"], [float("nan")], [None, True]])
def test_no_numeric_values_returns_none(values):
    assert compute_statistics(values) is None


def test_outputs_rounded_to_two_decimals():
    stats = compute_statistics([1, 2, 2])

    assert stats["mean"] == 1.67
    assert stats["standardDeviation"] == 0.47


def test_round_half_away_from_zero():
    assert round_half_away(0.125) == 0.13
    assert round_half_away(-0.125) == -0.13
    assert round_half_away(2.675) == 2.68
    assert round_half_away(1.0) == 1.0
    assert round_half_away(float("inf")) == float("inf")


def test_analysis_service_uses_all_rows_for_statistics():
    rows = [{"x": i, "y": str(i)} for i in range(60)] + [{"x": 60, "y": "n/d"}]

    result = AnalysisService().run(
        rows, {"column": "x", "label": None}, {"column": "y", "label": None}, "bar"
    )

    assert len(result["chart_data"]["datasets"][0]["data"]) == 50
    assert result["chart_config"]["options"]["plugins"]["title"]["text"] == "y vs x"
    assert result["statistics"]["mean"] == 29.5
    assert result["statistics"]["range"] == 59


def test_analysis_service_statistics_none_when_column_not_numeric():
    rows = [{"x": "a", "y": "b"}]

    result = AnalysisService().run(
        rows, {"column": "x"}, {"column": "y"}, "pie"
    )

    assert result["statistics"] is None
    assert result["chart_data"]["labels"] == ["a"]


def test_infinite_values_are_ignored():
    assert compute_statistics([float("inf"), 2, float("-inf"), 4]) == {
        "mean": 3, "median": 3, "mode": 2, "range": 2, "standardDeviation": 1
    }
    assert compute_statistics([float("inf")]) is None


def test_analysis_service_treats_overflowing_text_as_zero():
    rows = [{"x": "a", "y": "1e999"}, {"x": "b", "y": "Infinity"}, {"x": "c", "y": 2}]

    result = AnalysisService().run(
        rows, {"column": "x"}, {"column": "y"}, "bar"
    )

    assert result["chart_data"]["datasets"][0]["data"] == [0, 0, 2]
    assert result["statistics"]["mean"] == 2
