import pytest

from kbopt.common import comma, frac, perc, sorted_counts


@pytest.mark.parametrize("value", [0, 7, 42, 999, 1000, 65536, 1234567, 10**12])
def test_comma_round_trip(value):
    assert int(comma(value).replace(",", "")) == value


@pytest.mark.parametrize("value", [1000, 123456, 9876543210])
def test_comma_groups_of_three(value):
    groups = comma(value).split(",")
    assert 1 <= len(groups[0]) <= 3
    assert all(len(g) == 3 for g in groups[1:])


def test_comma_small_number_has_no_separator():
    assert "," not in comma(999)


def test_comma_pinned_value():
    assert comma(1234567) == "1,234,567"


def test_frac_two_decimals():
    assert frac(0.5) == "0.50"


@pytest.mark.parametrize("value", [0.0, 0.125, 0.5, 1.0, 0.03333])
def test_perc_matches_scaled_value(value):
    text = perc(value)
    assert text.endswith("%")
    assert float(text[:-1]) == pytest.approx(100 * value, abs=0.005)


def test_sorted_counts_descending_and_complete():
    counts = {"a": 3, "b": 10, "c": 1, "d": 7}
    result = sorted_counts(counts)
    assert dict(result) == counts
    values = [c for _, c in result]
    assert values == sorted(values, reverse=True)


def test_sorted_counts_none_is_empty():
    assert sorted_counts(None) == []


def test_sorted_counts_empty_mapping():
    assert sorted_counts({}) == []