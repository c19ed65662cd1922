import pytest

from fbgraph.values import bool_value, dict_items, int_value, list_value, str_list, str_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [(4, 4), (4.0, 4), ("190", 190), (None, 0), (True, 0), ("4a", 0), ("-1", 0), (4.5, 0), ([1], 0)],
)
def test_int_value(value, expected) -> None:
    assert int_value(value) == expected


def test_zero_values_for_null_and_wrong_types() -> None:
    assert str_value(None) == ""
    assert str_value(5) == ""
    assert bool_value(None) is False
    assert bool_value("true") is False
    assert list_value(None) == []
    assert dict_items([{"a": 1}, None, "x"]) == [{"a": 1}]
    assert str_list(["a", None, 2, "b"]) == ["a", "b"]
