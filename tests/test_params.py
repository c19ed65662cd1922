from urllib.parse import parse_qs

import pytest

from fbgraph.params import IntParam, Param, StrParam, encode_params


def test_int_param_renders_decimal_text() -> None:
    assert IntParam("limit", 25).val() == "25"
    assert IntParam("offset", -3).val() == "-3"
    assert StrParam("q", "abc").val() == "abc"


def test_empty_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        StrParam("", "v")
    with pytest.raises(ValueError):
        IntParam("", 1)


def test_encode_includes_access_token_and_sorts_keys() -> None:
    encoded = encode_params("T", [StrParam("zeta", "1"), IntParam("alpha", 2)])

    assert encoded == "access_token=T&alpha=2&zeta=1"


def test_encode_round_trip() -> None:
    encoded = encode_params("T", [StrParam("k1", "v1")])

    assert parse_qs(encoded) == {"access_token": ["T"], "k1": ["v1"]}


def test_duplicate_keys_keep_last_value() -> None:
    params = [StrParam("k", "first"), IntParam("n", 1), StrParam("k", "second"), IntParam("n", 2)]

    parsed = parse_qs(encode_params("T", params))

    assert parsed == {"access_token": ["T"], "k": ["second"], "n": ["2"]}


def test_param_named_access_token_overrides_token() -> None:
    parsed = parse_qs(encode_params("T", [StrParam("access_token", "other")]))

    assert parsed == {"access_token": ["other"]}


def test_encode_escapes_form_values() -> None:
    encoded = encode_params("a/b=c", [StrParam("q", "a b&c"), StrParam("fields", "picture{url}")])

    assert encoded == "access_token=a%2Fb%3Dc&fields=picture%7Burl%7D&q=a+b%26c"


def test_encode_without_params() -> None:
    assert encode_params("T", []) == "access_token=T"


def test_param_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Param("k")


def test_custom_param_kind_renders_through_encoder() -> None:
    class BoolParam(Param):
        def __init__(self, key: str, value: bool):
            super().__init__(key)
            self.value = value

        def val(self) -> str:
            return "true" if self.value else "false"

    assert encode_params("T", [BoolParam("is_published", True)]) == "access_token=T&is_published=true"
