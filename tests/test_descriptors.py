import math

import pytest

from zarg import Boolean, Descriptor, Kind, Number, String, array_of, describe, parse


def test_builtin_descriptors_are_distinct_tags():
    assert String.kind is Kind.TEXT
    assert Number.kind is Kind.NUMBER
    assert Boolean.kind is Kind.FLAG
    assert len({String, Number, Boolean}) == 3


def test_only_boolean_skips_the_value():
    assert String.takes_value
    assert Number.takes_value
    assert not Boolean.takes_value


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1234", 1234),
        ("-12", -12),
        ("+7", 7),
        ("  42 ", 42),
        ("", 0),
        ("1.25", 1.25),
        ("1e3", 1000.0),
        ("0x10", 16),
        ("0b101", 5),
        ("0o17", 15),
        (".5", 0.5),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_number_coercion(raw, expected):
    assert Number.coerce(raw, "--n") == expected


@pytest.mark.parametrize(
    "raw", ["abc", "12abc", "0xZZ", "1_000", "-0x10", "+0b1", "inf", "infinity", "nan", "\u0661\u0662", "."]
)
def test_number_coercion_of_garbage_is_nan(raw):
    assert math.isnan(Number.coerce(raw, "--n"))


def test_string_coercion_is_identity():
    assert String.coerce("  spaced  ", "--s") == "  spaced  "


def test_boolean_coercion_ignores_raw():
    assert Boolean.coerce(None, "--b") is True
    assert Boolean.coerce("false", "--b") is True


def test_describe_builtin_shorthands():
    assert describe(str) == String
    assert describe(int) == Number
    assert describe(float) == Number
    assert describe(bool) == Boolean


def test_describe_custom_callable():
    def upper(raw, flag):
        return raw.upper()

    descriptor = describe(upper)
    assert descriptor.kind is Kind.CUSTOM
    assert descriptor.convert is upper
    assert not descriptor.array


def test_describe_arrays():
    assert describe([String]) == array_of(String)
    assert describe((Number,)) == array_of(Number)
    assert describe([bool]).array
    assert describe([bool]).kind is Kind.FLAG


@pytest.mark.parametrize("value", [10, None, "--alias", [], [String, Number], [[String]], [array_of(String)]])
def test_describe_rejects_everything_else(value):
    assert describe(value) is None


def test_array_of_rejects_invalid_base():
    with pytest.raises(TypeError):
        array_of(10)
    with pytest.raises(TypeError):
        array_of(array_of(String))


def test_descriptor_instances_work_in_spec():
    spec = {"--n": array_of(Number), "--name": str, "--quiet": bool}
    args = parse(["--n", "1", "--name", "x", "--n", "2", "--quiet"], spec)
    assert args == {"_": [], "--n": [1, 2], "--name": "x", "--quiet": True}


def test_custom_descriptor_receives_canonical_name():
    seen = []

    def record(raw, flag):
        seen.append((raw, flag))
        return raw

    parse(["-r", "v"], {"--record": Descriptor(Kind.CUSTOM, record), "-r": "--record"})
    assert seen == [("v", "--record")]


def test_descriptor_repr():
    assert repr(String) == "TEXT"
    assert repr(array_of(Number)) == "[NUMBER]"


def test_number_garbage_through_parse_is_nan():
    for raw in ("1_000", "-0x10", "inf", "infinity", "١٢"):
        # Inline so a leading "-" is not taken for a flag
        assert math.isnan(parse([f"--n={raw}"], {"--n": Number})["--n"])
