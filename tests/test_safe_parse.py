import pytest
from result import Err, Ok

from zarg import Number, Parser, String, safe_parse


def test_safe_parse_ok():
    result = Parser({"--foo": Number}).safe_parse(["--foo", "3", "x"])
    assert isinstance(result, Ok)
    assert result.ok_value == {"_": ["x"], "--foo": 3}


def test_safe_parse_unknown_option_is_err():
    result = Parser({"--foo": Number}).safe_parse(["--bar"])
    assert isinstance(result, Err)
    assert result.err_value == "Unknown or unexpected option: --bar"


def test_safe_parse_missing_argument_is_err():
    result = safe_parse(["--foo"], {"--foo": String})
    assert isinstance(result, Err)
    assert result.err_value == "Option requires argument: --foo"


def test_module_safe_parse_reports_spec_errors():
    result = safe_parse([], {"--foo": 10})
    assert isinstance(result, Err)
    assert result.err_value == "Type missing or not a function or valid array type: --foo"


def test_module_safe_parse_accepts_handler_as_second_argument():
    result = safe_parse(["--x", "y"], lambda flag: None)
    assert result == Ok({"_": ["--x", "y"]})


def test_safe_parse_does_not_swallow_handler_errors():
    def handler(flag):
        raise KeyError(flag)

    with pytest.raises(KeyError):
        Parser({}, handler).safe_parse(["--boom"])
