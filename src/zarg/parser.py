"""
zarg parser - turns a list of command-line tokens into a dict of typed options.

The parser makes a single left-to-right pass over the tokens. Flags found in
the option specification are coerced with their descriptor, everything else
lands in the ``"_"`` list of positionals, and a bare ``--`` ends option
scanning for the rest of the input.

Example:
    from zarg import Boolean, Number, String, parse

    args = parse(
        ["--port", "8080", "-v", "serve"],
        {"--port": Number, "--verbose": Boolean, "-v": "--verbose"},
    )
    # {"_": ["serve"], "--port": 8080, "--verbose": True}
"""

import logging
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, Union

from result import Err, Ok, Result

from .errors import ArgError, MissingArgumentError, UnknownOptionError
from .options import OptionSpec

logger = logging.getLogger(__name__)

UnknownHandler = Callable[[str], Any]
SpecLike = Union[Mapping[str, Any], OptionSpec]

LITERAL_SEPARATOR = "--"


def default_argv() -> list[str]:
    """
    Return the arguments of the running process, without the script path.
    """
    return list(sys.argv[1:])


def _looks_like_flag(token: str) -> bool:
    # The standalone "-" is conventionally stdin/stdout, so it is a value
    return len(token) > 1 and token.startswith("-")


def _split_inline(token: str) -> tuple[str, Optional[str]]:
    """Split ``--name=value`` at the first '='; other tokens have no inline value."""
    if token.startswith("--") and "=" in token:
        flag, value = token.split("=", 1)
        return flag, value
    return token, None


def _scan(
    argv: Sequence[str], options: OptionSpec, on_unknown: Optional[UnknownHandler]
) -> dict[str, Any]:
    """
    Run the tokenizer over an explicit argument list.

    The accumulator is local to this call and only returned if the whole scan
    succeeds.
    """
    result: dict[str, Any] = {"_": []}
    positionals: list[str] = result["_"]

    index = 0
    while index < len(argv):
        token = argv[index]
        index += 1

        if token == LITERAL_SEPARATOR:
            logger.debug("literal mode after position %d", index - 1)
            positionals.extend(argv[index:])
            break

        if not _looks_like_flag(token):
            positionals.append(token)
            continue

        flag, inline = _split_inline(token)
        resolved = options.resolve(flag)

        if resolved is None:
            if on_unknown is None:
                raise UnknownOptionError(flag)
            value = on_unknown(flag)
            if value is None:
                logger.debug("unknown option %s kept as positional", flag)
                positionals.append(token)
            else:
                logger.debug("unknown option %s stored by handler", flag)
                result[flag] = value
            continue

        canonical, descriptor = resolved

        if not descriptor.takes_value:
            value = descriptor.coerce(inline, canonical)
        elif inline is not None:
            value = descriptor.coerce(inline, canonical)
        else:
            if index >= len(argv) or _looks_like_flag(argv[index]):
                raise MissingArgumentError(flag, canonical)
            value = descriptor.coerce(argv[index], canonical)
            logger.debug("%s consumed %r", flag, argv[index])
            index += 1

        if descriptor.array:
            result.setdefault(canonical, []).append(value)
        else:
            result[canonical] = value

    return result


class Parser:
    """
    A reusable command-line parser built from an option specification.

    The specification is validated once, in the constructor, so a malformed
    descriptor or alias fails before any argument is looked at.

    Example:
        parser = Parser({"--foo": Number, "-f": "--foo"})
        args = parser.parse(["-f", "3", "rest"])
        # {"_": ["rest"], "--foo": 3}
    """

    def __init__(
        self,
        spec: Optional[SpecLike] = None,
        on_unknown: Optional[UnknownHandler] = None,
    ) -> None:
        """
        Args:
            spec: Flag name to type descriptor or alias target. May be omitted.
            on_unknown: Called with the flag name of every unknown flag. A
                non-None return value is stored under that name; None puts the
                token into the positionals. Without a handler unknown flags
                raise ``UnknownOptionError``.
        """
        if on_unknown is not None and not callable(on_unknown):
            raise TypeError("on_unknown must be callable")
        self.options: OptionSpec = spec if isinstance(spec, OptionSpec) else OptionSpec.compile(spec)
        self.on_unknown: Optional[UnknownHandler] = on_unknown

    def parse(self, args: Optional[Sequence[str]] = None) -> dict[str, Any]:
        """
        Parse command-line arguments.

        Args:
            args (Optional[Sequence[str]]): Tokens to parse. If None, uses sys.argv[1:].

        Returns:
            dict[str, Any]: ``"_"`` holds the positionals; every option seen is
            stored under its canonical name.

        Raises:
            UnknownOptionError: If a flag is not in the specification and there is no handler.
            MissingArgumentError: If a value-taking option has no value to consume.
        """
        argv = default_argv() if args is None else list(args)
        return _scan(argv, self.options, self.on_unknown)

    def safe_parse(self, args: Optional[Sequence[str]] = None) -> Result[dict[str, Any], str]:
        """
        Parse command-line arguments without raising on bad input.

        Args:
            args (Optional[Sequence[str]]): Tokens to parse. If None, uses sys.argv[1:].

        Returns:
            Result[dict[str, Any], str]:
                - Ok with the parse result,
                - Err with the error message if the arguments were rejected.
        """
        try:
            return Ok(self.parse(args))
        except ArgError as e:
            return Err(str(e))


def _normalize_call(
    spec: Any, on_unknown: Optional[UnknownHandler]
) -> tuple[Optional[SpecLike], Optional[UnknownHandler]]:
    # parse(argv, handler) passes the handler where the spec would go
    if on_unknown is None and callable(spec) and not isinstance(spec, (Mapping, OptionSpec)):
        return None, spec
    return spec, on_unknown


def parse(
    argv: Optional[Sequence[str]] = None,
    spec: Optional[Union[SpecLike, UnknownHandler]] = None,
    on_unknown: Optional[UnknownHandler] = None,
) -> dict[str, Any]:
    """
    Parse ``argv`` against ``spec`` in one call.

    Supported forms::

        parse(argv)
        parse(argv, spec)
        parse(argv, on_unknown)
        parse(argv, spec, on_unknown)

    When ``argv`` is None the process arguments are used.
    """
    spec, on_unknown = _normalize_call(spec, on_unknown)
    return Parser(spec, on_unknown).parse(argv)


def safe_parse(
    argv: Optional[Sequence[str]] = None,
    spec: Optional[Union[SpecLike, UnknownHandler]] = None,
    on_unknown: Optional[UnknownHandler] = None,
) -> Result[dict[str, Any], str]:
    """
    Like ``parse`` but returns ``Ok(result)`` or ``Err(message)``.

    Specification errors are reported the same way as argument errors.
    """
    try:
        spec, on_unknown = _normalize_call(spec, on_unknown)
        return Parser(spec, on_unknown).safe_parse(argv)
    except ArgError as e:
        return Err(str(e))
