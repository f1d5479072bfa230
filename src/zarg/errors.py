"""
Errors raised by zarg.

Every error carries a stable ``code`` string so callers can branch on the kind
of failure without matching message text. Specification errors are raised when
a ``Parser`` is built; argument errors are raised while scanning argv.
"""

from typing import Optional


class ArgError(Exception):
    """Base class for every error raised by zarg."""

    code: str = "ARG_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidDescriptorError(ArgError, TypeError):
    """A specification entry is not a usable type descriptor or alias."""

    code = "ARG_CONFIG_BAD_TYPE"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Type missing or not a function or valid array type: {flag}")
        self.flag = flag


class InvalidOptionNameError(ArgError, ValueError):
    """A specification key cannot ever match a flag token."""

    code = "ARG_CONFIG_BAD_KEY"

    def __init__(self, key: object) -> None:
        if isinstance(key, str) and key == "-":
            message = f"Option name must have a name after '-': {key}"
        else:
            message = f"Option name must be a string starting with '-': {key!r}"
        super().__init__(message)
        self.key = key


class InvalidAliasError(ArgError, ValueError):
    """An alias points at a missing option or at another alias."""

    code = "ARG_CONFIG_BAD_ALIAS"

    def __init__(self, flag: str, target: str, chained: bool = False) -> None:
        if chained:
            message = f"Alias chains are not supported: {flag} -> {target}"
        else:
            message = f"Alias target not found: {flag} (alias for {target})"
        super().__init__(message)
        self.flag = flag
        self.target = target


class UnknownOptionError(ArgError, ValueError):
    """A flag token has no specification entry and no handler was given."""

    code = "ARG_UNKNOWN_OPTION"

    def __init__(self, flag: str) -> None:
        super().__init__(f"Unknown or unexpected option: {flag}")
        self.flag = flag


class MissingArgumentError(ArgError, ValueError):
    """A value-taking option has nothing left to consume."""

    code = "ARG_MISSING_REQUIRED_ARG"

    def __init__(self, flag: str, canonical: Optional[str] = None) -> None:
        message = f"Option requires argument: {flag}"
        # Only mention the canonical name when an alias was typed
        if canonical is not None and canonical != flag:
            message += f" (alias for {canonical})"
        super().__init__(message)
        self.flag = flag
        self.canonical = canonical if canonical is not None else flag
