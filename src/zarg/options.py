"""
Compiled option specifications.

A raw specification is a plain mapping of flag name to either a type
descriptor or the name of another flag (an alias). ``OptionSpec.compile``
validates the whole mapping up front and turns each entry into a ``Direct`` or
an ``Alias`` so the parser only ever does one dictionary lookup per flag.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional, Union

from .descriptors import Descriptor, describe
from .errors import InvalidAliasError, InvalidDescriptorError, InvalidOptionNameError


@dataclasses.dataclass(frozen=True)
class Direct:
    descriptor: Descriptor


@dataclasses.dataclass(frozen=True)
class Alias:
    target: str


Entry = Union[Direct, Alias]


def _check_name(key: Any) -> None:
    if not isinstance(key, str) or not key.startswith("-"):
        raise InvalidOptionNameError(key)
    if key == "-":
        raise InvalidOptionNameError(key)


class OptionSpec:
    """
    A validated, read-only option specification.

    Use ``OptionSpec.compile(mapping)`` rather than the constructor.
    """

    def __init__(self, entries: dict[str, Entry]) -> None:
        self._entries = entries

    @classmethod
    def compile(cls, spec: Optional[Mapping[str, Any]] = None) -> "OptionSpec":
        """
        Validate a raw specification mapping.

        Args:
            spec (Optional[Mapping[str, Any]]): Flag name to descriptor or alias
                target. None is the same as an empty mapping.

        Returns:
            OptionSpec: The compiled specification.

        Raises:
            InvalidOptionNameError: If a key is not a flag name.
            InvalidDescriptorError: If a value is neither a descriptor nor a string.
            InvalidAliasError: If an alias points at a missing entry or at another alias.
        """
        if spec is None:
            spec = {}
        if not isinstance(spec, Mapping):
            raise TypeError(f"option specification must be a mapping, not {type(spec).__name__}")

        entries: dict[str, Entry] = {}
        for key, value in spec.items():
            _check_name(key)
            if isinstance(value, str):
                entries[key] = Alias(value)
                continue
            descriptor = describe(value)
            if descriptor is None:
                raise InvalidDescriptorError(key)
            entries[key] = Direct(descriptor)

        # Aliases are resolved exactly one hop, so check them once every key is known
        for key, entry in entries.items():
            if isinstance(entry, Alias):
                target = entries.get(entry.target)
                if target is None:
                    raise InvalidAliasError(key, entry.target)
                if isinstance(target, Alias):
                    raise InvalidAliasError(key, entry.target, chained=True)

        return cls(entries)

    def resolve(self, flag: str) -> Optional[tuple[str, Descriptor]]:
        """
        Look up a flag, following an alias to its canonical entry.

        Returns:
            Optional[tuple[str, Descriptor]]: ``(canonical_name, descriptor)``,
            or None if the flag is not in the specification.
        """
        entry = self._entries.get(flag)
        if entry is None:
            return None
        if isinstance(entry, Alias):
            canonical = entry.target
            target = self._entries.get(canonical)
            # Only reachable for entries built without compile()
            if not isinstance(target, Direct):
                raise InvalidAliasError(flag, canonical, chained=target is not None)
            return canonical, target.descriptor
        return flag, entry.descriptor

    def __contains__(self, flag: object) -> bool:
        return flag in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def canonical_names(self) -> tuple[str, ...]:
        return tuple(key for key, entry in self._entries.items() if isinstance(entry, Direct))

    @property
    def aliases(self) -> dict[str, str]:
        return {key: entry.target for key, entry in self._entries.items() if isinstance(entry, Alias)}

    def __repr__(self) -> str:
        return f"OptionSpec({self._entries!r})"
