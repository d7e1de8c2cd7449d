"""Tokenizer and the prefix-keyed argument multimap.

``tokenize("3f n/Amy Lee t/friend t/hr", Prefix.NAME, Prefix.TAG)`` gives
a multimap with preamble ``"3f"``, ``n/`` -> ``["Amy Lee"]`` and
``t/`` -> ``["friend", "hr"]``.

A prefix only counts at the start of the input or after whitespace, so
``bd/`` never matches as ``d/``.
"""

from __future__ import annotations

import re
from collections import defaultdict

from staffbook.errors import ParseError
from staffbook.messages import MESSAGE_DUPLICATE_FIELDS
from staffbook.parsing.syntax import Prefix


class ArgumentMultimap:
    """Maps each prefix to the values given for it, in input order."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: defaultdict[Prefix, list[str]] = defaultdict(list)

    def __repr__(self) -> str:
        values = {str(k): v for k, v in self._values.items()}
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={values!r})"

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_preamble(self) -> str:
        return self._preamble

    def has(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))

    def get_value(self, prefix: Prefix) -> str | None:
        """First value given for *prefix*, or None if absent."""
        values = self._values.get(prefix)
        return values[0] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, ()))

    def are_present(self, *prefixes: Prefix) -> bool:
        return all(self.has(prefix) for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise ParseError if any of *prefixes* was given more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, ())) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS.format(" ".join(duplicated)))


def _prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[tuple[int, Prefix]]:
    positions: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        pattern = re.compile(rf"(?:^|(?<=\s)){re.escape(prefix)}")
        positions.extend((m.start(), prefix) for m in pattern.finditer(args))
    positions.sort(key=lambda item: item[0])
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split *args* into a preamble and per-prefix values."""
    positions = _prefix_positions(args, prefixes)
    first = positions[0][0] if positions else len(args)
    multimap = ArgumentMultimap(args[:first].strip())

    for index, (start, prefix) in enumerate(positions):
        end = positions[index + 1][0] if index + 1 < len(positions) else len(args)
        multimap.put(prefix, args[start + len(prefix) : end].strip())
    return multimap
