"""List adapter: reads codes out of a code-list container for the validators.

Validators never depend on the container itself. Anything that exposes its
codes in order through a `codes()` method works, as does a plain iterable of
code strings or of entry objects carrying a `code` attribute.
"""

from typing import Iterable, Iterator, Protocol, Union, runtime_checkable


@runtime_checkable
class SupportsCodes(Protocol):
    """Read-only, ordered view of the codes held by a list."""

    def codes(self) -> Iterable[str]:
        ...


CodeSource = Union[SupportsCodes, Iterable]


def iter_codes(source: CodeSource) -> Iterator[str]:
    """Yield every code of `source` in its natural order, duplicates included."""
    if isinstance(source, str):
        raise TypeError("Expected a code list or an iterable of codes, got a single string")

    if isinstance(source, SupportsCodes):
        yield from source.codes()
        return

    for item in source:
        if isinstance(item, str):
            yield item
        else:
            yield item.code
