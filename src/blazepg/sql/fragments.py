"""
Joining of conditional SQL fragments into one statement.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Union

Fragment = Union[str, None, Iterable["Fragment"]]


def join_sql_fragments(fragments: Iterable[Fragment]) -> str:
    """
    Join ``fragments`` with single spaces.

    ``None`` and blank fragments are dropped, nested iterables are
    flattened, and a bare ``;`` is attached to the fragment before it.
    """
    parts: List[str] = []
    for fragment in _flatten(fragments):
        text = fragment.strip()
        if not text:
            continue
        if text == ";" and parts:
            parts[-1] += ";"
            continue
        parts.append(text)
    return " ".join(parts)


def _flatten(fragments: Iterable[Fragment]) -> Iterator[str]:
    for fragment in fragments:
        if fragment is None:
            continue
        if isinstance(fragment, str):
            yield fragment
        else:
            yield from _flatten(fragment)
