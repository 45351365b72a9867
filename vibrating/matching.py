"""
Vibrating matcher: map an option name to the descriptor it addresses.
"""
from typing import Callable, NamedTuple


class Match(NamedTuple):
    """
    Outcome of looking up one option name.

    - matched: whether a descriptor was found.
    - reads_value: whether the descriptor consumes the next token (meaningless if not matched).
    - index: position of the descriptor in the option tuple (-1 if not matched).
    - fill: converter writing a text token into the destination, returning success;
      None for presence-only descriptors.
    """
    matched: bool
    reads_value: bool
    index: int
    fill: Callable[[str], bool] | None


NO_MATCH = Match(False, False, -1, None)


def find_match(options, name, /):
    """
    Return the Match of the first descriptor, in declaration order, addressed by `name`.

    `name` is the option token stripped of its leading dashes. Duplicate names across
    descriptors are not detected; the earliest declaration wins.
    """
    for index, option in enumerate(options):
        if option.matches(name):
            if option.reads_value:
                return Match(True, True, index, option.fill)
            return Match(True, False, index, None)
    return NO_MATCH


__all__ = (
    "Match",
    "NO_MATCH",
    "find_match",
)
