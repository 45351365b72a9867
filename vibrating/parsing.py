"""
Vibrating argument parser: fill bound destinations from an argv-like token list.

Token classification (while no lone "--" has been seen)
- "--"                    end of options; consumed, every later token is positional.
- "-x" (x is not '-')     short option named "x".
- "--name" (3+ chars)     long option named "name".
- anything else           positional ("-", "", "value", ...).

Per option token
- unknown name            → UnknownOptionError
- already seen            → DuplicateOptionError (flags included)
- value-bearing option    → the next token is its value, taken verbatim even when it
                            looks like an option; none left → MissingValueError;
                            not convertible → InvalidValueError
- flag                    → destination set to True

After the last token every required option never seen is reported at once
(MissingRequiredError). Parsing is not transactional: destinations filled before a
failing token keep their new values.

Entry points
- parse(argv, options, positionals=None): raise the fault on failure.
- parse_arguments(argv, options, positionals=None): return "" on success or the
  displayable message of the fault.
"""
from collections import deque
from collections.abc import Sequence

from .arguments import collect
from .faults import *
from .matching import find_match


def _ordinal(number):
    """
    Return a human-friendly ordinal label for a 1-based position.
    """
    try:
        return ("first", "second", "third", "fourth", "fifth",
                "sixth", "seventh", "eighth", "ninth", "tenth")[number - 1]
    except IndexError:
        pass
    if 10 < number % 100 < 20:
        return f"{number}th"
    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def _option_name(token):
    """
    Return the option name carried by `token`, or None when it is not an option token.
    """
    if len(token) == 2 and token[0] == "-" and token[1] != "-":
        return token[1]
    if len(token) >= 3 and token.startswith("--"):
        return token[2:]
    return None


def _sanitize_argv(argv):
    if isinstance(argv, str) or not isinstance(argv, Sequence):
        raise TypeError("argv must be a sequence of strings (program name first)")
    for token in argv:
        if not isinstance(token, str):
            raise TypeError("argv must only contain strings")
    return argv


def parse(argv, options, positionals=None):
    """
    Parse `argv` against `options`, writing into the bound destinations.

    Parameters
    - argv: Sequence[str]
      Raw argument vector; argv[0] is the program name and is skipped.
    - options: Iterable[Argument]
      Ordered descriptors. Declaration order breaks ties between ambiguous names.
    - positionals: list[str] | None
      Receives positional arguments in encounter order. When None, any positional
      argument is an error.

    Raises
    - ArgumentFault: one of UnknownOptionError, DuplicateOptionError,
      MissingValueError, InvalidValueError, UnexpectedPositionalError,
      MissingRequiredError.
    - TypeError: malformed argv or options (caller programming error).
    """
    argv = _sanitize_argv(argv)
    options = collect(options)

    found = [False] * len(options)
    escaped = False

    tokens = deque(argv[1:])
    index = 0
    while tokens:
        token = tokens.popleft()
        index += 1

        if not escaped and token == "--":
            escaped = True
            continue

        if escaped or (name := _option_name(token)) is None:
            if positionals is None:
                raise UnexpectedPositionalError(
                    "Bare argument found: %s" % token,
                    token=token,
                    index=index,
                    hint="this program takes no positional arguments (%s position)" % _ordinal(index),
                )
            positionals.append(token)
            continue

        match = find_match(options, name)
        if not match.matched:
            raise UnknownOptionError(
                "Unrecognized option found: %s" % name,
                token=name,
                index=index,
                hint="check the spelling of %r (%s position)" % (token, _ordinal(index)),
            )
        if found[match.index]:
            raise DuplicateOptionError(
                "Duplicate option found: %s" % name,
                token=name,
                index=index,
                hint="give %s only once" % options[match.index].display_name,
            )
        found[match.index] = True

        if not match.reads_value:
            options[match.index].activate()
            continue

        try:
            value = tokens.popleft()
        except IndexError:
            raise MissingValueError(
                "No value for option %s" % name,
                token=name,
                index=index,
                hint="add a %s value after %r" % (options[match.index].type_name, token),
            ) from None
        index += 1

        if not match.fill(value):
            raise InvalidValueError(
                "Unable to parse value \"%s\" for option %s" % (value, name),
                token=name,
                index=index,
                hint="%s expects a %s value" % (options[match.index].display_name, options[match.index].type_name),
            )

    missing = [option.display_name for option, seen in zip(options, found) if option.required and not seen]
    if missing:
        raise MissingRequiredError(
            "".join("Missing required option \"%s\"\n" % name for name in missing),
            missing=missing,
            hint="supply %s" % ", ".join(missing),
        )


def parse_arguments(argv, options, positionals=None):
    """
    String facade over parse().

    Returns
    - str: "" on success, otherwise the complete, displayable error message.
    """
    try:
        parse(argv, options, positionals)
    except ArgumentFault as fault:
        return str(fault)
    return ""


__all__ = (
    "parse",
    "parse_arguments",
)
