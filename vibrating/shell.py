"""
Vibrating runner: the conventional way a program reacts to the parse outcome.

Convention
- parse failure   → print the fault, then the usage text, on stderr; exit with status 1.
- helper flag     → print the usage text on stdout; exit with status 0.
- otherwise       → return the collected positional arguments and let the program run.

Outside shell mode (shell=False) the fault is raised instead of printed, which is what
tests and embedding applications usually want. The helper flag still exits with 0.

Quick start
    from types import SimpleNamespace
    from vibrating import Flag, Option, invoke

    settings = SimpleNamespace(usage=False, number=0)
    files = invoke((
        Flag(settings, "usage", "Display usage string and exit", "usage", "u", helper=True),
        Option(settings, "number", "A required integer", "number", "n", required=True),
    ), positionals=True)
"""
import os.path
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console

from .arguments import collect
from .faults import ArgumentFault, trigger
from .parsing import parse
from .usage import print_usage
from .utils import *


def _argv(prompt, prog):
    """
    Normalize a prompt into an argv list whose first item is the program name.

    - Unset: sys.argv.
    - str: shell-like string split via shlex.split, program name prepended.
    - Iterable[str]: used as-is (it must already start with the program name).
    """
    if prompt is Unset:
        return list(sys.argv) or [coalesce(prog, "")]
    elif isinstance(prompt, str):
        return [coalesce(prog, os.path.basename(sys.argv[0]) if sys.argv else ""), *shlex.split(prompt)]
    elif isinstance(prompt, Iterable):
        argv = list(prompt)
        for token in argv:
            if not isinstance(token, str):
                raise TypeError("invoke() prompt must be a string or an iterable of strings")
        return argv
    raise TypeError("invoke() prompt must be a string or an iterable of strings")


def invoke(
        options,
        prompt=Unset,
        /,
        *,
        prog=Unset,
        positionals=False,
        kind="file",
        shell=True,
        fancy=False,
        colorful=True,
        console=Unset,
):
    """
    Parse a prompt against `options` and apply the exit-code convention.

    Parameters
    - options: Iterable[Argument]
      Ordered descriptors; a Flag declared with helper=True requests the usage text.
    - prompt: Unset | str | Iterable[str]
      See _argv(). A string holds only the arguments; a list starts with the program name.
    - prog: Unset | str
      Program name shown in usage and faults (defaults to the basename of argv[0]).
    - positionals: bool
      Whether positional arguments are accepted (and advertised in usage).
    - kind: str
      Display name of positional arguments in usage.
    - shell: bool
      Print-and-exit on failure when True; raise the fault when False.
    - fancy / colorful: bool
      Rendering switches for faults and usage.
    - console: Unset | rich.console.Console
      Console used for every output; by default faults go to stderr, usage on
      success to stdout.

    Returns
    - list[str] | None: positional arguments in encounter order, None when disabled.

    Raises
    - ArgumentFault: on failure when shell is False.
    - SystemExit: status 1 on failure in shell mode, status 0 after printing usage
      for a helper flag.
    """
    argv = _argv(prompt, prog)
    prog = coalesce(prog, os.path.basename(argv[0]) if argv else "")
    options = collect(options)
    collected = [] if positionals else None

    try:
        parse(argv, options, collected)
    except ArgumentFault as fault:
        errors = Console(stderr=True) if console is Unset else console
        trigger(fault, prog=prog, shell=shell, fancy=fancy, colorful=colorful, console=errors, deferred=True)
        print_usage(prog, options, positionals, kind, console=errors, colorful=colorful)
        sys.exit(1)

    if any(option.helper and option.value is True for option in options):
        print_usage(prog, options, positionals, kind, console=Console() if console is Unset else console, colorful=colorful)
        sys.exit(0)

    return collected


__all__ = (
    "invoke",
)
