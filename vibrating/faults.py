"""
Vibrating faults (parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every parse failure.
- ArgumentFault: base exception carrying the displayable message plus read-only
  options, and knowing how to render itself through rich.
- trigger(): central entry point to surface a fault (print-and-exit in shell mode,
  raise otherwise).
- getdoc(): optional description lookup for a code from the host application.

Contract
- str(fault) is exactly the message a caller may display; the string facade
  parse_arguments() returns it unchanged.
- Exactly one fault is produced per failed parse. Missing required options are the
  only batched category: all of them are reported together by MissingRequiredError.

Integration
- The parser raises faults; the runner (vibrating.shell) triggers them with the
  current shell/fancy/colorful options so they are rendered on stderr.
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - options (1111x)
      • UNKNOWN_OPTION, DUPLICATED_OPTION, OPTION_VALUE_REQUIRED, INVALID_VALUE
    - positionals (1112x)
      • UNEXPECTED_POSITIONAL
    - completeness (1113x)
      • MISSING_REQUIRED_OPTIONS

    normalize() lets a host remap codes to custom labels through a __codes__ mapping
    defined in __main__.
    """
    # --- option errors ---
    UNKNOWN_OPTION           = 11112
    DUPLICATED_OPTION        = 11115
    OPTION_VALUE_REQUIRED    = 11117
    INVALID_VALUE            = 11119

    # --- positional errors ---
    UNEXPECTED_POSITIONAL    = 11121

    # --- completeness errors ---
    MISSING_REQUIRED_OPTIONS = 11131

    def normalize(self):
        """
        return a host-normalized string for this code.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentFault(Exception):
    """
    Base of every parse failure.

    Options (all optional, read-only once built)
    - token: the offending option name or argument.
    - hint: one actionable sentence shown under the message.
    - prog: program name shown in the rendered header.
    - shell / fancy / colorful / ratio / console / deferred: rendering switches used by trigger().
    - code / title: override the class defaults.
    """
    code = None
    title = "argument error"

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)
        # Options shadow the class-level defaults.
        if "code" in options:
            self.code = FaultCode(options["code"])
        if "title" in options:
            self.title = options["title"]

    def __str__(self):
        return self.message

    @property
    def token(self):
        return self.options.get("token")

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "docs": "underline #00E5FF dim",  # host documentation footer
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), style)

        prog = text(
            getattr(main, "__prog__", self.options.get("prog") or os.path.basename(sys.argv[0])),
            styler("prog-name"),
        )

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.code.normalize() if self.code is not None else "-", styler("code")),
            " | ",
            text(self.title.title(), styler("error-title")),
            " ]"
        )
        message = text(self.message.rstrip("\n"), styler("error-message"))
        parts = [message]
        if self.hint:
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.hint, styler("hint"))))
        if self.code is not None and (docs := getdoc(self.code)):
            parts.append(text(docs, styler("docs")))

        if self.options.get("fancy", False):
            width = self.options.get("console", console).width
            try:
                width = int(width * self.options["ratio"])
            except KeyError:
                width = None
            return Panel(Group(*parts), title=header, title_align="left", width=width)

        return Group(header, *parts)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        self.options.get("console", console).print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionError(ArgumentFault):
    code = FaultCode.UNKNOWN_OPTION
    title = "unknown option"


class DuplicateOptionError(ArgumentFault):
    code = FaultCode.DUPLICATED_OPTION
    title = "duplicated option"


class MissingValueError(ArgumentFault):
    code = FaultCode.OPTION_VALUE_REQUIRED
    title = "missing value"


class InvalidValueError(ArgumentFault):
    code = FaultCode.INVALID_VALUE
    title = "invalid value"


class UnexpectedPositionalError(ArgumentFault):
    code = FaultCode.UNEXPECTED_POSITIONAL
    title = "unexpected argument"


class MissingRequiredError(ArgumentFault):
    """
    Every required option that was never supplied, reported at once.

    The message holds one line per missing option; `missing` holds their display names.
    """
    code = FaultCode.MISSING_REQUIRED_OPTIONS
    title = "missing required options"

    @property
    def missing(self):
        return tuple(self.options.get("missing", ()))


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentFault).
    - options are merged into a copy of the fault via __replace__(**options) before triggering.
    - in shell mode the copy is printed on the console and the process exits with status 1,
      unless deferred is set, in which case control returns to the caller;
      otherwise the copy is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys are
    FaultCode instances and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ArgumentFault",
    "UnknownOptionError",
    "DuplicateOptionError",
    "MissingValueError",
    "InvalidValueError",
    "UnexpectedPositionalError",
    "MissingRequiredError",
    "trigger",
    "getdoc",
)
