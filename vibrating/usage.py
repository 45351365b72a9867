"""
Vibrating usage formatter.

Layout
    Usage: <program> [option]... [--] [<kind>]...
      -u --usage                   Display usage string and exit
      -f --flag                    Set flag to true
      -n --number int              A required integer parameter
      -s --optional-string string  An optional string (default: "default")

- One synopsis line, then one line per descriptor in declaration order.
- Columns: two-space indent, "-x" (or two spaces), " --long" (when present),
  " <type>" for value-bearing options, padding, help text.
- The help column starts at the same offset on every line: a first pass computes the
  widest "long + 1 + type" (or just "long" for flags), the second pass pads against it.
- Optional value-bearing options end with " (default: <value>)"; text defaults are
  double-quoted, numbers are not.

Rendering
- usage_text() builds a rich Text carrying styles; usage_string() is its plain text.
- print_usage() prints the styled text on a rich console.
- Palette entries may be overridden by a __styles__ mapping defined in __main__.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .arguments import collect
from .utils import Unset


def _width(option):
    """
    Display width of the long-name/type part of a descriptor line.
    """
    if option.reads_value:
        return len(option.long) + 1 + len(option.type_name)
    return len(option.long)


def _format_default(option):
    value = option.value
    if option.type is str:
        return '"%s"' % value
    if isinstance(value, float):
        # Six significant digits, as iostreams print doubles by default.
        return "%g" % value
    return str(value)


def usage_text(program, options, positionals=False, kind="file", *, colorful=True):
    """
    Build the usage/help text for `options` as a rich Text.

    Parameters
    - program: str
      Name shown in the synopsis line.
    - options: Iterable[Argument]
      The same descriptors used for parsing; they are only read.
    - positionals: bool
      Whether the synopsis advertises positional arguments.
    - kind: str
      Display name of the positional argument kind.
    - colorful: bool
      When False, no styles are attached.

    Returns
    - rich.text.Text ending with a newline.
    """
    options = collect(options)

    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",  # cyan headline
        "program-name": "bold #FF4D94",  # magenta-pink brand pop
        "option-name": "bold #00E6FF",  # cyan for value-bearing options
        "flag-name": "bold #22C55E",  # green for flags
        "type-name": "bold #FFD600",  # amber for value types
        "argument-description": "#9CA3AF",  # muted gray
        "default": "italic #737373",  # dim footer gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    text = Text()
    text.append("Usage", styler("usage-label")).append(": ")
    text.append(program, styler("program-name"))
    text.append(" [option]...")
    if positionals:
        text.append(" [--] [%s]..." % kind)
    text.append("\n")

    padding = max(map(_width, options), default=0)

    for option in options:
        style = styler("option-name" if option.reads_value else "flag-name")

        text.append("  ")
        if option.short:
            text.append("-" + option.short, style)
        else:
            text.append("  ")
        if option.long:
            text.append(" ").append("--" + option.long, style)
        if option.reads_value:
            text.append(" ").append(option.type_name, styler("type-name"))

        # Lines without a long name lack its " --" prefix, hence the wider gap.
        text.append(" " * (padding + (2 if option.long else 5) - _width(option)))
        text.append(option.help, styler("argument-description"))

        if option.reads_value and not option.required and option.value is not Unset:
            text.append(" ").append("(default: %s)" % _format_default(option), styler("default"))
        text.append("\n")

    return text


def usage_string(program, options, positionals=False, kind="file"):
    """
    Return the plain usage/help string for `options` (see usage_text()).
    """
    return usage_text(program, options, positionals, kind, colorful=False).plain


def print_usage(program, options, positionals=False, kind="file", *, console=Unset, colorful=True):
    """
    Print the usage/help text on `console` (a stdout rich Console by default).
    """
    if console is Unset:
        console = Console()
    console.print(
        usage_text(program, options, positionals, kind, colorful=colorful),
        end="",
        soft_wrap=True,
        highlight=False,
    )


__all__ = (
    "usage_text",
    "usage_string",
    "print_usage",
)
