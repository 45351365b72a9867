from types import SimpleNamespace

from rich.pretty import pprint

from vibrating import *

__prog__ = "ExampleProgram"


if __name__ == '__main__':
    settings = SimpleNamespace(usage=False, flag=False, number=0, optional_string="default")

    files = invoke((
        Flag(settings, "usage", "Display usage string and exit", "usage", "u", helper=True),
        Flag(settings, "flag", "Set flag to true", "flag", "f"),
        Option(settings, "number", "A required integer parameter", "number", "n", required=True),
        Option(settings, "optional_string", "An optional string", "optional-string", "s"),
    ), prog=__prog__, positionals=True)

    pprint(settings)
    pprint(files)
