r"""
Vibrating option descriptors.

Overview
- Descriptors
  • Option: named, value-bearing option bound to a typed destination (e.g., -n/--number int).
  • Flag: named, presence-only switch bound to a boolean destination (e.g., -f/--flag).
  Both share the Argument interface so a heterogeneous, ordered collection of them
  can be matched, filled and rendered uniformly.

- Destinations
  • A descriptor does not own its value. It borrows write access to an attribute of a
    caller-owned object (a namespace, a dataclass instance, ...) or to a key of a
    caller-owned mutable mapping, for as long as the caller keeps using it.

- Introspection & representation
  • ArgumentType metaclass exposes the fields listed in __introspectable__ as read-only
    properties and provides stable __repr__/__rich_repr__ implementations.

Metadata (validated on construction)
- help: str, display text.
- long: str, may be empty; must not start with '-' nor contain whitespace.
- short: str of exactly one character, or empty for "none"; '-' is rejected.
- At least one of long/short is required for the descriptor to be addressable.
- Option only
  • type: int | uint | single | float | str; inferred from the bound value when omitted.
  • required: bool.
- Flag only
  • helper: bool, marks the flag that asks the runner to print usage and exit.
  • required is always False and the destination is reset to False on construction.

Quick example:
    >>> from types import SimpleNamespace
    >>> settings = SimpleNamespace(number=0, name="default", verbose=False)
    >>> options = (
    ...     Flag(settings, "verbose", "Talk more", "verbose", "v"),
    ...     Option(settings, "number", "A number", "number", "n", required=True),
    ...     Option(settings, "name", "A name", "name"),
    ... )

Public API
- Classes: Argument, Option, Flag
- Helpers: collect
"""
import builtins
import re
from collections.abc import Iterable, MutableMapping

from .conversions import parse_value, supports, type_name
from .utils import *


class _Binding:
    """
    Borrowed write access to one slot of caller-owned storage.

    The slot is an item when the target is a mutable mapping, an attribute otherwise.
    """
    __slots__ = ("_target", "_key")

    def __init__(self, target, key, /):
        if not isinstance(key, str):
            raise TypeError("destination name must be a string")
        self._target = target
        self._key = key

    def get(self, default=Unset, /):
        if isinstance(self._target, MutableMapping):
            return self._target.get(self._key, default)
        return getattr(self._target, self._key, default)

    def set(self, value, /):
        if isinstance(self._target, MutableMapping):
            self._target[self._key] = value
        else:
            setattr(self._target, self._key, value)

    def __repr__(self):
        return "%s.%s" % (type(self._target).__name__, self._key)


class ArgumentType(type):
    """
    Metaclass that turns descriptor classes into introspectable records.

    Responsibilities
    - Expose the names listed in __introspectable__ as read-only properties (mirror()).
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in construction error messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(long='number', short='n', help='A number', type=<class 'int'>, required=True)
            """
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join("%s=%r" % pair for pair in self.__rich_repr__()),
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers such as rich.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
            yield "destination", self._binding
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate the identity and documentation shared by every descriptor.

    Raises
    - TypeError: help/long/short are not strings, or both names are empty.
    - ValueError: a name is malformed.

    Notes
    - Mutates the provided metadata dict in place.
    """
    if not isinstance(metadata["help"], str):
        raise TypeError(f"{cls.__typename__} 'help' must be a string")

    if not isinstance(long := metadata["long"], str):
        raise TypeError(f"{cls.__typename__} 'long' must be a string")
    elif long.startswith("-"):
        raise ValueError(f"{cls.__typename__} 'long' must be given without leading dashes")
    elif re.search(r"\s", long):
        raise ValueError(f"{cls.__typename__} 'long' cannot contain whitespace")

    if not isinstance(short := metadata["short"], str):
        raise TypeError(f"{cls.__typename__} 'short' must be a string")
    elif short == "\0":
        short = ""
    elif len(short) > 1:
        raise ValueError(f"{cls.__typename__} 'short' must be a single character")
    elif short == "-" or short.isspace():
        raise ValueError(f"{cls.__typename__} 'short' must be a printable character other than '-'")
    metadata["short"] = short

    if not long and not short:
        raise TypeError(f"{cls.__typename__} must specify at least one name")


def _sanitize_typed_metadata(cls, metadata, binding, /):
    """
    Internal: resolve and validate the destination type of a value-bearing option.

    When 'type' is Unset it is inferred from the value currently bound, which must
    then exist. Booleans are rejected here: presence-only options are Flags.
    """
    if (type := metadata["type"]) is Unset:
        if (current := binding.get()) is Unset:
            raise TypeError(f"{cls.__typename__} 'type' cannot be inferred from an unset destination {binding!r}")
        type = builtins.type(current)

    if type is bool:
        raise TypeError(f"{cls.__typename__} cannot be boolean, declare a flag instead")
    elif not supports(type):
        raise TypeError(f"{cls.__typename__} 'type' must be one of int, uint, single, float or str")
    metadata["type"] = type
    metadata["required"] = bool(metadata["required"])


class Argument(metaclass=ArgumentType):
    """
    Common interface of every descriptor.

    Subclasses provide
    - reads_value: whether a matching token consumes the following token.
    - type: destination type.
    - helper: whether seeing the descriptor requests usage output.
    """
    reads_value = False
    helper = False
    type = Unset

    def matches(self, name, /):
        """
        Return True when `name` (already stripped of dashes) addresses this descriptor.

        A one-character name matches the short name; any name matches a non-empty long name.
        """
        return (len(name) == 1 and name == self._short) or (bool(self._long) and name == self._long)

    @property
    def type_name(self):
        return type_name(self.type)

    @property
    def value(self):
        """
        The value currently held by the destination (Unset when the slot does not exist).
        """
        return self._binding.get()

    @property
    def display_name(self):
        """
        "--long" when a long name exists, "-s" otherwise.
        """
        return "--" + self._long if self._long else "-" + self._short


class Option(Argument):
    """
    Named, value-bearing option bound to a typed destination.

    Properties
    - The names listed in __introspectable__ are exposed as read-only attributes.
    """
    __introspectable__ = (
        "long",
        "short",
        "help",
        "type",
        "required",
    )

    reads_value = True

    def __init__(self, target, attribute, help, long="", short="", *, type=Unset, required=False):
        """
        Construct an Option bound to `target.attribute` (or `target[attribute]`).

        Parameters
        - target: object | MutableMapping
          Caller-owned storage receiving the converted value.
        - attribute: str
          Attribute name (or mapping key) of the destination.
        - help: str
          Description shown in usage output.
        - long: str
          Long name without dashes ("" for none).
        - short: str
          Short name, one character ("" for none).
        - type: Unset | int | uint | single | float | str
          Destination type; inferred from the current destination value when Unset.
        - required: bool
          Whether parsing fails when the option is absent. The current destination
          value is displayed as the default of optional options.
        """
        binding = _Binding(target, attribute)
        metadata = {
            "help": help,
            "long": long,
            "short": short,
            "type": type,
            "required": required,
        }
        _sanitize_metadata(builtins.type(self), metadata)
        _sanitize_typed_metadata(builtins.type(self), metadata, binding)

        self._binding = binding
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    def fill(self, text, /):
        """
        Convert `text` and store it into the destination.

        Returns
        - bool: whether the conversion succeeded. The destination is left untouched
          on failure.
        """
        value, ok = parse_value(self._type, text)
        if ok:
            self._binding.set(value)
        return ok


class Flag(Argument):
    """
    Named, presence-only switch bound to a boolean destination.

    The destination is set to False on construction and becomes True only when
    the flag is seen. A flag is never required: its presence is its value.
    """
    __introspectable__ = (
        "long",
        "short",
        "help",
        "helper",
    )

    type = bool
    required = False

    def __init__(self, target, attribute, help, long="", short="", *, helper=False):
        binding = _Binding(target, attribute)
        metadata = {
            "help": help,
            "long": long,
            "short": short,
            "helper": bool(helper),
        }
        _sanitize_metadata(builtins.type(self), metadata)

        self._binding = binding
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        binding.set(False)

    def activate(self):
        """
        Record the presence of the flag in its destination.
        """
        self._binding.set(True)


def collect(options, /):
    """
    Freeze an ordered collection of descriptors into a tuple.

    Position within the tuple is the identity used while parsing.

    Raises
    - TypeError: `options` is not iterable or holds something other than descriptors.
    """
    if not isinstance(options, Iterable):
        raise TypeError("options must be an iterable of descriptors")
    options = tuple(options)
    for option in options:
        if not isinstance(option, Argument):
            raise TypeError("options must only contain Option or Flag descriptors, not %r" % builtins.type(option).__name__)
    return options


__all__ = (
    # Classes (descriptors)
    "Argument",
    "Option",
    "Flag",

    # Helpers
    "collect",
)

# Keep the metaclass out of star-imports and generated docs.
del ArgumentType
