"""
Descriptor behavioral tests.

Scope
- Validate Option construction: type inference, explicit types, rejected types.
- Validate Flag construction: destination reset, never required, helper marker.
- Validate name validation (at least one name, malformed short/long names).
- Validate destination binding on objects and mutable mappings.
- Validate matching, display names and read-only introspection.

Conventions
- Test method names follow CamelCase per project convention.
- Destinations are SimpleNamespace instances or plain dicts owned by each test.
"""

from __future__ import annotations

import unittest
from types import SimpleNamespace
from unittest import TestCase

from vibrating import Flag, Option, collect, single, uint


class TestOption(TestCase):
    """Behavioral tests for value-bearing options."""

    def setUp(self):
        self.settings = SimpleNamespace(number=0, ratio=0.5, name="default", verbose=False)

    def testTypeInferredFromDestination(self):
        self.assertIs(Option(self.settings, "number", "A number", "number", "n").type, int)
        self.assertIs(Option(self.settings, "ratio", "A ratio", "ratio").type, float)
        self.assertIs(Option(self.settings, "name", "A name", "name").type, str)

    def testExplicitType(self):
        option = Option(self.settings, "number", "A count", "count", type=uint)
        self.assertIs(option.type, uint)
        self.assertEqual(option.type_name, "uint")
        self.assertEqual(Option(self.settings, "ratio", "R", "ratio", type=single).type_name, "float")

    def testUnsetDestinationNeedsType(self):
        with self.assertRaises(TypeError):
            Option(self.settings, "missing", "Missing", "missing")
        option = Option(self.settings, "missing", "Missing", "missing", type=int)
        self.assertIs(option.type, int)

    def testBooleanDestinationRejected(self):
        with self.assertRaises(TypeError):
            Option(self.settings, "verbose", "Verbose", "verbose")

    def testUnsupportedTypeRejected(self):
        with self.assertRaises(TypeError):
            Option(self.settings, "number", "N", "number", type=list)

    def testRequiredDefaultsToFalse(self):
        self.assertFalse(Option(self.settings, "name", "A name", "name").required)
        self.assertTrue(Option(self.settings, "name", "A name", "name", required=True).required)

    def testFillConvertsAndStores(self):
        option = Option(self.settings, "number", "A number", "number", "n")
        self.assertTrue(option.fill("0x10"))
        self.assertEqual(self.settings.number, 16)

    def testFillFailureLeavesDestinationUntouched(self):
        option = Option(self.settings, "number", "A number", "number", "n")
        self.assertFalse(option.fill("12abc"))
        self.assertEqual(self.settings.number, 0)

    def testMappingDestination(self):
        target = {"level": 1}
        option = Option(target, "level", "A level", "level")
        self.assertEqual(option.value, 1)
        self.assertTrue(option.fill("3"))
        self.assertEqual(target, {"level": 3})

    def testValueReflectsDestination(self):
        option = Option(self.settings, "name", "A name", "name")
        self.settings.name = "changed"
        self.assertEqual(option.value, "changed")

    def testReadsValue(self):
        self.assertTrue(Option(self.settings, "name", "A name", "name").reads_value)


class TestFlag(TestCase):
    """Behavioral tests for presence-only flags."""

    def testDestinationResetToFalse(self):
        settings = SimpleNamespace(verbose=True)
        Flag(settings, "verbose", "Talk more", "verbose", "v")
        self.assertIs(settings.verbose, False)

    def testDestinationCreatedWhenAbsent(self):
        settings = SimpleNamespace()
        Flag(settings, "verbose", "Talk more", "verbose")
        self.assertIs(settings.verbose, False)

    def testNeverRequired(self):
        flag = Flag(SimpleNamespace(), "verbose", "Talk more", "verbose")
        self.assertFalse(flag.required)
        self.assertFalse(flag.reads_value)

    def testActivate(self):
        settings = SimpleNamespace()
        flag = Flag(settings, "verbose", "Talk more", "verbose")
        flag.activate()
        self.assertIs(settings.verbose, True)

    def testHelperMarker(self):
        self.assertTrue(Flag(SimpleNamespace(), "usage", "Usage", "usage", helper=True).helper)
        self.assertFalse(Flag(SimpleNamespace(), "usage", "Usage", "usage").helper)
        self.assertFalse(Option(SimpleNamespace(n=0), "n", "N", "n").helper)


class TestNames(TestCase):
    """Name validation, matching and display."""

    def setUp(self):
        self.settings = SimpleNamespace(number=0)

    def testAtLeastOneName(self):
        with self.assertRaises(TypeError):
            Option(self.settings, "number", "A number")
        with self.assertRaises(TypeError):
            Flag(self.settings, "flag", "A flag", "", "\0")

    def testShortMustBeOneCharacter(self):
        with self.assertRaises(ValueError):
            Option(self.settings, "number", "A number", "number", "nm")

    def testShortCannotBeDash(self):
        with self.assertRaises(ValueError):
            Option(self.settings, "number", "A number", "number", "-")

    def testLongWithoutDashes(self):
        with self.assertRaises(ValueError):
            Option(self.settings, "number", "A number", "--number")
        with self.assertRaises(ValueError):
            Option(self.settings, "number", "A number", "a number")

    def testHelpMustBeString(self):
        with self.assertRaises(TypeError):
            Option(self.settings, "number", None, "number")

    def testNullShortMeansNone(self):
        option = Option(self.settings, "number", "A number", "number", "\0")
        self.assertEqual(option.short, "")

    def testMatches(self):
        option = Option(self.settings, "number", "A number", "number", "n")
        self.assertTrue(option.matches("n"))
        self.assertTrue(option.matches("number"))
        self.assertFalse(option.matches("num"))
        self.assertFalse(option.matches(""))

    def testEmptyLongNeverMatches(self):
        option = Option(self.settings, "number", "A number", "", "n")
        self.assertTrue(option.matches("n"))
        self.assertFalse(option.matches(""))

    def testDisplayNamePrefersLong(self):
        self.assertEqual(Option(self.settings, "number", "N", "number", "n").display_name, "--number")
        self.assertEqual(Option(self.settings, "number", "N", "", "n").display_name, "-n")

    def testPropertiesAreReadOnly(self):
        option = Option(self.settings, "number", "A number", "number", "n")
        with self.assertRaises(AttributeError):
            option.long = "other"

    def testRepr(self):
        option = Option(self.settings, "number", "A number", "number", "n", required=True)
        self.assertTrue(repr(option).startswith("option("))
        self.assertIn("long='number'", repr(option))
        self.assertIn("required=True", repr(option))
        self.assertTrue(repr(Flag(self.settings, "flag", "F", "flag")).startswith("flag("))


class TestCollect(TestCase):
    """Descriptor set freezing."""

    def testFreezesToTuple(self):
        settings = SimpleNamespace(number=0)
        options = [Flag(settings, "flag", "F", "flag"), Option(settings, "number", "N", "number")]
        self.assertEqual(collect(options), tuple(options))

    def testRejectsForeignMembers(self):
        with self.assertRaises(TypeError):
            collect(["--flag"])

    def testRejectsNonIterable(self):
        with self.assertRaises(TypeError):
            collect(5)


if __name__ == "__main__":
    unittest.main()
