"""
Utility behavioral tests.

Scope
- Validate the Unset sentinel: singleton, falsey, printable, non-subclassable.
- Validate coalesce(), rename() and mirror().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from vibrating.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsey(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testNonSubclassable(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testUnionAnnotation(self):
        self.assertEqual(Unset | str, str | UnsetType)


class TestHelpers(TestCase):
    """coalesce(), rename() and mirror()."""

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)

    def testRenameInPlace(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testRenameDecorator(self):
        @rename("decorated")
        def function():
            pass

        self.assertEqual(function.__name__, "decorated")

    def testRenameRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(lambda: None, 1)
        with self.assertRaises(TypeError):
            rename()

    def testMirror(self):
        class Holder:
            value = mirror("value")

            def __init__(self):
                self._value = 3

        holder = Holder()
        self.assertEqual(holder.value, 3)
        with self.assertRaises(AttributeError):
            holder.value = 4

    def testMirrorRejectsNonString(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == "__main__":
    unittest.main()
