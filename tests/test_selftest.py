# Copyright (C) 2024-2025 The python-sha512-utils developers
#
# This file is part of python-sha512-utils
#
# It is subject to the license terms in the LICENSE file found in the top-level
# directory of this distribution.
#
# No part of python-sha512-utils, including this file, may be copied,
# modified, propagated, or distributed except according to the terms contained
# in the LICENSE file.

import hashlib
import importlib
import unittest
from unittest import mock

from sha512utils.constants import NULL_RAW_DIGEST, TEST_STR_PAIR
from sha512utils.selftest import SelfTestError, unit_test, verify_implementation
from sha512utils.setup import setup, is_verified, get_self_test_on_setup

setup_mod = importlib.import_module("sha512utils.setup")


class TestUnitTest(unittest.TestCase):
    def test_default_pair(self):
        self.assertTrue(unit_test())

    def test_custom_pair(self):
        expected = hashlib.sha512("héllo".encode("utf-8")).hexdigest()
        self.assertTrue(unit_test("héllo", expected))
        self.assertTrue(unit_test(b"h\xc3\xa9llo", expected))

    def test_uppercase_expected(self):
        self.assertTrue(unit_test("", TEST_STR_PAIR[1].upper()))

    def test_bytes_expected(self):
        self.assertTrue(unit_test("", TEST_STR_PAIR[1].encode("ascii")))
        self.assertTrue(unit_test("", bytearray(TEST_STR_PAIR[1].upper(), "ascii")))
        # fixed-size form with its null terminator
        self.assertTrue(unit_test("", TEST_STR_PAIR[1].encode("ascii") + b"\x00"))

    def test_bytes_expected_mismatch(self):
        with self.assertLogs("sha512utils.selftest", level="ERROR") as cm:
            self.assertFalse(unit_test("abc", TEST_STR_PAIR[1].encode("ascii")))
        self.assertIn(TEST_STR_PAIR[1], cm.output[0])

    def test_expected_wrong_type(self):
        with self.assertRaises(TypeError):
            unit_test("", 12345)

    def test_mismatch(self):
        with self.assertLogs("sha512utils.selftest", level="ERROR"):
            self.assertFalse(unit_test("not empty"))

    def test_malformed_expected_is_mismatch(self):
        with self.assertLogs("sha512utils.selftest", level="ERROR"):
            self.assertFalse(unit_test("", "abc"))

    def test_verify_raises(self):
        with self.assertLogs("sha512utils.selftest", level="ERROR"):
            with self.assertRaises(SelfTestError) as cm:
                verify_implementation("x", TEST_STR_PAIR[1])
        self.assertEqual(cm.exception.expected, TEST_STR_PAIR[1])
        self.assertEqual(cm.exception.actual, hashlib.sha512(b"x").hexdigest())

    def test_broken_arithmetic_detected(self):
        with mock.patch("sha512utils.selftest.calc_digest", return_value=NULL_RAW_DIGEST):
            with self.assertLogs("sha512utils.selftest", level="ERROR"):
                self.assertFalse(unit_test())


class TestSetup(unittest.TestCase):
    def setUp(self):
        setup_mod.VERIFIED = False
        setup_mod.SELF_TEST_ON_SETUP = True

    def tearDown(self):
        setup_mod.VERIFIED = False
        setup_mod.SELF_TEST_ON_SETUP = True

    def test_setup_verifies(self):
        self.assertFalse(is_verified())
        self.assertTrue(setup())
        self.assertTrue(is_verified())
        self.assertTrue(get_self_test_on_setup())

    def test_setup_without_self_test(self):
        self.assertFalse(setup(self_test=False))
        self.assertFalse(is_verified())
        self.assertFalse(get_self_test_on_setup())

    def test_setup_failure_is_fatal(self):
        with mock.patch("sha512utils.selftest.calc_digest", return_value=NULL_RAW_DIGEST):
            with self.assertLogs("sha512utils.selftest", level="ERROR"):
                with self.assertRaises(SelfTestError):
                    setup()
        self.assertFalse(is_verified())


if __name__ == "__main__":
    unittest.main()
