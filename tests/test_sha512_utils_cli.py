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
import os
import sys
import tempfile
import unittest
from io import BytesIO, StringIO
from unittest import mock

import sha512_utils_cli
from sha512utils.constants import TEST_STR_PAIR


class Args:
    """Minimal stand-in for parsed arguments"""

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class TestSha512UtilsCLI(unittest.TestCase):
    """Test cases for the SHA-512 Utils CLI"""

    def setUp(self):
        """Capture stdout for testing"""
        self.held_output = StringIO()
        self.original_stdout = sys.stdout
        sys.stdout = self.held_output

        fd, self.path = tempfile.mkstemp()
        with os.fdopen(fd, "wb") as f:
            f.write(b"abc")
        self.abc_hex = hashlib.sha512(b"abc").hexdigest()

    def tearDown(self):
        """Restore stdout"""
        sys.stdout = self.original_stdout
        os.remove(self.path)

    def test_digest_string(self):
        code = sha512_utils_cli.digest_files(Args(string="abc", files=[]))
        self.assertEqual(code, 0)
        self.assertIn(self.abc_hex, self.held_output.getvalue())

    def test_digest_files(self):
        code = sha512_utils_cli.digest_files(Args(string=None, files=[self.path, self.path]))
        self.assertEqual(code, 0)
        lines = self.held_output.getvalue().strip().splitlines()
        self.assertEqual(lines, [f"{self.abc_hex}  {self.path}"] * 2)

    def test_digest_stdin_read_once(self):
        stdin = mock.Mock()
        stdin.buffer = BytesIO(b"abc")
        with mock.patch("sys.stdin", stdin):
            code = sha512_utils_cli.digest_files(Args(string=None, files=["-", "-"]))
        self.assertEqual(code, 0)
        lines = self.held_output.getvalue().strip().splitlines()
        self.assertEqual(lines, [f"{self.abc_hex}  -"] * 2)

    def test_digest_missing_file(self):
        missing = self.path + ".missing"
        code = sha512_utils_cli.digest_files(Args(string=None, files=[missing]))
        self.assertEqual(code, 1)
        self.assertIn("Error", self.held_output.getvalue())

    def test_verify_match(self):
        args = Args(digest=self.abc_hex.upper(), file=self.path, string=None)
        self.assertEqual(sha512_utils_cli.verify_digest(args), 0)
        self.assertIn("matches", self.held_output.getvalue())

    def test_verify_mismatch(self):
        args = Args(digest=TEST_STR_PAIR[1], file=None, string="abc")
        self.assertEqual(sha512_utils_cli.verify_digest(args), 1)
        output = self.held_output.getvalue()
        self.assertIn("mismatch", output)
        self.assertIn(self.abc_hex, output)

    def test_verify_malformed_digest(self):
        args = Args(digest="g" * 128, file=self.path, string=None)
        self.assertEqual(sha512_utils_cli.verify_digest(args), 1)
        self.assertIn("Error", self.held_output.getvalue())

    def test_selftest(self):
        args = Args(message=TEST_STR_PAIR[0], expected=TEST_STR_PAIR[1])
        self.assertEqual(sha512_utils_cli.run_selftest(args), 0)
        self.assertIn("passed", self.held_output.getvalue())

    def test_selftest_failure(self):
        args = Args(message="abc", expected=TEST_STR_PAIR[1])
        with self.assertLogs("sha512utils.selftest", level="ERROR"):
            self.assertEqual(sha512_utils_cli.run_selftest(args), 1)
        self.assertIn("FAILED", self.held_output.getvalue())

    def test_decode(self):
        code = sha512_utils_cli.decode_digest(Args(digest=self.abc_hex.upper()))
        self.assertEqual(code, 0)
        lines = self.held_output.getvalue().splitlines()
        self.assertEqual(lines[0], self.abc_hex)
        self.assertEqual(lines[1], "64 bytes")

    def test_decode_malformed(self):
        code = sha512_utils_cli.decode_digest(Args(digest=self.abc_hex[:-1]))
        self.assertEqual(code, 1)

    def test_bench(self):
        code = sha512_utils_cli.benchmark(Args(duration=0.05, size=16))
        self.assertEqual(code, 0)
        self.assertIn("hashes/s", self.held_output.getvalue())

    def test_bench_invalid(self):
        self.assertEqual(sha512_utils_cli.benchmark(Args(duration=0, size=16)), 1)

    def test_main_dispatch(self):
        self.assertEqual(sha512_utils_cli.main(["digest", "--string", "abc"]), 0)
        self.assertIn(self.abc_hex, self.held_output.getvalue())

    def test_main_no_command(self):
        self.assertEqual(sha512_utils_cli.main([]), 1)


if __name__ == "__main__":
    unittest.main()
