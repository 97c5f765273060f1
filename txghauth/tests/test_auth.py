"""
Tests for L{txghauth.auth}.
"""
import base64

from twisted.trial.unittest import SynchronousTestCase

from txghauth.auth import basicAuthHeader


class BasicAuthHeaderTests(SynchronousTestCase):
    """
    Tests for L{basicAuthHeader}.
    """

    def test_round_trip(self):
        """
        The user and password can be decoded from the header.
        """
        header = basicAuthHeader("alice", "secret")
        scheme, encoded = header.split(" ", 1)
        self.assertEqual(scheme, "Basic")
        self.assertEqual(base64.b64decode(encoded), b"alice:secret")

    def test_deterministic(self):
        """
        The same input always gives the same header.
        """
        self.assertEqual(basicAuthHeader("user", "password"),
                         "Basic dXNlcjpwYXNzd29yZA==")
        self.assertEqual(basicAuthHeader("user", "password"),
                         basicAuthHeader("user", "password"))

    def test_no_line_wrapping(self):
        """
        Long credentials are not wrapped onto several lines.
        """
        header = basicAuthHeader("user", "p" * 200)
        self.assertNotIn("\n", header)

    def test_non_ascii(self):
        """
        Non-ASCII passwords are UTF-8 encoded.
        """
        header = basicAuthHeader("user", u"päss")
        encoded = header[len("Basic "):]
        self.assertEqual(base64.b64decode(encoded),
                         u"user:päss".encode("utf-8"))
