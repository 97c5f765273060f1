# This file is part of txghauth.  txghauth is free software: you can
# redistribute it and/or modify it under the terms of the GNU General Public
# License as published by the Free Software Foundation, version 2.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# this program; if not, write to the Free Software Foundation, Inc., 51
# Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Copyright Buildbot Team Members


class TokenError(Exception):
    """
    Base class for everything L{txghauth.token.createToken} can fail with.
    """


class ValidationError(TokenError):
    """
    The caller's options were rejected before any request was made.

    @ivar violations: One description per problem found.
    @type violations: L{list} of L{str}
    """

    def __init__(self, violations):
        self.violations = list(violations)
        TokenError.__init__(self, "Bad options: %s" % (
            ' '.join(self.violations),))


class OtpAcquisitionError(TokenError):
    """
    GitHub asked for a one-time password and none was supplied.
    """

    def __init__(self, message="could not acquire OTP from user"):
        TokenError.__init__(self, message)


class RemoteAuthorizationError(TokenError):
    """
    GitHub refused to create the authorization.

    @ivar status: The HTTP status code.
    @type status: L{int}

    @ivar reason: The HTTP reason phrase.
    @type reason: L{str}

    @ivar message: The C{message} GitHub reported, or the raw body.
    @type message: L{str}
    """

    def __init__(self, status, reason, message):
        self.status = status
        self.reason = reason
        self.message = message
        TokenError.__init__(self, status, reason, message)

    def __str__(self):
        return "Failed: %s/%s / %s" % (self.status, self.reason, self.message)


class TransportError(TokenError):
    """
    The request never got a complete response: DNS, connection, TLS or a
    truncated body.

    @ivar reason: The underlying exception.
    """

    def __init__(self, reason):
        self.reason = reason
        TokenError.__init__(self, reason)

    def __str__(self):
        return "Transport failure: %s" % (self.reason,)
