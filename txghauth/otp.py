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

import getpass


class TerminalOTPPrompt(object):
    """
    Ask the person at the terminal for their two-factor code.

    Instances are called with the L{txghauth.token.OtpChallenge} GitHub
    answered with, and return the code or C{None} if none was entered.
    Anything with the same signature can be used in its place, and may
    return a L{twisted.internet.defer.Deferred}.
    """

    def __init__(self, _getpass=getpass.getpass):
        self._getpass = _getpass

    def prompt(self, challenge):
        if challenge.method:
            return "GitHub two-factor code (%s): " % (challenge.method,)
        return "GitHub two-factor code: "

    def __call__(self, challenge):
        try:
            otp = self._getpass(self.prompt(challenge))
        except EOFError:
            return None
        otp = otp.strip()
        return otp or None
