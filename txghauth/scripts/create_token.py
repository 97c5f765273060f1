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

from getpass import getpass
from sys import exit

from twisted.python import usage

from txghauth import token
from txghauth.errors import TokenError
from txghauth.scopes import isLegalScope, legalScopes

__all__ = ["Options", "createToken", "run"]


_print = print


class Options(usage.Options):
    synopsis = "[options] <username>"
    optParameters = [
        ["note", "n", "txghauth", "token note"],
        ["url", "u", None, "token note url"],
        ["client-id", None, None, "OAuth application client id"],
        ["client-secret", None, None, "OAuth application client secret"],
        ["base-url", None, None, "API URL, for GitHub Enterprise"],
    ]

    longdesc = "Create a new github oauth2 token."

    def __init__(self):
        usage.Options.__init__(self)
        self['scopes'] = []

    def opt_scope(self, scope):
        """
        A scope for the token; may be repeated.
        """
        if not isLegalScope(scope):
            raise usage.UsageError("illegal scope %r (one of: %s)" % (
                scope, ', '.join(legalScopes())))
        self['scopes'].append(scope)
    opt_s = opt_scope

    def parseArgs(self, username):
        self['username'] = username


def createToken(reactor, username, password, note, url, scopes,
                client_id=None, client_secret=None, base_url=None):
    d = token.createToken(
        username, password,
        scopes=scopes, note=note, note_url=url,
        client_id=client_id, client_secret=client_secret,
        baseURL=base_url, reactor=reactor)

    @d.addCallback
    def printToken(record):
        _print(record.token)
    return d


def run(reactor, *argv):
    config = Options()
    try:
        config.parseOptions(argv[1:])
    except usage.UsageError as errortext:
        _print('%s: %s' % (argv[0], errortext))
        _print('%s: Try --help for usage details.' % (argv[0]))
        exit(1)

    password = getpass("github password: ")

    d = createToken(reactor,
                    username=config['username'],
                    password=password,
                    note=config['note'],
                    url=config['url'],
                    scopes=config['scopes'],
                    client_id=config['client-id'],
                    client_secret=config['client-secret'],
                    base_url=config['base-url'])

    @d.addErrback
    def reportFailure(failure):
        failure.trap(TokenError)
        _print('%s: %s' % (argv[0], failure.value))
        exit(1)
    return d
