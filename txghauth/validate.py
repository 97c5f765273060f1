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

import re
from collections import namedtuple

from txghauth.errors import ValidationError
from txghauth.scopes import isLegalScope

Credentials = namedtuple("Credentials", ["user", "password"])

AuthorizationRequest = namedtuple(
    "AuthorizationRequest",
    ["scopes", "note", "note_url", "client_id", "client_secret"])

user_re = re.compile(r'^[A-Za-z0-9.@]+\Z')
client_id_re = re.compile(r'^[a-f0-9]{20}\Z')
client_secret_re = re.compile(r'^[a-f0-9]{40}\Z')


def validateRequest(user, password, scopes=(), note=None, note_url=None,
                    client_id=None, client_secret=None):
    """
    Check the options for a new authorization.

    Every problem is collected before failing, so a single
    L{ValidationError} describes all of them.

    @return: A L{Credentials} and an L{AuthorizationRequest}.
    @raises ValidationError: if any option is unacceptable.
    """
    scopes = tuple(scopes or ())

    illegal = ["illegal_scope: %s" % (scope,)
               for scope in scopes if not isLegalScope(scope)]

    if not user:
        illegal.append("user not supplied")
    elif not user_re.match(user):
        illegal.append("bad user: %s" % (user,))

    if not password:
        illegal.append("password not supplied")

    if client_id is not None and not client_id_re.match(client_id):
        illegal.append("bad client_id: %s" % (client_id,))
    if client_secret is not None and not client_secret_re.match(client_secret):
        # don't echo the secret
        illegal.append("bad client_secret")
    if (client_id is None) != (client_secret is None):
        illegal.append("client_id and client_secret must be supplied together")

    if illegal:
        raise ValidationError(illegal)

    return (Credentials(user, password),
            AuthorizationRequest(scopes=scopes,
                                 note=note,
                                 note_url=note_url,
                                 client_id=client_id,
                                 client_secret=client_secret))
