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

# http://developer.github.com/v3/oauth/#scopes
# Requesting no scope at all (an empty list) grants public read-only access.
LEGAL_SCOPES = frozenset([
    'user',
    'user:email',
    'user:follow',
    'public_repo',
    'repo',
    'repo:status',
    'delete_repo',
    'notifications',
    'gist',
])


def isLegalScope(name):
    return isinstance(name, str) and name in LEGAL_SCOPES


def legalScopes():
    return sorted(LEGAL_SCOPES)
