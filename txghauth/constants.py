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

from txghauth import __version__

HOSTED_BASE_URL = 'https://api.github.com/'

# sent (and checked for) when the account has two-factor authentication
OTP_HEADER = 'X-GitHub-OTP'

# seconds
CONNECT_TIMEOUT = 30

USER_AGENT = 'txghauth/%s' % (__version__,)
