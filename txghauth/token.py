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

import json
from collections import namedtuple

from twisted.internet import defer
from twisted.python import log
from twisted.web import client
from twisted.web.http_headers import Headers
from twisted.web.iweb import IBodyProducer
from zope.interface import implementer

from txghauth.auth import basicAuthHeader
from txghauth.constants import (HOSTED_BASE_URL, OTP_HEADER,
                                CONNECT_TIMEOUT, USER_AGENT)
from txghauth.errors import (ValidationError, OtpAcquisitionError,
                             RemoteAuthorizationError, TransportError)
from txghauth.otp import TerminalOTPPrompt
from txghauth.validate import validateRequest

__all__ = ["App", "AuthorizationRecord", "OtpChallenge", "TokenClient",
           "createToken"]


App = namedtuple("App", ["name", "url"])


class AuthorizationRecord(namedtuple(
        "AuthorizationRecord",
        ["id", "token", "note", "note_url", "scopes", "app",
         "created_at", "updated_at", "url"])):
    """
    A new authorization, as returned by GitHub.  Storing C{token} is
    up to the caller.
    """

    @classmethod
    def fromJSON(cls, data):
        app = data.get('app') or {}
        return cls(id=data.get('id'),
                   token=data['token'],
                   note=data.get('note'),
                   note_url=data.get('note_url'),
                   scopes=tuple(data.get('scopes') or ()),
                   app=App(app.get('name'), app.get('url')),
                   created_at=data.get('created_at'),
                   updated_at=data.get('updated_at'),
                   url=data.get('url'))


# What an OTP callback is handed.  method is how GitHub delivers the code
# ("sms", "app") when it says so.
OtpChallenge = namedtuple("OtpChallenge",
                          ["code", "phrase", "headers", "body", "method"])

_Response = namedtuple("_Response", ["code", "phrase", "headers", "body"])


@implementer(IBodyProducer)
class _StringProducer(object):
    """
    Write a request body that is already entirely in memory.
    """

    def __init__(self, body):
        self.body = body
        self.length = len(body)

    def startProducing(self, consumer):
        consumer.write(self.body)
        return defer.succeed(None)

    def pauseProducing(self):
        pass

    def resumeProducing(self):
        pass

    def stopProducing(self):
        pass


def _otpChallenge(response):
    """
    Return an L{OtpChallenge} if C{response} asks for a one-time
    password, otherwise C{None}.
    """
    if response.code != 401:
        return None
    for value in response.headers.getRawHeaders(OTP_HEADER, []):
        # e.g. "required; sms"
        parts = [part.strip() for part in value.split(';')]
        if parts[0].lower() != 'required':
            continue
        method = parts[1] if len(parts) > 1 and parts[1] else None
        return OtpChallenge(response.code, response.phrase,
                            response.headers, response.body, method)
    return None


def _failureMessage(body):
    text = body.decode('utf-8', 'replace')
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict) and 'message' in data:
        return data['message']
    return text


def _interpret(response):
    if not 200 <= response.code < 300:
        raise RemoteAuthorizationError(response.code, response.phrase,
                                       _failureMessage(response.body))
    try:
        return AuthorizationRecord.fromJSON(
            json.loads(response.body.decode('utf-8')))
    except (ValueError, KeyError, TypeError, AttributeError):
        raise RemoteAuthorizationError(
            response.code, response.phrase,
            "malformed authorization: %s" % (
                response.body.decode('utf-8', 'replace'),))


class TokenClient(object):
    # Creates authorizations through
    # - POST /authorizations, API v3
    # - HTTP Basic auth with the account's user and password
    # - at most one retry, carrying a one-time password
    # - async API

    def __init__(self, reactor=None, baseURL=None, agent=None):
        baseURL = baseURL or HOSTED_BASE_URL
        if not baseURL.startswith('https://'):
            raise ValidationError(["bad base_url: %s (must be https)" % (
                baseURL,)])
        if baseURL[-1] != '/':
            baseURL += '/'
        self._baseURL = baseURL

        if agent is None:
            if reactor is None:
                from twisted.internet import reactor
            # BrowserLikePolicyForHTTPS verifies the server's certificate
            agent = client.Agent(
                reactor,
                contextFactory=client.BrowserLikePolicyForHTTPS(),
                connectTimeout=CONNECT_TIMEOUT)
        self._agent = agent

    @property
    def url(self):
        return self._baseURL + 'authorizations'

    def _makeHeaders(self, credentials, otp=None):
        headers = {
            'Authorization': [basicAuthHeader(credentials.user,
                                              credentials.password)],
            'Content-Type': ['application/json'],
            'Accept': ['application/json'],
            'User-Agent': [USER_AGENT],
        }
        if otp is not None:
            headers[OTP_HEADER] = [otp]
        return Headers(headers)

    def _makeBody(self, request):
        # scopes always goes out, even when empty
        post = dict(scopes=list(request.scopes))
        for name in ('note', 'note_url', 'client_id', 'client_secret'):
            value = getattr(request, name)
            if value is not None:
                post[name] = value
        return json.dumps(post, sort_keys=True).encode('utf-8')

    def _post(self, headers, body):
        log.msg("requesting authorization from '%s'" % (self.url,),
                system='github')
        d = self._agent.request(b'POST', self.url.encode('ascii'),
                                headers, _StringProducer(body))

        @d.addCallback
        def read_body(response):
            phrase = response.phrase
            if isinstance(phrase, bytes):
                phrase = phrase.decode('latin-1')
            reading = client.readBody(response)
            reading.addCallback(lambda data: _Response(
                response.code, phrase, response.headers, data))
            return reading

        @d.addErrback
        def transport_failed(failure):
            raise TransportError(failure.value)
        return d

    @defer.inlineCallbacks
    def issue(self, credentials, request, otpCallback=None):
        """
        Create an authorization.

        @param credentials: The account's user and password.
        @type credentials: L{txghauth.validate.Credentials}

        @param request: What the authorization should allow.
        @type request: L{txghauth.validate.AuthorizationRequest}

        @param otpCallback: Called with an L{OtpChallenge} if GitHub asks
            for a one-time password.  Returns the password (or a
            L{Deferred} that fires with it), or C{None}.  Defaults to a
            L{TerminalOTPPrompt}.

        @return: A L{Deferred} that fires with an L{AuthorizationRecord},
            or fails with L{OtpAcquisitionError},
            L{RemoteAuthorizationError} or L{TransportError}.
        """
        if otpCallback is None:
            otpCallback = TerminalOTPPrompt()

        body = self._makeBody(request)
        response = yield self._post(self._makeHeaders(credentials), body)

        challenge = _otpChallenge(response)
        if challenge is not None:
            log.msg("two-factor authentication required, "
                    "retrying with a one-time password", system='github')
            otp = yield defer.maybeDeferred(otpCallback, challenge)
            if otp is None or otp == "":
                raise OtpAcquisitionError()
            otp = str(otp)
            # a second challenge is not retried; _interpret fails it
            response = yield self._post(
                self._makeHeaders(credentials, otp), body)

        return _interpret(response)


def createToken(user, password, scopes=(), note=None, note_url=None,
                client_id=None, client_secret=None, otpCallback=None,
                baseURL=None, reactor=None, _agent=None):
    """
    Exchange a GitHub user and password for a new OAuth2 token.

    @param scopes: Scope names from L{txghauth.scopes.LEGAL_SCOPES}.  No
        scopes means public read-only access.

    @param note: Shown as the name on the account's "Authorized
        Applications" list.

    @param otpCallback: See L{TokenClient.issue}.  Defaults to prompting
        at the terminal.

    @return: A L{Deferred} that fires with an L{AuthorizationRecord}.
        Bad options fail it with L{ValidationError} before anything is
        sent.
    """
    try:
        credentials, request = validateRequest(
            user, password, scopes,
            note=note, note_url=note_url,
            client_id=client_id, client_secret=client_secret)
        tokenClient = TokenClient(reactor=reactor, baseURL=baseURL,
                                  agent=_agent)
    except ValidationError:
        return defer.fail()

    return tokenClient.issue(credentials, request, otpCallback)
