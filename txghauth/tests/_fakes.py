"""
Fake L{twisted.web.iweb.IAgent} and L{twisted.web.iweb.IResponse}
implementations.
"""
import io
from collections import namedtuple

from twisted.internet.defer import fail, succeed
from twisted.python.failure import Failure
from twisted.web.client import ResponseDone
from twisted.web.http_headers import Headers


_RequestCalls = namedtuple("_RequestCalls",
                           ["method", "uri", "headers", "body"])


class _FakeResponse(object):
    """
    A fake L{twisted.web.iweb.IResponse} whose body is delivered all at
    once.
    """

    def __init__(self, code, phrase, headers=None, body=b""):
        self.code = code
        self.phrase = phrase
        self.headers = Headers(headers or {})
        self.length = len(body)
        self._body = body

    def deliverBody(self, protocol):
        protocol.dataReceived(self._body)
        protocol.connectionLost(Failure(ResponseDone()))


class _FakeAgent(object):
    """
    A fake L{twisted.web.client.Agent} that records requests and
    answers them, in order, from C{responses}.

    @ivar requests: The requests made so far.
    @type requests: L{list} of L{_RequestCalls}

    @ivar responses: L{_FakeResponse}s or exceptions; an exception
        fails the request.
    """

    def __init__(self, responses=()):
        self.requests = []
        self.responses = list(responses)

    def request(self, method, uri, headers=None, bodyProducer=None):
        body = io.BytesIO()
        if bodyProducer is not None:
            bodyProducer.startProducing(body)
        self.requests.append(_RequestCalls(method, uri, headers,
                                           body.getvalue()))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            return fail(response)
        return succeed(response)
