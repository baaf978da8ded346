# -*- coding: utf-8 -*-

"""
pygfeeds.exceptions
~~~~~~~~~~~~~~~~~~~

Exceptions used in pygfeeds.

"""


class PyGfeedsException(Exception):
    """A base class for pygfeeds's exceptions."""


class AuthenticationError(PyGfeedsException):
    """An error during authentication process."""


class NoValidUrlKeyFound(PyGfeedsException):
    """No valid key found in URL."""


class InvalidArgumentValue(PyGfeedsException):
    """Invalid value for argument"""


class RequestError(PyGfeedsException):
    """Error while sending API request."""


class HTTPError(RequestError):
    """The feed answered with an error status."""
    def __init__(self, status, reason, body=''):
        super(HTTPError, self).__init__('HTTP error %s: %s %r' % (status, reason, body))
        self.status = status
        self.reason = reason
        self.body = body


class PrivateSheetError(RequestError):
    """An html page was served instead of a feed, the sheet is not readable anonymously."""


class MalformedResponseError(RequestError):
    """The response body could not be parsed as xml."""


class EmptyResponseError(RequestError):
    """The feed returned no content where data was expected."""
