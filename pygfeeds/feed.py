# -*- coding: utf-8 -*-.

"""
pygfeeds.feed
~~~~~~~~~~~~~

All http requests to the spreadsheets feed are made in this module.

"""

from collections import namedtuple
from http.client import responses as HTTP_STATUS_CODES
from urllib.parse import urlencode
from xml.etree import ElementTree
import logging

import httplib2

from pygfeeds.credentials import authorization_header
from pygfeeds.custom_types import FEED_URL
from pygfeeds.exceptions import (AuthenticationError, HTTPError, PrivateSheetError,
                                 MalformedResponseError)
from pygfeeds.utils import ATOM_NS, element_to_dict

ATOM_CONTENT_TYPE = 'application/atom+xml'


class ParsedFeed(namedtuple('ParsedFeed', ['root', 'text'])):
    """A successful response with a body.

    :param root:    The parsed root element.
    :param text:    The response text as it was received.
    """
    __slots__ = ()

    @property
    def tree(self):
        """The root as generic attribute/text tree, see :func:`pygfeeds.utils.element_to_dict`."""
        return element_to_dict(self.root)

    def entries(self):
        """The entry elements of a feed. A response which is a single entry yields itself."""
        if self.root.tag == '{%s}entry' % ATOM_NS:
            return [self.root]
        return self.root.findall('{%s}entry' % ATOM_NS)


class EmptyFeed(object):
    """A successful response without body, as returned for deletes."""
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return '<EmptyFeed>'


EMPTY_FEED = EmptyFeed()


class FeedAPIWrapper(object):

    def __init__(self, http=None, feed_url=FEED_URL, logger=logging.getLogger(__name__)):
        """A wrapper for the spreadsheets feed.

        Builds the feed urls, sends the requests and turns the responses into :class:`ParsedFeed` or
        :data:`EMPTY_FEED`. Error responses are raised as exceptions.

        :param http:        The httplib2.Http object used to execute the requests.
        :param feed_url:    Root of all feed urls.
        :param logger:
        """
        self.http = http or httplib2.Http()
        self.feed_url = feed_url
        self.logger = logger

    def build_url(self, url_params, visibility, projection):
        """Join path segments below the feed root and append visibility and projection.

        >>> FeedAPIWrapper().build_url(['list', 'key', 'od6'], 'public', 'values')
        'https://spreadsheets.google.com/feeds/list/key/od6/public/values'
        """
        return self.feed_url + '/'.join([str(x) for x in url_params] + [visibility, projection])

    def request(self, url, method='GET', auth=None, query_or_data=None):
        """Send a request to the feed.

        :param url:             Absolute url of the request.
        :param method:          Http method.
        :param auth:            Credential to authorize the request with, None for anonymous requests.
        :param query_or_data:   Query parameters of a GET request or the atom xml payload of a POST or PUT.
        :returns:               :class:`ParsedFeed` or :data:`EMPTY_FEED`
        """
        headers = {}
        body = None

        authorization = authorization_header(auth)
        if authorization:
            headers['Authorization'] = authorization

        if method in ('POST', 'PUT'):
            headers['content-type'] = ATOM_CONTENT_TYPE
            body = query_or_data
            if isinstance(body, str):
                body = body.encode('utf-8')
        elif method == 'GET' and query_or_data:
            url += '?' + urlencode(query_or_data)

        self.logger.debug('%s %s', method, url)
        response, content = self.http.request(url, method=method, body=body, headers=headers)
        return self._handle_response(response, content)

    def _handle_response(self, response, content):
        if isinstance(content, str):
            content = content.encode('utf-8')
        content = content or b''

        if response.status == 401:
            self.logger.warning('Feed rejected the authorization')
            raise AuthenticationError('Invalid authorization key.')
        elif response.status >= 400:
            reason = HTTP_STATUS_CODES.get(response.status, response.reason)
            self.logger.error('Feed request failed with %s %s', response.status, reason)
            raise HTTPError(response.status, reason, content.decode('utf-8', errors='replace'))
        elif response.status == 200 and 'text/html' in response.get('content-type', ''):
            raise PrivateSheetError('Sheet is private. Use authentication or make public.')

        if not content.strip():
            return EMPTY_FEED
        try:
            # bytes, so the encoding declaration of the document is honoured
            root = ElementTree.fromstring(content)
        except (ElementTree.ParseError, UnicodeDecodeError) as error:
            raise MalformedResponseError('Could not parse feed response: %s' % error) from error
        return ParsedFeed(root, content.decode('utf-8', errors='replace'))
