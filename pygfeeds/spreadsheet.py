# -*- coding: utf-8 -*-.

"""
pygfeeds.spreadsheet
~~~~~~~~~~~~~~~~~~~~

This module represents an entire spreadsheet. Which can have several worksheets.

"""

from collections import namedtuple
import logging
import re

from pygfeeds.credentials import CredentialsRenewer, Token
from pygfeeds.custom_types import AuthMode, Visibility, Projection, FEED_URL
from pygfeeds.exceptions import (AuthenticationError, EmptyResponseError, InvalidArgumentValue,
                                 NoValidUrlKeyFound)
from pygfeeds.feed import FeedAPIWrapper, EmptyFeed
from pygfeeds.worksheet import Worksheet
from pygfeeds.row import Row
from pygfeeds.cell import Cell
from pygfeeds.utils import (completable, first, node_text, xml_safe_column_name, xml_safe_value,
                            query_value, ATOM_NS, GSX_NS)

_url_key_re_v1 = re.compile(r'key=([^&#]+)')
_url_key_re_v2 = re.compile(r"/spreadsheets/d/([a-zA-Z0-9-_]+)")

_RESERVED_ROW_KEYS = ('id', 'title', 'content', '_links')

_ROW_QUERY_PARAMETERS = (('start', 'start-index'),
                         ('num', 'max-results'),
                         ('orderby', 'orderby'),
                         ('reverse', 'reverse'),
                         ('query', 'sq'))

SpreadsheetInfo = namedtuple('SpreadsheetInfo', ['title', 'updated', 'author', 'worksheets'])


def _option_value(value, enum_cls):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgumentValue('%s must be one of %s' % (enum_cls.__name__, [x.value for x in enum_cls]))


class Spreadsheet(object):
    """A spreadsheet of the feed API, addressed by its key.

    Without a credential the public feeds are read. Once a credential is installed the private feeds with the full
    projection are used, unless visibility or projection were given explicitly.

    >>> sheet = Spreadsheet('148tpVrZgcc-ReSMRXiQaqf9hstgT8HTzyPeKx6f399Y')
    >>> info = sheet.get_info()
    >>> rows = info.worksheets[0].get_rows()

    :param key:         The key of the spreadsheet (can be found in the sheet URL).
    :param auth:        (Optional) A credential, see :meth:`set_auth_token`.
    :param visibility:  (Optional) Force 'public' or 'private' feeds.
    :param projection:  (Optional) Force the 'values' or 'full' projection.
    :param http:        (Optional) The httplib2.Http object used for all requests.
    :param feed_url:    (Optional) Root of the feed urls.
    """

    worksheet_cls = Worksheet
    row_cls = Row
    cell_cls = Cell

    def __init__(self, key, auth=None, visibility=None, projection=None, http=None, feed_url=FEED_URL):
        if not key:
            raise InvalidArgumentValue('Spreadsheet key not provided.')
        self.logger = logging.getLogger(__name__)
        self._key = key
        self._fixed_visibility = _option_value(visibility, Visibility)
        self._fixed_projection = _option_value(projection, Projection)
        self.feed = FeedAPIWrapper(http=http, feed_url=feed_url)
        self.auth_mode = AuthMode.TOKEN if auth else AuthMode.ANONYMOUS
        self._renewer = None
        self._set_auth(auth)

    def __repr__(self):
        return '<%s key:%s %s/%s>' % (self.__class__.__name__, self.key, self.visibility.value,
                                      self.projection.value)

    @classmethod
    def from_url(cls, url, **kwargs):
        """Create a spreadsheet from its URL as it appears in a browser.

        :raises pygfeeds.NoValidUrlKeyFound: No key was found in the url.
        """
        match = _url_key_re_v1.search(url) or _url_key_re_v2.search(url)
        if not match:
            raise NoValidUrlKeyFound
        return cls(match.group(1), **kwargs)

    @property
    def key(self):
        """Key of the spreadsheet."""
        return self._key

    @property
    def auth(self):
        """The credential attached to requests."""
        return self._auth

    @property
    def visibility(self):
        return self._visibility

    @property
    def projection(self):
        return self._projection

    # Authentication

    def _set_auth(self, auth):
        self._auth = Token.from_value(auth)
        self._visibility = self._fixed_visibility or (Visibility.PRIVATE if auth else Visibility.PUBLIC)
        self._projection = self._fixed_projection or (Projection.FULL if auth else Projection.VALUES)

    def set_auth_token(self, auth):
        """Install a credential.

        The credential can be a raw token string, which is sent as legacy GoogleLogin auth, a :class:`Token` or
        a mapping with type, value and expires keys. It is not validated.
        """
        if self.auth_mode is AuthMode.ANONYMOUS:
            self.auth_mode = AuthMode.TOKEN
        self._set_auth(auth)

    @completable
    def set_auth(self, username, password):
        """Username and password login is not supported by google anymore. Always raises."""
        raise AuthenticationError('Google has officially deprecated ClientLogin. '
                                  'Use use_service_account_auth or set_auth_token instead.')

    @completable
    def use_service_account_auth(self, creds):
        """Authenticate with a service account and fetch the first token right away.

        :param creds:   The service account json as dict, the path to the json file or a google-auth credentials
                        object.
        """
        self.use_credentials(CredentialsRenewer.from_service_account(creds, http=self.feed.http))

    def use_credentials(self, renewer):
        """Authenticate with tokens of a :class:`CredentialsRenewer`, renewing them whenever they expire."""
        self._renewer = renewer
        self.auth_mode = AuthMode.JWT
        self.renew_auth()

    def renew_auth(self):
        """Fetch a fresh bearer token. On failure the current credential stays installed."""
        self.set_auth_token(self._renewer.renew())

    # Requests

    def make_feed_request(self, url_params, method='GET', query_or_data=None):
        """Make a request to the feed of this spreadsheet.

        :param url_params:      A list of path segments, visibility and projection are appended to it. Or an
                                absolute url as found in the links of an entry.
        :param method:          Http method.
        :param query_or_data:   Query parameters of a GET request or the atom xml payload of a POST or PUT.
        :returns:               :class:`pygfeeds.ParsedFeed` or :data:`pygfeeds.EMPTY_FEED`
        """
        if isinstance(url_params, str):
            url = url_params
        else:
            url = self.feed.build_url(url_params, self.visibility.value, self.projection.value)

        if self.auth_mode is AuthMode.JWT and self._token_expired():
            self.logger.debug('Token expired, renewing before %s %s', method, url)
            self.renew_auth()

        return self.feed.request(url, method, auth=self.auth, query_or_data=query_or_data)

    def _token_expired(self):
        if isinstance(self.auth, Token):
            return self.auth.expired
        return not self.auth

    # Public feed methods

    @completable
    def get_info(self):
        """Fetch title, update time, author and worksheets of the spreadsheet.

        :returns: :class:`SpreadsheetInfo`
        """
        response = self.make_feed_request(['worksheets', self.key], 'GET')
        if isinstance(response, EmptyFeed):
            raise EmptyResponseError('No response to get_info call')
        data = response.tree
        author = first(data, 'author')
        return SpreadsheetInfo(
            title=node_text(first(data, 'title')),
            updated=node_text(first(data, 'updated')),
            author=dict((k, node_text(v[0])) for k, v in author.items() if k != '$') if isinstance(author, dict) else None,
            worksheets=[self.worksheet_cls(self, x) for x in data.get('entry', [])])

    @completable
    def get_rows(self, worksheet_id, start=None, num=None, orderby=None, reverse=None, query=None):
        """Fetch the rows of a worksheet. The first row of the worksheet holds the column names and is not included.

        :param worksheet_id:    Id of the worksheet, ids start at 1.
        :param start:           Index of the first row to return.
        :param num:             Maximum number of rows to return.
        :param orderby:         Column to order by, e.g. 'column:lastname'.
        :param reverse:         Reverse the order.
        :param query:           A structured query, e.g. 'age > 25'.
        :returns:               List of :class:`Row`
        """
        options = dict(start=start, num=num, orderby=orderby, reverse=reverse, query=query)
        params = dict((name, query_value(options[option])) for option, name in _ROW_QUERY_PARAMETERS
                      if options[option])

        response = self.make_feed_request(['list', self.key, worksheet_id], 'GET', params)
        if isinstance(response, EmptyFeed):
            raise EmptyResponseError('No response to get_rows call')
        return [self.row_cls.from_element(self, entry) for entry in response.entries()]

    @completable
    def add_row(self, worksheet_id, data):
        """Append a row to a worksheet.

        :param worksheet_id:    Id of the worksheet.
        :param data:            Dict of column name to value. Column names are matched like the feed names
                                them, ignoring case, whitespace and underscores.
        :returns:               The created :class:`Row` as returned by the feed.
        """
        data_xml = '<entry xmlns="%s" xmlns:gsx="%s">\n' % (ATOM_NS, GSX_NS)
        for key, value in data.items():
            if key not in _RESERVED_ROW_KEYS:
                name = xml_safe_column_name(key)
                data_xml += '<gsx:%s>%s</gsx:%s>\n' % (name, xml_safe_value(value), name)
        data_xml += '</entry>'

        response = self.make_feed_request(['list', self.key, worksheet_id], 'POST', data_xml)
        if isinstance(response, EmptyFeed):
            return None
        return self.row_cls.from_element(self, response.entries()[0])

    @completable
    def get_cells(self, worksheet_id, options=None, **kwargs):
        """Fetch the cells of a worksheet.

        Supported options are min-row, max-row, min-col, max-col and return-empty. They can also be given as
        keywords with underscores.

        >>> sheet.get_cells('od6', min_row=2, max_col=3, return_empty=True)

        :param worksheet_id:    Id of the worksheet.
        :param options:         Dict of query parameters passed to the feed as they are.
        :returns:               List of :class:`Cell`
        """
        params = dict(options or {})
        params.update((k.replace('_', '-'), v) for k, v in kwargs.items())
        params = dict((k, query_value(v)) for k, v in params.items())

        response = self.make_feed_request(['cells', self.key, worksheet_id], 'GET', params)
        if isinstance(response, EmptyFeed):
            raise EmptyResponseError('No response to get_cells call')
        return [self.cell_cls(self, worksheet_id, x) for x in response.tree.get('entry', [])]
