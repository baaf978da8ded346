# -*- coding: utf-8 -*-

"""
pygfeeds
~~~~~~~~

Google Spreadsheets feed API client library.

"""

__version__ = '0.3.0'
__author__ = 'Nithin Murali'

from pygfeeds.authorization import authorize
from pygfeeds.credentials import Token, CredentialsRenewer
from pygfeeds.spreadsheet import Spreadsheet, SpreadsheetInfo
from pygfeeds.worksheet import Worksheet
from pygfeeds.row import Row
from pygfeeds.cell import Cell
from pygfeeds.feed import FeedAPIWrapper, ParsedFeed, EmptyFeed, EMPTY_FEED
from pygfeeds.custom_types import AuthMode, Visibility, Projection
from pygfeeds.exceptions import (PyGfeedsException, AuthenticationError,
                                 RequestError, HTTPError, PrivateSheetError,
                                 MalformedResponseError, EmptyResponseError,
                                 NoValidUrlKeyFound, InvalidArgumentValue)


# Set default logging handler to avoid "No handler found" warnings.
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
