# -*- coding: utf-8 -*-.

"""
pygfeeds.custom_types
~~~~~~~~~~~~~~~~~~~~~

This module contains common Enums and constants used in pygfeeds

"""

from enum import Enum

FEED_URL = 'https://spreadsheets.google.com/feeds/'
FEED_SCOPES = ('https://spreadsheets.google.com/feeds',)


class AuthMode(Enum):
    """How requests of a spreadsheet are authenticated.

    ANONYMOUS: No Authorization header is sent.

    TOKEN: A credential was installed with set_auth_token and is sent as is.

    JWT: The credential is a bearer token obtained from google-auth credentials. It is renewed
    before a request whenever it is expired.
    """
    ANONYMOUS = 'anonymous'
    TOKEN = 'token'
    JWT = 'jwt'


class Visibility(Enum):
    """Visibility of a feed. Private feeds need authentication."""
    PUBLIC = 'public'
    PRIVATE = 'private'


class Projection(Enum):
    """Detail level of a feed.

    VALUES: Only the values, entries carry no edit links.

    FULL: Everything, including the edit links needed to update or delete entries.
    """
    VALUES = 'values'
    FULL = 'full'
