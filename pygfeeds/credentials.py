# -*- coding: utf-8 -*-.

"""
pygfeeds.credentials
~~~~~~~~~~~~~~~~~~~~

Credential values attached to feed requests and the renewal of bearer tokens.

"""

import datetime
import logging
from collections import namedtuple
from collections.abc import Mapping

from google.oauth2 import service_account
import google_auth_httplib2
import httplib2

from pygfeeds.custom_types import FEED_SCOPES


class Token(namedtuple('Token', ['type', 'value', 'expires'])):
    """A token record. `expires` is a datetime, epoch milliseconds or None when the expiry is unknown."""
    __slots__ = ()

    @property
    def is_bearer(self):
        return str(self.type).lower() == 'bearer'

    @property
    def expired(self):
        """True once the current time reached `expires`. A token without expiry counts as expired.

        `expires` is a datetime, naive ones are taken as utc, or a number of milliseconds since the epoch as the
        token service reports it.
        """
        if self.expires is None:
            return True
        if isinstance(self.expires, (int, float)):
            now = datetime.datetime.now(datetime.timezone.utc).timestamp() * 1000
        elif self.expires.tzinfo is None:
            now = datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
        else:
            now = datetime.datetime.now(datetime.timezone.utc)
        return now >= self.expires

    @classmethod
    def from_value(cls, value):
        """Read a Token from a mapping with type, value and expires keys. Other values are returned unchanged."""
        if isinstance(value, Mapping) and 'value' in value:
            return cls(value.get('type'), value['value'], value.get('expires'))
        return value


def authorization_header(auth):
    """Value of the Authorization header for a credential, None for anonymous requests."""
    auth = Token.from_value(auth)
    if not auth:
        return None
    if isinstance(auth, Token):
        if auth.is_bearer:
            return 'Bearer ' + auth.value
        return 'GoogleLogin auth=' + auth.value
    return 'GoogleLogin auth=' + str(auth)


class CredentialsRenewer(object):
    """Exchanges google-auth credentials for bearer tokens.

    :param credentials: Any google-auth credentials supporting refresh, usually service account credentials.
    :param http:        The httplib2.Http object used to reach the token service.
    """

    def __init__(self, credentials, http=None):
        self.credentials = credentials
        self.http = http or httplib2.Http()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_service_account(cls, creds, http=None, scopes=FEED_SCOPES):
        """Create a renewer from service account credentials.

        :param creds:   The parsed service account json as dict, the path to the json file or a ready credentials
                        object.
        :param http:    The httplib2.Http object used to reach the token service.
        :param scopes:  Scopes requested for the tokens.
        """
        if isinstance(creds, str):
            credentials = service_account.Credentials.from_service_account_file(creds, scopes=scopes)
        elif isinstance(creds, Mapping):
            credentials = service_account.Credentials.from_service_account_info(dict(creds), scopes=scopes)
        else:
            credentials = creds
        return cls(credentials, http=http)

    def renew(self):
        """Fetch a new token from the token service.

        Errors of the token service (google.auth.exceptions.RefreshError, TransportError) are raised as they are.

        :returns: :class:`Token`
        """
        self.credentials.refresh(google_auth_httplib2.Request(self.http))
        expiry = self.credentials.expiry
        if expiry is not None and expiry.tzinfo is None:
            # google-auth reports expiry as naive utc
            expiry = expiry.replace(tzinfo=datetime.timezone.utc)
        self.logger.info('Renewed bearer token, valid until %s', expiry)
        return Token('Bearer', self.credentials.token, expiry)
