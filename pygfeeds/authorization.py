# -*- coding: utf-8 -*-.
import os
import json
import logging

from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
import google_auth_httplib2
import httplib2

from pygfeeds.credentials import CredentialsRenewer
from pygfeeds.custom_types import FEED_SCOPES
from pygfeeds.spreadsheet import Spreadsheet

logger = logging.getLogger(__name__)

_CREDENTIALS_FILE_NAME = 'spreadsheets.google.com-feeds.json'


def _get_user_authentication_credentials(client_secret_file, scopes, credentials_directory=None, http=None):
    """Returns user credentials, from the token file when there is one, else from the installed app flow."""
    if not credentials_directory:
        credentials_directory = os.getcwd()
    elif credentials_directory == 'global':
        credentials_directory = os.path.join(os.path.expanduser('~'), '.credentials')
        os.makedirs(credentials_directory, exist_ok=True)

    credentials_path = os.path.join(credentials_directory, _CREDENTIALS_FILE_NAME)

    credentials = None
    if os.path.exists(credentials_path):
        credentials = Credentials.from_authorized_user_file(credentials_path, scopes=scopes)
        if credentials.expired and credentials.refresh_token:
            credentials.refresh(google_auth_httplib2.Request(http or httplib2.Http()))
    else:
        flow = InstalledAppFlow.from_client_secrets_file(client_secret_file, scopes)
        credentials = flow.run_local_server()

    try:
        with open(credentials_path, 'w') as file:
            file.write(credentials.to_json())
    except OSError:
        logger.warning('Unable to save the credentials to %s', credentials_path)

    return credentials


def authorize(key,
              client_secret='client_secret.json',
              service_account_file=None,
              service_account_env_var=None,
              service_account_json=None,
              credentials_directory=None,
              scopes=FEED_SCOPES,
              custom_credentials=None,
              **kwargs):
    """Open a spreadsheet authenticated with a google account.

    Credentials are taken from the first given of `custom_credentials`, `service_account_env_var`,
    `service_account_json` and `service_account_file`. Without any of them the installed app flow is run with the
    oauth client secret file, the resulting token is stored in `credentials_directory`.

    :param key:                     The key of the spreadsheet.
    :param client_secret:           Location of the oauth2 client secret file.
    :param service_account_file:    Location of a service account file.
    :param service_account_env_var: Name of an environment variable holding the service account json.
    :param service_account_json:    The service account json as string.
    :param credentials_directory:   Where the token file of the oauth flow is stored. Use 'global' to store it in
                                    ~/.credentials. Default None stores it in the current working directory.
    :param scopes:                  The scopes for which the authentication applies.
    :param custom_credentials:      A ready google-auth credentials object. Will ignore all other params.
    :param kwargs:                  Parameters handed to the :class:`Spreadsheet` constructor.
    :returns:                       :class:`Spreadsheet`
    """
    http = kwargs.get('http')
    if custom_credentials is not None:
        credentials = custom_credentials
    elif service_account_env_var is not None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(os.environ[service_account_env_var]), scopes=scopes)
    elif service_account_json is not None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(service_account_json), scopes=scopes)
    elif service_account_file is not None:
        credentials = service_account.Credentials.from_service_account_file(service_account_file, scopes=scopes)
    else:
        credentials = _get_user_authentication_credentials(client_secret, scopes, credentials_directory, http)

    spreadsheet = Spreadsheet(key, **kwargs)
    spreadsheet.use_credentials(CredentialsRenewer(credentials, http=spreadsheet.feed.http))
    return spreadsheet
