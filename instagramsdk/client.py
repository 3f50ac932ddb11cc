import logging
import typing
import urllib.parse

import requests
from oauthlib.oauth2 import WebApplicationClient
from requests_oauthlib import OAuth2Session

from .constants import (
    AUTH_URI,
    TOKEN_URI,
    LONG_LIVED_TOKEN_URI,
    REFRESH_TOKEN_URI,
    USER_URI,
    USER_MEDIA_URI,
    DEFAULT_SCOPE,
    DEFAULT_MEDIA_FIELDS,
)
from .exceptions import TransportError
from .types import MediaField, Scope, TokenResponse
from .utils import expires_in_to_date, join_values, parse_url, to_value


logger = logging.getLogger(__name__)


class Client:
    """
    Instagram Basic Display API client. It builds the authorization URL,
    exchanges codes and tokens and reads the authenticated user's profile
    and media.

    Every operation makes at most one request and returns the decoded JSON
    body as-is, even for error responses. Only transport failures raise (see
    `TransportError`). Instances must not be shared between threads.

    .. highlight:: python
    .. code-block:: python

        client = Client("app-id", "app-secret", "https://example.com/callback")
        url = client.build_authorization_url(state="xyz")

        # Once the user is redirected back with a `code`
        token = client.exchange_code_for_token(code)
        client.set_session(token["access_token"], token["user_id"])

        long_lived = client.exchange_for_long_lived_token()
        media = client.fetch_user_media()
    """

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        redirect_uri: str,
        scope: typing.Optional[typing.Iterable[typing.Union[str, Scope]]] = None,
        media_fields: typing.Optional[typing.Iterable[typing.Union[str, MediaField]]] = None,
        timeout: typing.Optional[float] = None,
        session: typing.Optional[requests.Session] = None,
    ) -> None:
        self._oauth_client = WebApplicationClient(app_id)
        self._session = session if session is not None else OAuth2Session(client=self._oauth_client)

        self.app_id = app_id
        self.app_secret = app_secret
        self.redirect_uri = redirect_uri
        self.scope = scope if scope is not None else DEFAULT_SCOPE
        self._media_fields: typing.List[str] = list(DEFAULT_MEDIA_FIELDS)
        if media_fields is not None:
            self.media_fields = media_fields
        self.timeout = timeout

        self.access_token: typing.Optional[str] = None
        self.user_id: typing.Optional[str] = None

    @property
    def app_id(self) -> str:
        """
        The Instagram app ID (`client_id` in OAuth terms).
        An unset ID is stored as an empty string.
        """
        return self._oauth_client.client_id

    @app_id.setter
    def app_id(self, value: str) -> None:
        self._oauth_client.client_id = value or ""

    @property
    def scope(self) -> typing.List[str]:
        """
        The permissions requested in the authorization URL.
        """
        return list(self._scope)

    @scope.setter
    def scope(self, value: typing.Iterable[typing.Union[str, Scope]]) -> None:
        if isinstance(value, (str, Scope)):
            value = [value]

        # Duplicates are dropped but the order is kept so the URL is stable.
        self._scope = list(dict.fromkeys(to_value(item) for item in value))

    @property
    def media_fields(self) -> typing.List[str]:
        """
        The fields requested when listing the user's media.

        Assigning a single field appends it to the current list, while
        assigning any other iterable replaces the whole list:

        .. highlight:: python
        .. code-block:: python

            client.media_fields = "timestamp"              # appended
            client.media_fields = ["id", "media_url"]     # replaced
        """
        return list(self._media_fields)

    @media_fields.setter
    def media_fields(self, value: typing.Union[str, MediaField, typing.Iterable[typing.Union[str, MediaField]]]) -> None:
        if isinstance(value, (str, MediaField)):
            self._media_fields.append(to_value(value))
        else:
            self._media_fields = [to_value(item) for item in value]

    def set_session(self, access_token: typing.Optional[str], user_id: typing.Optional[str] = None) -> "Client":
        """Stores the access token and user ID used by the token and user
        endpoints.

        Returns:
            Client: The client instance. This is useful for chaining methods.
        """
        self.access_token = access_token
        self.user_id = user_id
        return self

    def build_authorization_url(self, state: typing.Optional[str] = None) -> str:
        """Returns the URL of the authorization window the user must be
        redirected to. No request is made.

        Args:
            state (typing.Optional[str], optional): An opaque value returned
                untouched in the callback, used to protect against CSRF.
                Omitted from the URL when not given.

        Returns:
            str: The authorization URL.
        """
        return self._oauth_client.prepare_request_uri(
            AUTH_URI,
            redirect_uri=self.redirect_uri,
            scope=join_values(self._scope),
            state=state,
        )

    def exchange_code_for_token(self, code: typing.Optional[str] = None) -> typing.Optional[TokenResponse]:
        """Exchanges the authorization code received in the callback for a
        short-lived access token.

        Args:
            code (typing.Optional[str]): The `code` query parameter of the
                callback.

        Returns:
            typing.Optional[TokenResponse]: The decoded response, usually
            containing `access_token` and `user_id`. `None` if no code was
            given, in which case no request is made.
        """
        if not code:
            logger.debug("No authorization code given, skipping token exchange.")
            return None

        data = {
            "client_id": self.app_id,
            "client_secret": self.app_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        r = self._request("POST", TOKEN_URI, data=data)

        return self._decode(r)

    def exchange_for_long_lived_token(self) -> typing.Optional[TokenResponse]:
        """Exchanges the stored short-lived access token for a long-lived
        one (valid for 60 days).

        Returns:
            typing.Optional[TokenResponse]: The decoded response, `None` if
            it is not JSON. When the request succeeds, `expires_in` holds the
            expiry date (`YYYY-MM-DD HH:MM:SS`, local time) instead of a
            number of seconds. A non-numeric `expires_in` is left as-is.
        """
        params = {
            "grant_type": "ig_exchange_token",
            "client_secret": self.app_secret,
            "access_token": self.access_token,
        }

        r = self._request("GET", LONG_LIVED_TOKEN_URI, params=params)

        return self._decode_token(r)

    def refresh_token(self) -> typing.Optional[TokenResponse]:
        """Refreshes the stored long-lived access token. The token must be
        at least 24 hours old and not expired yet.

        Returns:
            typing.Optional[TokenResponse]: The decoded response, with
            `expires_in` converted as in `exchange_for_long_lived_token`.
        """
        params = {
            "grant_type": "ig_refresh_token",
            "access_token": self.access_token,
        }

        r = self._request("GET", REFRESH_TOKEN_URI, params=params)

        return self._decode_token(r)

    def fetch_current_user(self) -> typing.Optional[dict]:
        """
        Returns the profile of the user whose ID is stored in `user_id`.
        """
        url = parse_url(USER_URI, {"{user-id}": self.user_id})

        return self._decode(self._request("GET", url))

    def fetch_user_media(self) -> typing.Optional[dict]:
        """
        Returns the media of the stored user with the fields listed in
        `media_fields`. Only the first page of results is returned.
        """
        url = parse_url(
            USER_MEDIA_URI,
            {
                "{user-id}": self.user_id,
                "{fields}": join_values(self._media_fields),
                "{access-token}": self.access_token,
            },
        )

        return self._decode(self._request("GET", url))

    def close(self) -> None:
        """
        Closes the underlying HTTP session.
        """
        self._session.close()

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Makes a request through the session. Transport errors are raised as
        `TransportError`; HTTP error statuses are not.
        """
        # The query string may carry the access token, so it is never logged.
        endpoint = urllib.parse.urlsplit(url)._replace(query="").geturl()

        logger.debug("%s %s", method, endpoint)

        try:
            r = self._session.request(method, url, timeout=self.timeout, **kwargs)

        except requests.exceptions.RequestException as e:
            raise TransportError(method, endpoint, e.__class__.__name__) from e

        logger.debug("%s %s returned %s", method, endpoint, r.status_code)

        return r

    def _decode(self, r: requests.Response) -> typing.Optional[typing.Any]:
        try:
            return r.json()

        except ValueError:
            logger.warning(
                "The response (status %s) is not valid JSON and was discarded.",
                r.status_code,
            )
            return None

    def _decode_token(self, r: requests.Response) -> typing.Optional[TokenResponse]:
        """
        Decodes a long-lived token or refresh response, converting
        `expires_in` to an absolute date if the request succeeded.
        """
        data = self._decode(r)

        if r.status_code == 200 and isinstance(data, dict) and "expires_in" in data:
            try:
                data["expires_in"] = expires_in_to_date(data["expires_in"])

            except (TypeError, ValueError):
                logger.warning(
                    "The expires_in value %r is not a number of seconds and was left as-is.",
                    data["expires_in"],
                )

        return data

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(app_id={self.app_id!r}, redirect_uri={self.redirect_uri!r}, user_id={self.user_id!r})"
