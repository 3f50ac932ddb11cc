"""
Client for the Instagram Basic Display API: OAuth authorization, short and
long-lived access tokens and the user profile and media endpoints.

API documentation: https://developers.facebook.com/docs/instagram-basic-display-api/
"""
import logging

from .client import Client
from .exceptions import InstagramError, TransportError
from .types import MediaField, Scope, TokenResponse


# Applications decide where the records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "InstagramError",
    "TransportError",
    "MediaField",
    "Scope",
    "TokenResponse",
]
