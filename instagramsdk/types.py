from enum import Enum

import typing


# Decoded JSON body of any endpoint. The provider controls its shape, so it is
# never validated.
TokenResponse = typing.Dict[str, typing.Any]


class Scope(Enum):
    """The permissions an app can request when sending the user to the
    authorization window.

    Props:
        USER_PROFILE (str): Read the user's profile (id, username, account
                            type and media count).
        USER_MEDIA (str):   Read the user's images, videos and albums.
    """

    USER_PROFILE = "user_profile"
    USER_MEDIA = "user_media"


class MediaField(Enum):
    """Fields that can be requested when listing a user's media.

    Props:
        ID (str):                The media's ID.
        MEDIA_TYPE (str):        IMAGE, VIDEO or CAROUSEL_ALBUM.
        MEDIA_URL (str):         The media's URL.
        CAPTION (str):           The caption text. Not returned for album
                                 children.
        PERMALINK (str):         The permanent URL to the media.
        THUMBNAIL_URL (str):     The thumbnail image URL. Only returned for
                                 VIDEO media.
        TIMESTAMP (str):         The publish date in ISO 8601 format.
        USERNAME (str):          The owner's username.
        IS_SHARED_TO_FEED (str): Wether the media appears in both the Feed
                                 and Reels tabs.
    """

    ID = "id"
    MEDIA_TYPE = "media_type"
    MEDIA_URL = "media_url"
    CAPTION = "caption"
    PERMALINK = "permalink"
    THUMBNAIL_URL = "thumbnail_url"
    TIMESTAMP = "timestamp"
    USERNAME = "username"
    IS_SHARED_TO_FEED = "is_shared_to_feed"
