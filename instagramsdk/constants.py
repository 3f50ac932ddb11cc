# Endpoint templates. Placeholders are replaced literally, see utils.parse_url.
AUTH_URI = "https://api.instagram.com/oauth/authorize"
TOKEN_URI = "https://api.instagram.com/oauth/access_token"
LONG_LIVED_TOKEN_URI = "https://graph.instagram.com/access_token"
REFRESH_TOKEN_URI = "https://graph.instagram.com/refresh_access_token"
USER_URI = "https://graph.instagram.com/{user-id}"
USER_MEDIA_URI = "https://graph.instagram.com/v11.0/{user-id}/media?fields={fields}&access_token={access-token}"

DEFAULT_SCOPE = ["user_profile", "user_media"]

DEFAULT_MEDIA_FIELDS = [
    "id",
    "media_type",
    "media_url",
    "caption",
    "permalink",
    "thumbnail_url",
]

# Format of the absolute expiry date returned by the long-lived token and
# refresh endpoints.
EXPIRY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
