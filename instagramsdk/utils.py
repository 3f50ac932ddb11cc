from datetime import datetime
from enum import Enum

import re
import typing

from dateutil import tz
from dateutil.relativedelta import relativedelta

from .constants import EXPIRY_DATE_FORMAT


def to_value(item: typing.Union[str, Enum]) -> str:
    """
    Returns the string value of an enum member, or the item itself.
    """
    return item.value if isinstance(item, Enum) else item


def join_values(items: typing.Iterable[typing.Union[str, Enum]]) -> str:
    """
    Joins the items with commas, the separator the API expects in list
    parameters such as `scope` and `fields`.
    """
    return ",".join(to_value(item) for item in items)


def parse_url(url: str, params: typing.Dict[str, typing.Optional[str]]) -> str:
    """Replaces the placeholders of a URL template (e.g. `{user-id}`) with
    their values.

    The replacement is literal and made in a single pass. Longer placeholders
    are tried first and replaced text is never scanned again, so a value that
    happens to contain another placeholder is left untouched.

    Args:
        url (str): The URL template.
        params (typing.Dict[str, typing.Optional[str]]): A mapping of
            placeholder to value. `None` values are replaced with an empty
            string.

    Returns:
        str: The URL with every known placeholder substituted.
    """
    if not params:
        return url

    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(params, key=len, reverse=True))
    )

    return pattern.sub(lambda match: str(params[match.group(0)] or ""), url)


def expires_in_to_date(
    expires_in: typing.Union[int, str], now: typing.Optional[datetime] = None
) -> str:
    """Converts a "seconds from now" expiry into an absolute date in local
    time.

    Args:
        expires_in (typing.Union[int, str]): Seconds until the token expires.
        now (typing.Optional[datetime], optional): The moment to count from.
            Naive values are read as local time. Defaults to the current
            time.

    Returns:
        str: The expiry date formatted as `YYYY-MM-DD HH:MM:SS`.

    Raises:
        ValueError: `expires_in` is not a whole number of seconds.
        TypeError: `expires_in` is neither a number nor a string.
    """
    now = now or datetime.now(tz.tzlocal())

    # Seconds are added to the UTC instant, not to the local wall clock.
    expires_at = now.replace(microsecond=0).astimezone(tz.UTC) + relativedelta(
        seconds=int(expires_in)
    )

    return expires_at.astimezone(tz.tzlocal()).strftime(EXPIRY_DATE_FORMAT)
