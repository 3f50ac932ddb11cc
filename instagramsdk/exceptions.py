import typing


class InstagramError(Exception):
    """
    Base class for every error raised by this library.
    """


class TransportError(InstagramError):
    """
    Raised when a request could not be completed (connection refused, DNS
    failure, timeout...). The original `requests` exception is available as
    `__cause__`.
    """

    def __init__(self, method: str, url: str, reason: typing.Optional[str] = None):
        self.method = method
        self.url = url

        super().__init__(
            f"{method} request to {url} failed."
            + (f" Reason: {reason}" if reason else "")
        )
