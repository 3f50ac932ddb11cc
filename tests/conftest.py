from unittest.mock import MagicMock

import time

import pytest
import requests

from instagramsdk import Client


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return Client(
        "1234567890",
        "app-secret",
        "https://example.com/auth/callback",
        session=session,
    ).set_session("IGQVJ-token", "17841400000000000")


@pytest.fixture
def local_timezone(monkeypatch):
    """
    Returns a function that sets the process' local timezone (e.g.
    `America/New_York`). The previous timezone is restored afterwards.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("The local timezone can't be changed on this platform.")

    def set_timezone(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield set_timezone

    monkeypatch.undo()
    time.tzset()
