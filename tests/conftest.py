"""Shared fixtures: a client wired to an in-process fake panel."""

import json
from collections.abc import Callable

import httpx
import pytest

from marzban_api_client import MarzbanAPIClient

BASE_URL = "http://localhost:8000"


class FakePanel:
    """Records every request and answers with a queued or default response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []
        self.default_json = {}

    def respond(
        self,
        status_code: int = 200,
        *,
        json_body=None,
        text: str | None = None,
    ) -> None:
        """Queue the next response."""
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body)
        self._responses.append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json=self.default_json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def panel() -> FakePanel:
    return FakePanel()


@pytest.fixture
def make_client(panel: FakePanel) -> Callable[..., MarzbanAPIClient]:
    """Factory building clients that talk to the fake panel."""

    def factory(token: str | None = None) -> MarzbanAPIClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(panel.handler))
        return MarzbanAPIClient(BASE_URL, token=token, http_client=http_client)

    return factory


@pytest.fixture
def client(make_client) -> MarzbanAPIClient:
    """Authenticated client with token ``tok``."""
    return make_client(token="tok")


def _user_payload(username: str = "alice", **overrides) -> dict:
    payload = {
        "username": username,
        "status": "active",
        "proxies": {"vless": {"id": "35e4e39c-7d5c-4f4b-8b71-558e4f37ff53"}},
        "inbounds": {"vless": ["VLESS TCP REALITY"]},
        "expire": None,
        "data_limit": 1073741824,
        "data_limit_reset_strategy": "no_reset",
        "note": "",
        "sub_updated_at": None,
        "sub_last_user_agent": None,
        "online_at": "2024-05-01T10:20:30.123456",
        "on_hold_expire_duration": None,
        "on_hold_timeout": None,
        "auto_delete_in_days": None,
        "used_traffic": 512,
        "lifetime_used_traffic": 2048,
        "created_at": "2024-04-01T08:00:00",
        "links": ["vless://example"],
        "subscription_url": "/sub/abc",
        "excluded_inbounds": {"vless": []},
        "admin": {
            "username": "admin",
            "is_sudo": True,
            "telegram_id": None,
            "discord_webhook": None,
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def user_payload() -> Callable[..., dict]:
    """Factory for minimal UserResponse bodies as the panel sends them."""
    return _user_payload
