"""Shared fixtures: API payloads and a fake ``requests`` session."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from clientaddress.config import ConfigModel, load_config


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, invalid_json: bool = False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise requests.JSONDecodeError("Expecting value", "<html>", 0)
        return self._body


class FakeSession:
    """Records requests and replays a canned response or exception."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.headers: dict[str, str] = {}
        self.response = response or FakeResponse(body={"data": []})
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def scenario_payload() -> dict[str, Any]:
    return {
        "data": [
            {
                "default_address": True,
                "address_types": ["billing"],
                "rendered": "<p>Main St</p>",
                "address": {"postal_code": "12345"},
            },
            {
                "default_address": False,
                "address_types": ["shipping"],
                "rendered": "<p>Side St</p>",
                "address": {"postal_code": "67890"},
            },
        ]
    }


@pytest.fixture()
def cfg() -> ConfigModel:
    return load_config(env={})


@pytest.fixture()
def scenario_body() -> dict[str, Any]:
    return scenario_payload()
