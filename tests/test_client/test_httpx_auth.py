"""Tests for the httpx ProviderAuth adapter."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

import httpx
import pytest

from tokenauth.auth.disabled import AuthenticationDisabled
from tokenauth.auth.token import AuthenticationToken
from tokenauth.client import ProviderAuth


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _echo_handler(seen: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
    """Handler recording each request and echoing its Authorization header."""

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"authorization": request.headers.get("authorization")})

    return _handler


def _client(auth: ProviderAuth, seen: list[httpx.Request]) -> httpx.Client:
    return httpx.Client(
        base_url="https://admin.example.com",
        transport=httpx.MockTransport(_echo_handler(seen)),
        auth=auth,
    )


def _file_auth(path: Path) -> AuthenticationToken:
    auth = AuthenticationToken()
    auth.configure(f"file://{path}")
    return auth


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class TestProviderAuth:
    def test_adds_bearer_header(self) -> None:
        seen: list[httpx.Request] = []
        with _client(ProviderAuth(AuthenticationToken("token-xyz")), seen) as client:
            response = client.get("/admin/v2/clusters")
        assert response.json() == {"authorization": "Bearer token-xyz"}
        assert seen[0].headers["Authorization"] == "Bearer token-xyz"

    def test_follows_rotation_between_requests(
        self, token_file: Path, write_token: Callable[[str], None]
    ) -> None:
        seen: list[httpx.Request] = []
        with _client(ProviderAuth(_file_auth(token_file)), seen) as client:
            first = client.get("/a")
            write_token("other-token\n")
            second = client.get("/b")
        assert first.json()["authorization"] == "Bearer my-test-token-string"
        assert second.json()["authorization"] == "Bearer other-token"

    def test_replaces_existing_authorization_header(self) -> None:
        seen: list[httpx.Request] = []
        with _client(ProviderAuth(AuthenticationToken("fresh")), seen) as client:
            client.get("/a", headers={"Authorization": "Bearer stale"})
        assert seen[0].headers.get_list("Authorization") == ["Bearer fresh"]

    def test_disabled_sends_no_header(self) -> None:
        seen: list[httpx.Request] = []
        with _client(ProviderAuth(AuthenticationDisabled()), seen) as client:
            response = client.get("/a")
        assert response.json() == {"authorization": None}

    def test_missing_token_file_raises(self, tmp_path: Path) -> None:
        seen: list[httpx.Request] = []
        with _client(ProviderAuth(_file_auth(tmp_path / "missing")), seen) as client:
            with pytest.raises(FileNotFoundError):
                client.get("/a")
        assert seen == []


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class TestProviderAuthAsync:
    def test_async_client(self, token_file: Path, write_token: Callable[[str], None]) -> None:
        seen: list[httpx.Request] = []

        async def _run() -> list[str]:
            async with httpx.AsyncClient(
                base_url="https://admin.example.com",
                transport=httpx.MockTransport(_echo_handler(seen)),
                auth=ProviderAuth(_file_auth(token_file)),
            ) as client:
                first = await client.get("/a")
                write_token("other-token")
                second = await client.get("/b")
            return [first.json()["authorization"], second.json()["authorization"]]

        assert asyncio.run(_run()) == ["Bearer my-test-token-string", "Bearer other-token"]
