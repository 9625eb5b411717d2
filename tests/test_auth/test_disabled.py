"""Tests for the ``none`` auth method."""

from __future__ import annotations

from tokenauth.auth.disabled import AuthenticationDisabled


class TestAuthenticationDisabled:
    def test_method_name(self) -> None:
        assert AuthenticationDisabled().auth_method_name == "none"

    def test_supplies_nothing(self) -> None:
        auth = AuthenticationDisabled()
        auth.configure("anything at all")
        data = auth.get_auth_data()
        assert not data.has_data_from_command()
        assert data.get_command_data() is None
        assert not data.has_data_for_http()
        assert data.get_http_headers() == set()
        assert not data.has_data_for_tls()
        assert data.get_tls_certificates() is None
        assert data.get_tls_private_key() is None

    def test_close_twice(self) -> None:
        auth = AuthenticationDisabled()
        auth.close()
        auth.close()

    def test_fresh_provider_per_call(self) -> None:
        auth = AuthenticationDisabled()
        assert auth.get_auth_data() is not auth.get_auth_data()
