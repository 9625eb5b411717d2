"""Pydantic models shared across tokenauth modules.

Two shapes live here:

* :class:`TokenParams` -- the structured alternative to the ``token:`` /
  ``file://`` parameter string accepted by
  :meth:`~tokenauth.auth.token.AuthenticationToken.configure_params`.
* :class:`ClientAuthConfig` -- the client-side authentication settings
  (which plugin, which parameter string) resolved by
  :func:`~tokenauth.config.resolve_config`.

Both models use Pydantic v2. :class:`ClientAuthConfig` accepts unknown keys
(``extra="allow"``) so that a project config file can carry settings for
other tools without failing validation.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenParams(BaseModel):
    """Structured token configuration.

    Exactly one of ``token`` or ``file`` must be given.

    Example::

        TokenParams(file="/var/run/secrets/broker-token")
        TokenParams(token="eyJhbGciOi...")
    """

    model_config = ConfigDict(extra="forbid")

    token: Optional[str] = Field(default=None, description="Literal token value")
    file: Optional[str] = Field(
        default=None,
        description="Path to a file holding the token; a file:// prefix is accepted",
    )

    @model_validator(mode="after")
    def _exactly_one_source(self) -> TokenParams:
        if (self.token is None) == (self.file is None):
            raise ValueError("exactly one of 'token' or 'file' must be set")
        return self


class ClientAuthConfig(BaseModel):
    """Client authentication settings.

    ``auth_plugin`` names an :class:`~tokenauth.auth.base.Authentication`
    implementation -- either a registered method name (``"token"``,
    ``"none"``) or a dotted import path. ``auth_params`` is passed verbatim
    to the plugin's ``configure()``.

    See Also:
        :func:`~tokenauth.config.resolve_config`: Builds the effective
        instance from flags, environment, and project config.
    """

    model_config = ConfigDict(extra="allow")

    auth_plugin: str = Field(
        default="token",
        description="Auth method name (token, none) or import path module:Class",
    )
    auth_params: str = Field(
        default="",
        description="Plugin parameter string, e.g. token:VALUE or file:///path",
    )
