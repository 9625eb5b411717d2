"""Client authentication settings with precedence resolution.

This module decides which auth plugin a client uses and which parameter
string it is configured with:

* **Project config** -- an optional ``./tokenauth.json`` file holding a
  :class:`~tokenauth.models.ClientAuthConfig` object. See
  :func:`load_project_config`.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, the project config, and model defaults into the
  effective settings.
* **Plugin construction** -- :func:`create_authentication` turns the
  effective settings into a configured
  :class:`~tokenauth.auth.base.Authentication`.

Configuration is never validated against the token source: a ``file://``
reference to a missing file is accepted here and fails only when the token
is first requested.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from tokenauth.auth.base import Authentication
from tokenauth.auth.factory import AuthenticationFactory, create_default_factory
from tokenauth.exceptions import ConfigError
from tokenauth.models import ClientAuthConfig

PROJECT_CONFIG_FILENAME = "tokenauth.json"

ENV_AUTH_PLUGIN = "TOKENAUTH_AUTH_PLUGIN"
ENV_AUTH_PARAMS = "TOKENAUTH_AUTH_PARAMS"


# --- Project-local config ---


def load_project_config(directory: Optional[Path] = None) -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``tokenauth.json``.

    Args:
        directory: Directory to look in. Defaults to the current working
            directory.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a valid JSON object.
    """
    path = (directory or Path.cwd()) / PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def resolve_config(
    cli_auth_plugin: Optional[str] = None,
    cli_auth_params: Optional[str] = None,
    directory: Optional[Path] = None,
) -> ClientAuthConfig:
    """Resolve auth settings with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_auth_plugin``, ``cli_auth_params``)
        2. Environment variables (``TOKENAUTH_AUTH_PLUGIN``,
           ``TOKENAUTH_AUTH_PARAMS``)
        3. Project config (``./tokenauth.json``)
        4. Defaults (``auth_plugin="token"``, ``auth_params=""``)

    Each field is resolved independently, so the plugin can come from the
    project file while the parameters come from the environment. A variable
    or flag that is set to the empty string still counts as set.

    Returns:
        The effective :class:`~tokenauth.models.ClientAuthConfig`.

    Raises:
        ConfigError: If the project config is invalid.
    """
    # 4 + 3. Defaults overlaid with the project file
    project = load_project_config(directory) or {}
    try:
        config = ClientAuthConfig.model_validate(project)
    except ValidationError as exc:
        raise ConfigError(f"Invalid project config: {exc}") from exc

    # 2. Environment variables
    env_plugin = os.environ.get(ENV_AUTH_PLUGIN)
    if env_plugin is not None:
        config.auth_plugin = env_plugin
    env_params = os.environ.get(ENV_AUTH_PARAMS)
    if env_params is not None:
        config.auth_params = env_params

    # 1. CLI flags (highest precedence)
    if cli_auth_plugin is not None:
        config.auth_plugin = cli_auth_plugin
    if cli_auth_params is not None:
        config.auth_params = cli_auth_params

    return config


def create_authentication(
    config: ClientAuthConfig,
    factory: Optional[AuthenticationFactory] = None,
) -> Authentication:
    """Build the auth plugin described by *config*.

    Args:
        config: Effective settings, usually from :func:`resolve_config`.
        factory: Factory to build with. Defaults to
            :func:`~tokenauth.auth.factory.create_default_factory`.

    Returns:
        A configured and started :class:`~tokenauth.auth.base.Authentication`.

    Raises:
        PluginError: If the plugin cannot be found or loaded.
    """
    factory = factory or create_default_factory()
    return factory.create(config.auth_plugin, config.auth_params)
