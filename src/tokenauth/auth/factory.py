"""Authentication factory -- registry and loader for auth plugins.

The :class:`AuthenticationFactory` maps auth method names (``"token"``,
``"none"``) to :class:`~tokenauth.auth.base.Authentication` subclasses and
builds configured, started instances from a plugin name plus a parameter
string, the two settings a client carries in its configuration.

A plugin can be named three ways:

- a registered method name: ``"token"``
- a ``module:Class`` import path: ``"mypkg.auth:VaultAuthentication"``
- a dotted import path: ``"mypkg.auth.VaultAuthentication"``

Third-party packages can also register plugins under the
``tokenauth.authentication`` entry-point group and have them picked up by
:meth:`AuthenticationFactory.discover`::

    [project.entry-points."tokenauth.authentication"]
    vault = "mypkg.auth:VaultAuthentication"

For most use cases call :func:`create_default_factory`, or the
:func:`token` shortcut when only token auth is needed.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from typing import Callable, Union

from tokenauth.auth.base import Authentication
from tokenauth.auth.disabled import AuthenticationDisabled
from tokenauth.auth.token import AuthenticationToken
from tokenauth.exceptions import PluginError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "tokenauth.authentication"
"""The entry-point group name used for plugin discovery."""


class AuthenticationFactory:
    """Registry and constructor for authentication plugins.

    Plugins are registered by their
    :attr:`~tokenauth.auth.base.Authentication.auth_method_name`. The
    registered class must be constructible without arguments.

    Example::

        factory = AuthenticationFactory()
        factory.register(AuthenticationToken)
        auth = factory.create("token", "file:///run/secrets/token")
    """

    def __init__(self) -> None:
        self._plugins: dict[str, type[Authentication]] = {}

    def register(self, plugin_cls: type[Authentication]) -> None:
        """Register an auth plugin class, keyed by its method name.

        If a plugin for the same name is already registered it is replaced.

        Args:
            plugin_cls: The :class:`Authentication` subclass to register.
        """
        name = plugin_cls().auth_method_name
        self._plugins[name] = plugin_cls
        logger.debug("Registered auth plugin '%s' (%s)", name, plugin_cls.__name__)

    def get_plugin(self, name: str) -> type[Authentication]:
        """Retrieve a registered plugin class by its method name.

        Raises:
            PluginError: If no plugin is registered for *name*.
        """
        plugin_cls = self._plugins.get(name)
        if plugin_cls is None:
            available = ", ".join(sorted(self._plugins)) or "(none)"
            raise PluginError(
                f"No auth plugin registered for '{name}'. "
                f"Available methods: {available}"
            )
        return plugin_cls

    def create(self, auth_plugin: str, auth_params: str = "") -> Authentication:
        """Instantiate, configure, and start an auth plugin.

        Args:
            auth_plugin: A registered method name or an import path.
            auth_params: Parameter string passed to ``configure()``.

        Returns:
            A ready-to-use :class:`Authentication` instance.

        Raises:
            PluginError: If the plugin cannot be found, imported, or
                instantiated.
        """
        if auth_plugin in self._plugins:
            plugin_cls = self._plugins[auth_plugin]
        elif "." in auth_plugin or ":" in auth_plugin:
            plugin_cls = _import_plugin(auth_plugin)
        else:
            plugin_cls = self.get_plugin(auth_plugin)

        try:
            auth = plugin_cls()
        except Exception as exc:
            raise PluginError(f"Cannot instantiate auth plugin '{auth_plugin}': {exc}") from exc

        auth.configure(auth_params)
        auth.start()
        logger.debug("Created auth plugin '%s'", auth.auth_method_name)
        return auth

    def discover(self) -> list[str]:
        """Register plugins advertised under the ``tokenauth.authentication`` group.

        Returns:
            The method names that were registered. Entry points that fail
            to load are logged as warnings and skipped.
        """
        loaded: list[str] = []
        entry_points = importlib.metadata.entry_points()
        if hasattr(entry_points, "select"):
            eps = entry_points.select(group=ENTRY_POINT_GROUP)
        else:
            eps = entry_points.get(ENTRY_POINT_GROUP, [])  # type: ignore[union-attr]

        for ep in eps:
            try:
                plugin_cls = ep.load()
                _check_plugin_class(plugin_cls, ep.name)
                self.register(plugin_cls)
                loaded.append(plugin_cls().auth_method_name)
            except Exception as exc:
                logger.warning("Failed to load auth plugin '%s': %s", ep.name, exc)
        return loaded

    def list_types(self) -> list[str]:
        """Return the registered method names, sorted."""
        return sorted(self._plugins.keys())


def _import_plugin(path: str) -> type[Authentication]:
    """Import an :class:`Authentication` subclass from ``module:Class`` or ``module.Class``."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    try:
        module = importlib.import_module(module_name)
        plugin_cls = getattr(module, attr)
    except (ImportError, AttributeError, ValueError) as exc:
        raise PluginError(f"Cannot load auth plugin '{path}': {exc}") from exc
    _check_plugin_class(plugin_cls, path)
    return plugin_cls


def _check_plugin_class(obj: object, label: str) -> None:
    if not (isinstance(obj, type) and issubclass(obj, Authentication)):
        raise PluginError(f"Auth plugin '{label}' is not an Authentication subclass")


def create_default_factory() -> AuthenticationFactory:
    """Create an :class:`AuthenticationFactory` with the built-in plugins.

    Registered methods:

    - ``token`` -- bearer token from a literal, a file, or a callable.
    - ``none`` -- no credentials.
    """
    factory = AuthenticationFactory()
    factory.register(AuthenticationToken)
    factory.register(AuthenticationDisabled)
    return factory


def token(value: Union[str, Callable[[], str]]) -> AuthenticationToken:
    """Shortcut for a token plugin from a literal token or a token callable.

    The literal is used as-is; it is *not* parsed for ``token:`` or
    ``file://`` prefixes. Use ``AuthenticationToken().configure(...)`` for
    that.
    """
    return AuthenticationToken(value)
