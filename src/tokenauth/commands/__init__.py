"""Built-in CLI commands for tokenauth.

Each module in this package defines Typer command functions that are
registered on the root application in :mod:`tokenauth.app`.

Modules:
    auth: ``inspect``, ``header``, ``token``, and ``plugins`` commands.
"""
