"""Resolver configuration.

Switches that control how ``RouteTable`` matches paths and which
parts of a request it binds to action arguments.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Route table configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(bind_query=False, strict_slashes=True)
    """

    # Binding sources (path parameters are always bound)
    bind_query: bool = True
    bind_body: bool = True

    # Matching
    strict_slashes: bool = False  # When False, "/items/" matches "/items"

    # Limits
    max_body_size: int = 1024 * 1024  # 1 MB; larger bodies are not bound
