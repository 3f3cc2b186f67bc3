"""FastAPI dependencies for resolver access."""

from search.config import ResolverConfig
from search.resolver import Resolver


def get_resolver() -> Resolver:
    """Dependency to get the resolver instance (singleton pattern)."""
    if not hasattr(get_resolver, "_instance"):
        get_resolver._instance = Resolver(config=ResolverConfig.from_env())
    return get_resolver._instance
