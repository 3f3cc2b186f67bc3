"""
Field Resolution Module — looks up a short value for each user-defined
field through a web search, an encyclopedia API and a placeholder fallback.
"""

from .config import ResolverConfig
from .client import SourceClient
from .extractor import SnippetExtractor, extract_snippet
from .placeholder import placeholder
from .resolver import Resolver
from .orchestrator import BatchOrchestrator, BatchReport

__all__ = [
    "ResolverConfig",
    "SourceClient",
    "SnippetExtractor",
    "extract_snippet",
    "placeholder",
    "Resolver",
    "BatchOrchestrator",
    "BatchReport",
]
