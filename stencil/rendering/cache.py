"""
Parse cache for text templates.

Parsing a Jinja2 template compiles it to Python code, which costs far more
than rendering it. Code generators render the same few template bodies for
every class and property of a schema, so parsed templates are cached by
their exact source text and shared by every render of a factory.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import Any, Dict, Optional

import jinja2

from .environment import create_environment
from .preprocessor import rewrite_inclusions
from ..utils.logging import StencilLogger


def source_digest(source: str) -> str:
    """Return a short digest identifying a template source in logs."""
    return hashlib.sha256(source.encode("utf-8")).hexdigest()[:16]


class ParseCache:
    """
    Maps raw template source to its parsed Jinja2 template.

    Entries are never evicted; the cache lives as long as its owner.
    The lock guards only lookups and inserts, never a parse, so two
    threads seeing the same new source may both parse it. The first
    insert wins and both callers get the stored template.
    """

    def __init__(self, environment: Optional[jinja2.Environment] = None):
        """
        Initialize parse cache.

        Args:
            environment: Environment used to parse sources (default: create_environment())
        """
        self.environment = environment if environment is not None else create_environment()
        self._templates: Dict[str, jinja2.Template] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._log = StencilLogger(__name__)

    def get_or_parse(self, source: str) -> jinja2.Template:
        """
        Return the parsed template for ``source``, parsing it on first sight.

        Args:
            source: Raw template text, before inclusion rewriting

        Returns:
            Parsed Jinja2 template

        Raises:
            jinja2.TemplateSyntaxError: If the rewritten source does not parse
        """
        with self._lock:
            template = self._templates.get(source)
            if template is not None:
                self._hits += 1

        debug = self._log.logger.isEnabledFor(logging.DEBUG)
        if template is not None:
            if debug:
                self._log.log_cache_hit(source_digest(source))
            return template

        if debug:
            self._log.log_cache_miss(source_digest(source))
        parsed = self.environment.from_string(rewrite_inclusions(source))

        with self._lock:
            self._misses += 1
            return self._templates.setdefault(source, parsed)

    def __contains__(self, source: object) -> bool:
        with self._lock:
            return source in self._templates

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)

    def clear(self) -> None:
        """Drop all parsed templates and reset statistics."""
        with self._lock:
            self._templates.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with entry, hit and miss counts
        """
        with self._lock:
            return {
                "entries": len(self._templates),
                "hits": self._hits,
                "misses": self._misses,
            }
