"""String shaping service with a memoized dasherize."""

import logging

from wordshape.domain import case
from wordshape.interfaces.transform_cache import TransformCache

logger = logging.getLogger(__name__)


class StringShaper:
    """Case transformations backed by an injected transformation cache.

    Only `dasherize` consults the cache; the other transformations are cheap
    and computed on every call.
    """

    def __init__(self, cache: TransformCache) -> None:
        self._cache = cache

    @property
    def cache(self) -> TransformCache:
        """The cache memoizing `dasherize`."""
        return self._cache

    def capitalize(self, text: str) -> str:
        """See `wordshape.domain.case.capitalize`."""
        return case.capitalize(text)

    def camelize(self, text: str) -> str:
        """See `wordshape.domain.case.camelize`."""
        return case.camelize(text)

    def decamelize(self, text: str) -> str:
        """See `wordshape.domain.case.decamelize`."""
        return case.decamelize(text)

    def dasherize(self, text: str) -> str:
        """Return the dasherized form of `text`, computing it once per input.

        On a cache hit the cached value is returned unchanged. On a miss the
        value is computed, stored under `text`, and returned. Concurrent
        first callers may compute in parallel; the first stored value wins.
        """
        if (cached := self._cache.get(text)) is not None:
            return cached
        logger.debug("dasherize cache miss for %r", text)
        return self._cache.put(text, case.dasherize_uncached(text))
