"""
Fuzzy search over the command catalogue.

Each entry is scored per field with rapidfuzz's WRatio (which tolerates
typos, partial terms and reordered words) and the field scores are
weighted: name counts most, then description, then category. An entry is
a candidate only if at least one field reaches SIMILARITY_THRESHOLD.

The index is built once from an immutable catalogue and holds no mutable
state, so one instance can serve concurrent lookups.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from rapidfuzz import fuzz, utils

from govcmcp.catalogue import CatalogueEntry

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 15

# Minimum per-field similarity (0-100) for an entry to be considered at all.
SIMILARITY_THRESHOLD = 60.0

FIELD_WEIGHTS: dict[str, float] = {
    "name": 6.0,
    "description": 4.0,
    "category": 2.0,
}


@dataclass(frozen=True)
class SearchHit:
    """A catalogue entry with its ranking score (0-100)."""
    entry: CatalogueEntry
    score: float


@dataclass(frozen=True)
class _IndexedEntry:
    entry: CatalogueEntry
    fields: dict[str, str]


def _processed_fields(entry: CatalogueEntry) -> dict[str, str]:
    return {
        "name": utils.default_process(entry.name),
        "description": utils.default_process(entry.description),
        "category": utils.default_process(entry.category),
    }


class SearchIndex:
    """
    Weighted fuzzy index over CatalogueEntry records.

    Usage:
        index = SearchIndex(load_catalogue())
        index.search("power on vm", limit=5)
    """

    def __init__(
        self,
        entries: Iterable[CatalogueEntry],
        weights: dict[str, float] | None = None,
        threshold: float = SIMILARITY_THRESHOLD,
    ):
        self._weights = dict(weights or FIELD_WEIGHTS)
        self._max_weight = max(self._weights.values())
        self._threshold = threshold
        self._entries: tuple[_IndexedEntry, ...] = tuple(
            _IndexedEntry(entry=entry, fields=_processed_fields(entry)) for entry in entries
        )
        logger.debug(f"Built search index over {len(self._entries)} entries")

    def __len__(self) -> int:
        return len(self._entries)

    def score(self, query: str, entry: CatalogueEntry) -> float | None:
        """Weighted score of one entry, or None if it is below the threshold."""
        return self._score_fields(utils.default_process(query), _processed_fields(entry))

    def _score_fields(self, query: str, fields: dict[str, str]) -> float | None:
        best_raw = 0.0
        best_weighted = 0.0
        for name, text in fields.items():
            similarity = fuzz.WRatio(query, text)
            best_raw = max(best_raw, similarity)
            weighted = similarity * self._weights.get(name, 0.0) / self._max_weight
            best_weighted = max(best_weighted, weighted)
        if best_raw < self._threshold:
            return None
        return best_weighted

    def search_hits(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchHit]:
        """Ranked hits, best first; ties keep catalogue order."""
        processed = utils.default_process(query)
        if not processed or limit <= 0:
            return []

        hits: list[tuple[float, int, CatalogueEntry]] = []
        for position, indexed in enumerate(self._entries):
            score = self._score_fields(processed, indexed.fields)
            if score is not None:
                hits.append((score, position, indexed.entry))

        hits.sort(key=lambda hit: (-hit[0], hit[1]))
        return [SearchHit(entry=entry, score=score) for score, _, entry in hits[:limit]]

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[CatalogueEntry]:
        """Top `limit` entries matching query, best match first."""
        return [hit.entry for hit in self.search_hits(query, limit)]
