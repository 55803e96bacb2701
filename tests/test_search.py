"""Tests for fuzzy command search."""

import pytest

from govcmcp.catalogue import COMMAND_INDEX, CatalogueEntry, load_catalogue
from govcmcp.search import SearchIndex

SYNTHETIC = [
    CatalogueEntry("vm.info", "Display info for VM", "VM"),
    CatalogueEntry("vm.power", "Invoke VM power operations", "VM"),
    CatalogueEntry("snapshot.revert", "Revert to snapshot of VM", "Snapshot"),
    CatalogueEntry("host.maintenance.enter", "Put host in maintenance mode", "Host"),
    CatalogueEntry("datastore.ls", "List files on datastore", "Datastore"),
]


@pytest.fixture
def index() -> SearchIndex:
    return SearchIndex(SYNTHETIC)


class TestSearchIndex:
    """Test ranking, thresholds and limits on a synthetic catalogue."""

    def test_exact_name_first(self, index: SearchIndex) -> None:
        """An exact command name ranks first."""
        assert index.search("vm.power", limit=1) == [SYNTHETIC[1]]

    def test_tolerates_typos(self, index: SearchIndex) -> None:
        """Transposed letters still find the command."""
        results = index.search("snapshto revert")
        assert results[0].name == "snapshot.revert"

    def test_description_match(self, index: SearchIndex) -> None:
        """Description words find the command."""
        results = index.search("maintenance mode")
        assert results[0].name == "host.maintenance.enter"

    def test_unrelated_query_excluded(self, index: SearchIndex) -> None:
        """Queries below the threshold match nothing."""
        assert index.search("zzqxj") == []

    def test_limit_respected(self, index: SearchIndex) -> None:
        """No more than limit results are returned."""
        assert len(index.search("vm", limit=2)) <= 2

    def test_zero_limit(self, index: SearchIndex) -> None:
        """A zero limit returns nothing."""
        assert index.search("vm.info", limit=0) == []

    def test_empty_query(self, index: SearchIndex) -> None:
        """A blank query returns nothing."""
        assert index.search("") == []
        assert index.search("   ") == []

    def test_hits_sorted_by_score(self, index: SearchIndex) -> None:
        """Hits are ordered best first."""
        hits = index.search_hits("vm")
        scores = [hit.score for hit in hits]
        assert scores == sorted(scores, reverse=True)

    def test_score_below_threshold_is_none(self, index: SearchIndex) -> None:
        """score() is None below the threshold and 100 for an exact name."""
        assert index.score("zzqxj", SYNTHETIC[0]) is None
        assert index.score("vm.info", SYNTHETIC[0]) == pytest.approx(100.0)

    def test_len(self, index: SearchIndex) -> None:
        """The index reports its size."""
        assert len(index) == len(SYNTHETIC)


class TestFullCatalogue:
    """Test search over the shipped catalogue."""

    def test_catalogue_names_unique(self) -> None:
        """Catalogue names are unique."""
        names = [entry.name for entry in COMMAND_INDEX]
        assert len(names) == len(set(names))

    def test_catalogue_is_large(self) -> None:
        """The catalogue covers the govc command set."""
        assert len(load_catalogue()) > 300

    @pytest.mark.parametrize("name", ["vm.info", "snapshot.create", "host.esxcli", "about", "ls"])
    def test_exact_name_returns_entry_first(self, name: str) -> None:
        """Exact names rank first in the full catalogue."""
        index = SearchIndex(load_catalogue())
        assert index.search(name, limit=5)[0].name == name

    def test_default_limit(self) -> None:
        """The default limit caps broad queries."""
        index = SearchIndex(load_catalogue())
        assert len(index.search("vm")) <= 15
