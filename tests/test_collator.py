"""
Unit tests for DuplicateCollator — clustering by original and statistics at record time.
"""
from dupes.core.collator import DuplicateCollator
from dupes.core.models import RunStatistics


class TestDuplicateCollator:

    def test_record_appends_in_discovery_order(self):
        collator = DuplicateCollator()
        collator.record("/a", "/z", 10)
        collator.record("/a", "/b", 10)
        collator.record("/a", "/m", 10)

        clusters = collator.finalize()

        assert len(clusters) == 1
        assert clusters[0].original == "/a"
        assert clusters[0].duplicates == ["/z", "/b", "/m"]

    def test_finalize_sorts_by_original(self):
        collator = DuplicateCollator()
        collator.record("/root/zeta", "/root/zeta2", 1)
        collator.record("/root/alpha", "/root/alpha2", 1)
        collator.record("/root/Mid", "/root/mid2", 1)

        originals = [c.original for c in collator.finalize()]

        assert originals == ["/root/Mid", "/root/alpha", "/root/zeta"]

    def test_statistics_updated_at_record_time(self):
        stats = RunStatistics()
        collator = DuplicateCollator(stats)

        collator.record("/a", "/b", 100)
        assert stats.duplicates_found == 1
        assert stats.bytes_wasted == 100

        collator.record("/c", "/d", 50)
        assert stats.duplicates_found == 2
        assert stats.bytes_wasted == 150

    def test_finalize_does_not_change_statistics(self):
        stats = RunStatistics()
        collator = DuplicateCollator(stats)
        collator.record("/a", "/b", 7)

        collator.finalize()
        collator.finalize()

        assert stats.duplicates_found == 1
        assert stats.bytes_wasted == 7

    def test_finalize_returns_copies(self):
        collator = DuplicateCollator()
        collator.record("/a", "/b", 1)

        first = collator.finalize()
        first[0].duplicates.append("/tampered")

        assert collator.finalize()[0].duplicates == ["/b"]

    def test_empty_collator(self):
        collator = DuplicateCollator()
        assert collator.finalize() == []

    def test_cluster_paths_lists_original_first(self):
        collator = DuplicateCollator()
        collator.record("/a", "/b", 1)
        collator.record("/a", "/c", 1)

        cluster = collator.finalize()[0]

        assert cluster.paths == ["/a", "/b", "/c"]
