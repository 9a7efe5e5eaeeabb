import pytest

from src.enumbers import (
    DuplicateCodeError,
    InvalidCodeError,
    KnowledgeBase,
    Segment,
    Status,
    split_code,
)
from src.enumbers.data import SEGMENTS


class TestBundledData:

    def test_codes_are_unique_across_segments(self):
        seen = {}
        for segment in SEGMENTS:
            for code in segment.entries:
                assert code not in seen, f"{code} in {seen.get(code)} and {segment.name}"
                seen[code] = segment.name

    def test_merged_size_matches_segments(self, kb):
        assert len(kb) == sum(len(segment.entries) for segment in SEGMENTS)

    def test_segment_priority_order(self, kb):
        assert kb.segment_names[:2] == ["non_vegan", "uncertain"]
        assert all(name.startswith("vegan_") for name in kb.segment_names[2:])

    def test_every_entry_has_name_and_status(self, kb):
        for entry in kb:
            assert entry.name.strip()
            assert entry.status in Status

    def test_known_classifications(self, kb):
        assert kb.get("E120").status is Status.NON_VEGAN
        assert kb.get("E471").status is Status.UNCERTAIN
        assert kb.get("E100").status is Status.VEGAN
        assert kb.get("E472a").status is Status.UNCERTAIN

    def test_stats_cover_all_statuses(self, kb):
        stats = kb.stats()

        assert stats["total"] == len(kb)
        assert set(stats["statuses"]) == {"vegan", "non-vegan", "uncertain"}
        assert sum(stats["statuses"].values()) == len(kb)
        assert sum(stats["segments"].values()) == len(kb)


class TestConstruction:

    def test_duplicate_code_is_rejected(self):
        segments = [
            Segment("non_vegan", Status.NON_VEGAN, {"E120": {"name": "Karmin"}}),
            Segment("vegan_1", Status.VEGAN, {"E120": {"name": "Karmin igen"}}),
        ]

        with pytest.raises(DuplicateCodeError) as exc_info:
            KnowledgeBase(segments)

        assert exc_info.value.code == "E120"
        assert exc_info.value.segments == ("non_vegan", "vegan_1")
        assert "E120" in str(exc_info.value)
        assert "vegan_1" in str(exc_info.value)

    @pytest.mark.parametrize("code", ["E124A", "471", "E12345", "E", "E47 1", "e471", "E100\n"])
    def test_malformed_code_is_rejected(self, code):
        segments = [Segment("vegan_1", Status.VEGAN, {code: {"name": "Något"}})]

        with pytest.raises(InvalidCodeError) as exc_info:
            KnowledgeBase(segments)

        assert exc_info.value.segment == "vegan_1"

    def test_missing_name_is_rejected(self):
        segments = [Segment("vegan_1", Status.VEGAN, {"E100": {"description": "Utan namn"}})]

        with pytest.raises(InvalidCodeError):
            KnowledgeBase(segments)

    def test_status_comes_from_segment(self, sample_kb):
        assert sample_kb.get("E904").status is Status.NON_VEGAN
        assert sample_kb.get("E161b").status is Status.UNCERTAIN
        assert sample_kb.get("E1000").status is Status.VEGAN
        assert sample_kb.segment_of("E1000") == "vegan_2"


class TestLookup:

    def test_get_unknown_code(self, sample_kb):
        assert sample_kb.get("E999") is None
        assert "E999" not in sample_kb
        assert "E100" in sample_kb

    def test_scan_matches_digit_run_exactly(self, sample_kb):
        assert sample_kb.scan_by_numeric_prefix("10") == []
        assert [e.code for e in sample_kb.scan_by_numeric_prefix("100")] == ["E100"]
        assert [e.code for e in sample_kb.scan_by_numeric_prefix("1000")] == ["E1000"]

    def test_scan_follows_segment_order(self, sample_kb):
        codes = [e.code for e in sample_kb.scan_by_numeric_prefix("161")]
        assert codes == ["E161b", "E161g"]

        codes = [e.code for e in sample_kb.scan_by_numeric_prefix("471")]
        assert codes == ["E471", "E471a"]

    def test_split_code(self):
        assert split_code("E472a") == ("472", "a")
        assert split_code("E1000") == ("1000", "")

        with pytest.raises(ValueError):
            split_code("472a")

        with pytest.raises(ValueError):
            split_code("E472a\n")


class TestImmutability:

    def test_later_edits_to_source_data_are_ignored(self, sample_segments):
        kb = KnowledgeBase(sample_segments)
        sample_segments[0].entries["E999"] = {"name": "Tillagd i efterhand"}

        assert "E999" not in kb
        assert "E999" not in kb.segments[0].entries
        assert kb.get("E120").name == "Karmin"

    def test_segments_are_read_only(self, sample_kb):
        with pytest.raises(TypeError):
            sample_kb.segments[0].entries["E999"] = {"name": "Ny"}

        with pytest.raises(TypeError):
            sample_kb.segments[0].entries["E120"]["name"] = "Annat"
