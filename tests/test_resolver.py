import pytest

from src.enumbers import (
    KnowledgeBase,
    MatchKind,
    MatchReason,
    QueryResolver,
    Segment,
    Status,
    normalize_query,
    resolve_query,
)


class TestNormalizeQuery:

    @pytest.mark.parametrize("raw, expected", [
        ("E471", "471"),
        ("e471", "471"),
        ("  471  ", "471"),
        (" e160a ", "160a"),
        ("E", ""),
        ("", ""),
        (None, ""),
        ("EE100", "E100"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_query(raw) == expected

    @pytest.mark.parametrize("raw", ["E471", "e472A", " 160 ", "abc"])
    def test_idempotent_on_query_shaped_input(self, raw):
        once = normalize_query(raw)
        assert normalize_query(once) == once


class TestFastPath:

    def test_single_candidate(self, resolver):
        result = resolver.resolve("471")

        assert result.kind is MatchKind.SINGLE
        assert result.entry.code == "E471"
        assert result.entry.status is Status.UNCERTAIN
        assert result.display_code == "471"

    def test_lettered_family_is_listed(self, resolver):
        result = resolver.resolve("472")

        assert result.kind is MatchKind.MULTIPLE
        assert [e.code for e in result.entries] == [
            "E472a", "E472b", "E472c", "E472d", "E472e", "E472f"
        ]
        assert result.display_code is None
        assert result.entry is None

    def test_candidates_follow_segment_order(self, resolver):
        result = resolver.resolve("161")

        assert result.kind is MatchKind.MULTIPLE
        assert [e.code for e in result.entries] == ["E161b", "E161g"]
        assert [e.status for e in result.entries] == [Status.UNCERTAIN, Status.VEGAN]

    @pytest.mark.parametrize("query, codes", [
        ("101", ["E101", "E101a"]),
        ("407", ["E407", "E407a"]),
        ("553", ["E553a", "E553b"]),
    ])
    def test_base_code_with_lettered_sibling(self, resolver, query, codes):
        result = resolver.resolve(query)

        assert result.kind is MatchKind.MULTIPLE
        assert [e.code for e in result.entries] == codes

    def test_repeated_ambiguous_query_is_stable(self, resolver):
        results = [resolver.resolve("472") for _ in range(5)]

        assert all(result.entries == results[0].entries for result in results)
        assert [e.code for e in results[0].entries][0] == "E472a"

    def test_prefix_is_not_a_match(self, resolver):
        result = resolver.resolve("10")

        assert result.kind is MatchKind.NONE
        assert result.reason is MatchReason.NOT_FOUND

    def test_leading_e_is_ignored(self, resolver):
        assert resolver.resolve("e120") == resolver.resolve("120")
        assert resolver.resolve("E120").entry.status is Status.NON_VEGAN

    def test_whitespace_is_trimmed(self, resolver):
        result = resolver.resolve("  100 ")

        assert result.kind is MatchKind.SINGLE
        assert result.entry.code == "E100"


class TestExactPath:

    def test_suffix_is_case_insensitive(self, resolver):
        upper = resolver.resolve("472A")
        lower = resolver.resolve("e472a")

        assert upper.kind is MatchKind.SINGLE
        assert upper.entry.code == "E472a"
        assert upper.entry == lower.entry
        assert upper.display_code == "472a"

    @pytest.mark.parametrize("query", ["124A", "124a", "9999", "0471"])
    def test_unknown_code(self, resolver, query):
        result = resolver.resolve(query)

        assert result.kind is MatchKind.NONE
        assert result.reason is MatchReason.NOT_FOUND
        assert result.entries == ()

    @pytest.mark.parametrize("query", ["abc", "ee100", "471-a", "4 71", "١٢٣"])
    def test_malformed_query(self, resolver, query):
        result = resolver.resolve(query)

        assert result.kind is MatchKind.NONE
        assert result.reason is MatchReason.MALFORMED

    @pytest.mark.parametrize("query", ["", "   ", "E", "e", None])
    def test_empty_query(self, resolver, query):
        result = resolver.resolve(query)

        assert result.kind is MatchKind.NONE
        assert result.reason is MatchReason.EMPTY_QUERY
        assert not result.is_match


class TestSegmentPriority:

    def test_exact_match_reports_its_segment_status(self, sample_kb):
        resolver = QueryResolver(sample_kb)

        assert resolver.resolve("161b").entry.status is Status.UNCERTAIN
        assert resolver.resolve("161G").entry.status is Status.VEGAN
        assert resolver.resolve("904").entry.status is Status.NON_VEGAN

    def test_cross_segment_candidates(self, sample_kb):
        result = QueryResolver(sample_kb).resolve("471")

        assert result.kind is MatchKind.MULTIPLE
        assert [(e.code, e.status) for e in result.entries] == [
            ("E471", Status.UNCERTAIN),
            ("E471a", Status.VEGAN),
        ]

    def test_four_digit_code(self, sample_kb):
        result = QueryResolver(sample_kb).resolve("E1000")

        assert result.kind is MatchKind.SINGLE
        assert result.entry.status is Status.VEGAN
        assert result.display_code == "1000"


    def test_empty_knowledge_base_is_used_as_given(self):
        empty = KnowledgeBase([Segment("vegan_1", Status.VEGAN, {})])
        resolver = QueryResolver(empty)

        assert resolver.knowledge_base is empty
        assert resolver.resolve("120").reason is MatchReason.NOT_FOUND
        assert resolver.resolve("E120").reason is MatchReason.NOT_FOUND

    def test_source_edits_after_load_do_not_leak(self, sample_segments):
        resolver = QueryResolver(KnowledgeBase(sample_segments))
        sample_segments[0].entries["E999"] = {"name": "Tillagd i efterhand"}

        result = resolver.resolve("999")

        assert result.kind is MatchKind.NONE
        assert result.reason is MatchReason.NOT_FOUND


class TestSelect:

    def test_select_does_not_widen(self, resolver):
        result = resolver.select("E101")

        assert result.kind is MatchKind.SINGLE
        assert result.entry.code == "E101"

    def test_select_lettered_candidate(self, resolver):
        candidates = resolver.resolve("472").entries
        result = resolver.select(candidates[2].code)

        assert result.entry == candidates[2]

    def test_select_unknown(self, resolver):
        assert resolver.select("E472z").reason is MatchReason.NOT_FOUND
        assert resolver.select("").reason is MatchReason.EMPTY_QUERY


class TestRoundTrip:

    def test_every_entry_can_be_found(self, kb, resolver):
        for entry in kb:
            for query in (entry.display_code, entry.code, entry.code.lower()):
                result = resolver.resolve(query)
                if result.kind is MatchKind.MULTIPLE:
                    assert entry in result.entries, query
                else:
                    assert result.kind is MatchKind.SINGLE, query
                    assert result.entry == entry, query

    def test_resolve_query_uses_bundled_data(self):
        result = resolve_query("E904")

        assert result.kind is MatchKind.SINGLE
        assert result.entry.name
        assert result.entry.status is Status.NON_VEGAN
