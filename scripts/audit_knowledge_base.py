#!/usr/bin/env python3
"""
Audit script for the bundled E-number knowledge base.

Builds the knowledge base (failing on duplicate or malformed codes), prints
per-segment and per-status counts, and checks that every entry can be found
again through the query resolver.

Usage:
    python scripts/audit_knowledge_base.py [--json] [--query 471 --query e160a]
"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.enumbers import (  # noqa: E402
    KnowledgeBase,
    KnowledgeBaseError,
    MatchKind,
    QueryResolver,
    split_code,
)
from src.enumbers.data import SEGMENTS  # noqa: E402


def check_round_trips(kb: KnowledgeBase) -> list[dict]:
    """Return one failure record per entry the resolver cannot find again."""
    resolver = QueryResolver(kb)
    failures = []

    for entry in kb:
        digits, suffix = split_code(entry.code)
        for query in (entry.display_code, entry.code, entry.code.lower()):
            result = resolver.resolve(query)
            found = result.kind is MatchKind.SINGLE and result.entry == entry
            if not found and not suffix and result.kind is MatchKind.MULTIPLE:
                # Bare digits with lettered siblings list the entry instead
                found = entry in result.entries
            if not found:
                failures.append({
                    "code": entry.code,
                    "query": query,
                    "kind": result.kind.value,
                    "reason": result.reason.value if result.reason else None,
                })
    return failures


def print_stats(stats: dict):
    print(f"\n{'='*60}")
    print(f"📚 KNOWLEDGE BASE")
    print(f"{'='*60}")
    print(f"\n   Total entries: {stats['total']}")

    print(f"\n📂 Segments:")
    for name, count in stats["segments"].items():
        print(f"   {name:<22} {count:>4}")

    print(f"\n🏷️  Statuses:")
    for status, count in stats["statuses"].items():
        print(f"   {status:<22} {count:>4}")


def print_queries(results: dict):
    print(f"\n{'='*60}")
    print(f"🔍 QUERIES")
    print(f"{'='*60}")
    for query, result in results.items():
        print(f"\n   {query!r} → {result['kind']}" + (f" ({result['reason']})" if result["reason"] else ""))
        for match in result["matches"]:
            print(f"   • {match['code']}: {match['name']} [{match['status']}]")


def main():
    parser = argparse.ArgumentParser(description="Audit the E-number knowledge base")
    parser.add_argument(
        "--query",
        action="append",
        default=[],
        help="Resolve an ad-hoc query (repeatable)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    args = parser.parse_args()

    try:
        kb = KnowledgeBase(SEGMENTS)
    except KnowledgeBaseError as e:
        print(f"❌ Knowledge base is inconsistent: {e}")
        sys.exit(1)

    stats = kb.stats()
    failures = check_round_trips(kb)

    resolver = QueryResolver(kb)
    query_results = {}
    for query in args.query:
        result = resolver.resolve(query)
        query_results[query] = {
            "kind": result.kind.value,
            "reason": result.reason.value if result.reason else None,
            "matches": [
                {"code": e.code, "name": e.name, "status": e.status.value}
                for e in result.entries
            ],
        }

    if args.json:
        print(json.dumps({
            "stats": stats,
            "round_trip_failures": failures,
            "queries": query_results,
        }, indent=2, ensure_ascii=False))
    else:
        print_stats(stats)
        if query_results:
            print_queries(query_results)
        if failures:
            print(f"\n❌ Round-trip failures ({len(failures)}):")
            for failure in failures:
                print(f"   • {failure['code']} via {failure['query']!r} → {failure['kind']}")
        else:
            print(f"\n✅ All {stats['total']} entries resolve")

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
