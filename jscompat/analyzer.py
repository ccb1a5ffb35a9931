"""Entry point tying parsing, classification and aggregation together."""

from __future__ import annotations

from .aggregate import build_result
from .classify import classify
from .constants import HASHBANG_PREFIX
from .evidence import EvidenceCollector
from .model import AnalysisResult
from .parser import parse_source
from .util.debug import debug_log


def analyze_code(source: str) -> AnalysisResult:
    """Detect JavaScript features in source and report their browser support.

    Raises SourceParseError when source is not valid JavaScript; nothing is
    returned for partially parsed input.
    """
    collector = EvidenceCollector(source)
    if source.startswith(HASHBANG_PREFIX):
        collector.add("hashbang", 0, len(HASHBANG_PREFIX))

    tree = parse_source(source)
    hits = classify(tree, collector)
    result = build_result(collector)
    debug_log(
        "analyzed %d chars: %d hits, %d features",
        len(source),
        hits,
        result.summary.total_features,
    )
    return result
