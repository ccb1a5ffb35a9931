"""Aggregation of detected features into a summary and a minimum-version matrix."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .catalogue import FEATURES
from .constants import BROWSER_SLOTS, LEGACY_BROWSER, PARTIAL_SUPPORT_MARKER, UNSUPPORTED
from .evidence import EvidenceCollector
from .model import (
    AnalysisResult,
    AnalysisSummary,
    DetectedFeature,
    FeatureDescriptor,
    VersionRecord,
)
from .util.debug import debug_log
from .util.text import format_version_floor, parse_version_floor


def _is_modern_only(feature: DetectedFeature) -> bool:
    legacy = getattr(feature.support, LEGACY_BROWSER)
    return legacy == UNSUPPORTED or PARTIAL_SUPPORT_MARKER in legacy


def _is_legacy_compatible(feature: DetectedFeature) -> bool:
    return getattr(feature.support, LEGACY_BROWSER) != UNSUPPORTED


def summarize(features: Sequence[DetectedFeature]) -> AnalysisSummary:
    return AnalysisSummary(
        total_features=len(features),
        modern_only_features=sum(1 for feature in features if _is_modern_only(feature)),
        all_features_legacy_compatible=all(_is_legacy_compatible(f) for f in features),
    )


def compute_minimum_versions(features: Sequence[DetectedFeature]) -> VersionRecord:
    """Oldest version of each browser that supports every feature in features.

    Per browser this is the highest version floor among the features; "No"
    entries and strings without a number are skipped, and a browser with no
    usable floor at all reports "No".
    """
    matrix: dict[str, str] = {}
    for browser in BROWSER_SLOTS:
        floors = [
            floor
            for feature in features
            if (floor := parse_version_floor(getattr(feature.support, browser))) is not None
        ]
        matrix[browser] = format_version_floor(max(floors)) if floors else UNSUPPORTED
    return VersionRecord(**matrix)


def detected_features(
    collector: EvidenceCollector,
    catalogue: Mapping[str, FeatureDescriptor] = FEATURES,
) -> list[DetectedFeature]:
    output: list[DetectedFeature] = []
    for key in collector.keys():
        descriptor = catalogue.get(key)
        if descriptor is None:
            debug_log("dropping uncatalogued feature key %r", key)
            continue
        output.append(DetectedFeature(descriptor=descriptor, snippets=collector.snippets(key)))
    return output


def build_result(
    collector: EvidenceCollector,
    catalogue: Mapping[str, FeatureDescriptor] = FEATURES,
) -> AnalysisResult:
    features = detected_features(collector, catalogue)
    return AnalysisResult(
        features=tuple(features),
        summary=summarize(features),
        minimum_versions=compute_minimum_versions(features),
    )
