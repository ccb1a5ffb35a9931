"""Data models for feature detection and aggregation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .constants import BROWSER_SLOTS


@dataclass(frozen=True)
class VersionRecord:
    chrome: str
    firefox: str
    safari: str
    edge: str
    ie: str

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (browser, version) pairs in display order."""
        for browser in BROWSER_SLOTS:
            yield browser, getattr(self, browser)

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


@dataclass(frozen=True)
class FeatureDescriptor:
    key: str
    display_name: str
    description: str
    support: VersionRecord
    notes: str | None = None


@dataclass(frozen=True)
class CodeSnippet:
    """One place in the source where a feature was seen, with nearby lines."""

    context_text: str
    context_start_line: int
    match_line: int
    match_column: int
    match_length: int
    match_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.context_text,
            "startLine": self.context_start_line,
            "matchLine": self.match_line,
            "matchCol": self.match_column,
            "matchLength": self.match_length,
            "matchText": self.match_text,
        }


@dataclass(frozen=True)
class DetectedFeature:
    descriptor: FeatureDescriptor
    snippets: tuple[CodeSnippet, ...] = ()

    @property
    def key(self) -> str:
        return self.descriptor.key

    @property
    def display_name(self) -> str:
        return self.descriptor.display_name

    @property
    def description(self) -> str:
        return self.descriptor.description

    @property
    def support(self) -> VersionRecord:
        return self.descriptor.support

    @property
    def notes(self) -> str | None:
        return self.descriptor.notes

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "key": self.key,
            "feature": self.display_name,
            "description": self.description,
            "support": self.support.to_dict(),
            "codeSnippets": [snippet.to_dict() for snippet in self.snippets],
        }
        if self.notes is not None:
            payload["notes"] = self.notes
        return payload


@dataclass(frozen=True)
class AnalysisSummary:
    total_features: int
    modern_only_features: int
    all_features_legacy_compatible: bool


@dataclass(frozen=True)
class AnalysisResult:
    features: tuple[DetectedFeature, ...]
    summary: AnalysisSummary
    minimum_versions: VersionRecord

    @property
    def feature_keys(self) -> tuple[str, ...]:
        return tuple(feature.key for feature in self.features)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the camelCase shape consumed by web front ends."""
        return {
            "features": [feature.to_dict() for feature in self.features],
            "summary": {
                "totalFeatures": self.summary.total_features,
                "modernFeatures": self.summary.modern_only_features,
                "legacySupport": self.summary.all_features_legacy_compatible,
            },
            "minimumVersions": self.minimum_versions.to_dict(),
        }
