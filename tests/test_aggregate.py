from __future__ import annotations

import logging

import pytest

from jscompat.aggregate import (
    build_result,
    compute_minimum_versions,
    detected_features,
    summarize,
)
from jscompat.evidence import EvidenceCollector
from jscompat.model import DetectedFeature, FeatureDescriptor, VersionRecord


def _descriptor(key: str, **support: str) -> FeatureDescriptor:
    versions = {"chrome": "No", "firefox": "No", "safari": "No", "edge": "No", "ie": "No"}
    versions.update(support)
    return FeatureDescriptor(
        key=key,
        display_name=key.title(),
        description=f"{key} description",
        support=VersionRecord(**versions),
    )


def _feature(key: str, **support: str) -> DetectedFeature:
    return DetectedFeature(descriptor=_descriptor(key, **support))


CATALOGUE = {
    "alpha": _descriptor("alpha", chrome="45+", firefox="22+", safari="10+", edge="12+"),
    "beta": _descriptor("beta", chrome="49+", firefox="36+", safari="10+", edge="12+", ie="11*"),
    "gamma": _descriptor("gamma", chrome="92+", safari="15.4+", edge="No*", ie="9+"),
}


def test_matrix_takes_highest_floor_per_browser() -> None:
    versions = compute_minimum_versions(
        [
            _feature("a", chrome="45+", safari="10.1+", ie="11"),
            _feature("b", chrome="80+", safari="9+", ie="No"),
        ]
    )

    assert versions.to_dict() == {
        "chrome": "80+",
        "firefox": "No",
        "safari": "10.1+",
        "edge": "No",
        "ie": "11+",
    }


def test_matrix_skips_entries_without_a_number() -> None:
    versions = compute_minimum_versions(
        [
            _feature("a", chrome="No*", firefox="Flag", edge="16*"),
            _feature("b", chrome="No", edge="12+"),
        ]
    )

    assert versions.chrome == "No"
    assert versions.firefox == "No"
    assert versions.edge == "16+"


def test_matrix_compares_numerically() -> None:
    versions = compute_minimum_versions(
        [_feature("a", safari="9.1+"), _feature("b", safari="10+"), _feature("c", safari="13.1+")]
    )

    assert versions.safari == "13.1+"


def test_empty_feature_list() -> None:
    assert compute_minimum_versions([]).to_dict() == dict.fromkeys(
        ("chrome", "firefox", "safari", "edge", "ie"), "No"
    )
    summary = summarize([])
    assert summary.total_features == 0
    assert summary.modern_only_features == 0
    assert summary.all_features_legacy_compatible is True


@pytest.mark.parametrize(
    ("ie", "modern", "legacy"),
    [
        ("No", 1, False),
        ("11*", 1, True),
        ("11", 0, True),
        ("9+", 0, True),
    ],
)
def test_summary_follows_legacy_browser(ie: str, modern: int, legacy: bool) -> None:
    summary = summarize([_feature("x", chrome="1+", ie=ie)])

    assert summary.total_features == 1
    assert summary.modern_only_features == modern
    assert summary.all_features_legacy_compatible is legacy


def test_summary_mixed_features() -> None:
    features = [
        _feature("a", ie="11*"),
        _feature("b", ie="No"),
        _feature("c", ie="10+"),
    ]
    summary = summarize(features)

    assert summary.total_features == 3
    assert summary.modern_only_features == 2
    assert summary.all_features_legacy_compatible is False


def test_detected_features_follow_collector_order() -> None:
    collector = EvidenceCollector("let a = 1;\nlet b = 2;\n")
    collector.add("gamma", 0, 3)
    collector.add("alpha", 11, 14)
    collector.add("gamma", 11, 14)

    features = detected_features(collector, CATALOGUE)

    assert [feature.key for feature in features] == ["gamma", "alpha"]
    assert [snippet.match_line for snippet in features[0].snippets] == [1, 2]
    assert features[1].descriptor is CATALOGUE["alpha"]


def test_uncatalogued_keys_are_dropped(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("JSCOMPAT_DEBUG", "1")
    collector = EvidenceCollector("x")
    collector.add("unknown-thing", 0, 1)
    collector.add("beta", 0, 1)

    with caplog.at_level(logging.DEBUG, logger="jscompat"):
        features = detected_features(collector, CATALOGUE)

    assert [feature.key for feature in features] == ["beta"]
    assert "unknown-thing" in caplog.text


def test_build_result_combines_everything() -> None:
    collector = EvidenceCollector("abc")
    for key in ("alpha", "beta", "gamma"):
        collector.add(key, 0, 1)

    result = build_result(collector, CATALOGUE)

    assert result.feature_keys == ("alpha", "beta", "gamma")
    assert result.summary.total_features == 3
    assert result.summary.modern_only_features == 2
    assert result.summary.all_features_legacy_compatible is False
    assert result.minimum_versions.to_dict() == {
        "chrome": "92+",
        "firefox": "36+",
        "safari": "15.4+",
        "edge": "12+",
        "ie": "11+",
    }
