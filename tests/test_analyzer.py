from __future__ import annotations

import time

import pytest

from jscompat import SourceParseError, analyze_code
from jscompat.catalogue import FEATURES
from jscompat.util.text import parse_version_floor


def test_const_declaration_scenario() -> None:
    result = analyze_code("const x = 1;")

    assert result.feature_keys == ("const-declaration",)
    assert result.summary.total_features == 1
    assert result.summary.modern_only_features == 1
    assert result.summary.all_features_legacy_compatible is True
    assert result.minimum_versions.to_dict() == {
        "chrome": "49+",
        "firefox": "36+",
        "safari": "10+",
        "edge": "12+",
        "ie": "11+",
    }

    (feature,) = result.features
    assert feature.display_name == "Const Declaration"
    (snippet,) = feature.snippets
    assert snippet.match_text == "const x = 1;"


def test_async_function_scenario() -> None:
    keys = set(analyze_code("async function f() { await g(); }").feature_keys)

    assert "async-await" in keys
    assert "top-level-await" not in keys


def test_top_level_await_scenario() -> None:
    keys = set(analyze_code("await g();").feature_keys)

    assert {"async-await", "top-level-await"} <= keys


def test_ambiguous_at_scenario() -> None:
    keys = set(analyze_code("const arr = [1, 2];\narr.at(0);").feature_keys)

    assert {"array-at", "string-at"} <= keys


@pytest.mark.parametrize("code", ["function f() {", "{", "let x = ;", "const = 5;"])
def test_unparseable_source_raises(code: str) -> None:
    with pytest.raises(SourceParseError) as excinfo:
        analyze_code(code)

    assert str(excinfo.value).startswith("Failed to parse JavaScript code: ")
    assert excinfo.value.diagnostic in str(excinfo.value)
    assert excinfo.value.line == 1


def test_parse_error_location_points_at_bad_line() -> None:
    with pytest.raises(SourceParseError) as excinfo:
        analyze_code("const a = 1;\nconst b = 2;\nlet c = ;\n")

    assert excinfo.value.line == 3


def test_hashbang_detected_before_parsing() -> None:
    result = analyze_code("#!/usr/bin/env node\nconst x = 1;\n")

    assert result.feature_keys[0] == "hashbang"
    (snippet,) = result.features[0].snippets
    assert snippet.match_text == "#!"
    assert snippet.match_line == 1


def test_empty_source_has_no_features() -> None:
    result = analyze_code("")

    assert result.features == ()
    assert result.summary.total_features == 0
    assert result.summary.modern_only_features == 0
    assert result.summary.all_features_legacy_compatible is True
    assert result.minimum_versions.to_dict() == {
        "chrome": "No",
        "firefox": "No",
        "safari": "No",
        "edge": "No",
        "ie": "No",
    }


def test_plain_es5_reports_nothing() -> None:
    result = analyze_code("var total = 0;\nfor (var i = 0; i < 3; i++) { total += i; }\n")

    assert result.features == ()


def test_features_keep_first_detection_order() -> None:
    code = "let a = 1;\nconst f = () => a;\nlet b = 2;\n"
    result = analyze_code(code)

    assert result.feature_keys == ("let-declaration", "const-declaration", "arrow-function")
    let_feature = result.features[0]
    assert [snippet.match_line for snippet in let_feature.snippets] == [1, 3]


def test_legacy_summary_and_matrix_combine_features() -> None:
    result = analyze_code("const f = () => 1;")

    assert set(result.feature_keys) == {"const-declaration", "arrow-function"}
    assert result.summary.modern_only_features == 2
    assert result.summary.all_features_legacy_compatible is False
    assert result.minimum_versions.chrome == "49+"
    assert result.minimum_versions.firefox == "36+"
    assert result.minimum_versions.ie == "11+"


def test_fractional_versions_keep_their_decimal() -> None:
    result = analyze_code("const last = items.at(-1);")

    assert result.minimum_versions.safari == "15.4+"
    assert result.minimum_versions.chrome == "92+"


def test_flagged_only_support_counts_as_no_version() -> None:
    result = analyze_code("const now = Temporal.Now.instant();")

    assert "temporal" in result.feature_keys
    # "No*" carries no number, so only const-declaration contributes.
    assert result.minimum_versions.chrome == "49+"
    assert result.minimum_versions.ie == "11+"

    temporal_only = analyze_code("Temporal.Now.instant();")
    assert temporal_only.minimum_versions.chrome == "No"


def test_every_detected_key_is_catalogued() -> None:
    code = """
    export class Store {
      static #instances = new WeakMap();
      #items = new Map();
      async *stream(...ids) {
        for await (const id of ids) yield this.#items.get(id) ?? null;
      }
    }
    const copy = structuredClone({ ...data, tags: data.tags?.toSorted() });
    const re = /(?<word>\\p{L}+)/gv;
    """
    result = analyze_code(code)

    assert result.features
    for feature in result.features:
        assert feature.key in FEATURES
        assert feature.descriptor is FEATURES[feature.key]


def test_matrix_slot_is_max_of_feature_floors() -> None:
    result = analyze_code(
        "const a = Object.fromEntries(pairs);\nlet b = s.replaceAll('a', 'b');\nc ??= d;"
    )

    for browser, value in result.minimum_versions.items():
        floors = [
            floor
            for feature in result.features
            if (floor := parse_version_floor(getattr(feature.support, browser))) is not None
        ]
        if value == "No":
            assert not floors
        else:
            assert parse_version_floor(value) == max(floors)


def test_analysis_is_deterministic() -> None:
    code = "const a = async () => { await x; };\nawait y;\nlist.includes(1);\n"
    first = analyze_code(code)
    second = analyze_code(code)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_shape() -> None:
    payload = analyze_code("const x = 1;").to_dict()

    assert payload["summary"] == {"totalFeatures": 1, "modernFeatures": 1, "legacySupport": True}
    feature = payload["features"][0]
    assert feature["key"] == "const-declaration"
    assert feature["feature"] == "Const Declaration"
    assert feature["notes"] == "IE11 has partial support"
    assert feature["codeSnippets"][0]["matchCol"] == 0
    assert payload["minimumVersions"]["ie"] == "11+"


def _elapsed(code: str) -> float:
    best = float("inf")
    for _ in range(3):
        started = time.perf_counter()
        analyze_code(code)
        best = min(best, time.perf_counter() - started)
    return best


def test_analysis_time_grows_linearly() -> None:
    def _source(lines: int) -> str:
        return "\n".join(f"const a{index} = x.at({index});" for index in range(lines))

    small = _elapsed(_source(1_000))
    large = _elapsed(_source(4_000))

    # Four times the input; quadratic evidence extraction would be ~16x.
    assert large < small * 8


def test_assert_import_and_type_annotations_parse() -> None:
    code = (
        "import config from './config.json' assert { type: 'json' };\n"
        "export const port: number = config.port ?? 8080;\n"
    )
    keys = set(analyze_code(code).feature_keys)

    assert {"import-assertions", "const-declaration", "nullish-coalescing"} <= keys
