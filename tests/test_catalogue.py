from __future__ import annotations

import re

import pytest

from jscompat import classify
from jscompat.catalogue import FEATURE_CATEGORIES, FEATURES, categories_for, lookup
from jscompat.constants import BROWSER_SLOTS

_SUPPORT_RE = re.compile(r"^(No\*?|\d+(\.\d+)?[+*])$")


def test_catalogue_is_read_only() -> None:
    with pytest.raises(TypeError):
        FEATURES["new-feature"] = FEATURES["arrow-function"]  # type: ignore[index]


def test_catalogue_keys_match_descriptors() -> None:
    assert len(FEATURES) == 116
    for key, descriptor in FEATURES.items():
        assert descriptor.key == key
        assert descriptor.display_name
        assert descriptor.description


def test_support_strings_are_well_formed() -> None:
    for descriptor in FEATURES.values():
        for browser, value in descriptor.support.items():
            assert browser in BROWSER_SLOTS
            assert _SUPPORT_RE.match(value), (descriptor.key, browser, value)


def test_lookup_unknown_key_is_none() -> None:
    assert lookup("arrow-function") is FEATURES["arrow-function"]
    assert lookup("not-a-feature") is None


def test_notes_carried_for_partial_support() -> None:
    const = FEATURES["const-declaration"]
    assert const.support.ie == "11*"
    assert const.notes == "IE11 has partial support"
    assert FEATURES["arrow-function"].notes is None


def test_every_feature_has_a_display_category() -> None:
    for key in FEATURES:
        assert categories_for(key), key
    for keys in FEATURE_CATEGORIES.values():
        assert set(keys) <= set(FEATURES)


def test_multi_category_features() -> None:
    assert categories_for("sharedarraybuffer") == ("Data Structures", "Concurrency")
    assert categories_for("decorators") == ("Syntax", "Experimental")
    assert categories_for("unknown") == ()


def test_classifier_tables_only_name_catalogued_keys() -> None:
    emitted: set[str] = set()
    emitted.update(classify.CONSTRUCTOR_FEATURES.values())
    emitted.update(classify.INTL_CONSTRUCTOR_FEATURES.values())
    emitted.update(classify.OPTIONS_OVERLOAD_FEATURES.values())
    emitted.update(classify.GLOBAL_CALL_FEATURES.values())
    emitted.update(classify.STATIC_METHOD_FEATURES.values())
    emitted.update(classify.NAMESPACE_FEATURES.values())
    emitted.update(classify.GLOBAL_OBJECT_FEATURES.values())
    emitted.update(classify.REGEX_FLAG_FEATURES.values())
    emitted.update(classify.IMPORT_ATTRIBUTE_FEATURES.values())
    emitted.update(classify.DECLARATION_KIND_FEATURES.values())
    emitted.update(key for _, key in classify.REGEX_PATTERN_FEATURES)
    for keys in classify.METHOD_FEATURES.values():
        emitted.update(keys)

    assert emitted <= set(FEATURES)
