"""Syntax-tree classifier mapping node shapes to catalogue feature keys.

Each handler looks only at its node and that node's ancestors, so the set of
detected features does not depend on the order nodes are visited in. Method
names that exist on several receiver types (``at``, ``includes``, ``with``)
are reported for every candidate type; the receiver's runtime type is not
known statically.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Final, NamedTuple

from tree_sitter import Node

from .evidence import EvidenceCollector
from .parser import SourceTree


class Hit(NamedTuple):
    key: str
    start: int
    end: int


Handler = Callable[[Node, SourceTree], list[Hit]]

FUNCTION_TYPES: Final[frozenset[str]] = frozenset(
    {
        "function_declaration",
        "function_expression",
        "generator_function_declaration",
        "generator_function",
        "arrow_function",
        "method_definition",
    }
)

CONSTRUCTOR_FEATURES: Final[Mapping[str, str]] = {
    "Promise": "promise",
    "Map": "map-object",
    "Set": "set-object",
    "WeakMap": "weakmap",
    "WeakSet": "weakset",
    "WeakRef": "weakref",
    "FinalizationRegistry": "finalizationregistry",
    "Proxy": "proxy",
    "SharedArrayBuffer": "sharedarraybuffer",
    "BigInt64Array": "bigint64array",
    "BigUint64Array": "biguint64array",
    "AggregateError": "aggregate-error",
    "URL": "url-constructor",
    "URLSearchParams": "urlsearchparams",
    "AbortController": "abortcontroller",
    "IntersectionObserver": "intersectionobserver",
    "MutationObserver": "mutationobserver",
    "ResizeObserver": "resizeobserver",
}

INTL_CONSTRUCTOR_FEATURES: Final[Mapping[str, str]] = {
    "RelativeTimeFormat": "intl-relativetimeformat",
    "ListFormat": "intl-listformat",
}

# Constructors whose options-object second argument signals a newer overload.
OPTIONS_OVERLOAD_FEATURES: Final[Mapping[str, str]] = {
    "Error": "error-cause",
    "ArrayBuffer": "resizable-arraybuffer",
}

GLOBAL_CALL_FEATURES: Final[Mapping[str, str]] = {
    "Symbol": "symbol",
    "BigInt": "bigint",
    "structuredClone": "structuredclone",
    "fetch": "fetch-api",
    "queueMicrotask": "queuemicrotask",
    "reportError": "reporterror",
    "AbortController": "abortcontroller",
    "IntersectionObserver": "intersectionobserver",
    "MutationObserver": "mutationobserver",
    "ResizeObserver": "resizeobserver",
    "URL": "url-constructor",
    "URLSearchParams": "urlsearchparams",
}

METHOD_FEATURES: Final[Mapping[str, tuple[str, ...]]] = {
    "find": ("array-find",),
    "findIndex": ("array-findindex",),
    "findLast": ("array-findlast",),
    "findLastIndex": ("array-findlastindex",),
    "at": ("array-at", "string-at", "typedarray-at"),
    "includes": ("array-includes", "string-includes"),
    "with": ("array-with", "typedarray-with"),
    "flat": ("array-flat",),
    "flatMap": ("array-flatmap",),
    "toReversed": ("array-toreversed",),
    "toSorted": ("array-tosorted",),
    "toSpliced": ("array-tospliced",),
    "startsWith": ("string-startswith",),
    "endsWith": ("string-endswith",),
    "repeat": ("string-repeat",),
    "padStart": ("string-padstart",),
    "padEnd": ("string-padend",),
    "replaceAll": ("string-replaceall",),
    "matchAll": ("string-matchall",),
    "trimStart": ("string-trimstart",),
    "trimEnd": ("string-trimend",),
    "isWellFormed": ("string-iswellformed",),
    "toWellFormed": ("string-towellformed",),
}

STATIC_METHOD_FEATURES: Final[Mapping[tuple[str, str], str]] = {
    ("Array", "from"): "array-from",
    ("Array", "fromAsync"): "array-fromasync",
    ("Object", "assign"): "object-assign",
    ("Object", "keys"): "object-keys",
    ("Object", "values"): "object-values",
    ("Object", "entries"): "object-entries",
    ("Object", "fromEntries"): "object-fromentries",
    ("Object", "hasOwn"): "object-hasown",
    ("Object", "groupBy"): "object-groupby",
    ("Promise", "allSettled"): "promise-allsettled",
    ("Promise", "any"): "promise-any",
    ("crypto", "getRandomValues"): "crypto-getrandomvalues",
    ("crypto", "randomUUID"): "crypto-randomuuid",
    ("performance", "now"): "performance-now",
    ("Iterator", "from"): "iterator-helpers",
}

# Any method call on these namespaces counts.
NAMESPACE_FEATURES: Final[Mapping[str, str]] = {
    "Reflect": "reflect",
    "Atomics": "atomics",
}

GLOBAL_OBJECT_FEATURES: Final[Mapping[str, str]] = {
    "globalThis": "globalthis",
    "localStorage": "localstorage",
    "sessionStorage": "sessionstorage",
    "indexedDB": "indexeddb",
    "Temporal": "temporal",
}

REGEX_FLAG_FEATURES: Final[Mapping[str, str]] = {
    "s": "regex-s-flag",
    "d": "regex-match-indices",
    "v": "regex-v-flag",
}

# Plain substring checks on the raw pattern text, not a regex grammar parse.
REGEX_PATTERN_FEATURES: Final[tuple[tuple[tuple[str, ...], str], ...]] = (
    (("(?<",), "regex-named-groups"),
    (("(?<=", "(?<!"), "regex-lookbehind"),
    (("\\p{",), "regex-unicode-property"),
)

LOGICAL_ASSIGNMENT_OPERATORS: Final[frozenset[str]] = frozenset({"&&=", "||=", "??="})

IMPORT_ATTRIBUTE_FEATURES: Final[Mapping[str, str]] = {
    "with": "import-attributes",
    "assert": "import-assertions",
}

DECLARATION_KIND_FEATURES: Final[Mapping[str, str]] = {
    "const": "const-declaration",
    "let": "let-declaration",
}


def _hit(tree: SourceTree, key: str, node: Node) -> Hit:
    start, end = tree.span(node)
    return Hit(key, start, end)


def _has_token(node: Node, token: str) -> bool:
    return any(child.type == token for child in node.children)


def _arguments(node: Node) -> list[Node]:
    arguments = node.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def _identifier_name(node: Node | None, tree: SourceTree) -> str | None:
    if node is None or node.type != "identifier":
        return None
    return tree.node_text(node)


def _property_name(node: Node, tree: SourceTree) -> str | None:
    prop = node.child_by_field_name("property")
    if prop is None or prop.type != "property_identifier":
        return None
    return tree.node_text(prop)


def is_top_level(node: Node) -> bool:
    """True when no function boundary encloses node."""
    parent = node.parent
    while parent is not None:
        if parent.type in FUNCTION_TYPES:
            return False
        parent = parent.parent
    return True


def _parameter_shapes(params: Node) -> set[str]:
    """Which of default values and rest parameters a parameter list uses."""
    shapes: set[str] = set()
    for param in params.named_children:
        # required_parameter and optional_parameter carry `pattern` and `value` fields.
        if param.child_by_field_name("value") is not None:
            shapes.add("default")
        pattern = param.child_by_field_name("pattern")
        if pattern is not None and pattern.type == "rest_pattern":
            shapes.add("rest")
    return shapes


def _function_like(node: Node, tree: SourceTree) -> list[Hit]:
    hits: list[Hit] = []
    if node.type == "arrow_function":
        hits.append(_hit(tree, "arrow-function", node))
    if _has_token(node, "async"):
        hits.append(_hit(tree, "async-await", node))
    if node.type in {"generator_function", "generator_function_declaration"} or _has_token(
        node, "*"
    ):
        hits.append(_hit(tree, "generator-function", node))

    params = node.child_by_field_name("parameters")
    if params is not None:
        shapes = _parameter_shapes(params)
        if "default" in shapes:
            hits.append(_hit(tree, "default-parameters", node))
        if "rest" in shapes:
            hits.append(_hit(tree, "rest-parameters", node))

    if node.type == "method_definition":
        parent = node.parent
        if parent is not None and parent.type == "object":
            hits.append(_hit(tree, "method-definition", node))
        name = node.child_by_field_name("name")
        if name is not None and name.type == "private_property_identifier":
            hits.append(_hit(tree, "private-methods", node))
    return hits


def _lexical_declaration(node: Node, tree: SourceTree) -> list[Hit]:
    kind = node.child_by_field_name("kind")
    key = DECLARATION_KIND_FEATURES.get(kind.type) if kind is not None else None
    return [_hit(tree, key, node)] if key else []


def _for_in_statement(node: Node, tree: SourceTree) -> list[Hit]:
    hits: list[Hit] = []
    operator = node.child_by_field_name("operator")
    if operator is not None and operator.type == "of":
        hits.append(_hit(tree, "for-of", node))
        if _has_token(node, "await"):
            hits.append(_hit(tree, "async-iteration", node))

    # `for (const x of y)` declares through the loop header, not a lexical_declaration.
    kind = node.child_by_field_name("kind")
    left = node.child_by_field_name("left")
    key = DECLARATION_KIND_FEATURES.get(kind.type) if kind is not None else None
    if key and left is not None:
        start, _ = tree.span(kind)
        _, end = tree.span(left)
        hits.append(Hit(key, start, end))
    return hits


def _await_expression(node: Node, tree: SourceTree) -> list[Hit]:
    hits = [_hit(tree, "async-await", node)]
    if is_top_level(node):
        hits.append(_hit(tree, "top-level-await", node))
    return hits


def _new_expression(node: Node, tree: SourceTree) -> list[Hit]:
    hits: list[Hit] = []
    constructor = node.child_by_field_name("constructor")
    name = _identifier_name(constructor, tree)
    if name is not None:
        key = CONSTRUCTOR_FEATURES.get(name)
        if key:
            hits.append(_hit(tree, key, node))
        overload_key = OPTIONS_OVERLOAD_FEATURES.get(name)
        arguments = _arguments(node)
        # The options object is not inspected for the specific property.
        if overload_key and len(arguments) >= 2 and arguments[1].type == "object":
            hits.append(_hit(tree, overload_key, node))
    elif constructor is not None and constructor.type == "member_expression":
        namespace = _identifier_name(constructor.child_by_field_name("object"), tree)
        member = _property_name(constructor, tree)
        if namespace == "Intl" and member in INTL_CONSTRUCTOR_FEATURES:
            hits.append(_hit(tree, INTL_CONSTRUCTOR_FEATURES[member], node))
    return hits


def _member_call(node: Node, callee: Node, tree: SourceTree) -> list[Hit]:
    method = _property_name(callee, tree)
    if method is None:
        return []

    hits = [_hit(tree, key, node) for key in METHOD_FEATURES.get(method, ())]
    receiver = _identifier_name(callee.child_by_field_name("object"), tree)
    if receiver is None:
        return hits

    static_key = STATIC_METHOD_FEATURES.get((receiver, method))
    if static_key:
        hits.append(_hit(tree, static_key, node))
    namespace_key = NAMESPACE_FEATURES.get(receiver)
    if namespace_key:
        hits.append(_hit(tree, namespace_key, node))
    if receiver == "JSON" and method == "parse" and len(_arguments(node)) >= 3:
        hits.append(_hit(tree, "json-parse-reviver", node))
    return hits


def _call_expression(node: Node, tree: SourceTree) -> list[Hit]:
    callee = node.child_by_field_name("function")
    if callee is None:
        return []
    if callee.type == "import":
        return [_hit(tree, "dynamic-import", node)]
    if callee.type == "member_expression":
        return _member_call(node, callee, tree)

    name = _identifier_name(callee, tree)
    key = GLOBAL_CALL_FEATURES.get(name) if name is not None else None
    return [_hit(tree, key, node)] if key else []


def _member_expression(node: Node, tree: SourceTree) -> list[Hit]:
    name = _identifier_name(node.child_by_field_name("object"), tree)
    key = GLOBAL_OBJECT_FEATURES.get(name) if name is not None else None
    return [_hit(tree, key, node)] if key else []


def _meta_property(node: Node, tree: SourceTree) -> list[Hit]:
    if tree.node_text(node).replace(" ", "") == "import.meta":
        return [_hit(tree, "import-meta", node)]
    return []


def _optional_chain(node: Node, tree: SourceTree) -> list[Hit]:
    owner = node.parent if node.parent is not None else node
    return [_hit(tree, "optional-chaining", owner)]


def _binary_expression(node: Node, tree: SourceTree) -> list[Hit]:
    operator = node.child_by_field_name("operator")
    if operator is not None and operator.type == "??":
        return [_hit(tree, "nullish-coalescing", node)]
    return []


def _augmented_assignment(node: Node, tree: SourceTree) -> list[Hit]:
    operator = node.child_by_field_name("operator")
    if operator is not None and operator.type in LOGICAL_ASSIGNMENT_OPERATORS:
        return [_hit(tree, "logical-assignment", node)]
    return []


def _pair(node: Node, tree: SourceTree) -> list[Hit]:
    key = node.child_by_field_name("key")
    if key is not None and key.type == "computed_property_name":
        return [_hit(tree, "computed-property", node)]
    return []


def _field_definition(node: Node, tree: SourceTree) -> list[Hit]:
    if _has_token(node, "static"):
        return [_hit(tree, "static-class-fields", node)]
    return []


def _number(node: Node, tree: SourceTree) -> list[Hit]:
    raw = tree.node_text(node)
    hits: list[Hit] = []
    if "_" in raw:
        hits.append(_hit(tree, "numeric-separators", node))
    if raw.endswith("n"):
        hits.append(_hit(tree, "bigint", node))
    return hits


def _regex(node: Node, tree: SourceTree) -> list[Hit]:
    pattern_node = node.child_by_field_name("pattern")
    flags_node = node.child_by_field_name("flags")
    pattern = tree.node_text(pattern_node) if pattern_node is not None else ""
    flags = tree.node_text(flags_node) if flags_node is not None else ""

    hits = [_hit(tree, key, node) for flag, key in REGEX_FLAG_FEATURES.items() if flag in flags]
    for needles, key in REGEX_PATTERN_FEATURES:
        if any(needle in pattern for needle in needles):
            hits.append(_hit(tree, key, node))
    return hits


def _import_attribute(node: Node, tree: SourceTree) -> list[Hit]:
    statement = node.parent if node.parent is not None else node
    for child in node.children:
        key = IMPORT_ATTRIBUTE_FEATURES.get(child.type)
        if key:
            return [_hit(tree, key, statement)]
    return []


def _always(key: str) -> Handler:
    def _handler(node: Node, tree: SourceTree) -> list[Hit]:
        return [_hit(tree, key, node)]

    return _handler


HANDLERS: Final[Mapping[str, Handler]] = {
    **{node_type: _function_like for node_type in FUNCTION_TYPES},
    "lexical_declaration": _lexical_declaration,
    "for_in_statement": _for_in_statement,
    "await_expression": _await_expression,
    "new_expression": _new_expression,
    "call_expression": _call_expression,
    "member_expression": _member_expression,
    "meta_property": _meta_property,
    "optional_chain": _optional_chain,
    "binary_expression": _binary_expression,
    "augmented_assignment_expression": _augmented_assignment,
    "pair": _pair,
    "pair_pattern": _pair,
    "public_field_definition": _field_definition,
    "number": _number,
    "regex": _regex,
    "import_attribute": _import_attribute,
    "template_string": _always("template-literal"),
    "object_pattern": _always("destructuring"),
    "array_pattern": _always("destructuring"),
    "spread_element": _always("spread-operator"),
    "rest_pattern": _always("spread-operator"),
    "class_declaration": _always("class-declaration"),
    "abstract_class_declaration": _always("class-declaration"),
    "class": _always("class-declaration"),
    "private_property_identifier": _always("private-fields"),
    "shorthand_property_identifier": _always("shorthand-property"),
    "shorthand_property_identifier_pattern": _always("shorthand-property"),
    "import_statement": _always("import-statement"),
    "export_statement": _always("export-statement"),
    "decorator": _always("decorators"),
}


def walk(root: Node) -> Iterator[Node]:
    """Pre-order traversal over named nodes."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


def iter_hits(tree: SourceTree) -> Iterator[Hit]:
    for node in walk(tree.root):
        handler = HANDLERS.get(node.type)
        if handler is not None:
            yield from handler(node, tree)


def classify(tree: SourceTree, collector: EvidenceCollector) -> int:
    """Record every feature hit in tree into collector; return the hit count."""
    count = 0
    for hit in iter_hits(tree):
        collector.add(hit.key, hit.start, hit.end)
        count += 1
    return count
