"""Static catalogue of detectable JavaScript features and their browser support."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .model import FeatureDescriptor, VersionRecord


def _feature(
    key: str,
    display_name: str,
    description: str,
    *,
    chrome: str,
    firefox: str,
    safari: str,
    edge: str,
    ie: str,
    notes: str | None = None,
) -> FeatureDescriptor:
    return FeatureDescriptor(
        key=key,
        display_name=display_name,
        description=description,
        support=VersionRecord(chrome=chrome, firefox=firefox, safari=safari, edge=edge, ie=ie),
        notes=notes,
    )


_DESCRIPTORS: tuple[FeatureDescriptor, ...] = (
    _feature(
        "arrow-function",
        "Arrow Functions",
        "Arrow function expressions (=>)",
        chrome="45+",
        firefox="22+",
        safari="10+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "const-declaration",
        "Const Declaration",
        "Block-scoped constant declarations",
        chrome="49+",
        firefox="36+",
        safari="10+",
        edge="12+",
        ie="11*",
        notes="IE11 has partial support",
    ),
    _feature(
        "let-declaration",
        "Let Declaration",
        "Block-scoped variable declarations",
        chrome="49+",
        firefox="44+",
        safari="10+",
        edge="12+",
        ie="11*",
        notes="IE11 has partial support",
    ),
    _feature(
        "template-literal",
        "Template Literals",
        "Template literal syntax with ${} interpolation",
        chrome="41+",
        firefox="34+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "destructuring",
        "Destructuring Assignment",
        "Destructuring objects and arrays",
        chrome="49+",
        firefox="41+",
        safari="8+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "spread-operator",
        "Spread Operator",
        "Spread syntax (...) for arrays and objects",
        chrome="46+",
        firefox="16+",
        safari="10+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "async-await",
        "Async/Await",
        "Asynchronous function syntax",
        chrome="55+",
        firefox="52+",
        safari="10.1+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "promise",
        "Promises",
        "Native Promise implementation",
        chrome="32+",
        firefox="29+",
        safari="7.1+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "class-declaration",
        "Classes",
        "ES6 class syntax",
        chrome="49+",
        firefox="45+",
        safari="9+",
        edge="13+",
        ie="No",
    ),
    _feature(
        "for-of",
        "For...of Loop",
        "For...of iteration syntax",
        chrome="38+",
        firefox="13+",
        safari="7+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "optional-chaining",
        "Optional Chaining",
        "Optional chaining operator (?.)",
        chrome="80+",
        firefox="72+",
        safari="13.1+",
        edge="80+",
        ie="No",
    ),
    _feature(
        "nullish-coalescing",
        "Nullish Coalescing",
        "Nullish coalescing operator (??)",
        chrome="80+",
        firefox="72+",
        safari="13.1+",
        edge="80+",
        ie="No",
    ),
    _feature(
        "map-object",
        "Map Object",
        "Native Map data structure",
        chrome="38+",
        firefox="13+",
        safari="7.1+",
        edge="12+",
        ie="11+",
    ),
    _feature(
        "set-object",
        "Set Object",
        "Native Set data structure",
        chrome="38+",
        firefox="13+",
        safari="7.1+",
        edge="12+",
        ie="11+",
    ),
    _feature(
        "symbol",
        "Symbol",
        "Symbol primitive type",
        chrome="38+",
        firefox="36+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "default-parameters",
        "Default Parameters",
        "Function default parameter values",
        chrome="49+",
        firefox="15+",
        safari="10+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "rest-parameters",
        "Rest Parameters",
        "Rest parameters (...args)",
        chrome="47+",
        firefox="15+",
        safari="10+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "computed-property",
        "Computed Property Names",
        "Object computed property names [key]: value",
        chrome="47+",
        firefox="34+",
        safari="8+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "shorthand-property",
        "Shorthand Properties",
        "Object shorthand property syntax {a, b}",
        chrome="43+",
        firefox="33+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "method-definition",
        "Method Definitions",
        "Object method shorthand {method() {}}",
        chrome="39+",
        firefox="34+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "generator-function",
        "Generator Functions",
        "Generator functions function*",
        chrome="39+",
        firefox="26+",
        safari="10+",
        edge="13+",
        ie="No",
    ),
    _feature(
        "import-statement",
        "ES6 Modules (import)",
        "ES6 import statements",
        chrome="61+",
        firefox="60+",
        safari="10.1+",
        edge="16+",
        ie="No",
    ),
    _feature(
        "export-statement",
        "ES6 Modules (export)",
        "ES6 export statements",
        chrome="61+",
        firefox="60+",
        safari="10.1+",
        edge="16+",
        ie="No",
    ),
    _feature(
        "dynamic-import",
        "Dynamic Import",
        "Dynamic import() syntax",
        chrome="63+",
        firefox="67+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "array-from",
        "Array.from()",
        "Array.from() method",
        chrome="45+",
        firefox="32+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "array-find",
        "Array.find()",
        "Array.prototype.find() method",
        chrome="45+",
        firefox="25+",
        safari="7.1+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "array-findindex",
        "Array.findIndex()",
        "Array.prototype.findIndex() method",
        chrome="45+",
        firefox="25+",
        safari="7.1+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "array-includes",
        "Array.includes()",
        "Array.prototype.includes() method",
        chrome="47+",
        firefox="43+",
        safari="9+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "array-flat",
        "Array.flat()",
        "Array.prototype.flat() method",
        chrome="69+",
        firefox="62+",
        safari="12+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "array-flatmap",
        "Array.flatMap()",
        "Array.prototype.flatMap() method",
        chrome="69+",
        firefox="62+",
        safari="12+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "object-assign",
        "Object.assign()",
        "Object.assign() method",
        chrome="45+",
        firefox="34+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "object-keys",
        "Object.keys()",
        "Object.keys() method",
        chrome="5+",
        firefox="4+",
        safari="5+",
        edge="12+",
        ie="9+",
    ),
    _feature(
        "object-values",
        "Object.values()",
        "Object.values() method",
        chrome="54+",
        firefox="47+",
        safari="10.1+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "object-entries",
        "Object.entries()",
        "Object.entries() method",
        chrome="54+",
        firefox="47+",
        safari="10.1+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "object-fromentries",
        "Object.fromEntries()",
        "Object.fromEntries() method",
        chrome="73+",
        firefox="63+",
        safari="12.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "string-includes",
        "String.includes()",
        "String.prototype.includes() method",
        chrome="41+",
        firefox="40+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "string-startswith",
        "String.startsWith()",
        "String.prototype.startsWith() method",
        chrome="41+",
        firefox="17+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "string-endswith",
        "String.endsWith()",
        "String.prototype.endsWith() method",
        chrome="41+",
        firefox="17+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "string-repeat",
        "String.repeat()",
        "String.prototype.repeat() method",
        chrome="41+",
        firefox="24+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "string-padstart",
        "String.padStart()",
        "String.prototype.padStart() method",
        chrome="57+",
        firefox="48+",
        safari="10+",
        edge="15+",
        ie="No",
    ),
    _feature(
        "string-padend",
        "String.padEnd()",
        "String.prototype.padEnd() method",
        chrome="57+",
        firefox="48+",
        safari="10+",
        edge="15+",
        ie="No",
    ),
    _feature(
        "weakmap",
        "WeakMap",
        "WeakMap data structure",
        chrome="36+",
        firefox="6+",
        safari="7.1+",
        edge="12+",
        ie="11+",
    ),
    _feature(
        "weakset",
        "WeakSet",
        "WeakSet data structure",
        chrome="36+",
        firefox="34+",
        safari="9+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "proxy",
        "Proxy",
        "Proxy object for meta-programming",
        chrome="49+",
        firefox="18+",
        safari="10+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "reflect",
        "Reflect",
        "Reflect global object",
        chrome="49+",
        firefox="42+",
        safari="10+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "bigint",
        "BigInt",
        "BigInt primitive type",
        chrome="67+",
        firefox="68+",
        safari="14+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "private-fields",
        "Private Class Fields",
        "Private class fields (#field)",
        chrome="74+",
        firefox="90+",
        safari="14.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "static-class-fields",
        "Static Class Fields",
        "Static class fields",
        chrome="72+",
        firefox="75+",
        safari="14.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "logical-assignment",
        "Logical Assignment",
        "Logical assignment operators (&&=, ||=, ??=)",
        chrome="85+",
        firefox="79+",
        safari="14+",
        edge="85+",
        ie="No",
    ),
    _feature(
        "numeric-separators",
        "Numeric Separators",
        "Numeric separators (1_000_000)",
        chrome="75+",
        firefox="70+",
        safari="13+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "top-level-await",
        "Top-level Await",
        "Await expressions at module top level",
        chrome="89+",
        firefox="89+",
        safari="15+",
        edge="89+",
        ie="No",
    ),
    _feature(
        "regex-named-groups",
        "RegExp Named Capture Groups",
        "Named capture groups in regular expressions (?<name>...)",
        chrome="64+",
        firefox="78+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "regex-lookbehind",
        "RegExp Lookbehind Assertions",
        "Lookbehind assertions in regular expressions (?<=...) (?<!...)",
        chrome="62+",
        firefox="78+",
        safari="16.4+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "regex-unicode-property",
        "RegExp Unicode Property Escapes",
        "Unicode property escapes in regular expressions \\p{...}",
        chrome="64+",
        firefox="78+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "regex-s-flag",
        "RegExp dotAll Flag",
        "Regular expression s flag (dotAll)",
        chrome="62+",
        firefox="78+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "globalthis",
        "globalThis",
        "Global object reference",
        chrome="71+",
        firefox="65+",
        safari="12.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "import-meta",
        "import.meta",
        "Module metadata object",
        chrome="64+",
        firefox="62+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "array-at",
        "Array.at()",
        "Array.prototype.at() method for relative indexing",
        chrome="92+",
        firefox="90+",
        safari="15.4+",
        edge="92+",
        ie="No",
    ),
    _feature(
        "string-at",
        "String.at()",
        "String.prototype.at() method for relative indexing",
        chrome="92+",
        firefox="90+",
        safari="15.4+",
        edge="92+",
        ie="No",
    ),
    _feature(
        "string-replaceall",
        "String.replaceAll()",
        "String.prototype.replaceAll() method",
        chrome="85+",
        firefox="77+",
        safari="13.1+",
        edge="85+",
        ie="No",
    ),
    _feature(
        "promise-allsettled",
        "Promise.allSettled()",
        "Promise.allSettled() method",
        chrome="76+",
        firefox="71+",
        safari="13+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "promise-any",
        "Promise.any()",
        "Promise.any() method",
        chrome="85+",
        firefox="79+",
        safari="14+",
        edge="85+",
        ie="No",
    ),
    _feature(
        "intl-relativetimeformat",
        "Intl.RelativeTimeFormat",
        "Internationalization relative time formatting",
        chrome="71+",
        firefox="65+",
        safari="14+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "intl-listformat",
        "Intl.ListFormat",
        "Internationalization list formatting",
        chrome="72+",
        firefox="78+",
        safari="14.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "finalizationregistry",
        "FinalizationRegistry",
        "Weak references and finalization",
        chrome="84+",
        firefox="79+",
        safari="14.1+",
        edge="84+",
        ie="No",
    ),
    _feature(
        "weakref",
        "WeakRef",
        "Weak references",
        chrome="84+",
        firefox="79+",
        safari="14.1+",
        edge="84+",
        ie="No",
    ),
    _feature(
        "private-methods",
        "Private Class Methods",
        "Private class methods (#method)",
        chrome="84+",
        firefox="90+",
        safari="15+",
        edge="84+",
        ie="No",
    ),
    _feature(
        "array-findlast",
        "Array.findLast()",
        "Array.prototype.findLast() method",
        chrome="97+",
        firefox="104+",
        safari="15.4+",
        edge="97+",
        ie="No",
    ),
    _feature(
        "array-findlastindex",
        "Array.findLastIndex()",
        "Array.prototype.findLastIndex() method",
        chrome="97+",
        firefox="104+",
        safari="15.4+",
        edge="97+",
        ie="No",
    ),
    _feature(
        "structuredclone",
        "structuredClone()",
        "Global structuredClone() function",
        chrome="98+",
        firefox="94+",
        safari="15.4+",
        edge="98+",
        ie="No",
    ),
    _feature(
        "string-matchall",
        "String.matchAll()",
        "String.prototype.matchAll() method",
        chrome="73+",
        firefox="67+",
        safari="13+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "array-toreversed",
        "Array.toReversed()",
        "Array.prototype.toReversed() method (immutable reverse)",
        chrome="110+",
        firefox="115+",
        safari="16+",
        edge="110+",
        ie="No",
    ),
    _feature(
        "array-tosorted",
        "Array.toSorted()",
        "Array.prototype.toSorted() method (immutable sort)",
        chrome="110+",
        firefox="115+",
        safari="16+",
        edge="110+",
        ie="No",
    ),
    _feature(
        "array-tospliced",
        "Array.toSpliced()",
        "Array.prototype.toSpliced() method (immutable splice)",
        chrome="110+",
        firefox="115+",
        safari="16+",
        edge="110+",
        ie="No",
    ),
    _feature(
        "array-with",
        "Array.with()",
        "Array.prototype.with() method (immutable element replacement)",
        chrome="110+",
        firefox="115+",
        safari="16+",
        edge="110+",
        ie="No",
    ),
    _feature(
        "string-trimstart",
        "String.trimStart()",
        "String.prototype.trimStart() method",
        chrome="66+",
        firefox="61+",
        safari="12+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "string-trimend",
        "String.trimEnd()",
        "String.prototype.trimEnd() method",
        chrome="66+",
        firefox="61+",
        safari="12+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "object-hasown",
        "Object.hasOwn()",
        "Object.hasOwn() method",
        chrome="93+",
        firefox="92+",
        safari="15.4+",
        edge="93+",
        ie="No",
    ),
    _feature(
        "object-groupby",
        "Object.groupBy()",
        "Object.groupBy() method",
        chrome="117+",
        firefox="119+",
        safari="17+",
        edge="117+",
        ie="No",
    ),
    _feature(
        "json-parse-reviver",
        "JSON.parse() with source",
        "JSON.parse() with source text access",
        chrome="105+",
        firefox="No",
        safari="16+",
        edge="105+",
        ie="No",
    ),
    _feature(
        "temporal",
        "Temporal API",
        "New date/time API (Stage 3)",
        chrome="No*",
        firefox="No*",
        safari="No*",
        edge="No*",
        ie="No",
        notes="Stage 3 proposal, available behind flags",
    ),
    _feature(
        "decorators",
        "Decorators",
        "Class and method decorators",
        chrome="120+",
        firefox="No*",
        safari="No*",
        edge="120+",
        ie="No",
        notes="Stage 3 proposal with limited support",
    ),
    _feature(
        "iterator-helpers",
        "Iterator Helpers",
        "Iterator.prototype methods (map, filter, etc.)",
        chrome="122+",
        firefox="No*",
        safari="No*",
        edge="122+",
        ie="No",
        notes="Stage 3 proposal",
    ),
    _feature(
        "atomics",
        "Atomics",
        "Atomic operations for SharedArrayBuffer",
        chrome="68+",
        firefox="78+",
        safari="15.2+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "sharedarraybuffer",
        "SharedArrayBuffer",
        "Shared memory between workers",
        chrome="68+",
        firefox="79+",
        safari="15.2+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "bigint64array",
        "BigInt64Array",
        "Typed array for 64-bit integers",
        chrome="67+",
        firefox="68+",
        safari="15+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "biguint64array",
        "BigUint64Array",
        "Typed array for 64-bit unsigned integers",
        chrome="67+",
        firefox="68+",
        safari="15+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "error-cause",
        "Error.cause",
        "Error constructor with cause option",
        chrome="93+",
        firefox="91+",
        safari="15+",
        edge="93+",
        ie="No",
    ),
    _feature(
        "aggregate-error",
        "AggregateError",
        "Error that wraps multiple errors",
        chrome="85+",
        firefox="79+",
        safari="14+",
        edge="85+",
        ie="No",
    ),
    _feature(
        "regex-match-indices",
        "RegExp Match Indices",
        "RegExp d flag for match indices",
        chrome="90+",
        firefox="88+",
        safari="15+",
        edge="90+",
        ie="No",
    ),
    _feature(
        "hashbang",
        "Hashbang Grammar",
        "Shebang (#!) support in modules",
        chrome="74+",
        firefox="67+",
        safari="13.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "import-assertions",
        "Import Assertions",
        "Import with type assertions",
        chrome="91+",
        firefox="No*",
        safari="No*",
        edge="91+",
        ie="No",
        notes="Being replaced by Import Attributes",
    ),
    _feature(
        "import-attributes",
        "Import Attributes",
        "Import with attributes (replaces assertions)",
        chrome="123+",
        firefox="No*",
        safari="No*",
        edge="123+",
        ie="No",
        notes="Stage 3 proposal",
    ),
    _feature(
        "resizable-arraybuffer",
        "Resizable ArrayBuffer",
        "ArrayBuffer.prototype.resize()",
        chrome="111+",
        firefox="No*",
        safari="16.4+",
        edge="111+",
        ie="No",
    ),
    _feature(
        "async-iteration",
        "Async Iteration",
        "for-await-of loops and async generators",
        chrome="63+",
        firefox="57+",
        safari="11.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "regex-v-flag",
        "RegExp v Flag",
        "RegExp v flag for extended Unicode support",
        chrome="112+",
        firefox="116+",
        safari="17+",
        edge="112+",
        ie="No",
    ),
    _feature(
        "fetch-api",
        "Fetch API",
        "Modern fetch() for network requests",
        chrome="42+",
        firefox="39+",
        safari="10.1+",
        edge="14+",
        ie="No",
    ),
    _feature(
        "urlsearchparams",
        "URLSearchParams",
        "URL query string manipulation API",
        chrome="49+",
        firefox="29+",
        safari="10.1+",
        edge="17+",
        ie="No",
    ),
    _feature(
        "url-constructor",
        "URL Constructor",
        "URL constructor for URL parsing and manipulation",
        chrome="32+",
        firefox="26+",
        safari="7+",
        edge="12+",
        ie="No",
    ),
    _feature(
        "abortcontroller",
        "AbortController",
        "Abort API for cancelling fetch requests",
        chrome="66+",
        firefox="57+",
        safari="11.1+",
        edge="16+",
        ie="No",
    ),
    _feature(
        "intersectionobserver",
        "IntersectionObserver",
        "API to observe element visibility changes",
        chrome="51+",
        firefox="55+",
        safari="12.1+",
        edge="15+",
        ie="No",
    ),
    _feature(
        "mutationobserver",
        "MutationObserver",
        "API to observe DOM mutations",
        chrome="26+",
        firefox="14+",
        safari="7+",
        edge="12+",
        ie="11+",
    ),
    _feature(
        "resizeobserver",
        "ResizeObserver",
        "API to observe element resize events",
        chrome="64+",
        firefox="69+",
        safari="13.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "array-fromasync",
        "Array.fromAsync()",
        "Create array from async iterable (ES2024)",
        chrome="121+",
        firefox="119+",
        safari="16.4+",
        edge="121+",
        ie="No",
    ),
    _feature(
        "string-iswellformed",
        "String.isWellFormed()",
        "Check if string is well-formed Unicode (ES2024)",
        chrome="111+",
        firefox="119+",
        safari="16.4+",
        edge="111+",
        ie="No",
    ),
    _feature(
        "string-towellformed",
        "String.toWellFormed()",
        "Convert to well-formed Unicode string (ES2024)",
        chrome="111+",
        firefox="119+",
        safari="16.4+",
        edge="111+",
        ie="No",
    ),
    _feature(
        "performance-now",
        "performance.now()",
        "High resolution timestamp API",
        chrome="24+",
        firefox="15+",
        safari="8+",
        edge="12+",
        ie="10+",
    ),
    _feature(
        "queuemicrotask",
        "queueMicrotask()",
        "Queue a microtask in the event loop",
        chrome="71+",
        firefox="69+",
        safari="12.1+",
        edge="79+",
        ie="No",
    ),
    _feature(
        "crypto-getrandomvalues",
        "crypto.getRandomValues()",
        "Cryptographically secure random values",
        chrome="11+",
        firefox="26+",
        safari="6.1+",
        edge="12+",
        ie="11+",
    ),
    _feature(
        "crypto-randomuuid",
        "crypto.randomUUID()",
        "Generate cryptographically secure UUIDs",
        chrome="92+",
        firefox="95+",
        safari="15.4+",
        edge="92+",
        ie="No",
    ),
    _feature(
        "typedarray-at",
        "TypedArray.at()",
        "Array.at() method for TypedArrays",
        chrome="92+",
        firefox="90+",
        safari="15.4+",
        edge="92+",
        ie="No",
    ),
    _feature(
        "typedarray-with",
        "TypedArray.with()",
        "Array.with() method for TypedArrays",
        chrome="110+",
        firefox="115+",
        safari="16+",
        edge="110+",
        ie="No",
    ),
    _feature(
        "localstorage",
        "localStorage",
        "Local storage web API",
        chrome="4+",
        firefox="3.5+",
        safari="4+",
        edge="12+",
        ie="8+",
    ),
    _feature(
        "sessionstorage",
        "sessionStorage",
        "Session storage web API",
        chrome="5+",
        firefox="2+",
        safari="4+",
        edge="12+",
        ie="8+",
    ),
    _feature(
        "indexeddb",
        "IndexedDB",
        "Client-side database API",
        chrome="24+",
        firefox="16+",
        safari="7+",
        edge="12+",
        ie="10+",
    ),
    _feature(
        "reporterror",
        "reportError()",
        "Report unhandled exceptions to global error handlers",
        chrome="95+",
        firefox="93+",
        safari="15.4+",
        edge="95+",
        ie="No",
    ),
)

FEATURES: Final[Mapping[str, FeatureDescriptor]] = MappingProxyType(
    {descriptor.key: descriptor for descriptor in _DESCRIPTORS}
)

# Display grouping only; detection never consults it.
FEATURE_CATEGORIES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Syntax": (
            "arrow-function",
            "class-declaration",
            "template-literal",
            "destructuring",
            "spread-operator",
            "const-declaration",
            "let-declaration",
            "default-parameters",
            "rest-parameters",
            "generator-function",
            "computed-property",
            "shorthand-property",
            "method-definition",
            "for-of",
            "private-fields",
            "static-class-fields",
            "private-methods",
            "decorators",
            "hashbang",
        ),
        "Methods": (
            "array-from",
            "array-fromasync",
            "array-find",
            "array-findindex",
            "array-findlast",
            "array-findlastindex",
            "array-includes",
            "array-flat",
            "array-flatmap",
            "array-at",
            "array-toreversed",
            "array-tosorted",
            "array-tospliced",
            "array-with",
            "typedarray-at",
            "typedarray-with",
            "object-assign",
            "object-keys",
            "object-values",
            "object-entries",
            "object-fromentries",
            "object-hasown",
            "object-groupby",
            "string-includes",
            "string-startswith",
            "string-endswith",
            "string-repeat",
            "string-padstart",
            "string-padend",
            "string-replaceall",
            "string-at",
            "string-matchall",
            "string-trimstart",
            "string-trimend",
            "string-iswellformed",
            "string-towellformed",
            "json-parse-reviver",
            "structuredclone",
            "queuemicrotask",
            "reporterror",
        ),
        "Async": (
            "async-await",
            "promise",
            "promise-allsettled",
            "promise-any",
            "top-level-await",
            "async-iteration",
        ),
        "Modules": (
            "import-statement",
            "export-statement",
            "dynamic-import",
            "import-meta",
            "import-assertions",
            "import-attributes",
        ),
        "Advanced": (
            "optional-chaining",
            "nullish-coalescing",
            "bigint",
            "logical-assignment",
            "numeric-separators",
            "globalthis",
            "iterator-helpers",
        ),
        "Data Structures": (
            "map-object",
            "set-object",
            "weakmap",
            "weakset",
            "weakref",
            "finalizationregistry",
            "symbol",
            "proxy",
            "reflect",
            "sharedarraybuffer",
            "bigint64array",
            "biguint64array",
            "resizable-arraybuffer",
        ),
        "RegExp": (
            "regex-named-groups",
            "regex-lookbehind",
            "regex-unicode-property",
            "regex-s-flag",
            "regex-match-indices",
            "regex-v-flag",
        ),
        "Intl": (
            "intl-relativetimeformat",
            "intl-listformat",
        ),
        "Errors": (
            "error-cause",
            "aggregate-error",
        ),
        "Concurrency": (
            "atomics",
            "sharedarraybuffer",
        ),
        "Web APIs": (
            "fetch-api",
            "urlsearchparams",
            "url-constructor",
            "abortcontroller",
            "intersectionobserver",
            "mutationobserver",
            "resizeobserver",
            "performance-now",
            "crypto-getrandomvalues",
            "crypto-randomuuid",
            "localstorage",
            "sessionstorage",
            "indexeddb",
        ),
        "Experimental": (
            "temporal",
            "decorators",
            "iterator-helpers",
        ),
    }
)


def lookup(key: str) -> FeatureDescriptor | None:
    """Return the descriptor for key, or None when the key is not catalogued."""
    return FEATURES.get(key)


def categories_for(key: str) -> tuple[str, ...]:
    """Return the display categories a feature key belongs to, in display order."""
    return tuple(category for category, keys in FEATURE_CATEGORIES.items() if key in keys)
