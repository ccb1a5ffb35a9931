"""Rich renderer for analysis results."""

from __future__ import annotations

from collections import Counter

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .catalogue import categories_for
from .constants import (
    BROWSER_LABEL_MAP,
    BROWSER_SLOTS,
    DEFAULT_MAX_SNIPPETS,
    LEGEND_LINE,
    NO_FEATURES_LINE,
    STATUS_ICON_MAP,
    STATUS_STYLE_MAP,
)
from .model import AnalysisResult, CodeSnippet, DetectedFeature, VersionRecord
from .util.text import ellipsize, normalize_whitespace, support_status


def _support_text(value: str) -> Text:
    status = support_status(value)
    return Text(f"{STATUS_ICON_MAP[status]} {value}", style=STATUS_STYLE_MAP[status])


def category_counts(result: AnalysisResult) -> Counter[str]:
    """Count detected features per display category; a feature may count twice."""
    counts: Counter[str] = Counter()
    for feature in result.features:
        counts.update(categories_for(feature.key))
    return counts


def overall_score(result: AnalysisResult) -> int:
    """Percentage of features supported (at least partially) in every browser."""
    total = len(result.features)
    if total == 0:
        return 100
    supported = sum(
        1
        for feature in result.features
        if all(support_status(value) != "n" for _, value in feature.support.items())
    )
    return round(supported / total * 100)


def _summary_lines(result: AnalysisResult) -> list[Text]:
    summary = result.summary
    legacy = "yes" if summary.all_features_legacy_compatible else "no"
    lines = [
        Text("Browser Support Summary", style="bold"),
        Text(f"Features detected: {summary.total_features}"),
        Text(f"Modern-only features: {summary.modern_only_features}"),
        Text(f"IE11 compatible: {legacy}"),
        Text(f"Compatibility score: {overall_score(result)}%"),
    ]
    counts = category_counts(result)
    if counts:
        parts = [f"{name}: {count}" for name, count in counts.items()]
        lines.append(Text("Categories: " + "  ".join(parts), style="dim"))
    return lines


def _versions_table(title: str, versions: VersionRecord) -> Table:
    table = Table(title=title, title_justify="left", show_edge=False)
    for browser in BROWSER_SLOTS:
        table.add_column(BROWSER_LABEL_MAP[browser], justify="center")
    table.add_row(*(_support_text(value) for _, value in versions.items()))
    return table


def _snippet_text(snippet: CodeSnippet) -> Text:
    lines = snippet.context_text.split("\n")
    width = len(str(snippet.context_start_line + len(lines) - 1))
    output = Text()
    for offset, line in enumerate(lines):
        number = snippet.context_start_line + offset
        style = "bold" if number == snippet.match_line else "dim"
        output.append(f"  {number:>{width}} | {line}\n", style=style)
    return output


def _feature_block(feature: DetectedFeature, *, show_snippets: bool, max_snippets: int) -> Group:
    parts: list[RenderableType] = [
        Text(f"{feature.display_name}", style="bold cyan"),
        Text(f"  {feature.description}"),
    ]
    row = Text("  ")
    for browser, value in feature.support.items():
        row.append(f"{BROWSER_LABEL_MAP[browser]} ")
        row.append_text(_support_text(value))
        row.append("  ")
    parts.append(row)
    if feature.notes:
        parts.append(Text(f"  Note: {feature.notes}", style="italic"))

    if show_snippets and feature.snippets:
        shown = feature.snippets[:max_snippets]
        for snippet in shown:
            match = ellipsize(normalize_whitespace(snippet.match_text), 60)
            parts.append(
                Text(f"  line {snippet.match_line}:{snippet.match_column}  {match}", style="dim")
            )
            parts.append(_snippet_text(snippet))
        hidden = len(feature.snippets) - len(shown)
        if hidden > 0:
            parts.append(Text(f"  … {hidden} more occurrence(s)", style="dim"))
    return Group(*parts)


def render_basic(
    result: AnalysisResult,
    *,
    title: str = "source",
    show_snippets: bool = True,
    max_snippets: int = DEFAULT_MAX_SNIPPETS,
) -> Group:
    """Render an analysis result as a Rich renderable group."""
    body: list[RenderableType] = [*_summary_lines(result), Text("")]

    if not result.features:
        body.append(Text(NO_FEATURES_LINE))
        return Group(Panel(Group(*body), border_style="blue", title=Text(title)))

    body.append(_versions_table("Minimum Browser Versions Required", result.minimum_versions))
    body.append(Text(""))
    body.append(Text("Detected Features", style="bold"))
    for feature in result.features:
        body.append(
            _feature_block(feature, show_snippets=show_snippets, max_snippets=max_snippets)
        )
    body.append(Text(""))
    body.append(Text(LEGEND_LINE, style="dim"))

    return Group(Panel(Group(*body), border_style="blue", title=Text(title)))
