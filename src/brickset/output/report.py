"""Query report generation for a loaded LEGO set dataset."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..api.lego_sets_api import (
    any_below_piece_threshold,
    average_pieces,
    count_above_pieces,
    count_by_theme,
    distinct_tags_without_dimensions,
    names_by_subtheme,
    names_by_theme,
    names_descending,
    names_limited,
    sum_pieces,
)
from ..errors import EmptyDatasetError
from ..models.lego_set import Dataset


def _display_name(name: Optional[str]) -> str:
    return name if name is not None else "(unnamed)"


def build_report(dataset: Dataset, queries: Dict[str, Any]) -> Dict[str, Any]:
    """
    Run every query and collect the results into a report.

    Args:
        dataset: Loaded LEGO sets
        queries: The ``queries`` section of the config (names_limit,
            pieces_threshold, subtheme, below_threshold)

    Returns:
        JSON-serialisable dict. Sets are emitted as sorted lists.
    """
    try:
        average: Optional[float] = average_pieces(dataset)
    except EmptyDatasetError:
        average = None

    pieces_threshold = queries["pieces_threshold"]
    below_threshold = queries["below_threshold"]

    return {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "total_sets": len(dataset),
        "names_limited": {
            "limit": queries["names_limit"],
            "names": names_limited(dataset, queries["names_limit"]),
        },
        "count_above_pieces": {
            "threshold": pieces_threshold,
            "count": count_above_pieces(dataset, pieces_threshold),
        },
        "average_pieces": average,
        "names_descending": names_descending(dataset),
        "names_by_subtheme": {
            "subtheme": queries["subtheme"],
            "names": names_by_subtheme(dataset, queries["subtheme"]),
        },
        "any_below_piece_threshold": {
            "threshold": below_threshold,
            "result": any_below_piece_threshold(dataset, below_threshold),
        },
        "sum_pieces": sum_pieces(dataset),
        "distinct_tags_without_dimensions": sorted(distinct_tags_without_dimensions(dataset)),
        "count_by_theme": dict(sorted(count_by_theme(dataset).items())),
        "names_by_theme": {
            theme: sorted(names)
            for theme, names in sorted(names_by_theme(dataset).items())
        },
    }


def render_markdown(report: Dict[str, Any]) -> str:
    """Render report data as markdown."""
    lines = []

    date_str = datetime.fromisoformat(report["generated_at_utc"]).strftime("%Y-%m-%d")
    lines.append(f"# Brickset Report ({date_str})")
    lines.append("")
    lines.append(f"- **Sets:** {report['total_sets']}")
    lines.append(f"- **Total pieces:** {report['sum_pieces']}")
    average = report["average_pieces"]
    lines.append(f"- **Average pieces:** {average:.2f}" if average is not None else "- **Average pieces:** n/a")
    lines.append("")

    limited = report["names_limited"]
    lines.append(f"## First {limited['limit']} Sets")
    lines.append("")
    for name in limited["names"]:
        lines.append(f"- {_display_name(name)}")
    lines.append("")

    above = report["count_above_pieces"]
    below = report["any_below_piece_threshold"]
    lines.append("## Piece Counts")
    lines.append("")
    lines.append(f"- Sets with more than {above['threshold']} pieces: {above['count']}")
    lines.append(f"- Any set with fewer than {below['threshold']} pieces: {'yes' if below['result'] else 'no'}")
    lines.append("")

    lines.append("## Names (Z-A)")
    lines.append("")
    for name in report["names_descending"]:
        lines.append(f"- {_display_name(name)}")
    lines.append("")

    subtheme = report["names_by_subtheme"]
    lines.append(f"## Subtheme matching \"{subtheme['subtheme']}\"")
    lines.append("")
    if subtheme["names"]:
        for name in subtheme["names"]:
            lines.append(f"- {_display_name(name)}")
    else:
        lines.append("No matching sets.")
    lines.append("")

    lines.append("## Tags on Sets Without Dimensions")
    lines.append("")
    tags = report["distinct_tags_without_dimensions"]
    lines.append(", ".join(tags) if tags else "None")
    lines.append("")

    lines.append("## Themes")
    lines.append("")
    names_by_theme = report["names_by_theme"]
    for theme, count in report["count_by_theme"].items():
        lines.append(f"### {theme} ({count})")
        lines.append("")
        for name in names_by_theme.get(theme, []):
            lines.append(f"- {name}")
        lines.append("")

    return "\n".join(lines)


def render_json(report: Dict[str, Any]) -> str:
    """Render report data as JSON."""
    return json.dumps(report, indent=2, sort_keys=True)
