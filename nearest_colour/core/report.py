"""Report builder — text and JSON output for nearest-colour commands."""

import json
from dataclasses import dataclass, field
from typing import Any

from nearest_colour.core.types import ColourMatch


@dataclass
class Report:
    """Accumulates rows from a command for text/JSON output."""

    command: str
    palette_size: int = 0
    source: str | None = None  # image path for census/snap
    rows: list[dict[str, Any]] = field(default_factory=list)

    def add_match(self, query: str, result: ColourMatch | str | None) -> None:
        if isinstance(result, ColourMatch):
            row = {'query': query, **result.to_dict()}
        else:
            row = {'query': query, 'value': result}
        self.rows.append(row)

    def add(self, row: dict[str, Any]) -> None:
        self.rows.append(row)


def _format_row(command: str, row: dict[str, Any]) -> str:
    if command == 'match':
        line = f'{row["query"]:<20} → {row["value"]}'
        if 'name' in row:
            line += f'  {row["name"]}  Δ={row["distance"]:.1f}'
        return line
    if command == 'census':
        label = row['name'] or row['value']
        return f'  {label:<20} {row["pct"]:5.1f}%'
    if command == 'palette':
        name = row['name'] or ''
        return f'  {row["index"]:>3}  {row["value"]:<10} {name}'
    # Generic fallback
    return '  ' + '  '.join(f'{k}={v}' for k, v in row.items())


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.command != 'match':
        header = f'nearest-colour {report.command}: {report.palette_size} palette colours'
        if report.source:
            header += f' — {report.source}'
        lines.append(header)
        lines.append('')
    for row in report.rows:
        lines.append(_format_row(report.command, row))
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'palette_size': report.palette_size,
    }
    if report.source:
        obj['source'] = report.source
    obj['results'] = report.rows
    return json.dumps(obj, indent=2)
