"""
Table Renderer — turns catalog records into HTML fragments for the
visualizer: tables with per-row / per-cell classes, numbered steps,
and the topic description panel.
"""

from enum import Enum
from html import escape
from typing import TYPE_CHECKING, Iterable, Optional

from sqlviz.catalog import CellValue, Row, Step, Table, Topic

if TYPE_CHECKING:
    from sqlviz.session import VisualizerSession


NULL_MARKER = "NULL"
EMPTY_SET_MESSAGE = "This step resulted in an empty set."
NO_TABLE_MESSAGE = "No table to display for this step."


class RowStyle(str, Enum):
    HIGHLIGHTED = "highlight"
    UNMATCHED = "unmatched"
    INSERTED = "inserted"
    UPDATED = "updated"
    NORMAL = ""


def classify_row(row: Row) -> RowStyle:
    """First flag wins: highlight > unmatched > inserted > updated."""
    if row.highlight:
        return RowStyle.HIGHLIGHTED
    if row.unmatched:
        return RowStyle.UNMATCHED
    if row.inserted:
        return RowStyle.INSERTED
    if row.updated:
        return RowStyle.UPDATED
    return RowStyle.NORMAL


def table_headers(table: Table) -> list[str]:
    if table.columns is not None:
        return list(table.columns)
    return table.rows[0].keys() if table.rows else []


def format_cell(value: CellValue) -> str:
    return NULL_MARKER if value is None else str(value)


def cell_classes(row: Row, column: str) -> list[str]:
    classes = []
    if row.get(column) is None:
        classes.append("null-value")
    if column in row.updated_cells:
        classes.append("cell-updated")
    return classes


def _class_attr(classes: Iterable[str]) -> str:
    joined = " ".join(c for c in classes if c)
    return f' class="{joined}"' if joined else ""


def render_table(table: Table) -> str:
    if not table.rows:
        return f'<div class="step-message">{EMPTY_SET_MESSAGE}</div>'

    headers = table_headers(table)
    parts = ['<div class="table-wrapper">']
    if table.name:
        parts.append(f"<h3>{escape(table.name)}</h3>")
    parts.append("<table><thead><tr>")
    parts.extend(f"<th>{escape(h)}</th>" for h in headers)
    parts.append("</tr></thead><tbody>")
    for row in table.rows:
        parts.append(f"<tr{_class_attr([classify_row(row).value])}>")
        for header in headers:
            text = escape(format_cell(row.get(header)))
            parts.append(f"<td{_class_attr(cell_classes(row, header))}>{text}</td>")
        parts.append("</tr>")
    parts.append("</tbody></table></div>")
    return "".join(parts)


def render_step(step: Step, index: int, visible: bool, key: Optional[str] = None) -> str:
    """Render one numbered step; ``key`` is the element id the notifier watches."""
    classes = ["step", "visible" if visible else ""]
    data_key = f' data-step-key="{escape(key)}"' if key else ""
    if step.tables:
        tables = "".join(render_table(t) for t in step.tables)
    else:
        tables = f'<div class="step-message">{NO_TABLE_MESSAGE}</div>'
    return (
        f'<div{_class_attr(classes)} data-step-index="{index}"{data_key} aria-live="polite">'
        f'<div class="step-explanation">{index + 1}. {escape(step.explanation)}</div>'
        f'<div class="step-query"><code>{escape(step.query)}</code></div>'
        f'<div class="tables-container">{tables}</div>'
        "</div>"
    )


def render_topic_description(name: str, topic: Topic) -> str:
    return (
        '<div class="topic-description">'
        f"<h3>About {escape(name)}</h3>"
        f"<p>{escape(topic.description)}</p>"
        "<h4>Syntax</h4>"
        f"<pre><code>{escape(topic.syntax)}</code></pre>"
        "<h4>Common Use Case</h4>"
        f"<p>{escape(topic.use_case)}</p>"
        "</div>"
    )


def _options(items: Iterable[tuple[str, str]], selected: str) -> str:
    return "".join(
        f'<option value="{escape(value)}"{" selected" if value == selected else ""}>{escape(label)}</option>'
        for value, label in items
    )


def render_visualization(session: "VisualizerSession") -> str:
    """Controls, topic description and every step of the selected example."""
    topic_name = session.selected_topic
    topic_options = _options(((n, n) for n in session.topic_names()), topic_name)
    example_options = _options(
        ((str(i), title) for i, title in enumerate(session.example_titles())),
        str(session.selected_example_index),
    )
    steps = "".join(
        render_step(step, element.index, session.is_revealed(element.index), element.key)
        for step, element in zip(session.steps, session.step_elements)
    )
    return (
        '<div class="controls">'
        '<div class="control-group"><label for="topic-select">SQL Topic</label>'
        f'<select id="topic-select">{topic_options}</select></div>'
        '<div class="control-group"><label for="example-select">Example</label>'
        f'<select id="example-select">{example_options}</select></div>'
        "</div>"
        f"{render_topic_description(topic_name, session.topic)}"
        f'<div class="visualization">{steps}</div>'
    )
