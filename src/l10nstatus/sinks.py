"""Document backends the report is rendered into.

A report only ever talks to the small call sequence described by Sink, so
any backend that accepts sections, paragraphs, lists and tables can render
it. A table cell is either plain text or a list of lines, where a line is a
string or a (label, value) pair.
"""

import html
import json
from typing import Protocol

Line = str | tuple[str, int]
Cell = str | list[Line]


class Sink(Protocol):
    def section(self, title: str, anchor: str | None = None) -> None: ...

    def section_end(self) -> None: ...

    def paragraph(self, text: str) -> None: ...

    def list_start(self) -> None: ...

    def list_item(self, text: str) -> None: ...

    def link_item(self, anchor: str, text: str) -> None: ...

    def list_end(self) -> None: ...

    def table_start(self, caption: str | None = None) -> None: ...

    def table_header(self, cells: list[str]) -> None: ...

    def table_row(self, cells: list[Cell]) -> None: ...

    def group_row(self, text: str) -> None: ...

    def table_end(self) -> None: ...

    def getvalue(self) -> str: ...


class MarkdownSink:
    def __init__(self):
        self._lines: list[str] = []
        self._depth = 1
        self._columns = 0

    def _escape(self, text: str) -> str:
        return text.replace("|", "\\|").replace("\n", " ")

    def _cell(self, cell: Cell) -> str:
        if isinstance(cell, str):
            return self._escape(cell)
        parts = []
        for line in cell:
            if isinstance(line, tuple):
                parts.append(f"{self._escape(line[0])}: **{line[1]}**")
            else:
                parts.append(f"`{self._escape(line)}`")
        return "<br>".join(parts)

    def section(self, title, anchor=None):
        if anchor:
            self._lines.append(f'<a name="{anchor}"></a>')
        self._lines.append(f"{'#' * self._depth} {title}\n")
        self._depth += 1

    def section_end(self):
        self._depth -= 1

    def paragraph(self, text):
        self._lines.append(f"{text}\n")

    def list_start(self):
        pass

    def list_item(self, text):
        self._lines.append(f"- {text}")

    def link_item(self, anchor, text):
        self._lines.append(f"- [{text}](#{anchor})")

    def list_end(self):
        self._lines.append("")

    def table_start(self, caption=None):
        if caption:
            self._lines.append(f"**{caption}**\n")

    def table_header(self, cells):
        self._columns = len(cells)
        self._lines.append("| " + " | ".join(self._escape(c) for c in cells) + " |")
        self._lines.append("|" + " ------- |" * len(cells))

    def table_row(self, cells):
        self._lines.append("| " + " | ".join(self._cell(c) for c in cells) + " |")

    def group_row(self, text):
        filler = " |" * max(self._columns - 1, 0)
        self._lines.append(f"| ***{self._escape(text)}*** |{filler}")

    def table_end(self):
        self._lines.append("")

    def getvalue(self):
        return "\n".join(self._lines) + "\n"


class HtmlSink:
    def __init__(self):
        self._parts: list[str] = []
        self._depth = 1
        self._columns = 0

    def _cell(self, cell: Cell) -> str:
        if isinstance(cell, str):
            return html.escape(cell)
        rows = []
        for line in cell:
            if isinstance(line, tuple):
                rows.append(
                    f"<tr><td>{html.escape(line[0])}</td><td><b>{line[1]}</b></td></tr>"
                )
            else:
                rows.append(f"<tr><td><code>{html.escape(line)}</code></td></tr>")
        return "<table><tbody>" + "".join(rows) + "</tbody></table>"

    def section(self, title, anchor=None):
        name = f' id="{html.escape(anchor)}"' if anchor else ""
        level = min(self._depth, 6)
        self._parts.append(f"<section><h{level}{name}>{html.escape(title)}</h{level}>")
        self._depth += 1

    def section_end(self):
        self._depth -= 1
        self._parts.append("</section>")

    def paragraph(self, text):
        self._parts.append(f"<p>{html.escape(text)}</p>")

    def list_start(self):
        self._parts.append("<ul>")

    def list_item(self, text):
        self._parts.append(f"<li>{html.escape(text)}</li>")

    def link_item(self, anchor, text):
        self._parts.append(
            f'<li><a href="#{html.escape(anchor)}">{html.escape(text)}</a></li>'
        )

    def list_end(self):
        self._parts.append("</ul>")

    def table_start(self, caption=None):
        self._parts.append("<table>")
        if caption:
            self._parts.append(f"<caption>{html.escape(caption)}</caption>")

    def table_header(self, cells):
        self._columns = len(cells)
        header = "".join(f"<th>{html.escape(c)}</th>" for c in cells)
        self._parts.append(f"<tr>{header}</tr>")

    def table_row(self, cells):
        row = "".join(f"<td>{self._cell(c)}</td>" for c in cells)
        self._parts.append(f"<tr>{row}</tr>")

    def group_row(self, text):
        self._parts.append(
            f'<tr><td colspan="{max(self._columns, 1)}"><b><i>{html.escape(text)}</i></b></td></tr>'
        )

    def table_end(self):
        self._parts.append("</table>")

    def getvalue(self):
        return "\n".join(self._parts) + "\n"


class RecordingSink:
    """Keeps every call as a plain event, for tests and JSON output."""

    def __init__(self):
        self.events: list[tuple] = []

    def _record(self, call, *args):
        self.events.append((call, *args))

    def section(self, title, anchor=None):
        self._record("section", title, anchor)

    def section_end(self):
        self._record("section_end")

    def paragraph(self, text):
        self._record("paragraph", text)

    def list_start(self):
        self._record("list_start")

    def list_item(self, text):
        self._record("list_item", text)

    def link_item(self, anchor, text):
        self._record("link_item", anchor, text)

    def list_end(self):
        self._record("list_end")

    def table_start(self, caption=None):
        self._record("table_start", caption)

    def table_header(self, cells):
        self._record("table_header", list(cells))

    def table_row(self, cells):
        self._record("table_row", list(cells))

    def group_row(self, text):
        self._record("group_row", text)

    def table_end(self):
        self._record("table_end")

    def calls(self, name: str) -> list[tuple]:
        return [event for event in self.events if event[0] == name]

    def getvalue(self):
        return json.dumps(
            [{"call": event[0], "args": list(event[1:])} for event in self.events],
            ensure_ascii=False,
            indent=2,
        )


SINKS = {"markdown": MarkdownSink, "html": HtmlSink, "json": RecordingSink}
