"""
ASCII table rendering for query results.

Turns an ordered list of column names and a list of rows (mapping column
name to an optional value) into a bordered text table:

	+-------+-----------+
	| label |   label   |
	+-------+-----------+
	| text  |       119 |
	+-------+-----------+

Long values are truncated with ``...``, numbers are right-aligned and
headers are centered.
"""
from typing import Any, Dict, List, Mapping, Optional, Sequence
from dataclasses import dataclass, field
import re

DEFAULT_MAX_WIDTH = 40
ELLIPSIS = "..."
NO_RESULTS = "(sin resultados)"

NUMERIC_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
CAMEL_RE = re.compile(r"([a-z])([A-Z])")

# Known column names are shown as-is instead of being split on camelCase
KNOWN_LABELS: Dict[str, str] = {
	"tituloEspanol": "tituloEspanol",
	"titulo": "titulo",
	"estreno": "estreno",
	"duracion": "duracion",
	"genero": "genero",
	"clasificacion": "clasificacion",
	"preventa": "preventa",
	"formato": "formato",
	"duracionPromedio": "duracionPromedio",
	"totalPeliculas": "totalPeliculas",
}


@dataclass
class DisplayTable:
	"""Truncated cells and final column widths, ready to be laid out."""
	labels: List[str]
	widths: List[int]
	cells: List[List[str]] = field(default_factory=list)


def nice_label(name: str, labels: Optional[Mapping[str, str]] = None) -> str:
	"""Map a column name to its header label."""
	if not name:
		return ""
	labels = KNOWN_LABELS if labels is None else labels
	if name in labels:
		return labels[name]
	return CAMEL_RE.sub(r"\1 \2", name).replace("_", " ")


def cell_text(value: Any) -> str:
	"""Plain text of a cell value; unbound values are empty."""
	if value is None:
		return ""
	# each row must stay on one line
	return LINE_BREAK_RE.sub(" ", str(value))


def truncate(text: str, max_width: int) -> str:
	if len(text) > max_width:
		return text[:max_width - len(ELLIPSIS)] + ELLIPSIS
	return text


def is_numeric(text: str) -> bool:
	return bool(text) and NUMERIC_RE.fullmatch(text) is not None


def center(text: str, width: int) -> str:
	"""Center ``text`` in ``width``; the odd space goes to the right."""
	if len(text) >= width:
		return text[:width]
	total = width - len(text)
	left = total // 2
	return " " * left + text + " " * (total - left)


def format_cell(text: str, width: int, right_align: bool = False) -> str:
	if len(text) > width:
		text = text[:width]
	if right_align:
		return text.rjust(width)
	return text.ljust(width)


class TableRenderer:
	"""
	Render result sets as bordered ASCII tables.

	The renderer holds configuration only, so one instance can be shared
	by any number of callers.
	"""

	def __init__(
		self,
		max_width: int = DEFAULT_MAX_WIDTH,
		labels: Optional[Mapping[str, str]] = None,
		empty_marker: str = NO_RESULTS
	):
		"""
		Initialize the renderer.

		Args:
			max_width: Maximum rendered width of any column
			labels: Column name to header label overrides
			empty_marker: Line returned instead of a table when there are no rows

		Raises:
			ValueError: If max_width leaves no room for text before the ellipsis
		"""
		if max_width <= len(ELLIPSIS):
			raise ValueError(f"max_width must be greater than {len(ELLIPSIS)}, got {max_width}")
		self.max_width = max_width
		self.labels = dict(KNOWN_LABELS if labels is None else labels)
		self.empty_marker = empty_marker

	def build(
		self,
		columns: Sequence[str],
		rows: Sequence[Mapping[str, Any]]
	) -> DisplayTable:
		"""
		Materialize display cells and column widths.

		Args:
			columns: Ordered column names
			rows: Rows mapping column name to value; missing keys are empty

		Returns:
			DisplayTable with one cell per column in every row
		"""
		labels = [nice_label(name, self.labels) for name in columns]
		widths = [min(len(label), self.max_width) for label in labels]
		cells = []

		for row in rows:
			display_row = []
			for i, name in enumerate(columns):
				text = truncate(cell_text(row.get(name)), self.max_width)
				display_row.append(text)
				widths[i] = max(widths[i], len(text))
			cells.append(display_row)

		return DisplayTable(labels=labels, widths=widths, cells=cells)

	def render(
		self,
		columns: Sequence[str],
		rows: Sequence[Mapping[str, Any]]
	) -> str:
		"""
		Render rows as a table.

		Args:
			columns: Ordered column names
			rows: Rows mapping column name to value

		Returns:
			The table text (lines joined by newlines), or the empty marker
			when there are no rows
		"""
		if not rows:
			return self.empty_marker

		table = self.build(columns, rows)
		rule = "+" + "".join("-" * (w + 2) + "+" for w in table.widths)
		header = "|" + "".join(
			f" {center(label, w)} |" for label, w in zip(table.labels, table.widths)
		)

		lines = [rule, header, rule]
		for row in table.cells:
			lines.append("|" + "".join(
				f" {format_cell(text, w, is_numeric(text))} |"
				for text, w in zip(row, table.widths)
			))
		lines.append(rule)
		return "\n".join(lines)

	def render_result(self, result) -> str:
		"""Render a ResultSet."""
		return self.render(result.columns, result.rows)


def render_table(
	columns: Sequence[str],
	rows: Sequence[Mapping[str, Any]],
	max_width: int = DEFAULT_MAX_WIDTH
) -> str:
	"""Render with a default renderer capped at ``max_width``."""
	return TableRenderer(max_width=max_width).render(columns, rows)
