"""Tests for table rendering."""

import pytest

from cine import ResultSet, TableRenderer, render_table
from cine.table import (
    KNOWN_LABELS,
    NO_RESULTS,
    center,
    cell_text,
    format_cell,
    is_numeric,
    nice_label,
    truncate,
)


class TestHelpers:
    """Tests for the formatting helpers."""

    def test_known_label_passes_through(self):
        """Test known column names are not split."""
        assert nice_label("tituloEspanol") == "tituloEspanol"
        assert nice_label("duracionPromedio") == "duracionPromedio"

    def test_unknown_label_is_made_readable(self):
        """Test camelCase and underscores become spaces."""
        assert nice_label("fechaDeEstreno") == "fecha De Estreno"
        assert nice_label("total_salas") == "total salas"

    def test_custom_label_table(self):
        """Test a caller-supplied label table wins."""
        assert nice_label("genero", {"genero": "Género"}) == "Género"
        assert nice_label("tituloEspanol", {}) == "titulo Espanol"

    def test_empty_label(self):
        """Test an empty column name has an empty label."""
        assert nice_label("") == ""

    def test_center_odd_padding_goes_right(self):
        """Test centering puts the extra space on the right."""
        assert center("ab", 5) == " ab  "
        assert center("abc", 5) == " abc "

    def test_center_truncates(self):
        """Test centering a label wider than the column cuts it."""
        assert center("abcdef", 4) == "abcd"

    def test_is_numeric(self):
        """Test the numeric pattern."""
        assert is_numeric("119")
        assert is_numeric("-3")
        assert is_numeric("117.5")
        assert not is_numeric("")
        assert not is_numeric("1.")
        assert not is_numeric(".5")
        assert not is_numeric("2025-11-06")
        assert not is_numeric("Acción")

    def test_is_numeric_whole_string_ascii_only(self):
        """Test trailing newlines and non-ASCII digits are not numbers."""
        assert not is_numeric("119\n")
        assert not is_numeric("١٢")
        assert not is_numeric("119 min")

    def test_format_cell_alignment(self):
        """Test left and right alignment."""
        assert format_cell("119", 6, right_align=True) == "   119"
        assert format_cell("Terror", 8) == "Terror  "

    def test_truncate(self):
        """Test long values end in an ellipsis at exactly max width."""
        assert truncate("a" * 45, 40) == "a" * 37 + "..."
        assert truncate("a" * 40, 40) == "a" * 40

    def test_cell_text(self):
        """Test unbound values are empty and others use str()."""
        assert cell_text(None) == ""
        assert cell_text(119) == "119"
        assert cell_text("Tron: Ares") == "Tron: Ares"


class TestTableRenderer:
    """Tests for TableRenderer.render."""

    def test_single_row(self):
        """Test a one-column, one-row table."""
        text = render_table(["titulo"], [{"titulo": "Tron: Ares"}])
        assert text.split("\n") == [
            "+------------+",
            "|   titulo   |",
            "+------------+",
            "| Tron: Ares |",
            "+------------+",
        ]

    def test_empty_rows_gives_marker(self):
        """Test an empty result is one informational line."""
        text = render_table(["titulo"], [])
        assert text == NO_RESULTS
        assert "\n" not in text

    def test_custom_empty_marker(self):
        """Test the empty marker is configurable."""
        renderer = TableRenderer(empty_marker="(no results)")
        assert renderer.render(["a"], []) == "(no results)"

    def test_line_count_and_equal_lengths(self):
        """Test there are four frame lines plus one per row, all equally long."""
        rows = [
            {"tituloEspanol": "Tron: Ares", "duracion": "119"},
            {"tituloEspanol": "Roofman", "duracion": "126"},
            {"tituloEspanol": "Depredador: Tierras Salvajes"},
        ]
        lines = render_table(["tituloEspanol", "duracion"], rows).split("\n")
        assert len(lines) == 4 + len(rows)
        assert len({len(line) for line in lines}) == 1

    def test_line_length_matches_widths(self):
        """Test each line is the sum of column widths plus borders."""
        renderer = TableRenderer()
        rows = [{"genero": "Acción", "duracion": "119"}]
        table = renderer.build(["genero", "duracion"], rows)
        lines = renderer.render(["genero", "duracion"], rows).split("\n")
        expected = 1 + sum(w + 3 for w in table.widths)
        assert all(len(line) == expected for line in lines)

    def test_numeric_right_and_text_left(self):
        """Test numbers are right-aligned and text left-aligned in one render."""
        rows = [{"genero": "Acción", "duracion": "119"}]
        lines = render_table(["genero", "duracion"], rows).split("\n")
        assert lines[3] == "| Acción |      119 |"
        assert lines[3].startswith("| Acción |")
        assert lines[3].endswith("      119 |")

    def test_truncates_long_values(self):
        """Test a 45 character value is cut to 40 with an ellipsis."""
        value = "x" * 45
        renderer = TableRenderer(max_width=40)
        table = renderer.build(["titulo"], [{"titulo": value}])
        cell = table.cells[0][0]
        assert len(cell) == 40
        assert cell.endswith("...")
        assert table.widths == [40]

    def test_width_never_exceeds_max(self):
        """Test long headers are capped at the max width too."""
        renderer = TableRenderer(max_width=8)
        lines = renderer.render(["clasificacion"], [{"clasificacion": "Mayores de 12 años"}]).split("\n")
        assert lines[0] == "+" + "-" * 10 + "+"
        assert lines[1] == "| clasific |"
        assert lines[3] == "| Mayor... |"

    def test_header_is_centered(self):
        """Test headers center within wider columns."""
        lines = render_table(["genero"], [{"genero": "Documental"}]).split("\n")
        assert lines[1] == "|   genero   |"

    def test_missing_cell_is_empty(self):
        """Test a row without a column renders an empty cell."""
        rows = [{"a": "1", "b": "x"}, {"a": "2"}]
        lines = render_table(["a", "b"], rows).split("\n")
        assert lines[4] == "| 2 |   |"

    def test_extra_keys_are_ignored(self):
        """Test keys outside the column list do not show up."""
        text = render_table(["a"], [{"a": "1", "zzz": "hidden"}])
        assert "hidden" not in text

    def test_line_breaks_stay_on_one_line(self):
        """Test values with line breaks render as a single row line."""
        lines = render_table(["a"], [{"a": "x\ny"}]).split("\n")
        assert len(lines) == 5
        assert len({len(line) for line in lines}) == 1
        assert lines[3] == "| x y |"
        assert cell_text("a\r\nb\rc") == "a b c"

    def test_zero_columns(self):
        """Test zero columns gives a bare frame."""
        assert render_table([], [{"a": "1"}]).split("\n") == ["+", "|", "+", "|", "+"]

    def test_idempotent(self):
        """Test rendering twice gives identical output."""
        columns = ["tituloEspanol", "duracion"]
        rows = [{"tituloEspanol": "Un Buen Ladrón", "duracion": "126"}]
        renderer = TableRenderer()
        assert renderer.render(columns, rows) == renderer.render(columns, rows)

    def test_render_result(self):
        """Test rendering a ResultSet."""
        result = ResultSet(columns=["titulo"], rows=[{"titulo": "Tron: Ares"}])
        assert TableRenderer().render_result(result) == render_table(["titulo"], [{"titulo": "Tron: Ares"}])

    def test_invalid_max_width(self):
        """Test a max width with no room before the ellipsis is rejected."""
        with pytest.raises(ValueError):
            TableRenderer(max_width=3)

    def test_default_labels_are_copied(self):
        """Test the renderer does not share the module label table."""
        renderer = TableRenderer()
        renderer.labels["titulo"] = "Título"
        assert KNOWN_LABELS["titulo"] == "titulo"
