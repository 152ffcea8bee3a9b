"""Tests for the career table extractor."""

from portfoliodata.extractors import CareerTableExtractor, extract_career_records, split_server_cell
from portfoliodata.extractors.html_utils import first, parse_html
from portfoliodata.shared import CAREER_FIELDS


def _table(*rows: str) -> str:
    return (
        '<table class="discord-career-table"><tbody>'
        + "".join(rows)
        + "</tbody></table>"
    )


FULL_ROW = (
    "<tr><td>1</td><td>Test Server<sup data-note=\"Details\">[Note]</sup></td>"
    "<td>Category</td><td>100</td><td>Dept</td><td>Pos</td><td>Job Desc</td><td>2023-2024</td></tr>"
)


class TestExtractCareerRecords:
    """Tests for extract_career_records()."""

    def test_extracts_annotated_row(self):
        """The annotation is split out of the server name into note."""
        records = extract_career_records(_table(FULL_ROW))
        assert records == [
            {
                "no": "1",
                "serverName": "Test Server",
                "note": "[Note] Details",
                "category": "Category",
                "count": "100",
                "department": "Dept",
                "position": "Pos",
                "job": "Job Desc",
                "term": "2023-2024",
            }
        ]

    def test_row_without_annotation_has_empty_note(self, career_html):
        """A plain server cell keeps its full trimmed text and an empty note."""
        records = extract_career_records(career_html)
        assert records[1]["serverName"] == "Plain & Simple"
        assert records[1]["note"] == ""

    def test_full_page_rows_in_document_order(self, career_html):
        """Header rows are skipped and data rows keep document order."""
        records = extract_career_records(career_html)
        assert [r["no"] for r in records] == ["1", "2"]
        assert records[1]["count"] == "2,500"

    def test_keys_follow_declared_column_order(self, career_html):
        for record in extract_career_records(career_html):
            assert tuple(record.keys()) == CAREER_FIELDS

    def test_marker_without_detail(self):
        """An annotation without data-note yields the bare marker."""
        row = "<tr><td>3</td><td>리모델링 서버<sup>[리모델링]</sup></td><td>c</td></tr>"
        records = extract_career_records(_table(row))
        assert records[0]["serverName"] == "리모델링 서버"
        assert records[0]["note"] == "[리모델링]"

    def test_empty_detail_attribute_is_treated_as_missing(self):
        row = '<tr><td>3</td><td>S<sup data-note="">[m]</sup></td></tr>'
        assert extract_career_records(_table(row))[0]["note"] == "[m]"

    def test_rows_without_cells_are_skipped(self):
        """Rows with no <td> (stray markup, header cells) are not records."""
        html = _table("<tr></tr>", "<tr><th>Heading</th></tr>", FULL_ROW)
        records = extract_career_records(html)
        assert len(records) == 1
        assert records[0]["no"] == "1"

    def test_short_row_degrades_to_empty_fields(self):
        """Missing trailing cells read as empty strings."""
        row = "<tr><td>7</td><td>Short</td></tr>"
        record = extract_career_records(_table(row))[0]
        assert record["no"] == "7"
        assert record["serverName"] == "Short"
        for name in ("note", "category", "count", "department", "position", "job", "term"):
            assert record[name] == ""

    def test_single_cell_row_still_has_every_field(self):
        record = extract_career_records(_table("<tr><td>9</td></tr>"))[0]
        assert tuple(record.keys()) == CAREER_FIELDS
        assert record["serverName"] == ""
        assert record["note"] == ""

    def test_table_without_tbody(self):
        """Rows directly under <table> are still data rows."""
        html = (
            '<table class="discord-career-table">'
            "<tr><td>1</td><td>S</td><td>c</td><td>1</td><td>d</td><td>p</td><td>j</td><td>t</td></tr>"
            "</table>"
        )
        records = extract_career_records(html)
        assert len(records) == 1
        assert records[0]["term"] == "t"

    def test_other_tables_are_ignored(self):
        html = "<table class=\"other\"><tbody><tr><td>x</td></tr></tbody></table>" + _table(FULL_ROW)
        assert len(extract_career_records(html)) == 1

    def test_no_table_yields_no_records(self):
        assert extract_career_records("<p>nothing here</p>") == []

    def test_nested_markup_text_is_flattened(self):
        """Tags inside cells are dropped and only their text is kept."""
        row = "<tr><td>1</td><td><a href='#'><b>Linked</b> Server</a></td><td><em>c</em></td></tr>"
        record = extract_career_records(_table(row))[0]
        assert record["serverName"] == "Linked Server"
        assert record["category"] == "c"


class TestCareerWarnings:
    """Tests for degradation warnings."""

    def test_complete_rows_produce_no_warnings(self, career_html):
        _, warnings = CareerTableExtractor().extract_with_warnings(career_html)
        assert warnings == []

    def test_short_row_names_missing_cells(self):
        row = "<tr><td>7</td><td>Short</td></tr>"
        _, warnings = CareerTableExtractor().extract_with_warnings(_table(row))
        assert warnings == [
            "row 1: missing cells: category, count, department, position, job, term"
        ]

    def test_warnings_do_not_change_records(self):
        row = "<tr><td>7</td><td>Short</td></tr>"
        records, _ = CareerTableExtractor().extract_with_warnings(_table(row))
        assert records == extract_career_records(_table(row))


class TestSplitServerCell:
    """Tests for split_server_cell()."""

    def test_name_never_contains_marker_text(self):
        cell = first(parse_html(_table(FULL_ROW)), ".//td[2]")
        name, note = split_server_cell(cell)
        assert "[Note]" not in name
        assert name == "Test Server"
        assert note == "[Note] Details"

    def test_padded_detail_is_trimmed(self):
        row = '<tr><td>1</td><td>S<sup data-note="Remodeled in 2023 ">[m]</sup></td></tr>'
        name, note = split_server_cell(first(parse_html(_table(row)), ".//td[2]"))
        assert name == "S"
        assert note == "[m] Remodeled in 2023"

    def test_several_markers_are_concatenated(self):
        """Every <sup> contributes its marker; the first data-note is the detail."""
        row = (
            '<tr><td>1</td><td>S<sup>[a]</sup> Server<sup data-note="first">[b]</sup>'
            '<sup data-note="second">[c]</sup></td></tr>'
        )
        name, note = split_server_cell(first(parse_html(_table(row)), ".//td[2]"))
        assert name == "S Server"
        assert note == "[a][b][c] first"


class TestXhtmlPages:
    def test_page_with_xml_declaration(self):
        html = '<?xml version="1.0" encoding="utf-8"?>\n' + _table(FULL_ROW)
        records = extract_career_records(html)
        assert len(records) == 1
        assert records[0]["serverName"] == "Test Server"
