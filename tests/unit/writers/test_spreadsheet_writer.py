"""Unit tests for the CSV spreadsheet writer."""

import csv

from chantier_tracker.writers.export_generator import to_export_rows
from chantier_tracker.writers.spreadsheet_writer import SpreadsheetWriter


def read_csv(path, delimiter=","):
    with open(path, encoding="utf-8-sig", newline="") as handle:
        return list(csv.reader(handle, delimiter=delimiter))


class TestToDataFrame:
    def test_pads_ragged_rows(self):
        df = SpreadsheetWriter().to_dataframe([["a", "b", "c"], [], ["d"]])
        assert df.shape == (3, 3)
        assert df.iloc[1].tolist() == ["", "", ""]
        assert df.iloc[2].tolist() == ["d", "", ""]

    def test_no_rows(self):
        assert SpreadsheetWriter().to_dataframe([]).empty


class TestWriteRows:
    def test_writes_export_rows(self, tmp_path, time_entries, expenses):
        rows = to_export_rows(time_entries, expenses)
        path = SpreadsheetWriter().write_rows(rows, tmp_path / "site-1.csv")

        written = read_csv(path)

        assert written[0] == [
            "Date", "Arrival", "Departure", "Duration", "Hourly Rate", "Earnings",
        ]
        assert written[1] == ["2024-05-02", "08:00", "16:00", "8h 0m", "20.00", "160.00"]
        assert written[3] == [""] * 6
        assert written[4] == ["Date", "Description", "Base Amount", "Margin", "Total", ""]
        assert written[5] == ["2024-05-02", "Ciment", "50.00", "0%", "50.00", ""]
        assert len(written) == 6

    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "exports" / "2024" / "site.csv"
        path = SpreadsheetWriter().write_rows([["x"]], target)
        assert path == target
        assert target.exists()

    def test_custom_delimiter(self, tmp_path):
        writer = SpreadsheetWriter(delimiter=";")
        path = writer.write_rows([["Ciment", "50.00"]], tmp_path / "out.csv")
        assert read_csv(path, delimiter=";") == [["Ciment", "50.00"]]
        assert ";" in path.read_text(encoding="utf-8-sig")

    def test_utf8_bom_keeps_currency_symbol(self, tmp_path):
        path = SpreadsheetWriter().write_rows([["€170.00"]], tmp_path / "eur.csv")
        raw = path.read_bytes()
        assert raw.startswith(b"\xef\xbb\xbf")
        assert "€170.00" in raw.decode("utf-8-sig")
