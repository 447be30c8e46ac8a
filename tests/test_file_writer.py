"""Tests for response storage"""
import json
import pandas as pd

from storage.file_writer import FileWriter


class TestFileWriter:

    def test_write_json(self, tmp_path, logger):
        writer = FileWriter(str(tmp_path), logger)
        path = writer.write_json("001-games", {"data": [{"id": "1"}]})

        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"data": [{"id": "1"}]}

    def test_write_rows(self, tmp_path, logger):
        writer = FileWriter(str(tmp_path), logger)
        body = {"data": [{"id": "1", "name": "A"}, {"id": "2", "name": "B"}]}
        path = writer.write_rows("001-games", body)

        df = pd.read_csv(path, dtype=str)
        assert list(df.columns) == ["id", "name"]
        assert df["name"].tolist() == ["A", "B"]

    def test_write_rows_without_data(self, tmp_path, logger):
        writer = FileWriter(str(tmp_path), logger)
        assert writer.write_rows("x", {"data": []}) is None
        assert writer.write_rows("x", {"error": "Unauthorized"}) is None
        assert writer.write_rows("x", []) is None
