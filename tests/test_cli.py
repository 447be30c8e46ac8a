"""Tests for the command line interface"""
import logging
import pytest
from unittest.mock import Mock, patch

from cli import HelixCLI, main, parse_opts, read_batch
from conftest import make_response
from core.errors import TransportError
from utils.file_utils import output_stem


class TestParsing:

    def test_parse_opts(self):
        assert parse_opts(["id=1", "name=Chess"]) == {"id": "1", "name": "Chess"}

    def test_parse_opts_repeated_key(self):
        assert parse_opts(["language=en", "language=es", "language=de"]) == \
            {"language": ["en", "es", "de"]}

    def test_parse_opts_requires_equals(self):
        with pytest.raises(ValueError):
            parse_opts(["id"])

    def test_read_batch(self, tmp_path):
        csv_path = tmp_path / "batch.csv"
        csv_path.write_text("resource,id,first\ngames,493057,\nclips,,20\n")

        assert read_batch(str(csv_path)) == [
            ("games", {"id": "493057"}),
            ("clips", {"first": "20"}),
        ]

    def test_read_batch_requires_resource_column(self, tmp_path):
        csv_path = tmp_path / "batch.csv"
        csv_path.write_text("id\n1\n")
        with pytest.raises(ValueError):
            read_batch(str(csv_path))

    def test_output_stem(self):
        assert output_stem(3, "games/top") == "003-games_top"


class TestHelixCLI:

    @pytest.fixture
    def cli(self, logger):
        with patch("cli.setup_logger", return_value=logger):
            app = HelixCLI("cid", "tok")
        app.client.session.request = Mock(
            return_value=make_response({"data": [{"id": "493057", "name": "PUBG"}]}))
        return app

    def test_run_writes_outputs(self, cli, tmp_path):
        stats = cli.run([("games", {"id": "493057"})], base_dir=str(tmp_path), want_csv=True)

        assert stats == {"total": 1, "success": 1, "failed": 0}
        (run_dir,) = [p for p in tmp_path.iterdir() if p.is_dir()]
        assert (run_dir / "001-games.json").exists()
        assert (run_dir / "001-games.csv").exists()
        assert (run_dir / "logs" / "helix.log").exists()

    def test_run_continues_after_failure(self, cli, tmp_path):
        cli.client.session.request.side_effect = [
            TransportError("down"),
            make_response({"data": []}),
        ]
        batch = [("games", {"id": "1"}), ("games/top", {"first": "5"}), ("nope", {})]

        stats = cli.run(batch, base_dir=str(tmp_path))

        assert stats == {"total": 3, "success": 1, "failed": 2}

    def test_run_releases_log_file_and_session(self, cli, logger, tmp_path):
        cli.client.session.close = Mock()

        cli.run([("games", {"id": "1"})], base_dir=str(tmp_path / "a"))
        cli.run([("games", {"id": "2"})], base_dir=str(tmp_path / "b"))

        assert not [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert cli.client.session.close.call_count == 2

    def test_run_cleans_up_on_unexpected_error(self, cli, logger, tmp_path):
        cli.client.session.close = Mock()
        cli.client.session.request.side_effect = KeyError("boom")

        with pytest.raises(KeyError):
            cli.run([("games", {"id": "1"})], base_dir=str(tmp_path))

        assert not [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        cli.client.session.close.assert_called_once()


class TestMain:

    def test_requires_credentials(self):
        with pytest.raises(SystemExit):
            main(["games", "--client-id", "", "--token", ""])

    def test_single_request(self, tmp_path):
        with patch("cli.HelixCLI") as cli_cls:
            cli_cls.return_value.run.return_value = {"total": 1, "success": 1, "failed": 0}
            code = main(["streams", "--opt", "language=en", "--opt", "language=es",
                         "--client-id", "cid", "--token", "tok", "--out", str(tmp_path)])

        assert code == 0
        cli_cls.assert_called_once_with("cid", "tok")
        cli_cls.return_value.run.assert_called_once_with(
            [("streams", {"language": ["en", "es"]})], base_dir=str(tmp_path), want_csv=False)

    def test_opt_rejected_with_batch_csv(self, tmp_path):
        csv_path = tmp_path / "batch.csv"
        csv_path.write_text("resource,id\ngames,1\n")
        with pytest.raises(SystemExit):
            main([str(csv_path), "--opt", "first=5", "--client-id", "cid", "--token", "tok"])
