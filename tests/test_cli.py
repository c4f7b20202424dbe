"""Tests for the fred-graph command line."""

from unittest.mock import MagicMock, patch

import pytest

from fred_graph import cli
from fred_graph.exceptions import ServiceError, TransportError
from fred_graph.models import FileType, Frequency


def test_parser_defaults():
    args = cli.build_parser().parse_args(["children"])
    assert args.command == "children"
    assert args.category_id == 0
    assert args.verbose is False


def test_parser_rejects_bad_date():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["observations", "GNPCA", "--start", "2013/01/01"])


def test_missing_key_exits(monkeypatch, capsys):
    monkeypatch.setenv("FRED_API_KEY", "")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["category", "1"])
    assert excinfo.value.code == 1
    assert "FRED_API_KEY" in capsys.readouterr().out


def test_children_command(capsys):
    fred = MagicMock()
    child = MagicMock(id=125, parent_id=13)
    child.name = "Trade Balance"
    fred.get_category_children.return_value = [child]

    cli.run(cli.build_parser().parse_args(["children", "13"]), fred)

    fred.get_category_children.assert_called_once_with(13)
    assert "Trade Balance" in capsys.readouterr().out


def test_series_command(capsys):
    fred = MagicMock()
    fred.get_series.return_value = MagicMock(
        id="GNPCA",
        title="Real Gross National Product",
        frequency=Frequency.ANNUAL,
        seasonal_adjusted=False,
        popularity=39,
    )
    cli.run(cli.build_parser().parse_args(["series", "GNPCA"]), fred)
    out = capsys.readouterr().out
    assert "GNPCA: Real Gross National Product" in out
    assert "ANNUAL" in out


def test_download_command(tmp_path, capsys):
    target = tmp_path / "gnpca.zip"
    target.write_bytes(b"x" * 2048)
    fred = MagicMock()
    fred.download_series_observations.return_value = target

    cli.run(cli.build_parser().parse_args(["download", "GNPCA", "--file-type", "xls"]), fred)

    fred.download_series_observations.assert_called_once_with("GNPCA", FileType.XLS, "GNPCA")
    assert "2.0 KB" in capsys.readouterr().out


def test_service_error_exits(monkeypatch, capsys):
    monkeypatch.setenv("FRED_API_KEY", "key")
    error = ServiceError("Bad Request.", TransportError("HTTP 400", status_code=400))
    with patch.object(cli, "run", side_effect=error):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["category", "1"])
    assert excinfo.value.code == 1
    assert "Bad Request." in capsys.readouterr().out
