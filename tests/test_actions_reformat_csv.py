"""
Tests for the reformat_csv action (actions/reformat_csv.py).

The action runs against a LocalFileStore rooted at tmp_path, selected through
CSVTABLE_ROOT_DIR, so no real data directory is touched.

The HTTP store tests mock requests.Session, so no network access is needed.
"""

import logging
from unittest.mock import Mock, patch

import pytest

from actions.reformat_csv import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() attaches handlers to the captured stderr; drop them afterwards."""
    yield
    logging.getLogger("csvtable").handlers.clear()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CSVTABLE_ROOT_DIR", str(tmp_path))
    return tmp_path


def test_reformat_to_stdout(data_dir, capsys):
    (data_dir / "in.csv").write_text('a,b\n"x","y,z"\n', encoding="utf-8")

    exit_code = main(["in.csv"])

    assert exit_code == 0
    assert capsys.readouterr().out == 'a,b\nx,"y,z"\n'


def test_reformat_to_output_resource(data_dir):
    (data_dir / "in.csv").write_text('a,b\n"x","y"', encoding="utf-8")

    exit_code = main(["in.csv", "--output", "out/clean.csv"])

    assert exit_code == 0
    assert (data_dir / "out" / "clean.csv").read_text(encoding="utf-8") == "a,b\nx,y"


def test_check_canonical_file(data_dir, capsys):
    (data_dir / "in.csv").write_text("a,b\n1,2", encoding="utf-8")

    assert main(["in.csv", "--check"]) == 0
    assert "is canonical" in capsys.readouterr().out


def test_check_non_canonical_file(data_dir, capsys):
    (data_dir / "in.csv").write_text('a,b\n"1",2', encoding="utf-8")

    assert main(["in.csv", "--check"]) == 1
    assert "not canonical" in capsys.readouterr().out


def test_shape_error_exits_2(data_dir, capsys):
    (data_dir / "in.csv").write_text("a,b\n1,2\n3", encoding="utf-8")

    assert main(["in.csv"]) == 2
    assert "Row 2" in capsys.readouterr().err


def test_missing_source_exits_2(data_dir, capsys):
    assert main(["missing.csv"]) == 2
    assert "Failed to read 'missing.csv'" in capsys.readouterr().err


def test_invalid_configuration_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("CSVTABLE_STORE", "ftp")

    assert main(["in.csv"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


@pytest.fixture
def http_env(monkeypatch):
    monkeypatch.setenv("CSVTABLE_STORE", "http")
    monkeypatch.setenv("CSVTABLE_HTTP_BASE_URL", "https://objects.test/tables")


def test_empty_http_resource_name_exits_2(http_env, capsys):
    assert main(["/"]) == 2
    assert "Failed to read '/'" in capsys.readouterr().err


@patch("csvtable.stores.http_store.requests.Session.get")
@patch("csvtable.stores.http_store.HttpStore.close")
def test_store_is_closed_after_run(mock_close, mock_get, http_env, capsys):
    mock_get.return_value = Mock(content=b"a,b\n1,2")

    assert main(["in.csv"]) == 0
    assert capsys.readouterr().out == "a,b\n1,2\n"
    mock_close.assert_called_once()
