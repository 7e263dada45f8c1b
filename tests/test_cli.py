import importlib
import logging
import pathlib

import pytest

from feed import cli
from feed.config import Environment


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda log_file: None)


def test_cli_overrides_config_file(tmp_path):
    conf = tmp_path / "catalog.conf"
    conf.write_text("environment = stage\nmax_length = 10\n", encoding="utf-8")
    args = cli.build_parser().parse_args(
        ["--config", str(conf), "--env", "production", "--skip-existing", "--output", "x.json"]
    )
    config = cli.load_config(args)
    assert config.environment == Environment.PRODUCTION
    assert config.skip_fetch_if_exists
    assert config.max_length == 10
    assert config.output_path == "x.json"


def test_main_runs_against_existing_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "result.json"
    path.write_text('[{"product_id": "Z9", "product_name": "Rug", "l_description": "aaaa"}]', encoding="utf-8")
    monkeypatch.delenv("CATALOG_ENV", raising=False)
    result = cli.run_cli(
        [
            "--config", str(tmp_path / "missing.conf"),
            "--output", str(path),
            "--skip-existing",
            "--max-length", "3",
        ]
    )
    assert result.fetch_skipped
    assert result.report.keys == ["Z9;Rug"]
    assert "Count: 1" in capsys.readouterr().out


def test_main_reports_invalid_configuration(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("CATALOG_ENV", "qa")
    with caplog.at_level(logging.ERROR):
        assert cli.run_cli(["--config", str(tmp_path / "missing.conf")]) is None
    assert "Invalid configuration" in caplog.text


@pytest.mark.parametrize(
    "extra",
    [["--max-length", "-5"], ["--timeout", "0"], ["--timeout", "-1"], ["--field", ""]],
)
def test_out_of_range_overrides_rejected(tmp_path, extra):
    args = cli.build_parser().parse_args(["--config", str(tmp_path / "missing.conf")] + extra)
    with pytest.raises(ValueError):
        cli.load_config(args)


def test_main_returns_none_for_rejected_override(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--config", str(tmp_path / "missing.conf"), "--max-length", "-5"]) is None
    assert "max_length must not be negative" in caplog.text


def console_script_target():
    pyproject = pathlib.Path(__file__).parent.parent / "pyproject.toml"
    for line in pyproject.read_text(encoding="utf-8").splitlines():
        if line.startswith("catalog-check"):
            module, func = line.split("=", 1)[1].strip().strip('"').split(":")
            return getattr(importlib.import_module(module), func)
    raise AssertionError("catalog-check script not declared")


def test_console_entry_point_returns_none(tmp_path, monkeypatch, capsys):
    path = tmp_path / "result.json"
    path.write_text('[{"product_id": "Z9", "product_name": "Rug", "l_description": "aaaa"}]', encoding="utf-8")
    monkeypatch.delenv("CATALOG_ENV", raising=False)
    entry = console_script_target()
    assert entry is cli.main
    result = entry(["--config", str(tmp_path / "missing.conf"), "--output", str(path), "--skip-existing"])
    assert result is None
    assert "Count: 0" in capsys.readouterr().out
