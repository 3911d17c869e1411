import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from inventory_visibility.cli import app
from inventory_visibility.config import get_settings

runner = CliRunner()


def test_warehouses_command() -> None:
    result = runner.invoke(app, ["warehouses"])
    assert result.exit_code == 0, result.output
    assert "BLR-A Bangalore Central | Bangalore, India" in result.output


def test_products_command_filters() -> None:
    result = runner.invoke(app, ["products", "--status", "Critical"])
    assert result.exit_code == 0, result.output
    assert "P-1002" in result.output
    assert "P-1004" in result.output
    assert "P-1001" not in result.output


def test_products_command_without_matches() -> None:
    result = runner.invoke(app, ["products", "--search", "zzz"])
    assert result.exit_code == 0
    assert "No products found." in result.output


def test_summary_command() -> None:
    result = runner.invoke(app, ["summary"])
    assert result.exit_code == 0, result.output
    assert "Total stock: 334" in result.output
    assert "Fill rate: 68.5%" in result.output


def test_trend_command() -> None:
    result = runner.invoke(app, ["trend", "--range", "7d"])
    assert result.exit_code == 0, result.output
    assert result.output.count("stock=") == 7


def test_show_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVENTORY_VIS_PORT", "9100")
    get_settings.cache_clear()
    result = runner.invoke(app, ["show-config"])
    assert result.exit_code == 0
    assert "Bind: 127.0.0.1:9100" in result.output


def test_seed_file_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps(
            {
                "warehouses": [{"code": "AMS-1", "name": "Amsterdam", "city": "Amsterdam", "country": "NL"}],
                "products": [],
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("INVENTORY_VIS_SEED_FILE", str(seed))
    get_settings.cache_clear()

    result = runner.invoke(app, ["warehouses"])
    assert result.exit_code == 0, result.output
    assert "AMS-1" in result.output


def test_broken_seed_file_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INVENTORY_VIS_SEED_FILE", str(tmp_path / "missing.json"))
    get_settings.cache_clear()

    result = runner.invoke(app, ["summary"])
    assert result.exit_code == 1
