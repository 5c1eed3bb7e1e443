import json

import pytest

from secretforge.cli import run_validate


def test_run_validate_accepts_good_catalog(tmp_path, capsys):
    path = tmp_path / "secrets.json"
    path.write_text(
        json.dumps(
            {"cards": [{"id": "EX1_287", "name": "Counterspell", "set": "EXPERT1", "class": "MAGE", "secret": True}]}
        ),
        encoding="utf-8",
    )

    run_validate([str(path)])

    assert "Catalog is valid" in capsys.readouterr().out


def test_run_validate_exits_on_errors(tmp_path):
    path = tmp_path / "secrets.json"
    path.write_text(json.dumps({"cards": []}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        run_validate([str(path)])
    assert exc.value.code == 1
