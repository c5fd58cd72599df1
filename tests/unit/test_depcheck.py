from __future__ import annotations

import subprocess
import sys
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "tools" / "depcheck.py"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(SCRIPT_PATH), *args],
        capture_output=True,
        text=True,
        check=False,
    )


def test_depcheck_fails_on_forbidden_domain_import(tmp_path: Path) -> None:
    domain_dir = tmp_path / "domain"
    domain_dir.mkdir(parents=True, exist_ok=True)

    violating_file = domain_dir / "model.py"
    violating_file.write_text("import pymongo\n", encoding="utf-8")

    result = _run("--layer", "domain", "--path", str(domain_dir))

    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0
    assert "pymongo" in combined_output
    assert str(violating_file) in combined_output


def test_application_layer_may_use_pydantic_but_not_the_store(tmp_path: Path) -> None:
    app_dir = tmp_path / "application"
    app_dir.mkdir(parents=True, exist_ok=True)
    (app_dir / "dto.py").write_text("from pydantic import BaseModel\n", encoding="utf-8")

    assert _run("--layer", "application", "--path", str(app_dir)).returncode == 0

    (app_dir / "repo.py").write_text(
        "from rbo.infrastructure.db.client import get_database\n",
        encoding="utf-8",
    )
    result = _run("--layer", "application", "--path", str(app_dir))
    assert result.returncode != 0
    assert "rbo.infrastructure.db.client" in result.stdout


def test_project_layers_pass() -> None:
    result = _run()
    assert result.returncode == 0, result.stdout
