"""Tests for the command line scripts."""
from __future__ import annotations

import importlib.util
import runpy
import sys
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from social_insurance.core.config import LogSettings, get_settings
from social_insurance.core.log import init_logging
from social_insurance.models import CityStandard, Salary
from tests.factories import add_city_standard

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"

CITY_CSV = "city_name,year,rate,base_min,base_max\n佛山,2024,0.14,3523,26421\n"
SALARY_CSV = "employee_id,employee_name,month,salary_amount\nE001,张三,202401,5000\n"


def _load_script(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def load_csvs(session: Session, monkeypatch) -> ModuleType:
    module = _load_script("load_csvs")

    @contextmanager
    def _scope():
        yield session
        session.commit()

    monkeypatch.setattr(module, "session_scope", _scope)
    return module


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_csvs_imports_both_files(load_csvs: ModuleType, session: Session, tmp_path: Path) -> None:
    cities = _write(tmp_path, "cities.csv", CITY_CSV)
    salaries = _write(tmp_path, "salaries.csv", SALARY_CSV)

    assert load_csvs.main(["--cities", str(cities), "--salaries", str(salaries)]) == 0

    assert [row.city_name for row in session.scalars(select(CityStandard))] == ["佛山"]
    assert [row.employee_name for row in session.scalars(select(Salary))] == ["张三"]


def test_bad_salary_file_leaves_city_standards_untouched(
    load_csvs: ModuleType, session: Session, tmp_path: Path
) -> None:
    add_city_standard(session, city_name="旧城")
    cities = _write(tmp_path, "cities.csv", CITY_CSV)
    salaries = _write(tmp_path, "salaries.csv", SALARY_CSV.replace("202401", "2024-01"))

    assert load_csvs.main(["--cities", str(cities), "--salaries", str(salaries)]) == 1

    assert [row.city_name for row in session.scalars(select(CityStandard))] == ["旧城"]
    assert session.scalars(select(Salary)).all() == []


def test_scripts_log_with_configured_settings(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_CONSOLE", "0")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setattr(sys, "argv", ["load_csvs.py"])
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_path(str(SCRIPTS / "load_csvs.py"), run_name="__main__")
    finally:
        init_logging(LogSettings(log_dir=None, console=False), queue=False)
        get_settings.cache_clear()

    assert excinfo.value.code == 2
    assert "Nothing to import" in (tmp_path / "social_insurance.log").read_text(encoding="utf-8")
