import json
import pytest
from satresolve.config import SolveConfig
from satresolve.core.errors import ConfigError

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SATRESOLVE_SOLVER", raising=False)
    monkeypatch.delenv("SATRESOLVE_CONFIG_PATH", raising=False)

def test_defaults():
    config = SolveConfig.from_env_or_file()
    assert config == SolveConfig()
    assert config.backend == "pysat"
    assert config.solver_name == "g3"
    assert config.log_stats
    assert config.debug_dir is None
    assert config.conflict_budget is None

def test_env_selects_solver(monkeypatch):
    monkeypatch.setenv("SATRESOLVE_SOLVER", "cadical153")
    assert SolveConfig.from_env_or_file().solver_name == "cadical153"

def test_env_wins_over_file(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"solver_name": "m22"}))
    monkeypatch.setenv("SATRESOLVE_CONFIG_PATH", str(path))
    monkeypatch.setenv("SATRESOLVE_SOLVER", "g4")
    assert SolveConfig.from_env_or_file().solver_name == "g4"

def test_config_file(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "solver_name": "m22",
        "log_stats": False,
        "debug_dir": str(tmp_path / "dumps"),
        "conflict_budget": 1000
    }))
    monkeypatch.setenv("SATRESOLVE_CONFIG_PATH", str(path))

    config = SolveConfig.from_env_or_file()
    assert config.solver_name == "m22"
    assert not config.log_stats
    assert config.debug_dir == str(tmp_path / "dumps")
    assert config.conflict_budget == 1000

@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_bad_config_file(monkeypatch, tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    monkeypatch.setenv("SATRESOLVE_CONFIG_PATH", str(path))
    with pytest.raises(ConfigError):
        SolveConfig.from_env_or_file()

def test_missing_config_file(monkeypatch, tmp_path):
    monkeypatch.setenv("SATRESOLVE_CONFIG_PATH", str(tmp_path / "missing.json"))
    with pytest.raises(ConfigError):
        SolveConfig.from_env_or_file()

def test_unknown_keys():
    with pytest.raises(ConfigError, match="timeout"):
        SolveConfig.from_dict({"timeout": 3})

@pytest.mark.parametrize("budget", [-1, "10", 2.5])
def test_bad_budget(budget):
    with pytest.raises(ConfigError):
        SolveConfig.from_dict({"conflict_budget": budget})
