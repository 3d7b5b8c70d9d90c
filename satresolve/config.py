import dataclasses
import json
import os
from typing import Any, Dict, Optional
from satresolve.core.errors import ConfigError

@dataclasses.dataclass
class SolveConfig:
    backend: str = "pysat"
    solver_name: str = "g3"
    log_stats: bool = True
    debug_dir: Optional[str] = None
    # Conflicts allowed per solve; None means unbounded
    conflict_budget: Optional[int] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'SolveConfig':
        known = {f.name for f in dataclasses.fields(SolveConfig)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        budget = data.get("conflict_budget")
        if budget is not None and (not isinstance(budget, int) or budget < 0):
            raise ConfigError(f"conflict_budget must be a non-negative integer, got {budget!r}")
        return SolveConfig(**data)

    @staticmethod
    def from_env_or_file() -> 'SolveConfig':
        # 1. Try Env Var
        env_solver = os.environ.get("SATRESOLVE_SOLVER")
        if env_solver:
            return SolveConfig(solver_name=env_solver)

        # 2. Try Config Path
        config_path = os.environ.get("SATRESOLVE_CONFIG_PATH")
        if config_path:
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigError(f"Cannot read config file '{config_path}': {e}")
            if not isinstance(data, dict):
                raise ConfigError(f"Config file '{config_path}' must contain a JSON object")
            return SolveConfig.from_dict(data)

        # Default
        return SolveConfig()
