import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from satresolve.backends.base import SolverInterface, SolverValue
from satresolve.pool import Pool
from satresolve.report import decision_to_string, literals_to_string, rule_to_string
from satresolve.rules.decisions import Decisions
from satresolve.rules.ruleset import RuleSet

_VALUE_SYMBOLS = {
    SolverValue.UNDEFINED: "???",
    SolverValue.TRUE: "+++",
    SolverValue.FALSE: "---",
}

def write_lines_atomic(path: Path, lines: Iterable[str]) -> None:
    """Writes lines to `path` through a temporary file in the same directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

class DebugDumper:
    """Dumps the state of one solve run as text files, prefixed by run number."""
    def __init__(self, directory: str, pool: Optional[Pool] = None):
        self.directory = Path(directory)
        self.pool = pool

    def _path(self, run: int, name: str) -> Path:
        return self.directory / f"{run}-{name}"

    def _var_line(self, var: int, val: SolverValue) -> str:
        package = self.pool.literal_to_package(var) if self.pool else None
        return f"Var {_VALUE_SYMBOLS[val]} [{var}] {package if package is not None else ''}".rstrip()

    def _model_lines(self, values: Dict[int, SolverValue], only_true: bool) -> List[str]:
        return [
            self._var_line(var, val)
            for var, val in sorted(values.items())
            if not only_true or val is SolverValue.TRUE
        ]

    def _variable_lines(self, solver: SolverInterface) -> List[str]:
        """Every variable the solver knows, including ones missing from the model."""
        return [
            self._var_line(var, solver.get_variable_value(var))
            for var in range(1, solver.get_variables_number() + 1)
        ]

    def dump(self,
             run: int,
             solver: SolverInterface,
             decisions: Decisions,
             rules: RuleSet,
             clauses: List[List[int]],
             stats: Dict[str, Any]) -> List[Path]:
        model_values = solver.get_model_values()
        files = {
            "model.txt": self._model_lines(model_values, only_true=True),
            "model_full.txt": self._model_lines(model_values, only_true=False),
            "vars.txt": self._variable_lines(solver),
            "decisions.txt": [decision_to_string(d, self.pool) for d in decisions],
            "clauses.txt": [f"Clause ( {literals_to_string(c, self.pool)} )" for c in clauses],
            "rules.txt": [rule_to_string(r, self.pool) for r in rules],
            "stats.json": [json.dumps(stats, indent=2, default=str)],
        }
        written = []
        for name, lines in files.items():
            path = self._path(run, name)
            write_lines_atomic(path, lines)
            written.append(path)
        return written
