import logging
from typing import Dict, List, Optional, Sequence
from pysat.solvers import Solver
from satresolve.backends.base import SolverInterface, SolverValue
from satresolve.core.errors import ConfigError, SolverError
from satresolve.core.types import validate_clause, validate_literals

logger = logging.getLogger(__name__)

# Solvers exposing top-level unit propagation through pysat
PROPAGATING_SOLVERS = {
    "g3", "glucose3", "g4", "glucose4", "g41", "glucose41",
    "m22", "minisat22", "mgh", "minisat-gh",
    "mcb", "maplechrono", "mcm", "maplecm", "mpl", "maplesat",
}

# Solvers checking the conflict budget after every conflict. Glucose only
# checks it at restarts and can overrun it by hundreds of conflicts.
BUDGETED_SOLVERS = {
    "m22", "minisat22", "mgh", "minisat-gh",
    "mcb", "maplechrono", "mcm", "maplecm", "mpl", "maplesat",
}

class PySatSolver(SolverInterface):
    """
    SolverInterface on top of a pysat solver.

    With a conflict budget (MiniSat family only, see BUDGETED_SOLVERS),
    solve() becomes time-boxed: an exhausted budget leaves the status
    UNDEFINED. With track_conflicts, the submitted clauses are remembered so
    get_conflict() can explain a plain (assumption-free) unsatisfiable solve.
    """
    def __init__(self, name: str = "g3", conflict_budget: Optional[int] = None, track_conflicts: bool = True):
        if conflict_budget is not None and name not in BUDGETED_SOLVERS:
            raise ConfigError(
                f"Solver '{name}' does not enforce a conflict budget, "
                f"use one of {sorted(BUDGETED_SOLVERS)}"
            )
        self.name = name
        self.conflict_budget = conflict_budget
        self.track_conflicts = track_conflicts
        self._solver = Solver(name=name)

        self._ok = True
        self._status: Optional[bool] = None
        self._model: Optional[List[int]] = None
        self._assumptions: List[int] = []
        self._conflict: Optional[List[int]] = None

        self._units: List[int] = []
        self._clauses: List[List[int]] = []

    def __enter__(self) -> 'PySatSolver':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.delete()

    def delete(self) -> None:
        if self._solver is not None:
            self._solver.delete()
            self._solver = None

    def _engine(self) -> Solver:
        if self._solver is None:
            raise SolverError(f"Solver '{self.name}' has been deleted")
        return self._solver

    def get_status(self) -> SolverValue:
        if self._status is True:
            return SolverValue.TRUE
        if self._status is False:
            return SolverValue.FALSE
        return SolverValue.UNDEFINED

    def get_variables_number(self) -> int:
        return self._engine().nof_vars()

    def get_clauses_count(self) -> int:
        return self._engine().nof_clauses()

    def get_model(self) -> List[int]:
        return list(self._model or [])

    def get_model_size(self) -> int:
        return len(self._model or [])

    def has_model(self) -> bool:
        return self._model is not None and self.get_model_size() == self.get_variables_number()

    def get_model_values(self) -> Dict[int, SolverValue]:
        values = {}
        for literal in self._model or []:
            values[abs(literal)] = SolverValue.TRUE if literal > 0 else SolverValue.FALSE
        return values

    def get_variable_value(self, variable: int) -> SolverValue:
        return self.get_model_values().get(abs(variable), SolverValue.UNDEFINED)

    def get_conflict(self) -> List[int]:
        if self._status is not False:
            return []
        if self._conflict is None:
            self._conflict = self._compute_conflict()
        return list(self._conflict)

    def _compute_conflict(self) -> List[int]:
        if self._assumptions:
            core = self._engine().get_core()
            if core:
                return list(core)

        if not self.track_conflicts:
            return []

        # Re-solve with the unit clauses as assumptions to get them blamed in a core
        assumptions = self._units + self._assumptions
        with Solver(name=self.name, bootstrap_with=self._clauses) as diag:
            if diag.solve(assumptions=assumptions):
                return []
            return list(diag.get_core() or [])

    def get_decisions_count(self) -> int:
        return int((self._engine().accum_stats() or {}).get("decisions", 0))

    def get_statistics(self) -> Dict[str, int]:
        engine = self._engine()
        stats = {
            "variables_total": engine.nof_vars(),
            "variables_model": self.get_model_size(),
            "clauses_kept": engine.nof_clauses(),
            "conflict_length": self.get_conflict_length(),
            "decision_count": self.get_decisions_count(),
        }
        for key, value in (engine.accum_stats() or {}).items():
            stats[key] = int(value)
        return stats

    def set_variable_polarity(self, variable: int, polarity: bool) -> None:
        variable = validate_literals([variable])[0]
        self._engine().set_phases([abs(variable) if polarity else -abs(variable)])

    def set_decision(self, variable: int, decision: bool) -> None:
        self.set_variable_polarity(variable, decision)

    def add_clause(self, literals: Sequence[int]) -> bool:
        clause = validate_clause(literals)
        res = self._engine().add_clause(clause, no_return=False)
        if res is False:
            self._ok = False

        if self.track_conflicts:
            if len(clause) == 1:
                self._units.append(clause[0])
            else:
                self._clauses.append(clause)

        return self._ok

    def support_simplification(self) -> bool:
        return self.name in PROPAGATING_SOLVERS

    def simplify(self) -> bool:
        """Top-level unit propagation. Returns False if a conflict was found."""
        if not self._ok or not self.support_simplification():
            return self._ok
        status, implied = self._engine().propagate(assumptions=[])
        logger.debug(f"Propagation fixed {len(implied)} literals")
        if not status:
            self._ok = False
        return self._ok

    def solve(self, assumptions: Sequence[int] = ()) -> bool:
        engine = self._engine()
        self._assumptions = validate_literals(assumptions)
        self._conflict = None
        self._model = None

        if self.conflict_budget is not None:
            engine.conf_budget(self.conflict_budget)
            self._status = engine.solve_limited(assumptions=self._assumptions)
        else:
            self._status = engine.solve(assumptions=self._assumptions)

        if self._status:
            self._model = engine.get_model()

        return bool(self._status)
