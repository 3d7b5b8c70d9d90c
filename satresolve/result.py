from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from satresolve.rules.decisions import Decisions
from satresolve.rules.problem import Problem

@dataclass
class SolveResult:
    """
    Outcome of one successful solve cycle. Unsatisfiable or incomplete solves
    raise UnsatisfiableError instead.
    """
    model: List[int]
    decisions: Decisions
    problems: List[Problem]

    # Solver counters plus the clause stream summary under "clauses"
    stats: Dict[str, Any] = field(default_factory=dict)
    # section -> {"seconds": ..., optional memory figures}
    timings: Dict[str, Dict[str, float]] = field(default_factory=dict)
    debug_files: List[Path] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        return len(self.problems) > 0
