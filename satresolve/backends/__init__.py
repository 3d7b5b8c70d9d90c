from satresolve.backends.base import SolverInterface, SolverStatus, SolverValue
from satresolve.backends.pysat_solver import PySatSolver
from satresolve.backends.registry import SolverRegistry, create_solver

__all__ = [
    "SolverInterface", "SolverStatus", "SolverValue",
    "PySatSolver", "SolverRegistry", "create_solver"
]
