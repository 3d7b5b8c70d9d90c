"""
satresolve: SAT-backed package constraint resolution.

Compiles legacy resolver rules to CNF, solves them with a SAT engine and
reconciles the model with the caller's decision trail.
"""
from satresolve.adapter import DependencyResolverAdapter
from satresolve.backends import PySatSolver, SolverInterface, SolverValue, create_solver
from satresolve.compilation import ClauseStream, rule_to_clauses, transform_rules
from satresolve.config import SolveConfig
from satresolve.core.errors import SatResolveError, UnsatisfiableError, ValidationError
from satresolve.pool import Package, Pool
from satresolve.result import SolveResult
from satresolve.rules import Decisions, Problem, Rule, RuleKind, RuleReason, RuleSet, RuleType

__all__ = [
    "DependencyResolverAdapter", "SolveResult", "SolveConfig",
    "PySatSolver", "SolverInterface", "SolverValue", "create_solver",
    "ClauseStream", "rule_to_clauses", "transform_rules",
    "SatResolveError", "UnsatisfiableError", "ValidationError",
    "Package", "Pool",
    "Decisions", "Problem", "Rule", "RuleKind", "RuleReason", "RuleSet", "RuleType"
]
