"""
Core module for satresolve.
Provides error handling, logging and literal types.
"""
from satresolve.core.errors import (
    SatResolveError, ValidationError, RuleCompileError, DecisionError,
    ConfigError, SolverError, UnsatisfiableError
)
from satresolve.core.logging import get_logger
from satresolve.core.types import (
    Lit, Clause, CNF, validate_literals, validate_clause, validate_cnf, literal_var
)

__all__ = [
    "SatResolveError", "ValidationError", "RuleCompileError", "DecisionError",
    "ConfigError", "SolverError", "UnsatisfiableError",
    "get_logger",
    "Lit", "Clause", "CNF", "validate_literals", "validate_clause", "validate_cnf", "literal_var"
]
