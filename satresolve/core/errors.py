class SatResolveError(Exception):
    """Base exception for all satresolve related errors."""
    pass

class ValidationError(SatResolveError):
    """Raised when a literal, clause or rule fails validation."""
    pass

class RuleCompileError(SatResolveError):
    """Raised when a rule cannot be compiled to CNF clauses."""
    pass

class DecisionError(SatResolveError):
    """Raised on an invalid operation on the decision trail."""
    pass

class ConfigError(SatResolveError):
    """Raised when configuration cannot be loaded or is invalid."""
    pass

class SolverError(SatResolveError):
    """Raised when the SAT solver boundary fails."""
    pass

class UnsatisfiableError(SolverError):
    """
    Raised when the solver could not produce a complete satisfying model.
    Carries the conflict literal set and the solver statistics for diagnostics.
    """
    def __init__(self, message: str, conflict=None, stats=None):
        super().__init__(message)
        self.conflict = list(conflict or [])
        self.stats = dict(stats or {})
