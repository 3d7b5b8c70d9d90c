import abc
from enum import IntEnum
from typing import Dict, Iterable, List, Sequence

class SolverValue(IntEnum):
    FALSE = 0
    TRUE = 1
    UNDEFINED = 2

SolverStatus = SolverValue

class SolverInterface(abc.ABC):
    """
    Narrow contract of a boolean SAT engine.

    Variables are created on first reference; there is no declaration step.
    """

    @abc.abstractmethod
    def get_status(self) -> SolverValue:
        """TRUE if satisfiable, FALSE if proven unsatisfiable, UNDEFINED otherwise."""
        pass

    def is_satisfied(self) -> bool:
        return self.get_status() is SolverValue.TRUE

    def is_unsatisfiable(self) -> bool:
        return self.get_status() is SolverValue.FALSE

    def is_status_undefined(self) -> bool:
        """Neither outcome was proven, e.g. the solve was interrupted."""
        return self.get_status() is SolverValue.UNDEFINED

    @abc.abstractmethod
    def get_variables_number(self) -> int:
        """Highest variable number seen; holes are filled automatically."""
        pass

    @abc.abstractmethod
    def get_clauses_count(self) -> int:
        pass

    @abc.abstractmethod
    def get_decisions_count(self) -> int:
        """Decisions made by the solver so far."""
        pass

    @abc.abstractmethod
    def get_conflict(self) -> List[int]:
        """Literals involved in the last unsatisfiable solve."""
        pass

    def get_conflict_length(self) -> int:
        return len(self.get_conflict())

    def has_conflict(self) -> bool:
        return self.get_conflict_length() > 0

    @abc.abstractmethod
    def get_model(self) -> List[int]:
        """
        Current model as a list of literals, at most one per variable.
        May be incomplete; use has_model() to check for a full solution.
        """
        pass

    @abc.abstractmethod
    def has_model(self) -> bool:
        """True if a full model has been solved."""
        pass

    @abc.abstractmethod
    def get_model_values(self) -> Dict[int, SolverValue]:
        pass

    @abc.abstractmethod
    def get_variable_value(self, variable: int) -> SolverValue:
        pass

    @abc.abstractmethod
    def get_statistics(self) -> Dict[str, int]:
        """
        Named integer counters. Key names and availability vary across
        implementations.
        """
        pass

    @abc.abstractmethod
    def set_variable_polarity(self, variable: int, polarity: bool) -> None:
        pass

    @abc.abstractmethod
    def set_decision(self, variable: int, decision: bool) -> None:
        """Sets a decision hint for the variable."""
        pass

    def set_decision_literal(self, literal: int) -> None:
        """Same as set_decision, with the value taken from the literal's sign."""
        self.set_decision(abs(literal), literal > 0)

    def set_decision_literals(self, literals: Iterable[int]) -> None:
        for literal in literals:
            self.set_decision_literal(literal)

    @abc.abstractmethod
    def add_clause(self, literals: Sequence[int]) -> bool:
        """Returns False once the formula is known to be unsatisfiable."""
        pass

    def add_clauses(self, clauses: Iterable[Sequence[int]]) -> bool:
        for clause in clauses:
            if not self.add_clause(clause):
                return False
        return True

    def support_simplification(self) -> bool:
        """Whether simplify() has any effect."""
        return False

    def simplify(self) -> bool:
        return True

    @abc.abstractmethod
    def solve(self, assumptions: Sequence[int] = ()) -> bool:
        """Run the solver after all clauses and hints have been loaded."""
        pass
