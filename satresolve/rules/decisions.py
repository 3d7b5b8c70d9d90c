from typing import Dict, Iterator, List, NamedTuple, Optional
from satresolve.core.errors import DecisionError
from satresolve.core.types import literal_var, validate_literals
from satresolve.rules.rule import Rule

class Decision(NamedTuple):
    literal: int
    reason: Optional[Rule]

class Decisions:
    """
    Ordered, append-only record of variable assignments.

    Each variable maps to a signed decision level: positive when the variable
    was decided true, negative when decided false. Levels start at 1.
    """
    def __init__(self):
        self._decision_map: Dict[int, int] = {}
        self._queue: List[Decision] = []
        # var -> index into _queue
        self._positions: Dict[int, int] = {}
        self._max_level = 0

    def decide(self, literal: int, level: int, why: Optional[Rule]) -> None:
        validate_literals([literal])
        if level < 1:
            raise DecisionError(f"Decision level must be positive, got {level}")
        var = literal_var(literal)
        if var in self._decision_map:
            raise DecisionError(
                f"Variable {var} is already decided at level {abs(self._decision_map[var])}"
            )

        self._decision_map[var] = level if literal > 0 else -level
        self._positions[var] = len(self._queue)
        self._queue.append(Decision(literal, why))
        if level > self._max_level:
            self._max_level = level

    def decided(self, literal: int) -> bool:
        return literal_var(literal) in self._decision_map

    def undecided(self, literal: int) -> bool:
        return not self.decided(literal)

    def satisfy(self, literal: int) -> bool:
        """True if the literal agrees with the recorded decision."""
        level = self._decision_map.get(literal_var(literal), 0)
        return (literal > 0 and level > 0) or (literal < 0 and level < 0)

    def conflict(self, literal: int) -> bool:
        """True if the literal contradicts the recorded decision."""
        level = self._decision_map.get(literal_var(literal), 0)
        return (literal > 0 and level < 0) or (literal < 0 and level > 0)

    def decision_level(self, literal: int) -> int:
        return abs(self._decision_map.get(literal_var(literal), 0))

    def decision_rule(self, literal: int) -> Optional[Rule]:
        pos = self._positions.get(literal_var(literal))
        if pos is None:
            return None
        return self._queue[pos].reason

    @property
    def max_level(self) -> int:
        return self._max_level

    def revert_last(self) -> Decision:
        if not self._queue:
            raise DecisionError("No decisions to revert")
        decision = self._queue.pop()
        var = literal_var(decision.literal)
        level = abs(self._decision_map.pop(var))
        del self._positions[var]
        if level == self._max_level:
            self._max_level = max((abs(lvl) for lvl in self._decision_map.values()), default=0)
        return decision

    def literals(self) -> List[int]:
        return [d.literal for d in self._queue]

    def __iter__(self) -> Iterator[Decision]:
        return iter(list(self._queue))

    def __len__(self) -> int:
        return len(self._queue)
