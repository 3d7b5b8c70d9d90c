from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Iterable, Optional, Tuple
from satresolve.core.errors import ValidationError
from satresolve.core.types import validate_literals

class RuleType(IntEnum):
    """Why a rule lives in the ruleset. Ruleset iteration follows this order."""
    PACKAGE = 0
    REQUEST = 1
    LEARNED = 4

class RuleReason(IntEnum):
    """Cause category of a rule, used for conflict reporting."""
    ROOT_REQUIRE = 2
    FIXED = 3
    PACKAGE_CONFLICT = 6
    PACKAGE_REQUIRES = 7
    PACKAGE_SAME_NAME = 10
    LEARNED = 12
    PACKAGE_ALIAS = 13
    PACKAGE_INVERSE_ALIAS = 14

class RuleKind(str, Enum):
    GENERIC = "generic"
    # At most one of the (negated) candidates may be selected.
    MULTI_CONFLICT = "multi_conflict"

@dataclass(eq=False)
class Rule:
    """
    A typed logical constraint with provenance.

    Rules compare by identity: two rules with the same literals are still
    distinct entries in a ruleset or a problem.
    """
    literals: Tuple[int, ...]
    reason: RuleReason
    reason_data: Any = None
    kind: RuleKind = RuleKind.GENERIC
    type: Optional[RuleType] = None
    enabled: bool = field(default=True)

    def __post_init__(self):
        self.literals = tuple(validate_literals(self.literals))
        if not self.literals:
            raise ValidationError("Rule must have at least one literal")

        if self.kind is RuleKind.MULTI_CONFLICT:
            if len(self.literals) < 2:
                raise ValidationError("Multi conflict rule requires at least 2 literals")
            if any(lit > 0 for lit in self.literals):
                raise ValidationError(f"Multi conflict rule literals must all be negative: {list(self.literals)}")
            if len(set(self.literals)) != len(self.literals):
                raise ValidationError(f"Multi conflict rule literals must be unique: {list(self.literals)}")

    @classmethod
    def generic(cls, literals: Iterable[int], reason: RuleReason, reason_data: Any = None) -> 'Rule':
        return cls(tuple(literals), reason, reason_data)

    @classmethod
    def multi_conflict(cls, literals: Iterable[int], reason: RuleReason, reason_data: Any = None) -> 'Rule':
        return cls(tuple(literals), reason, reason_data, kind=RuleKind.MULTI_CONFLICT)

    def disable(self) -> None:
        self.enabled = False

    def enable(self) -> None:
        self.enabled = True

    def is_assertion(self) -> bool:
        return len(self.literals) == 1
