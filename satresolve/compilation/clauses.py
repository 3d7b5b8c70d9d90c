import logging
from typing import Iterator, List, Sequence
from satresolve.core.errors import RuleCompileError
from satresolve.rules.rule import Rule, RuleKind
from satresolve.rules.ruleset import RuleSet

logger = logging.getLogger(__name__)

def encode_at_most_one_pairwise(literals: Sequence[int]) -> Iterator[List[int]]:
    """
    Encodes "at most one of these candidates" using the pairwise encoding.

    The literals are the negated selection variables, so every pair becomes a
    binary clause [-a, -b]. They are reverse-sorted first so combinations come
    out in ascending variable order: [-2, -3, -4] yields
    [-2, -4], [-2, -3], [-3, -4].
    """
    ordered = sorted(literals, reverse=True)
    n = len(ordered)
    for i in range(n):
        for j in range(n - 1, i, -1):
            yield [ordered[i], ordered[j]]

def rule_to_clauses(rule: Rule) -> Iterator[List[int]]:
    """Compiles one rule into CNF clauses. Disabled rules yield nothing."""
    if not rule.enabled:
        logger.debug(f"Skipping disabled rule {list(rule.literals)}")
        return

    if rule.kind is RuleKind.GENERIC:
        yield list(rule.literals)
    elif rule.kind is RuleKind.MULTI_CONFLICT:
        yield from encode_at_most_one_pairwise(rule.literals)
    else:
        raise RuleCompileError(f"Unsupported rule kind: {rule.kind!r}")

def transform_rules(rules: RuleSet) -> Iterator[List[int]]:
    """
    Compiles a whole ruleset. Unit clauses are yielded as soon as they are
    found; all longer clauses are held back until every rule was visited.
    """
    deferred: List[List[int]] = []

    for rule_type, type_rules in rules.get_rules().items():
        for rule in type_rules:
            for clause in rule_to_clauses(rule):
                if len(clause) == 1:
                    yield clause
                    continue
                deferred.append(clause)

    yield from deferred

class ClauseStream:
    """Restartable view of a ruleset's clauses; each iteration recompiles."""
    def __init__(self, rules: RuleSet):
        self.rules = rules

    def __iter__(self) -> Iterator[List[int]]:
        return transform_rules(self.rules)
