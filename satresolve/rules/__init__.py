from satresolve.rules.rule import Rule, RuleKind, RuleReason, RuleType
from satresolve.rules.ruleset import RuleSet
from satresolve.rules.decisions import Decision, Decisions
from satresolve.rules.problem import Problem

__all__ = [
    "Rule", "RuleKind", "RuleReason", "RuleType",
    "RuleSet", "Decision", "Decisions", "Problem"
]
