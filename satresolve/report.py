"""
Human-readable rendering of literals, rules, decisions, problems and solver
statistics, used for logging and debug dumps.
"""
from typing import Dict, Iterable, Optional
from satresolve.pool import Pool
from satresolve.rules.decisions import Decision
from satresolve.rules.problem import Problem
from satresolve.rules.rule import Rule, RuleKind

def humanize_snake_case(snake_cased: str) -> str:
    return snake_cased.replace("_", " ").title()

def stats_to_string(stats: Dict[str, int], title: str = "SAT Solver Statistics") -> str:
    """Renders counters as a sorted table with dot leaders."""
    if not stats:
        return f"\n {title}\n" + "=" * (len(title) + 6) + "\n"

    items = sorted(stats.items())
    labels = [humanize_snake_case(k) for k, _ in items]
    values = [str(v) for _, v in items]
    labels_len = max(len(label) for label in labels)
    values_len = max(len(value) for value in values)
    total_len = max(labels_len + values_len + 5, len(title) + 4)

    lines = ["", " " + " " * ((total_len - len(title)) // 2) + title, "=" * (total_len + 2)]
    for label, value in zip(labels, values):
        lines.append(f" {label} " + "." * (total_len - len(label) - len(value) - 2) + f" {value}")
    return "\n".join(lines) + "\n"

def literal_to_string(literal: int, pool: Optional[Pool] = None) -> str:
    symbol = "---" if literal <= 0 else "+++"
    if pool is None:
        return f"{symbol} {abs(literal)}"

    package = pool.literal_to_package(literal)
    if package is None:
        return f"{symbol} {abs(literal)}"
    return f"{symbol} {package}:{abs(literal)}"

def literals_to_string(literals: Iterable[int], pool: Optional[Pool] = None) -> str:
    return " | ".join(literal_to_string(lit, pool) for lit in literals)

def rule_to_string(rule: Rule, pool: Optional[Pool] = None) -> str:
    kind = "MultiConflictRule" if rule.kind is RuleKind.MULTI_CONFLICT else "GenericRule"
    rule_type = rule.type.name if rule.type is not None else "UNTYPED"
    text = f"{kind} <{rule_type}, {rule.reason.name}> ( {literals_to_string(rule.literals, pool)} )"
    if not rule.enabled:
        text += " [disabled]"
    return text

def decision_to_string(decision: Decision, pool: Optional[Pool] = None) -> str:
    text = f"Decision [{abs(decision.literal):03d}]"
    if decision.reason is None:
        return text
    return text + " " + rule_to_string(decision.reason, pool)

def problem_to_string(problem: Problem, pool: Optional[Pool] = None) -> str:
    lines = [f"Problem with {len(problem)} rules:"]
    for rule in problem:
        lines.append("  - " + rule_to_string(rule, pool))
    return "\n".join(lines)
