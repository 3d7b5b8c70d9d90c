from satresolve.compilation.clauses import (
    ClauseStream, encode_at_most_one_pairwise, rule_to_clauses, transform_rules
)
from satresolve.compilation.stats import clause_length_summary

__all__ = [
    "ClauseStream", "encode_at_most_one_pairwise", "rule_to_clauses", "transform_rules",
    "clause_length_summary"
]
