from typing import Dict, Iterator, List
from satresolve.rules.rule import Rule, RuleType

class RuleSet:
    """
    Rules grouped by type. Iteration visits types in RuleType order and
    rules within a type in insertion order.
    """
    def __init__(self):
        self._rules: Dict[RuleType, List[Rule]] = {t: [] for t in RuleType}

    def add(self, rule: Rule, rule_type: RuleType) -> None:
        rule_type = RuleType(rule_type)
        rule.type = rule_type
        self._rules[rule_type].append(rule)

    def get_rules(self) -> Dict[RuleType, List[Rule]]:
        return self._rules

    def rules_of_type(self, rule_type: RuleType) -> List[Rule]:
        return list(self._rules[RuleType(rule_type)])

    def __iter__(self) -> Iterator[Rule]:
        for type_rules in self._rules.values():
            yield from type_rules

    def __len__(self) -> int:
        return sum(len(type_rules) for type_rules in self._rules.values())
