from typing import Iterable, Iterator, List, Optional
from satresolve.rules.rule import Rule

class Problem:
    """The rules that jointly caused an unresolvable conflict."""
    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: List[Rule] = []
        for rule in rules or []:
            self.add_rule(rule)

    def add_rule(self, rule: Rule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def __contains__(self, rule: Rule) -> bool:
        return any(r is rule for r in self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
