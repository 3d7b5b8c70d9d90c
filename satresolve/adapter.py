import logging
from typing import List, Optional, Sequence
from satresolve.backends.base import SolverInterface
from satresolve.backends.registry import create_solver
from satresolve.compilation.clauses import ClauseStream
from satresolve.compilation.stats import clause_length_summary
from satresolve.config import SolveConfig
from satresolve.core.errors import UnsatisfiableError
from satresolve.core.logging import get_logger
from satresolve.debug import DebugDumper
from satresolve.pool import Pool
from satresolve.report import literal_to_string, problem_to_string, stats_to_string
from satresolve.result import SolveResult
from satresolve.rules.decisions import Decisions
from satresolve.rules.problem import Problem
from satresolve.rules.rule import Rule, RuleReason, RuleType
from satresolve.rules.ruleset import RuleSet
from satresolve.timer import Timer

logger = get_logger(__name__)

class DependencyResolverAdapter:
    """
    Solves a legacy ruleset with a SAT solver and folds the resulting model
    back into the caller's decision trail.

    One adapter drives one solver instance. After a failed solve the solver
    holds a partial clause set and should be discarded.
    """
    def __init__(self, solver: SolverInterface, pool: Optional[Pool] = None, config: Optional[SolveConfig] = None):
        self.solver = solver
        self.pool = pool
        self.config = config if config else SolveConfig()
        self.log_prefix = f"{type(solver).__name__} | "
        self._solve_run = 0

    @classmethod
    def from_config(cls, config: Optional[SolveConfig] = None, pool: Optional[Pool] = None) -> 'DependencyResolverAdapter':
        config = config if config else SolveConfig.from_env_or_file()
        return cls(create_solver(config), pool=pool, config=config)

    def _log(self, message: str, level: int = logging.INFO) -> None:
        logger.log(level, "\n".join(self.log_prefix + line for line in message.split("\n")))

    def load_clauses(self, rules: RuleSet, keep: bool = False) -> tuple[List[int], List[List[int]]]:
        """
        Feeds the compiled clause stream to the solver in emission order.
        Returns the clause lengths and, if `keep` is set, the clauses.
        """
        lengths = []
        kept = []
        consistent = True
        for clause in ClauseStream(rules):
            lengths.append(len(clause))
            if keep:
                kept.append(clause)
            if not self.solver.add_clause(clause) and consistent:
                consistent = False
                self._log(f"Formula became unsatisfiable at clause #{len(lengths)}", logging.DEBUG)
        return lengths, kept

    def run_solve(self, assumptions: Sequence[int] = ()) -> List[int]:
        """
        Runs the solver and returns the model. Raises UnsatisfiableError
        unless the solver is satisfied and holds a complete model.
        """
        self.solver.solve(list(assumptions))
        stats = self.solver.get_statistics()
        if self.config.log_stats:
            self._log(stats_to_string(stats))

        if not self.solver.is_satisfied() or not self.solver.has_model():
            conflict = self.solver.get_conflict()
            for literal in conflict:
                self._log("Conflict " + literal_to_string(literal, self.pool), logging.WARNING)
            raise UnsatisfiableError(
                f"SAT solver could not produce a solvable model (status: {self.solver.get_status().name})",
                conflict=conflict,
                stats=stats
            )

        return self.solver.get_model()

    def _provenance_rule(self, literal: int, decisions: Decisions) -> Rule:
        prev_rule = decisions.decision_rule(literal)
        if prev_rule is not None:
            new_rule = Rule.generic([literal], prev_rule.reason, prev_rule.reason_data)
            new_rule.type = prev_rule.type if prev_rule.type is not None else RuleType.PACKAGE
            return new_rule

        package = self.pool.literal_to_package(literal) if self.pool else None
        new_rule = Rule.generic([literal], RuleReason.FIXED, package)
        new_rule.type = RuleType.PACKAGE
        return new_rule

    def apply_model(self, model: Sequence[int], decisions: Decisions, problems: List[Problem], rules: Optional[RuleSet] = None) -> None:
        """
        Merges every model literal into the decision trail.

        Conflicts with an earlier decision are recorded as a Problem, except
        when the earlier decision comes from an explicit request.
        """
        for literal in model:
            new_rule = self._provenance_rule(literal, decisions)

            if rules is not None:
                rules.add(new_rule, new_rule.type)

            if not decisions.decided(literal):
                decisions.decide(literal, decisions.max_level + 1, new_rule)
                continue

            if not decisions.conflict(literal):
                continue

            conflicting_rule = decisions.decision_rule(literal)
            if conflicting_rule is None:
                self._log(f"Conflict on {literal_to_string(literal, self.pool)} without a recorded rule", logging.WARNING)
                continue
            if conflicting_rule.type is RuleType.REQUEST:
                continue

            new_rule.disable()
            problem = Problem([new_rule, conflicting_rule])
            problems.append(problem)
            self._log(problem_to_string(problem, self.pool), logging.DEBUG)

    def solve(self, rules: RuleSet, decisions: Optional[Decisions] = None, problems: Optional[List[Problem]] = None) -> SolveResult:
        """Compile, solve and reconcile one ruleset."""
        self._solve_run += 1
        decisions = decisions if decisions is not None else Decisions()
        problems = problems if problems is not None else []
        timer = Timer(logger, self.log_prefix)
        debug = self.config.debug_dir is not None
        problems_before = len(problems)

        with timer.section("transform_and_add_clauses"):
            lengths, clauses = self.load_clauses(rules, keep=debug)

        with timer.section("run_solve"):
            model = self.run_solve()

        with timer.section("apply_model"):
            self.apply_model(model, decisions, problems, rules)

        stats = dict(self.solver.get_statistics())
        stats["clauses"] = clause_length_summary(lengths)

        new_problems = len(problems) - problems_before
        if new_problems:
            self._log(f"Model reconciliation recorded {new_problems} problem(s)", logging.WARNING)

        debug_files = []
        if debug:
            dumper = DebugDumper(self.config.debug_dir, self.pool)
            debug_files = dumper.dump(self._solve_run, self.solver, decisions, rules, clauses, stats)

        return SolveResult(
            model=model,
            decisions=decisions,
            problems=problems,
            stats=stats,
            timings=dict(timer.timings),
            debug_files=debug_files
        )
