import pytest
from satresolve.backends import PySatSolver, SolverRegistry, SolverValue, create_solver
from satresolve.backends.pysat_solver import BUDGETED_SOLVERS, PROPAGATING_SOLVERS
from satresolve.config import SolveConfig
from satresolve.core.errors import ConfigError, SolverError, ValidationError

def pigeonhole(pigeons: int, holes: int) -> list[list[int]]:
    """Pigeons into fewer holes; unsatisfiable and hard for resolution."""
    def var(p, h):
        return p * holes + h + 1

    clauses = [[var(p, h) for h in range(holes)] for p in range(pigeons)]
    for h in range(holes):
        for p1 in range(pigeons):
            for p2 in range(p1 + 1, pigeons):
                clauses.append([-var(p1, h), -var(p2, h)])
    return clauses

def test_solve_produces_complete_model():
    with PySatSolver() as solver:
        assert solver.add_clauses([[1], [-1, 2], [-2, -3]])
        assert solver.solve()

        assert solver.is_satisfied()
        assert solver.has_model()
        assert solver.get_model() == [1, 2, -3]
        assert solver.get_variables_number() == 3
        assert solver.get_model_values() == {1: SolverValue.TRUE, 2: SolverValue.TRUE, 3: SolverValue.FALSE}
        assert solver.get_variable_value(-3) is SolverValue.FALSE
        assert solver.get_conflict() == []
        assert not solver.has_conflict()

def test_status_is_undefined_before_solving():
    with PySatSolver() as solver:
        solver.add_clause([1, 2])
        assert solver.is_status_undefined()
        assert not solver.has_model()
        assert solver.get_model() == []
        assert solver.get_variable_value(1) is SolverValue.UNDEFINED

def test_variables_are_created_on_first_reference():
    with PySatSolver() as solver:
        solver.add_clause([5, -9])
        assert solver.get_variables_number() == 9
        assert solver.solve()
        assert len(solver.get_model()) == 9

def test_contradicting_units_report_conflict():
    with PySatSolver() as solver:
        assert solver.add_clause([1])
        assert solver.add_clause([-1]) is False

        assert not solver.solve()
        assert solver.is_unsatisfiable()
        assert not solver.has_model()

        conflict = solver.get_conflict()
        assert conflict
        assert 1 in {abs(lit) for lit in conflict}
        assert solver.has_conflict()

def test_conflict_names_the_responsible_units():
    with PySatSolver() as solver:
        solver.add_clauses([[1], [4], [-1, 2], [-2, 3], [-3, -4]])
        assert not solver.solve()
        assert {abs(lit) for lit in solver.get_conflict()} <= {1, 4}
        assert solver.get_conflict()

def test_conflict_from_assumptions():
    with PySatSolver() as solver:
        solver.add_clauses([[-1, 2], [-2, 3]])
        assert not solver.solve([1, -3])
        assert set(solver.get_conflict()) <= {1, -3}
        assert solver.get_conflict()

        # Clauses remain, solving without assumptions succeeds
        assert solver.solve()

def test_zero_literals_are_rejected():
    with PySatSolver() as solver:
        with pytest.raises(ValidationError):
            solver.add_clause([1, 0])
        with pytest.raises(ValidationError):
            solver.add_clause([])
        with pytest.raises(ValidationError):
            solver.solve([0])

def test_decision_literals_set_phases():
    with PySatSolver() as solver:
        solver.add_clause([1, 2])
        solver.set_decision_literals([-1, 2])
        assert solver.solve()
        assert solver.get_model() == [-1, 2]

@pytest.mark.parametrize("name", ["m22", "mcb"])
def test_conflict_budget_leaves_status_undefined(name):
    with PySatSolver(name=name, conflict_budget=1) as solver:
        solver.add_clauses(pigeonhole(7, 6))
        assert not solver.solve()
        assert solver.is_status_undefined()
        assert solver.get_conflict() == []
        assert solver.get_statistics()["conflicts"] <= 2

@pytest.mark.parametrize("name", ["g3", "g4", "cadical153"])
def test_conflict_budget_rejected_by_unbudgeted_solvers(name):
    assert name not in BUDGETED_SOLVERS
    with pytest.raises(ConfigError, match="conflict budget"):
        PySatSolver(name=name, conflict_budget=1)

def test_budget_through_registry():
    with pytest.raises(ConfigError):
        create_solver(SolveConfig(conflict_budget=5))

    solver = create_solver(SolveConfig(solver_name="m22", conflict_budget=5))
    try:
        assert solver.conflict_budget == 5
    finally:
        solver.delete()

def test_decisions_count_and_conflict_length():
    with PySatSolver() as solver:
        solver.add_clauses([[1, 2], [-1, 3], [-2, -3]])
        assert solver.solve()
        assert solver.get_decisions_count() >= 1
        assert solver.get_conflict_length() == 0
        assert solver.get_statistics()["decision_count"] == solver.get_decisions_count()

    with PySatSolver() as solver:
        solver.add_clauses([[1], [-1]])
        assert not solver.solve()
        assert solver.get_conflict_length() == len(solver.get_conflict()) > 0

def test_simplify():
    assert "g3" in PROPAGATING_SOLVERS
    assert "cadical153" not in PROPAGATING_SOLVERS

    with PySatSolver(name="g3") as solver:
        assert solver.support_simplification()
        solver.add_clauses([[1], [-1, 2]])
        assert solver.simplify()
        assert solver.solve()

    with PySatSolver(name="g3") as solver:
        solver.add_clauses([[1], [-1]])
        assert not solver.simplify()

def test_statistics():
    with PySatSolver() as solver:
        solver.add_clauses([[1, 2], [-1, 2]])
        solver.solve()
        stats = solver.get_statistics()

    assert {"variables_total", "variables_model", "clauses_kept", "conflict_length", "decision_count"} <= set(stats)
    assert stats["variables_total"] == 2
    assert stats["variables_model"] == 2
    assert stats["conflict_length"] == 0
    assert all(isinstance(v, int) for v in stats.values())

def test_deleted_solver_raises():
    solver = PySatSolver()
    solver.delete()
    with pytest.raises(SolverError):
        solver.add_clause([1])

def test_registry_creates_configured_solver():
    solver = create_solver(SolveConfig(solver_name="m22"))
    try:
        assert isinstance(solver, PySatSolver)
        assert solver.name == "m22"
    finally:
        solver.delete()

def test_registry_unknown_backend():
    with pytest.raises(ConfigError):
        create_solver(SolveConfig(backend="nope"))

def test_registry_custom_backend():
    registry = SolverRegistry()
    registry.register("budgeted", lambda config: PySatSolver(name="m22", conflict_budget=10))
    assert registry.list_backends() == ["pysat", "budgeted"]

    solver = create_solver(SolveConfig(backend="budgeted"), registry)
    try:
        assert solver.conflict_budget == 10
    finally:
        solver.delete()
