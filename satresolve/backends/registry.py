from typing import Callable, Dict, List
from satresolve.backends.base import SolverInterface
from satresolve.backends.pysat_solver import PySatSolver
from satresolve.config import SolveConfig
from satresolve.core.errors import ConfigError

SolverFactory = Callable[[SolveConfig], SolverInterface]

class SolverRegistry:
    def __init__(self):
        self._factories: Dict[str, SolverFactory] = {}
        self.register("pysat", lambda config: PySatSolver(
            name=config.solver_name,
            conflict_budget=config.conflict_budget
        ))

    def register(self, name: str, factory: SolverFactory):
        self._factories[name] = factory

    def get(self, name: str) -> SolverFactory:
        if name not in self._factories:
            raise ConfigError(f"Solver backend '{name}' not found.")
        return self._factories[name]

    def list_backends(self) -> List[str]:
        return list(self._factories.keys())

def create_solver(config: SolveConfig, registry: SolverRegistry = None) -> SolverInterface:
    registry = registry if registry else SolverRegistry()
    return registry.get(config.backend)(config)
