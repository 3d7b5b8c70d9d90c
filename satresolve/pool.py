from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

@dataclass(frozen=True)
class Package:
    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}-{self.version}"

class Pool:
    """
    Maps SAT variable ids to the packages they select.
    Ids are assigned deterministically in registration order, starting at 1.
    """
    def __init__(self, packages: Optional[List[Package]] = None):
        self._package_to_id: Dict[Package, int] = {}
        self._id_to_package: Dict[int, Package] = {}
        self._next_id: int = 1
        for package in packages or []:
            self.add_package(package)

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    def add_package(self, package: Package) -> int:
        """
        Register a package. Returns the existing id if already registered.
        """
        if package in self._package_to_id:
            return self._package_to_id[package]

        vid = self._next_id
        self._package_to_id[package] = vid
        self._id_to_package[vid] = package
        self._next_id += 1
        return vid

    def package_id(self, package: Package) -> int:
        if package not in self._package_to_id:
            raise KeyError(f"Package '{package}' is not in the pool")
        return self._package_to_id[package]

    def literal_to_package(self, literal: int) -> Optional[Package]:
        """Returns the package selected by the literal's variable, or None."""
        return self._id_to_package.get(abs(literal))

    def __len__(self) -> int:
        return len(self._id_to_package)

    def __iter__(self) -> Iterator[Package]:
        return iter(self._id_to_package.values())
