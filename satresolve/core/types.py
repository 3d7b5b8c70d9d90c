from typing import Annotated, Iterable, List
from pydantic import AfterValidator, RootModel, TypeAdapter, field_validator
from satresolve.core.errors import ValidationError

def check_nonzero(v: int) -> int:
    if v == 0:
        raise ValueError("Literal cannot be zero")
    return v

Lit = Annotated[int, AfterValidator(check_nonzero)]

class Clause(RootModel):
    """A non-empty disjunction of literals."""
    root: List[Lit]

    @field_validator('root')
    @classmethod
    def check_not_empty(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("Clause must not be empty")
        return v

class CNF(RootModel):
    """A conjunction of clauses."""
    root: List[Clause]

_literals_adapter = TypeAdapter(List[Lit])

def validate_literals(literals: Iterable[int]) -> List[int]:
    """
    Validates a sequence of literals and returns it as a list.
    Raises ValidationError on zero or non-integer literals.
    """
    try:
        return _literals_adapter.validate_python(list(literals), strict=True)
    except Exception as e:
        raise ValidationError(f"Invalid literals: {e}")

def validate_clause(clause: Iterable[int]) -> List[int]:
    """Validates a single clause, returning it as a list of literals."""
    try:
        return Clause.model_validate(list(clause), strict=True).root
    except Exception as e:
        raise ValidationError(f"Invalid clause: {e}")

def validate_cnf(cnf: List[List[int]]) -> None:
    """
    Validates a CNF structure.
    Raises ValidationError if the structure is invalid.
    """
    try:
        CNF.model_validate(cnf)
    except Exception as e:
        raise ValidationError(f"Invalid CNF structure: {e}")

def literal_var(literal: int) -> int:
    """Returns the variable id encoded by a literal."""
    return abs(literal)
