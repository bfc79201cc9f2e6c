from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")

INFO = "info"
WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    level: str
    code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "code": self.code, "message": self.message}


def info(code: str, message: str) -> Diagnostic:
    return Diagnostic(INFO, code, message)


def warning(code: str, message: str) -> Diagnostic:
    return Diagnostic(WARNING, code, message)


@dataclass
class Outcome(Generic[T]):
    """
    Result of a mutation: the new state plus any non-fatal diagnostics
    (repairs, soft constraint warnings) for the host to show the user.
    """

    value: T
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == WARNING]
