from dataclasses import astuple, dataclass
from enum import Enum


class DigitMode(str, Enum):
    UNICODE = "unicode"
    ASCII = "ascii"


class Kind(str, Enum):
    CHAR = "char"
    DIGIT = "digit"


@dataclass(frozen=True)
class InspectionResult:
    count: int
    kind: Kind

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        object.__setattr__(self, "kind", Kind(self.kind))

    def __iter__(self):
        return iter(astuple(self))

    def __eq__(self, other):
        if isinstance(other, tuple):
            return astuple(self) == other
        if isinstance(other, InspectionResult):
            return astuple(self) == astuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(astuple(self))
