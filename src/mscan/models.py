"""Result types returned by the analysis functions."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Position:
    """Zero-based row/column inside a source text."""

    row: int
    column: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class StructCompletion:
    name: str
    members: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "members": list(self.members)}


@dataclass(frozen=True)
class FunctionCall:
    """A ``[a, b] = f(x, y)`` call site."""

    name: str
    params: tuple[str, ...] = ()
    returns: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "params": list(self.params), "returns": list(self.returns)}


@dataclass(frozen=True)
class FunctionDeclaration:
    """A ``function ... = name(...)`` header line."""

    name: str
    row: int
    params: tuple[str, ...] = ()
    returns: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "row": self.row,
            "params": list(self.params),
            "returns": list(self.returns),
        }
