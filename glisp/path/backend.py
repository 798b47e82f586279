from __future__ import annotations

from typing import Protocol


class PathBackend(Protocol):
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None: ...
    def close_path(self) -> None: ...


class Path2D:
    """Records drawing calls so a renderer can replay them later."""

    def __init__(self):
        self.commands: list[tuple[str, tuple[float, ...]]] = []

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(("M", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(("L", (x, y)))

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        self.commands.append(("C", (cp1x, cp1y, cp2x, cp2y, x, y)))

    def close_path(self) -> None:
        self.commands.append(("Z", ()))

    def points(self) -> list[float]:
        """Every coordinate fed to the path, in order."""
        return [v for _, args in self.commands for v in args]

    def __len__(self) -> int:
        return len(self.commands)

    def __repr__(self) -> str:
        return f"Path2D({self.commands!r})"
