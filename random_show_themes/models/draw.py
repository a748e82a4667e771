"""Models for sampling results."""

from dataclasses import dataclass, field

from .show import Show, ThemeCategory


@dataclass(frozen=True)
class ThemeDraw:
    """A theme picked from a show, ready to be written out."""

    theme: str
    category: ThemeCategory
    show: Show


@dataclass
class SamplingReport:
    """Outcome of one sampling run."""

    requested: int
    successes: int = 0
    failures: int = 0
    exhausted: bool = False
    visited: set[int] = field(default_factory=set)
    missing: list[int] = field(default_factory=list)
    themeless: list[int] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.failures > 0
