from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

PASS = "pass"
FAIL = "fail"

CATEGORIES = ("functional", "usability", "security", "performance")


@dataclass(frozen=True)
class Check:
    label: str
    verdict: str  # "pass" | "fail"

    @classmethod
    def of(cls, label: str, passed: bool) -> "Check":
        return cls(label=label, verdict=PASS if passed else FAIL)

    @property
    def passed(self) -> bool:
        return self.verdict == PASS

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.label, "status": self.verdict}


@dataclass(frozen=True)
class RunResult:
    categories: Mapping[str, Tuple[Check, ...]]
    score: int
    mode: Optional[str]

    @property
    def band(self) -> str:
        # local import: score_policy imports this module
        from score_policy import score_band
        return score_band(self.score)

    def iter_checks(self) -> Iterator[Check]:
        for name in CATEGORIES:
            yield from self.categories.get(name, ())

    @property
    def passed(self) -> int:
        return sum(1 for c in self.iter_checks() if c.passed)

    @property
    def total(self) -> int:
        return sum(1 for _ in self.iter_checks())

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in CATEGORIES:
            out[name] = [c.to_dict() for c in self.categories.get(name, ())]
        out["score"] = self.score
        out["mode"] = self.mode
        return out


def assemble(categories: Mapping[str, Iterable[Check]], score: int, mode: Optional[str]) -> RunResult:
    """
    Freeze evaluated categories and the aggregate score into a RunResult.
    `mode` is echoed exactly as the caller supplied it.
    """
    assert isinstance(score, int) and 0 <= score <= 100, f"score out of range: {score!r}"
    frozen = {name: tuple(categories.get(name, ())) for name in CATEGORIES}
    return RunResult(categories=frozen, score=score, mode=mode)


def error_report(error: str, details: str = "") -> Dict[str, str]:
    """Payload emitted instead of a RunResult when no measurement could be produced."""
    return {"error": error, "details": details}
