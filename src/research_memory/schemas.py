from dataclasses import dataclass


@dataclass(frozen=True)
class ScoredRecord:
    id: str
    score: float
    data: str
