from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from ..config import ResolverOptions
from ..models.data_schemas import ResolutionRequest


@dataclass(frozen=True)
class WorkingState:
    accession: str
    version: Optional[str] = None

    def with_accession(self, accession: str) -> "WorkingState":
        return replace(self, accession=accession)


@dataclass(frozen=True)
class StageOutcome:
    state: WorkingState
    rejected: Optional[str] = None

    @property
    def is_rejected(self) -> bool:
        return self.rejected is not None

    @classmethod
    def proceed(cls, state: WorkingState) -> "StageOutcome":
        return cls(state=state)

    @classmethod
    def reject(cls, state: WorkingState, reason: str) -> "StageOutcome":
        return cls(state=state, rejected=reason)


Stage = Callable[[WorkingState, ResolutionRequest, ResolverOptions], StageOutcome]
