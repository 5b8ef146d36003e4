from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ResolutionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_accession: str
    raw_version: Optional[str] = None
    database: str
    is_hybrid_database: bool = False


class ResolutionResult(BaseModel):
    """Outcome of one resolution.

    ``accession`` and ``version`` are only trustworthy when ``is_valid`` is
    true. Rejected results carry the working values at the point of rejection
    for diagnostics.
    """

    accession: Optional[str] = None
    version: Optional[str] = None
    is_valid: bool
    rejected_by: Optional[str] = None
