from __future__ import annotations

from typing import Optional

from ..config import (
    BLACKLISTED_ACCESSION_TOKENS,
    DECOY_DATABASE_TOKENS,
    REVERSED_ACCESSION_EXEMPT,
    REVERSED_ACCESSION_TOKEN,
    REVERSED_DATABASE_EXEMPT,
    REVERSED_DATABASE_TOKENS,
    ResolverOptions,
)
from ..models.data_schemas import ResolutionRequest
from ..utils.patterns import FRACTION_PATTERN
from .stage import StageOutcome, WorkingState


def _database_rejection(database: str) -> Optional[str]:
    db = database.lower()
    if REVERSED_DATABASE_EXEMPT not in db:
        for token in REVERSED_DATABASE_TOKENS:
            if token in db:
                return f"reversed database ({token})"
    for token in DECOY_DATABASE_TOKENS:
        if token in db:
            return f"decoy database ({token})"
    return None


def _accession_rejection(accession: str) -> Optional[str]:
    ac = accession.lower()
    if REVERSED_ACCESSION_TOKEN in ac and REVERSED_ACCESSION_EXEMPT not in ac:
        return "reversed accession"
    for token in BLACKLISTED_ACCESSION_TOKENS:
        if token in ac:
            return f"blacklisted accession ({token})"
    if FRACTION_PATTERN.fullmatch(ac):
        return "fraction accession"
    return None


def check_blacklist(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    """Reject decoy, reversed and randomized entries before any rewriting.

    Hybrid databases mix decoy and target sequences, so only the
    accession-level checks apply to them.
    """
    del options
    if not request.is_hybrid_database:
        reason = _database_rejection(request.database)
        if reason:
            return StageOutcome.reject(state, reason)

    reason = _accession_rejection(request.raw_accession)
    if reason:
        return StageOutcome.reject(state, reason)
    return StageOutcome.proceed(state)


def check_length(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    del request
    if len(state.accession) < options.min_accession_length:
        return StageOutcome.reject(state, f"accession shorter than {options.min_accession_length}")
    return StageOutcome.proceed(state)
