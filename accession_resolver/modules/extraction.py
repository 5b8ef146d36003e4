from __future__ import annotations

import logging
from typing import Callable, Optional

from ..config import BAD_IPI_PREFIXES, MALFORMED_SWISSPROT_SUFFIX, ResolverOptions
from ..models.data_schemas import ResolutionRequest
from ..utils.patterns import (
    IPI_PATTERN,
    MIDDLE_PIPE_PATTERN,
    UNIREF_PATTERN,
    is_simple_swissprot,
    is_valid_gi,
    match_gi,
    match_swissprot,
)
from .stage import StageOutcome, WorkingState


logger = logging.getLogger(__name__)

PipePicker = Callable[[str, ResolverOptions], Optional[str]]


def extract_header(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    """Reduce a descriptive header to its accession token.

    Headers such as ``P08670, NP_003371`` or ``gi|1234 some protein`` keep
    the SwissProt or GI identifier; anything else keeps its first word. A GI
    that fails the validity test rejects the whole request.
    """
    del request
    accession = state.accession
    if accession.endswith(MALFORMED_SWISSPROT_SUFFIX):
        accession = accession[: accession.index(MALFORMED_SWISSPROT_SUFFIX)]

    space = accession.find(" ")
    if space > 0:
        swissprot = match_swissprot(accession)
        gi = match_gi(accession) if swissprot is None else None
        if swissprot is not None:
            accession = swissprot
        elif gi is not None:
            if not is_valid_gi(gi, options.min_valid_gi):
                return StageOutcome.reject(state.with_accession(accession), f"invalid GI {gi}")
            accession = gi
        else:
            accession = accession[:space].strip()

    comma = accession.find(",")
    if comma > 0:
        accession = accession[:comma].strip()
    return StageOutcome.proceed(state.with_accession(accession))


def _pick_swissprot(accession: str, options: ResolverOptions) -> Optional[str]:
    del options
    return match_swissprot(accession)


def _pick_gi(accession: str, options: ResolverOptions) -> Optional[str]:
    gi = match_gi(accession)
    if gi is not None and is_valid_gi(gi, options.min_valid_gi):
        return gi
    return None


def _pick_middle_field(accession: str, options: ResolverOptions) -> Optional[str]:
    # xxx|bla|yyy: bla is usually the useful part
    match = MIDDLE_PIPE_PATTERN.fullmatch(accession.upper())
    if not match:
        return None
    field = match.group(1)
    if is_simple_swissprot(field) or is_valid_gi(field, options.min_valid_gi):
        return field
    return None


def _pick_first_field(accession: str, options: ResolverOptions) -> Optional[str]:
    del options
    field = accession[: accession.index("|")]
    return field if is_simple_swissprot(field) else None


def _pick_after_first_pipe(accession: str, options: ResolverOptions) -> Optional[str]:
    del options
    return accession[accession.index("|") + 1 :]


PIPE_PICKERS: tuple[PipePicker, ...] = (
    _pick_swissprot,
    _pick_gi,
    _pick_middle_field,
    _pick_first_field,
    _pick_after_first_pipe,
)


def resolve_pipes(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    """Select the accession field of a pipe-delimited FASTA header."""
    del request
    accession = state.accession
    if accession.find("|") <= 0:
        return StageOutcome.proceed(state)

    for picker in PIPE_PICKERS:
        picked = picker(accession, options)
        if picked is not None:
            return StageOutcome.proceed(state.with_accession(picked))
    return StageOutcome.proceed(state)


def normalize_family(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    """Apply UniRef and IPI corrections."""
    del request, options
    accession = state.accession

    match = UNIREF_PATTERN.fullmatch(accession.upper())
    if match:
        accession = match.group(1)

    if accession.startswith("IPI"):
        if len(accession) < 4:
            logger.error("Invalid IPI accession: %s", accession)
            return StageOutcome.reject(state.with_accession(accession), "truncated IPI accession")
        # IPIIPI, IPIUPI, IPI[NXPOQ]...
        if accession[:4] in BAD_IPI_PREFIXES:
            accession = accession[3:]
        match = IPI_PATTERN.fullmatch(accession)
        if match:
            accession = match.group(1)

    return StageOutcome.proceed(state.with_accession(accession))


def strip_quotes(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    del request, options
    accession = state.accession
    first = accession.find('"')
    if first >= 0:
        accession = accession[first + 1 :]
    last = accession.rfind('"')
    if last > 0:
        accession = accession[:last]
    return StageOutcome.proceed(state.with_accession(accession))
