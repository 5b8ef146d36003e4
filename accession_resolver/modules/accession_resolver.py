from __future__ import annotations

import logging
from typing import Optional

from ..config import ResolverOptions
from ..models.data_schemas import ResolutionRequest, ResolutionResult
from ..utils.exceptions import ConstructionError
from .extraction import extract_header, normalize_family, resolve_pipes, strip_quotes
from .guards import check_blacklist, check_length
from .stage import Stage, WorkingState
from .versioning import split_version


logger = logging.getLogger(__name__)

PIPELINE: tuple[tuple[str, Stage], ...] = (
    ("blacklist", check_blacklist),
    ("header", extract_header),
    ("pipe", resolve_pipes),
    ("family", normalize_family),
    ("quotes", strip_quotes),
    ("version", split_version),
    ("length", check_length),
)


def build_request(
    raw_accession: Optional[str],
    raw_version: Optional[str],
    database: Optional[str],
    is_hybrid_database: bool = False,
) -> ResolutionRequest:
    if raw_accession is None or database is None:
        raise ConstructionError(
            "Please provide a valid, non-null, accession and database name to the accession resolver"
        )
    return ResolutionRequest(
        raw_accession=raw_accession,
        raw_version=raw_version,
        database=database,
        is_hybrid_database=is_hybrid_database,
    )


class AccessionResolver:
    """Extracts a clean accession and version from whatever was submitted.

    The resolver holds no per-request state and can be shared between
    threads.
    """

    def __init__(self, options: Optional[ResolverOptions] = None) -> None:
        self.options = options or ResolverOptions()

    def resolve(
        self,
        raw_accession: Optional[str],
        raw_version: Optional[str],
        database: Optional[str],
        is_hybrid_database: bool = False,
    ) -> ResolutionResult:
        request = build_request(raw_accession, raw_version, database, is_hybrid_database)
        return self.resolve_request(request)

    def resolve_request(self, request: ResolutionRequest) -> ResolutionResult:
        state = WorkingState(accession=request.raw_accession, version=request.raw_version)
        for name, stage in PIPELINE:
            outcome = stage(state, request, self.options)
            state = outcome.state
            if outcome.is_rejected:
                self._log_invalid(request, state, name, outcome.rejected)
                return ResolutionResult(
                    accession=state.accession,
                    version=state.version,
                    is_valid=False,
                    rejected_by=name,
                )
        return ResolutionResult(accession=state.accession, version=state.version, is_valid=True)

    def _log_invalid(
        self,
        request: ResolutionRequest,
        state: WorkingState,
        stage_name: str,
        reason: Optional[str],
    ) -> None:
        logger.debug(
            "INVALID\t%s\t%s\t%s\tPARSED ->%s<- [%s: %s]",
            request.raw_accession,
            request.raw_version,
            request.database,
            state.accession,
            stage_name,
            reason,
        )


_DEFAULT_RESOLVER = AccessionResolver()


def resolve(
    raw_accession: Optional[str],
    raw_version: Optional[str],
    database: Optional[str],
    is_hybrid_database: bool = False,
    options: Optional[ResolverOptions] = None,
) -> ResolutionResult:
    resolver = AccessionResolver(options) if options is not None else _DEFAULT_RESOLVER
    return resolver.resolve(raw_accession, raw_version, database, is_hybrid_database)
