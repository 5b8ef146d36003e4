from __future__ import annotations

import logging

from ..config import TAIR_DATABASE_PREFIX, VERSION_INT_BITS, ResolverOptions
from ..models.data_schemas import ResolutionRequest
from ..utils.patterns import parse_int
from .stage import StageOutcome, WorkingState


logger = logging.getLogger(__name__)


def split_version(
    state: WorkingState,
    request: ResolutionRequest,
    options: ResolverOptions,
) -> StageOutcome:
    """Split a trailing ``.N`` version off the accession.

    Two conflicting conventions have to coexist: ``IPI0001234..5`` carries
    version 5, while ``Tb10.6k15.3810`` has no version at all. A candidate
    version is only accepted when it parses as an integer; otherwise the dot
    is put back. TAIR accessions (``AT3G17770.1``) always keep their dot.
    A version supplied by the caller goes through the same validation.
    """
    del options
    accession = state.accession
    version = state.version

    dot = accession.find(".")
    if dot > 0:
        version = accession[dot + 1 :].strip()
        accession = accession[:dot].strip()

    if version is not None and version.startswith("."):
        version = version[version.rfind(".") + 1 :]

    if version is None:
        return StageOutcome.proceed(WorkingState(accession=accession))

    if parse_int(version, VERSION_INT_BITS) is None:
        accession = f"{accession}.{version}"
        logger.info("Improper accession version detected, setting it to null. Accession to map is now: %s", accession)
        return StageOutcome.proceed(WorkingState(accession=accession))

    if request.database.upper().startswith(TAIR_DATABASE_PREFIX):
        return StageOutcome.proceed(WorkingState(accession=f"{accession}.{version}"))

    return StageOutcome.proceed(WorkingState(accession=accession, version=version))
