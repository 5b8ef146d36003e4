from __future__ import annotations

from dataclasses import dataclass


MIN_VALID_GI = 1000
MIN_VALID_ACCESSION_LENGTH = 5

GI_INT_BITS = 64
VERSION_INT_BITS = 32

# Checked only for non-hybrid databases, lowercased.
REVERSED_DATABASE_TOKENS = ("reverse", "_rev")
REVERSED_DATABASE_EXEMPT = "_concat"
DECOY_DATABASE_TOKENS = ("decoy", "dec_", "_dec")

# Checked on every accession, lowercased.
REVERSED_ACCESSION_TOKEN = "reverse"
REVERSED_ACCESSION_EXEMPT = "reverse sense"
BLACKLISTED_ACCESSION_TOKENS = (
    "_rev",
    "rev_",
    "###rnd###",
    "###rev###",
    ".fasta",
    "jgi|aspni1",
)

MALFORMED_SWISSPROT_SUFFIX = "-00-00-00"
BAD_IPI_PREFIXES = frozenset({"IPII", "IPIU", "IPIN", "IPIX", "IPIP", "IPIO", "IPIQ"})
TAIR_DATABASE_PREFIX = "TAIR"


@dataclass(frozen=True)
class ResolverOptions:
    min_valid_gi: int = MIN_VALID_GI
    min_accession_length: int = MIN_VALID_ACCESSION_LENGTH
