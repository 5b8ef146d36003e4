from __future__ import annotations

import re
from typing import Optional

from ..config import GI_INT_BITS


_SWISSPROT_CORE = r"[A-Z][0-9][A-Z0-9]{3}[0-9]"

# All patterns are applied with fullmatch().
GI_PATTERN = re.compile(r"(GI)? ?\|? ?([0-9]+)(\|)?.*")
SWISSPROT_PATTERN = re.compile(rf"(SP|TR|TRM)? ?\|? ?({_SWISSPROT_CORE})(?![A-Z0-9])(-[0-9]+)?(\|)?.*")
SIMPLE_SWISSPROT_PATTERN = re.compile(rf"({_SWISSPROT_CORE})")
MIDDLE_PIPE_PATTERN = re.compile(r".*\|(.*)\|.*")
UNIREF_PATTERN = re.compile(rf"UNIREF[0-9]*_?({_SWISSPROT_CORE})")
IPI_PATTERN = re.compile(r"IPI[0-9]*([OPQ][0-9A-Z]*-?[0-9A-Z]*)")
FRACTION_PATTERN = re.compile(r"[0-9]+/[0-9]+")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: Optional[str], bits: int) -> Optional[int]:
    """Parse a signed decimal integer that fits in ``bits`` bits, or return None."""
    if text is None or not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    limit = 1 << (bits - 1)
    if value < -limit or value >= limit:
        return None
    return value


def is_valid_gi(candidate: Optional[str], min_gi: int, bits: int = GI_INT_BITS) -> bool:
    value = parse_int(candidate, bits)
    return value is not None and value >= min_gi


def match_swissprot(text: str) -> Optional[str]:
    match = SWISSPROT_PATTERN.fullmatch(text.upper())
    return match.group(2) if match else None


def match_gi(text: str) -> Optional[str]:
    match = GI_PATTERN.fullmatch(text.upper())
    return match.group(2) if match else None


def is_simple_swissprot(text: str) -> bool:
    return SIMPLE_SWISSPROT_PATTERN.fullmatch(text) is not None
