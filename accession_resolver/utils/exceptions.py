from __future__ import annotations


class AccessionResolverError(RuntimeError):
    """Base exception for the accession resolver."""


class ConstructionError(AccessionResolverError, ValueError):
    """A required resolution input (accession or database name) was missing."""
