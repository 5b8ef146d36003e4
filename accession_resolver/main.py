from __future__ import annotations

import logging
from typing import Optional

import click

from .config import MIN_VALID_ACCESSION_LENGTH, MIN_VALID_GI, ResolverOptions
from .models.data_schemas import ResolutionResult
from .modules.accession_resolver import AccessionResolver
from .utils.logging import setup_logging


def run_resolution(
    accession: str,
    version: Optional[str] = None,
    database: str = "",
    hybrid: bool = False,
    min_gi: int = MIN_VALID_GI,
    min_length: int = MIN_VALID_ACCESSION_LENGTH,
) -> ResolutionResult:
    options = ResolverOptions(min_valid_gi=min_gi, min_accession_length=min_length)
    resolver = AccessionResolver(options)
    return resolver.resolve(accession, version, database, is_hybrid_database=hybrid)


@click.command()
@click.argument("accession")
@click.option("--version", "version", default=None, help="version submitted alongside the accession")
@click.option("--database", default="", help="source database name")
@click.option("--hybrid", is_flag=True, default=False, help="database mixes decoy and target sequences")
@click.option("--min-gi", default=MIN_VALID_GI, type=int, help="smallest GI number accepted")
@click.option("--min-length", default=MIN_VALID_ACCESSION_LENGTH, type=int, help="shortest accession accepted")
@click.option("--json", "as_json", is_flag=True, default=False, help="print the result as JSON")
@click.option("--debug", is_flag=True, default=False)
def cli(
    accession: str,
    version: Optional[str],
    database: str,
    hybrid: bool,
    min_gi: int,
    min_length: int,
    as_json: bool,
    debug: bool,
):
    if debug:
        setup_logging(logging.DEBUG)
    result = run_resolution(
        accession=accession,
        version=version,
        database=database,
        hybrid=hybrid,
        min_gi=min_gi,
        min_length=min_length,
    )
    if as_json:
        click.echo(result.model_dump_json())
    else:
        click.echo(f"Accession: {result.accession}")
        click.echo(f"Version: {result.version}")
        click.echo(f"Valid: {result.is_valid}")
        if result.rejected_by:
            click.echo(f"Rejected by: {result.rejected_by}")
    if not result.is_valid:
        click.get_current_context().exit(1)


if __name__ == "__main__":
    cli()
