"""Command-line interface for citenorm.

Provides CLI commands for normalizing xISBN payloads and inspecting the
normalization heuristics.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("citenorm")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="citenorm")
def cli() -> None:
    """Normalize library-catalogue metadata into citation records.

    Use 'citenorm COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("payload_path", type=click.Path(exists=True))
@click.option(
    "--id-type",
    type=click.Choice(["doi", "isbn", "oclc", "pmcid", "pmid", "qid", "url", "any"]),
    default="isbn",
    show_default=True,
    help="Kind of identifier the payload was requested by",
)
@click.option("--id-value", type=str, default="", help="Requested identifier value")
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output JSON file path (default: print to stdout)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and DEBUG audit events",
)
def normalize(
    payload_path: str,
    id_type: str,
    id_value: str,
    output: str | None,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Normalize an xISBN JSON payload into a citation.

    PAYLOAD_PATH is a WorldCat xISBN getMetadata JSON response.

    Examples
    --------
        citenorm normalize xisbn.json --id-value 9780596519797
        citenorm normalize xisbn.json -o citation.json --log-file events.jsonl
    """
    from citenorm import load_payload, normalize_payload, write_json

    if verbose:
        click.echo(f"Loading payload: {payload_path}", err=True)

    try:
        payload = load_payload(Path(payload_path))
        citation = normalize_payload(
            payload,
            id_type,
            id_value,
            log_path=log_file,
            log_level="DEBUG" if verbose else "INFO",
        )
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if citation.error is not None:
        click.secho(
            f"✗ {citation.error} (response code {citation.response_code})",
            fg="red",
            err=True,
        )
        sys.exit(1)

    if verbose:
        click.echo(f"Item type: {citation.item_type}", err=True)
        click.echo(f"Fields: {', '.join(citation.content)}", err=True)

    if output is None:
        click.echo(json.dumps(citation.to_dict(), ensure_ascii=False, indent=2))
        return

    write_json([citation], output)
    click.secho(f"✓ Wrote citation to {output}", fg="green")


@cli.command("item-type")
@click.argument("form_codes", nargs=-1)
def item_type(form_codes: tuple[str, ...]) -> None:
    """Resolve the item type of WorldCat FORM_CODES.

    Examples
    --------
        citenorm item-type BC AA
        citenorm item-type MA AA
    """
    from citenorm.normalize import resolve_item_type

    click.echo(str(resolve_item_type(list(form_codes))))


@cli.command("parse-name")
@click.argument("names", nargs=-1, required=True)
@click.option("--role", default="author", show_default=True, help="Creator role tag")
@click.option(
    "--natural",
    is_flag=True,
    help="Parse as a statement of responsibility ('Given Family ; translated by ...')",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Skip empty headings instead of stopping at the first one",
)
def parse_name(names: tuple[str, ...], role: str, natural: bool, lenient: bool) -> None:
    """Parse NAMES into role-tagged creators and print them as JSON.

    Several headings are parsed as one catalogue heading list.

    Examples
    --------
        citenorm parse-name "Barrett, Daniel J."
        citenorm parse-name --lenient "Rubin, Jay" "" "Gabriel, Philip"
        citenorm parse-name --natural "Haruki Murakami ; edited by Philip Gabriel."
    """
    from citenorm.models import Citation
    from citenorm.normalize import add_creators, add_creators_with_role_classification

    citation = Citation("any", "; ".join(names))
    if natural:
        for statement in names:
            add_creators_with_role_classification(citation, statement, role)
    else:
        add_creators(citation, list(names), role, strict=not lenient)

    click.echo(json.dumps([c.to_dict() for c in citation.creators], ensure_ascii=False))


if __name__ == "__main__":
    cli()
