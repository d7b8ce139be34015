"""Command-line interface for dotgen."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .core import (
    GraphDocument,
    IdPolicy,
    InvalidIdentifierError,
    OutputFormat,
    RenderConfig,
    is_unquoted_id,
    maybe_escaped,
    validate_strict,
)
from .visualization import GraphRenderer

# Setup rich console
console = Console()


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="python-dotgen")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dotgen - build Graphviz DOT documents.

    \b
    Examples:
      dotgen build graph.json                  # Print DOT to stdout
      dotgen build graph.json -o graph.dot     # Save DOT source
      dotgen build graph.json -o graph.svg -f svg
      dotgen check-id node-1 "bad id!"
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    help="Output file path. If not specified, the DOT document is printed to stdout.",
)
@click.option("--name", "-n", help="Graph name (default: the document's name)")
@click.option(
    "--id-policy",
    type=click.Choice([policy.value for policy in IdPolicy]),
    help="Identifier policy (default: the document's policy)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    default="dot",
    help="Output format (default: dot)",
)
@click.pass_context
def build(
    ctx: click.Context,
    input_file: str,
    output: str | None,
    name: str | None,
    id_policy: str | None,
    output_format: str,
) -> None:
    """Build a DOT document from a JSON graph description.

    Examples:
      dotgen build deps.json
      dotgen build deps.json --name deps --id-policy permissive
      dotgen build deps.json -o deps.png -f png
    """
    verbose_mode = ctx.obj.get("verbose", False)
    try:
        document = GraphDocument.load(input_file)
        config = RenderConfig(
            id_policy=IdPolicy(id_policy) if id_policy else document.id_policy,
            graph_name=name or document.name,
        )
        dot = document.build_graph(config).build()

        fmt = OutputFormat(output_format)
        if output is None:
            if fmt != OutputFormat.DOT:
                raise click.UsageError("--output is required for svg and png formats")
            click.echo(dot.text, nl=False)
            return

        renderer = GraphRenderer(verbose=verbose_mode)
        if fmt != OutputFormat.DOT:
            renderer.check_graphviz_installation()
        output_path = renderer.render(dot.text, output, fmt)
        console.print(f"{output_path}", style="green")

    except click.UsageError:
        raise
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False)
        if verbose_mode:
            console.print_exception()
        sys.exit(1)


@cli.command("check-id")
@click.argument("identifiers", nargs=-1, required=True)
def check_id(identifiers: tuple) -> None:
    """Check identifiers against both identifier policies.

    Exits with status 1 if any identifier is rejected by the strict policy.
    """
    table = Table(title="Identifier Check")
    table.add_column("Identifier", style="cyan")
    table.add_column("Strict", style="magenta")
    table.add_column("Permissive output", style="green")

    rejected = 0
    for identifier in identifiers:
        try:
            validate_strict(identifier)
            strict = "ok"
        except InvalidIdentifierError:
            strict = "rejected"
            rejected += 1
        permissive = maybe_escaped(identifier)
        if not is_unquoted_id(identifier):
            permissive += " (quoted)"
        table.add_row(escape(identifier), strict, escape(permissive))

    console.print(table)
    if rejected:
        console.print(f"{rejected} identifier(s) rejected by the strict policy", style="red")
        sys.exit(1)


@cli.command("info")
def show_info() -> None:
    """Show information about identifier policies and output formats."""
    policies_table = Table(title="Identifier Policies")
    policies_table.add_column("Policy", style="cyan")
    policies_table.add_column("Description", style="green")

    policy_descriptions = {
        "strict": "Only [A-Za-z0-9_-] allowed, rejected on creation, emitted verbatim (default)",
        "permissive": "Any string allowed, quoted when not a plain DOT identifier",
    }

    for policy in IdPolicy:
        policies_table.add_row(policy.value, policy_descriptions.get(policy.value, ""))

    console.print(policies_table)

    formats_table = Table(title="Supported Output Formats")
    formats_table.add_column("Format", style="cyan")
    formats_table.add_column("Description", style="green")

    format_descriptions = {
        "dot": "DOT language source (no Graphviz needed)",
        "svg": "Scalable Vector Graphics laid out by Graphviz",
        "png": "Portable Network Graphics laid out by Graphviz",
    }

    for fmt in OutputFormat:
        formats_table.add_row(fmt.value, format_descriptions.get(fmt.value, ""))

    console.print(formats_table)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
