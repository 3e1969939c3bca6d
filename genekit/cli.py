"""
GENEKIT CLI - Molecular genetics toolkit.

Usage:
    genekit analyze ATGAAATAAATGCCC
    genekit mutate ATGAAATAAATGCCC --position 4 --original A --replacement T
    genekit primers <sequence> --detailed
    genekit phylogeny --input species.json --format newick

Pipe-friendly:
    cat species.json | genekit phylogeny --input - --format json
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from genekit import __version__
from genekit.config import get_config
from genekit.core.errors import GenekitError

# Initialize Typer app and Rich console
app = typer.Typer(
    name="genekit",
    help="Molecular genetics toolkit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


# =============================================================================
# Version callback
# =============================================================================

def version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold blue]GENEKIT[/bold blue] version {__version__}")
        raise typer.Exit()


# =============================================================================
# Main app options
# =============================================================================

@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """
    GENEKIT - Molecular Genetics Toolkit

    Analyze sequences, simulate mutations, design primers and build trees.
    """
    config = get_config()
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(config.log_file) if config.log_file else None,
    )


def _fail(message: str, format: str = "table") -> NoReturn:
    """Report an error and exit with status 1."""
    if format == "json":
        print(json.dumps({"status": "error", "error": message}, indent=2))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


# =============================================================================
# Analyze command
# =============================================================================

@app.command()
def analyze(
    sequence: str = typer.Argument(..., help="DNA sequence (spaces allowed)"),
    enzyme: Optional[str] = typer.Option(
        None,
        "--enzyme", "-e",
        help="Restriction enzyme (default: EcoRI)",
    ),
    motif: Optional[str] = typer.Option(
        None,
        "--motif", "-m",
        help="Motif to count in the sequence",
    ),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table",
    ),
) -> None:
    """
    Full report: ORF protein, restriction sites and PCR primers.

    Examples:
        genekit analyze ATGAAATAAATGCCC
        genekit analyze "ATG AAA TAA" --motif AAA --format json
    """
    from genekit.analysis import analyze_sequence

    try:
        report = analyze_sequence(sequence, enzyme=enzyme, motif=motif)
    except ValueError as e:
        _fail(str(e), format)

    if not report.is_valid:
        _fail(report.error or "Invalid DNA sequence", format)

    if format == "json":
        print(json.dumps({"status": "success", **report.model_dump(mode="json")}, indent=2))
        return

    console.print(Panel(report.formatted, title=f"Sequence ({report.length} nt)"))
    table = Table(title="Analysis")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Protein length", f"{report.protein_length} aa")
    table.add_row("Protein", report.protein or "-")
    table.add_row(f"{report.enzyme} sites", str(report.restriction_sites))
    table.add_row(f"{report.enzyme} fragments", str(report.restriction_fragments))
    if report.motif:
        table.add_row(f"Motif {report.motif}", str(report.motif_occurrences))
    if report.primers:
        table.add_row("Forward primer", report.primers.forward)
        table.add_row("Reverse primer", report.primers.reverse)
    else:
        table.add_row("Primers", "[yellow]sequence too short[/yellow]")
    console.print(table)


# =============================================================================
# Translate command
# =============================================================================

@app.command()
def translate(
    sequence: str = typer.Argument(..., help="DNA sequence"),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table",
    ),
) -> None:
    """Translate a sequence and highlight its open reading frame."""
    from genekit.sequence import (
        annotate,
        format_with_annotation,
        is_valid_dna,
        orf_protein,
        translate as translate_dna,
    )

    if not is_valid_dna(sequence):
        _fail("Invalid DNA sequence. Use only A, T, C and G.", format)

    annotation = annotate(sequence)
    protein = orf_protein(sequence)
    results = {
        "status": "success",
        "translation": translate_dna(sequence),
        "orf_protein": protein,
        "protein_length": len(protein),
        "start_index": annotation.start_index,
        "stop_index": annotation.stop_index,
        "stop_codon": annotation.stop_codon,
    }

    if format == "json":
        print(json.dumps(results, indent=2))
        return

    console.print(Panel(format_with_annotation(sequence), title="Open reading frame"))
    console.print(f"Frame 1 translation: {results['translation']}")
    console.print(f"ORF protein: {protein or '-'} ({len(protein)} aa)")


# =============================================================================
# Mutate command
# =============================================================================

@app.command()
def mutate(
    sequence: str = typer.Argument(..., help="DNA sequence"),
    position: int = typer.Option(..., "--position", "-p", help="1-based position"),
    original: str = typer.Option(..., "--original", help="Base expected at the position"),
    replacement: str = typer.Option(..., "--replacement", "-r", help="New base"),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table",
    ),
) -> None:
    """
    Apply a point substitution and report its effect on the protein.

    Examples:
        genekit mutate ATGAAATAAATGCCC -p 4 --original A -r T
    """
    from genekit.models.data_classes import Mutation
    from genekit.mutation import analyze as analyze_mutation

    result = analyze_mutation(
        sequence,
        Mutation(position=position, original=original, replacement=replacement),
    )
    if not result.is_valid:
        _fail(result.error or result.effect.value, format)

    if format == "json":
        print(json.dumps({"status": "success", **result.model_dump(mode="json")}, indent=2))
        return

    table = Table(title=f"Mutation {original.upper()}{position}{replacement.upper()}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Mutated sequence", result.mutated_sequence)
    table.add_row("Original protein length", f"{result.original_protein_length} aa")
    table.add_row("Mutated protein length", f"{result.mutated_protein_length} aa")
    table.add_row("Effect", f"[yellow]{result.effect.value}[/yellow]")
    console.print(table)


# =============================================================================
# Restriction command
# =============================================================================

@app.command()
def restriction(
    sequence: str = typer.Argument(..., help="DNA sequence"),
    enzyme: Optional[str] = typer.Option(
        None,
        "--enzyme", "-e",
        help="Restriction enzyme name",
    ),
    site: Optional[str] = typer.Option(
        None,
        "--site", "-s",
        help="Custom recognition site (overrides --enzyme)",
    ),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table",
    ),
) -> None:
    """Count recognition sites and estimate digestion fragments."""
    from genekit.restriction import count_sites, get_enzyme
    from genekit.sequence import clean

    try:
        if site:
            name, recognition = "custom", clean(site)
        else:
            enzyme_def = get_enzyme(enzyme or get_config().restriction.default_enzyme)
            name, recognition = enzyme_def.name, enzyme_def.site
        sites = count_sites(sequence, recognition)
    except ValueError as e:
        _fail(str(e), format)

    results = {
        "status": "success",
        "enzyme": name,
        "site": recognition,
        "sites": sites,
        "fragments": sites + 1,
    }
    if format == "json":
        print(json.dumps(results, indent=2))
        return
    console.print(
        f"[bold]{name}[/bold] ({recognition}): {sites} site(s), "
        f"{sites + 1} fragment(s)"
    )


# =============================================================================
# Primers command
# =============================================================================

@app.command()
def primers(
    sequence: str = typer.Argument(..., help="Template DNA sequence"),
    detailed: bool = typer.Option(
        False,
        "--detailed", "-d",
        help="Tm-targeted design with a step-by-step explanation",
    ),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table",
    ),
) -> None:
    """
    Design PCR primers for a template.

    Examples:
        genekit primers <sequence>
        genekit primers <sequence> --detailed --format json
    """
    from genekit.primers import PrimerDesigner

    designer = PrimerDesigner()
    try:
        result = designer.design_detailed(sequence) if detailed else designer.design_simple(sequence)
    except GenekitError as e:
        _fail(str(e), format)

    if format == "json":
        print(json.dumps({"status": "success", **result.model_dump(mode="json")}, indent=2))
        return

    if not detailed:
        console.print(f"Forward primer: [cyan]{result.forward}[/cyan]")
        console.print(f"Reverse primer: [cyan]{result.reverse}[/cyan]")
        return

    for step in result.steps:
        body = [step.description]
        if step.result:
            body.append(f"[bold]{step.result}[/bold]")
        body.extend(f"  {line}" for line in step.details)
        console.print(Panel("\n".join(body), title=f"Step {step.step}: {step.title}"))

    table = Table(title="Primer pair")
    table.add_column("Primer", style="cyan")
    table.add_column("Sequence", style="green")
    table.add_column("Length")
    table.add_column("GC %")
    table.add_column("Tm (°C)", style="yellow")
    for label, primer in (("Forward", result.forward), ("Reverse", result.reverse)):
        table.add_row(
            label,
            primer.sequence,
            str(primer.length),
            f"{primer.gc_content:.1f}",
            f"{primer.melting_temp:.1f}",
        )
    console.print(table)

    for rec in result.recommendations:
        color = "green" if rec.level.value == "success" else "yellow"
        console.print(f"[{color}]{rec.message}[/{color}]")


# =============================================================================
# Phylogeny command
# =============================================================================

@app.command()
def phylogeny(
    input_file: Optional[Path] = typer.Option(
        None,
        "--input", "-i",
        help="JSON with 'sequences' or 'taxa' + 'matrix' (reads from stdin if -)",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Treat missing matrix entries as distance 0",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file. If not specified, prints to stdout.",
    ),
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format: json, table, newick",
    ),
) -> None:
    """
    Build a UPGMA tree from aligned sequences or a distance matrix.

    Input shapes:
        {"sequences": [{"id": "1", "name": "A", "sequence": "ACGT..."}]}
        {"taxa": [{"id": "1", "name": "A"}], "matrix": {"1": {"2": 3}}}
    """
    from genekit.models.data_classes import Taxon, TaxonSequence
    from genekit.models.enums import MissingDistancePolicy
    from genekit.phylogeny import to_newick, tree_from_matrix, tree_from_sequences
    from genekit.sequence import format_blocks

    data = _load_json_input(input_file, format)

    try:
        if "sequences" in data:
            sequences = [TaxonSequence(**s) for s in data["sequences"]]
            result = tree_from_sequences(sequences)
        elif "taxa" in data and "matrix" in data:
            taxa = [Taxon(**t) for t in data["taxa"]]
            policy = MissingDistancePolicy.ZERO if lenient else None
            result = tree_from_matrix(taxa, data["matrix"], policy)
        else:
            _fail("Input must contain 'sequences' or both 'taxa' and 'matrix'", format)
    except (GenekitError, ValidationError, TypeError) as e:
        _fail(str(e), format)

    if format == "newick":
        content = to_newick(result.tree) if result.tree else ";"
        _write_or_print(content, output)
    elif format == "json":
        _write_or_print(
            json.dumps({"status": "success", **result.model_dump(mode="json")}, indent=2),
            output,
        )
    else:
        if "sequences" in data:
            for taxon in sequences:
                console.print(f"[cyan]{taxon.name}[/cyan] {format_blocks(taxon.sequence)}")
        table = Table(title="UPGMA merges")
        table.add_column("Step", style="dim")
        table.add_column("Merged", style="cyan")
        table.add_column("Distance", style="yellow")
        table.add_column("Height")
        table.add_column("New cluster", style="green")
        for step in result.steps:
            table.add_row(
                str(step.step),
                " + ".join(step.clustered_nodes),
                f"{step.distance:.2f}",
                f"{step.height:.2f}",
                step.new_cluster_name,
            )
        console.print(table)
        if result.tree:
            console.print(f"Newick: {to_newick(result.tree)}")


# =============================================================================
# Info command
# =============================================================================

@app.command()
def info() -> None:
    """Show configuration and available enzymes."""
    from genekit.restriction import list_enzymes

    config = get_config()
    p = config.primers
    console.print(Panel.fit(
        f"[bold blue]GENEKIT[/bold blue] v{__version__}\n"
        f"Target Tm: {p.target_tm:g}°C, primer length {p.min_length}-{p.max_length} nt\n"
        f"GC window: {p.gc_min:g}-{p.gc_max:g}%, max amplicon {p.max_amplicon} bp\n"
        f"Missing distances: {config.phylogeny.missing_distance.value}",
        title="Configuration",
    ))

    table = Table(title="Restriction Enzymes")
    table.add_column("Enzyme", style="cyan")
    table.add_column("Site", style="green")
    table.add_column("Description")
    for enzyme in list_enzymes():
        table.add_row(enzyme.name, enzyme.site, enzyme.description)
    console.print(table)


# =============================================================================
# Utility functions
# =============================================================================

def _load_json_input(input_file: Optional[Path], format: str) -> Dict[str, Any]:
    """Read a JSON object from a file, '-' or piped stdin."""
    try:
        if input_file is not None and str(input_file) != "-":
            with open(input_file) as f:
                data = json.load(f)
        elif input_file is not None or not sys.stdin.isatty():
            data = json.load(sys.stdin)
        else:
            _fail("No input provided", format)
    except (OSError, json.JSONDecodeError) as e:
        _fail(f"Could not read input: {e}", format)

    if not isinstance(data, dict):
        _fail("Input must be a JSON object", format)
    return data


def _write_or_print(content: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(content)
        console.print(f"[green]Results written to {output}[/green]")
    else:
        # Print to stdout for piping
        print(content)


# =============================================================================
# Entry point
# =============================================================================

if __name__ == "__main__":
    app()
