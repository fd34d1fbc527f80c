#!/usr/bin/env python3
"""
voltcheck CLI - HTTP response assertion tool

Usage:
    voltcheck run <suite.yaml> <response.json> [OPTIONS]
    voltcheck validate <suite.yaml>
    voltcheck render <text> --var name=value
    voltcheck extract <document.json> <path>
    voltcheck format <document.json> [--minify]
    voltcheck info <document.json>
    voltcheck --version
"""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__, diagnostics
from .assertions import Assertion, AssertionEvaluator, ResponseDescription
from .extraction import extract_variables
from .jsonpath import extract, format_json, json_info, minify_json
from .reporting import Reporter, RunReport, RunStatus
from .suites import Suite, load_response, load_suite
from .templating import find_variables, interpolate, substitute

app = typer.Typer(
    name="voltcheck",
    help="⚡ voltcheck - HTTP response assertion tool",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"⚡ voltcheck v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Log fallbacks and rejected inputs"
    ),
):
    """
    ⚡ voltcheck - HTTP response assertion tool

    Check recorded HTTP responses against declarative YAML suites.
    """
    diagnostics.install(verbose=debug)


def parse_var_options(values: Optional[List[str]]) -> dict[str, str]:
    """Turn repeated --var name=value options into a table."""
    variables: dict[str, str] = {}
    for item in values or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected name=value, got '{item}'", param_hint="--var")
        variables[name.strip()] = value
    return variables


def interpolate_assertion(assertion: Assertion, variables: dict[str, str]) -> Assertion:
    """Resolve {{name}} placeholders in an assertion's property and expected value."""
    fields = interpolate(
        {"property": assertion.property, "expected": assertion.expected},
        variables,
    )
    return replace(assertion, **fields)


def run_suite(
    suite: Suite,
    response: ResponseDescription,
    overrides: Optional[dict[str, str]] = None,
) -> RunReport:
    """Evaluate a suite against a response and return the finished report."""
    variables = {**suite.variables, **(overrides or {})}
    reporter = Reporter.from_suite(suite)
    reporter.start_run()
    reporter.record_response(response)

    assertions = [interpolate_assertion(a, variables) for a in suite.assertions]
    results = AssertionEvaluator().evaluate(assertions, response)
    reporter.record_results(assertions, results)

    rules = [replace(rule, path=substitute(rule.path, variables)) for rule in suite.extract]
    reporter.record_variables(extract_variables(rules, response))

    return reporter.finish_run()


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _results_table(report: RunReport) -> Table:
    table = Table(title=f"Assertions - {report.suite_name}")
    table.add_column("ID", style="cyan")
    table.add_column("Check", style="magenta")
    table.add_column("Result")
    table.add_column("Actual", overflow="fold")
    table.add_column("Message", overflow="fold")

    for record in report.results:
        if not record.enabled:
            verdict = "[dim]SKIP[/dim]"
        elif record.passed:
            verdict = "[green]PASS[/green]"
        else:
            verdict = "[red]FAIL[/red]"
        check = f"{record.assertion_type} {record.operator}"
        if record.property:
            check = f"{check} ({record.property})"
        table.add_row(escape(record.assertion_id), escape(check), verdict, escape(record.actual), escape(record.message))
    return table


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    response_file: Path = typer.Argument(
        ...,
        help="Path to the response description (YAML or JSON)",
        exists=True,
        readable=True,
    ),
    var: Optional[List[str]] = typer.Option(
        None, "--var",
        help="Override a suite variable (name=value), repeatable"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
):
    """
    Evaluate a suite against a recorded response.

    Exits 0 when every enabled assertion passes, 1 otherwise.
    """
    overrides = parse_var_options(var)

    suite, validation = load_suite(suite_file)
    if not validation.is_valid:
        console.print(f"\n[red]❌ Suite validation failed:[/red]")
        console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    response, validation = load_response(response_file)
    if not validation.is_valid:
        console.print(f"\n[red]❌ Response validation failed:[/red]")
        console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    report = run_suite(suite, response, overrides)

    if output == "json":
        console.print_json(data=report.to_dict())
    elif quiet:
        for record in report.results:
            if record.passed is False:
                console.print(f"[red]❌ {escape(record.assertion_id)}:[/red] {escape(record.message)}")
        console.print(f"{report.status.value.upper()}: {report.passed} passed, {report.failed} failed")
    else:
        console.print()
        console.print(_results_table(report))
        console.print("\n" + escape(report.summary()))

    if not no_report:
        report_path = Reporter(report).save_json(report_dir / f"{report.run_id}.json")
        if not quiet and output != "json":
            console.print(f"\n📁 Report saved: {report_path}")

    raise typer.Exit(code=0 if report.status == RunStatus.PASSED else 1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and report any errors without evaluating it.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid suite:[/green] {escape(suite.name)}")
    console.print(f"   Assertions: {len(suite.assertions)}")
    if validation.warnings:
        console.print(escape(str(validation)))

    table = Table(title="Assertions")
    table.add_column("ID", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Details")

    for assertion in suite.assertions:
        details = f"{assertion.operator_tag} {assertion.expected}".strip()
        if assertion.property:
            details = f"{assertion.property} {details}"
        if not assertion.enabled:
            details += " (disabled)"
        table.add_row(escape(assertion.id), escape(assertion.type_tag), escape(details))

    console.print()
    console.print(table)


@app.command()
def render(
    text: str = typer.Argument(..., help="Template text containing {{name}} placeholders"),
    var: Optional[List[str]] = typer.Option(
        None, "--var",
        help="Variable as name=value, repeatable"
    ),
    list_names: bool = typer.Option(
        False, "--list",
        help="List the placeholder names instead of substituting"
    ),
):
    """
    Substitute {{name}} placeholders in a template.
    """
    if list_names:
        for name in find_variables(text):
            typer.echo(name)
        return
    typer.echo(substitute(text, parse_var_options(var)))


@app.command("extract")
def extract_command(
    document_file: Path = typer.Argument(..., help="JSON document", exists=True, readable=True),
    path: str = typer.Argument("", help="Dotted path, e.g. data.users[0].name"),
):
    """
    Print the JSON value at a path, or 'undefined'.
    """
    typer.echo(extract(_read_text(document_file), path))


@app.command("format")
def format_command(
    document_file: Path = typer.Argument(..., help="JSON document", exists=True, readable=True),
    minify: bool = typer.Option(False, "--minify", "-m", help="Compact output"),
):
    """
    Pretty-print (or minify) a JSON document.
    """
    text = _read_text(document_file)
    typer.echo(minify_json(text) if minify else format_json(text))


@app.command()
def info(
    document_file: Path = typer.Argument(..., help="JSON document", exists=True, readable=True),
):
    """
    Describe a JSON document: validity, size, type, depth.
    """
    console.print_json(data=json_info(_read_text(document_file)).to_dict())


if __name__ == "__main__":
    app()
