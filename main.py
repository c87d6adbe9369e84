#!/usr/bin/env python3
"""
Resume Keyword Fit CLI.

Scores how well a resume covers the keywords of a job description and
suggests what to improve.

Usage:
    python main.py analyze RESUME JOB_FILE   # Score a resume against a job
    python main.py keywords JOB_FILE         # Show keywords of a job
    python main.py phrases                   # Show known multi-word phrases
    python main.py serve                     # Start the API server
"""

import json
import logging
import sys
from pathlib import Path

import click

from keyword_fit import __version__
from keyword_fit.errors import ConfigError, DocumentParseError, EmptyInputError
from keyword_fit.logging_config import configure_logging, resolve_log_level
from keyword_fit.tips import Seniority

BAR_WIDTH = 40


def _load_config(phrases_file):
    from keyword_fit.config import load_config

    try:
        return load_config(phrases_file)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _read_job_text(job_file, text) -> str:
    """Get job description text from a file or --text, exiting when blank."""
    from keyword_fit.data_extraction import read_text_file
    from keyword_fit.pipeline import require_job_description

    if job_file:
        try:
            job_text = read_text_file(job_file)
        except (DocumentParseError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    elif text:
        job_text = text
    else:
        click.echo("Error: Provide either JOB_FILE or --text", err=True)
        sys.exit(1)

    try:
        return require_job_description(job_text)
    except EmptyInputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _format_list(items: list[str]) -> str:
    if not items:
        return "(none)"
    return ", ".join(sorted(items))


@click.group()
@click.version_option(version=__version__, prog_name="Resume Keyword Fit")
def cli():
    """
    Resume Keyword Fit - Check your resume against a job description.

    Extracts keywords from the job description and reports which of them
    your resume already contains.
    """
    configure_logging(resolve_log_level(logging.WARNING))


@cli.command()
@click.argument("resume", type=click.Path(exists=True, dir_okay=False))
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--text",
    "-t",
    type=str,
    default=None,
    help="Job description text (alternative to file)",
)
@click.option(
    "--seniority",
    "-s",
    type=click.Choice([s.value for s in Seniority]),
    default=None,
    help="Seniority of the target role, used for tips",
)
@click.option(
    "--phrases-file",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with known multi-word phrases, one per line",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON",
)
def analyze(resume: str, job_file: str, text: str, seniority: str, phrases_file: str, as_json: bool):
    """
    Score a RESUME (.pdf, .txt or .md) against a job description.

    Provide either a JOB_FILE path or use --text for direct input.

    Example:
        python main.py analyze resume.pdf vacancies/acme.txt
        python main.py analyze resume.pdf --text "Python developer with SQL Server..."
    """
    from keyword_fit.data_extraction import load_resume_text
    from keyword_fit.pipeline import analyze as run_analysis
    from keyword_fit.tips import build_tips

    job_text = _read_job_text(job_file, text)
    config = _load_config(phrases_file)

    try:
        resume_text = load_resume_text(Path(resume))
    except (DocumentParseError, OSError) as e:
        click.echo(f"Error reading resume: {e}", err=True)
        sys.exit(1)

    result = run_analysis(resume_text, job_text, config)
    report = result.report
    tips = build_tips(report.score, report.missing_count, seniority)

    if as_json:
        payload = result.model_dump()
        payload["tips"] = tips
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(
        f"Match score: {report.score}% · JD keywords: {report.total_keywords}"
        f" · Present: {report.present_count} · Missing: {report.missing_count}"
    )
    filled = int(round(report.score / 100 * BAR_WIDTH))
    click.echo(f"[{'█' * filled}{'░' * (BAR_WIDTH - filled)}]")

    click.echo()
    click.echo("Present Keywords:")
    click.echo(f"  {_format_list(result.match.present)}")

    click.echo()
    click.echo("Missing Keywords:")
    click.echo(f"  {_format_list(result.match.missing)}")

    click.echo()
    click.echo("Tips:")
    for tip in tips:
        click.echo(f"  • {tip}")


@cli.command()
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--text",
    "-t",
    type=str,
    default=None,
    help="Job description text (alternative to file)",
)
@click.option(
    "--phrases-file",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with known multi-word phrases, one per line",
)
def keywords(job_file: str, text: str, phrases_file: str):
    """
    Show the keywords extracted from a job description.
    """
    from keyword_fit.keyword_engine import extract_keywords
    from keyword_fit.normalizer import normalize

    job_text = _read_job_text(job_file, text)
    config = _load_config(phrases_file)

    found = extract_keywords(normalize(job_text), config)

    click.echo(f"Keywords ({len(found)}):")
    click.echo("-" * 50)
    for keyword in found:
        click.echo(f"  {keyword}")


@cli.command()
@click.option(
    "--phrases-file",
    "-p",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with known multi-word phrases, one per line",
)
def phrases(phrases_file: str):
    """
    Show the multi-word phrases recognized as single keywords.
    """
    config = _load_config(phrases_file)

    click.echo(f"Known phrases ({len(config.known_phrases)}):")
    click.echo("-" * 50)
    for phrase in config.known_phrases:
        click.echo(f"  {phrase}")


@cli.command()
@click.option(
    "--host",
    "-h",
    default="127.0.0.1",
    help="Host to bind to",
)
@click.option(
    "--port",
    "-p",
    default=8000,
    help="Port to bind to",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str, port: int, reload: bool):
    """
    Start the web API server.

    Example:
        python main.py serve
        python main.py serve --port 8080
    """
    import uvicorn

    click.echo(f"Starting Resume Keyword Fit API on http://{host}:{port}")
    click.echo("Press Ctrl+C to stop")
    click.echo()

    uvicorn.run(
        "backend.api:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
