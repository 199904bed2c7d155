"""
Classify command implementation.
"""

import json

import typer

from querytool.classification import (
    classify,
    is_crud,
    is_destructive,
    is_structure_altering,
    requires_confirmation,
    returns_results,
)
from querytool.cli.utils import setup_logging


def cmd_classify(query_text: str, verbose: bool = False) -> None:
    """Print the classification of a SQL text as JSON."""
    setup_logging(verbose)

    result = {
        "kind": classify(query_text).value,
        "is_crud": is_crud(query_text),
        "returns_results": returns_results(query_text),
        "is_destructive": is_destructive(query_text),
        "is_structure_altering": is_structure_altering(query_text),
        "requires_confirmation": requires_confirmation(query_text),
    }
    typer.echo(json.dumps(result, indent=2))
