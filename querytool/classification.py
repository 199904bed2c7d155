"""
Query classification.

Keyword prefix/contains checks over unparsed SQL text, used by the editor to
decide whether to ask for confirmation and whether to show a result grid.
These are heuristics, not a parser: statements preceded by comments, CTEs
(``WITH ...``) and multi-statement batches are classified by their first
keyword only.
"""

from collections.abc import Iterable
from enum import Enum

# Comment the editor adds to force a result grid for statements that are not SELECTs
SHOW_RESULTS_DIRECTIVE = "--#SHOWRESULTS"

CRUD_KEYWORDS = ("INSERT", "SELECT", "UPDATE", "DELETE")
DESTRUCTIVE_KEYWORDS = ("UPDATE", "DELETE")
STRUCTURE_ALTERING_KEYWORDS = ("ALTER", "DROP")


class QueryKind(Enum):
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    ALTER = "alter"
    DROP = "drop"
    OTHER = "other"


def _normalize(query_text: str | None) -> str:
    return (query_text or "").upper().lstrip()


def starts_with_keyword(query_text: str | None, keywords: Iterable[str]) -> bool:
    normalized = _normalize(query_text)
    return any(normalized.startswith(keyword.upper()) for keyword in keywords)


def contains_keyword(query_text: str | None, keywords: Iterable[str]) -> bool:
    normalized = _normalize(query_text)
    return any(keyword.upper() in normalized for keyword in keywords)


def is_crud(query_text: str | None) -> bool:
    """True when the text starts with INSERT, SELECT, UPDATE or DELETE."""
    return starts_with_keyword(query_text, CRUD_KEYWORDS)


def returns_results(query_text: str | None) -> bool:
    """True for SELECTs and for any text carrying the show-results directive."""
    return starts_with_keyword(query_text, ("SELECT",)) or contains_keyword(
        query_text, (SHOW_RESULTS_DIRECTIVE,)
    )


def is_destructive(query_text: str | None) -> bool:
    """True when the text starts with UPDATE or DELETE."""
    return starts_with_keyword(query_text, DESTRUCTIVE_KEYWORDS)


def is_structure_altering(query_text: str | None) -> bool:
    """True when the text starts with ALTER or DROP."""
    return starts_with_keyword(query_text, STRUCTURE_ALTERING_KEYWORDS)


def requires_confirmation(query_text: str | None) -> bool:
    return is_destructive(query_text) or is_structure_altering(query_text)


def classify(query_text: str | None) -> QueryKind:
    """Get the kind of statement from its leading keyword."""
    for kind in QueryKind:
        if kind is not QueryKind.OTHER and starts_with_keyword(query_text, (kind.name,)):
            return kind
    return QueryKind.OTHER
