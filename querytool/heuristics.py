"""
Identifier heuristics.

Guesses which column names of a table identify a single row, based purely on
naming patterns ("id", "<table>id", "<table>_id", "pk", ...). The result is a
best-effort safety oracle for row-level UPDATE statements, not schema truth:
a column that matches a pattern is not guaranteed to be unique, and a unique
column with an unusual name is not recognized.
"""

# Prefixes stripped from table names before deriving candidates ("tblCustomer" -> "customer")
TABLE_PREFIXES = ("tbl_", "tb_", "tbl")

GENERIC_ID_COLUMNS = frozenset({"id", "pk"})


def _bare_name(name: str) -> str:
    """Lower-cased name with identifier quotes removed."""
    return name.strip().strip('[]"`').lower()


def _table_stem(table_name: str) -> str:
    """Lower-cased bare table name: schema and quotes removed."""
    return _bare_name(table_name.strip().split(".")[-1])


def _singular(word: str) -> str:
    if word.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if word.endswith(("ses", "xes", "ches", "shes")):
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 1:
        return word[:-1]
    return word


def _stems(table_name: str) -> set[str]:
    stem = _table_stem(table_name)
    stems = {stem}
    for prefix in TABLE_PREFIXES:
        if stem.startswith(prefix) and len(stem) > len(prefix):
            stems.add(stem[len(prefix) :])
            break
    stems |= {_singular(s) for s in stems}
    return {s for s in stems if s}


def get_id_column_names(table_name: str) -> frozenset[str]:
    """
    Get the lower-cased column names trusted as row identifiers for a table.

    Args:
        table_name: Table name, optionally schema-qualified or quoted

    Returns:
        Set of candidate column names, e.g. {"id", "pk", "userid", "user_id", ...}
        for "Users"
    """
    names = set(GENERIC_ID_COLUMNS)
    for stem in _stems(table_name):
        names.update(
            {
                f"{stem}id",
                f"{stem}_id",
                f"id{stem}",
                f"id_{stem}",
                f"{stem}_pk",
                f"pk_{stem}",
            }
        )
    return frozenset(names)


def is_trusted_identifier(table_name: str, column_name: str) -> bool:
    """
    Best-effort check that ``column_name`` identifies a single row of ``table_name``.

    Only the column name is inspected (quotes ignored); no schema or uniqueness constraint is consulted.
    """
    return _bare_name(column_name) in get_id_column_names(table_name)
