def _escape_like(term: str, escape: str = "\\") -> str:
    return (
        term.replace(escape, escape + escape)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


def contains_ignore_case(column, term: str):
    """Case-insensitive substring filter; ``%`` and ``_`` in ``term`` match literally."""
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")
