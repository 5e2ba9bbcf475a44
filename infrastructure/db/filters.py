"""
Query helpers shared by the Supabase repositories.
"""


def escape_like(value: str) -> str:
    """
    Escape LIKE wildcards so ILIKE acts as a case-insensitive equality check.

    >>> escape_like("100%_effort")
    '100\\\\%\\\\_effort'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
