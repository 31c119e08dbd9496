"""Utility for generating Markdown tables in PR comments."""


def md_cell(value: str) -> str:
    """Escape a value so it cannot break the table layout."""
    return value.replace("|", "\\|").replace("\n", "<br>")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; no rows gives an empty string."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join(["---"] * len(headers)) + "|",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
