from enums import SummarySection
from schemas import Summary

PLACEHOLDER = "- (none)"


def render_markdown(summary: Summary, filename: str) -> str:
    """Render the summary as Markdown.

    Args:
        summary: The final summary.
        filename: The source document name for the attribution line.

    Returns:
        The Markdown text.

    """
    lines: list[str] = []
    for section in SummarySection:
        items = summary.section(section)
        lines.append(f"# {section.heading}")
        lines.extend([f"- {item}" for item in items] if items else [PLACEHOLDER])
        lines.append("")

    lines.append(f"> Source: `{filename}`")
    return "\n".join(lines)
