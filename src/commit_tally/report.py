"""Plain-text rendering of a tally."""

from commit_tally.models import TallyReport

COUNTS_HEADER = "Commit counts by user across all repositories (sorted):"
ORIGINS_HEADER = "Repositories with their remote origins:"


def render_report(report: TallyReport) -> str:
    """Render the counts section, a blank line, then the origins section."""
    lines: list[str] = [COUNTS_HEADER]
    for identity, count in report.sorted_totals():
        lines.append(f"{identity}: {count}")

    lines.append("")
    lines.append(ORIGINS_HEADER)
    lines.extend(report.origins)
    return "\n".join(lines) + "\n"
