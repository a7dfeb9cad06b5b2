"""Display formatting and printable reports for timelines and email drafts."""

from __future__ import annotations

from datetime import date
from html import escape
from typing import Sequence

from closing_agent.schemas.domain import EmailDraft, Milestone

DEFAULT_REPORT_TITLE = "Timeline & Email Templates"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_REPORT_CSS = """
    html,body{font-family:Inter, Arial, sans-serif; color:#111; margin:20px;}
    h1{font-size:18px;margin:0 0 8px 0}
    .timeline-item{border:1px solid #ddd;padding:10px;border-radius:6px;margin:8px 0;}
    .timeline-item strong{display:block;font-size:15px;margin-bottom:4px;}
    .timeline-meta{color:#444;font-size:13px;margin-top:4px;}
    .email-card{border:1px solid #ddd;padding:10px;border-radius:6px;margin:8px 0;white-space:pre-wrap;}
    .email-card h3{margin:0 0 8px 0;font-size:15px;}
    pre{font-family:inherit;font-size:13px;white-space:pre-wrap;}
    @media print{ .page-break{page-break-after:always;} }
"""


def format_short(value: date) -> str:
    """``Sep 10`` - locale-independent."""
    return f"{_MONTHS[value.month - 1]} {value.day}"


def format_long(value: date) -> str:
    """``Wed, Sep 10, 2025`` - locale-independent."""
    return f"{_WEEKDAYS[value.weekday()]}, {format_short(value)}, {value.year}"


def _timeline_html(milestones: Sequence[Milestone]) -> str:
    if not milestones:
        return "<p>No timeline generated.</p>"
    items = []
    for m in milestones:
        meta = f"{format_short(m.date)} — {m.responsible} — {m.priority.value}"
        items.append(
            '<div class="timeline-item">'
            f"<strong>{escape(m.task)}</strong>"
            f'<div class="timeline-meta">{escape(meta)}</div>'
            "</div>"
        )
    return "\n".join(items)


def _emails_html(drafts: Sequence[EmailDraft]) -> str:
    if not drafts:
        return "<p>No email templates generated.</p>"
    cards = []
    for d in drafts:
        cards.append(
            '<div class="email-card">'
            f"<h3>{escape(d.title)}</h3>"
            f"<pre>{escape(d.subject)}\n\n{escape(d.body)}</pre>"
            "</div>"
        )
    return "\n".join(cards)


def render_report_html(
    milestones: Sequence[Milestone] | None,
    drafts: Sequence[EmailDraft] | None,
    *,
    title: str = DEFAULT_REPORT_TITLE,
) -> str:
    """Build a standalone printable HTML page.

    The timeline and the email drafts are separated by a print page break.
    """
    return f"""<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <style>{_REPORT_CSS}</style>
  </head>
  <body>
    <h1>Transaction Timeline</h1>
    {_timeline_html(milestones or [])}
    <div class="page-break"></div>
    <h1>Email Templates</h1>
    {_emails_html(drafts or [])}
  </body>
</html>
"""


def render_report_text(
    milestones: Sequence[Milestone] | None,
    drafts: Sequence[EmailDraft] | None,
) -> str:
    """Plain-text version of the printable report."""
    lines: list[str] = ["TRANSACTION TIMELINE", ""]
    if milestones:
        for m in milestones:
            marker = "*" if m.agent_action else "-"
            lines.append(f"{marker} {format_long(m.date)}: {m.task} ({m.responsible}, {m.priority.value})")
    else:
        lines.append("No timeline generated.")
    lines.extend(["", "EMAIL TEMPLATES", ""])
    if drafts:
        for d in drafts:
            lines.extend([f"== {d.title}", f"Subject: {d.subject}", "", d.body, ""])
    else:
        lines.append("No email templates generated.")
    return "\n".join(lines).strip() + "\n"


__all__ = [
    "DEFAULT_REPORT_TITLE",
    "format_long",
    "format_short",
    "render_report_html",
    "render_report_text",
]
