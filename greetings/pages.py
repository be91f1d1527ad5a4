"""
HTML for the greeting page and its "not found" state.

Pages are small enough to build from string templates. Every value that
comes from a record or a query parameter goes through sanitize_html or
format_text first.
"""

from datetime import date

from greetings.formatting import format_date, format_text, sanitize_html
from greetings.models.schemas import SisterRecord

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
</head>
<body>
  <main class="{css_class}">
{body}
  </main>
  <footer><p>{footer}</p></footer>
</body>
</html>
"""


def _page(title: str, css_class: str, body: str, today: date | None) -> str:
    return _PAGE.format(
        title=sanitize_html(title),
        css_class=css_class,
        body=body,
        footer=format_date(today or date.today()),
    )


def render_greeting_page(record: SisterRecord, today: date | None = None) -> str:
    """Full page for one record: greeting heading, message, then images."""
    lines = [
        f'    <h1 class="greeting">{format_text(record.greeting)}</h1>',
        f'    <p class="message">{format_text(record.message)}</p>',
    ]

    images = [url.strip() for url in record.images if url and url.strip()]
    if images:
        lines.append('    <div class="gallery">')
        for i, url in enumerate(images, start=1):
            alt = sanitize_html(f"{record.name} photo {i}")
            lines.append(f'      <img src="{sanitize_html(url)}" alt="{alt}" loading="lazy">')
        lines.append("    </div>")

    return _page(f"For {record.name}", "sister-page", "\n".join(lines), today)


def render_not_found_page(name: str | None, today: date | None = None) -> str:
    if name and name.strip():
        text = f"We couldn't find a page for {sanitize_html(name.strip())}."
    else:
        text = "Enter your name to see your greeting."
    body = (
        '    <h1>Sister not found</h1>\n'
        f'    <p class="not-found">{text}</p>'
    )
    return _page("Sister not found", "not-found-page", body, today)
