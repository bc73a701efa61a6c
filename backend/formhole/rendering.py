"""HTML rendering of the submissions listing page."""

from datetime import datetime, timezone
from string import Template
from typing import Any, Iterable, Optional

from formhole.config import PAGE_TITLE
from formhole.schemas.submission import SubmissionRecord

PLACEHOLDER = "N/A"
EMPTY_STATE = "<p>No submissions yet.</p>"

# Order matters: ampersands first so the entities added later stay intact
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

SUBMISSION_TEMPLATE = Template("""
      <div class="submission">
        <p class="name">$name</p>
        <p class="timestamp" data-timestamp="$raw_timestamp">$timestamp</p>
        <p class="message">$message</p>
      </div>
""")

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Submissions</title>
    <style>
      body { font-family: sans-serif; line-height: 1.6; padding: 20px; background-color: #f4f4f4; color: #333; }
      h1 { color: #555; border-bottom: 2px solid #eee; padding-bottom: 10px; }
      .submission { background-color: #fff; padding: 15px; margin-bottom: 15px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
      .name { font-weight: bold; margin-bottom: 5px; }
      .message { margin-bottom: 10px; }
      .timestamp { color: #666; font-size: 0.8em; margin: 0; }
    </style>
    <script>
      document.addEventListener('DOMContentLoaded', function() {
        // Re-render every timestamp in the viewer's own time zone
        document.querySelectorAll('.timestamp[data-timestamp]').forEach(function(el) {
          const timestamp = parseInt(el.getAttribute('data-timestamp'), 10);
          if (timestamp) {
            el.textContent = new Date(timestamp).toLocaleString();
          }
        });
      });
    </script>
  </head>
  <body>
    <h1>$title</h1>
    $submissions
  </body>
</html>
""")


def escape_html(value: Any) -> Any:
    """Escape text for embedding in HTML. Non-string values are returned as-is."""
    if not isinstance(value, str):
        return value
    for char, entity in HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def _as_utc(ts: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_timestamp(ts: Optional[datetime]) -> str:
    """Human readable fallback, e.g. ``10/18/2026, 3:04:05 PM`` (UTC)."""
    if not isinstance(ts, datetime):
        return PLACEHOLDER
    ts = _as_utc(ts)
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{ts.month}/{ts.day}/{ts.year}, {hour}:{ts.minute:02d}:{ts.second:02d} {meridiem}"


def timestamp_millis(ts: Optional[datetime]) -> str:
    """Epoch milliseconds for the page script, empty when unknown."""
    if not isinstance(ts, datetime):
        return ""
    return str(int(_as_utc(ts).timestamp() * 1000))


def render_submission(submission: SubmissionRecord) -> str:
    return SUBMISSION_TEMPLATE.substitute(
        name=escape_html(submission.name or PLACEHOLDER),
        raw_timestamp=timestamp_millis(submission.timestamp),
        timestamp=escape_html(format_timestamp(submission.timestamp)),
        message=escape_html(submission.message or PLACEHOLDER),
    )


def render_page(submissions: Iterable[SubmissionRecord]) -> str:
    blocks = "".join(render_submission(sub) for sub in submissions)
    return PAGE_TEMPLATE.substitute(
        title=escape_html(PAGE_TITLE),
        submissions=blocks or EMPTY_STATE,
    )
