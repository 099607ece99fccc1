"""CLI helpers for TRACKLY.

URL redaction for display, OSC-8 terminal hyperlinks, stderr message emitters
with emoji fallbacks, and the ``-L NAME=LEVEL`` option parser.
"""

from .db_url import sanitize_url
from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["sanitize_url", "hyperlink", "warn", "success", "error"]
