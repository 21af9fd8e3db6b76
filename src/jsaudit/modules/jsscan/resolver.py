"""Lexical discovery of script asset references in an HTML document.

This is a best-effort pattern match over raw markup, not an HTML or
JavaScript parser. It finds:

* absolute ``http(s)://`` URLs ending in ``.js`` anywhere in the text
  (inline scripts, JSON blobs, preload links, comments), and
* ``src`` attribute values of ``<script>`` elements ending in ``.js``,
  which may be relative and are resolved against the base URL.

Both passes may over-match (commented-out tags, strings that only look like
URLs) and under-match (dynamically built URLs, scripts served without a
``.js`` suffix).
"""

import logging
import re
from html import unescape
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)

# ".js" must not run on into a longer name (".json", ".jsx", "x.js.map"); any
# other character, including escaped quotes and entities, ends the path. The
# query string stops at list separators and at an encoded quote.
ABSOLUTE_JS_URL_RE = re.compile(
    r"""https?://[^\s'"<>`\\]+?\.js(?![\w$./-])"""
    r"""(?:\?(?:(?!&quot;|&#0*34;)[^\s'"<>`\\#,;)\]}|])*)?""",
    re.IGNORECASE,
)
SCRIPT_SRC_RE = re.compile(
    r"""<script\b[^>]*?\bsrc\s*=\s*['"]([^'"]+?\.js(?:\?[^'"]*)?)['"][^>]*?>""",
    re.IGNORECASE,
)


def _resolve(reference: str, base_url: str) -> str | None:
    try:
        resolved = urljoin(base_url, unescape(reference.strip()))
        parts = urlsplit(resolved)
        # Accessing .port validates it and raises on garbage like ":99999"
        parts.port
    except ValueError as exc:
        logger.debug("Skipping invalid script URL %r: %s", reference, exc)
        return None
    if parts.scheme not in ("http", "https") or not parts.hostname:
        logger.debug("Skipping non-http script URL %r", reference)
        return None
    return resolved


def resolve_script_urls(html: str, base_url: str) -> list[str]:
    """Return absolute script URLs referenced by ``html``, deduplicated in first-seen order."""
    found: dict[str, None] = {}
    matches = [m.group(0) for m in ABSOLUTE_JS_URL_RE.finditer(html)]
    matches.extend(m.group(1) for m in SCRIPT_SRC_RE.finditer(html))
    for reference in matches:
        resolved = _resolve(reference, base_url)
        if resolved is not None and resolved not in found:
            found[resolved] = None
    logger.debug("Resolved %d script reference(s) from %s", len(found), base_url)
    return list(found)
