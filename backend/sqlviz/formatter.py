"""
AI Explanation Formatter — converts the small markdown-like subset the model
tends to emit into display HTML.

Lossy and best-effort. Nothing outside the recognised markup is escaped, so
the model output is rendered as-is.
"""

import re


_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_LIST_ITEM = re.compile(r"^\s*[-*] (.*)", re.IGNORECASE | re.MULTILINE)
_ADJACENT_LISTS = re.compile(r"</ul>\s?<ul>")


def format_ai_response(text: str) -> str:
    html = text
    # Bold must go first or each "**" would be read as two italic markers.
    html = _BOLD.sub(r"<strong>\1</strong>", html)
    html = _ITALIC.sub(r"<em>\1</em>", html)
    html = _LIST_ITEM.sub(r"<ul><li>\1</li></ul>", html)
    html = _ADJACENT_LISTS.sub("", html)
    html = html.replace("\n\n", "</p><p>")
    return f"<p>{html}</p>"
