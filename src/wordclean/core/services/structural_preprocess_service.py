# src/wordclean/core/services/structural_preprocess_service.py
from __future__ import annotations

import re

# [if !supportLists] / [if !supportAnnotations] guard fallback glyphs that must go
_SUPPORT_BLOCK = re.compile(r"<!--\[if !support[^\]]*\]>[\s\S]*?<!\[endif\]-->", re.IGNORECASE)
_CONDITIONAL_OPEN = re.compile(r"<!--\[if[^\]]*\]>", re.IGNORECASE)
_CONDITIONAL_CLOSE = re.compile(r"<!\[endif\]-->", re.IGNORECASE)
# Downlevel-revealed form: <![if !vml]>...<![endif]>, content stays
_DOWNLEVEL_MARKER = re.compile(r"<!\[(?:if[^\]]*|endif)\]>", re.IGNORECASE)
# <?xml version="1.0"?> and <?xml:namespace prefix = o ns = "..." />
_XML_DECLARATION = re.compile(r"<\?xml[^>]*>", re.IGNORECASE)
_BODY = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)


def remove_conditional_comments(html: str) -> str:
    """
    Removes `[if !support*]` blocks entirely, strips every other conditional
    marker (comment and downlevel-revealed forms) while keeping the guarded
    content, and drops XML processing instructions.
    """
    html = _SUPPORT_BLOCK.sub("", html)
    html = _CONDITIONAL_OPEN.sub("", html)
    html = _CONDITIONAL_CLOSE.sub("", html)
    html = _DOWNLEVEL_MARKER.sub("", html)
    html = _XML_DECLARATION.sub("", html)
    return html


def extract_body_content(html: str) -> str:
    """
    Returns the markup between the first <body> open/close pair, or the input
    unchanged when there is no body (desktop table/fragment pastes).
    """
    match = _BODY.search(html)
    return match.group(1) if match else html
