"""
Content Formatter - display text for exported highlights
Normalizes dashes and spacing and marks excerpts that start or end
mid-sentence with "[…]".
"""

from .models import Clipping, ClippingKind

ELLIPSIS_MARK = "[…]"

# Applied in this order over the whole string
SUBSTITUTIONS = [
    ("—", " — "),  # Em dash
    (" - ", " — "),  # Hyphen
    (" – ", " — "),  # En dash
    ("---", " — "),
    ("--", " — "),
    ("\u00a0", " "),  # Non-breaking space
    ("  ", " "),
]

SENTENCE_ENDINGS = (".", "?", "!")


def normalize_text(text: str) -> str:
    """Trim and apply the dash/space substitutions"""
    text = text.strip()
    for old, new in SUBSTITUTIONS:
        text = text.replace(old, new)
    while "  " in text:
        text = text.replace("  ", " ")
    return text.strip()


def format_content(content: str) -> str:
    """
    Format highlighted text for display

    Args:
        content: Raw clipping content

    Returns:
        Normalized text; an excerpt that does not start with an uppercase
        letter or does not end with . ? ! is marked as cut off
    """
    if not content:
        return content

    text = normalize_text(content)
    if not text:
        return text

    # Digits and punctuation count as an open start too
    is_start_open = not text.startswith(ELLIPSIS_MARK) and not text[0].isupper()
    is_end_open = not (
        text.endswith(SENTENCE_ENDINGS)
        or text.endswith(ELLIPSIS_MARK)
    )

    if is_start_open and is_end_open:
        return f"{ELLIPSIS_MARK} {text} {ELLIPSIS_MARK}"
    if is_start_open:
        return text[0].upper() + text[1:]
    if is_end_open:
        return f"{text} {ELLIPSIS_MARK}."
    return text


def to_org_text(clipping: Clipping) -> str:
    """Render a clipping as an org-mode quote block"""
    if clipping.kind == ClippingKind.NOTE:
        body = f"<{clipping.content}>"
    else:
        body = format_content(clipping.content)
    return f"#+begin_quote\n{body}\n#+end_quote"
