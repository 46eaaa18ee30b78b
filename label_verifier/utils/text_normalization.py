import re

# Punctuation stripped before matching. "%" is in the set, so the ABV check
# works on the raw text instead of the normalized one.
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

# Only runs of two or more are collapsed; a lone newline or tab is kept.
WHITESPACE_RUN_PATTERN = re.compile(r"\s{2,}")


def normalize(text: str | None) -> str:
    """Normalize label text for case- and punctuation-insensitive matching.

    Used for: brand name, product class, government warning, net contents.
    Steps:
      1. Lowercase everything
      2. Remove the fixed punctuation set (periods, commas, slashes, %, ...)
      3. Collapse runs of two or more whitespace characters into one space
      4. Trim leading/trailing whitespace

    Missing input is treated as an empty string. Applying it twice gives the
    same result as applying it once.
    """
    if not text:
        return ""

    text = text.lower()
    text = PUNCTUATION_PATTERN.sub("", text)
    text = WHITESPACE_RUN_PATTERN.sub(" ", text)
    return text.strip()


def first_number(text: str) -> str | None:
    """Return the first run of digits in already-normalized text, if any."""
    match = re.search(r"\d+", text)
    return match.group(0) if match else None


def excerpt(text: str, length: int) -> str:
    """Cut text to `length` characters, marking the cut with a trailing '...'."""
    if len(text) > length:
        return text[:length] + "..."
    return text
