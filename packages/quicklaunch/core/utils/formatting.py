import re

# Characters that are illegal in a path segment on at least one common platform
_ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\?%*:|"<>]')
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_for_filename(text: str) -> str:
    """
    Convert arbitrary text into a string safe for use as a directory name.

    Illegal characters are deleted (not replaced), surrounding whitespace is
    trimmed, inner whitespace runs become a single dash and the result is
    lowercased. No length limit is applied.

    Example:
        >>> sanitize_for_filename("My Site! <3")
        'my-site!-3'
    """
    # 1. Drop / \ ? % * : | " < > entirely
    text = _ILLEGAL_FILENAME_CHARS.sub("", text)

    # 2. Trim, then collapse whitespace runs into a dash
    text = _WHITESPACE_RUN.sub("-", text.strip())

    return text.lower()
