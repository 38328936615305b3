"""Query syntax highlighting utilities.

Turns the character classification of a parsed query into styled Rich text
for search boxes.
"""

from rich.text import Text

from .types import ItemSearchQuery


def classify_chars(query: ItemSearchQuery) -> list[str]:
    """Classify each character of the query's raw text.

    Args:
        query: The parsed query.

    Returns:
        One class per character of raw_text, each one of:
        - "valid_filter" for the name part of a resolved filter token
        - "ignored" for characters of unresolved tokens or values
        - "plain" for everything else
    """
    classes: list[str] = []
    for index in range(len(query.raw_text)):
        if index in query.valid_filter_char_indices:
            classes.append("valid_filter")
        elif index in query.ignored_char_indices:
            classes.append("ignored")
        else:
            classes.append("plain")
    return classes


# Character class to Rich style mapping
QUERY_CHAR_STYLES: dict[str, str] = {
    "valid_filter": "bold #87D7FF",
    "ignored": "strike #808080",
    "plain": "",
}


def build_query_text(query: ItemSearchQuery) -> Text:
    """Build a styled Text object for the query.

    Consecutive characters of the same class are appended as one span.
    Indices past the end of the raw text are skipped.
    """
    text = Text()
    raw_text = query.raw_text
    classes = classify_chars(query)

    start = 0
    while start < len(raw_text):
        end = start
        while end < len(raw_text) and classes[end] == classes[start]:
            end += 1
        style = QUERY_CHAR_STYLES.get(classes[start], "")
        if style:
            text.append(raw_text[start:end], style=style)
        else:
            text.append(raw_text[start:end])
        start = end

    return text
