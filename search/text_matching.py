"""
Case-insensitive text comparison used by the search engine.
"""
import unicodedata


def fold(text: str) -> str:
    """
    Normalizes text for comparison.

    Composes the string to NFC so precomposed and decomposed accents compare
    equal, then applies Unicode case folding (e.g. 'ß' folds to 'ss').

    Args:
        text (str): The text to fold.

    Returns:
        str: The folded text. Only used for comparison, never returned to callers.
    """
    return unicodedata.normalize("NFC", text).casefold()


def contains_folded(haystack: str, folded_needle: str) -> bool:
    """Returns True if the already-folded needle occurs in haystack."""
    if not folded_needle:
        return False
    return folded_needle in fold(haystack)
