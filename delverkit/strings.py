"""Small string helpers."""


def capitalize(s: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return s[:1].upper() + s[1:]