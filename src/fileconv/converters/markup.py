"""Escaping for text placed inside HTML/SVG markup."""

__all__ = ["escape_markup"]


def escape_markup(value: str) -> str:
    """Escape the characters that would otherwise break or inject markup."""
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
