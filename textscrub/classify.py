"""Human-readable labels for characters the cleaner targets."""

from .rules import CHARACTER_NAMES, URL_LABEL, URL_PREFIXES, find_fullwidth_range


def classify_character(value: str) -> str:
    """Describe the first character of ``value``.

    Strings starting with ``http://`` or ``https://`` are labelled as URLs
    without inspecting their parameters. Raises ValueError on empty input.
    """

    if not value:
        raise ValueError("cannot classify an empty string")
    if value.startswith(URL_PREFIXES):
        return URL_LABEL

    char = value[0]
    name = CHARACTER_NAMES.get(char)
    if name is not None:
        return name

    block = find_fullwidth_range(char)
    if block is not None:
        return f"{block.label} ({block.to_ascii(ord(char))})"

    return f"Unknown character (U+{ord(char):04X})"
