"""Text measurement utilities for balloon layout.

Widths here are counted in Unicode code points, not bytes and not terminal
columns, so multi-byte text such as "你好" or "héllo" measures by character.
"""


def calculate_text_width(text: str) -> int:
    """Calculate the width of text as a count of Unicode code points.

    Args:
        text: Input text (already tab-expanded)

    Returns:
        Number of code points in the text

    Examples:
        >>> calculate_text_width("Hello")
        5
        >>> calculate_text_width("你好")
        2
        >>> calculate_text_width("")
        0
    """
    return len(text)


def pad_to_width(text: str, target_width: int, fill_char: str = " ") -> str:
    """Pad text on the right until it reaches target width.

    Text that already reaches or exceeds the target is returned as-is,
    never truncated.

    Args:
        text: Text to pad
        target_width: Target width in code points
        fill_char: Character to use for padding (default: space)

    Returns:
        Padded text

    Examples:
        >>> pad_to_width("Hello", 10)
        'Hello     '
        >>> pad_to_width("你好", 4)
        '你好  '
    """
    current_width = calculate_text_width(text)

    if current_width >= target_width:
        return text

    return text + (fill_char * (target_width - current_width))
