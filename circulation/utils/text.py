"""Text utilities for notification and display messages."""
import re


def sanitize_text(text: str) -> str:
    """Clean and normalize text for safe output.

    Preserves UTF-8 characters and newlines while removing control
    characters that could break terminal output or a text message.

    Args:
        text: Input text to sanitize

    Returns:
        Cleaned text

    Examples:
        >>> sanitize_text("Cien años  de soledad")
        'Cien años de soledad'
        >>> sanitize_text(None)
        ''
    """
    if text is None:
        return ""

    text = str(text)

    # Remove: 0x00-0x08, 0x0B-0x0C, 0x0E-0x1F, 0x7F-0x9F
    text = re.sub(r'[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F-\x9F]', '', text)

    # Collapse multiple spaces (but NOT newlines) into single space
    text = re.sub(r'[ \t]+', ' ', text)

    text = re.sub(r'\n{3,}', '\n\n', text)

    lines = [line.strip() for line in text.split('\n')]
    return '\n'.join(lines).strip()


def single_line(text: str) -> str:
    """Sanitize text and fold it onto one line."""
    return re.sub(r'\s*\n\s*', ' ', sanitize_text(text))


def truncate_text(text: str, max_length: int, ellipsis: str = "...") -> str:
    """Cut text to at most ``max_length`` characters, marking the cut.

    >>> truncate_text("Has prestado '1984'", 12)
    'Has prest...'
    """
    if max_length <= len(ellipsis):
        raise ValueError(f"max_length must be greater than {len(ellipsis)}")
    if len(text) <= max_length:
        return text
    return text[:max_length - len(ellipsis)].rstrip() + ellipsis


def format_amount(amount: float, currency_symbol: str = "$") -> str:
    """Render a fine amount, dropping the decimals for whole numbers.

    >>> format_amount(30)
    '$30'
    >>> format_amount(12.5)
    '$12.50'
    """
    if float(amount).is_integer():
        return f"{currency_symbol}{int(amount)}"
    return f"{currency_symbol}{amount:.2f}"
