"""
Length-prefixed segment encoding.
Each segment is written as <byte length>:<value> so that adjacent
segments cannot be re-split into a different sequence.
"""

from ..config import LENGTH_SEPARATOR, STRING_ENCODING


def encoded_length(value: str) -> int:
    """Length of value in bytes once UTF-8 encoded."""
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value)}")
    return len(value.encode(STRING_ENCODING))


def length_prefixed(value: str, tag: str = "") -> str:
    """
    Encode a single segment.
    
    Args:
        value: Segment value
        tag: Optional literal written before the length
        
    Returns:
        tag + length + ":" + value
    """
    return f"{tag}{encoded_length(value)}{LENGTH_SEPARATOR}{value}"
