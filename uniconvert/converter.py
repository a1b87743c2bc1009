import logging

from uniconvert.segmentedtext import InvalidCodepoint, SegmentedText

logger = logging.getLogger(__name__)

__all__ = ["InvalidCodepoint", "text_to_unicode", "unicode_to_text"]

def text_to_unicode(text: str, braced: bool = False) -> str:
    """
    Encode every character of `text` as an escape token, e.g. "Hi" -> "\\u0048\\u0069".
    The hex field is zero-padded to at least 4 digits and widens for characters above U+FFFF.
    With `braced=True` the tokens use the "\\u{XXXX}" form read by `unicode_to_text`.
    """
    template = "\\u{{{:04X}}}" if braced else "\\u{:04X}"
    return ''.join(template.format(ord(c)) for c in text)

def unicode_to_text(text: str) -> str:
    """
    Replace every "\\u{XXXX}" token in `text` by the character it names.
    Anything else, including bare "\\uXXXX" sequences, is kept verbatim.

    Raises InvalidCodepoint for a token that is not a unicode scalar value;
    nothing is returned in that case.
    """
    segments = SegmentedText.from_string(text)
    logger.debug(f"found {len(segments.escape_segments())} escape tokens in {len(segments)} segments")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(segments.debug_str)
    return segments.decode()
