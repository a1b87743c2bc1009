import re
from typing import Iterable, List, Optional

from termcolor import colored

class InvalidCodepoint(ValueError):
    def __init__(self, token: str, position: int, codepoint: int):
        super().__init__(f"{token} at position {position} is not a valid unicode scalar value (U+{codepoint:04X})")
        self.token = token
        self.position = position
        self.codepoint = codepoint

class Segment(object):
    def __init__(self, string: str):
        self.string = string
    def debug_color(self, string: str) -> str:
        raise NotImplementedError
    @property
    def debug_str(self) -> str:
        return self.debug_color(self.string)
    def decode(self) -> str:
        raise NotImplementedError
    def __str__(self) -> str:
        return self.string
    def __repr__(self) -> str:
        return repr(self.string)
    def __len__(self) -> int:
        return len(self.string)

class TextSegment(Segment):
    def debug_color(self, string: str) -> str:
        return colored(string, "black", "on_white")
    def decode(self) -> str:
        return self.string

class EscapeSegment(Segment):
    """
    A single well-formed escape token, e.g. `\\u{00E9}`.
    `position` is the character offset of the token in the scanned input.
    """
    token_regex = re.compile(r'\\u\{([0-9a-fA-F]{4})\}')

    def __init__(self, string: str, position: int = 0):
        super().__init__(string)
        match = self.token_regex.fullmatch(string)
        if not match:
            raise ValueError(f"Not an escape token: {string}")
        self.hex_digits = match.group(1)
        self.position = position

    @property
    def codepoint(self) -> int:
        return int(self.hex_digits, 16)

    def to_char(self) -> str:
        codepoint = self.codepoint
        # chr() accepts lone surrogates, which are not scalar values
        if 0xD800 <= codepoint <= 0xDFFF:
            raise InvalidCodepoint(self.string, self.position, codepoint)
        return chr(codepoint)

    def decode(self) -> str:
        return self.to_char()

    def debug_color(self, string: str) -> str:
        return colored(string, "black", "on_cyan", attrs=["bold"])

class SegmentedText(List[Segment]):
    """
    A text that has been split into escape tokens and the plain text between them.
    The main assumption is that joining the segments will yield the original text.
    """
    def __init__(self, iterable: Optional[Iterable[Segment]] = None):
        if iterable is None:
            iterable = []
        super().__init__(iterable)

    @classmethod
    def from_string(cls, string: str):
        segments = cls()
        last_end = 0
        for match in EscapeSegment.token_regex.finditer(string):
            if match.start() > last_end:
                segments.append(TextSegment(string[last_end:match.start()]))
            segments.append(EscapeSegment(match.group(0), match.start()))
            last_end = match.end()
        if last_end < len(string):
            segments.append(TextSegment(string[last_end:]))
        assert str(segments) == string
        return segments

    def __str__(self) -> str:
        return ''.join(str(x) for x in self)

    def escape_segments(self) -> List[EscapeSegment]:
        return [seg for seg in self if isinstance(seg, EscapeSegment)]

    def decode(self) -> str:
        # the first invalid token aborts the whole call
        return ''.join(seg.decode() for seg in self)

    @property
    def debug_str(self) -> str:
        return ''.join(x.debug_str for x in self)
