import enum
from dataclasses import dataclass

# characters of source shown on either side of an error offset
SNIPPET_RADIUS = 10


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class CalcInternalError(RuntimeError):
    """A tree or token the tokenizer and parser could never have produced"""


@dataclass
class SourceError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    stage = "Source"

    def __str__(self) -> str:
        window_start = max(0, self.error_char_idx - SNIPPET_RADIUS)
        window_end = min(len(self.code), self.error_char_idx + SNIPPET_RADIUS)
        prefix = "..." if window_start > 0 else ""
        suffix = "..." if window_end < len(self.code) else ""
        snippet = prefix + self.code[window_start:window_end] + suffix
        caret = " " * (len(prefix) + self.error_char_idx - window_start) + "^"
        return f"[{self.stage} error] {self.errmsg}\n{snippet}\n{caret}"
