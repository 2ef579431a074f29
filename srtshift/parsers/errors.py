"""パースエラーの診断情報を表すモジュール"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """入力テキスト上の半開区間（表示幅単位のオフセット）"""

    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValueError(f"不正な区間です: {self.start}..{self.end}")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Diagnostic:
    """パース失敗を表す診断情報"""

    message: str
    reason: str
    span: Span


class ParseError(ValueError):
    """SRTのパースに失敗したことを表す例外"""

    def __init__(self, message: str, reason: str, start: int, end: int):
        super().__init__(message)
        self.diagnostic = Diagnostic(message=message, reason=reason, span=Span(start, end))

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def reason(self) -> str:
        return self.diagnostic.reason

    @property
    def span(self) -> Span:
        return self.diagnostic.span
