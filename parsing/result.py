"""解析结果类型 - Success / Failure"""
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Success:
    """解析成功：携带值和继续解析的位置"""
    value: Any
    resume_index: int

    def __bool__(self):
        return True

    def __str__(self):
        return str(self.value)

    def map(self, fn: Callable[[Any], Any]) -> "Success":
        return Success(fn(self.value), self.resume_index)

    def then(self, fn: Callable[[Any], "ParseOutcome"]) -> "ParseOutcome":
        return fn(self.value)

    def or_else(self, fn: Callable[["Failure"], "ParseOutcome"]) -> "ParseOutcome":
        return self


@dataclass(frozen=True)
class Failure:
    """解析失败：携带错误信息和失败位置"""
    message: str
    index: int

    def __bool__(self):
        return False

    def __str__(self):
        return f"Error: {self.message} (at {self.index})"

    def map(self, fn):
        return self

    def then(self, fn):
        return self

    def or_else(self, fn: Callable[["Failure"], "ParseOutcome"]) -> "ParseOutcome":
        return fn(self)


ParseOutcome = Success | Failure
