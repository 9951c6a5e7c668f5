"""parsing/cursor.py"""
import logging

from parsing.result import Failure

logger = logging.getLogger(__name__)


class Cursor:
    """源文本上的读位置，支持 peek / advance / rewind 与事务回溯"""

    def __init__(self, text):
        self._text = text
        self.offset = 0

    @property
    def text(self):
        return self._text

    @property
    def remaining(self):
        return len(self._text) - self.offset

    @property
    def at_end(self):
        return self.offset >= len(self._text)

    def peek(self, n=1):
        """返回接下来的n个字符但不消费；剩余不足时返回None"""
        if n > self.remaining:
            return None
        return self._text[self.offset:self.offset + n]

    def advance(self, n=1):
        """消费n个字符；剩余不足时不移动并返回False"""
        if n < 0:
            raise ValueError(f"advance() count must be non-negative, got {n}")
        if n > self.remaining:
            return False
        self.offset += n
        return True

    def rewind(self, n=1):
        """回退n个字符，最多回到0"""
        if n < 0:
            raise ValueError(f"rewind() count must be non-negative, got {n}")
        self.offset = min(len(self._text), max(0, self.offset - n))

    def with_transaction(self, fn):
        """
        在事务中运行解析函数
        Args:
            fn: 接收cursor、返回Success/Failure的函数
        Returns:
            fn的结果；失败（或抛出异常）时offset恢复到进入时的位置
        """
        saved = self.offset
        committed = False
        try:
            outcome = fn(self)
            committed = not isinstance(outcome, Failure)
            return outcome
        finally:
            if not committed:
                self.offset = saved

    def location(self, index=None):
        """把偏移换算成 (行, 列)，均从1开始"""
        if index is None:
            index = self.offset
        index = max(0, min(index, len(self._text)))
        consumed = self._text[:index]
        line = consumed.count("\n") + 1
        column = index - (consumed.rfind("\n") + 1) + 1
        return line, column

    def __repr__(self):
        line, column = self.location()
        return f"Cursor({line}:{column}, offset={self.offset}/{len(self._text)})"
