"""组合子 - 由基本解析器组合出更大的解析器

解析器是任意 Cursor -> Success/Failure 的可调用对象。
所有组合子只依赖cursor位置，自身不保存状态，可重复使用。
"""
from typing import Any, Callable

from parsing.cursor import Cursor
from parsing.result import Success, Failure, ParseOutcome

Parser = Callable[[Cursor], ParseOutcome]


def literal(text: str) -> Parser:
    """精确匹配text"""
    def parse(cursor: Cursor) -> ParseOutcome:
        if cursor.peek(len(text)) == text:
            cursor.advance(len(text))
            return Success(text, cursor.offset)
        return Failure(f"Expected {text}", cursor.offset)
    return parse


def satisfy(predicate: Callable[[str], bool], description: str = "character") -> Parser:
    """匹配一个满足predicate的字符"""
    def parse(cursor: Cursor) -> ParseOutcome:
        ch = cursor.peek(1)
        if ch is not None and predicate(ch):
            cursor.advance(1)
            return Success(ch, cursor.offset)
        return Failure(f"Expected {description}", cursor.offset)
    return parse


def char_in(chars: str, description: str = None) -> Parser:
    return satisfy(lambda ch: ch in chars, description or f"one of {chars!r}")


def end_of_input() -> Parser:
    def parse(cursor: Cursor) -> ParseOutcome:
        if cursor.at_end:
            return Success(None, cursor.offset)
        return Failure("Expected end of input", cursor.offset)
    return parse


def sequence(*parsers: Parser) -> Parser:
    """
    依次运行所有解析器（单个事务）
    Returns:
        成功时为子结果组成的tuple；任一失败则整体失败并回到起点
    """
    def run(cursor: Cursor) -> ParseOutcome:
        values = []
        for p in parsers:
            outcome = p(cursor)
            if not outcome:
                return outcome
            values.append(outcome.value)
        return Success(tuple(values), cursor.offset)

    def parse(cursor: Cursor) -> ParseOutcome:
        return cursor.with_transaction(run)
    return parse


def alternative(*parsers: Parser) -> Parser:
    """从同一起点依次尝试，返回第一个成功；全部失败时返回最后一个的失败"""
    if not parsers:
        raise ValueError("alternative() needs at least one parser")

    def parse(cursor: Cursor) -> ParseOutcome:
        outcome = None
        for p in parsers:
            outcome = cursor.with_transaction(p)
            if outcome:
                return outcome
        return outcome
    return parse


def optional(parser: Parser, default: Any = None) -> Parser:
    """永不失败；p失败时以default成功，cursor不动"""
    def parse(cursor: Cursor) -> ParseOutcome:
        outcome = cursor.with_transaction(parser)
        if outcome:
            return outcome
        return Success(default, cursor.offset)
    return parse


def many(parser: Parser) -> Parser:
    """重复p直到失败，允许零次"""
    def parse(cursor: Cursor) -> ParseOutcome:
        values = []
        while True:
            start = cursor.offset
            outcome = cursor.with_transaction(parser)
            if not outcome:
                break
            values.append(outcome.value)
            # 不消费输入的成功会导致死循环
            if cursor.offset == start:
                break
        return Success(tuple(values), cursor.offset)
    return parse


def many1(parser: Parser) -> Parser:
    """重复p直到失败，至少一次"""
    repeated = many(parser)

    def parse(cursor: Cursor) -> ParseOutcome:
        first = cursor.with_transaction(parser)
        if not first:
            return first
        rest = repeated(cursor)
        return Success((first.value,) + rest.value, cursor.offset)
    return parse


def map_parser(parser: Parser, fn: Callable[[Any], Any]) -> Parser:
    """对成功值应用fn，失败原样传递"""
    def parse(cursor: Cursor) -> ParseOutcome:
        return parser(cursor).map(fn)
    return parse
