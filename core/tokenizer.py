"""词法分析器 - 用组合子把源文本切分为Token序列"""
import logging

from config.config import TOKENIZER_CONFIG
from core.errors import Ok, Err, LexError
from core.token_system import Token
from parsing import (
    Cursor, literal, char_in, end_of_input, sequence, alternative, optional, many, many1, map_parser
)

logger = logging.getLogger(__name__)


def _build_number(sign, digits, fraction):
    text = (sign or "") + "".join(digits)
    if fraction is not None:
        text += "." + "".join(fraction[1])
    return float(text)


def _positioned(parser, make):
    """运行parser，并用 make(value, 起始偏移) 构造Token"""
    def parse(cursor):
        start = cursor.offset
        return parser(cursor).map(lambda value: make(value, start))
    return parse


class Tokenizer:
    """基于组合子的词法分析器；构造后无状态，可重复使用"""

    def __init__(self, config=None):
        config = config or TOKENIZER_CONFIG

        self.whitespace = many(char_in(config["whitespace"], "whitespace"))
        self.end_of_input = end_of_input()
        digits = many1(char_in(config["digits"], "digit"))
        fraction = optional(sequence(literal(config["decimal_point"]), digits))
        sign = alternative(literal("+"), literal("-"))

        unsigned_number = map_parser(
            sequence(digits, fraction),
            lambda parts: _build_number(None, *parts)
        )
        if config["signed_numbers"]:
            signed_number = map_parser(
                sequence(optional(sign), digits, fraction),
                lambda parts: _build_number(*parts)
            )
        else:
            signed_number = unsigned_number

        operator = _positioned(char_in(config["operators"], "operator"), Token.operator)
        left_paren = _positioned(literal("("), lambda _, pos: Token.left_paren(pos))
        right_paren = _positioned(literal(")"), lambda _, pos: Token.right_paren(pos))

        # 操作数位置（开头、操作符或左括号之后）才把 +/- 当作数字符号
        self.operand_token = alternative(
            _positioned(signed_number, Token.number), operator, left_paren, right_paren
        )
        self.operator_token = alternative(
            _positioned(unsigned_number, Token.number), operator, left_paren, right_paren
        )

    def tokenize(self, contents):
        """
        把源文本转换为Token序列
        Args:
            contents: 源文本
        Returns:
            Ok(tuple[Token]) 或 Err(LexError)，不返回部分结果
        """
        cursor = Cursor(contents)
        tokens = []

        while True:
            self.whitespace(cursor)
            if self.end_of_input(cursor):
                break

            operand_position = not tokens or tokens[-1].is_operand_boundary
            parser = self.operand_token if operand_position else self.operator_token
            outcome = parser(cursor)
            if not outcome:
                logger.debug(f"Unexpected character {cursor.peek()!r} at {cursor.offset}")
                return Err(LexError(cursor.offset))
            tokens.append(outcome.value)

        logger.debug(f"Tokenized {len(contents)} chars into {len(tokens)} tokens")
        return Ok(tuple(tokens))


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(contents):
    return _DEFAULT_TOKENIZER.tokenize(contents)
