"""core/token_system.py"""
from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


@dataclass(frozen=True)
class Token:
    """词法单元；position为源文本中的偏移（未知时为None），不参与比较"""
    type: TokenType
    value: object = None  # 数字为float，操作符为字符
    position: int = field(default=None, compare=False)

    @classmethod
    def number(cls, value, position=None):
        return cls(TokenType.NUMBER, float(value), position)

    @classmethod
    def operator(cls, symbol, position=None):
        return cls(TokenType.OPERATOR, symbol, position)

    @classmethod
    def left_paren(cls, position=None):
        return cls(TokenType.LEFT_PAREN, "(", position)

    @classmethod
    def right_paren(cls, position=None):
        return cls(TokenType.RIGHT_PAREN, ")", position)

    @property
    def is_operand_boundary(self):
        """该token之后的位置是否为操作数位置（可出现带符号数字）"""
        return self.type in (TokenType.OPERATOR, TokenType.LEFT_PAREN)

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        return str(self.value)
