"""后缀表达式的项 - NumberTerm / BinaryOpTerm"""
import math
from dataclasses import dataclass, field

from core.operators import OperatorKind, Associativity, OPERATOR_DEFINITIONS


@dataclass(frozen=True)
class NumberTerm:
    value: float
    position: int = field(default=None, compare=False)

    def __str__(self):
        value = float(self.value)
        return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class BinaryOpTerm:
    kind: OperatorKind
    precedence: int
    associativity: Associativity
    position: int = field(default=None, compare=False)

    def __str__(self):
        return self.kind.value


class TermHelpers:
    """构造与判断Term的辅助函数"""

    @staticmethod
    def number(value, position=None):
        return NumberTerm(float(value), position)

    @staticmethod
    def binary_operator(symbol, position=None):
        """根据符号查操作符表构造BinaryOpTerm"""
        spec = OPERATOR_DEFINITIONS[OperatorKind(symbol)]
        return BinaryOpTerm(spec.kind, spec.precedence, spec.associativity, position)

    @staticmethod
    def is_number(term):
        return isinstance(term, NumberTerm)

    @staticmethod
    def from_text(text, position=None):
        """
        把单个后缀记号（如 '4' 或 '+'）转换为Term
        Returns:
            Term；无法识别时返回None
        """
        if text in OPERATOR_SYMBOLS:
            return TermHelpers.binary_operator(text, position)
        try:
            value = float(text)
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return TermHelpers.number(value, position)


OPERATOR_SYMBOLS = frozenset(kind.value for kind in OperatorKind)


def format_expression(expression):
    """把后缀表达式渲染为以空格分隔的字符串"""
    return ' '.join(str(term) for term in expression)
