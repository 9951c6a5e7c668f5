"""错误类型与流水线结果 Ok / Err"""
from dataclasses import dataclass
from typing import Any

from parsing import Cursor


class CalculatorError(Exception):
    """所有求值错误的基类；流水线以Err返回而不是抛出"""
    kind = "CalculatorError"

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.message == other.message
                and self.position == other.position)

    def __hash__(self):
        return hash((type(self), self.message, self.position))

    def __repr__(self):
        return f"{type(self).__name__}(message={self.message!r}, position={self.position!r})"

    def __str__(self):
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} at position {self.position}"

    def render(self, source):
        """带行列号和插入符的错误描述"""
        if self.position is None:
            return str(self)
        line_no, column = Cursor(source).location(self.position)
        line = source.split("\n")[line_no - 1]
        return f"{self.kind}: {self.message} at {line_no}:{column}\n{line}\n{' ' * (column - 1)}^"


class LexError(CalculatorError):
    kind = "LexError"

    def __init__(self, position, message="unexpected character"):
        super().__init__(message, position)


class ExpressionSyntaxError(CalculatorError):
    kind = "SyntaxError"


class MismatchedParenError(ExpressionSyntaxError):
    kind = "SyntaxError::MismatchedParen"

    def __init__(self, position, message="mismatched parenthesis"):
        super().__init__(message, position)


class ArityError(CalculatorError):
    kind = "ArityError"

    def __init__(self, position, message="operator needs two operands"):
        super().__init__(message, position)


class EvaluationArithmeticError(CalculatorError):
    kind = "ArithmeticError"


class DivisionByZeroError(EvaluationArithmeticError):
    kind = "ArithmeticError::DivisionByZero"

    def __init__(self, position, message="division by zero"):
        super().__init__(message, position)


class MalformedExpressionError(CalculatorError):
    kind = "MalformedExpressionError"

    def __init__(self, stack_size):
        if stack_size == 0:
            message = "expression produced no value"
        else:
            message = f"expression left {stack_size} values on the stack"
        super().__init__(message)
        self.stack_size = stack_size


@dataclass(frozen=True)
class Ok:
    value: Any

    def __bool__(self):
        return True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class Err:
    error: CalculatorError

    def __bool__(self):
        return False

    def unwrap(self):
        raise self.error
