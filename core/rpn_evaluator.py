"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import Ok, Err, LexError, ArityError, DivisionByZeroError, MalformedExpressionError
from core.operators import Operators, ZERO_DIVISOR_CHECKED
from core.terms import NumberTerm, BinaryOpTerm, TermHelpers

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(expression):
        """
        用一个值栈从左到右归约后缀表达式
        Args:
            expression: Term序列（后缀顺序）
        Returns:
            Ok(float) 或 Err(ArityError / DivisionByZeroError / MalformedExpressionError)
        """
        stack = []

        for term in expression:
            if isinstance(term, NumberTerm):
                stack.append(term.value)

            elif isinstance(term, BinaryOpTerm):
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {term.kind.value} at {term.position}")
                    return Err(ArityError(term.position))
                operand2 = stack.pop()
                operand1 = stack.pop()

                if term.kind in ZERO_DIVISOR_CHECKED and operand2 == 0:
                    logger.debug(f"Zero divisor for {term.kind.value} at {term.position}")
                    return Err(DivisionByZeroError(term.position))

                stack.append(Operators.apply(term.kind, operand1, operand2))

            else:
                raise TypeError(f"Unknown term: {term!r}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            return Err(MalformedExpressionError(len(stack)))

        return Ok(stack[0])

    @staticmethod
    def evaluate_text(text):
        """
        评估以空格分隔的后缀字符串，如 '4 2 + 3 *'
        Returns:
            Ok(float) 或 Err；无法识别的记号返回LexError
        """
        expression = []
        offset = 0
        for item in text.split():
            position = text.index(item, offset)
            offset = position + len(item)
            term = TermHelpers.from_text(item, position)
            if term is None:
                logger.debug(f"Unknown RPN item {item!r} at {position}")
                return Err(LexError(position))
            expression.append(term)
        return RPNEvaluator.evaluate(tuple(expression))


class RPNValidator:

    @staticmethod
    def calculate_stack_size(expression):
        """计算当前栈中的元素数量；操作数不足时返回None"""
        stack_size = 0
        for term in expression:
            if TermHelpers.is_number(term):
                stack_size += 1
            else:
                if stack_size < 2:
                    return None
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_complete(expression):
        """检查表达式能否归约为恰好一个值"""
        return RPNValidator.calculate_stack_size(expression) == 1
