"""调度场算法 - 中缀Token序列转后缀Term序列"""
import logging

from core.errors import Ok, Err, MismatchedParenError
from core.operators import Associativity
from core.terms import BinaryOpTerm, TermHelpers
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class _ParenMarker:
    """操作符栈中的左括号标记"""

    def __init__(self, position):
        self.position = position


class ShuntingYardConverter:
    """
    用输出序列和操作符栈两个显式栈完成转换（迭代实现，不使用递归）

    * 数字: 直接进入输出
    * 操作符: 栈顶优先级更高（或相同且当前为左结合）时弹出到输出，再入栈
    * 左括号: 入栈
    * 右括号: 弹出到输出直到左括号（丢弃）
    * 输入结束: 弹出全部操作符
    """

    @staticmethod
    def _should_pop(top, term):
        if not isinstance(top, BinaryOpTerm):
            return False
        if top.precedence > term.precedence:
            return True
        return top.precedence == term.precedence and term.associativity == Associativity.LEFT

    @staticmethod
    def convert(tokens):
        """
        Args:
            tokens: Token序列
        Returns:
            Ok(tuple[Term]) 或 Err(MismatchedParenError)
        """
        output = []
        op_stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output.append(TermHelpers.number(token.value, token.position))

            elif token.type == TokenType.OPERATOR:
                term = TermHelpers.binary_operator(token.value, token.position)
                while op_stack and ShuntingYardConverter._should_pop(op_stack[-1], term):
                    output.append(op_stack.pop())
                op_stack.append(term)

            elif token.type == TokenType.LEFT_PAREN:
                op_stack.append(_ParenMarker(token.position))

            elif token.type == TokenType.RIGHT_PAREN:
                while op_stack and not isinstance(op_stack[-1], _ParenMarker):
                    output.append(op_stack.pop())
                if not op_stack:
                    logger.debug(f"Unmatched ')' at {token.position}")
                    return Err(MismatchedParenError(token.position))
                op_stack.pop()

            else:
                raise ValueError(f"Unknown token type: {token.type}")

        while op_stack:
            top = op_stack.pop()
            if isinstance(top, _ParenMarker):
                logger.debug(f"Unmatched '(' at {top.position}")
                return Err(MismatchedParenError(top.position))
            output.append(top)

        return Ok(tuple(output))
