"""表达式求值流水线：文本 -> Token -> 后缀Term -> 数值"""
import logging

from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYardConverter
from core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class ExpressionCalculator:
    """
    组合词法分析、调度场转换和栈求值三个阶段。
    每个阶段失败即停止，错误以Err原样返回。
    """

    def __init__(self, tokenizer=None):
        self.tokenizer = tokenizer or Tokenizer()
        self.converter = ShuntingYardConverter
        self.rpn_evaluator = RPNEvaluator

    def to_postfix(self, contents):
        tokens = self.tokenizer.tokenize(contents)
        if not tokens:
            return tokens
        return self.converter.convert(tokens.value)

    def evaluate(self, contents):
        """
        Args:
            contents: 中缀表达式文本
        Returns:
            Ok(float) 或 Err(CalculatorError)
        """
        expression = self.to_postfix(contents)
        if not expression:
            logger.debug(f"Failed to compile expression: {contents[:50]!r}")
            return expression

        result = self.rpn_evaluator.evaluate(expression.value)
        if result:
            logger.debug(f"Evaluated {contents[:50]!r} -> {result.value}")
        return result

    def evaluate_postfix(self, text):
        return self.rpn_evaluator.evaluate_text(text)


_DEFAULT_CALCULATOR = ExpressionCalculator()


def evaluate(contents):
    return _DEFAULT_CALCULATOR.evaluate(contents)


def to_postfix(contents):
    return _DEFAULT_CALCULATOR.to_postfix(contents)


def evaluate_postfix(text):
    return _DEFAULT_CALCULATOR.evaluate_postfix(text)
