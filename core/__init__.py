"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .errors import (
    Ok, Err, CalculatorError, LexError, ExpressionSyntaxError, MismatchedParenError,
    ArityError, EvaluationArithmeticError, DivisionByZeroError, MalformedExpressionError
)
from .token_system import TokenType, Token
from .operators import OperatorKind, Associativity, OPERATOR_DEFINITIONS, Operators
from .terms import NumberTerm, BinaryOpTerm, TermHelpers, format_expression
from .tokenizer import Tokenizer, tokenize
from .shunting_yard import ShuntingYardConverter
from .rpn_evaluator import RPNEvaluator, RPNValidator
from .calculator import ExpressionCalculator, evaluate, to_postfix, evaluate_postfix

__all__ = [
    'Ok', 'Err', 'CalculatorError', 'LexError', 'ExpressionSyntaxError', 'MismatchedParenError',
    'ArityError', 'EvaluationArithmeticError', 'DivisionByZeroError', 'MalformedExpressionError',
    'TokenType', 'Token', 'OperatorKind', 'Associativity', 'OPERATOR_DEFINITIONS', 'Operators',
    'NumberTerm', 'BinaryOpTerm', 'TermHelpers', 'format_expression',
    'Tokenizer', 'tokenize', 'ShuntingYardConverter', 'RPNEvaluator', 'RPNValidator',
    'ExpressionCalculator', 'evaluate', 'to_postfix', 'evaluate_postfix'
]
