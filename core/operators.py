"""core/operators.py"""
from enum import Enum
import logging

import numpy as np

from config.config import OPERATOR_CONFIG, EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorSpec:
    def __init__(self, kind, precedence, associativity, method_name):
        self.kind = kind
        self.precedence = precedence
        self.associativity = associativity
        self.method_name = method_name  # Operators中对应的静态方法

    def __repr__(self):
        return f"OperatorSpec({self.kind.value}, precedence={self.precedence}, {self.associativity.value})"


_METHOD_NAMES = {
    OperatorKind.ADD: 'add',
    OperatorKind.SUB: 'sub',
    OperatorKind.MUL: 'mul',
    OperatorKind.DIV: 'div',
    OperatorKind.MOD: 'mod',
}

# 操作符定义字典：kind -> OperatorSpec
OPERATOR_DEFINITIONS = {
    kind: OperatorSpec(
        kind,
        OPERATOR_CONFIG[kind.value]["precedence"],
        Associativity(OPERATOR_CONFIG[kind.value]["associativity"]),
        method_name,
    )
    for kind, method_name in _METHOD_NAMES.items()
}

# 需要检查除数为零的操作符
ZERO_DIVISOR_CHECKED = frozenset({OperatorKind.DIV, OperatorKind.MOD})

_DTYPE = np.dtype(EVALUATOR_CONFIG["dtype"])


class Operators:
    """所有二元操作符的静态方法集合"""

    @staticmethod
    def _as_number(value):
        return _DTYPE.type(value)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.add(Operators._as_number(operand1), Operators._as_number(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.subtract(Operators._as_number(operand1), Operators._as_number(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.multiply(Operators._as_number(operand1), Operators._as_number(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符；调用方负责先排除除数为零"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.divide(Operators._as_number(operand1), Operators._as_number(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """取模：余数与被除数同号（fmod）"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.fmod(Operators._as_number(operand1), Operators._as_number(operand2))

    @staticmethod
    def apply(kind, operand1, operand2):
        """按kind查表调用对应操作符，返回Python float"""
        op_method = getattr(Operators, OPERATOR_DEFINITIONS[kind].method_name)
        result = op_method(operand1, operand2)
        if not np.isfinite(result):
            logger.debug(f"Non-finite result for {operand1} {kind.value} {operand2}: {result}")
        return float(result)
