"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 操作符参数：优先级越大结合越紧
OPERATOR_CONFIG = {
    "+": {"precedence": 1, "associativity": "left"},
    "-": {"precedence": 1, "associativity": "left"},
    "*": {"precedence": 2, "associativity": "left"},
    "/": {"precedence": 2, "associativity": "left"},
    "%": {"precedence": 2, "associativity": "left"},
}

# 词法分析参数
TOKENIZER_CONFIG = {
    "whitespace": " \t\r\n",
    "digits": "0123456789",
    "decimal_point": ".",
    "operators": "+-*/%",
    "signed_numbers": True,  # 操作数位置允许 -3 / +3 形式的数字
}

# 求值器参数
EVALUATOR_CONFIG = {
    "dtype": "float64",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行
CLI_CONFIG = {
    "prompt": "> ",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    prec = {op: cfg["precedence"] for op, cfg in OPERATOR_CONFIG.items()}
    assert set(prec) == set(TOKENIZER_CONFIG["operators"]), "操作符表与词法配置不一致"
    assert min(prec["*"], prec["/"], prec["%"]) > max(prec["+"], prec["-"]), "乘除取模必须比加减结合更紧"
    for op, cfg in OPERATOR_CONFIG.items():
        assert cfg["associativity"] in ("left", "right"), f"未知结合性: {op}"
    assert EVALUATOR_CONFIG["dtype"] in ("float64", "float32"), "不支持的数值类型"
    logger.info("Configuration validated successfully!")
    return True
