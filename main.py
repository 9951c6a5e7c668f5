"""主程序入口 - 计算中缀或后缀表达式"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, CLI_CONFIG, validate_config
from core import format_expression, evaluate, to_postfix, evaluate_postfix

logger = logging.getLogger(__name__)


def format_number(value):
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def run_expression(contents, rpn=False, show_postfix=False, out=None):
    """
    计算单个表达式并打印结果
    Returns:
        退出码：成功0，求值错误1
    """
    out = out or sys.stdout

    if show_postfix and not rpn:
        expression = to_postfix(contents)
        if expression:
            print(format_expression(expression.value), file=out)

    result = evaluate_postfix(contents) if rpn else evaluate(contents)
    if result:
        print(format_number(result.value), file=out)
        return 0

    logger.info(f"Evaluation failed: {result.error!r}")
    print(result.error.render(contents), file=out)
    return 1


def repl(args, stream=None, out=None):
    """逐行读取表达式直到空行"""
    stream = stream or sys.stdin
    out = out or sys.stdout
    status = 0
    while True:
        if stream.isatty():
            print(CLI_CONFIG["prompt"], end="", file=out, flush=True)
        line = stream.readline()
        if not line.strip():
            break
        status = run_expression(line.rstrip("\n"), rpn=args.rpn, show_postfix=args.show_postfix, out=out)
    return status


def main(args):
    logger.info("Starting calculator")
    validate_config()

    if args.expression is None:
        return repl(args)
    return run_expression(args.expression, rpn=args.rpn, show_postfix=args.show_postfix)


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions")
    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Expression to evaluate; reads one expression per line from stdin when omitted"
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Treat the input as a space separated postfix expression"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix form before the result"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
