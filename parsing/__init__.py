"""解析组合子模块 - Cursor、解析结果和组合子"""
from .result import Success, Failure, ParseOutcome
from .cursor import Cursor
from .combinators import (
    Parser, literal, satisfy, char_in, end_of_input,
    sequence, alternative, optional, many, many1, map_parser
)

__all__ = [
    'Success', 'Failure', 'ParseOutcome', 'Cursor',
    'Parser', 'literal', 'satisfy', 'char_in', 'end_of_input',
    'sequence', 'alternative', 'optional', 'many', 'many1', 'map_parser'
]
