from .token import Token, TokenKind, Precedence
from .errors import (
    ExpressionError, LexError, MalformedMultiCharOperator, UnbalancedParens,
    DanglingOperator, EmptyOperand, MissingOperator, UnboundVariable,
    InternalContractError, COARSE_MESSAGE
)
from .scanner import Scanner, ScanResult, scan, describe_tokens
from .validator import validate, is_valid
from .postfix import to_postfix
from .evaluator import evaluate, parse_values, bind_variables
from .table import TruthTable, assignments, generate_table, evaluate_assignment

__all__ = [
    "Token", "TokenKind", "Precedence",
    "ExpressionError", "LexError", "MalformedMultiCharOperator", "UnbalancedParens",
    "DanglingOperator", "EmptyOperand", "MissingOperator", "UnboundVariable",
    "InternalContractError", "COARSE_MESSAGE",
    "Scanner", "ScanResult", "scan", "describe_tokens",
    "validate", "is_valid",
    "to_postfix",
    "evaluate", "parse_values", "bind_variables",
    "TruthTable", "assignments", "generate_table", "evaluate_assignment",
]
