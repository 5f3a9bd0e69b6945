from truthtable.core.errors import (
    DanglingOperator, EmptyOperand, ExpressionError, MissingOperator, UnbalancedParens
)
from truthtable.core.token import TokenKind

# What may directly follow something that expects an operand on its right.
OPERAND_STARTS = frozenset({TokenKind.LITERAL, TokenKind.VARIABLE, TokenKind.LPAREN, TokenKind.NOT})


def _kind(token):
    return token.kind if token is not None else None


def _follows_operand(token) -> bool:
    # Valid successor of a literal, a variable or ')': end of input, a binary operator or ')'.
    return token is None or token.is_binary() or token.kind is TokenKind.RPAREN


def _precedes_operand(token) -> bool:
    # Valid predecessor of a literal, a variable, '~' or '(': start of input, any operator or '('.
    return token is None or token.is_operator() or token.kind is TokenKind.LPAREN


def _check_token(i, token, prev, nxt) -> None:
    kind = token.kind

    if kind in (TokenKind.LITERAL, TokenKind.VARIABLE):
        if not _precedes_operand(prev):
            raise MissingOperator(f"Operand {token.lexeme!r} is not preceded by an operator", i)
        if not _follows_operand(nxt):
            raise MissingOperator(f"Operand {token.lexeme!r} is followed by {nxt.lexeme!r}", i)

    elif kind is TokenKind.NOT:
        if _kind(nxt) not in OPERAND_STARTS:
            raise DanglingOperator(f"Negation {token.lexeme!r} has no operand on its right", i)
        if not _precedes_operand(prev):
            raise MissingOperator(f"Negation {token.lexeme!r} follows {prev.lexeme!r}", i)

    elif token.is_binary():
        if prev is None or not (prev.is_operand() or prev.kind is TokenKind.RPAREN):
            raise DanglingOperator(f"Operator {token.lexeme!r} has no left operand", i)
        if _kind(nxt) not in OPERAND_STARTS:
            raise DanglingOperator(f"Operator {token.lexeme!r} has no right operand", i)

    elif kind is TokenKind.LPAREN:
        if not _precedes_operand(prev):
            raise MissingOperator(f"'(' follows {prev.lexeme!r}", i)
        if nxt is None or nxt.kind is TokenKind.RPAREN:
            raise EmptyOperand("Empty parentheses", i)
        if nxt.kind not in OPERAND_STARTS:
            raise DanglingOperator(f"'(' is followed by {nxt.lexeme!r}", i)

    elif kind is TokenKind.RPAREN:
        if prev is None or not (prev.is_operand() or prev.kind is TokenKind.RPAREN):
            raise EmptyOperand("')' closes nothing", i)
        if not _follows_operand(nxt):
            raise MissingOperator(f"')' is followed by {nxt.lexeme!r}", i)


def validate(tokens) -> None:
    """
    Check a scanned token sequence against the positional grammar rules.
    Raises an ExpressionError subclass on the first violation.
    """
    if not tokens:
        raise EmptyOperand("Expression has no tokens")

    depth = 0
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        prev = tokens[i - 1] if i > 0 else None
        nxt = tokens[i + 1] if i < last else None
        _check_token(i, token, prev, nxt)

        if token.kind is TokenKind.LPAREN:
            depth += 1
        elif token.kind is TokenKind.RPAREN:
            depth -= 1
            if depth < 0:
                raise UnbalancedParens("')' without matching '('", i)

    if depth:
        raise UnbalancedParens(f"{depth} unclosed '('")


def is_valid(tokens) -> bool:
    try:
        validate(tokens)
    except ExpressionError:
        return False
    return True
