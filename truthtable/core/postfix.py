from typing import Tuple

from truthtable.core.errors import UnbalancedParens
from truthtable.core.token import Token, TokenKind
from truthtable.utils import get_logger

logger = get_logger("postfix")


def to_postfix(tokens) -> Tuple[Token, ...]:
    """
    Shunting-yard conversion of an infix token sequence.
    An incoming operator pops only stack operators that bind strictly tighter,
    so operators of the same rank associate to the right.
    """
    operators = []
    output = []

    for token in tokens:
        if token.is_operator():
            while operators and token.precedence > operators[-1].precedence:
                output.append(operators.pop())
            operators.append(token)
        elif token.kind is TokenKind.LPAREN:
            operators.append(token)
        elif token.kind is TokenKind.RPAREN:
            while operators and operators[-1].kind is not TokenKind.LPAREN:
                output.append(operators.pop())
            if not operators:
                raise UnbalancedParens("')' without matching '('")
            operators.pop()
        else:
            output.append(token)

    while operators:
        token = operators.pop()
        if token.kind is TokenKind.LPAREN:
            raise UnbalancedParens("unclosed '('")
        output.append(token)

    logger.debug(f"Postfix: {' '.join(t.lexeme for t in output)}")
    return tuple(output)
