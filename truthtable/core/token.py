from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class TokenKind(Enum):
    LITERAL = "literal"
    VARIABLE = "variable"
    NOT = "not"
    AND = "and"
    OR = "or"
    IMPLIES = "implies"
    IFF = "iff"
    LPAREN = "lparen"
    RPAREN = "rparen"


class Precedence(IntEnum):
    """Lower rank binds tighter. NA sorts after every operator."""
    L1 = 0
    L2 = 1
    L3 = 2
    L4 = 3
    L5 = 4
    NA = 5


OPERATOR_PRECEDENCE = {
    TokenKind.NOT: Precedence.L1,
    TokenKind.AND: Precedence.L2,
    TokenKind.OR: Precedence.L3,
    TokenKind.IMPLIES: Precedence.L4,
    TokenKind.IFF: Precedence.L5,
}

BINARY_KINDS = frozenset({TokenKind.AND, TokenKind.OR, TokenKind.IMPLIES, TokenKind.IFF})
OPERAND_KINDS = frozenset({TokenKind.LITERAL, TokenKind.VARIABLE})


class Token(NamedTuple):
    kind: TokenKind
    precedence: Precedence = Precedence.NA
    value: Optional[bool] = None
    lexeme: str = ""

    @classmethod
    def literal(cls, value: bool, lexeme: str) -> "Token":
        return cls(TokenKind.LITERAL, Precedence.NA, value, lexeme)

    @classmethod
    def variable(cls, name: str) -> "Token":
        return cls(TokenKind.VARIABLE, Precedence.NA, None, name)

    @classmethod
    def operator(cls, kind: TokenKind, lexeme: str) -> "Token":
        return cls(kind, OPERATOR_PRECEDENCE[kind], None, lexeme)

    @classmethod
    def paren(cls, kind: TokenKind, lexeme: str) -> "Token":
        return cls(kind, Precedence.NA, None, lexeme)

    def is_operator(self) -> bool:
        return self.kind in OPERATOR_PRECEDENCE

    def is_binary(self) -> bool:
        return self.kind in BINARY_KINDS

    def is_operand(self) -> bool:
        return self.kind in OPERAND_KINDS

    def bind(self, value: bool) -> "Token":
        # Only variables take an assignment; everything else is returned as is.
        if self.kind is not TokenKind.VARIABLE:
            return self
        return self._replace(value=bool(value))

    def __repr__(self):
        if self.value is None:
            return f"Token({self.kind.name}, {self.lexeme!r})"
        return f"Token({self.kind.name}, {self.lexeme!r}, value={self.value})"
