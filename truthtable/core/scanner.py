from typing import Dict, NamedTuple, Tuple

from truthtable.core.errors import MalformedMultiCharOperator
from truthtable.core.token import Token, TokenKind
from truthtable.utils import get_logger

logger = get_logger("scanner")

LITERALS = {
    "0": False,
    "F": False,
    "1": True,
    "T": True,
}

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "^": TokenKind.AND,
    "*": TokenKind.AND,
    "v": TokenKind.OR,
    "+": TokenKind.OR,
    "!": TokenKind.NOT,
    "~": TokenKind.NOT,
}

# Operators spelled with more than one character, keyed by their first character.
MULTI_CHAR_TOKENS = {
    "-": ("->", TokenKind.IMPLIES),
    "<": ("<->", TokenKind.IFF),
}


class ScanResult(NamedTuple):
    tokens: Tuple[Token, ...]
    variables: Dict[str, Token]


class Scanner:
    """
    Turns an expression string into tokens in a single left-to-right pass.
    ----------
    Parameters
    ----------
    source : string
            Raw expression text, e.g. 'p ^ ~(q -> r)'
    strict : bool
            When True an incomplete '->' or '<->' raises MalformedMultiCharOperator.
            When False the unmatched prefix is dropped and scanning resumes at the
            character that broke the match.
    """
    def __init__(self, source: str, strict: bool = True):
        self.source = source
        self.strict = strict
        self.idx = 0
        self.tokens = []
        self.variables = {}

    def end(self) -> bool:
        return self.idx >= len(self.source)

    def sym(self) -> str:
        return self.source[self.idx]

    def scan(self) -> ScanResult:
        while not self.end():
            self.scan_token()
        logger.debug(f"Scanned {len(self.tokens)} tokens, variables: {list(self.variables)}")
        return ScanResult(tuple(self.tokens), dict(self.variables))

    def scan_token(self) -> None:
        sym = self.sym()
        if sym.isspace():
            self.idx += 1
        elif sym in LITERALS:
            self.tokens.append(Token.literal(LITERALS[sym], sym))
            self.idx += 1
        elif sym in SINGLE_CHAR_TOKENS:
            kind = SINGLE_CHAR_TOKENS[sym]
            if kind in (TokenKind.LPAREN, TokenKind.RPAREN):
                self.tokens.append(Token.paren(kind, sym))
            else:
                self.tokens.append(Token.operator(kind, sym))
            self.idx += 1
        elif sym in MULTI_CHAR_TOKENS:
            self.multi_char_operator()
        else:
            self.variable()

    def multi_char_operator(self) -> None:
        start = self.idx
        lexeme, kind = MULTI_CHAR_TOKENS[self.sym()]
        matched = 0
        while matched < len(lexeme) and not self.end() and self.sym() == lexeme[matched]:
            matched += 1
            self.idx += 1

        if matched == len(lexeme):
            self.tokens.append(Token.operator(kind, lexeme))
            return

        partial = self.source[start:self.idx]
        if self.strict:
            raise MalformedMultiCharOperator(f"Incomplete operator {partial!r}, expected {lexeme!r}", start)
        logger.debug(f"Dropping incomplete operator {partial!r} at position {start}")

    def variable(self) -> None:
        name = self.sym()
        token = Token.variable(name)
        self.tokens.append(token)
        if name not in self.variables:
            self.variables[name] = token
        self.idx += 1


def scan(source: str, strict: bool = True) -> ScanResult:
    return Scanner(source, strict).scan()


def describe_tokens(tokens) -> str:
    return "\n".join(
        f"{i}. Type: {token.kind.name}, Lexeme: {token.lexeme}"
        for i, token in enumerate(tokens, start=1)
    )
