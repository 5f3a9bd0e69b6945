from typing import Iterator, Tuple

from truthtable.core.evaluator import bind_variables, evaluate, parse_values
from truthtable.core.postfix import to_postfix
from truthtable.core.scanner import scan
from truthtable.core.validator import validate
from truthtable.utils import get_logger

logger = get_logger("table")


def assignments(n: int) -> Iterator[Tuple[bool, ...]]:
    """
    Yield the 2^n assignments in table order.
    Row i gives variable j (most significant first) the value not bit (n-1-j) of i,
    so the first row is all True and the last row all False.
    """
    for i in range(1 << n):
        yield tuple(not ((i >> (n - 1 - j)) & 1) for j in range(n))


class TruthTable:
    """
    Truth table of one propositional expression.
    ----------
    Parameters
    ----------
    expression : string
            Source text as typed by the user.
    tokens : tuple of Token
            Infix tokens from the scanner.
    variables : dict
            Variable name -> Token in first-occurrence order; defines column order.
    postfix : tuple of Token
            Validated expression in postfix order.
    strict : bool
            Whether the expression was scanned in strict mode.
    """
    def __init__(self, expression, tokens, variables, postfix, strict=True):
        self.expression = expression
        self.strict = strict
        self.tokens = tokens
        self.variables = variables
        self.postfix = postfix
        self._rows = None

    @classmethod
    def from_expression(cls, expression: str, strict: bool = True) -> "TruthTable":
        tokens, variables = scan(expression, strict)
        validate(tokens)
        postfix = to_postfix(tokens)
        return cls(expression, tokens, variables, postfix, strict)

    @property
    def names(self):
        return list(self.variables)

    def evaluate(self, values) -> bool:
        """Evaluate under one assignment given as a dict or a 'p:1 q:0' string."""
        return evaluate(self.postfix, bind_variables(self.variables, parse_values(values)))

    def iter_rows(self) -> Iterator[Tuple[Tuple[bool, ...], bool]]:
        names = self.names
        for values in assignments(len(names)):
            bound = bind_variables(self.variables, dict(zip(names, values)))
            yield values, evaluate(self.postfix, bound)

    @property
    def rows(self):
        if self._rows is None:
            self._rows = list(self.iter_rows())
            logger.debug(f"Built {len(self._rows)} rows for {self.expression!r}")
        return self._rows

    @property
    def results(self):
        return [result for _, result in self.rows]

    def to_json(self):
        names = self.names
        return {
            "expression": self.expression,
            "variables": names,
            "postfix": [t.lexeme for t in self.postfix],
            "rows": [
                {"values": dict(zip(names, values)), "result": result}
                for values, result in self.rows
            ],
        }

    def __len__(self):
        return 1 << len(self.variables)

    def __repr__(self):
        return f"TruthTable({self.expression!r}, variables={self.names})"


def generate_table(expression: str, strict: bool = True) -> TruthTable:
    return TruthTable.from_expression(expression, strict)


def evaluate_assignment(expression: str, values, strict: bool = True) -> bool:
    return TruthTable.from_expression(expression, strict).evaluate(values)
