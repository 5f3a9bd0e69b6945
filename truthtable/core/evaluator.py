from truthtable.core.errors import InternalContractError, UnboundVariable
from truthtable.core.token import BINARY_KINDS, TokenKind

BINARY_OPERATIONS = {
    TokenKind.AND: lambda left, right: left and right,
    TokenKind.OR: lambda left, right: left or right,
    TokenKind.IMPLIES: lambda left, right: (not left) or right,
    TokenKind.IFF: lambda left, right: left == right,
}

# Every binary kind needs an operation; a new operator must be added here too.
assert set(BINARY_OPERATIONS) == set(BINARY_KINDS), "Evaluator is missing a binary operation"


class OperandStack:
    """Boolean stack whose pop fails loudly instead of reading past the bottom."""
    def __init__(self):
        self.items = []

    def push(self, value: bool) -> None:
        self.items.append(value)

    def pop(self) -> bool:
        if not self.items:
            raise InternalContractError("Operand stack underflow")
        return self.items.pop()

    def result(self) -> bool:
        if len(self.items) != 1:
            raise InternalContractError(f"Expected one value on the stack, found {len(self.items)}")
        return self.items[0]


def evaluate(postfix, variables) -> bool:
    """
    Evaluate a postfix token sequence.
    ----------
    Parameters
    ----------
    postfix : sequence of Token
            Output of to_postfix for a validated expression.
    variables : dict
            Variable name -> bound Token (see Token.bind) for this assignment.
    """
    stack = OperandStack()
    for token in postfix:
        kind = token.kind
        if kind is TokenKind.LITERAL:
            stack.push(token.value)
        elif kind is TokenKind.VARIABLE:
            bound = variables.get(token.lexeme)
            if bound is None or bound.value is None:
                raise UnboundVariable(f"Variable {token.lexeme!r} has no value")
            stack.push(bound.value)
        elif kind is TokenKind.NOT:
            stack.push(not stack.pop())
        elif kind in BINARY_OPERATIONS:
            right = stack.pop()
            left = stack.pop()
            stack.push(BINARY_OPERATIONS[kind](left, right))
        else:
            raise InternalContractError(f"Unexpected token in postfix sequence: {token!r}")
    return stack.result()


def parse_values(values) -> dict:
    """Accept {'p': 1, 'q': 0} or the string form 'p:1 q:0'."""
    if isinstance(values, str):
        pairs = [x.split(":") for x in values.split()]
        if any(len(pair) != 2 for pair in pairs):
            raise ValueError(f"Malformed assignment string: {values!r}")
        values = {k: v for [k, v] in pairs}
    return {name: _to_bool(value) for name, value in values.items()}


def _to_bool(value) -> bool:
    # Same spellings are accepted whether values arrive as a string or as a mapping.
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().upper()
        if normalized in ("1", "T", "TRUE"):
            return True
        if normalized in ("0", "F", "FALSE"):
            return False
    raise ValueError(f"Not a truth value: {value!r}")


def bind_variables(variables, values) -> dict:
    """Return a copy of the registry with each named variable bound to its value."""
    return {
        name: token.bind(values[name]) if name in values else token
        for name, token in variables.items()
    }
