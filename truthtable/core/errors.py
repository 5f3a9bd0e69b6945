COARSE_MESSAGE = "Invalid expression!"


class ExpressionError(ValueError):
    """Base class for every user-facing rejection of an expression."""
    kind = "InvalidExpression"

    def __init__(self, detail: str, position=None):
        self.detail = detail
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{detail}{where}")

    def render(self, coarse: bool = False) -> str:
        if coarse:
            return COARSE_MESSAGE
        return f"Invalid expression: {self.kind}: {self}"


class LexError(ExpressionError):
    kind = "LexError"


class MalformedMultiCharOperator(LexError):
    kind = "MalformedMultiCharOperator"


class UnbalancedParens(ExpressionError):
    kind = "UnbalancedParens"


class DanglingOperator(ExpressionError):
    kind = "DanglingOperator"


class EmptyOperand(ExpressionError):
    kind = "EmptyOperand"


class MissingOperator(ExpressionError):
    kind = "MissingOperator"


class UnboundVariable(ExpressionError):
    kind = "UnboundVariable"


class InternalContractError(AssertionError):
    """Raised when a postfix sequence that passed validation still misbehaves."""
