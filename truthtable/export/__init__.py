import json

from .text_export import table2text, result_width
from .latex_export import table2tex, expression2tex


def table2json(table, indent=2) -> str:
    return json.dumps(table.to_json(), indent=indent)


RENDERERS = {
    "text": table2text,
    "json": table2json,
    "latex": table2tex,
}

__all__ = ["table2text", "result_width", "table2tex", "expression2tex", "table2json", "RENDERERS"]
