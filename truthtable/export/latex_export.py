from truthtable.export.text_export import TV

LATEX_SYMBOLS = {
    "NOT": r"\neg",
    "AND": r"\land",
    "OR": r"\lor",
    "IMPLIES": r"\rightarrow",
    "IFF": r"\leftrightarrow",
}

LATEX_ESCAPES = {c: "\\" + c for c in "&%$#_{}"}


def _escape(text: str) -> str:
    return "".join(LATEX_ESCAPES.get(c, c) for c in text)


def expression2tex(tokens) -> str:
    parts = []
    for token in tokens:
        symbol = LATEX_SYMBOLS.get(token.kind.name)
        if symbol is not None:
            parts.append(symbol)
        elif token.kind.name == "LITERAL":
            parts.append(r"\top" if token.value else r"\bot")
        else:
            parts.append(_escape(token.lexeme))
    return " ".join(parts)


def table2tex(table, file_name=None) -> str:
    """Render a truth table as a LaTeX tabular. Writes it to file_name when given."""
    names = table.names
    columns = "c" * len(names) + "|c"
    header = " & ".join([f"${_escape(n)}$" for n in names] + [f"${expression2tex(table.tokens)}$"])
    lines = [
        f"\\begin{{tabular}}{{{columns}}}",
        f"{header} \\\\",
        "\\hline",
    ]
    for values, result in table.rows:
        cells = [TV[v] for v in values] + [TV[result]]
        lines.append(" & ".join(cells) + " \\\\")
    lines.append("\\end{tabular}")
    tex = "\n".join(lines) + "\n"

    if file_name:
        with open(file_name, "w") as f:
            f.write(tex)
    return tex
