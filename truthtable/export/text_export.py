TV = {False: "F", True: "T"}


def result_width(expression: str) -> int:
    return (len(expression) + 1) // 2


def table2text(table) -> str:
    """
    Terminal rendering: variable columns, a tab, then the result right-aligned
    under the expression text. Ends with an empty line.
    """
    width = result_width(table.expression)
    lines = ["".join(f"{name} " for name in table.names) + "\t" + table.expression, ""]
    for values, result in table.rows:
        cells = "".join(f"{TV[v]} " for v in values)
        lines.append(f"{cells}\t{TV[result]:>{width}}")
    lines.append("")
    return "\n".join(lines) + "\n"
