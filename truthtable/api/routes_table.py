from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from truthtable.config import TABLE_CONFIG, parse_flag
from truthtable.core import ExpressionError, TruthTable
from truthtable.utils import TableCache, get_logger

router = APIRouter()
logger = get_logger("Table API")


def error_response(status_code, message, kind=None):
    content = {"status": "error", "message": message}
    if kind:
        content["kind"] = kind
    return JSONResponse(status_code=status_code, content=content)


def invalid_expression(e: ExpressionError, coarse: bool):
    return error_response(400, e.render(coarse), e.kind)


def _options(data: dict):
    """Return (strict, coarse). Raises ValueError when "legacy" is not a flag value."""
    legacy = parse_flag(data.get("legacy", TABLE_CONFIG["legacy"]))
    coarse = legacy or TABLE_CONFIG["coarse_errors"]
    return not legacy, coarse


@router.post("/generate")
def generate_table(data: dict = Body(...)):
    formula_str = data.get("formula", None)  # 'p ^ ~(q -> r)' - required
    if not formula_str:
        return error_response(400, "Missing 'formula' field.")
    try:
        strict, coarse = _options(data)
    except ValueError as e:
        return error_response(400, f"Invalid 'legacy' field: {e}")
    try:
        table = TableCache.get(formula_str)
        if table is not None and table.strict == strict:
            logger.info(f"Cache hit for {formula_str}")
        else:
            table = TruthTable.from_expression(formula_str, strict)
            if len(table.variables) > TABLE_CONFIG["max_variables"]:
                return error_response(
                    413,
                    f"Too many variables ({len(table.variables)}), the limit is {TABLE_CONFIG['max_variables']}.",
                )
            TableCache.add_to_cache(formula_str, table)

        return {
            "status": "success",
            "formula": formula_str,
            "table": table.to_json(),
        }

    except ExpressionError as e:
        logger.info(f"Rejected {formula_str!r}: {e.kind}")
        return invalid_expression(e, coarse)
    except Exception as e:
        logger.exception("Error while generating truth table")
        return error_response(500, str(e))


@router.post("/evaluate")
def evaluate_formula(data: dict = Body(...)):
    formula_str = data.get("formula", None)
    values = data.get("values", None)  # 'p:1 q:0' or {"p": true, "q": false}
    if not formula_str:
        return error_response(400, "Missing 'formula' field.")
    if values is None:
        return error_response(400, "Missing 'values' field.")
    try:
        strict, coarse = _options(data)
    except ValueError as e:
        return error_response(400, f"Invalid 'legacy' field: {e}")
    try:
        table = TruthTable.from_expression(formula_str, strict)
        result = table.evaluate(values)
        return {
            "status": "success",
            "formula": formula_str,
            "values": values,
            "result": result,
        }
    except ExpressionError as e:
        return invalid_expression(e, coarse)
    except (ValueError, AttributeError) as e:
        return error_response(400, f"Invalid 'values' field: {e}")
    except Exception as e:
        logger.exception("Error while evaluating formula")
        return error_response(500, str(e))
