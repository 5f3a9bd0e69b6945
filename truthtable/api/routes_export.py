from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from truthtable.api.routes_table import error_response
from truthtable.export import table2tex, table2text
from truthtable.utils import TableCache, get_logger

router = APIRouter()
logger = get_logger("Export API")


def _cached_table(data: dict):
    formula_str = data.get("formula")
    if not formula_str:
        return None, error_response(400, "Missing 'formula' field.")
    table = TableCache.get(formula_str)
    if table is None:
        return None, JSONResponse(status_code=404, content={
            "status": "error",
            "message": f"Formula not found in cache: '{formula_str}'. Please call /generate first."
        })
    return table, None


@router.post("/text")
def export_text(data: dict = Body(...)):
    table, error = _cached_table(data)
    if error:
        return error
    try:
        return {
            "status": "success",
            "formula": table.expression,
            "text": table2text(table),
        }
    except Exception as e:
        logger.exception("Error while exporting text")
        return error_response(500, str(e))


@router.post("/latex")
def export_latex(data: dict = Body(...)):
    table, error = _cached_table(data)
    if error:
        return error
    try:
        return {
            "status": "success",
            "formula": table.expression,
            "latex": table2tex(table),
        }
    except Exception as e:
        logger.exception("Error while exporting LaTeX")
        return error_response(500, str(e))


@router.post("/json")
def export_json(data: dict = Body(...)):
    table, error = _cached_table(data)
    if error:
        return error
    try:
        return {
            "status": "success",
            "formula": table.expression,
            "table": table.to_json(),
        }
    except Exception as e:
        logger.exception("Error while exporting JSON")
        return error_response(500, str(e))
