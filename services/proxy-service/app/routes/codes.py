"""
Reference code routes
"""

from fastapi import APIRouter, Request

from app.exceptions import InternalError

router = APIRouter()


@router.get("/codes")
async def get_codes(request: Request):
    """Bundled facility class, province and district codes"""
    code_table = request.app.state.code_table
    if code_table.is_err:
        raise InternalError(code_table.error)
    return code_table.value
