from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
def redirect_to_ui() -> RedirectResponse:
    return RedirectResponse(url="/static/index.html", status_code=status.HTTP_302_FOUND)
