from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from quota_admin.core.config import ADMIN_TITLE
from quota_admin.core.templates import templates
from quota_admin.services.config_history import ConfigHistory, get_history

# Create router instance
router = APIRouter()

@router.get("/")
async def read_root():
    return RedirectResponse(url="/configs")

@router.get("/configs", response_class=HTMLResponse)
async def configs_page(request: Request, history: ConfigHistory = Depends(get_history)):
    return templates.TemplateResponse(request, "config_history.html", {
        "title": ADMIN_TITLE,
        "rows": history.views()
    })

@router.get("/configs/{version}", response_class=HTMLResponse)
async def config_row(version: int, history: ConfigHistory = Depends(get_history)):
    """Render the row of a single config version"""
    try:
        row = history.view(version)
    except KeyError:
        raise HTTPException(status_code=404, detail="Version not found")
    return HTMLResponse(row.render())
