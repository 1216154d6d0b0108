from fastapi import APIRouter, HTTPException, Depends
from quota_admin.schemas.config_version import resolve_labels
from quota_admin.services.config_history import ConfigHistory, get_history

# Create router instance
router = APIRouter()

@router.get("/api/configs")
async def get_config_versions(history: ConfigHistory = Depends(get_history)):
    """List all config versions, newest first, with their display labels"""
    return {
        "configs": [record.model_dump() for record in history.records],
        "labels": {record.key: resolve_labels(record).model_dump() for record in history.records},
        "selected": history.selected_version
    }

@router.post("/api/configs/{version}/select")
async def select_config_version(version: int, history: ConfigHistory = Depends(get_history)):
    """Mark a config version as selected"""
    try:
        history.click(version)
    except KeyError:
        raise HTTPException(status_code=404, detail="Version not found")
    return {"success": True, "selected": history.selected.model_dump()}
