from fastapi import FastAPI
from fastapi.responses import JSONResponse
from typing import Optional
import logging
from quota_admin.core.config import ADMIN_TITLE, HISTORY_LIMIT, LOG_FILE, LOG_LEVEL, get_configs_file
from quota_admin.routes import version_management, web
from quota_admin.services.config_history import ConfigHistory, load_history_from_file

# Configure logging
handlers = [logging.StreamHandler()]  # Output to console
if LOG_FILE:
    handlers.append(logging.FileHandler(LOG_FILE))  # Also save to file

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S',
    handlers=handlers
)

def create_app(history: Optional[ConfigHistory] = None) -> FastAPI:
    """Create the admin app around a config history, loading the snapshot file when none is given"""
    if history is None:
        configs_file = get_configs_file()
        if configs_file:
            history = load_history_from_file(configs_file, limit=HISTORY_LIMIT)
        else:
            logging.warning("CONFIGS_FILE is not set, starting with an empty config history")
            history = ConfigHistory(limit=HISTORY_LIMIT)

    app = FastAPI(
        title=ADMIN_TITLE,
        description="Admin panel for quota service config versions",
        version="1.0.0",
        default_response_class=JSONResponse
    )
    app.state.config_history = history

    # Include routes
    app.include_router(web.router)
    app.include_router(version_management.router)
    return app

def run():
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8080)

if __name__ == "__main__":
    run()
