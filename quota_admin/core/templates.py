from fastapi.templating import Jinja2Templates

from quota_admin.core.config import TEMPLATES_DIR

# Templates for rendering HTML pages and row fragments
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
