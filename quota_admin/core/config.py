import os
from pathlib import Path
from typing import Optional

# Environment settings
ENV = os.getenv("ENV", "development")  # 'development' or 'production'
IS_PRODUCTION = ENV == "production"

# Logging settings
def get_log_level(is_production: bool = IS_PRODUCTION) -> str:
    """Get the log level from environment variables, quieter in production."""
    return os.getenv("LOG_LEVEL", "WARNING" if is_production else "INFO").upper()

LOG_LEVEL = get_log_level()
LOG_FILE = os.getenv("LOG_FILE")  # optional, console only when unset

# Panel settings
ADMIN_TITLE = os.getenv("ADMIN_TITLE", "Quota Service Configs")
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "50"))

# Paths
BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"

def get_configs_file() -> Optional[Path]:
    """Get the config history snapshot path from environment variables."""
    configs_file = os.getenv("CONFIGS_FILE")
    if not configs_file:
        return None
    return Path(configs_file).expanduser()
