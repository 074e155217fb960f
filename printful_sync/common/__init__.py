# Common utilities
from .config_loader import (
    SyncSettings,
    load_api_token,
    load_base_url,
    load_config,
    load_sync_settings,
)
from .log_config import setup_logging
