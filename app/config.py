from .logging_config import get_logger, get_logging_config

class AppConfig:
    def __init__(self):
        self.logging_config = get_logging_config()

        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
