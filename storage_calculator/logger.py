import logging
import os
from logging.handlers import TimedRotatingFileHandler

from .config import get_settings

settings = get_settings()

logger = logging.getLogger("storage_calculator")
logger.setLevel(settings.log_level)

if settings.log_dir:
    os.makedirs(settings.log_dir, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=os.path.join(settings.log_dir, "app.log"),
        when='midnight',
        interval=1,
        backupCount=7,
        encoding='utf-8'
    )
else:
    handler = logging.StreamHandler()

formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
handler.setFormatter(formatter)

logger.addHandler(handler)
