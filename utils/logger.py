import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional


def configure_logging(logging_config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Применить dictConfig из конфигурации, иначе базовая настройка в stdout"""
    if logging_config:
        for handler in logging_config.get('handlers', {}).values():
            filename = handler.get('filename')
            if filename:
                Path(filename).parent.mkdir(exist_ok=True, parents=True)
        logging.config.dictConfig(logging_config)
    else:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    # Отключаем излишне подробные логи httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram.ext").setLevel(logging.WARNING)
    return logging.getLogger("moodjournal")
