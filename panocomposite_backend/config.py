# config.py
import logging
import os

# Prefixo fixo do resultado (PNG sem perdas, em data URL)
PNG_DATA_URL_PREFIX = "data:image/png;base64,"
DATA_URL_MARKER = "data:image"


def resolve_log_level(name: str, default: str = "INFO") -> str:
    """Nível desconhecido cai no padrão em vez de quebrar o basicConfig."""
    name = name.upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


LOG_LEVEL = resolve_log_level(os.getenv("PANOCOMPOSITE_LOG_LEVEL", "INFO"))
LOG_FORMAT = "%(levelname)s: %(message)s"

# Limites aplicados por requisição
MAX_PREVIEW_SIZE = int(os.getenv("PANOCOMPOSITE_MAX_PREVIEW_SIZE", "4096"))
MAX_LAYERS = int(os.getenv("PANOCOMPOSITE_MAX_LAYERS", "64"))
