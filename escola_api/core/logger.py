"""
Logging centralizado da API.

Todos os módulos pedem o logger por aqui em vez de usar print, assim o
formato e o nível ficam iguais em qualquer ponto da aplicação.
"""

import logging
import sys

from escola_api.core.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Retorna um logger com formatação padronizada.

    Args:
        name (str): nome do módulo que está logando (geralmente __name__).

    Returns:
        logging.Logger: logger configurado.
    """
    logger = logging.getLogger(name)

    # Evita handlers duplicados quando o módulo é importado mais de uma vez
    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())

        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger
