"""Fábrica de logger da aplicação.

Responsabilidades:
- Configurar loggers de forma padronizada
- Evitar duplicação de handlers
- Direcionar saída para stdout
"""

import logging
import sys

from bienestar.config.settings import Configuracoes

FORMATO_PADRAO = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FabricaLogger:
    """Responsável por configurar e fornecer instâncias de Logger.

    Responsabilidades:
    - Configuração única por nome de logger
    - Nível definido em Configuracoes.LOG_LEVEL
    - Handler único para console/Docker
    """

    @classmethod
    def configurar(cls, nome: str = "BIENESTAR_ESTUDIANTIL", nivel: str | None = None):
        """Configura o logger se ainda não estiver configurado.

        Parâmetros:
        - nome (str): nome do logger
        - nivel (str | None): nível explícito; usa a configuração quando nulo

        Retorno:
        - logging.Logger: logger configurado
        """
        logger_instancia = logging.getLogger(nome)

        if logger_instancia.handlers:
            return logger_instancia

        logger_instancia.setLevel(nivel or Configuracoes.LOG_LEVEL)

        handler_console = logging.StreamHandler(sys.stdout)
        handler_console.setFormatter(logging.Formatter(fmt=FORMATO_PADRAO, datefmt="%Y-%m-%d %H:%M:%S"))
        logger_instancia.addHandler(handler_console)
        logger_instancia.propagate = False

        return logger_instancia


logger = FabricaLogger.configurar()
