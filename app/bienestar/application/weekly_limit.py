"""Política de limite semanal de avaliações.

Responsabilidades:
- Calcular o início da semana corrente (domingo, 00:00)
- Informar se o estudante ainda pode enviar avaliação
"""

from datetime import datetime, timedelta
from typing import Optional

from bienestar.config.settings import Configuracoes


def inicio_semana(agora: Optional[datetime] = None) -> datetime:
    """Retorna o domingo 00:00 da semana de `agora`."""
    agora = agora or datetime.now()
    dias_desde_domingo = (agora.weekday() + 1) % 7
    domingo = agora - timedelta(days=dias_desde_domingo)
    return domingo.replace(hour=0, minute=0, second=0, microsecond=0)


def verificar_limite_semanal(contagem_semana: int, agora: Optional[datetime] = None) -> dict:
    """Avalia o limite semanal a partir da contagem já persistida.

    Parâmetros:
    - contagem_semana (int): avaliações do estudante desde o início da semana
    - agora (datetime | None): instante de referência

    Retorno:
    - dict: canEvaluate, reason, nextAvailable
    """
    limite = Configuracoes.WEEKLY_EVALUATION_LIMIT
    pode_avaliar = contagem_semana < limite
    if pode_avaliar:
        return {"canEvaluate": True, "reason": None, "nextAvailable": None}

    proxima_semana = inicio_semana(agora) + timedelta(days=7)
    return {
        "canEvaluate": False,
        "reason": f"Has alcanzado el límite de evaluaciones por semana ({limite})",
        "nextAvailable": proxima_semana.isoformat(),
    }
