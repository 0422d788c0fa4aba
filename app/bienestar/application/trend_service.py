"""Comparação entre avaliações já produzidas.

Responsabilidades:
- Classificar a tendência do total ao longo do histórico do estudante
- Detectar deterioração progressiva por pontuação
"""

import math
from typing import Optional, Sequence

from bienestar.config.settings import Configuracoes
from bienestar.util.rounding import arredondar

CHAVES_DETERIORO = ("stress", "burnout", "total")


def analisar_tendencia(totais: Sequence[float]) -> dict:
    """Compara a média da metade recente do histórico com a da metade anterior.

    Parâmetros:
    - totais (Sequence[float]): `scores.total` do estudante, do mais recente ao mais antigo

    Retorno:
    - dict: direction (insuficientes_datos, estable, empeorando ou mejorando),
      difference e confidence
    """
    totais = [float(total) for total in totais]
    if len(totais) < max(2, Configuracoes.TREND_MIN_EVALUATIONS):
        return {"direction": "insuficientes_datos", "difference": None, "confidence": 0}

    corte = math.ceil(len(totais) / 2)
    recentes, anteriores = totais[:corte], totais[corte:]
    diferenca = sum(recentes) / len(recentes) - sum(anteriores) / len(anteriores)

    if abs(diferenca) < Configuracoes.TREND_STABLE_MARGIN:
        direcao = "estable"
    elif diferenca > 0:
        direcao = "empeorando"
    else:
        direcao = "mejorando"

    return {
        "direction": direcao,
        "difference": arredondar(diferenca, 2),
        "confidence": min(100, len(totais) * 10),
    }


def detectar_deterioro(pontuacoes_atuais: dict, pontuacoes_anteriores: Optional[dict]) -> dict:
    """Lista os aumentos relevantes entre duas avaliações.

    Parâmetros:
    - pontuacoes_atuais (dict): scores da avaliação atual
    - pontuacoes_anteriores (dict | None): scores da avaliação anterior

    Retorno:
    - dict: detected, details, count
    """
    deterioracoes = []
    for chave in CHAVES_DETERIORO:
        if not pontuacoes_anteriores or chave not in pontuacoes_atuais or chave not in pontuacoes_anteriores:
            continue
        diferenca = float(pontuacoes_atuais[chave]) - float(pontuacoes_anteriores[chave])
        if diferenca >= Configuracoes.DETERIORATION_THRESHOLD:
            deterioracoes.append(f"{chave}: +{diferenca:.1f} puntos")

    return {
        "detected": bool(deterioracoes),
        "details": ", ".join(deterioracoes) if deterioracoes else None,
        "count": len(deterioracoes),
    }
