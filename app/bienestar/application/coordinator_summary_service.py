"""Resumos agregados para a coordenação.

Responsabilidades:
- Consolidar a distribuição de risco pela avaliação mais recente de cada estudante
- Contar estudantes com alerta pendente na última avaliação
- Montar o painel individual com médias, tendência e limite semanal
"""

from datetime import datetime
from typing import Optional

import pandas as pd

from bienestar.application.trend_service import analisar_tendencia
from bienestar.application.weekly_limit import inicio_semana, verificar_limite_semanal
from bienestar.domain.evaluation import NivelRisco
from bienestar.infrastructure.data.evaluation_repository import RepositorioAvaliacoes


class ServicoResumoCoordenacao:
    """Agrega o histórico de avaliações para os painéis."""

    def __init__(self, repositorio: Optional[RepositorioAvaliacoes] = None):
        self.repositorio = repositorio or RepositorioAvaliacoes()

    def gerar_resumo(self) -> dict:
        """Gera o resumo geral da coordenação.

        Retorno:
        - dict: totais, distribuição de risco, alertas e médias
        """
        dados = self.repositorio.carregar_avaliacoes()
        niveis = [nivel.value for nivel in NivelRisco]

        if dados.empty:
            return {
                "total_evaluations": 0,
                "students_evaluated": 0,
                "risk_distribution": {nivel: 0 for nivel in niveis},
                "risk_percentages": {nivel: 0.0 for nivel in niveis},
                "students_with_alert": 0,
                "average_stress": 0.0,
                "average_burnout": 0.0,
            }

        ultimas = dados.groupby("student_id", sort=False).tail(1)
        total_estudantes = int(len(ultimas))
        distribuicao = ultimas["risk_level"].value_counts().to_dict()

        if "alert_needed" in ultimas.columns:
            com_alerta = int(ultimas["alert_needed"].fillna(False).astype(bool).sum())
        else:
            com_alerta = 0

        return {
            "total_evaluations": int(len(dados)),
            "students_evaluated": total_estudantes,
            "risk_distribution": {nivel: int(distribuicao.get(nivel, 0)) for nivel in niveis},
            "risk_percentages": {
                nivel: round((distribuicao.get(nivel, 0) / total_estudantes) * 100.0, 2) for nivel in niveis
            },
            "students_with_alert": com_alerta,
            "average_stress": round(float(ultimas["scores.stress"].mean()), 1),
            "average_burnout": round(float(ultimas["scores.burnout"].mean()), 1),
        }

    def gerar_painel_estudante(self, id_estudante: str, agora: Optional[datetime] = None) -> dict:
        """Monta o painel individual de um estudante.

        Parâmetros:
        - id_estudante (str): identificador do estudante
        - agora (datetime | None): instante de referência do limite semanal

        Retorno:
        - dict: estatísticas, tendência, limite semanal e última avaliação
        """
        agora = agora or datetime.now()
        historico = self.repositorio.obter_avaliacoes_estudante(id_estudante)

        if historico.empty:
            return {
                "student_id": str(id_estudante).strip(),
                "total_evaluations": 0,
                "average_stress": 0.0,
                "average_burnout": 0.0,
                "trend": analisar_tendencia([]),
                "weekly_limit": verificar_limite_semanal(0, agora),
                "latest": None,
            }

        totais = historico["scores.total"].tolist()
        contagem_semana = int((historico["timestamp"] >= pd.Timestamp(inicio_semana(agora))).sum())
        ultima = historico.iloc[0]

        return {
            "student_id": str(id_estudante).strip(),
            "total_evaluations": int(len(historico)),
            "average_stress": round(float(historico["scores.stress"].mean()), 1),
            "average_burnout": round(float(historico["scores.burnout"].mean()), 1),
            "trend": analisar_tendencia(totais),
            "weekly_limit": verificar_limite_semanal(contagem_semana, agora),
            "latest": {
                "evaluation_id": ultima["evaluation_id"],
                "timestamp": ultima["timestamp"].isoformat(),
                "risk_level": ultima["risk_level"],
                "total": float(ultima["scores.total"]),
            },
        }
