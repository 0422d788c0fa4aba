"""Geração de análise e recomendações da avaliação.

Responsabilidades:
- Montar o resumo por nível de risco geral
- Identificar o padrão dominante (estresse, burnout ou equilibrado)
- Listar fatores de risco e fortalezas
- Montar recomendações ordenadas por prioridade
"""

from typing import List, Optional

from bienestar.config.settings import Configuracoes
from bienestar.domain.evaluation import NivelRisco
from bienestar.util.rounding import arredondar_inteiro

RESUMOS = {
    NivelRisco.ALTO: (
        "Tu evaluación indica un nivel de riesgo ALTO ({media}/10). Es importante que busques apoyo "
        "profesional y implementes estrategias de manejo inmediatas.",
        "urgent",
    ),
    NivelRisco.MEDIO: (
        "Tu evaluación muestra un nivel de riesgo MEDIO ({media}/10). Es recomendable implementar técnicas "
        "de manejo del estrés y monitorear tu bienestar.",
        "moderate",
    ),
    NivelRisco.BAJO: (
        "Tu evaluación indica un nivel de riesgo BAJO ({media}/10). Mantén tus hábitos actuales de autocuidado.",
        "low",
    ),
}

PADROES = {
    "stress_dominant": (
        "El estrés es tu principal desafío actual",
        "Enfócate en técnicas de relajación y manejo del tiempo",
    ),
    "burnout_dominant": (
        "El agotamiento emocional es tu principal preocupación",
        "Busca reconectar con tus motivaciones y considera apoyo psicológico",
    ),
    "balanced_risk": (
        "Presentas niveles similares de estrés y burnout",
        "Un enfoque integral de bienestar será más efectivo",
    ),
}

RECOMENDACOES_GERAIS = {
    NivelRisco.ALTO: (
        "urgent",
        "Buscar apoyo profesional",
        "Considera contactar al servicio de bienestar estudiantil o un psicólogo",
    ),
    NivelRisco.MEDIO: (
        "preventive",
        "Implementar rutina de autocuidado",
        "Establece horarios regulares para descanso y actividades placenteras",
    ),
    NivelRisco.BAJO: (
        "maintenance",
        "Mantener hábitos actuales",
        "Continúa con tus estrategias actuales de manejo del estrés",
    ),
}


def _recomendacao(categoria: str, titulo: str, descricao: str, prioridade: int) -> dict:
    return {"category": categoria, "title": titulo, "description": descricao, "priority": prioridade}


class GeradorAnalise:
    """Produz textos de análise e recomendações a partir das pontuações."""

    @staticmethod
    def gerar_analise(
        estres_ajustado: float,
        burnout_ajustado: float,
        total: float,
        risco_geral,
        perfil: Optional[dict],
    ) -> dict:
        """Gera a análise completa da avaliação.

        Parâmetros:
        - estres_ajustado (float): pontuação ajustada de estresse
        - burnout_ajustado (float): pontuação ajustada de burnout
        - total (float): pontuação composta
        - risco_geral (NivelRisco | str): risco geral
        - perfil (dict | None): perfil do estudante

        Retorno:
        - dict: summary, patterns, riskFactors, strengths
        """
        risco_geral = NivelRisco(risco_geral)
        return {
            "summary": GeradorAnalise.gerar_resumo(risco_geral, estres_ajustado, burnout_ajustado),
            "patterns": GeradorAnalise.identificar_padroes(estres_ajustado, burnout_ajustado),
            "riskFactors": GeradorAnalise.identificar_fatores_risco(estres_ajustado, burnout_ajustado, perfil),
            "strengths": GeradorAnalise.identificar_fortalezas(estres_ajustado, burnout_ajustado, total),
        }

    @staticmethod
    def gerar_resumo(risco_geral, estres_ajustado: float, burnout_ajustado: float) -> dict:
        modelo, prioridade = RESUMOS[NivelRisco(risco_geral)]
        media = arredondar_inteiro((estres_ajustado + burnout_ajustado) / 2)
        return {"message": modelo.format(media=media), "priority": prioridade}

    @staticmethod
    def identificar_padroes(estres_ajustado: float, burnout_ajustado: float) -> List[dict]:
        margem = Configuracoes.PATTERN_MARGIN
        if estres_ajustado > burnout_ajustado + margem:
            tipo = "stress_dominant"
        elif burnout_ajustado > estres_ajustado + margem:
            tipo = "burnout_dominant"
        else:
            tipo = "balanced_risk"
        descricao, recomendacao = PADROES[tipo]
        return [{"type": tipo, "description": descricao, "recommendation": recomendacao}]

    @staticmethod
    def identificar_fatores_risco(estres_ajustado: float, burnout_ajustado: float, perfil: Optional[dict]) -> List[str]:
        limite = Configuracoes.RISK_FACTOR_THRESHOLD
        fatores = []
        if estres_ajustado >= limite:
            fatores.append("Niveles altos de estrés académico")
        if burnout_ajustado >= limite:
            fatores.append("Agotamiento emocional significativo")
        semestre = (perfil or {}).get("semester")
        if semestre is not None and semestre >= Configuracoes.FINAL_SEMESTER:
            fatores.append("Presión adicional por estar en semestres finales")
        return fatores

    @staticmethod
    def identificar_fortalezas(estres_ajustado: float, burnout_ajustado: float, total: float) -> List[str]:
        limite = Configuracoes.STRENGTH_THRESHOLD
        fortalezas = []
        if estres_ajustado <= limite:
            fortalezas.append("Buen manejo del estrés académico")
        if burnout_ajustado <= limite:
            fortalezas.append("Mantiene motivación y energía en los estudios")
        if total <= limite:
            fortalezas.append("Excelente equilibrio psicológico general")
        return fortalezas

    @staticmethod
    def gerar_recomendacoes(risco_geral, estres_ajustado: float, burnout_ajustado: float) -> List[dict]:
        """Monta recomendações e ordena por prioridade (1 = mais urgente).

        Parâmetros:
        - risco_geral (NivelRisco | str): risco geral
        - estres_ajustado (float): pontuação ajustada de estresse
        - burnout_ajustado (float): pontuação ajustada de burnout

        Retorno:
        - list[dict]: recomendações em ordem estável de prioridade
        """
        limite = Configuracoes.RISK_FACTOR_THRESHOLD
        limite_urgente = Configuracoes.URGENT_RECOMMENDATION_THRESHOLD

        categoria, titulo, descricao = RECOMENDACOES_GERAIS[NivelRisco(risco_geral)]
        recomendacoes = [_recomendacao(categoria, titulo, descricao, 1)]

        if estres_ajustado >= limite:
            recomendacoes.append(
                _recomendacao(
                    "stress_management",
                    "Técnicas de respiración",
                    "Practica ejercicios de respiración profunda 3 veces al día",
                    1 if estres_ajustado >= limite_urgente else 2,
                )
            )
            recomendacoes.append(
                _recomendacao(
                    "time_management",
                    "Organización del tiempo",
                    "Utiliza técnicas como Pomodoro para mejorar la productividad",
                    2,
                )
            )

        if burnout_ajustado >= limite:
            recomendacoes.append(
                _recomendacao(
                    "motivation",
                    "Reconectar con objetivos",
                    "Reflexiona sobre tus metas académicas y personales",
                    1 if burnout_ajustado >= limite_urgente else 2,
                )
            )
            recomendacoes.append(
                _recomendacao(
                    "social_support",
                    "Apoyo social",
                    "Conecta con compañeros, familia o amigos para obtener apoyo emocional",
                    2,
                )
            )

        return sorted(recomendacoes, key=lambda r: r["priority"])
