"""Política de decisão de alertas.

Responsabilidades:
- Avaliar as faixas de precedência (ALTO individual, MEDIO individual, GERAL)
- Interromper a avaliação na primeira faixa que gerar alertas
- Eleger o alerta principal da decisão
"""

from typing import List, Optional

from bienestar.application.risk_classifier import ClassificadorRisco
from bienestar.domain.evaluation import NivelRisco
from bienestar.util.rounding import arredondar_inteiro

FAIXA_ALTO_INDIVIDUAL = "ALTO_INDIVIDUAL"
FAIXA_MEDIO_INDIVIDUAL = "MEDIO_INDIVIDUAL"
FAIXA_GERAL = "GENERAL"


def _alerta(codigo: str, tipo: str, severidade: NivelRisco, mensagem: str, faixa: str) -> dict:
    return {
        "code": codigo,
        "type": tipo,
        "severity": severidade.value,
        "message": mensagem,
        "requiresIntervention": severidade is NivelRisco.ALTO,
        "tier": faixa,
    }


class PoliticaAlertas:
    """Decide se uma avaliação dispara alerta para a coordenação.

    Responsabilidades:
    - Gerar alertas de estresse e burnout altos (intervenção requerida)
    - Gerar alertas moderados somente quando não há alerta alto
    - Usar o risco geral como rede de segurança quando nada mais disparou
    """

    def __init__(self, classificador: Optional[ClassificadorRisco] = None):
        self.classificador = classificador or ClassificadorRisco()

    def decidir_alerta(self, risco_geral, estres_ajustado: float, burnout_ajustado: float) -> dict:
        """Aplica as faixas de precedência em ordem estrita.

        Parâmetros:
        - risco_geral (NivelRisco | str): classificação do total
        - estres_ajustado (float): pontuação ajustada de estresse
        - burnout_ajustado (float): pontuação ajustada de burnout

        Retorno:
        - dict: needed, primary (quando houver) e all
        """
        risco_geral = NivelRisco(risco_geral)
        nivel_estres = self.classificador.classificar(estres_ajustado)
        nivel_burnout = self.classificador.classificar(burnout_ajustado)

        alertas = self._faixa_alto(nivel_estres, nivel_burnout, estres_ajustado, burnout_ajustado)
        if not alertas:
            alertas = self._faixa_medio(nivel_estres, nivel_burnout)
        if not alertas:
            alertas = self._faixa_geral(risco_geral)

        if not alertas:
            return {"needed": False, "all": []}

        principal = next((a for a in alertas if a["severity"] == NivelRisco.ALTO.value), alertas[0])
        return {"needed": True, "primary": principal, "all": alertas}

    @staticmethod
    def _faixa_alto(nivel_estres, nivel_burnout, estres_ajustado, burnout_ajustado) -> List[dict]:
        alertas = []
        if nivel_estres is NivelRisco.ALTO:
            alertas.append(
                _alerta(
                    "ESTRES_ALTO",
                    "Estrés Alto",
                    NivelRisco.ALTO,
                    f"Niveles críticos de estrés detectados ({arredondar_inteiro(estres_ajustado)}/10)",
                    FAIXA_ALTO_INDIVIDUAL,
                )
            )
        if nivel_burnout is NivelRisco.ALTO:
            alertas.append(
                _alerta(
                    "BURNOUT_ALTO",
                    "Burnout Alto",
                    NivelRisco.ALTO,
                    f"Niveles críticos de burnout detectados ({arredondar_inteiro(burnout_ajustado)}/10)",
                    FAIXA_ALTO_INDIVIDUAL,
                )
            )
        return alertas

    @staticmethod
    def _faixa_medio(nivel_estres, nivel_burnout) -> List[dict]:
        alertas = []
        if nivel_estres is NivelRisco.MEDIO:
            alertas.append(
                _alerta(
                    "ESTRES_MODERADO",
                    "Estrés Moderado",
                    NivelRisco.MEDIO,
                    "Signos de estrés moderado detectados - seguimiento recomendado",
                    FAIXA_MEDIO_INDIVIDUAL,
                )
            )
        if nivel_burnout is NivelRisco.MEDIO:
            alertas.append(
                _alerta(
                    "BURNOUT_MODERADO",
                    "Burnout Moderado",
                    NivelRisco.MEDIO,
                    "Signos de burnout moderado detectados - seguimiento recomendado",
                    FAIXA_MEDIO_INDIVIDUAL,
                )
            )
        return alertas

    @staticmethod
    def _faixa_geral(risco_geral: NivelRisco) -> List[dict]:
        if risco_geral is not NivelRisco.ALTO:
            return []
        return [
            _alerta(
                "RIESGO_ALTO_GENERAL",
                "Riesgo Alto General",
                NivelRisco.ALTO,
                "Múltiples factores de riesgo psicosocial detectados. Se sugiere evaluación profesional.",
                FAIXA_GERAL,
            )
        ]
