"""Pontuação composta e classificação de risco.

Responsabilidades:
- Combinar as pontuações ajustadas com os pesos de categoria
- Classificar qualquer pontuação em BAJO/MEDIO/ALTO
"""

from typing import Dict, Optional

from bienestar.config.settings import Configuracoes
from bienestar.domain.evaluation import NivelRisco
from bienestar.util.rounding import arredondar


class ClassificadorRisco:
    """Classificador por faixas fixas.

    Faixas: BAJO em [0, 4.0], MEDIO em (4.0, 6.0], ALTO em (6.0, 10].
    """

    def __init__(
        self,
        limite_baixo: Optional[float] = None,
        limite_medio: Optional[float] = None,
        pesos_categoria: Optional[Dict[str, float]] = None,
    ):
        self.limite_baixo = Configuracoes.RISK_LOW_MAX if limite_baixo is None else float(limite_baixo)
        self.limite_medio = Configuracoes.RISK_MEDIUM_MAX if limite_medio is None else float(limite_medio)
        pesos = Configuracoes.CATEGORY_WEIGHTS if pesos_categoria is None else pesos_categoria
        self.pesos_categoria = {"ESTRES": float(pesos["ESTRES"]), "BURNOUT": float(pesos["BURNOUT"])}

    def classificar(self, pontuacao: float) -> NivelRisco:
        """Classifica uma pontuação.

        Parâmetros:
        - pontuacao (float): pontuação em [0, 10]

        Retorno:
        - NivelRisco: nível correspondente
        """
        if pontuacao > self.limite_medio:
            return NivelRisco.ALTO
        if pontuacao > self.limite_baixo:
            return NivelRisco.MEDIO
        return NivelRisco.BAJO

    def calcular_total(self, estres_ajustado: float, burnout_ajustado: float) -> float:
        """Média ponderada das categorias, arredondada a uma casa."""
        peso_estres = self.pesos_categoria["ESTRES"]
        peso_burnout = self.pesos_categoria["BURNOUT"]
        total = (estres_ajustado * peso_estres + burnout_ajustado * peso_burnout) / (peso_estres + peso_burnout)
        return arredondar(total, 1)

    def compor_e_classificar(self, estres_ajustado: float, burnout_ajustado: float) -> dict:
        """Calcula o total e as três classificações independentes.

        Parâmetros:
        - estres_ajustado (float): pontuação ajustada de estresse
        - burnout_ajustado (float): pontuação ajustada de burnout

        Retorno:
        - dict: total, riskStress, riskBurnout, riskOverall
        """
        total = self.calcular_total(estres_ajustado, burnout_ajustado)
        return {
            "total": total,
            "riskStress": self.classificar(estres_ajustado),
            "riskBurnout": self.classificar(burnout_ajustado),
            "riskOverall": self.classificar(total),
        }
