"""Fatores de ajuste pelo perfil do estudante.

Responsabilidades:
- Consultar o multiplicador do semestre
- Compor fatores de forma multiplicativa
- Manter a pontuação ajustada em [0, 10]
"""

from typing import Dict, Optional

from bienestar.config.settings import Configuracoes


class AplicadorAjustes:
    """Aplica os fatores de contexto sobre a pontuação de uma categoria.

    Responsabilidades:
    - Resolver os fatores aplicáveis ao perfil
    - Multiplicar a pontuação e limitar ao intervalo válido
    """

    def __init__(self, fatores_semestre: Optional[Dict[int, float]] = None):
        """Inicializa o aplicador.

        Parâmetros:
        - fatores_semestre (dict | None): semestre -> multiplicador
        """
        tabela = Configuracoes.SEMESTER_FACTORS if fatores_semestre is None else fatores_semestre
        self.fatores_semestre = {int(semestre): float(fator) for semestre, fator in tabela.items()}

    def obter_fatores_aplicados(self, perfil: Optional[dict]) -> dict:
        """Lista os fatores que incidem sobre o perfil.

        Parâmetros:
        - perfil (dict | None): perfil com `semester` e `career`

        Retorno:
        - dict: nome do fator -> {value, factor}; vazio quando nenhum se aplica
        """
        aplicados = {}
        semestre = (perfil or {}).get("semester")
        if semestre is not None and semestre in self.fatores_semestre:
            aplicados["semester"] = {"value": semestre, "factor": self.fatores_semestre[semestre]}
        # Carreira e carga horária entram aqui quando tiverem tabela própria.
        return aplicados

    def aplicar(self, pontuacao: float, perfil: Optional[dict]) -> float:
        """Aplica os fatores e limita o resultado a [0, 10].

        Parâmetros:
        - pontuacao (float): pontuação da categoria
        - perfil (dict | None): perfil do estudante

        Retorno:
        - float: pontuação ajustada, sem arredondamento
        """
        ajustada = float(pontuacao)
        for fator in self.obter_fatores_aplicados(perfil).values():
            ajustada *= fator["factor"]
        return min(Configuracoes.SCORE_MAX, max(0.0, ajustada))
