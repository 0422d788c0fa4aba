"""Pontuação ponderada por categoria.

Responsabilidades:
- Validar respostas e pesos antes de qualquer cálculo
- Incorporar o multiplicador das questões de alto impacto nos pesos
- Calcular a média ponderada e normalizar para a escala 0-10
"""

import math
from numbers import Real
from typing import Dict, Iterable, List, Optional, Sequence

from bienestar.config.settings import Configuracoes
from bienestar.domain.errors import ErroEntradaInvalida
from bienestar.domain.evaluation import Categoria
from bienestar.util.rounding import arredondar


class PontuadorCategoria:
    """Converte as respostas de uma categoria em pontuação 0-10.

    Responsabilidades:
    - Resolver pesos ausentes para o peso padrão
    - Calcular pesos efetivos (peso base x multiplicador de alto impacto)
    - Produzir o detalhe por questão como rastro do cálculo

    O núcleo `pontuar_com_pesos_efetivos` não conhece posições de questões:
    o destaque de alto impacto chega embutido no peso.
    """

    def __init__(
        self,
        questoes_alto_impacto: Optional[Dict[str, Iterable[int]]] = None,
        multiplicador_alto_impacto: Optional[float] = None,
    ):
        """Inicializa o pontuador.

        Parâmetros:
        - questoes_alto_impacto (dict | None): categoria -> posições (base 1)
        - multiplicador_alto_impacto (float | None): multiplicador aplicado às posições
        """
        tabela = Configuracoes.HIGH_IMPACT_QUESTIONS if questoes_alto_impacto is None else questoes_alto_impacto
        self.questoes_alto_impacto = {
            Categoria.normalizar(categoria).value: frozenset(int(p) for p in posicoes)
            for categoria, posicoes in tabela.items()
        }
        self.multiplicador_alto_impacto = (
            Configuracoes.HIGH_IMPACT_MULTIPLIER
            if multiplicador_alto_impacto is None
            else float(multiplicador_alto_impacto)
        )

    def pontuar_categoria(
        self,
        respostas: Sequence[int],
        pesos: Optional[Sequence[float]],
        categoria,
    ) -> dict:
        """Pontua uma categoria a partir das respostas brutas.

        Parâmetros:
        - respostas (Sequence[int]): respostas em [0, 4]
        - pesos (Sequence[float] | None): pesos por posição; nulo usa peso padrão
        - categoria (Categoria | str): ESTRES/STRESS ou BURNOUT

        Retorno:
        - dict: score, perQuestionDetail, totalWeight, averageScore

        Exceções:
        - ErroEntradaInvalida: entrada malformada
        """
        categoria = Categoria.normalizar(categoria)
        pesos_base = self._resolver_pesos(respostas, pesos)
        self.validar_entrada(respostas, pesos_base)
        pesos_efetivos = self.calcular_pesos_efetivos(pesos_base, categoria)
        return self.pontuar_com_pesos_efetivos(respostas, pesos_efetivos)

    def calcular_pesos_efetivos(self, pesos: Sequence[float], categoria) -> List[float]:
        """Aplica o multiplicador de alto impacto às posições configuradas.

        Parâmetros:
        - pesos (Sequence[float]): pesos base
        - categoria (Categoria | str): categoria dos pesos

        Retorno:
        - list[float]: pesos efetivos
        """
        posicoes = self.questoes_alto_impacto.get(Categoria.normalizar(categoria).value, frozenset())
        return [
            float(peso) * self.multiplicador_alto_impacto if indice in posicoes else float(peso)
            for indice, peso in enumerate(pesos, start=1)
        ]

    @staticmethod
    def pontuar_com_pesos_efetivos(respostas: Sequence[int], pesos_efetivos: Sequence[float]) -> dict:
        """Média ponderada das respostas normalizada para 0-10.

        Parâmetros:
        - respostas (Sequence[int]): respostas validadas
        - pesos_efetivos (Sequence[float]): pesos já com destaque de alto impacto

        Retorno:
        - dict: resultado da categoria
        """
        if not respostas:
            return {"score": 0.0, "perQuestionDetail": [], "totalWeight": 0.0, "averageScore": 0.0}

        detalhes = []
        soma_ponderada = 0.0
        peso_total = 0.0
        for indice, (resposta, peso) in enumerate(zip(respostas, pesos_efetivos), start=1):
            contribuicao = resposta * peso
            soma_ponderada += contribuicao
            peso_total += peso
            detalhes.append(
                {
                    "questionIndex": indice,
                    "answer": resposta,
                    "weight": peso,
                    "contribution": contribuicao,
                }
            )

        media = soma_ponderada / peso_total
        normalizado = (media / Configuracoes.ANSWER_MAX) * Configuracoes.SCORE_MAX

        return {
            "score": arredondar(normalizado, 1),
            "perQuestionDetail": detalhes,
            "totalWeight": peso_total,
            "averageScore": media,
        }

    @staticmethod
    def _resolver_pesos(respostas: Sequence[int], pesos: Optional[Sequence[float]]) -> List[float]:
        if pesos is None:
            return [Configuracoes.DEFAULT_QUESTION_WEIGHT] * len(respostas)
        return list(pesos)

    @staticmethod
    def validar_entrada(respostas: Sequence[int], pesos: Sequence[float]) -> None:
        """Valida respostas e pesos de uma categoria.

        Parâmetros:
        - respostas (Sequence[int]): respostas da categoria
        - pesos (Sequence[float]): pesos base

        Exceções:
        - ErroEntradaInvalida: quando qualquer restrição é violada
        """
        if len(respostas) != len(pesos):
            raise ErroEntradaInvalida(
                f"Quantidade de respostas ({len(respostas)}) difere da quantidade de pesos ({len(pesos)})."
            )

        for indice, resposta in enumerate(respostas, start=1):
            if isinstance(resposta, bool) or not isinstance(resposta, int):
                raise ErroEntradaInvalida(f"Resposta {indice} não é inteira: {resposta!r}")
            if not Configuracoes.ANSWER_MIN <= resposta <= Configuracoes.ANSWER_MAX:
                raise ErroEntradaInvalida(
                    f"Resposta {indice} fora do intervalo "
                    f"[{Configuracoes.ANSWER_MIN}, {Configuracoes.ANSWER_MAX}]: {resposta}"
                )

        for indice, peso in enumerate(pesos, start=1):
            if isinstance(peso, bool) or not isinstance(peso, Real):
                raise ErroEntradaInvalida(f"Peso {indice} não é numérico: {peso!r}")
            if not math.isfinite(peso) or peso <= 0:
                raise ErroEntradaInvalida(f"Peso {indice} deve ser positivo e finito: {peso}")
