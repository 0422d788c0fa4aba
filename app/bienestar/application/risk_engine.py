"""Motor de pontuação de risco psicossocial.

Responsabilidades:
- Orquestrar pontuação por categoria, ajustes, composição e classificação
- Decidir alertas e gerar análise e recomendações
- Devolver um rastro estruturado do cálculo em vez de registrar logs

O motor é puro: não faz I/O, não guarda estado entre chamadas e só depende
do relógio para `metadata.evaluationDate` quando a data não é informada.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from bienestar.application.adjustment_factors import AplicadorAjustes
from bienestar.application.alert_policy import PoliticaAlertas
from bienestar.application.analysis_generator import GeradorAnalise
from bienestar.application.category_scorer import PontuadorCategoria
from bienestar.application.risk_classifier import ClassificadorRisco
from bienestar.config.settings import Configuracoes
from bienestar.domain.errors import ErroEntradaInvalida
from bienestar.domain.evaluation import Categoria
from bienestar.util.rounding import arredondar


class MotorRisco:
    """Fachada do motor de risco.

    Responsabilidades:
    - Montar os componentes com a configuração ativa ou sobrescrita
    - Processar um registro de avaliação completo
    - Exportar a configuração para auditoria
    """

    def __init__(
        self,
        questoes_alto_impacto: Optional[Dict[str, Iterable[int]]] = None,
        fatores_semestre: Optional[Dict[int, float]] = None,
        pesos_categoria: Optional[Dict[str, float]] = None,
    ):
        """Inicializa o motor.

        Parâmetros:
        - questoes_alto_impacto (dict | None): categoria -> posições de alto impacto
        - fatores_semestre (dict | None): semestre -> multiplicador
        - pesos_categoria (dict | None): pesos ESTRES/BURNOUT do total
        """
        self.pontuador = PontuadorCategoria(questoes_alto_impacto=questoes_alto_impacto)
        self.ajustador = AplicadorAjustes(fatores_semestre=fatores_semestre)
        self.classificador = ClassificadorRisco(pesos_categoria=pesos_categoria)
        self.politica_alertas = PoliticaAlertas(self.classificador)
        self.gerador_analise = GeradorAnalise()

    def processar_avaliacao(self, dados: dict, data_avaliacao: Optional[datetime] = None) -> dict:
        """Processa uma submissão completa.

        Parâmetros:
        - dados (dict): stressAnswers, burnoutAnswers, stressWeights,
          burnoutWeights e studentProfile
        - data_avaliacao (datetime | None): carimbo usado em metadata

        Retorno:
        - dict: scores, riskLevels, analysis, recommendations, alertDecision,
          details e metadata

        Exceções:
        - ErroEntradaInvalida: entrada malformada, antes de qualquer cálculo
        """
        perfil = self._validar_perfil(dados.get("studentProfile"))

        resultado_estres = self.pontuador.pontuar_categoria(
            dados.get("stressAnswers") or [], dados.get("stressWeights"), Categoria.ESTRES
        )
        resultado_burnout = self.pontuador.pontuar_categoria(
            dados.get("burnoutAnswers") or [], dados.get("burnoutWeights"), Categoria.BURNOUT
        )

        estres_ajustado = self.ajustador.aplicar(resultado_estres["score"], perfil)
        burnout_ajustado = self.ajustador.aplicar(resultado_burnout["score"], perfil)

        composicao = self.classificador.compor_e_classificar(estres_ajustado, burnout_ajustado)
        total = composicao["total"]
        risco_geral = composicao["riskOverall"]

        analise = self.gerador_analise.gerar_analise(estres_ajustado, burnout_ajustado, total, risco_geral, perfil)
        recomendacoes = self.gerador_analise.gerar_recomendacoes(risco_geral, estres_ajustado, burnout_ajustado)
        decisao_alerta = self.politica_alertas.decidir_alerta(risco_geral, estres_ajustado, burnout_ajustado)

        fatores_aplicados = self.ajustador.obter_fatores_aplicados(perfil)

        return {
            "scores": {
                "stress": arredondar(estres_ajustado, 1),
                "burnout": arredondar(burnout_ajustado, 1),
                "total": total,
                "rawStress": resultado_estres["score"],
                "rawBurnout": resultado_burnout["score"],
            },
            "riskLevels": {
                "overall": risco_geral.value,
                "stress": composicao["riskStress"].value,
                "burnout": composicao["riskBurnout"].value,
            },
            "analysis": analise,
            "recommendations": recomendacoes,
            "alertDecision": decisao_alerta,
            "details": {
                "stress": resultado_estres,
                "burnout": resultado_burnout,
                "adjustments": {
                    "stress": {"before": resultado_estres["score"], "after": estres_ajustado},
                    "burnout": {"before": resultado_burnout["score"], "after": burnout_ajustado},
                },
            },
            "metadata": {
                "evaluationDate": (data_avaliacao or datetime.now()).isoformat(),
                "engineVersion": Configuracoes.ENGINE_VERSION,
                "adjustmentFactors": fatores_aplicados,
                "categoryWeights": dict(self.classificador.pesos_categoria),
            },
        }

    @staticmethod
    def _validar_perfil(perfil: Optional[dict]) -> dict:
        """Garante que o semestre, quando informado, seja um inteiro não negativo.

        Exceções:
        - ErroEntradaInvalida: semestre não inteiro ou negativo
        """
        perfil = dict(perfil or {})
        semestre = perfil.get("semester")
        if semestre is None:
            return perfil
        if isinstance(semestre, bool) or not isinstance(semestre, int):
            raise ErroEntradaInvalida(f"Semestre deve ser inteiro: {semestre!r}")
        if semestre < 0:
            raise ErroEntradaInvalida(f"Semestre não pode ser negativo: {semestre}")
        return perfil

    def exportar_configuracao(self) -> dict:
        """Exporta a configuração ativa do motor.

        Retorno:
        - dict: versão, limiares, pesos e tabelas
        """
        return {
            "version": Configuracoes.ENGINE_VERSION,
            "exportedAt": datetime.now().isoformat(),
            "categoryWeights": dict(self.classificador.pesos_categoria),
            "riskThresholds": {
                "BAJO": {"min": 0.0, "max": self.classificador.limite_baixo},
                "MEDIO": {"min": self.classificador.limite_baixo, "max": self.classificador.limite_medio},
                "ALTO": {"min": self.classificador.limite_medio, "max": Configuracoes.SCORE_MAX},
            },
            "highImpactMultiplier": self.pontuador.multiplicador_alto_impacto,
            "highImpactQuestions": {
                categoria: sorted(posicoes) for categoria, posicoes in self.pontuador.questoes_alto_impacto.items()
            },
            "semesterFactors": {str(s): f for s, f in sorted(self.ajustador.fatores_semestre.items())},
        }
