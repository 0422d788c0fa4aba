"""Serviço de submissão de avaliações.

Responsabilidades:
- Verificar o limite semanal antes de pontuar
- Executar o motor de risco e persistir o registro de avaliação
- Comparar com a avaliação anterior (tendência e deterioração)
- Registrar em log o rastro do motor e a decisão de alerta
"""

import threading
from datetime import datetime
from typing import Optional

from bienestar.application.risk_engine import MotorRisco
from bienestar.application.trend_service import analisar_tendencia, detectar_deterioro
from bienestar.application.weekly_limit import inicio_semana, verificar_limite_semanal
from bienestar.domain.errors import ErroEntradaInvalida, ErroLimiteSemanal
from bienestar.domain.evaluation import EntradaAvaliacao
from bienestar.infrastructure.data.evaluation_repository import RepositorioAvaliacoes
from bienestar.infrastructure.logging.evaluation_logger import LoggerAvaliacao
from bienestar.util.logger import logger


class ServicoAvaliacao:
    """Coordena o motor com os colaboradores de persistência.

    Responsabilidades:
    - Serializar verificação de limite e gravação por processo
    - Expor pontuação sem persistência para simulações
    """

    _lock_submissao = threading.Lock()

    def __init__(self, motor: Optional[MotorRisco] = None):
        """Inicializa o serviço.

        Parâmetros:
        - motor (MotorRisco | None): motor configurado; cria um padrão quando nulo
        """
        self.motor = motor or MotorRisco()
        self.logger = LoggerAvaliacao()
        self.repositorio = RepositorioAvaliacoes()

    def pontuar(self, entrada: EntradaAvaliacao) -> dict:
        """Executa apenas o motor, sem persistir.

        Parâmetros:
        - entrada (EntradaAvaliacao): respostas e perfil

        Retorno:
        - dict: saída do motor
        """
        resultado = self.motor.processar_avaliacao(entrada.para_dados_motor())
        logger.debug(f"Rastro do motor: {resultado['details']}")
        return resultado

    def registrar_avaliacao(
        self, id_estudante: str, entrada: EntradaAvaliacao, agora: Optional[datetime] = None
    ) -> dict:
        """Processa e persiste uma submissão de avaliação.

        Parâmetros:
        - id_estudante (str): identificador do estudante
        - entrada (EntradaAvaliacao): respostas e perfil
        - agora (datetime | None): instante da submissão

        Retorno:
        - dict: evaluationId, result, trend, weeklyLimit

        Exceções:
        - ErroLimiteSemanal: limite de avaliações da semana atingido
        - ErroEntradaInvalida: entrada malformada
        - RuntimeError: falha ao persistir o registro
        """
        agora = agora or datetime.now()
        id_estudante = str(id_estudante).strip()
        if not id_estudante:
            raise ErroEntradaInvalida("Identificador do estudante vazio.")
        dados_motor = entrada.para_dados_motor()

        with self._lock_submissao:
            contagem = self.repositorio.contar_avaliacoes_desde(id_estudante, inicio_semana(agora))
            limite = verificar_limite_semanal(contagem, agora)
            if not limite["canEvaluate"]:
                logger.info(f"Limite semanal atingido para estudante {id_estudante} ({contagem} avaliações)")
                raise ErroLimiteSemanal(limite["reason"], proxima_disponivel=limite["nextAvailable"])

            historico = self.repositorio.obter_avaliacoes_estudante(id_estudante)
            anterior = None if historico.empty else self.repositorio.linha_para_registro(historico.iloc[0])
            resultado = self.motor.processar_avaliacao(dados_motor, data_avaliacao=agora)
            registro = self.logger.registrar_avaliacao(id_estudante, dados_motor["studentProfile"], resultado)

        logger.debug(f"Rastro do motor ({registro['evaluation_id']}): {resultado['details']}")
        logger.info(
            f"Avaliação {registro['evaluation_id']} registrada para estudante {id_estudante}: "
            f"total={resultado['scores']['total']} risco={resultado['riskLevels']['overall']}"
        )

        decisao = resultado["alertDecision"]
        if decisao["needed"]:
            logger.warning(
                f"Alerta {decisao['primary']['code']} ({decisao['primary']['severity']}) "
                f"para estudante {id_estudante}: {len(decisao['all'])} alerta(s)"
            )

        pontuacoes_anteriores = anterior["scores"] if anterior else None
        totais = [resultado["scores"]["total"]] + historico["scores.total"].tolist()
        return {
            "evaluationId": registro["evaluation_id"],
            "result": resultado,
            "trend": {
                **analisar_tendencia(totais),
                "previousEvaluationId": anterior["evaluation_id"] if anterior else None,
                "deterioration": detectar_deterioro(resultado["scores"], pontuacoes_anteriores),
            },
            "weeklyLimit": verificar_limite_semanal(contagem + 1, agora),
        }
