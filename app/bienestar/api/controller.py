"""Controlador de avaliações da API.

Responsabilidades:
- Definir rotas de pontuação e submissão de avaliações
- Resolver dependências do serviço de avaliação
- Traduzir erros em respostas HTTP
"""

from fastapi import APIRouter, Depends, HTTPException

from bienestar.application.evaluation_service import ServicoAvaliacao
from bienestar.domain.errors import ErroLimiteSemanal
from bienestar.domain.evaluation import EntradaAvaliacao


def obter_servico_avaliacao():
    """Dependência para obter uma instância do serviço de avaliação.

    Retorno:
    - ServicoAvaliacao: instância pronta para uso
    """
    return ServicoAvaliacao()


class ControladorAvaliacao:
    """Controlador de avaliações.

    Responsabilidades:
    - Registrar rotas de pontuação, submissão e configuração do motor
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        self.roteador.add_api_route(
            path="/evaluations/score",
            endpoint=self._pontuar,
            methods=["POST"],
            response_model=dict,
            summary="Pontua uma avaliação sem persistir",
        )
        self.roteador.add_api_route(
            path="/students/{student_id}/evaluations",
            endpoint=self._registrar_avaliacao,
            methods=["POST"],
            response_model=dict,
            status_code=201,
            summary="Submete a avaliação semanal de um estudante",
        )
        self.roteador.add_api_route(
            path="/engine/configuration",
            endpoint=self._exportar_configuracao,
            methods=["GET"],
            response_model=dict,
        )

    @staticmethod
    async def _pontuar(entrada: EntradaAvaliacao, servico: ServicoAvaliacao = Depends(obter_servico_avaliacao)):
        """Executa o motor sobre a entrada.

        Parâmetros:
        - entrada (EntradaAvaliacao): respostas e perfil
        - servico (ServicoAvaliacao): serviço injetado

        Retorno:
        - dict: resultado do motor

        Exceções:
        - HTTPException: entrada inválida
        """
        try:
            return servico.pontuar(entrada)
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))

    @staticmethod
    async def _registrar_avaliacao(
        student_id: str,
        entrada: EntradaAvaliacao,
        servico: ServicoAvaliacao = Depends(obter_servico_avaliacao),
    ):
        """Registra a avaliação de um estudante.

        Parâmetros:
        - student_id (str): identificador do estudante
        - entrada (EntradaAvaliacao): respostas e perfil
        - servico (ServicoAvaliacao): serviço injetado

        Retorno:
        - dict: avaliação registrada, tendência e limite semanal

        Exceções:
        - HTTPException: 429 no limite semanal, 400 para entrada inválida,
          503 para falha de armazenamento
        """
        try:
            return servico.registrar_avaliacao(student_id, entrada)
        except ErroLimiteSemanal as erro:
            raise HTTPException(status_code=429, detail=str(erro))
        except (ValueError, TypeError, KeyError) as erro:
            raise HTTPException(status_code=400, detail=str(erro))
        except RuntimeError as erro:
            raise HTTPException(status_code=503, detail=str(erro))

    @staticmethod
    async def _exportar_configuracao(servico: ServicoAvaliacao = Depends(obter_servico_avaliacao)):
        """Retorna a configuração ativa do motor para auditoria."""
        return servico.motor.exportar_configuracao()
