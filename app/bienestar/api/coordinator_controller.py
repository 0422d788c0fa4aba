"""Controlador de painéis da coordenação.

Responsabilidades:
- Expor o resumo geral de risco
- Expor o painel individual do estudante
"""

from fastapi import APIRouter, Depends, HTTPException

from bienestar.application.coordinator_summary_service import ServicoResumoCoordenacao


def obter_servico_resumo():
    """Dependencia para obter uma instancia do servico de resumo.

    Retorno:
    - ServicoResumoCoordenacao: instancia pronta para uso
    """
    return ServicoResumoCoordenacao()


class ControladorCoordenacao:
    """Controlador para endpoints de acompanhamento."""

    def __init__(self):
        self.roteador = APIRouter()
        self.roteador.add_api_route(
            "/coordinator/summary",
            self._obter_resumo,
            methods=["GET"],
            response_model=dict,
        )
        self.roteador.add_api_route(
            "/students/{student_id}/dashboard",
            self._obter_painel_estudante,
            methods=["GET"],
            response_model=dict,
        )

    @staticmethod
    async def _obter_resumo(servico: ServicoResumoCoordenacao = Depends(obter_servico_resumo)):
        """Retorna distribuicao de risco e alertas pendentes."""
        try:
            return servico.gerar_resumo()
        except ValueError as erro:
            raise HTTPException(status_code=503, detail=str(erro))

    @staticmethod
    async def _obter_painel_estudante(
        student_id: str,
        servico: ServicoResumoCoordenacao = Depends(obter_servico_resumo),
    ):
        """Retorna medias, tendencia e limite semanal do estudante."""
        try:
            return servico.gerar_painel_estudante(student_id)
        except ValueError as erro:
            raise HTTPException(status_code=503, detail=str(erro))
