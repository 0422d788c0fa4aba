"""Ponto de entrada da API FastAPI.

Responsabilidades:
- Configurar a aplicação FastAPI
- Registrar rotas e eventos
- Registrar a configuração do motor no startup
"""

import os

import uvicorn
from fastapi import FastAPI

from bienestar.api.controller import ControladorAvaliacao
from bienestar.api.coordinator_controller import ControladorCoordenacao
from bienestar.application.risk_engine import MotorRisco
from bienestar.util.logger import logger

app = FastAPI(
    title="Bienestar Estudiantil",
    description="API de pontuação de risco psicossocial (estrés e burnout) de estudantes",
    version="2.0.0",
)


@app.on_event("startup")
async def evento_inicializacao():
    """Registra a configuração ativa do motor na inicialização.

    Retorno:
    - None: não retorna valor
    """
    configuracao = MotorRisco().exportar_configuracao()
    logger.info(
        f"Motor de risco v{configuracao['version']} ativo. "
        f"Limiares: {configuracao['riskThresholds']} Pesos: {configuracao['categoryWeights']}"
    )


controlador_avaliacao = ControladorAvaliacao()
app.include_router(controlador_avaliacao.roteador, prefix="/api/v1", tags=["Avaliação"])

controlador_coordenacao = ControladorCoordenacao()
app.include_router(controlador_coordenacao.roteador, prefix="/api/v1", tags=["Coordenação"])


@app.get("/health", tags=["Infraestrutura"])
def checar_saude():
    """Endpoint de health check.

    Retorno:
    - dict: status da aplicação
    """
    return {"status": "ok"}


if __name__ == "__main__":
    porta = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=porta)
