"""Testes do controlador da coordenação."""

from unittest.mock import Mock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from bienestar.api.coordinator_controller import ControladorCoordenacao, obter_servico_resumo


def _cliente(servico=None):
    aplicacao = FastAPI()
    controlador = ControladorCoordenacao()

    if servico is not None:
        aplicacao.dependency_overrides[obter_servico_resumo] = lambda: servico
    aplicacao.include_router(controlador.roteador, prefix="/api/v1")

    return TestClient(aplicacao)


def test_resumo_sucesso():
    servico = Mock()
    servico.gerar_resumo.return_value = {"total_evaluations": 3}

    resposta = _cliente(servico).get("/api/v1/coordinator/summary")

    assert resposta.status_code == 200
    assert resposta.json()["total_evaluations"] == 3


def test_resumo_contrato_violado():
    servico = Mock()
    servico.gerar_resumo.side_effect = ValueError("colunas obrigatórias ausentes")

    resposta = _cliente(servico).get("/api/v1/coordinator/summary")

    assert resposta.status_code == 503


def test_painel_estudante_sem_historico():
    resposta = _cliente().get("/api/v1/students/novo/dashboard")

    assert resposta.status_code == 200
    corpo = resposta.json()
    assert corpo["student_id"] == "novo"
    assert corpo["total_evaluations"] == 0
    assert corpo["trend"]["direction"] == "insuficientes_datos"
