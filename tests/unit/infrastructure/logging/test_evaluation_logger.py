"""Testes do registro de avaliações."""

import json
import os
from unittest.mock import Mock

import pytest

from bienestar.config.settings import Configuracoes
from bienestar.infrastructure.logging.evaluation_logger import LoggerAvaliacao


def _resultado():
    return {
        "scores": {"stress": 6.5, "burnout": 3.0, "total": 4.7, "rawStress": 6.5, "rawBurnout": 3.0},
        "riskLevels": {"overall": "MEDIO", "stress": "ALTO", "burnout": "BAJO"},
        "alertDecision": {"needed": True, "primary": {"code": "ESTRES_ALTO", "severity": "ALTO"}, "all": []},
        "metadata": {"evaluationDate": "2026-10-14T10:00:00", "engineVersion": "2.0"},
    }


def test_logger_avaliacao_singleton():
    assert LoggerAvaliacao() is LoggerAvaliacao()


def test_registrar_avaliacao_escreve_linha(armazenamento_temporario):
    registro = LoggerAvaliacao().registrar_avaliacao("est-1", {"semester": 3}, _resultado())

    with open(armazenamento_temporario, "r", encoding="utf-8") as arquivo:
        linhas = arquivo.readlines()

    assert len(linhas) == 1
    gravado = json.loads(linhas[0])
    assert gravado == registro
    assert gravado["risk_level"] == "MEDIO"
    assert gravado["alert_needed"] is True
    assert gravado["alert_severity"] == "ALTO"
    assert gravado["timestamp"] == "2026-10-14T10:00:00"


def test_registros_sao_acumulados(armazenamento_temporario):
    logger_avaliacao = LoggerAvaliacao()
    logger_avaliacao.registrar_avaliacao("est-1", {}, _resultado())
    logger_avaliacao.registrar_avaliacao("est-1", {}, _resultado())

    with open(armazenamento_temporario, "r", encoding="utf-8") as arquivo:
        ids = [json.loads(linha)["evaluation_id"] for linha in arquivo]

    assert len(ids) == 2
    assert ids[0] != ids[1]


def test_falha_serializacao(monkeypatch):
    erro_mock = Mock()
    monkeypatch.setattr("bienestar.infrastructure.logging.evaluation_logger.logger", erro_mock)

    with pytest.raises(RuntimeError):
        LoggerAvaliacao().registrar_avaliacao("est-1", {"bad": object()}, _resultado())

    erro_mock.error.assert_called_once()


def test_falha_escrita(monkeypatch):
    def levantar_erro(*args, **kwargs):
        raise OSError("nope")

    erro_mock = Mock()
    monkeypatch.setattr("bienestar.infrastructure.logging.evaluation_logger.logger", erro_mock)
    monkeypatch.setattr("bienestar.infrastructure.logging.evaluation_logger.open", levantar_erro, raising=False)

    with pytest.raises(RuntimeError, match="indisponível"):
        LoggerAvaliacao().registrar_avaliacao("est-1", {}, _resultado())

    erro_mock.error.assert_called_once()


def test_rotacao_quando_excede_tamanho(armazenamento_temporario, monkeypatch):
    monkeypatch.setattr(Configuracoes, "LOG_MAX_BYTES", 1)
    logger_avaliacao = LoggerAvaliacao()

    logger_avaliacao.registrar_avaliacao("est-1", {}, _resultado())
    logger_avaliacao.registrar_avaliacao("est-1", {}, _resultado())

    arquivos = os.listdir(os.path.dirname(armazenamento_temporario))
    assert any(nome.endswith(".bak") for nome in arquivos)
    with open(armazenamento_temporario, "r", encoding="utf-8") as arquivo:
        assert len(arquivo.readlines()) == 1


def test_identificador_normalizado_no_registro():
    registro = LoggerAvaliacao.montar_registro("  est-1 ", {}, _resultado())

    assert registro["student_id"] == "est-1"
