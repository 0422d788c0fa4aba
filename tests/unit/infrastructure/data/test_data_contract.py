"""Testes do contrato de dados."""

import pandas as pd
import pytest

from bienestar.infrastructure.data.data_contract import CONTRATO_AVALIACOES, ContratoDataFrame


def test_contrato_nulo():
    with pytest.raises(ValueError):
        ContratoDataFrame(["a"]).validar(None)


def test_colunas_ausentes():
    with pytest.raises(ValueError, match="colunas obrigatórias ausentes"):
        ContratoDataFrame(["a", "b"]).validar(pd.DataFrame({"a": [1]}))


def test_descarta_linhas_nao_convertiveis():
    dados = pd.DataFrame(
        {
            "evaluation_id": ["a", "b"],
            "student_id": [1, 2],
            "timestamp": ["2026-10-12T09:00:00", "ontem"],
            "risk_level": ["BAJO", "ALTO"],
            "scores.stress": ["1.5", 2.0],
            "scores.burnout": [1.0, 2.0],
            "scores.total": [1.2, 2.0],
        }
    )

    validado = CONTRATO_AVALIACOES.validar(dados)

    assert list(validado["evaluation_id"]) == ["a"]
    assert validado["student_id"].iloc[0] == "1"
    assert validado["scores.stress"].iloc[0] == 1.5
    assert len(dados) == 2
