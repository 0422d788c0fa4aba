"""Fixtures compartilhadas para os testes."""

import json
import sys
from pathlib import Path

import pytest

RAIZ = Path(__file__).resolve().parents[2]
DIRETORIO_APP = RAIZ / "app"
if str(DIRETORIO_APP) not in sys.path:
    sys.path.insert(0, str(DIRETORIO_APP))

from bienestar.config.settings import Configuracoes  # noqa: E402
from bienestar.infrastructure.logging.evaluation_logger import LoggerAvaliacao  # noqa: E402


@pytest.fixture(autouse=True)
def armazenamento_temporario(tmp_path, monkeypatch):
    """Isola o armazenamento de avaliações em um diretório temporário."""
    caminho = tmp_path / "logs" / "evaluations.jsonl"
    monkeypatch.setattr(Configuracoes, "EVALUATIONS_LOG_PATH", str(caminho))
    LoggerAvaliacao._instancia = None
    yield caminho
    LoggerAvaliacao._instancia = None


@pytest.fixture()
def entrada_avaliacao_exemplo():
    """Retorna o payload de uma avaliação com risco moderado."""
    return {
        "stressAnswers": [2, 2, 2, 2, 2, 2, 2, 2, 2, 2],
        "burnoutAnswers": [2, 3, 2, 2, 2, 2, 2, 2, 2, 2],
        "stressWeights": [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        "burnoutWeights": [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
        "studentProfile": {"semester": 4, "career": "Psicología"},
    }


@pytest.fixture()
def escrever_avaliacoes():
    """Escreve registros de avaliação em JSONL no caminho informado."""

    def _escrever(caminho, registros):
        caminho = Path(caminho)
        caminho.parent.mkdir(parents=True, exist_ok=True)
        with open(caminho, "a", encoding="utf-8") as arquivo:
            for registro in registros:
                arquivo.write(json.dumps(registro, ensure_ascii=False) + "\n")

    return _escrever


@pytest.fixture()
def fabrica_registro():
    """Monta registros no formato gravado por LoggerAvaliacao."""

    def _montar(id_avaliacao, id_estudante, timestamp, stress, burnout, total, risco, alerta=False):
        return {
            "evaluation_id": id_avaliacao,
            "student_id": id_estudante,
            "timestamp": timestamp,
            "engine_version": "2.0",
            "profile": {"semester": 4, "career": None},
            "scores": {"stress": stress, "burnout": burnout, "total": total, "rawStress": stress, "rawBurnout": burnout},
            "risk_level": risco,
            "risk_levels": {"overall": risco, "stress": risco, "burnout": risco},
            "alert_needed": alerta,
            "alert_severity": "ALTO" if alerta else None,
        }

    return _montar
