"""Testes de ponta a ponta do motor de risco."""

import json
from datetime import datetime

import pytest

from bienestar.application.risk_engine import MotorRisco
from bienestar.domain.errors import ErroEntradaInvalida


def _dados(estres, burnout, semestre=4, pesos_estres=None, pesos_burnout=None):
    return {
        "stressAnswers": estres,
        "burnoutAnswers": burnout,
        "stressWeights": pesos_estres,
        "burnoutWeights": pesos_burnout,
        "studentProfile": {"semester": semestre, "career": "Ingeniería"},
    }


def test_cenario_estresse_maximo():
    resultado = MotorRisco().processar_avaliacao(_dados([4] * 6, [2] * 6, semestre=5, pesos_estres=[1] * 6))

    assert resultado["scores"]["rawStress"] == 10.0
    assert resultado["scores"]["stress"] == 10.0
    assert resultado["riskLevels"]["stress"] == "ALTO"


def test_cenario_respostas_zeradas():
    resultado = MotorRisco().processar_avaliacao(_dados([0] * 6, [0] * 7))

    assert resultado["scores"]["stress"] == 0.0
    assert resultado["scores"]["burnout"] == 0.0
    assert resultado["scores"]["total"] == 0.0
    assert resultado["riskLevels"]["overall"] == "BAJO"
    assert resultado["alertDecision"] == {"needed": False, "all": []}


def test_cenario_estresse_alto_burnout_baixo():
    motor = MotorRisco(questoes_alto_impacto={})

    resultado = motor.processar_avaliacao(_dados([3, 3, 3, 2, 2], [1, 1, 1, 1, 2]))

    assert resultado["scores"]["stress"] == 6.5
    assert resultado["scores"]["burnout"] == 3.0
    assert resultado["scores"]["total"] == 4.7
    assert resultado["riskLevels"] == {"overall": "MEDIO", "stress": "ALTO", "burnout": "BAJO"}
    assert len(resultado["alertDecision"]["all"]) == 1
    assert resultado["alertDecision"]["primary"]["code"] == "ESTRES_ALTO"
    assert resultado["alertDecision"]["primary"]["severity"] == "ALTO"


def test_cenario_dois_moderados():
    motor = MotorRisco(questoes_alto_impacto={})

    resultado = motor.processar_avaliacao(_dados([2, 2, 2, 2], [2, 2, 2, 2, 3]))

    assert resultado["scores"]["stress"] == 5.0
    assert resultado["scores"]["burnout"] == 5.5
    assert resultado["scores"]["total"] == 5.3
    assert resultado["riskLevels"]["overall"] == "MEDIO"
    assert [a["code"] for a in resultado["alertDecision"]["all"]] == ["ESTRES_MODERADO", "BURNOUT_MODERADO"]


def test_exemplo_padrao_com_alto_impacto(entrada_avaliacao_exemplo):
    resultado = MotorRisco().processar_avaliacao(entrada_avaliacao_exemplo)

    # burnout: 28.5 / 13.5 = 2.11 -> 5.3
    assert resultado["scores"]["rawBurnout"] == 5.3
    assert resultado["scores"]["total"] == 5.2
    assert resultado["riskLevels"]["overall"] == "MEDIO"


def test_ajuste_de_semestre_aplicado_antes_da_classificacao():
    resultado = MotorRisco().processar_avaliacao(_dados([2] * 6, [2] * 6, semestre=9))

    assert resultado["scores"]["rawStress"] == 5.0
    assert resultado["scores"]["stress"] == 6.0
    assert resultado["metadata"]["adjustmentFactors"] == {"semester": {"value": 9, "factor": 1.2}}
    assert "Presión adicional por estar en semestres finales" in resultado["analysis"]["riskFactors"]


def test_classifica_sobre_valor_nao_arredondado():
    # 5.0 * 1.205 = 6.025 ajustado; exibido como 6.0
    motor = MotorRisco(questoes_alto_impacto={}, fatores_semestre={1: 1.205})

    resultado = motor.processar_avaliacao(_dados([2, 2, 2, 2, 2, 2, 2, 2, 2, 2], [0], semestre=1))

    assert resultado["scores"]["rawStress"] == 5.0
    assert resultado["scores"]["stress"] == 6.0
    assert resultado["riskLevels"]["stress"] == "ALTO"


def test_execucao_idempotente():
    motor = MotorRisco()
    dados = _dados([1, 3, 4, 2, 0, 1, 3, 2, 4], [2, 2, 3, 1, 4, 0, 2, 1, 3, 4])
    data = datetime(2026, 10, 14, 9, 30)

    primeiro = motor.processar_avaliacao(dados, data_avaliacao=data)
    segundo = motor.processar_avaliacao(dados, data_avaliacao=data)

    assert json.dumps(primeiro, sort_keys=True) == json.dumps(segundo, sort_keys=True)


def test_estrutura_da_saida():
    resultado = MotorRisco().processar_avaliacao(_dados([1, 2, 3], [3, 2, 1]))

    assert set(resultado) == {
        "scores",
        "riskLevels",
        "analysis",
        "recommendations",
        "alertDecision",
        "details",
        "metadata",
    }
    assert set(resultado["scores"]) == {"stress", "burnout", "total", "rawStress", "rawBurnout"}
    assert len(resultado["details"]["stress"]["perQuestionDetail"]) == 3
    assert resultado["metadata"]["categoryWeights"] == {"ESTRES": 1.2, "BURNOUT": 1.3}


def test_entrada_invalida_interrompe_antes_do_calculo():
    with pytest.raises(ErroEntradaInvalida):
        MotorRisco().processar_avaliacao(_dados([1, 2], [1], pesos_estres=[1]))

    with pytest.raises(ErroEntradaInvalida):
        MotorRisco().processar_avaliacao(_dados([1, 2], [9]))


@pytest.mark.parametrize("semestre", ["9", 8.9, True, -1])
def test_semestre_invalido_rejeitado(semestre):
    with pytest.raises(ErroEntradaInvalida, match="Semestre"):
        MotorRisco().processar_avaliacao(_dados([1], [1], semestre=semestre))


def test_semestre_ausente_nao_ajusta():
    dados = _dados([2] * 4, [2] * 4)
    dados["studentProfile"] = {}

    resultado = MotorRisco().processar_avaliacao(dados)

    assert resultado["scores"]["stress"] == resultado["scores"]["rawStress"]
    assert resultado["metadata"]["adjustmentFactors"] == {}


def test_categorias_vazias():
    resultado = MotorRisco().processar_avaliacao(_dados([], []))

    assert resultado["scores"]["total"] == 0.0
    assert resultado["alertDecision"]["needed"] is False


def test_exportar_configuracao():
    configuracao = MotorRisco().exportar_configuracao()

    assert configuracao["version"] == "2.0"
    assert configuracao["riskThresholds"]["BAJO"]["max"] == 4.0
    assert configuracao["riskThresholds"]["MEDIO"]["max"] == 6.0
    assert configuracao["highImpactQuestions"]["ESTRES"] == [1, 2, 3, 7, 8, 9]
    assert configuracao["semesterFactors"]["8"] == 1.15
