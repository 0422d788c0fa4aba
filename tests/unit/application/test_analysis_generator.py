"""Testes do gerador de análise e recomendações."""

from bienestar.application.analysis_generator import GeradorAnalise


def test_padrao_estresse_dominante():
    assert GeradorAnalise.identificar_padroes(8.0, 5.0)[0]["type"] == "stress_dominant"


def test_padrao_burnout_dominante():
    assert GeradorAnalise.identificar_padroes(5.0, 8.0)[0]["type"] == "burnout_dominant"


def test_padrao_equilibrado_no_limite():
    padroes = GeradorAnalise.identificar_padroes(5.0, 7.0)

    assert len(padroes) == 1
    assert padroes[0]["type"] == "balanced_risk"
    assert padroes[0]["recommendation"]


def test_fatores_de_risco():
    fatores = GeradorAnalise.identificar_fatores_risco(7.0, 7.0, {"semester": 8})

    assert fatores == [
        "Niveles altos de estrés académico",
        "Agotamiento emocional significativo",
        "Presión adicional por estar en semestres finales",
    ]
    assert GeradorAnalise.identificar_fatores_risco(6.9, 2.0, {"semester": 7}) == []
    assert GeradorAnalise.identificar_fatores_risco(6.9, 2.0, {}) == []


def test_fortalezas():
    assert len(GeradorAnalise.identificar_fortalezas(4.0, 4.0, 4.0)) == 3
    assert GeradorAnalise.identificar_fortalezas(4.1, 6.0, 5.0) == []
    assert GeradorAnalise.identificar_fortalezas(3.0, 6.0, 4.5) == ["Buen manejo del estrés académico"]


def test_resumo_interpola_media_arredondada():
    resumo = GeradorAnalise.gerar_resumo("ALTO", 8.0, 9.0)

    assert "(9/10)" in resumo["message"]
    assert "ALTO" in resumo["message"]
    assert resumo["priority"] == "urgent"


def test_resumo_baixo():
    resumo = GeradorAnalise.gerar_resumo("BAJO", 1.0, 2.0)

    assert "(2/10)" in resumo["message"]
    assert resumo["priority"] == "low"


def test_recomendacoes_ordenadas_por_prioridade():
    recomendacoes = GeradorAnalise.gerar_recomendacoes("ALTO", 8.0, 7.0)

    assert [r["category"] for r in recomendacoes] == [
        "urgent",
        "stress_management",
        "time_management",
        "motivation",
        "social_support",
    ]
    assert [r["priority"] for r in recomendacoes] == [1, 1, 2, 2, 2]


def test_recomendacao_unica_para_risco_baixo():
    recomendacoes = GeradorAnalise.gerar_recomendacoes("BAJO", 2.0, 3.0)

    assert len(recomendacoes) == 1
    assert recomendacoes[0]["category"] == "maintenance"
    assert recomendacoes[0]["priority"] == 1


def test_analise_completa():
    analise = GeradorAnalise.gerar_analise(5.0, 5.5, 5.3, "MEDIO", {"semester": 4})

    assert set(analise) == {"summary", "patterns", "riskFactors", "strengths"}
    assert analise["summary"]["priority"] == "moderate"
