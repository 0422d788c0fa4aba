"""Configurações centrais do motor de risco psicossocial.

Responsabilidades:
- Definir caminhos de arquivos de persistência
- Declarar pesos, limiares e tabelas de ajuste do motor
- Permitir sobrescrita por variáveis de ambiente
"""

import json
import os
from pathlib import Path


def _carregar_json_env(nome: str, padrao):
    """Lê uma variável de ambiente codificada em JSON.

    Parâmetros:
    - nome (str): nome da variável
    - padrao (Any): valor usado quando ausente ou inválida

    Retorno:
    - Any: valor decodificado ou padrão
    """
    bruto = os.getenv(nome, "").strip()
    if not bruto:
        return padrao
    try:
        return json.loads(bruto)
    except json.JSONDecodeError:
        return padrao


class Configuracoes:
    """Centraliza configurações da aplicação.

    Responsabilidades:
    - Fornecer caminhos de diretórios
    - Declarar constantes de pontuação e classificação
    - Declarar políticas do lado do chamador (tendência, limite semanal)
    """

    BASE_DIR = Path(__file__).resolve().parents[2]
    DEFAULT_DATA_DIR = os.path.join(BASE_DIR, "data")
    DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", DEFAULT_DATA_DIR))
    LOG_DIR = os.path.join(BASE_DIR, "logs")

    EVALUATIONS_LOG_PATH = os.getenv("EVALUATIONS_LOG_PATH", os.path.join(LOG_DIR, "evaluations.jsonl"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024)))

    ENGINE_VERSION = "2.0"

    ANSWER_MIN = 0
    ANSWER_MAX = 4
    SCORE_MAX = 10.0
    DEFAULT_QUESTION_WEIGHT = 1.0

    CATEGORY_WEIGHTS = _carregar_json_env("CATEGORY_WEIGHTS", {"ESTRES": 1.2, "BURNOUT": 1.3})

    RISK_LOW_MAX = float(os.getenv("RISK_LOW_MAX", "4.0"))
    RISK_MEDIUM_MAX = float(os.getenv("RISK_MEDIUM_MAX", "6.0"))

    HIGH_IMPACT_MULTIPLIER = float(os.getenv("HIGH_IMPACT_MULTIPLIER", "1.5"))
    # Posições começam em 1.
    HIGH_IMPACT_QUESTIONS = _carregar_json_env(
        "HIGH_IMPACT_QUESTIONS",
        {
            "ESTRES": [1, 2, 3, 7, 8, 9],
            "BURNOUT": [1, 2, 3, 7, 8, 9, 10],
        },
    )

    _SEMESTER_FACTORS_RAW = _carregar_json_env(
        "SEMESTER_FACTORS",
        {
            "1": 0.90,
            "2": 0.95,
            "3": 1.0,
            "4": 1.0,
            "5": 1.0,
            "6": 1.05,
            "7": 1.10,
            "8": 1.15,
            "9": 1.20,
            "10": 1.20,
        },
    )
    SEMESTER_FACTORS = {int(semestre): float(fator) for semestre, fator in _SEMESTER_FACTORS_RAW.items()}

    PATTERN_MARGIN = float(os.getenv("PATTERN_MARGIN", "2.0"))
    RISK_FACTOR_THRESHOLD = float(os.getenv("RISK_FACTOR_THRESHOLD", "7.0"))
    STRENGTH_THRESHOLD = float(os.getenv("STRENGTH_THRESHOLD", "4.0"))
    URGENT_RECOMMENDATION_THRESHOLD = float(os.getenv("URGENT_RECOMMENDATION_THRESHOLD", "8.0"))
    FINAL_SEMESTER = int(os.getenv("FINAL_SEMESTER", "8"))

    TREND_MIN_EVALUATIONS = int(os.getenv("TREND_MIN_EVALUATIONS", "3"))
    TREND_STABLE_MARGIN = float(os.getenv("TREND_STABLE_MARGIN", "0.5"))
    DETERIORATION_THRESHOLD = float(os.getenv("DETERIORATION_THRESHOLD", "1.5"))
    WEEKLY_EVALUATION_LIMIT = int(os.getenv("WEEKLY_EVALUATION_LIMIT", "2"))
