"""Validação de contrato de dados.

Responsabilidades:
- Validar presença de colunas obrigatórias
- Normalizar tipos de dados
- Falhar explicitamente se contrato for violado
"""

from typing import Dict, List

import pandas as pd

from bienestar.util.logger import logger

TIPO_DATA = pd.Timestamp


class ContratoDataFrame:
    """Define e valida contrato de dados para DataFrames.

    Responsabilidades:
    - Especificar colunas obrigatórias
    - Converter colunas para os tipos esperados
    - Falhar com mensagem clara se violado
    """

    def __init__(self, colunas_obrigatorias: List[str], tipos_esperados: Dict[str, type] = None):
        """Inicializa o contrato.

        Parâmetros:
        - colunas_obrigatorias (list): colunas que devem estar presentes
        - tipos_esperados (dict): mapeamento coluna -> tipo esperado
        """
        self.colunas_obrigatorias = colunas_obrigatorias
        self.tipos_esperados = tipos_esperados or {}

    def validar(self, df: pd.DataFrame) -> pd.DataFrame:
        """Valida o DataFrame contra o contrato.

        Parâmetros:
        - df (pd.DataFrame): DataFrame a validar

        Retorno:
        - pd.DataFrame: cópia com tipos normalizados

        Exceções:
        - ValueError: quando contrato é violado
        """
        if df is None:
            raise ValueError("DataFrame nulo. Impossível validar contrato.")

        colunas_faltantes = [c for c in self.colunas_obrigatorias if c not in df.columns]
        if colunas_faltantes:
            raise ValueError(
                f"Contrato de dados violado: colunas obrigatórias ausentes: {colunas_faltantes}. "
                f"Colunas disponíveis: {list(df.columns)}"
            )

        validado = df.copy()
        for coluna, tipo_esperado in self.tipos_esperados.items():
            if coluna not in validado.columns:
                continue

            if tipo_esperado is str:
                validado[coluna] = validado[coluna].astype(str)
            elif tipo_esperado is TIPO_DATA:
                validado[coluna] = pd.to_datetime(validado[coluna], errors="coerce", format="ISO8601")
            else:
                validado[coluna] = pd.to_numeric(validado[coluna], errors="coerce")

            nulos = int(validado[coluna].isnull().sum())
            if nulos > 0:
                logger.warning(
                    f"Coluna '{coluna}' contém {nulos} valores não convertíveis para {tipo_esperado.__name__}; "
                    f"registros descartados."
                )
                validado = validado[validado[coluna].notnull()]

        return validado


# Contrato do armazenamento de avaliações (colunas já achatadas)
CONTRATO_AVALIACOES = ContratoDataFrame(
    colunas_obrigatorias=[
        "evaluation_id",
        "student_id",
        "timestamp",
        "risk_level",
        "scores.stress",
        "scores.burnout",
        "scores.total",
    ],
    tipos_esperados={
        "student_id": str,
        "timestamp": TIPO_DATA,
        "scores.stress": float,
        "scores.burnout": float,
        "scores.total": float,
    },
)
