"""Repositório de avaliações persistidas.

Responsabilidades:
- Carregar o armazenamento JSONL de avaliações
- Validar o contrato das colunas achatadas
- Responder consultas por estudante (última avaliação, contagem semanal)
"""

import json
import os
from datetime import datetime
from typing import Optional

import pandas as pd

from bienestar.config.settings import Configuracoes
from bienestar.infrastructure.data.data_contract import CONTRATO_AVALIACOES
from bienestar.util.logger import logger


class RepositorioAvaliacoes:
    """Consulta o histórico append-only de avaliações.

    Responsabilidades:
    - Ler o arquivo a cada consulta (sem cache, o histórico cresce durante a execução)
    - Ordenar avaliações por data
    - Converter linhas em registros simples para o chamador
    """

    def __init__(self, caminho: Optional[str] = None):
        """Inicializa o repositório.

        Parâmetros:
        - caminho (str | None): arquivo JSONL; usa a configuração quando nulo
        """
        self._caminho = caminho

    @property
    def caminho(self) -> str:
        return self._caminho or Configuracoes.EVALUATIONS_LOG_PATH

    def carregar_avaliacoes(self) -> pd.DataFrame:
        """Carrega todas as avaliações em um DataFrame achatado.

        Retorno:
        - pd.DataFrame: avaliações ordenadas por timestamp (vazio se não houver)
        """
        registros = self._ler_registros()
        if not registros:
            return pd.DataFrame(columns=CONTRATO_AVALIACOES.colunas_obrigatorias)

        dados = pd.json_normalize(registros)
        dados = CONTRATO_AVALIACOES.validar(dados)
        return dados.sort_values(by="timestamp", kind="stable").reset_index(drop=True)

    def obter_avaliacoes_estudante(self, id_estudante: str) -> pd.DataFrame:
        """Avaliações de um estudante, da mais recente para a mais antiga."""
        dados = self.carregar_avaliacoes()
        if dados.empty:
            return dados
        filtrado = dados[dados["student_id"].str.strip() == str(id_estudante).strip()]
        return filtrado.iloc[::-1].reset_index(drop=True)

    def obter_ultima_avaliacao(self, id_estudante: str) -> Optional[dict]:
        """Busca a avaliação mais recente de um estudante.

        Parâmetros:
        - id_estudante (str): identificador do estudante

        Retorno:
        - dict | None: registro simplificado ou None quando não houver histórico
        """
        historico = self.obter_avaliacoes_estudante(id_estudante)
        if historico.empty:
            return None
        return self.linha_para_registro(historico.iloc[0])

    def contar_avaliacoes_desde(self, id_estudante: str, inicio: datetime) -> int:
        """Conta avaliações do estudante a partir de `inicio`."""
        historico = self.obter_avaliacoes_estudante(id_estudante)
        if historico.empty:
            return 0
        return int((historico["timestamp"] >= pd.Timestamp(inicio)).sum())

    def _ler_registros(self) -> list:
        """Lê as linhas JSON do arquivo, descartando as corrompidas.

        Retorno:
        - list[dict]: registros lidos
        """
        if not os.path.exists(self.caminho):
            return []

        registros = []
        with open(self.caminho, "r", encoding="utf-8") as arquivo:
            for numero, linha in enumerate(arquivo, start=1):
                if not linha.strip():
                    continue
                try:
                    registros.append(json.loads(linha))
                except json.JSONDecodeError as erro:
                    logger.warning(f"Linha {numero} inválida no armazenamento de avaliações: {erro}")
        return registros

    @staticmethod
    def linha_para_registro(linha: pd.Series) -> dict:
        """Converte uma linha achatada no registro simplificado."""
        return {
            "evaluation_id": linha["evaluation_id"],
            "student_id": linha["student_id"],
            "timestamp": linha["timestamp"].isoformat(),
            "risk_level": linha["risk_level"],
            "scores": {
                "stress": float(linha["scores.stress"]),
                "burnout": float(linha["scores.burnout"]),
                "total": float(linha["scores.total"]),
            },
        }
