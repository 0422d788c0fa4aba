"""Registro append-only de avaliações em JSONL.

Responsabilidades:
- Persistir cada avaliação processada com segurança de thread
- Garantir estrutura padronizada do registro
- Rotacionar o arquivo quando atinge o tamanho máximo
"""

import json
import os
import threading
import uuid
from datetime import datetime

from bienestar.config.settings import Configuracoes
from bienestar.util.logger import logger


class LoggerAvaliacao:
    """Logger thread-safe para persistir avaliações.

    Responsabilidades:
    - Garantir instância única
    - Serializar o resultado do motor no registro de avaliação
    - Escrever registros sem nunca editar os anteriores
    """

    _instancia = None
    _lock = threading.Lock()

    def __new__(cls):
        """Cria ou reutiliza a instância única.

        Retorno:
        - LoggerAvaliacao: instância singleton
        """
        if cls._instancia is None:
            with cls._lock:
                if cls._instancia is None:
                    cls._instancia = super(LoggerAvaliacao, cls).__new__(cls)
        return cls._instancia

    @staticmethod
    def montar_registro(id_estudante: str, perfil: dict, resultado: dict) -> dict:
        """Monta o registro persistido a partir do resultado do motor.

        Parâmetros:
        - id_estudante (str): identificador do estudante
        - perfil (dict): perfil usado na avaliação
        - resultado (dict): saída de MotorRisco.processar_avaliacao

        Retorno:
        - dict: registro de avaliação
        """
        decisao = resultado.get("alertDecision", {})
        principal = decisao.get("primary") or {}
        metadata = resultado.get("metadata", {})
        return {
            "evaluation_id": str(uuid.uuid4()),
            "student_id": str(id_estudante).strip(),
            "timestamp": metadata.get("evaluationDate", datetime.now().isoformat()),
            "engine_version": metadata.get("engineVersion", Configuracoes.ENGINE_VERSION),
            "profile": perfil,
            "scores": resultado.get("scores", {}),
            "risk_level": resultado.get("riskLevels", {}).get("overall"),
            "risk_levels": resultado.get("riskLevels", {}),
            "alert_needed": bool(decisao.get("needed", False)),
            "alert_severity": principal.get("severity"),
        }

    def registrar_avaliacao(self, id_estudante: str, perfil: dict, resultado: dict) -> dict:
        """Escreve um registro de avaliação de forma atômica.

        Parâmetros:
        - id_estudante (str): identificador do estudante
        - perfil (dict): perfil usado na avaliação
        - resultado (dict): saída do motor

        Retorno:
        - dict: registro persistido

        Exceções:
        - RuntimeError: quando o registro não pode ser serializado ou escrito
        """
        registro = self.montar_registro(id_estudante, perfil, resultado)

        try:
            linha_json = json.dumps(registro, ensure_ascii=False)
        except (TypeError, ValueError) as erro:
            logger.error(f"Falha ao serializar avaliação: {erro}")
            raise RuntimeError(f"Avaliação não serializável: {erro}") from erro

        with self._lock:
            try:
                caminho = Configuracoes.EVALUATIONS_LOG_PATH
                os.makedirs(os.path.dirname(caminho), exist_ok=True)
                self._rotacionar_se_necessario(caminho)
                with open(caminho, "a", encoding="utf-8") as arquivo:
                    arquivo.write(linha_json + "\n")
            except OSError as erro:
                logger.error(f"Falha Crítica ao escrever avaliação: {erro}")
                raise RuntimeError(f"Armazenamento de avaliações indisponível: {erro}") from erro

        return registro

    @staticmethod
    def _rotacionar_se_necessario(caminho: str) -> None:
        """Rotaciona o arquivo quando atinge o tamanho máximo."""
        try:
            if not os.path.exists(caminho):
                return
            if os.path.getsize(caminho) < Configuracoes.LOG_MAX_BYTES:
                return
            timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
            os.replace(caminho, f"{caminho}.{timestamp}.bak")
        except OSError as erro:
            logger.warning(f"Falha ao rotacionar registro de avaliações: {erro}")
