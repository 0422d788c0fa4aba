"""Modelos de domínio da avaliação psicossocial.

Responsabilidades:
- Enumerar categorias avaliadas e níveis de risco
- Validar o formato das entradas recebidas pela API
- Converter entradas no registro simples consumido pelo motor
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bienestar.domain.errors import ErroEntradaInvalida


class Categoria(str, Enum):
    """Dimensões avaliadas no questionário."""

    ESTRES = "ESTRES"
    BURNOUT = "BURNOUT"

    @classmethod
    def normalizar(cls, valor) -> "Categoria":
        """Aceita a categoria em espanhol ou o apelido em inglês (STRESS).

        Exceções:
        - ErroEntradaInvalida: categoria desconhecida
        """
        if isinstance(valor, Categoria):
            return valor
        texto = str(valor).strip().upper()
        if texto == "STRESS":
            texto = "ESTRES"
        try:
            return cls(texto)
        except ValueError:
            raise ErroEntradaInvalida(f"Categoria desconhecida: {valor!r}")


class NivelRisco(str, Enum):
    """Níveis de risco em ordem crescente de gravidade."""

    BAJO = "BAJO"
    MEDIO = "MEDIO"
    ALTO = "ALTO"

    @property
    def ordem(self) -> int:
        return ["BAJO", "MEDIO", "ALTO"].index(self.value)


class PerfilEstudante(BaseModel):
    """Perfil mínimo usado nos fatores de ajuste.

    Responsabilidades:
    - Carregar semestre (fator de ajuste) e carreira (ainda sem efeito na pontuação)
    """

    semester: Optional[int] = Field(None, ge=0, le=20, description="Semestre em curso")
    career: Optional[str] = Field(None, description="Carreira do estudante")

    model_config = ConfigDict(populate_by_name=True)


class EntradaAvaliacao(BaseModel):
    """Respostas de uma submissão de avaliação.

    Responsabilidades:
    - Validar tipos das listas de respostas e pesos
    - Manter os nomes camelCase do contrato externo

    Os limites de cada resposta e peso são verificados pelo motor, que levanta
    ErroEntradaInvalida antes de pontuar.
    """

    stressAnswers: List[int] = Field(default_factory=list)
    burnoutAnswers: List[int] = Field(default_factory=list)
    stressWeights: Optional[List[float]] = None
    burnoutWeights: Optional[List[float]] = None
    studentProfile: PerfilEstudante = Field(default_factory=PerfilEstudante)

    model_config = ConfigDict(populate_by_name=True)

    def para_dados_motor(self) -> dict:
        """Converte a entrada no registro simples consumido pelo motor.

        Retorno:
        - dict: registro com listas e perfil em dicionário
        """
        return {
            "stressAnswers": list(self.stressAnswers),
            "burnoutAnswers": list(self.burnoutAnswers),
            "stressWeights": None if self.stressWeights is None else list(self.stressWeights),
            "burnoutWeights": None if self.burnoutWeights is None else list(self.burnoutWeights),
            "studentProfile": self.studentProfile.model_dump(),
        }
