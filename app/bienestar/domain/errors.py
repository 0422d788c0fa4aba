"""Exceções de domínio do motor de risco."""


class ErroEntradaInvalida(ValueError):
    """Entrada malformada detectada antes de qualquer cálculo.

    Cobre tamanhos divergentes entre respostas e pesos, respostas fora de
    [0, 4], pesos não positivos e categorias desconhecidas.
    """


class ErroLimiteSemanal(RuntimeError):
    """Estudante atingiu o limite de avaliações da semana corrente."""

    def __init__(self, mensagem: str, proxima_disponivel=None):
        super().__init__(mensagem)
        self.proxima_disponivel = proxima_disponivel
