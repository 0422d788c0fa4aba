"""Arredondamento decimal com desempate para cima."""

from decimal import Decimal, ROUND_HALF_UP


def arredondar(valor: float, casas: int = 1) -> float:
    """Arredonda com meio para cima (2.25 -> 2.3), sem o desempate bancário de round().

    Parâmetros:
    - valor (float): número a arredondar
    - casas (int): casas decimais

    Retorno:
    - float: valor arredondado
    """
    quantum = Decimal(1).scaleb(-casas)
    return float(Decimal(repr(float(valor))).quantize(quantum, rounding=ROUND_HALF_UP))


def arredondar_inteiro(valor: float) -> int:
    """Arredonda para o inteiro mais próximo com meio para cima."""
    return int(Decimal(repr(float(valor))).quantize(Decimal(1), rounding=ROUND_HALF_UP))
