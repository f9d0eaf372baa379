"""
Exceções do projeto de dimensionamento de lotes.
"""


class InvalidInput(ValueError):
    """
    Entrada bruta (texto, CSV) que não pôde ser convertida nos números exigidos.
    A mensagem é exibida ao usuário; a interface continua aceitando novas tentativas.
    """


class DomainViolation(ValueError):
    """Demanda ou custo negativo (ou não finito) chegou ao motor de cálculo."""
