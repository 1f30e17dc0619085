# core/validacao.py
from __future__ import annotations

from typing import List, Optional

from .edicao import CAMPOS_NUMERICOS
from .modelo import DadosProposta, ResultadoProjecao


def avisos_entrada(p: DadosProposta, resultado: Optional[ResultadoProjecao] = None) -> List[str]:
    """Avisos não bloqueantes; o motor de cálculo nunca rejeita entradas."""
    avisos: List[str] = []

    if not p.co2_arvore:
        avisos.append(
            "CO₂ absorvido por árvore está zerado: o cálculo usa 1 t/árvore/ano "
            "e o número de árvores salvas não é confiável."
        )
    elif p.co2_arvore < 0:
        avisos.append("CO₂ absorvido por árvore é negativo: o número de árvores salvas sai negativo.")

    negativos = [c for c in CAMPOS_NUMERICOS if (getattr(p, c) or 0) < 0]
    if negativos:
        avisos.append("Valores negativos em: " + ", ".join(negativos) + ".")

    if p.conta_atual < p.taxa_minima:
        avisos.append("A conta atual é menor que o custo mínimo: a economia mensal fica em zero.")

    if resultado is not None and not resultado.payback_atingido:
        avisos.append("O investimento não se paga dentro do horizonte de 25 anos.")

    return avisos
