# core/edicao.py
from __future__ import annotations

import dataclasses
from typing import Any

from .modelo import DadosProposta, TipoProposta
from .padroes import padrao_para

CAMPOS_NUMERICOS = (
    "consumo_kwh",
    "tarifa_kwh",
    "conta_atual",
    "taxa_minima",
    "valor_investimento",
    "taxa_juros_financiamento",
    "taxa_juros_cartao",
    "reajuste_energia",
    "taxa_ipca",
    "taxa_poupanca",
    "fator_co2",
    "co2_arvore",
    "num_clientes",
    "num_placas",
    "valor_por_placa",
)
CAMPOS_CONTA_DE_LUZ = ("consumo_kwh", "tarifa_kwh", "conta_atual")

_CAMPOS = {f.name for f in dataclasses.fields(DadosProposta)}


def coagir_numero(valor: Any) -> float:
    if valor is None:
        return 0.0
    if isinstance(valor, (int, float)):
        return float(valor)

    txt = str(valor).strip().replace(",", ".")
    if not txt:
        return 0.0
    try:
        return float(txt)
    except ValueError:
        return 0.0


def _conta_de_luz(dados: DadosProposta, campo: str, v: float) -> DadosProposta:
    if campo == "conta_atual":
        if dados.tarifa_kwh > 0:
            return dataclasses.replace(dados, conta_atual=v, consumo_kwh=v / dados.tarifa_kwh)
        return dataclasses.replace(dados, conta_atual=v)

    novo = dataclasses.replace(dados, **{campo: v})
    return dataclasses.replace(novo, conta_atual=novo.consumo_kwh * novo.tarifa_kwh)


def aplicar_edicao(dados: DadosProposta, campo: str, valor: Any) -> DadosProposta:
    """
    Devolve um novo snapshot com `campo` editado.

    Consumo ou tarifa recalculam a conta; a conta digitada recalcula o
    consumo quando há tarifa.
    """
    if campo not in _CAMPOS or campo == "tipo_proposta":
        raise KeyError(f"Campo não editável: {campo!r}")

    if campo in CAMPOS_CONTA_DE_LUZ:
        return _conta_de_luz(dados, campo, coagir_numero(valor))

    if campo == "num_clientes":
        return dataclasses.replace(dados, num_clientes=int(coagir_numero(valor)))
    if campo in CAMPOS_NUMERICOS:
        return dataclasses.replace(dados, **{campo: coagir_numero(valor)})
    if campo == "incluir_cta_final":
        return dataclasses.replace(dados, incluir_cta_final=bool(valor))

    return dataclasses.replace(dados, **{campo: "" if valor is None else str(valor)})


def trocar_tipo(tipo: TipoProposta | str) -> DadosProposta:
    return padrao_para(tipo)
