# core/financas.py
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import date
from typing import Any, Dict, Optional

from .modelo import ResultadoProjecao

logger = logging.getLogger(__name__)

HORIZONTE_ANOS = 25
PRAZOS_FINANCIAMENTO = (60, 90, 120)
PRAZO_CARTAO = 24

_MESES = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


# ==========================================================
# Leitura tolerante de campos
# ==========================================================
def _campo(dados: Any, k: str) -> float:
    """Lê um campo numérico de dataclass ou mapping; ausente/None/"" vira 0."""
    if isinstance(dados, Mapping):
        v = dados.get(k)
    else:
        v = getattr(dados, k, None)
    if v is None or v == "":
        return 0.0
    try:
        return float(v)
    except (TypeError, ValueError):
        return 0.0


def data_extenso(hoje: Optional[date] = None) -> str:
    d = hoje or date.today()
    return f"{d.day:02d} de {_MESES[d.month - 1]} de {d.year}"


def _arredondar(x: float) -> int:
    # meio para cima, como Math.round
    if not math.isfinite(x):
        return 0
    return int(math.floor(x + 0.5))


# ==========================================================
# Funções financeiras básicas
# ==========================================================
def calcular_parcela_price(valor_presente: float, taxa_mensal: float, periodos: int) -> float:
    if taxa_mensal <= 0 or periodos <= 0:
        return valor_presente / max(periodos, 1)

    # forma com expoente negativo: (1+r)^-n só tende a 0, nunca estoura
    desconto = 1.0 - (1.0 + taxa_mensal) ** -periodos
    if desconto == 0.0:
        return valor_presente / periodos

    return valor_presente * taxa_mensal / desconto


def valor_futuro(vp: float, taxa: float, periodos: int) -> float:
    try:
        return vp * (1.0 + taxa) ** periodos
    except OverflowError:
        return math.copysign(math.inf, vp) if vp else 0.0


def projetar_economia(
    economia_anual_base: float,
    reajuste_anual: float,
    valor_investimento: float,
    horizonte: int = HORIZONTE_ANOS,
) -> Dict[str, Any]:
    """
    Acumula a economia ano a ano com reajuste composto da tarifa.

    O payback é o primeiro ano em que o acumulado cobre o investimento;
    0 quando não é atingido dentro do horizonte.
    """
    acc = 0.0
    acc10 = 0.0
    payback = 0
    eco = economia_anual_base
    acumulado_por_ano = []

    for ano in range(1, horizonte + 1):
        acc += eco
        acumulado_por_ano.append(acc)
        if ano == 10:
            acc10 = acc
        if acc >= valor_investimento and payback == 0:
            payback = ano
        eco *= 1.0 + reajuste_anual

    return {
        "acumulado_10": acc10,
        "acumulado_total": acc,
        "payback": payback,
        "acumulado_por_ano": acumulado_por_ano,
    }


# ==========================================================
# ENTRYPOINT ÚNICO
# ==========================================================
def calcular_projecao(dados: Any, hoje: Optional[date] = None) -> ResultadoProjecao:
    preco_sistema = _campo(dados, "valor_investimento")
    economia_mensal = max(0.0, _campo(dados, "conta_atual") - _campo(dados, "taxa_minima"))
    economia_anual_base = economia_mensal * 12

    juros_finan = _campo(dados, "taxa_juros_financiamento") / 100
    juros_cartao = _campo(dados, "taxa_juros_cartao") / 100

    parcelas = {n: calcular_parcela_price(preco_sistema, juros_finan, n) for n in PRAZOS_FINANCIAMENTO}
    parcela_cartao = calcular_parcela_price(preco_sistema, juros_cartao, PRAZO_CARTAO)

    proj = projetar_economia(
        economia_anual_base,
        _campo(dados, "reajuste_energia") / 100,
        preco_sistema,
    )
    acumulado_25 = proj["acumulado_total"]

    taxa_ipca = _campo(dados, "taxa_ipca") / 100
    taxa_poup = _campo(dados, "taxa_poupanca") / 100

    geracao_mwh = (_campo(dados, "consumo_kwh") * 12) / 1000
    co2_total = geracao_mwh * _campo(dados, "fator_co2") * HORIZONTE_ANOS
    co2_arvore = _campo(dados, "co2_arvore") or 1.0

    resultado = ResultadoProjecao(
        data_proposta=data_extenso(hoje),
        preco_sistema=preco_sistema,
        economia_mensal=economia_mensal,
        economia_anual_base=economia_anual_base,
        parcela_finan_60=parcelas[60],
        parcela_finan_90=parcelas[90],
        parcela_finan_120=parcelas[120],
        parcela_cartao_24=parcela_cartao,
        payback_real=proj["payback"],
        economia_acumulada_10anos=proj["acumulado_10"],
        economia_acumulada_25anos=acumulado_25,
        retorno_liquido_25anos=acumulado_25 - preco_sistema,
        fv_ipca_10=valor_futuro(preco_sistema, taxa_ipca, 10),
        fv_ipca_25=valor_futuro(preco_sistema, taxa_ipca, 25),
        fv_poup_10=valor_futuro(preco_sistema, taxa_poup, 10),
        fv_poup_25=valor_futuro(preco_sistema, taxa_poup, 25),
        geracao_anual_mwh=geracao_mwh,
        co2_evitado_total=round(co2_total, 2),
        arvores_salvas_total=_arredondar(co2_total / co2_arvore),
        custo_reinstalacao=_campo(dados, "num_placas") * _campo(dados, "valor_por_placa"),
    )

    logger.debug(
        "Projeção: economia_mensal=%.2f payback=%s retorno_25=%.2f",
        resultado.economia_mensal,
        resultado.payback_real,
        resultado.retorno_liquido_25anos,
    )
    return resultado
