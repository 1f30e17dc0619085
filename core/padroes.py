# core/padroes.py
from __future__ import annotations

import dataclasses
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml

from .modelo import DadosProposta, TipoProposta

DATA_DIR = Path(__file__).resolve().parent / "data"

_CAMPOS_NUM_OBRIGATORIOS = (
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
)
_CAMPOS_NUM_OPCIONAIS = ("num_placas", "valor_por_placa")
_CAMPOS_TEXTO = ("nome_cliente", "link_whatsapp", "contato_alternativo", "depoimento")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Arquivo de padrões não encontrado: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _req(d: Dict[str, Any], k: str, ctx: str) -> Any:
    if k not in d or d[k] is None:
        raise ValueError(f"Falta '{k}' em {ctx}")
    return d[k]


def _req_num(d: Dict[str, Any], k: str, ctx: str) -> float:
    v = _req(d, k, ctx)
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{k}' deve ser numérico em {ctx}. Valor={v!r}") from e


def _opt_num(d: Dict[str, Any], k: str, ctx: str) -> float | None:
    if k not in d or d[k] is None:
        return None
    return _req_num(d, k, ctx)


def _montar_padrao(tipo: TipoProposta, bruto: Dict[str, Any]) -> DadosProposta:
    ctx = f"propostas.{tipo.value}"
    campos: Dict[str, Any] = {"tipo_proposta": tipo}

    for k in _CAMPOS_NUM_OBRIGATORIOS:
        campos[k] = _req_num(bruto, k, ctx)
    for k in _CAMPOS_NUM_OPCIONAIS:
        campos[k] = _opt_num(bruto, k, ctx)
    for k in _CAMPOS_TEXTO:
        campos[k] = str(bruto.get(k) or "").strip()

    campos["num_clientes"] = int(_req_num(bruto, "num_clientes", ctx))
    campos["incluir_cta_final"] = bool(bruto.get("incluir_cta_final", True))

    return DadosProposta(**campos)


def carregar_padroes(path: Path | None = None) -> Mapping[TipoProposta, DadosProposta]:
    doc = _read_yaml(path or DATA_DIR / "propostas.yaml")
    comum = doc.get("comum") or {}
    propostas = doc.get("propostas") or {}

    out: Dict[TipoProposta, DadosProposta] = {}
    for tipo in TipoProposta:
        proprio = propostas.get(tipo.value)
        if not isinstance(proprio, dict):
            raise ValueError(f"Falta 'propostas.{tipo.value}' no arquivo de padrões")
        out[tipo] = _montar_padrao(tipo, {**comum, **proprio})

    return MappingProxyType(out)


PADROES = carregar_padroes()


def padrao_para(tipo: TipoProposta | str) -> DadosProposta:
    """
    Padrão imutável de um tipo de proposta, com a conta recalculada
    a partir de consumo × tarifa (como ao trocar o tipo no formulário).
    """
    try:
        tipo = TipoProposta(tipo)
        base = PADROES[tipo]
    except (KeyError, ValueError):
        raise KeyError(f"Tipo de proposta desconhecido: {tipo!r}") from None
    return dataclasses.replace(base, conta_atual=base.consumo_kwh * base.tarifa_kwh)
