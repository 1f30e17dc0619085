# ui/painel_controle.py
from __future__ import annotations

from typing import Any

import streamlit as st

from core.edicao import CAMPOS_NUMERICOS, aplicar_edicao, trocar_tipo
from core.modelo import DadosProposta, TipoProposta
from ui.estado import ctx_get, ctx_set_dados

_TIPOS = [t.value for t in TipoProposta]


def _chave(campo: str) -> str:
    return f"campo_{campo}"


def _valor_widget(campo: str, v: Any) -> Any:
    if campo == "num_clientes":
        return int(v or 0)
    if campo in CAMPOS_NUMERICOS:
        return float(v or 0.0)
    return v


def _sync_widgets(dados: DadosProposta) -> None:
    """Espelha o snapshot no session_state dos widgets (inclui campos derivados)."""
    for campo, v in dados.como_dict().items():
        st.session_state[_chave(campo)] = _valor_widget(campo, v)


def _init_widgets(dados: DadosProposta) -> None:
    if _chave("tipo_proposta") not in st.session_state:
        _sync_widgets(dados)


# ==========================================================
# Callbacks
# ==========================================================
def _on_edit(campo: str) -> None:
    ctx = ctx_get(st)
    novo = aplicar_edicao(ctx.dados, campo, st.session_state[_chave(campo)])
    ctx_set_dados(ctx, novo)
    _sync_widgets(novo)


def _on_tipo() -> None:
    ctx = ctx_get(st)
    novo = trocar_tipo(st.session_state[_chave("tipo_proposta")])
    ctx_set_dados(ctx, novo)
    _sync_widgets(novo)


# ==========================================================
# Widgets
# ==========================================================
def _numero(rotulo: str, campo: str, step: float = 1.0, fmt: str = "%.2f", **kw: Any) -> None:
    st.number_input(rotulo, key=_chave(campo), step=step, format=fmt, on_change=_on_edit, args=(campo,), **kw)


def _texto(rotulo: str, campo: str, area: bool = False) -> None:
    fn = st.text_area if area else st.text_input
    fn(rotulo, key=_chave(campo), on_change=_on_edit, args=(campo,))


def render(ctx) -> None:
    _init_widgets(ctx.dados)

    st.header("Gerador de Proposta")

    st.subheader("Tipo de Proposta")
    st.selectbox(
        "Tipo de Proposta",
        options=_TIPOS,
        format_func=lambda v: TipoProposta(v).rotulo,
        key=_chave("tipo_proposta"),
        on_change=_on_tipo,
        label_visibility="collapsed",
    )

    st.subheader("Dados do Cliente e Consumo")
    _texto("Nome do Cliente / Empresa", "nome_cliente")
    _numero("Consumo Médio (kWh)", "consumo_kwh", step=10.0, fmt="%.0f")
    _numero("Tarifa (R$/kWh)", "tarifa_kwh", step=0.01)
    _numero("Conta de Luz Estimada (R$)", "conta_atual", step=10.0)
    _numero("Custo Mínimo (R$)", "taxa_minima", step=10.0)

    st.subheader("Valor do Investimento e Taxas")
    _numero("Valor Total do Investimento (R$)", "valor_investimento", step=1000.0)
    _numero("Taxa de Juros Mensal (Financiamento) %", "taxa_juros_financiamento", step=0.01)
    _numero("Taxa de Juros Mensal (Cartão) %", "taxa_juros_cartao", step=0.01)
    if ctx.dados.tipo_proposta.eh_inquilino:
        _numero("Nº de Placas (p/ Custo Mudança)", "num_placas", step=1.0, fmt="%.0f")
        _numero("Valor por Placa (R$)", "valor_por_placa", step=10.0)

    st.subheader("Parâmetros Financeiros e Ambientais")
    _numero("Reajuste Anual Energia (%)", "reajuste_energia", step=0.5)
    _numero("Rentabilidade Tesouro/CDB (% a.a.)", "taxa_ipca", step=0.5)
    _numero("Rentabilidade Poupança (% a.a.)", "taxa_poupanca", step=0.5)
    _numero("Fator de Emissão (t CO₂ / MWh)", "fator_co2", step=0.001, fmt="%.3f")
    _numero("CO₂ absorvido por árvore/ano (t)", "co2_arvore", step=0.001, fmt="%.3f")

    st.subheader("Dados da Empresa e Opções")
    _texto("Link do WhatsApp", "link_whatsapp")
    _texto("Nº Contato (para proposta sem CTA)", "contato_alternativo")
    st.number_input(
        "Nº de Clientes Atendidos",
        key=_chave("num_clientes"),
        step=1,
        min_value=0,
        on_change=_on_edit,
        args=("num_clientes",),
    )
    _texto("Depoimento Cliente", "depoimento", area=True)
    st.checkbox(
        "Incluir Seção 'Agende sua Visita' no PDF?",
        key=_chave("incluir_cta_final"),
        on_change=_on_edit,
        args=("incluir_cta_final",),
    )
