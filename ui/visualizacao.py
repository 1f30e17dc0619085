# ui/visualizacao.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import streamlit as st

from core.financas import PRAZO_CARTAO, PRAZOS_FINANCIAMENTO
from core.modelo import ResultadoProjecao
from core.rotas import moeda_brl, num_br, preparar_saida
from core.validacao import avisos_entrada
from relatorios.gerar_graficos import figura_comparativa, gerar_grafico_comparativo
from relatorios.gerar_pdf_proposta import gerar_pdf_proposta
from relatorios.templates import premissas_texto, template_para
from ui.estado import pasta_saida
from ui.state_helpers import is_result_stale, save_result_fingerprint

logger = logging.getLogger(__name__)


# ==========================================================
# Render: KPIs e blocos
# ==========================================================
def _render_kpis(ctx, r: ResultadoProjecao) -> None:
    tpl = template_para(ctx.dados.tipo_proposta)
    kpis = tpl.kpis(ctx.dados, r)

    st.markdown(f"#### {tpl.titulo_kpis}")
    n = max(1, int(tpl.colunas_kpis))
    for i in range(0, len(kpis), n):
        cols = st.columns(n)
        for col, k in zip(cols, kpis[i:i + n]):
            col.metric(k.rotulo, k.valor)


def _render_investimento(r: ResultadoProjecao) -> None:
    st.markdown("#### Investimento e Condições")
    st.metric("Preço do Sistema (à vista)", moeda_brl(r.preco_sistema))

    parcelas = [
        (f"Financiamento {PRAZOS_FINANCIAMENTO[0]}x", r.parcela_finan_60),
        (f"Financiamento {PRAZOS_FINANCIAMENTO[1]}x", r.parcela_finan_90),
        (f"Financiamento {PRAZOS_FINANCIAMENTO[2]}x", r.parcela_finan_120),
        (f"Cartão de Crédito {PRAZO_CARTAO}x", r.parcela_cartao_24),
    ]
    st.table({
        "Condição": [c for c, _ in parcelas],
        "Parcela": [moeda_brl(v) for _, v in parcelas],
    })


def _render_comparativo(ctx, r: ResultadoProjecao) -> None:
    st.markdown("#### Comparativo de Investimentos")
    fig = figura_comparativa(r)
    st.pyplot(fig)
    plt.close(fig)

    st.table({
        "Investimento": ["Energia Solar", "Tesouro/CDB", "Poupança"],
        "10 anos": [moeda_brl(r.economia_acumulada_10anos), moeda_brl(r.fv_ipca_10), moeda_brl(r.fv_poup_10)],
        "25 anos": [moeda_brl(r.economia_acumulada_25anos), moeda_brl(r.fv_ipca_25), moeda_brl(r.fv_poup_25)],
    })
    st.caption(premissas_texto(ctx.dados))


def _render_ambiental(r: ResultadoProjecao) -> None:
    st.markdown("#### Impacto Ambiental (25 anos)")
    c1, c2, c3 = st.columns(3)
    c1.metric("Geração anual", f"{num_br(r.geracao_anual_mwh, 2)} MWh")
    c2.metric("CO₂ evitado", f"{num_br(r.co2_evitado_total, 2)} t")
    c3.metric("Árvores equivalentes", num_br(r.arvores_salvas_total, 0))


def _render_avisos(ctx, r: ResultadoProjecao) -> None:
    for aviso in avisos_entrada(ctx.dados, r):
        st.warning(aviso)


# ==========================================================
# Ações: PDF
# ==========================================================
def _salvar_logo(logo, out_dir: str) -> str:
    destino = Path(out_dir) / f"logo{Path(logo.name).suffix.lower()}"
    destino.write_bytes(logo.getvalue())
    return str(destino)


def _gerar_pdf_safe(ctx, r: ResultadoProjecao, logo=None) -> Optional[str]:
    paths = preparar_saida(pasta_saida(ctx))
    if logo is not None:
        paths["logo"] = _salvar_logo(logo, paths["out_dir"])

    try:
        paths.update(gerar_grafico_comparativo(r, paths["charts_dir"]))
    except Exception as e:
        logger.exception("Falha ao gerar gráfico comparativo")
        st.warning(f"Não foi possível gerar o gráfico ({e}). O PDF será gerado sem ele.")

    try:
        pdf_path = gerar_pdf_proposta(ctx.dados, r, paths)
    except Exception as e:
        logger.exception("Falha ao gerar PDF da proposta")
        st.error(f"Não foi possível gerar o PDF: {e}")
        return None

    ctx.artefactos.update({k: str(v) for k, v in paths.items() if k in ("chart_comparativo", "pdf_path")})
    save_result_fingerprint(ctx)
    return pdf_path


def _nome_arquivo(ctx) -> str:
    nome = "_".join((ctx.dados.nome_cliente or "cliente").split())
    return f"Proposta_Solar_{nome}.pdf"


def _render_pdf(ctx, r: ResultadoProjecao) -> None:
    st.markdown("#### Proposta em PDF")

    logo = st.file_uploader("Logo da empresa para a capa (opcional)", type=["png", "jpg", "jpeg"])
    if st.button("Gerar PDF da Proposta", type="primary"):
        if _gerar_pdf_safe(ctx, r, logo):
            st.success("PDF gerado.")

    pdf_path = ctx.artefactos.get("pdf_path")
    if not pdf_path or not Path(pdf_path).exists():
        return

    if is_result_stale(ctx):
        st.warning("Os dados mudaram depois da geração do PDF. Gere novamente antes de baixar.")
        return

    with open(pdf_path, "rb") as f:
        st.download_button(
            "Baixar PDF",
            data=f,
            file_name=_nome_arquivo(ctx),
            mime="application/pdf",
        )


def render(ctx, resultado: ResultadoProjecao) -> None:
    tpl = template_para(ctx.dados.tipo_proposta)
    st.markdown(f"### {tpl.capa_titulo} {tpl.capa_subtitulo}")
    st.caption(f"{ctx.dados.nome_cliente or 'Cliente'} · {resultado.data_proposta}")

    _render_avisos(ctx, resultado)
    _render_kpis(ctx, resultado)
    st.divider()

    _render_investimento(resultado)
    st.divider()

    _render_comparativo(ctx, resultado)
    st.divider()

    _render_ambiental(resultado)
    st.divider()

    _render_pdf(ctx, resultado)
