# relatorios/page_3.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List

from reportlab.platypus import Image, PageBreak, Paragraph, Spacer, TableStyle

from core.rotas import moeda_brl, num_br

from .gerar_graficos import HORIZONTES, SERIES, dados_comparativos
from .helpers_pdf import box_paragraph, make_table, section_bar, table_style_uniform, tabela_2cols
from .templates import premissas_texto

NOTA_IR = (
    "Nota: A rentabilidade de investimentos como Tesouro e Poupança é projetada com o Imposto "
    "de Renda já descontado para uma comparação justa."
)


def p3_investimento(resultado, pal, styles, content_w) -> List[Any]:
    story: List[Any] = [section_bar("Investimento e Condições de Pagamento", pal, content_w), Spacer(1, 8)]

    story.append(box_paragraph(
        "<b>Valor do Investimento (à vista)</b><br/>"
        f"<font size=20 color='#073763'><b>{moeda_brl(resultado.preco_sistema)}</b></font><br/><br/>"
        "<font size=8>Este valor contempla todos os equipamentos, projeto, instalação e homologação.</font>",
        pal,
        content_w,
        font_size=11,
    ))
    story.append(Spacer(1, 8))

    rows = [
        ["Financiamento em 60x", moeda_brl(resultado.parcela_finan_60)],
        ["Financiamento em 90x", moeda_brl(resultado.parcela_finan_90)],
        ["Financiamento em 120x", moeda_brl(resultado.parcela_finan_120)],
        ["Cartão de Crédito em 24x", moeda_brl(resultado.parcela_cartao_24)],
    ]
    story.append(tabela_2cols(
        header=["Simulação de Parcelamento", "Parcela"],
        rows=rows,
        content_w=content_w,
        pal=pal,
        highlight_rows=range(len(rows)),
    ))
    story.append(Spacer(1, 14))
    return story


def _tabela_comparativa(resultado, pal, content_w):
    series = dados_comparativos(resultado)
    header = ["Projeção", "Retorno com Energia Solar", SERIES[1], SERIES[2]]
    data = [header]
    for i, horizonte in enumerate(HORIZONTES):
        data.append([horizonte] + [moeda_brl(series[nome][i]) for nome in SERIES])

    t = make_table(data, content_w, ratios=[1.0, 1.6, 1.3, 1.3], repeatRows=1)
    t.setStyle(table_style_uniform(pal, font_header=9, font_body=10))
    t.setStyle(TableStyle([
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("FONTNAME", (1, 1), (1, -1), "Helvetica-Bold"),
        ("TEXTCOLOR", (1, 1), (1, -1), pal["OK"]),
    ]))
    return t


def p3_analise_financeira(resultado, paths, pal, styles, content_w) -> List[Any]:
    story: List[Any] = [section_bar("Análise Financeira: Seu Investimento em Detalhes", pal, content_w), Spacer(1, 8)]

    chart = (paths or {}).get("chart_comparativo")
    if chart and Path(str(chart)).exists():
        img = Image(str(chart), width=content_w, height=content_w * 0.5)
        img.hAlign = "CENTER"
        story.append(img)
        story.append(Spacer(1, 6))

    story.append(_tabela_comparativa(resultado, pal, content_w))
    story.append(Spacer(1, 4))
    story.append(Paragraph(NOTA_IR, styles["Nota"]))
    story.append(Spacer(1, 12))
    return story


def p3_impacto_ambiental(resultado, pal, content_w) -> List[Any]:
    txt = (
        "<b>Impacto Ambiental (25 anos)</b><br/>"
        f"• Geração anual estimada: <b>{num_br(resultado.geracao_anual_mwh, 2)} MWh</b><br/>"
        f"• CO<sub>2</sub> evitado: <b>{num_br(resultado.co2_evitado_total, 2)} t</b><br/>"
        f"• Equivalente a <b>{num_br(resultado.arvores_salvas_total, 0)} árvores</b> preservadas"
    )
    return [box_paragraph(txt, pal, content_w, font_size=10)]


def build_page_3(resultado, dados, paths, pal, styles, content_w):
    story: List[Any] = []
    story += p3_investimento(resultado, pal, styles, content_w)
    story += p3_analise_financeira(resultado, paths, pal, styles, content_w)
    story += [Paragraph(premissas_texto(dados), styles["Nota"]), Spacer(1, 12)]
    story += p3_impacto_ambiental(resultado, pal, content_w)
    story.append(PageBreak())
    return story
