# relatorios/page_2.py
from __future__ import annotations

from typing import Any, List

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Spacer, Table, TableStyle

from core.rotas import moeda_brl

from .helpers_pdf import kpi_grid, section_bar
from .templates import template_para


def _hero(tpl, resultado, pal, styles, content_w) -> Table:
    sub = ParagraphStyle(
        name="hero_sub",
        parent=styles["BodyText"],
        fontSize=11,
        leading=15,
        textColor=colors.white,
        alignment=TA_CENTER,
    )
    destaque = ParagraphStyle(
        name="hero_valor",
        parent=styles["Hero"],
        fontSize=24,
        leading=30,
        textColor=pal["HIGHLIGHT"],
    )

    rows = [
        [Paragraph(tpl.hero_titulo, styles["Hero"])],
        [Paragraph(tpl.hero_subtitulo, sub)],
        [Paragraph("Retorno Líquido Projetado:", sub)],
        [Paragraph(moeda_brl(resultado.retorno_liquido_25anos), destaque)],
    ]
    t = Table(rows, colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["PRIMARY"]),
        ("LEFTPADDING", (0, 0), (-1, -1), 18),
        ("RIGHTPADDING", (0, 0), (-1, -1), 18),
        ("TOPPADDING", (0, 0), (0, 0), 18),
        ("BOTTOMPADDING", (0, -1), (-1, -1), 18),
    ]))
    return t


def build_page_2(resultado, dados, paths, pal, styles, content_w):
    """Hero + painel de indicadores do segmento."""
    tpl = template_para(dados.tipo_proposta)

    story: List[Any] = []
    story.append(_hero(tpl, resultado, pal, styles, content_w))
    story.append(Spacer(1, 18))

    story.append(section_bar(tpl.titulo_kpis, pal, content_w))
    story.append(Spacer(1, 10))
    story.append(kpi_grid(tpl.kpis(dados, resultado), pal, content_w, colunas=tpl.colunas_kpis))

    if tpl.aviso:
        story.append(Spacer(1, 6))
        story.append(Paragraph(tpl.aviso, styles["Nota"]))

    story.append(Spacer(1, 14))
    return story
