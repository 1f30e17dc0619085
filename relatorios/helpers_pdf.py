# relatorios/helpers_pdf.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Table, TableStyle


@dataclass(frozen=True)
class Kpi:
    rotulo: str
    valor: str
    destaque: bool = False


def section_bar(texto: str, pal: Dict[str, Any], content_w: float) -> Table:
    style = ParagraphStyle(
        name="section_bar",
        fontName="Helvetica-Bold",
        fontSize=12,
        leading=15,
        textColor=colors.white,
        leftIndent=6,
    )

    t = Table([[Paragraph(texto, style)]], colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["PRIMARY"]),
        ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
    ]))
    return t


def make_table(data: List[List[Any]], content_w: float, *, ratios=None, repeatRows: int = 0) -> Table:
    if ratios:
        s = float(sum(ratios))
        col_widths = [content_w * (r / s) for r in ratios]
    else:
        ncols = len(data[0]) if data else 1
        col_widths = [content_w / ncols] * ncols
    return Table(data, colWidths=col_widths, repeatRows=repeatRows)


def table_style_uniform(pal: Dict[str, Any], *, font_header=9, font_body=9) -> TableStyle:
    primary = pal.get("PRIMARY", colors.HexColor("#073763"))
    border = pal.get("BORDER", colors.HexColor("#D7DCE3"))
    soft = pal.get("SOFT", colors.HexColor("#EDF2F7"))

    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), primary),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), font_header),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, -1), font_body),
        ("GRID", (0, 0), (-1, -1), 0.6, border),
        ("BACKGROUND", (0, 1), (-1, -1), soft),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])


def tabela_2cols(header, rows, content_w, pal, highlight_rows: Sequence[int] = (), font_header=10, font_body=10):
    data = [header] + rows
    t = make_table(data, content_w, ratios=[2.6, 1.4], repeatRows=1)
    t.setStyle(table_style_uniform(pal, font_header=font_header, font_body=font_body))
    t.setStyle(TableStyle([
        ("ALIGN", (1, 1), (1, -1), "RIGHT"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
    ]))
    for idx in highlight_rows:
        r = idx + 1
        t.setStyle(TableStyle([
            ("TEXTCOLOR", (1, r), (1, r), pal["OK"]),
            ("FONTNAME", (1, r), (1, r), "Helvetica-Bold"),
        ]))
    return t


def box_paragraph(html_text: str, pal: Dict[str, Any], content_w: float, *, font_size=10, align=None) -> Table:
    style = ParagraphStyle(
        name="box",
        fontName="Helvetica",
        fontSize=font_size,
        leading=font_size + 3,
        alignment=TA_CENTER if align == "center" else 0,
    )
    t = Table([[Paragraph(html_text, style)]], colWidths=[content_w])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal.get("SOFT")),
        ("BOX", (0, 0), (-1, -1), 0.8, pal.get("BORDER")),
        ("LEFTPADDING", (0, 0), (-1, -1), 10),
        ("RIGHTPADDING", (0, 0), (-1, -1), 10),
        ("TOPPADDING", (0, 0), (-1, -1), 8),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
    ]))
    return t


def _kpi_card(kpi: Kpi, pal: Dict[str, Any], w: float) -> Table:
    cor = pal["OK"] if kpi.destaque else pal["PRIMARY"]
    rotulo = ParagraphStyle(
        name="kpi_rotulo",
        fontName="Helvetica-Bold",
        fontSize=7,
        leading=9,
        textColor=pal["MUTED"],
        alignment=TA_CENTER,
    )
    valor = ParagraphStyle(
        name="kpi_valor",
        fontName="Helvetica-Bold",
        fontSize=15,
        leading=18,
        textColor=cor,
        alignment=TA_CENTER,
    )

    t = Table(
        [[Paragraph(kpi.rotulo.upper(), rotulo)], [Paragraph(kpi.valor, valor)]],
        colWidths=[w],
    )
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["OK_SOFT"] if kpi.destaque else pal["SOFT"]),
        ("BOX", (0, 0), (-1, -1), 1.4 if kpi.destaque else 0.6, cor if kpi.destaque else pal["BORDER"]),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ]))
    return t


def kpi_grid(kpis: Sequence[Kpi], pal: Dict[str, Any], content_w: float, *, colunas: int = 3) -> Table:
    """Cartões de indicadores em grade, `colunas` por linha."""
    gap = 8.0
    card_w = (content_w - gap * (colunas - 1)) / colunas

    linhas: List[List[Any]] = []
    for i in range(0, len(kpis), colunas):
        linha: List[Any] = [_kpi_card(k, pal, card_w - 4) for k in kpis[i:i + colunas]]
        linha += [""] * (colunas - len(linha))
        linhas.append(linha)

    t = Table(linhas, colWidths=[content_w / colunas] * colunas)
    t.setStyle(TableStyle([
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("BOTTOMPADDING", (0, 0), (-1, -1), gap),
    ]))
    return t
