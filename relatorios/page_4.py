# relatorios/page_4.py
from __future__ import annotations

import re
from typing import Any, List
from xml.sax.saxutils import escape

from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, Spacer, Table, TableStyle

from .helpers_pdf import box_paragraph, section_bar
from .templates import template_para

GARANTIAS = (
    ("Geração", "Garantia de que o sistema irá gerar a energia projetada. Performance e eficiência asseguradas em contrato."),
    ("Equipamento", "Trabalhamos apenas com equipamentos Tier 1, com até 25 anos de garantia de fábrica contra defeitos."),
    ("Instalação", "Nossa equipe técnica garante uma instalação segura e eficiente, seguindo todas as normas de engenharia."),
)


def link_whatsapp_contato(contato: str) -> str:
    return f"https://wa.me/55{re.sub(r'[^0-9]', '', contato or '')}"


def _attr(valor: str) -> str:
    # valor dentro de href='...': aspas também precisam virar entidade
    return escape(valor or "", {"'": "&#39;", '"': "&quot;"})


def _hex(cor) -> str:
    return "#" + cor.hexval()[2:]


def qr_code(valor: str, tamanho: float = 150.0) -> Drawing:
    w = QrCodeWidget(valor)
    x0, y0, x1, y1 = w.getBounds()
    d = Drawing(tamanho, tamanho, transform=[tamanho / (x1 - x0), 0, 0, tamanho / (y1 - y0), 0, 0])
    d.add(w)
    d.hAlign = "CENTER"
    return d


# ==========================================================
# Blocos
# ==========================================================
def p4_garantias(pal, styles, content_w) -> List[Any]:
    titulo = ParagraphStyle(
        name="garantia_titulo",
        fontName="Helvetica-Bold",
        fontSize=18,
        leading=22,
        textColor=pal["PRIMARY"],
        alignment=TA_CENTER,
    )
    corpo = ParagraphStyle(name="garantia_corpo", parent=styles["BodyText"], fontSize=9, leading=12, alignment=TA_CENTER)

    celulas = [[Paragraph(t, titulo), Spacer(1, 4), Paragraph(txt, corpo)] for t, txt in GARANTIAS]
    t = Table([celulas], colWidths=[content_w / 3] * 3)
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), pal["SOFT"]),
        ("BOX", (0, 0), (-1, -1), 0.6, pal["BORDER"]),
        ("INNERGRID", (0, 0), (-1, -1), 0.6, pal["BORDER"]),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("TOPPADDING", (0, 0), (-1, -1), 10),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
    ]))

    return [
        section_bar("Garantia Tripla de Segurança para seu Investimento", pal, content_w),
        Spacer(1, 8),
        t,
        Spacer(1, 14),
    ]


def p4_prova_social(dados, pal, styles, content_w) -> List[Any]:
    tpl = template_para(dados.tipo_proposta)
    story: List[Any] = [section_bar("Nossa Experiência a Serviço do Seu Negócio", pal, content_w), Spacer(1, 8)]

    story.append(Paragraph(
        f"<b>Mais de {int(dados.num_clientes)} {tpl.substantivo_clientes}s em Rondônia "
        "já otimizam seus custos conosco.</b>",
        styles["Centro"],
    ))
    story.append(Spacer(1, 8))
    if dados.depoimento:
        story.append(box_paragraph(f"<i>{escape(dados.depoimento)}</i>", pal, content_w, align="center"))
    story.append(Spacer(1, 14))
    return story


def p4_cta(dados, pal, styles, content_w) -> List[Any]:
    if not dados.incluir_cta_final:
        link = link_whatsapp_contato(dados.contato_alternativo)
        return [
            Paragraph("Para agendar a visita ou tirar dúvidas, entre em contato:", styles["Centro"]),
            Paragraph(
                f"<link href='{_attr(link)}'><b>WhatsApp {escape(dados.contato_alternativo)}</b></link>",
                styles["Centro"],
            ),
        ]

    story: List[Any] = [section_bar("AGENDE SUA VISITA TÉCNICA", pal, content_w), Spacer(1, 8)]
    story.append(Paragraph(
        "Com a proposta pré-aprovada, o próximo passo é agendar a visita. Clique no link ou escaneie o "
        "QR Code para falar com nosso especialista e marcar o melhor dia e horário.",
        styles["Centro"],
    ))
    story.append(Spacer(1, 8))

    if dados.link_whatsapp:
        verde = _hex(pal["WHATSAPP"])
        story.append(Paragraph(
            f"<link href='{_attr(dados.link_whatsapp)}'><font color='{verde}'><b>Agendar Visita Técnica</b></font></link>",
            styles["Centro"],
        ))
        story.append(Spacer(1, 8))
        story.append(qr_code(dados.link_whatsapp))
    return story


def build_page_4(resultado, dados, paths, pal, styles, content_w):
    story: List[Any] = []
    story += p4_garantias(pal, styles, content_w)
    story += p4_prova_social(dados, pal, styles, content_w)
    story += p4_cta(dados, pal, styles, content_w)
    return story
