# relatorios/page_1.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List
from xml.sax.saxutils import escape

from reportlab.platypus import Image, PageBreak, Paragraph, Spacer

from .templates import template_para


def _logo(paths, content_w) -> List[Any]:
    logo = (paths or {}).get("logo")
    if logo and Path(str(logo)).exists():
        img = Image(str(logo), width=content_w * 0.4, height=content_w * 0.4 * 0.35)
        img.hAlign = "CENTER"
        return [img, Spacer(1, 30)]
    return []


def build_page_1(resultado, dados, paths, pal, styles, content_w):
    """Capa: título do segmento, cliente e data da proposta."""
    tpl = template_para(dados.tipo_proposta)

    story: List[Any] = [Spacer(1, 140)]
    story += _logo(paths, content_w)

    story.append(Paragraph(tpl.capa_titulo, styles["H1Capa"]))
    story.append(Spacer(1, 6))
    story.append(Paragraph(tpl.capa_subtitulo, styles["H1Capa"]))
    story.append(Spacer(1, 40))

    story.append(Paragraph(f"Preparada para: <b>{escape(dados.nome_cliente)}</b>", styles["Centro"]))
    story.append(Spacer(1, 6))
    story.append(Paragraph(f"Data: {resultado.data_proposta}", styles["Centro"]))

    story.append(PageBreak())
    return story
