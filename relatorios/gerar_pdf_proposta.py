# relatorios/gerar_pdf_proposta.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from reportlab.lib.pagesizes import letter
from reportlab.platypus import SimpleDocTemplate

from core.modelo import DadosProposta, ResultadoProjecao

from .page_1 import build_page_1
from .page_2 import build_page_2
from .page_3 import build_page_3
from .page_4 import build_page_4
from .styles import pdf_palette, pdf_styles

logger = logging.getLogger(__name__)


def _ensure_pdf_path(paths: Dict[str, Any]) -> str:
    """Garante paths["pdf_path"] e a pasta correspondente."""
    if not isinstance(paths, dict):
        raise TypeError("`paths` deve ser dict e conter 'pdf_path'.")

    pdf_path = paths.get("pdf_path")
    if not pdf_path:
        out_dir = paths.get("out_dir") or "saidas"
        pdf_path = str(Path(out_dir) / "proposta_solar.pdf")
        paths["pdf_path"] = pdf_path

    p = Path(str(pdf_path))
    p.parent.mkdir(parents=True, exist_ok=True)
    return str(p)


def gerar_pdf_proposta(dados: DadosProposta, resultado: ResultadoProjecao, paths: Dict[str, Any]) -> str:
    """
    `dados` = snapshot de entrada (cliente, textos, tipo de proposta).
    `resultado` = projeção já calculada; aqui nada é recalculado.
    `paths` = rotas de saída (pdf_path, chart_comparativo, logo opcional).
    """
    pal = pdf_palette()
    styles = pdf_styles()

    pdf_path = _ensure_pdf_path(paths)
    doc = SimpleDocTemplate(
        pdf_path,
        pagesize=letter,
        leftMargin=36,
        rightMargin=36,
        topMargin=36,
        bottomMargin=36,
        title=f"Proposta Solar - {dados.nome_cliente}",
    )
    content_w = doc.width

    story = []
    story += build_page_1(resultado, dados, paths, pal, styles, content_w)
    story += build_page_2(resultado, dados, paths, pal, styles, content_w)
    story += build_page_3(resultado, dados, paths, pal, styles, content_w)
    story += build_page_4(resultado, dados, paths, pal, styles, content_w)

    doc.build(story)
    logger.info("PDF da proposta gerado em %s", pdf_path)
    return pdf_path
