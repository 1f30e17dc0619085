# core/calcular.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .edicao import aplicar_edicao
from .financas import calcular_projecao
from .modelo import TipoProposta
from .padroes import padrao_para
from .rotas import preparar_saida

from relatorios.gerar_graficos import gerar_grafico_comparativo
from relatorios.gerar_pdf_proposta import gerar_pdf_proposta

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Gera o PDF da proposta solar com os valores padrão de um segmento.")
    ap.add_argument(
        "--tipo",
        choices=[t.value for t in TipoProposta],
        default=TipoProposta.EMPRESARIAL.value,
        help="Tipo de proposta (segmento).",
    )
    ap.add_argument("--cliente", default=None, help="Nome do cliente impresso na capa.")
    ap.add_argument("--saida", default="saidas", help="Pasta de saída.")
    ap.add_argument("--logo", default=None, help="Imagem (PNG/JPG) do logo impresso na capa.")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> str:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dados = padrao_para(args.tipo)
    if args.cliente:
        dados = aplicar_edicao(dados, "nome_cliente", args.cliente)

    paths = preparar_saida(args.saida)
    if args.logo:
        if not Path(args.logo).exists():
            raise FileNotFoundError(f"Logo não encontrado: {args.logo}")
        paths["logo"] = str(Path(args.logo).resolve())
    resultado = calcular_projecao(dados)

    paths.update(gerar_grafico_comparativo(resultado, paths["charts_dir"]))
    pdf = gerar_pdf_proposta(dados, resultado, paths)
    logger.info("Proposta %s gerada em %s", dados.tipo_proposta.rotulo, pdf)
    return pdf


if __name__ == "__main__":
    main()
