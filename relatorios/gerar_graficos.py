# relatorios/gerar_graficos.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from core.modelo import ResultadoProjecao
from core.rotas import moeda_brl

logger = logging.getLogger(__name__)

SERIES = ("Energia Solar", "Tesouro/CDB", "Poupança")
CORES = ("#38761d", "#073763", "#6b7280")
HORIZONTES = ("10 Anos", "25 Anos")


def dados_comparativos(r: ResultadoProjecao) -> Dict[str, List[float]]:
    """Série por instrumento, na ordem de HORIZONTES."""
    return {
        "Energia Solar": [r.economia_acumulada_10anos, r.economia_acumulada_25anos],
        "Tesouro/CDB": [r.fv_ipca_10, r.fv_ipca_25],
        "Poupança": [r.fv_poup_10, r.fv_poup_25],
    }


def _mkdir_charts(out_dir: Optional[str]) -> Path:
    base = Path(out_dir) if out_dir else Path("saidas") / "charts"
    base.mkdir(parents=True, exist_ok=True)
    return base


def figura_comparativa(r: ResultadoProjecao):
    series = dados_comparativos(r)
    largura = 0.26

    fig, ax = plt.subplots(figsize=(8, 4))
    for i, (nome, cor) in enumerate(zip(SERIES, CORES)):
        xs = [h + (i - 1) * largura for h in range(len(HORIZONTES))]
        ax.bar(xs, series[nome], width=largura, color=cor, label=nome)

    ax.set_xticks(range(len(HORIZONTES)))
    ax.set_xticklabels(HORIZONTES)
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: moeda_brl(v, dec=0)))
    ax.grid(axis="y", linestyle="--", alpha=0.5)
    ax.legend()
    fig.tight_layout()
    return fig


def gerar_grafico_comparativo(r: ResultadoProjecao, out_dir: Optional[str] = None) -> Dict[str, str]:
    """
    Gera o PNG do comparativo solar × Tesouro/CDB × Poupança.

    Devolve {"chart_comparativo": caminho} para mesclar em `paths`.
    """
    base = _mkdir_charts(out_dir)
    out_path = base / "grafico_comparativo.png"

    fig = figura_comparativa(r)
    fig.savefig(out_path, dpi=160)
    plt.close(fig)

    logger.debug("Gráfico comparativo salvo em %s", out_path)
    return {"chart_comparativo": str(out_path)}
