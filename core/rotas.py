# core/rotas.py
from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Dict


def base_dir_seguro() -> Path:
    """Devolve uma base estável em Windows / Streamlit / CLI."""
    try:
        return Path(__file__).resolve().parents[1]
    except Exception:
        return Path(os.getcwd()).resolve()


def preparar_saida(nome_pasta: str | Path = "saidas") -> Dict[str, str]:
    out_dir = Path(nome_pasta)
    if not out_dir.is_absolute():
        out_dir = base_dir_seguro() / out_dir
    charts_dir = out_dir / "charts"
    charts_dir.mkdir(parents=True, exist_ok=True)

    return {
        "out_dir": str(out_dir),
        "charts_dir": str(charts_dir),
        "chart_comparativo": str(charts_dir / "grafico_comparativo.png"),
        "pdf_path": str(out_dir / "proposta_solar.pdf"),
    }


def _br(txt: str) -> str:
    # 1,234.56 -> 1.234,56
    return txt.replace(",", "_").replace(".", ",").replace("_", ".")


def num_br(x: float, nd: int = 2) -> str:
    if not math.isfinite(x):
        x = 0.0
    return _br(f"{x:,.{nd}f}")


def moeda_brl(x: float, dec: int = 2) -> str:
    v = float(x) if math.isfinite(x) else 0.0
    sinal = "-" if v < 0 and round(abs(v), dec) > 0 else ""
    return f"{sinal}R$ {num_br(abs(v), dec)}"


def pct_br(x: float, nd: int = 2) -> str:
    return f"{num_br(x, nd)}%"
