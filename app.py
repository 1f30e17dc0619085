# app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# === garantir imports do repo ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.financas import calcular_projecao
from ui import painel_controle, visualizacao
from ui.estado import ctx_get


def main() -> None:
    st.set_page_config(page_title="Gerador de Proposta Solar", layout="wide")
    st.title("Gerador de Proposta Solar")

    ctx = ctx_get(st)

    with st.sidebar:
        painel_controle.render(ctx)

    # recalcula a cada execução; o motor é puro e barato
    resultado = calcular_projecao(ctx.dados)
    visualizacao.render(ctx, resultado)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    main()
