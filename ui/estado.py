# ui/estado.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from core.modelo import DadosProposta, TipoProposta
from core.padroes import padrao_para

PASTA_SAIDAS = "saidas"


# ==========================================================
# Contexto da sessão
# ==========================================================
@dataclass
class PropostaCtx:
    # snapshot atual; trocado inteiro a cada edição
    dados: DadosProposta = field(default_factory=lambda: padrao_para(TipoProposta.EMPRESARIAL))

    # artefatos gerados (gráfico, pdf) e o fingerprint das entradas que os geraram
    artefactos: Dict[str, str] = field(default_factory=dict)
    pdf_fingerprint: Optional[str] = None

    # subpasta própria: sessões simultâneas não sobrescrevem o PDF uma da outra
    sessao: str = field(default_factory=lambda: uuid.uuid4().hex)


def ctx_get(st) -> PropostaCtx:
    """Obtém o contexto do session_state, criando-o na primeira execução."""
    if "proposta_ctx" not in st.session_state:
        st.session_state["proposta_ctx"] = PropostaCtx()
    return st.session_state["proposta_ctx"]


def ctx_set_dados(ctx: PropostaCtx, dados: DadosProposta) -> None:
    ctx.dados = dados


def pasta_saida(ctx: PropostaCtx) -> Path:
    return Path(PASTA_SAIDAS) / ctx.sessao
