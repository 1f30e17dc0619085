# ui/state_helpers.py
from __future__ import annotations

import hashlib
import json
from typing import Any, Dict


def _norm_value(x: Any) -> Any:
    if isinstance(x, dict):
        return {str(k): _norm_value(v) for k, v in sorted(x.items(), key=lambda kv: str(kv[0]))}
    if isinstance(x, (list, tuple)):
        return [_norm_value(v) for v in x]
    if isinstance(x, (str, int, float, bool)) or x is None:
        return x
    return str(x)


def _entradas(ctx: Any) -> Dict[str, Any]:
    # Só INPUTS. Resultados e artefatos ficam fora.
    dados = getattr(ctx, "dados", None)
    if dados is None:
        return {}
    if hasattr(dados, "como_dict"):
        return dados.como_dict()
    return dict(getattr(dados, "__dict__", {}) or {})


def build_inputs_fingerprint(ctx: Any) -> str:
    payload = _norm_value(_entradas(ctx))
    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def save_result_fingerprint(ctx: Any) -> str:
    fp = build_inputs_fingerprint(ctx)
    setattr(ctx, "pdf_fingerprint", fp)
    return fp


def is_result_stale(ctx: Any) -> bool:
    saved = getattr(ctx, "pdf_fingerprint", None)
    if not saved:
        return False
    return str(saved) != build_inputs_fingerprint(ctx)
