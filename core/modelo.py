# core/modelo.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class TipoProposta(str, Enum):
    EMPRESARIAL = "Business"
    EMPRESARIAL_INQUILINO = "BusinessRenter"
    RESIDENCIAL = "Residential"
    RESIDENCIAL_INQUILINO = "ResidentialRenter"
    RURAL = "Rural"

    @property
    def rotulo(self) -> str:
        return _ROTULOS[self]

    @property
    def eh_inquilino(self) -> bool:
        # só o residencial inquilino pede placas/valor por placa no formulário
        return self is TipoProposta.RESIDENCIAL_INQUILINO


_ROTULOS = {
    TipoProposta.EMPRESARIAL: "Empresarial (Proprietário)",
    TipoProposta.EMPRESARIAL_INQUILINO: "Empresarial (Inquilino)",
    TipoProposta.RESIDENCIAL: "Residencial (Proprietário)",
    TipoProposta.RESIDENCIAL_INQUILINO: "Residencial (Inquilino)",
    TipoProposta.RURAL: "Rural",
}


@dataclass(frozen=True)
class DadosProposta:
    tipo_proposta: TipoProposta = TipoProposta.EMPRESARIAL
    nome_cliente: str = ""

    # cliente e consumo
    consumo_kwh: float = 0.0              # média mensal (kWh)
    tarifa_kwh: float = 0.0               # R$/kWh
    conta_atual: float = 0.0              # R$/mês
    taxa_minima: float = 0.0              # R$/mês após a usina

    # investimento
    valor_investimento: float = 0.0
    taxa_juros_financiamento: float = 0.0  # % a.m.
    taxa_juros_cartao: float = 0.0         # % a.m.

    # inquilino
    num_placas: Optional[float] = None
    valor_por_placa: Optional[float] = None

    # projeções
    reajuste_energia: float = 0.0         # % a.a.
    taxa_ipca: float = 0.0                # % a.a. (Tesouro/CDB)
    taxa_poupanca: float = 0.0            # % a.a.

    # ambiental
    fator_co2: float = 0.0                # t CO2 / MWh
    co2_arvore: float = 0.0               # t CO2 / árvore / ano

    # empresa e opções
    link_whatsapp: str = ""
    contato_alternativo: str = ""
    num_clientes: int = 0
    depoimento: str = ""
    incluir_cta_final: bool = True

    def como_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["tipo_proposta"] = self.tipo_proposta.value
        return d


@dataclass(frozen=True)
class ResultadoProjecao:
    data_proposta: str
    preco_sistema: float
    economia_mensal: float
    economia_anual_base: float

    parcela_finan_60: float
    parcela_finan_90: float
    parcela_finan_120: float
    parcela_cartao_24: float

    payback_real: int                     # 0 = não atingido em 25 anos
    economia_acumulada_10anos: float
    economia_acumulada_25anos: float
    retorno_liquido_25anos: float

    fv_ipca_10: float
    fv_ipca_25: float
    fv_poup_10: float
    fv_poup_25: float

    geracao_anual_mwh: float
    co2_evitado_total: float              # 2 casas decimais
    arvores_salvas_total: int
    custo_reinstalacao: float

    @property
    def payback_atingido(self) -> bool:
        return self.payback_real > 0

    def valores_numericos(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("data_proposta")
        return d
