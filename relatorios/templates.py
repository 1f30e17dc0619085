# relatorios/templates.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from core.modelo import DadosProposta, ResultadoProjecao, TipoProposta
from core.rotas import moeda_brl, num_br, pct_br

from .helpers_pdf import Kpi

KpiFn = Callable[[DadosProposta, ResultadoProjecao], List[Kpi]]


@dataclass(frozen=True)
class TemplateSegmento:
    capa_titulo: str
    capa_subtitulo: str
    hero_titulo: str
    hero_subtitulo: str
    titulo_kpis: str
    kpis: KpiFn
    colunas_kpis: int = 3
    substantivo_clientes: str = "empresa"
    aviso: Optional[str] = None


def texto_payback(r: ResultadoProjecao) -> str:
    if not r.payback_atingido:
        return "Acima de 25 anos"
    return f"{r.payback_real} anos"


def premissas_texto(d: DadosProposta) -> str:
    return (
        f"Premissas: reajuste anual da energia de {pct_br(d.reajuste_energia)}; "
        f"Tesouro/CDB a {pct_br(d.taxa_ipca)} a.a.; Poupança a {pct_br(d.taxa_poupanca)} a.a.; "
        f"financiamento a {pct_br(d.taxa_juros_financiamento)} a.m. e cartão a {pct_br(d.taxa_juros_cartao)} a.m."
    )


# ==========================================================
# KPIs por segmento
# ==========================================================
def _kpis_empresarial(d: DadosProposta, r: ResultadoProjecao) -> List[Kpi]:
    return [
        Kpi("Custo Operacional (Energia)", moeda_brl(d.conta_atual)),
        Kpi("Custo Pós-Investimento", moeda_brl(d.taxa_minima)),
        Kpi("Redução Imediata de Custo", moeda_brl(r.economia_mensal), True),
        Kpi("Lucro Líquido (25 anos)", moeda_brl(r.retorno_liquido_25anos), True),
        Kpi("Payback do Investimento", texto_payback(r), True),
        Kpi("Garantia de Performance", "25 anos", True),
    ]


def _kpis_rural(d: DadosProposta, r: ResultadoProjecao) -> List[Kpi]:
    return [
        Kpi("Custo Atual com Energia", moeda_brl(d.conta_atual)),
        Kpi("Fatura Pós Investimento", moeda_brl(d.taxa_minima)),
        Kpi("Lucro Mensal Imediato", moeda_brl(r.economia_mensal), True),
        Kpi("Lucro Líquido (25 anos)", moeda_brl(r.retorno_liquido_25anos), True),
        Kpi("Payback do Investimento", texto_payback(r), True),
        Kpi("Garantia de Geração", "25 anos", True),
    ]


def _kpis_residencial(d: DadosProposta, r: ResultadoProjecao) -> List[Kpi]:
    return [
        Kpi("Consumo Médio Mensal", f"{num_br(d.consumo_kwh, 0)} kWh"),
        Kpi("Sua Conta de Luz Atual", moeda_brl(d.conta_atual)),
        Kpi("Nova Conta de Luz", moeda_brl(d.taxa_minima)),
        Kpi("Economia Mensal Imediata", moeda_brl(r.economia_mensal), True),
    ]


def _kpis_inquilino(d: DadosProposta, r: ResultadoProjecao) -> List[Kpi]:
    return [
        Kpi("Sua Conta Atual", moeda_brl(d.conta_atual)),
        Kpi("Sua Nova Conta", moeda_brl(d.taxa_minima), True),
        Kpi("Economia no Bolso", moeda_brl(r.economia_mensal), True),
        Kpi("Lucro Líquido (25 anos)", moeda_brl(r.retorno_liquido_25anos), True),
        Kpi("Payback do Ativo", texto_payback(r), True),
        Kpi("Custo Médio de Mudança", moeda_brl(r.custo_reinstalacao)),
    ]


_EMPRESARIAL = TemplateSegmento(
    capa_titulo="Proposta de Investimento em",
    capa_subtitulo="Usina Fotovoltaica",
    hero_titulo="TRANSFORME SEU CUSTO DE ENERGIA EM UM ATIVO ESTRATÉGICO",
    hero_subtitulo=(
        "Aumente sua margem de lucro, blinde seu caixa contra a inflação energética e ganhe "
        "previsibilidade orçamentária para os próximos 25 anos."
    ),
    titulo_kpis="Dashboard Executivo: Análise de Viabilidade",
    kpis=_kpis_empresarial,
)

TEMPLATES: Dict[TipoProposta, TemplateSegmento] = {
    TipoProposta.EMPRESARIAL: _EMPRESARIAL,
    TipoProposta.EMPRESARIAL_INQUILINO: _EMPRESARIAL,
    TipoProposta.RURAL: TemplateSegmento(
        capa_titulo="Proposta de Investimento em",
        capa_subtitulo="Autonomia Energética Rural",
        hero_titulo="BLINDE SUA PROPRIEDADE CONTRA OS AUMENTOS E QUEDAS DE ENERGIA",
        hero_subtitulo=(
            "Aumente a margem de lucro da sua produção, blinde seu caixa contra a inflação energética "
            "e ganhe previsibilidade de custos para os próximos 25 anos."
        ),
        titulo_kpis="Sua Propriedade em Números: Panorama Financeiro",
        kpis=_kpis_rural,
        substantivo_clientes="propriedade",
    ),
    TipoProposta.RESIDENCIAL: TemplateSegmento(
        capa_titulo="Proposta de Autonomia e",
        capa_subtitulo="Conforto Energético",
        hero_titulo="A LIBERDADE DE VIVER O MÁXIMO DO SEU LAR, SEM SE PREOCUPAR COM A CONTA DE LUZ",
        hero_subtitulo=(
            "Ligue todos os ares-condicionados, aqueça sua piscina e desfrute de cada momento. "
            "Sua casa, suas regras. A energia? Deixa que o sol paga."
        ),
        titulo_kpis="Raio-X do Seu Novo Estilo de Vida",
        kpis=_kpis_residencial,
        colunas_kpis=4,
        substantivo_clientes="família",
    ),
    TipoProposta.RESIDENCIAL_INQUILINO: TemplateSegmento(
        capa_titulo="Estudo Preliminar de Economia",
        capa_subtitulo="para Inquilinos",
        hero_titulo="SUA PRÓPRIA USINA DE ENERGIA, ONDE QUER QUE VOCÊ MORE.",
        hero_subtitulo=(
            "A economia que acompanha você a cada mudança. Chegou a sua independência energética, "
            "mesmo morando de aluguel."
        ),
        titulo_kpis="Dashboard de Viabilidade",
        kpis=_kpis_inquilino,
        substantivo_clientes="família",
        aviso=(
            "<b>Atenção:</b> Estes números são uma estimativa inicial. A proposta oficial com garantia "
            "de economia é formalizada após a visita técnica."
        ),
    ),
}


def template_para(tipo: TipoProposta | str) -> TemplateSegmento:
    try:
        return TEMPLATES[TipoProposta(tipo)]
    except (KeyError, ValueError):
        raise KeyError(f"Sem template para o tipo de proposta {tipo!r}") from None
