import math
import unittest
from datetime import date
from types import MappingProxyType

from core.financas import (
    _arredondar,
    calcular_parcela_price,
    calcular_projecao,
    data_extenso,
    projetar_economia,
    valor_futuro,
)
from core.modelo import ResultadoProjecao
from core.padroes import padrao_para


def _base(**kw):
    d = {
        "consumo_kwh": 1000,
        "conta_atual": 1100,
        "taxa_minima": 100,
        "valor_investimento": 24000,
        "taxa_juros_financiamento": 1.89,
        "taxa_juros_cartao": 17.9,
        "reajuste_energia": 0,
        "taxa_ipca": 10,
        "taxa_poupanca": 6,
        "fator_co2": 0.038,
        "co2_arvore": 0.022,
    }
    d.update(kw)
    return d


class TestParcelaPrice(unittest.TestCase):
    def test_cenario_b_formula_direta(self):
        p, r, n = 16632.0, 0.0189, 60
        esperado = p * (r * (1 + r) ** n) / ((1 + r) ** n - 1)
        self.assertAlmostEqual(esperado, calcular_parcela_price(p, r, n), places=2)

    def test_juros_positivo_supera_linear(self):
        for n in (24, 60, 90, 120):
            self.assertGreater(calcular_parcela_price(85000.0, 0.0189, n), 85000.0 / n)

    def test_taxa_zero_e_linear(self):
        self.assertEqual(50.0, calcular_parcela_price(1200.0, 0.0, 24))
        self.assertEqual(1200.0 / 60, calcular_parcela_price(1200.0, 0.0, 60))

    def test_taxa_negativa_e_prazo_zero(self):
        self.assertEqual(100.0, calcular_parcela_price(1200.0, -0.01, 12))
        self.assertEqual(1200.0, calcular_parcela_price(1200.0, 0.02, 0))

    def test_taxa_enorme_nao_explode(self):
        v = calcular_parcela_price(1000.0, 1e6, 120)
        self.assertTrue(math.isfinite(v))
        self.assertAlmostEqual(1000.0 * 1e6, v)

    def test_taxa_alta_sem_inf_nem_nan(self):
        # (1+r)^n finito, mas r * (1+r)^n estouraria na forma direta
        self.assertEqual(0.0, calcular_parcela_price(0.0, 1.3e5, 60))
        v = calcular_parcela_price(100.0, 1.3e5, 60)
        self.assertTrue(math.isfinite(v))
        self.assertAlmostEqual(100.0 * 1.3e5, v)


class TestProjecaoEconomia(unittest.TestCase):
    def test_payback_primeiro_ano_que_cobre(self):
        self.assertEqual(2, projetar_economia(12000.0, 0.0, 24000.0)["payback"])
        self.assertEqual(3, projetar_economia(12000.0, 0.0, 24001.0)["payback"])

    def test_payback_limite_do_horizonte(self):
        self.assertEqual(25, projetar_economia(12000.0, 0.0, 300000.0)["payback"])
        self.assertEqual(0, projetar_economia(12000.0, 0.0, 300001.0)["payback"])

    def test_cenario_c_crescimento_linear(self):
        proj = projetar_economia(1608.0 * 12, 0.0, 45000.0)
        anos = proj["acumulado_por_ano"]
        self.assertEqual(25, len(anos))
        deltas = [b - a for a, b in zip(anos, anos[1:])]
        for d in deltas:
            self.assertAlmostEqual(19296.0, d)
        self.assertAlmostEqual(192960.0, proj["acumulado_10"])
        self.assertAlmostEqual(482400.0, proj["acumulado_total"])
        self.assertEqual(3, proj["payback"])

    def test_reajuste_composto(self):
        proj = projetar_economia(1000.0, 0.10, 0.0)
        anos = proj["acumulado_por_ano"]
        self.assertAlmostEqual(1000.0, anos[0])
        self.assertAlmostEqual(2100.0, anos[1])
        self.assertAlmostEqual(3310.0, anos[2])


class TestValorFuturo(unittest.TestCase):
    def test_taxa_zero_devolve_valor(self):
        for anos in (0, 1, 10, 25):
            self.assertEqual(85000.0, valor_futuro(85000.0, 0.0, anos))

    def test_composto_anual(self):
        self.assertAlmostEqual(85000.0 * 1.1 ** 10, valor_futuro(85000.0, 0.10, 10))

    def test_overflow_vira_infinito(self):
        self.assertEqual(math.inf, valor_futuro(1.0, 1e200, 25))
        self.assertEqual(-math.inf, valor_futuro(-1.0, 1e200, 25))
        self.assertEqual(0.0, valor_futuro(0.0, 1e200, 25))


class TestCalcularProjecao(unittest.TestCase):
    def test_cenario_a(self):
        r = calcular_projecao(padrao_para("Business"))
        self.assertAlmostEqual(3110.0, r.economia_mensal)
        self.assertAlmostEqual(37320.0, r.economia_anual_base)
        self.assertEqual(85000.0, r.preco_sistema)

    def test_economia_nunca_negativa(self):
        r = calcular_projecao(_base(conta_atual=80, taxa_minima=100))
        self.assertEqual(0.0, r.economia_mensal)
        self.assertEqual(0, r.payback_real)
        self.assertFalse(r.payback_atingido)

    def test_retorno_liquido_exato(self):
        r = calcular_projecao(padrao_para("Residential"))
        self.assertEqual(r.economia_acumulada_25anos - r.preco_sistema, r.retorno_liquido_25anos)

    def test_acumulado_10_menor_que_25(self):
        for tipo in ("Business", "Residential", "ResidentialRenter", "Rural"):
            r = calcular_projecao(padrao_para(tipo))
            self.assertLessEqual(r.economia_acumulada_10anos, r.economia_acumulada_25anos)

    def test_payback_monotonico_no_investimento(self):
        anterior = 0
        for inv in range(0, 600000, 7500):
            pb = calcular_projecao(_base(valor_investimento=inv, reajuste_energia=6)).payback_real
            pb = pb or 10 ** 6  # 0 = não atingido
            self.assertGreaterEqual(pb, anterior)
            anterior = pb

    def test_deterministico(self):
        hoje = date(2026, 10, 19)
        a = calcular_projecao(padrao_para("Rural"), hoje=hoje)
        b = calcular_projecao(padrao_para("Rural"), hoje=hoje)
        self.assertIsNot(a, b)
        self.assertEqual(a, b)
        self.assertEqual("19 de outubro de 2026", a.data_proposta)

    def test_data_nao_afeta_numeros(self):
        a = calcular_projecao(_base(), hoje=date(2020, 1, 1))
        b = calcular_projecao(_base(), hoje=date(2030, 12, 31))
        self.assertEqual(a.valores_numericos(), b.valores_numericos())

    def test_ambiental(self):
        r = calcular_projecao(_base())
        self.assertAlmostEqual(12.0, r.geracao_anual_mwh)
        self.assertAlmostEqual(11.4, r.co2_evitado_total, places=2)
        self.assertEqual(518, r.arvores_salvas_total)

    def test_co2_arvore_zero_usa_divisor_1(self):
        r = calcular_projecao(_base(co2_arvore=0))
        self.assertEqual(11, r.arvores_salvas_total)

    def test_custo_reinstalacao(self):
        self.assertEqual(1800.0, calcular_projecao(padrao_para("ResidentialRenter")).custo_reinstalacao)
        self.assertEqual(0.0, calcular_projecao(padrao_para("Business")).custo_reinstalacao)

    def test_aceita_qualquer_mapping(self):
        r = calcular_projecao(MappingProxyType({"conta_atual": 1000, "taxa_minima": 100}))
        self.assertEqual(900.0, r.economia_mensal)

    def test_entrada_vazia_ou_em_branco(self):
        r = calcular_projecao({"conta_atual": "", "taxa_minima": None})
        self.assertIsInstance(r, ResultadoProjecao)
        self.assertEqual(0.0, r.economia_mensal)
        self.assertEqual(0, r.arvores_salvas_total)
        self.assertEqual(0.0, r.parcela_finan_60)

    def test_nunca_levanta_excecao(self):
        casos = [
            _base(taxa_juros_financiamento=0, taxa_juros_cartao=0),
            _base(taxa_juros_financiamento=-5, taxa_juros_cartao=-50, reajuste_energia=-20),
            _base(taxa_juros_financiamento=1e8, taxa_juros_cartao=1e8, taxa_ipca=1e4),
            _base(consumo_kwh=-100, valor_investimento=-1),
        ]
        for dados in casos:
            r = calcular_projecao(dados)
            self.assertIsInstance(r, ResultadoProjecao)


class TestAuxiliares(unittest.TestCase):
    def test_arredondar_meio_para_cima(self):
        self.assertEqual(3, _arredondar(2.5))
        self.assertEqual(1, _arredondar(0.5))
        self.assertEqual(0, _arredondar(-0.5))
        self.assertEqual(0, _arredondar(float("inf")))

    def test_data_extenso(self):
        self.assertEqual("01 de março de 2025", data_extenso(date(2025, 3, 1)))


if __name__ == "__main__":
    unittest.main()
