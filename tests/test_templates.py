import unittest

from core.financas import calcular_projecao
from core.modelo import TipoProposta
from core.padroes import padrao_para
from core.edicao import aplicar_edicao
from relatorios.helpers_pdf import Kpi
from relatorios.templates import TEMPLATES, premissas_texto, template_para, texto_payback


class TestTemplates(unittest.TestCase):
    def test_um_template_por_tipo(self):
        for tipo in TipoProposta:
            self.assertIn(tipo, TEMPLATES)
        self.assertIs(template_para("Business"), template_para("BusinessRenter"))

    def test_tipo_invalido(self):
        with self.assertRaises(KeyError):
            template_para("Industrial")

    def test_kpis_por_segmento(self):
        for tipo in TipoProposta:
            d = padrao_para(tipo)
            tpl = template_para(tipo)
            kpis = tpl.kpis(d, calcular_projecao(d))
            self.assertTrue(kpis)
            self.assertTrue(all(isinstance(k, Kpi) for k in kpis))
            self.assertEqual(0, len(kpis) % tpl.colunas_kpis)

    def test_inquilino_mostra_custo_mudanca(self):
        d = padrao_para(TipoProposta.RESIDENCIAL_INQUILINO)
        kpis = template_para(d.tipo_proposta).kpis(d, calcular_projecao(d))
        valores = {k.rotulo: k.valor for k in kpis}
        self.assertEqual("R$ 1.800,00", valores["Custo Médio de Mudança"])
        self.assertIsNotNone(template_para(d.tipo_proposta).aviso)

    def test_payback_nao_atingido(self):
        d = aplicar_edicao(padrao_para("Business"), "valor_investimento", 1e9)
        r = calcular_projecao(d)
        self.assertEqual("Acima de 25 anos", texto_payback(r))
        self.assertEqual("3 anos", texto_payback(calcular_projecao(padrao_para("Business"))))

    def test_premissas_em_percentual_br(self):
        txt = premissas_texto(padrao_para("ResidentialRenter"))
        self.assertIn("Tesouro/CDB a 10,50% a.a.", txt)
        self.assertIn("Poupança a 6,17% a.a.", txt)


if __name__ == "__main__":
    unittest.main()
