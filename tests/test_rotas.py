import tempfile
import unittest
from pathlib import Path

from core.rotas import moeda_brl, num_br, pct_br, preparar_saida


class TestFormatacaoBR(unittest.TestCase):
    def test_moeda(self):
        self.assertEqual("R$ 1.234,56", moeda_brl(1234.56))
        self.assertEqual("R$ 85.000,00", moeda_brl(85000))
        self.assertEqual("R$ 1.234.568", moeda_brl(1234567.891, dec=0))

    def test_moeda_negativa(self):
        self.assertEqual("-R$ 10,00", moeda_brl(-10))
        self.assertEqual("R$ 0,00", moeda_brl(-0.001))

    def test_moeda_nao_finita(self):
        self.assertEqual("R$ 0,00", moeda_brl(float("inf")))
        self.assertEqual("R$ 0,00", moeda_brl(float("nan")))

    def test_numero_e_pct(self):
        self.assertEqual("3.500", num_br(3500, 0))
        self.assertEqual("11,40", num_br(11.4))
        self.assertEqual("6,17%", pct_br(6.17))


class TestPrepararSaida(unittest.TestCase):
    def test_cria_pastas(self):
        with tempfile.TemporaryDirectory() as tmp:
            paths = preparar_saida(Path(tmp) / "out")
            self.assertTrue(Path(paths["charts_dir"]).is_dir())
            self.assertEqual(str(Path(tmp) / "out" / "proposta_solar.pdf"), paths["pdf_path"])
            self.assertTrue(paths["chart_comparativo"].endswith("grafico_comparativo.png"))


if __name__ == "__main__":
    unittest.main()
