import tempfile
import unittest
from pathlib import Path

from core.modelo import TipoProposta
from core.padroes import PADROES, carregar_padroes, padrao_para


class TestPadroes(unittest.TestCase):
    def test_um_padrao_por_tipo(self):
        self.assertEqual(set(TipoProposta), set(PADROES))
        for tipo, dados in PADROES.items():
            self.assertIs(tipo, dados.tipo_proposta)

    def test_tabela_somente_leitura(self):
        with self.assertRaises(TypeError):
            PADROES[TipoProposta.RURAL] = None

    def test_inquilino_residencial(self):
        d = padrao_para("ResidentialRenter")
        self.assertEqual(12.0, d.num_placas)
        self.assertEqual(150.0, d.valor_por_placa)
        self.assertEqual(10.5, d.taxa_ipca)
        self.assertEqual(6.17, d.taxa_poupanca)
        self.assertEqual(47, d.num_clientes)
        self.assertEqual(16632.0, d.valor_investimento)

    def test_comum_mesclado(self):
        for tipo in TipoProposta:
            d = padrao_para(tipo)
            self.assertEqual(0.96, d.tarifa_kwh)
            self.assertEqual(1.89, d.taxa_juros_financiamento)
            self.assertTrue(d.incluir_cta_final)
            self.assertTrue(d.link_whatsapp.startswith("https://wa.me/"))

    def test_proprietarios_sem_placas(self):
        self.assertIsNone(padrao_para("Business").num_placas)
        self.assertIsNone(padrao_para("Rural").valor_por_placa)

    def test_conta_recalculada(self):
        d = padrao_para(TipoProposta.RESIDENCIAL)
        self.assertAlmostEqual(1800 * 0.96, d.conta_atual)

    def test_tipo_desconhecido(self):
        with self.assertRaises(KeyError):
            padrao_para("Nope")


class TestCarregarPadroes(unittest.TestCase):
    def _escrever(self, texto: str) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        p = Path(tmp.name) / "propostas.yaml"
        p.write_text(texto, encoding="utf-8")
        return p

    def test_arquivo_inexistente(self):
        with self.assertRaises(FileNotFoundError):
            carregar_padroes(Path(tempfile.gettempdir()) / "nao_existe_propostas.yaml")

    def test_tipo_faltando(self):
        p = self._escrever("propostas:\n  Business: {}\n")
        with self.assertRaises(ValueError):
            carregar_padroes(p)

    def test_valor_nao_numerico(self):
        campos = (
            "consumo_kwh: x\ntarifa_kwh: 1\nconta_atual: 1\ntaxa_minima: 1\nvalor_investimento: 1\n"
            "taxa_juros_financiamento: 1\ntaxa_juros_cartao: 1\nreajuste_energia: 1\ntaxa_ipca: 1\n"
            "taxa_poupanca: 1\nfator_co2: 1\nco2_arvore: 1\nnum_clientes: 1\n"
        )
        corpo = "comum:\n" + "".join("  " + linha + "\n" for linha in campos.splitlines())
        corpo += "propostas:\n" + "".join(f"  {t.value}: {{}}\n" for t in TipoProposta)
        with self.assertRaises(ValueError) as cm:
            carregar_padroes(self._escrever(corpo))
        self.assertIn("consumo_kwh", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
