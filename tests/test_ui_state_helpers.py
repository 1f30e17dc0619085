import unittest

from core.edicao import aplicar_edicao
from ui.estado import PASTA_SAIDAS, PropostaCtx, ctx_set_dados, pasta_saida
from ui.state_helpers import build_inputs_fingerprint, is_result_stale, save_result_fingerprint


class TestUIStateHelpers(unittest.TestCase):
    def test_ctx_padrao_empresarial(self):
        ctx = PropostaCtx()
        self.assertEqual("Business", ctx.dados.tipo_proposta.value)
        self.assertEqual({}, ctx.artefactos)
        self.assertIsNone(ctx.pdf_fingerprint)

    def test_sem_pdf_nao_esta_stale(self):
        self.assertFalse(is_result_stale(PropostaCtx()))

    def test_fingerprint_estavel(self):
        a, b = PropostaCtx(), PropostaCtx()
        self.assertEqual(build_inputs_fingerprint(a), build_inputs_fingerprint(b))

    def test_result_fingerprint_detecta_stale(self):
        ctx = PropostaCtx()
        fp = save_result_fingerprint(ctx)
        self.assertEqual(fp, ctx.pdf_fingerprint)
        self.assertFalse(is_result_stale(ctx))

        ctx_set_dados(ctx, aplicar_edicao(ctx.dados, "nome_cliente", "Outro Cliente"))
        self.assertTrue(is_result_stale(ctx))

    def test_artefatos_nao_entram_no_fingerprint(self):
        ctx = PropostaCtx()
        save_result_fingerprint(ctx)
        ctx.artefactos["pdf_path"] = "/tmp/x.pdf"
        self.assertFalse(is_result_stale(ctx))

    def test_cada_sessao_tem_pasta_propria(self):
        a, b = PropostaCtx(), PropostaCtx()
        self.assertNotEqual(pasta_saida(a), pasta_saida(b))
        self.assertEqual(PASTA_SAIDAS, pasta_saida(a).parent.name)
        self.assertEqual(build_inputs_fingerprint(a), build_inputs_fingerprint(b))


if __name__ == "__main__":
    unittest.main()
