import importlib
import unittest


class TestSmokeImportApp(unittest.TestCase):
    def test_import_app_and_critical_modules(self):
        for nome in (
            "app",
            "core.calcular",
            "core.padroes",
            "ui.painel_controle",
            "ui.visualizacao",
            "relatorios.gerar_pdf_proposta",
        ):
            self.assertIsNotNone(importlib.import_module(nome))


if __name__ == "__main__":
    unittest.main()
