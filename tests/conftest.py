# tests/conftest.py
import os, sys
# raiz do projeto primeiro no sys.path (utils, assets, pdf_generators, interface)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from utils.orcamento import criar_orcamento, atualizar_campo


@pytest.fixture
def dados_validos():
    """Registro preenchido como o vendedor faria no formulário"""
    dados = criar_orcamento()
    dados = atualizar_campo(dados, "cliente_nome", "João da Silva")
    dados = atualizar_campo(dados, "cliente_telefone", "21980202797")
    dados = atualizar_campo(dados, "cliente_cpf", "12345678900")
    dados = atualizar_campo(dados, "modelo", "Series 11 Pro (47mm)")
    dados = atualizar_campo(dados, "cor", "Preto")
    dados = atualizar_campo(dados, "valor_produto", "150000")
    return dados
