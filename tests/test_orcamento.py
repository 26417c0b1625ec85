from datetime import datetime

import pytest

from assets.loja.loja_config import ACESSORIOS, VENDEDOR, GARANTIA, FRETE
from utils.orcamento import (
    criar_orcamento, atualizar_campo, alternar_acessorio,
    modelo_exibicao, resolver_para_pdf,
)


class TestCriarOrcamento:

    def test_defaults(self):
        dados = criar_orcamento(datetime(2026, 10, 19))
        assert dados.numero_orcamento.startswith("20261019-")
        assert dados.data == "19/10/2026"
        assert dados.validade == "1"
        assert dados.vendedor == VENDEDOR
        assert dados.cliente_cidade == "Rio de Janeiro"
        assert dados.garantia == GARANTIA
        assert dados.frete == FRETE
        assert dados.acessorios == tuple(ACESSORIOS[:4])
        assert dados.valor_produto == ""
        assert dados.total == ""


class TestAtualizarCampo:

    def test_returns_new_record(self):
        dados = criar_orcamento()
        novo = atualizar_campo(dados, "cliente_nome", "Ana")
        assert novo.cliente_nome == "Ana"
        assert dados.cliente_nome == ""
        assert novo.numero_orcamento == dados.numero_orcamento

    def test_record_is_frozen(self):
        dados = criar_orcamento()
        with pytest.raises(AttributeError):
            dados.cliente_nome = "Ana"

    def test_masks_applied(self):
        dados = criar_orcamento()
        dados = atualizar_campo(dados, "cliente_telefone", "21980202797")
        dados = atualizar_campo(dados, "cliente_cpf", "12345678900")
        dados = atualizar_campo(dados, "valor_produto", "12345")
        assert dados.cliente_telefone == "(21) 98020-2797"
        assert dados.cliente_cpf == "123.456.789-00"
        assert dados.valor_produto == "123,45"

    def test_quote_number_is_editable(self):
        dados = atualizar_campo(criar_orcamento(), "numero_orcamento", "20260101-001")
        assert dados.numero_orcamento == "20260101-001"

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            atualizar_campo(criar_orcamento(), "desconto", "10")

    @pytest.mark.parametrize("campo", ["data", "vendedor", "garantia", "frete", "total"])
    def test_read_only_fields(self, campo):
        with pytest.raises(ValueError):
            atualizar_campo(criar_orcamento(), campo, "x")


class TestAcessorios:

    def test_uncheck_and_check_keeps_catalog_order(self):
        dados = criar_orcamento()
        dados = alternar_acessorio(dados, "Caixa original", False)
        dados = alternar_acessorio(dados, "+Brindes promoção (atual)", True)
        dados = alternar_acessorio(dados, "Caixa original", True)
        assert dados.acessorios == tuple(ACESSORIOS)

    def test_uncheck_all(self):
        dados = criar_orcamento()
        for acessorio in ACESSORIOS:
            dados = alternar_acessorio(dados, acessorio, False)
        assert dados.acessorios == ()

    def test_check_twice_does_not_duplicate(self):
        dados = alternar_acessorio(criar_orcamento(), "Manual", True)
        assert dados.acessorios.count("Manual") == 1

    def test_unknown_accessory(self):
        with pytest.raises(ValueError):
            alternar_acessorio(criar_orcamento(), "Película", True)


class TestResolverParaPdf:

    def test_custom_model_replaces_sentinel(self):
        dados = criar_orcamento()
        dados = atualizar_campo(dados, "modelo", "outro")
        dados = atualizar_campo(dados, "modelo_personalizado", "Relógio X9 Gold")
        resolvido = resolver_para_pdf(dados)
        assert resolvido.modelo == "Relógio X9 Gold"
        assert modelo_exibicao(dados) == "Relógio X9 Gold"

    def test_catalog_model_kept(self, dados_validos):
        assert resolver_para_pdf(dados_validos).modelo == "Series 11 Pro (47mm)"

    def test_total_is_prefixed_value(self, dados_validos):
        resolvido = resolver_para_pdf(dados_validos)
        assert dados_validos.valor_produto == "1.500,00"
        assert resolvido.total == "R$ 1.500,00"
