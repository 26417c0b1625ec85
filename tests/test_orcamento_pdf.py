import asyncio
import os

import pytest
from PIL import Image

from pdf_generators import orcamento_pdf
from pdf_generators.orcamento_pdf import (
    PDFOrcamento, carregar_logo, gerar_pdf_orcamento, save_pdf_with_fallback, clean_text,
)
from utils.orcamento import resolver_para_pdf, atualizar_campo


@pytest.fixture
def logo_png(tmp_path):
    caminho = tmp_path / "logo11.png"
    Image.new("RGBA", (200, 80), (249, 115, 22, 255)).save(caminho)
    return str(caminho)


@pytest.fixture
def textos_desenhados(monkeypatch):
    """Registra todo texto desenhado na página"""
    textos = []
    original = PDFOrcamento.text

    def _text(self, x, y, texto=""):
        textos.append(texto)
        return original(self, x, y, texto)

    monkeypatch.setattr(PDFOrcamento, "text", _text)
    return textos


def _gerar(dados, pasta, logo_path):
    return asyncio.run(gerar_pdf_orcamento(resolver_para_pdf(dados), pasta_destino=str(pasta), logo_path=logo_path))


class TestGerarPdf:

    def test_saves_pdf_with_client_slug(self, dados_validos, tmp_path, logo_png):
        saida = tmp_path / "downloads"
        sucesso, caminho = _gerar(dados_validos, saida, logo_png)

        assert sucesso
        assert os.path.basename(caminho) == "orcamento-smart-ilha-joo-da-silva.pdf"
        with open(caminho, "rb") as f:
            assert f.read(4) == b"%PDF"
        assert os.listdir(saida) == ["orcamento-smart-ilha-joo-da-silva.pdf"]

    def test_blank_slug_uses_cliente(self, dados_validos, tmp_path, logo_png):
        dados = atualizar_campo(dados_validos, "cliente_nome", "!!!")
        _, caminho = _gerar(dados, tmp_path, logo_png)
        assert os.path.basename(caminho) == "orcamento-smart-ilha-cliente.pdf"

    def test_draws_sections_and_values(self, dados_validos, tmp_path, logo_png, textos_desenhados):
        _gerar(dados_validos, tmp_path, logo_png)

        for esperado in ("ORÇAMENTO", "DADOS DO CLIENTE", "DESCRIÇÃO DO PRODUTO", "VALORES",
                         "TOTAL", "R$ 1.500,00", "Grátis - R$ 0,00",
                         f"Nº {dados_validos.numero_orcamento}", "Validade: 1 dia(s)",
                         "(21) 98020-2797", "123.456.789-00"):
            assert esperado in textos_desenhados
        assert "Caixa original, Cabo carregador, Manual, Pulseira Padrão" in textos_desenhados

    def test_empty_optional_fields_show_dash(self, dados_validos, tmp_path, logo_png, textos_desenhados):
        dados = atualizar_campo(dados_validos, "cliente_cpf", "")
        dados = atualizar_campo(dados, "cor", "")
        _gerar(dados, tmp_path, logo_png)
        assert textos_desenhados.count("-") >= 2

    def test_logo_image_is_embedded(self, dados_validos, tmp_path, logo_png, monkeypatch, textos_desenhados):
        imagens = []
        original = PDFOrcamento.image
        monkeypatch.setattr(PDFOrcamento, "image",
                            lambda self, img, *a, **kw: imagens.append(img) or original(self, img, *a, **kw))

        _gerar(dados_validos, tmp_path, logo_png)

        assert len(imagens) == 1
        assert "SMART ILHA" not in textos_desenhados

    def test_missing_logo_falls_back_to_text(self, dados_validos, tmp_path, textos_desenhados):
        sucesso, caminho = _gerar(dados_validos, tmp_path / "out", str(tmp_path / "nao_existe.png"))

        assert sucesso
        assert os.path.exists(caminho)
        assert "SMART ILHA" in textos_desenhados

    def test_drawing_failure_leaves_no_file(self, dados_validos, tmp_path, logo_png, monkeypatch):
        def _falha(self, y):
            raise RuntimeError("falha ao desenhar")
        monkeypatch.setattr(PDFOrcamento, "tabela_valores", _falha)

        with pytest.raises(RuntimeError):
            _gerar(dados_validos, tmp_path, logo_png)
        assert [n for n in os.listdir(tmp_path) if n.endswith((".pdf", ".part"))] == []


class TestCarregarLogo:

    def test_invalid_image_returns_none(self, tmp_path):
        caminho = tmp_path / "logo.png"
        caminho.write_bytes(b"isto nao e uma imagem")
        assert asyncio.run(carregar_logo(str(caminho))) is None

    def test_no_path(self):
        assert asyncio.run(carregar_logo(None)) is None

    def test_valid_image(self, logo_png):
        img = asyncio.run(carregar_logo(logo_png))
        assert img.size == (200, 80)
        assert img.mode == "RGBA"


class TestSavePdf:

    def test_replaces_existing_file(self, tmp_path):
        save_pdf_with_fallback(b"%PDF-antigo", str(tmp_path), "a.pdf")
        caminho = save_pdf_with_fallback(b"%PDF-novo", str(tmp_path), "a.pdf")
        with open(caminho, "rb") as f:
            assert f.read() == b"%PDF-novo"

    def test_failed_write_removes_temporary_file(self, tmp_path, monkeypatch):
        def _replace(src, dst):
            raise OSError("disco cheio")
        monkeypatch.setattr(orcamento_pdf.os, "replace", _replace)

        with pytest.raises(OSError):
            save_pdf_with_fallback(b"%PDF", str(tmp_path), "a.pdf")
        assert os.listdir(tmp_path) == []

    def test_locked_existing_file_gets_timestamp(self, tmp_path, monkeypatch):
        (tmp_path / "a.pdf").write_bytes(b"%PDF-aberto")
        original = orcamento_pdf._gravar_atomico

        def _gravar(conteudo, pdf_path):
            if pdf_path.endswith(os.sep + "a.pdf"):
                raise PermissionError("arquivo aberto")
            return original(conteudo, pdf_path)
        monkeypatch.setattr(orcamento_pdf, "_gravar_atomico", _gravar)

        caminho = save_pdf_with_fallback(b"%PDF", str(tmp_path), "a.pdf")
        assert os.path.basename(caminho).startswith("a_")
        assert os.path.exists(caminho)


def test_clean_text_keeps_accents():
    assert clean_text("Descrição – Padrão") == "Descrição - Padrão"
    assert clean_text(None) == ""
    assert clean_text("✔ ok") == "? ok"
