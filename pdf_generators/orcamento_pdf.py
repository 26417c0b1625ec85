import os
import time
import asyncio
import tempfile
from fpdf import FPDF
from PIL import Image

from assets.loja.loja_config import (
    obter_loja, obter_linhas_contato, obter_rodape, obter_logo_path,
    obter_pasta_downloads, AVISOS_RODAPE,
)
from utils.formatters import nome_arquivo_orcamento

LARGURA_PAGINA = 210
MARGEM = 20
LARGURA_CONTEUDO = LARGURA_PAGINA - MARGEM * 2
DIREITA = LARGURA_PAGINA - MARGEM

LARANJA = (249, 115, 22)
CINZA_ESCURO = (30, 30, 30)
CINZA_MEDIO = (100, 100, 100)
CINZA_CLARO = (200, 200, 200)
FUNDO_SECAO = (248, 248, 248)
VERDE = (34, 197, 94)
BRANCO = (255, 255, 255)

ALTURA_LINHA = 6

def clean_text(text):
    """Normaliza espaços e símbolos problemáticos preservando acentuação (Latin-1)."""
    if text is None:
        return ""
    text = str(text)
    text = text.replace('\t', '    ')
    replacements = {
        '•': '- ', '–': '-', '—': '-', '…': '...', '®': '(R)', '™': '(TM)'
    }
    for old_char, new_char in replacements.items():
        text = text.replace(old_char, new_char)
    # Core fonts só aceitam Latin-1
    try:
        text.encode('latin-1')
    except UnicodeEncodeError:
        text = text.encode('latin-1', 'replace').decode('latin-1')
    return text

def _gravar_atomico(conteudo, pdf_path):
    """Grava em arquivo temporário na mesma pasta e renomeia; nunca deixa PDF pela metade"""
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(pdf_path), suffix='.part')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(conteudo)
        os.replace(tmp_path, pdf_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

def save_pdf_with_fallback(conteudo, output_dir, file_name):
    """
    Salvar PDF com tratamento de erros de permissão.
    Retorna o caminho final do arquivo
    """
    try:
        os.makedirs(output_dir, exist_ok=True)
        pdf_path = os.path.join(output_dir, file_name)
        try:
            _gravar_atomico(conteudo, pdf_path)
        except PermissionError:
            if not os.path.exists(pdf_path):
                raise
            # Arquivo anterior aberto em outro programa: salvar com outro nome
            timestamp = int(time.time())
            base_name = file_name.replace('.pdf', '')
            pdf_path = os.path.join(output_dir, f"{base_name}_{timestamp}.pdf")
            _gravar_atomico(conteudo, pdf_path)
        return pdf_path

    except PermissionError:
        # Sem permissão na pasta de destino: usar diretório temporário
        temp_pdf_path = os.path.join(tempfile.gettempdir(), file_name)
        _gravar_atomico(conteudo, temp_pdf_path)
        print(f"⚠️ Sem permissão em {output_dir}, PDF salvo em {temp_pdf_path}")
        return temp_pdf_path

def _abrir_imagem(caminho):
    with Image.open(caminho) as img:
        img.load()
        return img.convert("RGBA")

async def carregar_logo(caminho):
    """Carrega o logo como imagem PIL; retorna None se não for possível"""
    if not caminho:
        return None
    try:
        return await asyncio.to_thread(_abrir_imagem, caminho)
    except (OSError, ValueError) as e:
        print(f"⚠️ Logo indisponível, usando texto no lugar: {e}")
        return None


class PDFOrcamento(FPDF):
    def __init__(self, dados, logo=None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.dados = dados
        self.logo = logo
        self.dados_loja = obter_loja()
        # Layout absoluto em página única
        self.set_auto_page_break(auto=False)

    def header(self):
        # Faixa escura do cabeçalho com linha laranja logo abaixo
        self.set_fill_color(*CINZA_ESCURO)
        self.rect(0, 0, LARGURA_PAGINA, 38, style="F")
        self.set_fill_color(*LARANJA)
        self.rect(0, 38, LARGURA_PAGINA, 1.5, style="F")

        if self.logo is not None:
            self.image(self.logo, x=MARGEM, y=6, w=40, h=16)
        else:
            self.set_font("helvetica", "B", 18)
            self.set_text_color(*LARANJA)
            self.text(MARGEM, 20, clean_text(self.dados_loja["nome"]))

        self.set_font("helvetica", "", 8)
        self.set_text_color(*CINZA_CLARO)
        for i, linha in enumerate(obter_linhas_contato()):
            self.text_right(linha, DIREITA, 10 + i * 4.5)

    def footer(self):
        self.set_fill_color(*LARANJA)
        self.rect(0, 287, LARGURA_PAGINA, 10, style="F")
        self.set_font("helvetica", "B", 8)
        self.set_text_color(*BRANCO)
        self.text_center(obter_rodape(), LARGURA_PAGINA / 2, 292.5)

    def text_right(self, texto, x, y):
        texto = clean_text(texto)
        self.text(x - self.get_string_width(texto), y, texto)

    def text_center(self, texto, x, y):
        texto = clean_text(texto)
        self.text(x - self.get_string_width(texto) / 2, y, texto)

    def divider(self, y, largura=0.3):
        self.set_draw_color(*CINZA_CLARO)
        self.set_line_width(largura)
        self.line(MARGEM, y, DIREITA, y)

    def section_title(self, titulo, y):
        self.set_fill_color(*LARANJA)
        self.rect(MARGEM, y, 3, 6, style="F")
        self.set_font("helvetica", "B", 11)
        self.set_text_color(*CINZA_ESCURO)
        self.text(MARGEM + 6, y + 5, clean_text(titulo))
        return y + 12

    def section_box(self, y, altura=32):
        self.set_fill_color(*FUNDO_SECAO)
        self.rect(MARGEM, y - 3, LARGURA_CONTEUDO, altura, style="F",
                  round_corners=True, corner_radius=2)

    def field_row(self, rotulo, valor, y):
        self.set_font("helvetica", "B", 9)
        self.set_text_color(*CINZA_MEDIO)
        self.text(MARGEM + 4, y, clean_text(rotulo))
        self.set_font("helvetica", "", 9)
        self.set_text_color(*CINZA_ESCURO)
        self.text(MARGEM + 50, y, clean_text(valor or "-"))
        return y + ALTURA_LINHA

    def titulo_orcamento(self, y):
        self.set_font("helvetica", "B", 16)
        self.set_text_color(*CINZA_ESCURO)
        self.text(MARGEM, y, clean_text("ORÇAMENTO"))

        self.set_font("helvetica", "", 10)
        self.set_text_color(*CINZA_MEDIO)
        self.text(MARGEM + 62, y, clean_text(f"Nº {self.dados.numero_orcamento}"))

        self.set_font_size(9)
        self.text_right(f"Data: {self.dados.data}", DIREITA, y - 4)
        self.text_right(f"Validade: {self.dados.validade} dia(s)", DIREITA, y + 1)
        self.text_right(f"Vendedor: {self.dados.vendedor}", DIREITA, y + 6)

        y += 10
        self.divider(y)
        return y + 8

    def dados_cliente(self, y):
        y = self.section_title("DADOS DO CLIENTE", y)
        self.section_box(y)
        y = self.field_row("Nome:", self.dados.cliente_nome, y + 2)
        y = self.field_row("Telefone:", self.dados.cliente_telefone, y)
        y = self.field_row("CPF:", self.dados.cliente_cpf, y)
        y = self.field_row("Cidade:", self.dados.cliente_cidade, y)
        return y + 6

    def descricao_produto(self, y):
        y = self.section_title("DESCRIÇÃO DO PRODUTO", y)
        self.section_box(y)
        y = self.field_row("Modelo:", self.dados.modelo, y + 2)
        y = self.field_row("Cor:", self.dados.cor, y)
        y = self.field_row("Garantia:", self.dados.garantia, y)
        y = self.field_row("Acompanha:", ", ".join(self.dados.acessorios), y)
        return y + 8

    def tabela_valores(self, y):
        y = self.section_title("VALORES", y)

        # Cabeçalho da tabela
        self.set_fill_color(*CINZA_ESCURO)
        self.rect(MARGEM, y, LARGURA_CONTEUDO, 8, style="F",
                  round_corners=True, corner_radius=1)
        self.set_font("helvetica", "B", 9)
        self.set_text_color(*BRANCO)
        self.text(MARGEM + 4, y + 5.5, clean_text("Descrição"))
        self.text_right("Valor", DIREITA - 4, y + 5.5)
        y += 10

        # Produto
        self.set_font("helvetica", "", 9)
        self.set_text_color(*CINZA_ESCURO)
        self.text(MARGEM + 4, y + 4, clean_text(self.dados.modelo or "Produto"))
        self.text_right(f"R$ {self.dados.valor_produto or '0,00'}", DIREITA - 4, y + 4)
        self.divider(y + 7, 0.2)
        y += 9

        # Frete
        self.text(MARGEM + 4, y + 4, clean_text("Frete"))
        self.set_text_color(*VERDE)
        self.text_right(self.dados.frete, DIREITA - 4, y + 4)
        self.divider(y + 7, 0.2)
        y += 10

        # Total
        self.set_fill_color(*LARANJA)
        self.rect(MARGEM, y, LARGURA_CONTEUDO, 12, style="F",
                  round_corners=True, corner_radius=2)
        self.set_font("helvetica", "B", 12)
        self.set_text_color(*BRANCO)
        self.text(MARGEM + 6, y + 8, clean_text("TOTAL"))
        self.set_font_size(14)
        self.text_right(self.dados.total, DIREITA - 6, y + 8.5)
        return y + 22

    def avisos(self, y):
        self.divider(y)
        y += 6
        self.set_font("helvetica", "I", 8)
        self.set_text_color(*CINZA_MEDIO)
        for aviso in AVISOS_RODAPE:
            self.text(MARGEM, y, clean_text(aviso))
            y += 4
        return y + 4

    def montar(self):
        """Desenha a página inteira; cabeçalho e faixa inferior vêm de header/footer"""
        self.add_page()
        y = self.titulo_orcamento(48)
        y = self.dados_cliente(y)
        y = self.descricao_produto(y)
        y = self.tabela_valores(y)
        return self.avisos(y)


async def gerar_pdf_orcamento(dados, pasta_destino=None, logo_path=None):
    """
    Gera o PDF de uma página a partir do registro já resolvido (modelo e total
    preenchidos) e salva na pasta de downloads.
    Retorna (True, caminho_pdf); qualquer falha de desenho ou gravação é propagada
    """
    logo = await carregar_logo(logo_path or obter_logo_path())

    pdf = PDFOrcamento(dados, logo, orientation='P', unit='mm', format='A4')
    pdf.montar()
    conteudo = bytes(pdf.output())

    file_name = nome_arquivo_orcamento(dados.cliente_nome)
    pdf_path = save_pdf_with_fallback(conteudo, pasta_destino or obter_pasta_downloads(), file_name)
    print(f"✅ Orçamento {dados.numero_orcamento} salvo em {pdf_path}")
    return True, pdf_path
