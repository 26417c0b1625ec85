"""
Configuração da loja Smart Ilha para o formulário e o PDF de orçamento
"""
import os

LOJA = {
    "nome": "SMART ILHA",
    "site": "www.smartilha.com.br",
    "instagram": "@smartilha",
    "cnpj": "56.997.212/0001-40",
    "whatsapp": "(21) 98020-2797",
    "bairro": "Ilha do Governador - RJ",
    "slogan": "Smart Ilha - Tecnologia e Confiança",
    "logo_path": "assets/images/logo11.png"
}

VENDEDOR = "Flávio Oliveira"
GARANTIA = "3 meses (90 dias)"
FRETE = "Grátis - R$ 0,00"
VALIDADE_PADRAO = "1"
CIDADE_PADRAO = "Rio de Janeiro"

# Valor do combo que libera o campo de modelo personalizado
MODELO_OUTRO = "outro"

MODELOS = [
    "Series 11 Ultra (49mm)",
    "Series 11 Pro (47mm)",
    "S11 Pro Mini (42mm)",
]

CORES = ["Preto", "Prata", "Dourado"]

ACESSORIOS = [
    "Caixa original",
    "Cabo carregador",
    "Manual",
    "Pulseira Padrão",
    "+Brindes promoção (atual)",
]

# Marcados ao abrir o formulário
ACESSORIOS_PADRAO = ACESSORIOS[:4]

AVISOS_RODAPE = [
    "Este orçamento não caracteriza reserva de produto.",
    "Garantia de 90 dias contra defeitos de fabricação.",
]

def obter_loja():
    """Retorna os dados da loja"""
    return LOJA

def obter_linhas_contato():
    """Linhas de contato impressas no cabeçalho do PDF"""
    return [
        f"{LOJA['site']} | {LOJA['instagram']}",
        f"CNPJ: {LOJA['cnpj']}",
        f"WhatsApp: {LOJA['whatsapp']}",
        LOJA["bairro"],
    ]

def obter_rodape():
    """Frase centralizada da faixa inferior do PDF"""
    return f"{LOJA['slogan']} | {LOJA['site']} | {LOJA['instagram']}"

def listar_modelos():
    """Retorna os modelos do catálogo seguidos da opção manual"""
    return MODELOS + [MODELO_OUTRO]

def obter_logo_path():
    """Retorna o caminho absoluto do logo (o arquivo pode não existir)"""
    base_dir = os.path.join(os.path.dirname(__file__), '..', '..')
    return os.path.abspath(os.path.join(base_dir, LOJA["logo_path"]))

def obter_pasta_downloads():
    """Retorna a pasta Downloads do usuário ou o diretório atual se ela não existir"""
    downloads = os.path.join(os.path.expanduser("~"), "Downloads")
    if os.path.isdir(downloads):
        return downloads
    return os.getcwd()
