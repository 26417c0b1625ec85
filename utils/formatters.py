import re
import random
from datetime import datetime
from decimal import Decimal

def somente_digitos(value):
    """Remove tudo que não for dígito"""
    if not value:
        return ""
    return re.sub(r'\D', '', str(value))

def format_phone_mask(phone):
    """Máscara progressiva de telefone (XX) XXXXX-XXXX enquanto o usuário digita"""
    phone_clean = somente_digitos(phone)[:11]
    if not phone_clean:
        return ""

    if len(phone_clean) <= 2:
        return f"({phone_clean}"
    if len(phone_clean) <= 7:
        return f"({phone_clean[:2]}) {phone_clean[2:]}"
    return f"({phone_clean[:2]}) {phone_clean[2:7]}-{phone_clean[7:]}"

def format_cpf_mask(cpf):
    """Máscara progressiva de CPF XXX.XXX.XXX-XX"""
    cpf_clean = somente_digitos(cpf)[:11]

    if len(cpf_clean) <= 3:
        return cpf_clean
    if len(cpf_clean) <= 6:
        return f"{cpf_clean[:3]}.{cpf_clean[3:]}"
    if len(cpf_clean) <= 9:
        return f"{cpf_clean[:3]}.{cpf_clean[3:6]}.{cpf_clean[6:]}"
    return f"{cpf_clean[:3]}.{cpf_clean[3:6]}.{cpf_clean[6:9]}-{cpf_clean[9:]}"

def _formatar_brl(value):
    # Trocar vírgula por X temporariamente, depois ponto por vírgula, depois X por ponto
    formatted = f"{value:,.2f}"
    return formatted.replace(',', 'X').replace('.', ',').replace('X', '.')

def format_currency_mask(value):
    """Interpreta os dígitos digitados como centavos: '12345' -> '123,45'"""
    digits = somente_digitos(value)
    if not digits:
        return ""
    return _formatar_brl(Decimal(int(digits)) / 100)

def format_total(valor_produto):
    """Total exibido: apenas prefixa o valor já mascarado"""
    if not valor_produto:
        return "R$ 0,00"
    return f"R$ {valor_produto}"

def gerar_numero_orcamento(agora=None, rng=None):
    """Número do orçamento no formato AAAAMMDD-NNN, NNN aleatório de 001 a 999"""
    agora = agora or datetime.now()
    rng = rng or random
    return f"{agora.strftime('%Y%m%d')}-{rng.randint(1, 999):03d}"

def data_hoje(agora=None):
    """Data atual no padrão brasileiro"""
    agora = agora or datetime.now()
    return agora.strftime("%d/%m/%Y")

def slugify_cliente(nome):
    """Slug do nome do cliente para o arquivo; vazio vira 'cliente'"""
    slug = (nome or "").strip().lower()
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'[^a-z0-9-]', '', slug)
    return slug or "cliente"

def nome_arquivo_orcamento(nome_cliente):
    return f"orcamento-smart-ilha-{slugify_cliente(nome_cliente)}.pdf"
