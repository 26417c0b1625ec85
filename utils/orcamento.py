"""
Registro imutável do orçamento que circula entre o formulário e o gerador de PDF.

Cada alteração devolve um novo registro; o formulário guarda sempre a versão mais
recente e o gerador recebe a versão resolvida (modelo e total preenchidos).
"""
from dataclasses import dataclass, field, replace, fields
from typing import Tuple

from assets.loja.loja_config import (
    VENDEDOR, GARANTIA, FRETE, VALIDADE_PADRAO, CIDADE_PADRAO,
    MODELO_OUTRO, ACESSORIOS, ACESSORIOS_PADRAO,
)
from utils.formatters import (
    format_phone_mask, format_cpf_mask, format_currency_mask, format_total,
    gerar_numero_orcamento, data_hoje, somente_digitos,
)


@dataclass(frozen=True)
class DadosOrcamento:
    numero_orcamento: str
    data: str
    validade: str = VALIDADE_PADRAO
    vendedor: str = VENDEDOR
    cliente_nome: str = ""
    cliente_telefone: str = ""
    cliente_cpf: str = ""
    cliente_cidade: str = CIDADE_PADRAO
    modelo: str = ""
    modelo_personalizado: str = ""
    cor: str = ""
    garantia: str = GARANTIA
    acessorios: Tuple[str, ...] = field(default_factory=lambda: tuple(ACESSORIOS_PADRAO))
    valor_produto: str = ""
    frete: str = FRETE
    total: str = ""


# Campos exibidos mas não editáveis no formulário
CAMPOS_SOMENTE_LEITURA = ("data", "vendedor", "garantia", "frete", "total")

MASCARAS = {
    "validade": somente_digitos,
    "cliente_telefone": format_phone_mask,
    "cliente_cpf": format_cpf_mask,
    "valor_produto": format_currency_mask,
}

_NOMES_CAMPOS = {f.name for f in fields(DadosOrcamento)}


def criar_orcamento(agora=None):
    """Registro inicial do formulário, com número e data gerados uma única vez"""
    return DadosOrcamento(
        numero_orcamento=gerar_numero_orcamento(agora),
        data=data_hoje(agora),
    )


def atualizar_campo(dados, campo, valor):
    """Retorna um novo registro com um único campo alterado (aplicando a máscara do campo)"""
    if campo not in _NOMES_CAMPOS:
        raise KeyError(campo)
    if campo in CAMPOS_SOMENTE_LEITURA:
        raise ValueError(f"Campo somente leitura: {campo}")
    if campo == "acessorios":
        raise ValueError("Use alternar_acessorio para alterar os acessórios")

    mascara = MASCARAS.get(campo)
    if mascara:
        valor = mascara(valor)
    return replace(dados, **{campo: valor if valor is not None else ""})


def alternar_acessorio(dados, acessorio, marcado):
    """Marca/desmarca um acessório mantendo sempre a ordem do catálogo"""
    if acessorio not in ACESSORIOS:
        raise ValueError(f"Acessório desconhecido: {acessorio}")

    selecionados = set(dados.acessorios)
    if marcado:
        selecionados.add(acessorio)
    else:
        selecionados.discard(acessorio)
    return replace(dados, acessorios=tuple(a for a in ACESSORIOS if a in selecionados))


def modelo_exibicao(dados):
    if dados.modelo == MODELO_OUTRO:
        return dados.modelo_personalizado
    return dados.modelo


def resolver_para_pdf(dados):
    """Substitui a opção 'outro' pelo modelo digitado e preenche o total"""
    return replace(
        dados,
        modelo=modelo_exibicao(dados),
        total=format_total(dados.valor_produto),
    )
