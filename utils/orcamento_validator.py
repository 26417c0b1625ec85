from assets.loja.loja_config import MODELO_OUTRO

def validar_campos_obrigatorios(dados):
    """
    Verifica os campos obrigatórios na ordem do formulário.
    Para no primeiro erro e retorna (valido, mensagem)
    """
    if not dados.cliente_nome.strip():
        return False, "Por favor, preencha o nome do cliente."

    if not dados.modelo:
        return False, "Por favor, selecione o modelo do produto."
    if dados.modelo == MODELO_OUTRO and not dados.modelo_personalizado.strip():
        return False, "Por favor, descreva o modelo personalizado."

    if not dados.valor_produto:
        return False, "Por favor, preencha o valor do produto."

    return True, None
