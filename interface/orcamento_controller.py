"""
Controle do formulário de orçamento, sem dependência de widgets.

A tela chama `atualizar_campo`/`alternar_acessorio` a cada edição e executa
`gerar_orcamento` no clique do botão; mensagens e temporizador são injetados
pela tela (messagebox e `after` do Tkinter).
"""
from assets.loja.loja_config import MODELO_OUTRO
from utils import orcamento
from utils.formatters import format_total
from utils.orcamento_validator import validar_campos_obrigatorios
from pdf_generators.orcamento_pdf import gerar_pdf_orcamento

TEMPO_SUCESSO_MS = 4000
MENSAGEM_ERRO_PDF = "Erro ao gerar PDF. Tente novamente."


class OrcamentoController:
    def __init__(self, renderizador=None, avisar=None, erro=None, agendar=None,
                 ao_mudar_estado=None, dados=None):
        self.renderizador = renderizador or gerar_pdf_orcamento
        self.avisar = avisar or (lambda mensagem: print(f"⚠️ {mensagem}"))
        self.erro = erro or (lambda mensagem: print(f"❌ {mensagem}"))
        self.agendar = agendar
        self.ao_mudar_estado = ao_mudar_estado

        self.dados = dados or orcamento.criar_orcamento()
        self.gerando = False
        self.sucesso_visivel = False
        self.ultimo_pdf = None

    def _notificar(self):
        if self.ao_mudar_estado:
            self.ao_mudar_estado()

    def atualizar_campo(self, campo, valor):
        self.dados = orcamento.atualizar_campo(self.dados, campo, valor)
        return self.dados

    def alternar_acessorio(self, acessorio, marcado):
        self.dados = orcamento.alternar_acessorio(self.dados, acessorio, marcado)
        return self.dados

    def total_exibicao(self):
        return format_total(self.dados.valor_produto)

    def modelo_personalizado_visivel(self):
        return self.dados.modelo == MODELO_OUTRO

    def _esconder_sucesso(self):
        self.sucesso_visivel = False
        self._notificar()

    async def gerar_orcamento(self):
        """Valida, gera o PDF e retorna (sucesso, resultado)"""
        if self.gerando:
            return False, "Geração em andamento"

        valido, mensagem = validar_campos_obrigatorios(self.dados)
        if not valido:
            self.avisar(mensagem)
            return False, mensagem

        self.gerando = True
        self._notificar()
        try:
            _, caminho = await self.renderizador(orcamento.resolver_para_pdf(self.dados))
        except Exception as e:
            print(f"❌ Erro ao gerar PDF do orçamento {self.dados.numero_orcamento}: {e}")
            self.erro(MENSAGEM_ERRO_PDF)
            return False, MENSAGEM_ERRO_PDF
        finally:
            self.gerando = False
            self._notificar()

        self.ultimo_pdf = caminho
        self.sucesso_visivel = True
        self._notificar()
        if self.agendar:
            self.agendar(TEMPO_SUCESSO_MS, self._esconder_sucesso)
        return True, caminho
