import asyncio
import tkinter as tk
from tkinter import ttk

from .base_module import BaseModule
from interface.orcamento_controller import OrcamentoController
from assets.loja.loja_config import MODELOS, MODELO_OUTRO, CORES, ACESSORIOS, obter_loja
from utils.theme import PALETTE, FONTS

TEXTO_BOTAO = "GERAR ORÇAMENTO EM PDF"
TEXTO_GERANDO = "Gerando PDF..."
TEXTO_SUCESSO = "✔ Orçamento Gerado com Sucesso!"
ROTULO_OUTRO = "Outro (manual)"


class OrcamentoModule(BaseModule):
    def setup_ui(self):
        self.controller = OrcamentoController(
            avisar=self.show_warning,
            erro=self.show_error,
            agendar=self.frame.after,
            ao_mudar_estado=self.atualizar_estado,
        )
        self.vars = {}
        self._aplicando_mascara = False

        container = tk.Frame(self.frame, bg=PALETTE["bg_app"])
        container.pack(fill="both", expand=True)

        # Área rolável para os cards do formulário
        form_canvas = tk.Canvas(container, bg=PALETTE["bg_app"], highlightthickness=0)
        form_scrollbar = ttk.Scrollbar(container, orient="vertical", command=form_canvas.yview)
        form_canvas.configure(yscrollcommand=form_scrollbar.set)
        form_scrollbar.pack(side="right", fill="y")
        form_canvas.pack(side="left", fill="both", expand=True)

        form_inner = tk.Frame(form_canvas, bg=PALETTE["bg_app"])
        form_window = form_canvas.create_window((0, 0), window=form_inner, anchor="nw")

        def _on_inner_configure(event):
            form_canvas.configure(scrollregion=form_canvas.bbox("all"))
        form_inner.bind("<Configure>", _on_inner_configure)

        def _on_canvas_configure(event):
            form_canvas.itemconfigure(form_window, width=event.width)
        form_canvas.bind("<Configure>", _on_canvas_configure)

        def _on_mousewheel(event):
            delta = 0
            if hasattr(event, 'delta') and event.delta:
                delta = int(-event.delta / 120)
            elif getattr(event, 'num', None) in (4, 5):
                delta = -1 if event.num == 5 else 1
            if delta:
                form_canvas.yview_scroll(delta, "units")
        form_canvas.bind_all("<MouseWheel>", _on_mousewheel)
        form_canvas.bind_all("<Button-4>", _on_mousewheel)
        form_canvas.bind_all("<Button-5>", _on_mousewheel)

        self.create_header(form_inner)
        self.create_info_section(form_inner)
        self.create_cliente_section(form_inner)
        self.create_produto_section(form_inner)
        self.create_valores_section(form_inner)

        botoes = tk.Frame(form_inner, bg=PALETTE["bg_app"])
        botoes.pack(fill="x", padx=20, pady=(8, 24))
        self.gerar_btn = self.create_button(botoes, TEXTO_BOTAO, self.gerar_pdf)
        self.gerar_btn.pack(fill="x")
        self.status_label = tk.Label(botoes, text="", bg=PALETTE["bg_app"], fg=PALETTE["text_muted"])
        self.status_label.pack(fill="x", pady=(6, 0))

        self.atualizar_estado()

    def create_header(self, parent):
        loja = obter_loja()
        header_frame = tk.Frame(parent, bg=PALETTE["bg_app"])
        header_frame.pack(fill="x", padx=20, pady=(20, 10))

        tk.Label(header_frame, text="Gerar Orçamento Profissional", font=FONTS["title"],
                 bg=PALETTE["bg_app"], fg=PALETTE["text_primary"]).pack(anchor="w")
        tk.Label(header_frame,
                 text=f"{loja['site']} | {loja['instagram']} | CNPJ: {loja['cnpj']} | WhatsApp: {loja['whatsapp']}",
                 bg=PALETTE["bg_app"], fg=PALETTE["text_muted"]).pack(anchor="w")

    def _section(self, parent, title):
        section = self.create_section_frame(parent, title)
        section.pack(fill="x", padx=20, pady=(0, 12))
        section.content.grid_columnconfigure(1, weight=1)
        return section.content

    def _entry(self, parent, row, label, campo, readonly=False):
        rotulo = ttk.Label(parent, text=label)
        rotulo.grid(row=row, column=0, sticky="w", padx=(0, 12), pady=4)
        var = tk.StringVar(value=getattr(self.controller.dados, campo))
        entry = ttk.Entry(parent, textvariable=var, state="readonly" if readonly else "normal")
        entry.grid(row=row, column=1, sticky="ew", pady=4)
        if not readonly:
            var.trace_add("write", lambda *_: self._on_field_change(campo))
        self.vars[campo] = var
        return rotulo, entry

    def _combo(self, parent, row, label, valores, callback):
        ttk.Label(parent, text=label).grid(row=row, column=0, sticky="w", padx=(0, 12), pady=4)
        combo = ttk.Combobox(parent, values=valores, state="readonly")
        combo.grid(row=row, column=1, sticky="ew", pady=4)
        combo.bind("<<ComboboxSelected>>", callback)
        return combo

    def create_info_section(self, parent):
        content = self._section(parent, "Informações do Orçamento")
        self._entry(content, 0, "Orçamento Nº", "numero_orcamento")
        self._entry(content, 1, "Data", "data", readonly=True)
        self._entry(content, 2, "Validade (dias)", "validade")
        self._entry(content, 3, "Vendedor", "vendedor", readonly=True)

    def create_cliente_section(self, parent):
        content = self._section(parent, "Dados do Cliente")
        self._entry(content, 0, "Nome completo *", "cliente_nome")
        self._entry(content, 1, "Telefone", "cliente_telefone")
        self._entry(content, 2, "CPF (opcional)", "cliente_cpf")
        self._entry(content, 3, "Cidade", "cliente_cidade")

    def create_produto_section(self, parent):
        content = self._section(parent, "Descrição do Produto")

        self.modelo_combo = self._combo(content, 0, "Modelo *", MODELOS + [ROTULO_OUTRO], self.on_modelo_selected)

        self.modelo_personalizado_label, self.modelo_personalizado_entry = self._entry(
            content, 1, "Modelo personalizado", "modelo_personalizado")

        self.cor_combo = self._combo(content, 2, "Cor", CORES, self.on_cor_selected)
        self._entry(content, 3, "Garantia", "garantia", readonly=True)

        ttk.Label(content, text="O que acompanha").grid(row=4, column=0, sticky="nw", padx=(0, 12), pady=4)
        acessorios_frame = tk.Frame(content, bg=PALETTE["bg_card"])
        acessorios_frame.grid(row=4, column=1, sticky="ew", pady=4)
        self.acessorios_vars = {}
        for i, acessorio in enumerate(ACESSORIOS):
            var = tk.BooleanVar(value=acessorio in self.controller.dados.acessorios)
            ttk.Checkbutton(
                acessorios_frame, text=acessorio, variable=var,
                command=lambda a=acessorio, v=var: self.controller.alternar_acessorio(a, v.get()),
            ).grid(row=i // 2, column=i % 2, sticky="w", padx=(0, 16), pady=2)
            self.acessorios_vars[acessorio] = var

        self._mostrar_modelo_personalizado()

    def create_valores_section(self, parent):
        content = self._section(parent, "Valores")
        self._entry(content, 0, "Valor do Produto (R$) *", "valor_produto")

        ttk.Label(content, text="Frete").grid(row=1, column=0, sticky="w", padx=(0, 12), pady=4)
        ttk.Label(content, text=self.controller.dados.frete, style="Frete.TLabel").grid(row=1, column=1, sticky="w", pady=4)

        ttk.Label(content, text="Valor Total").grid(row=2, column=0, sticky="w", padx=(0, 12), pady=4)
        self.total_label = ttk.Label(content, text=self.controller.total_exibicao(), style="Total.TLabel")
        self.total_label.grid(row=2, column=1, sticky="w", pady=4)

    def _on_field_change(self, campo):
        if self._aplicando_mascara:
            return
        var = self.vars[campo]
        dados = self.controller.atualizar_campo(campo, var.get())
        novo_valor = getattr(dados, campo)
        if novo_valor != var.get():
            self._aplicando_mascara = True
            try:
                var.set(novo_valor)
            finally:
                self._aplicando_mascara = False
        if campo == "valor_produto":
            self.total_label.configure(text=self.controller.total_exibicao())

    def on_modelo_selected(self, event=None):
        selecionado = self.modelo_combo.get()
        valor = MODELO_OUTRO if selecionado == ROTULO_OUTRO else selecionado
        self.controller.atualizar_campo("modelo", valor)
        self._mostrar_modelo_personalizado()

    def on_cor_selected(self, event=None):
        self.controller.atualizar_campo("cor", self.cor_combo.get())

    def _mostrar_modelo_personalizado(self):
        if self.controller.modelo_personalizado_visivel():
            self.modelo_personalizado_label.grid()
            self.modelo_personalizado_entry.grid()
        else:
            self.modelo_personalizado_label.grid_remove()
            self.modelo_personalizado_entry.grid_remove()

    def atualizar_estado(self):
        """Reflete o estado do controller no botão de geração"""
        if self.controller.gerando:
            self.gerar_btn.configure(text=TEXTO_GERANDO, state="disabled")
        elif self.controller.sucesso_visivel:
            self.gerar_btn.configure(text=TEXTO_SUCESSO, state="normal")
        else:
            self.gerar_btn.configure(text=TEXTO_BOTAO, state="normal")
        if self.controller.ultimo_pdf:
            self.status_label.configure(text=f"Último PDF: {self.controller.ultimo_pdf}")
        # Redesenhar antes de bloquear na geração do PDF
        self.frame.update_idletasks()

    def gerar_pdf(self):
        """Gerar o PDF do orçamento preenchido"""
        asyncio.run(self.controller.gerar_orcamento())
