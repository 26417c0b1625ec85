import tkinter as tk
from tkinter import ttk
from utils.theme import PALETTE, FONTS, card

class BaseModule:
    """Classe base das telas do sistema"""

    def __init__(self, parent):
        self.parent = parent

        # Frame principal do módulo (container visual)
        self.frame = tk.Frame(parent, bg=PALETTE["bg_app"])
        self.frame.pack(fill="both", expand=True)

        # Configurar UI específica do módulo
        self.setup_ui()

    def setup_ui(self):
        """Método a ser implementado pelos módulos filhos"""
        pass

    def create_section_frame(self, parent, title, padx=10, pady=10):
        """Criar card de seção com título.

        Retorna o container; os campos devem ser adicionados em
        `container.content`.
        """
        container = tk.Frame(parent, highlightthickness=1, highlightbackground=PALETTE["border"])
        card(container)
        header = tk.Label(container, text=title, font=FONTS["subtitle"], bg=PALETTE["bg_card"], fg=PALETTE["text_primary"])
        header.pack(anchor="w", padx=12, pady=(12, 6))
        content = tk.Frame(container)
        card(content)
        content.pack(fill="both", expand=True, padx=12, pady=(0, 12))
        container.content = content
        return container

    def create_button(self, parent, text, command, variant='primary', **kwargs):
        """Criar botão estilizado"""
        style = {
            'primary': 'Primary.TButton',
        }.get(variant, 'Primary.TButton')

        button = ttk.Button(parent, text=text, command=command, style=style, **kwargs)
        return button

    def show_error(self, message):
        """Mostrar mensagem de erro"""
        from tkinter import messagebox
        messagebox.showerror("Erro", message)

    def show_warning(self, message):
        """Mostrar mensagem de aviso"""
        from tkinter import messagebox
        messagebox.showwarning("Aviso", message)
