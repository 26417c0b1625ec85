#!/usr/bin/env python3

import tkinter as tk
from tkinter import messagebox
import sys
import os

def _set_working_directory():
    """
    Ajusta o diretório de trabalho para a pasta do executável (quando congelado)
    ou para a pasta do script (em desenvolvimento). Isso garante que caminhos
    relativos como 'assets/' funcionem corretamente.
    """
    try:
        if getattr(sys, 'frozen', False) and hasattr(sys, 'executable'):
            base_dir = os.path.dirname(os.path.abspath(sys.executable))
        else:
            base_dir = os.path.dirname(os.path.abspath(__file__))
        os.chdir(base_dir)
    except OSError as e:
        print(f"⚠️  Não foi possível ajustar o diretório de trabalho: {e}")

def main():
    _set_working_directory()
    try:
        print("=== Gerador de Orçamento Smart Ilha - Iniciando ===")
        print(f"Python: {sys.version}")
        print(f"Tkinter disponível: {tk.TkVersion}")

        if os.environ.get('DISPLAY') is None and sys.platform.startswith('linux'):
            print("⚠️  Aviso: DISPLAY não está definido (ambiente sem interface gráfica)")

        from utils.theme import apply_theme
        from interface.modules.orcamento import OrcamentoModule

        root = tk.Tk()
        root.title("Gerar Orçamento - Smart Ilha")
        root.geometry("760x900")
        apply_theme(root)

        OrcamentoModule(root)

        print("✅ Formulário pronto")
        root.mainloop()
        print("Sistema encerrado.")

    except ImportError as e:
        print(f"❌ Erro de importação: {e}")
        print("Verifique se as dependências estão instaladas (fpdf2, Pillow)")
        return 1

    except tk.TclError as e:
        print(f"❌ Erro do Tkinter: {e}")
        print("Possíveis causas:")
        print("1. Não há servidor X rodando (ambiente sem interface gráfica)")
        print("2. DISPLAY não está configurado corretamente")
        return 1

    except Exception as e:
        print(f"❌ Erro geral: {e}")
        import traceback
        traceback.print_exc()

        try:
            error_root = tk.Tk()
            error_root.withdraw()
            messagebox.showerror("Erro", f"Erro ao iniciar o gerador de orçamento:\n\n{str(e)}")
            error_root.destroy()
        except tk.TclError:
            print("Não foi possível mostrar janela de erro.")

        return 1

    return 0

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
