from .orcamento import OrcamentoModule

__all__ = [
    'OrcamentoModule',
]
