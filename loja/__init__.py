"""
Loja - gerenciamento de clientes e produtos via menu interativo
"""
__version__ = "1.0.0"
