"""
Custom exceptions
"""


class StorageError(Exception):
    """Erro ao gravar o arquivo de dados"""
    pass


class InvalidLimitError(ValueError):
    """Valor de limite inválido (negativo ou não numérico)"""
    pass
