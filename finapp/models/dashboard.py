"""
Dashboard Models
"""
from pydantic import BaseModel, Field

from finapp.core.config import DEFAULT_TELEFONE
from finapp.models.finance import Category


class GeneralLimitUpdate(BaseModel):
    """Atualização do limite mensal geral"""
    telefone: str = DEFAULT_TELEFONE
    limite_mensal_geral: float = Field(..., ge=0)


class CategoryLimitUpdate(BaseModel):
    """Atualização do limite mensal de uma categoria"""
    telefone: str = DEFAULT_TELEFONE
    categoria: Category
    valor_limite: float = Field(..., ge=0)
