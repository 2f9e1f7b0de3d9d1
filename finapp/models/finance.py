"""
Finance Models
"""
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, Field


Category = Literal[
    "alimentacao",
    "transporte",
    "saude",
    "educacao",
    "lazer",
    "moradia",
    "vestuario",
    "outros",
]
PaymentMethod = Literal["cartao", "dinheiro", "pix", "debito", "credito"]
CommandType = Literal["adicionar", "excluir", "relatorio", "limite", "desconhecido"]

CATEGORIES = get_args(Category)


class ParsedCommand(BaseModel):
    """Comando estruturado extraído de uma mensagem"""
    type: CommandType
    amount: Optional[float] = None
    category: Optional[Category] = None
    payment_method: Optional[PaymentMethod] = None
    expense_id: Optional[int] = None
    description: Optional[str] = None


class LimitAlert(BaseModel):
    """Resultado da verificação de um limite (80% ou 100%)"""
    tipo: Literal["geral", "categoria"]
    categoria: Optional[str] = None
    percentual: float
    valor_gasto: float
    valor_limite: float
    atingiu_80: bool
    atingiu_100: bool


class CategoryShare(BaseModel):
    categoria: str
    valor: float
    percentual: float


class MonthStatus(BaseModel):
    """Status financeiro do mês para o resumo de educação financeira"""
    total_gasto: float
    limite_geral: float
    percentual_usado: float
    saldo_restante: float
    principais_categorias: List[CategoryShare] = Field(default_factory=list)
    alertas: List[str] = Field(default_factory=list)
