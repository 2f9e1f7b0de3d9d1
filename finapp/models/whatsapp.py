"""
WhatsApp Models
"""
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class WhatsAppMessage(BaseModel):
    """Mensagem recebida no webhook (formato simplificado)"""
    sender: str = Field(..., alias="from", min_length=1)
    text: str = Field(..., min_length=1)
    timestamp: Optional[int] = None

    @field_validator("sender", mode="before")
    @classmethod
    def phone_as_text(cls, value: Any) -> Any:
        # Alguns integradores enviam o telefone como número
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class WhatsAppResponse(BaseModel):
    """Resposta padrão do webhook"""
    success: bool
    message: str
    data: Optional[Any] = None


class DailySummaryRequest(BaseModel):
    """Pedido de resumo diário: um telefone ou todos os usuários"""
    telefone: Optional[str] = None
    todos: bool = False
