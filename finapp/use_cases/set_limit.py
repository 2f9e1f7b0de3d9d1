"""
Set Limit Use Case
"""
from typing import Optional

from finapp.core.formatter import category_limit_message, error_message, general_limit_message
from finapp.services.finance_service import FinanceService


class SetLimitUseCase:
    """Use case para definir limite geral ou por categoria"""

    def __init__(self, finance: Optional[FinanceService] = None):
        self.finance = finance or FinanceService()

    def execute(self, telefone: str, amount: Optional[float], categoria: Optional[str] = None) -> dict:
        """
        Categoria ausente ou "outros" define o limite mensal geral.

        Returns:
            dict: {"status": "created" | "error", "message"}
        """
        if not amount or amount <= 0:
            return {
                "status": "error",
                "message": error_message("Não foi possível identificar o valor do limite."),
            }

        if categoria and categoria != "outros":
            limit = self.finance.set_category_limit(telefone, categoria, amount)
            return {"status": "created", "limit": limit, "message": category_limit_message(limit)}

        user = self.finance.set_general_limit(telefone, amount)
        return {
            "status": "created",
            "limit": {"limite_mensal_geral": user["limite_mensal_geral"]},
            "message": general_limit_message(user["limite_mensal_geral"]),
        }
