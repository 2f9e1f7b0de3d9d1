"""
Add Expense Use Case
"""
import logging
from typing import Optional

from finapp.core.formatter import add_expense_message, error_message, limit_alerts_message
from finapp.models.finance import ParsedCommand
from finapp.services.finance_service import FinanceService

logger = logging.getLogger(__name__)


class AddExpenseUseCase:
    """Use case para adicionar gasto"""

    def __init__(self, finance: Optional[FinanceService] = None):
        self.finance = finance or FinanceService()

    def execute(self, telefone: str, command: ParsedCommand) -> dict:
        """
        Registra o gasto descrito pelo comando e anexa alertas de limite.

        Returns:
            dict: {"status": "created", "expense", "alerts", "message"}
                  ou {"status": "error", "message"}
        """
        if not command.amount or command.amount <= 0:
            return {
                "status": "error",
                "message": error_message("Não foi possível identificar o valor do gasto."),
            }

        expense, alerts = self.finance.add_expense(
            telefone,
            command.amount,
            command.category or "outros",
            command.payment_method or "credito",
            command.description or "",
        )
        logger.info(f"Gasto {expense['id']} registrado para {telefone}: {expense['valor']}")

        return {
            "status": "created",
            "expense": expense,
            "alerts": alerts,
            "message": add_expense_message(expense) + limit_alerts_message(alerts),
        }
