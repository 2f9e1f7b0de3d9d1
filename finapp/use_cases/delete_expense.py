"""
Delete Expense Use Case
"""
from typing import Optional

from finapp.core.formatter import delete_expense_message, error_message
from finapp.services.finance_service import FinanceService


class DeleteExpenseUseCase:
    """Use case para excluir gasto"""

    def __init__(self, finance: Optional[FinanceService] = None):
        self.finance = finance or FinanceService()

    def execute(self, telefone: str, expense_id: Optional[int]) -> dict:
        """
        Exclui um gasto do próprio usuário

        Returns:
            dict: {"status": "deleted" | "not_found" | "error", "message"}
        """
        if expense_id is None:
            return {
                "status": "error",
                "message": error_message("Não foi possível identificar o ID do gasto a excluir."),
            }

        ok, expense = self.finance.delete_expense(telefone, expense_id)
        if not ok or not expense:
            return {"status": "not_found", "message": f"❌ Gasto com ID {expense_id} não encontrado."}

        return {"status": "deleted", "expense": expense, "message": delete_expense_message(expense)}
