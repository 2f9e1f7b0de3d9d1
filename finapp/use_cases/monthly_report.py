"""
Monthly Report Use Case
"""
from typing import Optional

from finapp.core.formatter import category_query_message, monthly_report_message
from finapp.services.finance_service import FinanceService


class MonthlyReportUseCase:
    """Use case para relatório mensal"""

    def __init__(self, finance: Optional[FinanceService] = None):
        self.finance = finance or FinanceService()

    def execute(self, telefone: str, categoria: Optional[str] = None) -> dict:
        """
        Relatório do mês; com categoria vira consulta de quanto foi gasto nela.

        Returns:
            dict: {"status": "ok", "report": dict, "message": str}
        """
        if categoria:
            result = self.finance.category_query(telefone, categoria)
            return {"status": "ok", "report": result, "message": category_query_message(result)}

        report = self.finance.monthly_report(telefone)
        return {"status": "ok", "report": report, "message": monthly_report_message(report)}
