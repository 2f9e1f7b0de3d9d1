"""
Process Message Use Case - Interpreta o texto e executa o comando
"""
import logging
from typing import Optional

from finapp.core.formatter import error_message
from finapp.services.finance_service import FinanceService
from finapp.services.message_parser import MessageParser
from finapp.use_cases.add_expense import AddExpenseUseCase
from finapp.use_cases.delete_expense import DeleteExpenseUseCase
from finapp.use_cases.monthly_report import MonthlyReportUseCase
from finapp.use_cases.set_limit import SetLimitUseCase

logger = logging.getLogger(__name__)


class ProcessMessageUseCase:
    """Use case que despacha uma mensagem de texto para o comando certo"""

    def __init__(self, finance: Optional[FinanceService] = None):
        finance = finance or FinanceService()
        self.add_expense_uc = AddExpenseUseCase(finance)
        self.delete_expense_uc = DeleteExpenseUseCase(finance)
        self.monthly_report_uc = MonthlyReportUseCase(finance)
        self.set_limit_uc = SetLimitUseCase(finance)

    def execute(self, telefone: str, text: str) -> dict:
        """
        Returns:
            dict: {"command": tipo do comando, "status": str, "message": resposta}
        """
        command = MessageParser.parse(text)
        logger.info(f"Mensagem de {telefone} interpretada como '{command.type}'")

        if command.type == "adicionar":
            result = self.add_expense_uc.execute(telefone, command)
        elif command.type == "excluir":
            result = self.delete_expense_uc.execute(telefone, command.expense_id)
        elif command.type == "relatorio":
            result = self.monthly_report_uc.execute(telefone, command.category)
        elif command.type == "limite":
            result = self.set_limit_uc.execute(telefone, command.amount, command.category)
        else:
            result = {"status": "error", "message": error_message("Não consegui entender seu comando.")}

        return {"command": command.type, "status": result["status"], "message": result["message"]}
