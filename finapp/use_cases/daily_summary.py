"""
Daily Summary Use Case
"""
import logging
from typing import Optional

from finapp.core.formatter import daily_summary_message
from finapp.services.finance_service import FinanceService
from finapp.services.whatsapp_service import WhatsAppService

logger = logging.getLogger(__name__)


class DailySummaryUseCase:
    """Use case para o resumo diário de educação financeira"""

    def __init__(
        self,
        finance: Optional[FinanceService] = None,
        whatsapp: Optional[WhatsAppService] = None,
    ):
        self.finance = finance or FinanceService()
        self.whatsapp = whatsapp or WhatsAppService()

    def execute(self, telefone: str) -> str:
        """Gera o resumo do mês com uma dica de economia"""
        status = self.finance.month_status(telefone)
        tip = self.finance.saving_tip(status.principais_categorias)
        return daily_summary_message(status, tip)

    def broadcast(self) -> dict:
        """
        Gera o resumo para todos os usuários e envia pelo WhatsApp quando configurado.

        Returns:
            dict: {"total_users": int, "sent": int, "resumos": {telefone: texto}}
        """
        resumos = {}
        sent = 0
        if not self.whatsapp.enabled:
            logger.warning("WhatsApp não configurado: resumos gerados sem envio")

        for user in self.finance.db.list_users():
            telefone = user["telefone"]
            resumos[telefone] = self.execute(telefone)
            if self.whatsapp.enabled and self.whatsapp.send_message(telefone, resumos[telefone]):
                sent += 1

        logger.info(f"Resumo diário gerado para {len(resumos)} usuários, {sent} enviados")
        return {"total_users": len(resumos), "sent": sent, "resumos": resumos}
