"""
Cron Jobs Router
"""
import logging

from fastapi import APIRouter

from finapp.services.whatsapp_service import WhatsAppService
from finapp.use_cases.daily_summary import DailySummaryUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cron", tags=["cron"])

daily_summary_uc = DailySummaryUseCase(whatsapp=WhatsAppService())


@router.get("/resumo-diario")
def cron_daily_summary():
    """
    Cron job do resumo diário: gera o resumo de educação financeira
    de cada usuário e envia pelo WhatsApp.
    """
    try:
        result = daily_summary_uc.broadcast()
        return {"sent": result["sent"], "total_users": result["total_users"]}
    except Exception as e:
        logger.error(f"Erro no cron: {e}", exc_info=True)
        return {"sent": 0, "error": str(e)}
