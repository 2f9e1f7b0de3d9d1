"""
WhatsApp Router - Webhook e resumo diário
"""
import logging
from typing import Any, Dict, Optional, Tuple

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from finapp.core.config import WHATSAPP_VERIFY_TOKEN
from finapp.models.whatsapp import DailySummaryRequest, WhatsAppMessage, WhatsAppResponse
from finapp.services.whatsapp_service import WhatsAppService
from finapp.use_cases.daily_summary import DailySummaryUseCase
from finapp.use_cases.process_message import ProcessMessageUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/whatsapp", tags=["whatsapp"])

whatsapp = WhatsAppService()

# Use cases
process_message_uc = ProcessMessageUseCase()
daily_summary_uc = DailySummaryUseCase(whatsapp=whatsapp)


def _response(status_code: int, success: bool, message: str, data: Any = None) -> JSONResponse:
    body = WhatsAppResponse(success=success, message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def extract_cloud_message(payload: Dict[str, Any]) -> Optional[Tuple[str, str]]:
    """Extrai (remetente, texto) do envelope da WhatsApp Cloud API"""
    entry = (payload.get("entry") or [{}])[0]
    changes = (entry.get("changes") or [{}])[0]
    value = changes.get("value") or {}
    messages = value.get("messages") or []
    if not messages:
        return None
    msg = messages[0]
    text = (msg.get("text") or {}).get("body", "")
    return msg.get("from", ""), (text or "").strip()


@router.post("/webhook")
async def webhook(request: Request):
    """Endpoint principal do webhook: interpreta e executa o comando"""
    try:
        payload = await request.json()
    except ValueError:
        return _response(400, False, "Requisição inválida. O corpo deve ser JSON.")

    try:
        from_cloud_api = isinstance(payload, dict) and "entry" in payload
        if from_cloud_api:
            inbound = extract_cloud_message(payload)
            if inbound is None or not inbound[1]:
                # Notificações de status e mensagens sem texto (áudio, imagem)
                return {"success": True, "message": "ignored"}
            payload = {"from": inbound[0], "text": inbound[1]}

        try:
            message = WhatsAppMessage.model_validate(payload)
        except ValidationError:
            return _response(400, False, 'Requisição inválida. É necessário fornecer "from" e "text".')

        result = process_message_uc.execute(message.sender, message.text)

        if from_cloud_api:
            whatsapp.send_message(message.sender, result["message"])

        return _response(
            200,
            True,
            result["message"],
            {"command": result["command"], "userId": message.sender},
        )

    except Exception as e:
        logger.error(f"Erro ao processar webhook: {e}", exc_info=True)
        return _response(500, False, "Erro interno ao processar mensagem.")


@router.get("/webhook")
def verify(request: Request):
    """Verificação do webhook exigida pela WhatsApp Business API"""
    params = request.query_params
    mode = params.get("hub.mode")
    token = params.get("hub.verify_token")
    challenge = params.get("hub.challenge", "")

    if mode == "subscribe" and token == WHATSAPP_VERIFY_TOKEN:
        logger.info("Webhook verificado com sucesso!")
        return PlainTextResponse(challenge)

    return JSONResponse(status_code=403, content={"error": "Token de verificação inválido"})


@router.post("/enviar-resumo-diario")
async def send_daily_summary(request: Request):
    """Resumo diário para um telefone, ou para todos com {"todos": true}"""
    try:
        body = DailySummaryRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        body = DailySummaryRequest()

    if not body.telefone and not body.todos:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": 'Parâmetro "telefone" ou "todos" é obrigatório'},
        )

    try:
        if body.todos:
            result = daily_summary_uc.broadcast()
            return {"success": True, "message": "Resumos gerados com sucesso", "data": result}

        resumo = daily_summary_uc.execute(body.telefone)
        return {
            "success": True,
            "message": "Resumo gerado com sucesso",
            "data": {"telefone": body.telefone, "resumo": resumo},
        }
    except Exception as e:
        logger.error(f"Erro ao gerar resumo diário: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Erro ao processar requisição", "details": str(e)},
        )


@router.get("/enviar-resumo-diario")
def get_daily_summary(telefone: Optional[str] = None):
    """Resumo diário via GET (teste pelo navegador)"""
    if not telefone:
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": 'Parâmetro "telefone" é obrigatório na query string',
                "exemplo": "/api/whatsapp/enviar-resumo-diario?telefone=5511999999999",
            },
        )

    try:
        resumo = daily_summary_uc.execute(telefone)
    except Exception as e:
        logger.error(f"Erro ao gerar resumo diário: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Erro ao processar requisição", "details": str(e)},
        )

    return {
        "success": True,
        "message": "Resumo gerado com sucesso",
        "data": {"telefone": telefone, "resumo": resumo},
    }
