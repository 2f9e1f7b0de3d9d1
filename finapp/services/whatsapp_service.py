"""
WhatsApp Service - Envio de mensagens pela WhatsApp Cloud API
"""
import logging
from typing import Optional

import requests

from finapp.core.config import GRAPH_VERSION, WA_ACCESS_TOKEN, WA_PHONE_NUMBER_ID

logger = logging.getLogger(__name__)

MAX_BODY_LENGTH = 4096


class WhatsAppService:
    """Serviço de integração com a WhatsApp Cloud API"""

    def __init__(
        self,
        token: Optional[str] = WA_ACCESS_TOKEN,
        phone_number_id: Optional[str] = WA_PHONE_NUMBER_ID,
    ):
        self.token = token
        self.base_url = (
            f"https://graph.facebook.com/{GRAPH_VERSION}/{phone_number_id}/messages"
            if token and phone_number_id else None
        )

    @property
    def enabled(self) -> bool:
        return self.base_url is not None

    def send_message(self, to: str, text: str) -> bool:
        """Envia mensagem de texto; False se não configurado ou em caso de erro"""
        if not self.base_url:
            return False

        try:
            response = requests.post(
                self.base_url,
                headers={"Authorization": f"Bearer {self.token}"},
                json={
                    "messaging_product": "whatsapp",
                    "to": to,
                    "type": "text",
                    "text": {"body": text[:MAX_BODY_LENGTH]},
                },
                timeout=10,
            )
            if response.status_code >= 400:
                logger.error(f"WhatsApp API erro {response.status_code}: {response.text}")
                return False
            return True
        except requests.RequestException as e:
            logger.error(f"Erro ao enviar mensagem: {e}")
            return False
