"""
Core configuration and environment variables
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Environment Variables
FINAPP_DB_PATH = os.getenv("FINAPP_DB_PATH", os.path.join(os.getcwd(), "finapp-data.json"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

WHATSAPP_VERIFY_TOKEN = os.getenv("WHATSAPP_VERIFY_TOKEN", "finapp_webhook_token")
WA_ACCESS_TOKEN = os.getenv("WA_ACCESS_TOKEN")
WA_PHONE_NUMBER_ID = os.getenv("WA_PHONE_NUMBER_ID")
GRAPH_VERSION = os.getenv("GRAPH_VERSION", "v22.0")

# Telefone usado pelo dashboard quando nenhum é informado
DEFAULT_TELEFONE = os.getenv("DEFAULT_TELEFONE", "5511999999999")
