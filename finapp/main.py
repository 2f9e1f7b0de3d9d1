import logging

from fastapi import FastAPI

from finapp.core.config import LOG_LEVEL
from finapp.routers import cron, dashboard, whatsapp

# --- CONFIGURAÇÕES ---
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="FinApp", version="1.0.0")

app.include_router(whatsapp.router)
app.include_router(dashboard.router)
app.include_router(cron.router)


@app.get("/")
def home():
    return {"status": "FinApp Online"}
