"""
Dashboard Router - API consumida pelo painel web
"""
import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from finapp.core.config import DEFAULT_TELEFONE
from finapp.models.dashboard import CategoryLimitUpdate, GeneralLimitUpdate
from finapp.services.finance_service import FinanceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

finance = FinanceService()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.get("/resumo")
def get_summary(telefone: str = DEFAULT_TELEFONE):
    """Totais do mês e limites do usuário"""
    try:
        report = finance.monthly_report(telefone)
    except Exception as e:
        logger.error(f"Erro ao buscar resumo: {e}", exc_info=True)
        return _error(500, "Erro ao buscar resumo")

    usuario = report["usuario"]
    return {
        "success": True,
        "data": {
            "usuario": {
                "id": usuario["id"],
                "telefone": usuario["telefone"],
                "limite_mensal_geral": usuario["limite_mensal_geral"],
            },
            "resumo": {
                "total_mes": report["total_mes"],
                "por_categoria": report["por_categoria"],
                "por_forma_pagamento": report["por_forma_pagamento"],
            },
            "limites_categoria": report["limites_categoria"],
        },
    }


@router.get("/gastos")
def get_expenses(telefone: str = DEFAULT_TELEFONE, limit: int = Query(50, ge=1)):
    """Gastos do mês, mais recentes primeiro"""
    try:
        user = finance.get_or_create_user(telefone)
        expenses = finance.db.current_month_expenses(user["id"])
    except Exception as e:
        logger.error(f"Erro ao buscar gastos: {e}", exc_info=True)
        return _error(500, "Erro ao buscar gastos")

    expenses = sorted(expenses, key=lambda g: g["data"], reverse=True)[:limit]
    return {"success": True, "data": expenses}


@router.post("/limite-geral")
async def update_general_limit(request: Request):
    """Atualiza o limite mensal geral"""
    try:
        body = GeneralLimitUpdate.model_validate(await request.json())
    except (ValueError, ValidationError):
        return _error(400, "Limite mensal inválido")

    try:
        user = finance.set_general_limit(body.telefone, body.limite_mensal_geral)
    except Exception as e:
        logger.error(f"Erro ao atualizar limite geral: {e}", exc_info=True)
        return _error(500, "Erro ao atualizar limite")

    return {
        "success": True,
        "message": "Limite mensal atualizado com sucesso",
        "data": {"usuario_id": user["id"], "limite_mensal_geral": user["limite_mensal_geral"]},
    }


@router.post("/limite-categoria")
async def update_category_limit(request: Request):
    """Cria ou atualiza o limite de uma categoria"""
    try:
        body = CategoryLimitUpdate.model_validate(await request.json())
    except (ValueError, ValidationError):
        return _error(400, "Categoria ou valor inválido")

    try:
        limit = finance.set_category_limit(body.telefone, body.categoria, body.valor_limite)
    except Exception as e:
        logger.error(f"Erro ao atualizar limite de categoria: {e}", exc_info=True)
        return _error(500, "Erro ao atualizar limite de categoria")

    return {
        "success": True,
        "message": f"Limite da categoria {body.categoria} atualizado com sucesso",
        "data": limit,
    }
