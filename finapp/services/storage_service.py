"""
Storage Service - Persistência de usuários, gastos e limites no arquivo JSON
"""
import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional

from finapp.core.utils import month_bounds, parse_iso
from finapp.deps import get_repo
from finapp.json_repo import JsonRepository

logger = logging.getLogger(__name__)


class StorageService:
    """Serviço de persistência no arquivo JSON"""

    def __init__(self, repo: Optional[JsonRepository] = None):
        self._repo = repo

    @property
    def repo(self) -> JsonRepository:
        return self._repo or get_repo()

    # --- USUÁRIOS ---
    def find_user_by_phone(self, telefone: str) -> Optional[dict]:
        for user in self.repo.list_documents("usuarios"):
            if user["telefone"] == telefone:
                return user
        return None

    def find_or_create_user(self, telefone: str) -> dict:
        """Busca o usuário pelo telefone, criando se não existir"""
        user = self.find_user_by_phone(telefone)
        if user:
            return user

        user = self.repo.add_document("usuarios", {
            "telefone": telefone,
            "data_criacao": datetime.now(),
            "limite_mensal_geral": 0,
        })
        logger.info(f"Usuário criado: id={user['id']} telefone={telefone}")
        return user

    def get_user(self, user_id: int) -> Optional[dict]:
        for user in self.repo.list_documents("usuarios"):
            if user["id"] == user_id:
                return user
        return None

    def list_users(self) -> List[dict]:
        return list(self.repo.list_documents("usuarios"))

    def update_general_limit(self, user_id: int, valor: float) -> Optional[dict]:
        user = self.get_user(user_id)
        if user:
            user["limite_mensal_geral"] = valor
            self.repo.save()
        return user

    # --- GASTOS ---
    def create_expense(
        self,
        user_id: int,
        valor: float,
        categoria: str,
        forma_pagamento: str,
        descricao: str = "",
        data: Optional[datetime] = None,
    ) -> dict:
        """Registra um gasto (data padrão: agora)"""
        return self.repo.add_document("gastos", {
            "usuario_id": user_id,
            "data": data or datetime.now(),
            "descricao": descricao or "",
            "valor": valor,
            "categoria": categoria,
            "forma_pagamento": forma_pagamento,
        })

    def find_expense(self, expense_id: int, user_id: int) -> Optional[dict]:
        for expense in self.repo.list_documents("gastos"):
            if expense["id"] == expense_id and expense["usuario_id"] == user_id:
                return expense
        return None

    def delete_expense(self, expense_id: int, user_id: int) -> bool:
        """Remove o gasto apenas se pertencer ao usuário"""
        removed = self.repo.remove_documents(
            "gastos",
            lambda g: g["id"] == expense_id and g["usuario_id"] == user_id,
        )
        return removed > 0

    def current_month_expenses(self, user_id: int, now: Optional[datetime] = None) -> List[dict]:
        """Retorna gastos do mês corrente"""
        start, end = month_bounds(now)
        expenses = []
        for expense in self.repo.list_documents("gastos"):
            if expense["usuario_id"] != user_id:
                continue
            if start <= parse_iso(expense["data"]) <= end:
                expenses.append(expense)
        return expenses

    def month_total(self, user_id: int, now: Optional[datetime] = None) -> float:
        return sum(g["valor"] for g in self.current_month_expenses(user_id, now))

    def month_total_by_category(self, user_id: int, now: Optional[datetime] = None) -> Dict[str, float]:
        totals = defaultdict(float)
        for expense in self.current_month_expenses(user_id, now):
            totals[expense["categoria"]] += expense["valor"]
        return dict(totals)

    def month_total_by_payment(self, user_id: int, now: Optional[datetime] = None) -> Dict[str, float]:
        totals = defaultdict(float)
        for expense in self.current_month_expenses(user_id, now):
            totals[expense["forma_pagamento"]] += expense["valor"]
        return dict(totals)

    def month_category_total(self, user_id: int, categoria: str, now: Optional[datetime] = None) -> float:
        return sum(
            g["valor"] for g in self.current_month_expenses(user_id, now)
            if g["categoria"] == categoria
        )

    # --- LIMITES POR CATEGORIA ---
    def find_category_limit(self, user_id: int, categoria: str) -> Optional[dict]:
        for limit in self.repo.list_documents("limites_categoria"):
            if limit["usuario_id"] == user_id and limit["categoria"] == categoria:
                return limit
        return None

    def upsert_category_limit(self, user_id: int, categoria: str, valor: float) -> dict:
        """Define ou atualiza o limite de uma categoria"""
        existing = self.find_category_limit(user_id, categoria)
        if existing:
            existing["valor_limite_mensal"] = valor
            self.repo.save()
            return existing

        return self.repo.add_document("limites_categoria", {
            "usuario_id": user_id,
            "categoria": categoria,
            "valor_limite_mensal": valor,
        })

    def list_category_limits(self, user_id: int) -> List[dict]:
        return [
            limit for limit in self.repo.list_documents("limites_categoria")
            if limit["usuario_id"] == user_id
        ]
