"""
Finance Service - Regras de negócio: gastos, limites e alertas
"""
import logging
import random
from typing import List, Optional, Tuple

from finapp.core.exceptions import InvalidLimitError
from finapp.core.utils import percent
from finapp.models.finance import CategoryShare, LimitAlert, MonthStatus
from finapp.services.storage_service import StorageService

logger = logging.getLogger(__name__)

ALERT_THRESHOLD = 80
EXCEEDED_THRESHOLD = 100

SAVING_TIPS = {
    "alimentacao": [
        "🍽️ Planeje suas refeições semanalmente para evitar desperdício e compras por impulso.",
        "🥗 Cozinhar em casa pode economizar até 60% comparado a comer fora.",
        "🛒 Faça uma lista de compras e evite ir ao mercado com fome.",
        "📦 Compre alimentos em maior quantidade quando estiverem em promoção.",
    ],
    "transporte": [
        "🚗 Considere usar transporte público ou compartilhado para economizar com combustível.",
        "🚴 Para distâncias curtas, caminhar ou usar bicicleta economiza e faz bem à saúde.",
        "⛽ Mantenha o carro calibrado e faça manutenções preventivas para gastar menos combustível.",
        "🚕 Avalie se vale a pena ter um carro próprio ou usar aplicativos de transporte.",
    ],
    "lazer": [
        "🎬 Procure por eventos gratuitos ou com desconto na sua cidade.",
        "📚 Bibliotecas públicas oferecem livros, filmes e até cursos gratuitamente.",
        "🏞️ Aproveite parques e espaços públicos para atividades de lazer.",
        "🎮 Compartilhe assinaturas de streaming com amigos ou familiares.",
    ],
    "saude": [
        "💊 Compare preços de medicamentos em diferentes farmácias e considere genéricos.",
        "🏃 Prevenir é mais barato que remediar: invista em hábitos saudáveis.",
        "🩺 Use o sistema público de saúde quando possível.",
        "💰 Considere um plano de saúde com coparticipação se usar pouco.",
    ],
    "vestuario": [
        "👕 Compre roupas fora de estação quando estão em promoção.",
        "♻️ Considere brechós e bazares para peças de qualidade por menos.",
        "🧵 Aprenda consertos básicos para prolongar a vida das suas roupas.",
        "🛍️ Evite compras por impulso: espere 24h antes de comprar algo não essencial.",
    ],
    "educacao": [
        "📖 Busque cursos gratuitos online em plataformas como Coursera, edX e YouTube.",
        "📚 Compartilhe livros com amigos ou use bibliotecas.",
        "🎓 Verifique se sua empresa oferece auxílio educação.",
        "💻 Muitas instituições oferecem bolsas parciais ou integrais.",
    ],
    "moradia": [
        "💡 Troque lâmpadas por LED para economizar até 80% na conta de luz.",
        "🚿 Reduza o tempo no chuveiro e conserte vazamentos rapidamente.",
        "❄️ Use ar-condicionado com moderação e mantenha filtros limpos.",
        "📱 Renegocie contratos de internet, TV e telefone anualmente.",
    ],
    "outros": [
        "📊 Categorize melhor seus gastos para identificar onde economizar.",
        "💰 Estabeleça um limite mensal e acompanhe seus gastos regularmente.",
        "🎯 Defina metas financeiras claras e trabalhe para alcançá-las.",
        "📝 Revise seus gastos semanalmente para manter o controle.",
    ],
}
FIRST_STEPS_TIP = "💡 Comece a registrar seus gastos para receber dicas personalizadas!"


def build_alert(tipo: str, gasto: float, limite: float, categoria: Optional[str] = None) -> Optional[LimitAlert]:
    """Alerta quando o gasto atinge 80% do limite; None abaixo disso ou sem limite"""
    if limite <= 0:
        return None
    pct = gasto / limite * 100
    if pct < ALERT_THRESHOLD:
        return None
    return LimitAlert(
        tipo=tipo,
        categoria=categoria,
        percentual=pct,
        valor_gasto=gasto,
        valor_limite=limite,
        atingiu_80=ALERT_THRESHOLD <= pct < EXCEEDED_THRESHOLD,
        atingiu_100=pct >= EXCEEDED_THRESHOLD,
    )


class FinanceService:
    """Serviço de regras de negócio para finanças"""

    def __init__(self, storage: Optional[StorageService] = None):
        self.db = storage or StorageService()

    def get_or_create_user(self, telefone: str) -> dict:
        return self.db.find_or_create_user(telefone)

    def add_expense(
        self,
        telefone: str,
        valor: float,
        categoria: str,
        forma_pagamento: str,
        descricao: str = "",
    ) -> Tuple[dict, List[LimitAlert]]:
        """Registra o gasto e verifica os limites logo após a gravação"""
        user = self.get_or_create_user(telefone)
        expense = self.db.create_expense(user["id"], valor, categoria, forma_pagamento, descricao)
        alerts = self.check_limits(user["id"], categoria)
        if alerts:
            logger.info(f"Alertas de limite para usuário {user['id']}: {[a.tipo for a in alerts]}")
        return expense, alerts

    def check_limits(self, user_id: int, categoria: Optional[str] = None) -> List[LimitAlert]:
        """Verifica se o limite geral e o da categoria atingiram 80% ou 100%"""
        alerts = []
        user = self.db.get_user(user_id)
        if not user:
            return alerts

        general = build_alert("geral", self.db.month_total(user_id), user.get("limite_mensal_geral") or 0)
        if general:
            alerts.append(general)

        if categoria:
            limit = self.db.find_category_limit(user_id, categoria)
            if limit:
                category_alert = build_alert(
                    "categoria",
                    self.db.month_category_total(user_id, categoria),
                    limit["valor_limite_mensal"],
                    categoria=categoria,
                )
                if category_alert:
                    alerts.append(category_alert)

        return alerts

    def set_general_limit(self, telefone: str, valor: float) -> dict:
        if valor is None or valor < 0:
            raise InvalidLimitError(f"Limite mensal inválido: {valor}")
        user = self.get_or_create_user(telefone)
        return self.db.update_general_limit(user["id"], valor)

    def set_category_limit(self, telefone: str, categoria: str, valor: float) -> dict:
        if valor is None or valor < 0:
            raise InvalidLimitError(f"Limite inválido para {categoria}: {valor}")
        user = self.get_or_create_user(telefone)
        return self.db.upsert_category_limit(user["id"], categoria, valor)

    def monthly_report(self, telefone: str) -> dict:
        """Dados do relatório mensal completo"""
        user = self.get_or_create_user(telefone)
        user_id = user["id"]
        return {
            "usuario": user,
            "gastos": self.db.current_month_expenses(user_id),
            "total_mes": self.db.month_total(user_id),
            "por_categoria": self.db.month_total_by_category(user_id),
            "por_forma_pagamento": self.db.month_total_by_payment(user_id),
            "limite_geral": user.get("limite_mensal_geral") or 0,
            "limites_categoria": self.db.list_category_limits(user_id),
        }

    def category_query(self, telefone: str, categoria: str) -> dict:
        """Quanto foi gasto em uma categoria no mês e quanto do limite foi usado"""
        user = self.get_or_create_user(telefone)
        total = self.db.month_category_total(user["id"], categoria)
        limit = self.db.find_category_limit(user["id"], categoria)
        valor_limite = limit["valor_limite_mensal"] if limit and limit["valor_limite_mensal"] > 0 else None
        return {
            "categoria": categoria,
            "total": total,
            "limite": valor_limite,
            "percentual": percent(total, valor_limite) if valor_limite else None,
        }

    def delete_expense(self, telefone: str, expense_id: int) -> Tuple[bool, Optional[dict]]:
        user = self.get_or_create_user(telefone)
        expense = self.db.find_expense(expense_id, user["id"])
        if not expense:
            return False, None
        return self.db.delete_expense(expense_id, user["id"]), expense

    def month_status(self, telefone: str) -> MonthStatus:
        """Status do mês para o resumo de educação financeira"""
        user = self.get_or_create_user(telefone)
        user_id = user["id"]
        total = self.db.month_total(user_id)
        by_category = self.db.month_total_by_category(user_id)
        limite_geral = user.get("limite_mensal_geral") or 0
        percentual_usado = percent(total, limite_geral)

        top = sorted(by_category.items(), key=lambda item: item[1], reverse=True)[:3]
        principais = [
            CategoryShare(categoria=cat, valor=valor, percentual=percent(valor, total))
            for cat, valor in top
        ]

        alertas = []
        if limite_geral > 0:
            if percentual_usado >= EXCEEDED_THRESHOLD:
                alertas.append("🚨 Você excedeu seu limite mensal!")
            elif percentual_usado >= ALERT_THRESHOLD:
                alertas.append("⚠️ Atenção: você já usou mais de 80% do seu limite mensal!")

        for limit in self.db.list_category_limits(user_id):
            if limit["valor_limite_mensal"] <= 0:
                continue
            pct = percent(by_category.get(limit["categoria"], 0.0), limit["valor_limite_mensal"])
            if pct >= EXCEEDED_THRESHOLD:
                alertas.append(f'🚨 Limite da categoria "{limit["categoria"]}" excedido!')
            elif pct >= ALERT_THRESHOLD:
                alertas.append(f'⚠️ Categoria "{limit["categoria"]}" próxima do limite ({pct:.0f}%)!')

        return MonthStatus(
            total_gasto=total,
            limite_geral=limite_geral,
            percentual_usado=percentual_usado,
            saldo_restante=limite_geral - total,
            principais_categorias=principais,
            alertas=alertas,
        )

    @staticmethod
    def saving_tip(principais: List[CategoryShare]) -> str:
        """Dica de economia para a categoria que mais consome"""
        if not principais:
            return FIRST_STEPS_TIP
        tips = SAVING_TIPS.get(principais[0].categoria, SAVING_TIPS["outros"])
        return random.choice(tips)
