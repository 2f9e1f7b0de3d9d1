"""Unit tests for user-facing message formatting."""
from finapp.core import formatter
from finapp.models.finance import CategoryShare, LimitAlert, MonthStatus


def _expense(**overrides):
    expense = {
        "id": 3,
        "usuario_id": 1,
        "data": "2026-05-10T09:30:00",
        "descricao": "almoço",
        "valor": 1250.5,
        "categoria": "alimentacao",
        "forma_pagamento": "debito",
    }
    expense.update(overrides)
    return expense


class TestExpenseMessages:
    """Test suite for add/delete confirmations."""

    def test_add_expense_message(self):
        message = formatter.add_expense_message(_expense())
        assert "📝 ID: 3" in message
        assert "R$ 1.250,50" in message
        assert "Alimentação" in message
        assert "Cartão de Débito" in message
        assert "10/05/2026" in message

    def test_delete_expense_message(self):
        assert "🗑️ Gasto excluído" in formatter.delete_expense_message(_expense())


class TestAlerts:
    """Test suite for limit alert text."""

    def test_empty(self):
        assert formatter.limit_alerts_message([]) == ""

    def test_warning_and_exceeded(self):
        alerts = [
            LimitAlert(tipo="geral", percentual=85.0, valor_gasto=850, valor_limite=1000,
                       atingiu_80=True, atingiu_100=False),
            LimitAlert(tipo="categoria", categoria="lazer", percentual=120.0, valor_gasto=120,
                       valor_limite=100, atingiu_80=False, atingiu_100=True),
        ]
        message = formatter.limit_alerts_message(alerts)
        assert message.startswith("\n\n")
        assert "85.0% do seu limite mensal geral" in message
        assert 'excedeu o limite da categoria "Lazer"' in message
        assert "Gasto: R$ 120,00 / Limite: R$ 100,00" in message


class TestReports:
    """Test suite for report messages."""

    def test_monthly_report_sections(self):
        report = {
            "gastos": [_expense(id=1, valor=60, data="2026-05-01T10:00:00"),
                       _expense(id=2, valor=40, categoria="lazer", forma_pagamento="pix",
                                data="2026-05-02T10:00:00")],
            "total_mes": 100,
            "por_categoria": {"lazer": 40, "alimentacao": 60},
            "por_forma_pagamento": {"debito": 60, "pix": 40},
            "limite_geral": 80,
            "limites_categoria": [{"id": 1, "usuario_id": 1, "categoria": "lazer", "valor_limite_mensal": 50}],
        }
        message = formatter.monthly_report_message(report)
        assert "⚠️ LIMITE EXCEDIDO em R$ 20,00!" in message
        assert message.index("Alimentação: R$ 60,00 (60.0%)") < message.index("Lazer: R$ 40,00 (40.0%)")
        assert message.index("[2]") < message.index("[1]")
        assert "Lazer: R$ 40,00 / R$ 50,00 (80.0%)" in message

    def test_empty_monthly_report(self):
        report = {
            "gastos": [], "total_mes": 0, "por_categoria": {}, "por_forma_pagamento": {},
            "limite_geral": 0, "limites_categoria": [],
        }
        message = formatter.monthly_report_message(report)
        assert message.count("Nenhum gasto registrado ainda.") == 2
        assert "Limite mensal" not in message

    def test_category_query_near_limit(self):
        message = formatter.category_query_message(
            {"categoria": "saude", "total": 90, "limite": 100, "percentual": 90.0}
        )
        assert "Gastos em Saúde" in message
        assert "⚠️ Atenção: próximo do limite!" in message

    def test_category_query_without_limit(self):
        message = formatter.category_query_message(
            {"categoria": "saude", "total": 0, "limite": None, "percentual": None}
        )
        assert "Nenhum limite definido" in message


class TestDailySummary:
    """Test suite for the daily financial-education summary."""

    def test_without_limit(self):
        status = MonthStatus(total_gasto=0, limite_geral=0, percentual_usado=0, saldo_restante=0)
        message = formatter.daily_summary_message(status, "dica")
        assert "ainda não definiu um limite" in message
        assert message.endswith("dica")

    def test_podium_and_motivation(self):
        status = MonthStatus(
            total_gasto=500, limite_geral=1000, percentual_usado=50, saldo_restante=500,
            principais_categorias=[
                CategoryShare(categoria="moradia", valor=300, percentual=60),
                CategoryShare(categoria="lazer", valor=200, percentual=40),
            ],
        )
        message = formatter.daily_summary_message(status, "dica")
        assert "🥇 Moradia: R$ 300,00 (60.0%)" in message
        assert "🥈 Lazer" in message
        assert "Parabéns!" in message
