"""Unit tests for FinanceService: limits, alerts, reports and tips."""
import pytest

from finapp.core.exceptions import InvalidLimitError
from finapp.models.finance import CategoryShare
from finapp.services.finance_service import FIRST_STEPS_TIP, SAVING_TIPS, FinanceService, build_alert

PHONE = "5511988887777"


class TestBuildAlert:
    """Test suite for the 80%/100% threshold rule."""

    def test_below_threshold_has_no_alert(self):
        assert build_alert("geral", 79.99, 100) is None

    def test_exactly_80_percent(self):
        alert = build_alert("geral", 80, 100)
        assert alert.atingiu_80 is True
        assert alert.atingiu_100 is False
        assert alert.percentual == 80

    def test_exactly_100_percent(self):
        alert = build_alert("categoria", 100, 100, categoria="lazer")
        assert alert.atingiu_80 is False
        assert alert.atingiu_100 is True
        assert alert.categoria == "lazer"

    def test_zero_limit_never_alerts(self):
        assert build_alert("categoria", 500, 0) is None


class TestAddExpenseAlerts:
    """Test suite for alerts returned when adding expenses."""

    def test_no_limits_no_alerts(self, finance):
        expense, alerts = finance.add_expense(PHONE, 500, "lazer", "pix", "cinema")
        assert expense["valor"] == 500
        assert alerts == []

    def test_general_limit_warning_then_exceeded(self, finance):
        finance.set_general_limit(PHONE, 1000)

        _, alerts = finance.add_expense(PHONE, 700, "lazer", "pix")
        assert alerts == []

        _, alerts = finance.add_expense(PHONE, 150, "transporte", "pix")
        assert [(a.tipo, a.atingiu_80, a.atingiu_100) for a in alerts] == [("geral", True, False)]

        _, alerts = finance.add_expense(PHONE, 200, "transporte", "pix")
        assert [(a.tipo, a.atingiu_80, a.atingiu_100) for a in alerts] == [("geral", False, True)]
        assert alerts[0].valor_gasto == 1050

    def test_category_limit_only_checks_expense_category(self, finance):
        finance.set_category_limit(PHONE, "lazer", 100)
        finance.add_expense(PHONE, 90, "lazer", "pix")

        _, alerts = finance.add_expense(PHONE, 10, "transporte", "pix")
        assert alerts == []

        _, alerts = finance.add_expense(PHONE, 15, "lazer", "pix")
        assert len(alerts) == 1
        assert alerts[0].tipo == "categoria"
        assert alerts[0].categoria == "lazer"
        assert alerts[0].atingiu_100 is True

    def test_general_and_category_alerts_together(self, finance):
        finance.set_general_limit(PHONE, 100)
        finance.set_category_limit(PHONE, "alimentacao", 50)
        _, alerts = finance.add_expense(PHONE, 90, "alimentacao", "credito")
        assert [a.tipo for a in alerts] == ["geral", "categoria"]

    def test_check_limits_unknown_user(self, finance):
        assert finance.check_limits(404, "lazer") == []


class TestLimits:
    """Test suite for limit definition."""

    def test_negative_limits_rejected(self, finance):
        with pytest.raises(InvalidLimitError):
            finance.set_general_limit(PHONE, -1)
        with pytest.raises(InvalidLimitError):
            finance.set_category_limit(PHONE, "lazer", -5)

    def test_general_limit_returns_user(self, finance):
        user = finance.set_general_limit(PHONE, 2000)
        assert user["limite_mensal_geral"] == 2000
        assert user["telefone"] == PHONE


class TestReports:
    """Test suite for reports and queries."""

    def test_monthly_report(self, finance):
        finance.add_expense(PHONE, 50, "alimentacao", "credito")
        finance.add_expense(PHONE, 25, "transporte", "pix")
        finance.set_category_limit(PHONE, "transporte", 100)

        report = finance.monthly_report(PHONE)
        assert report["total_mes"] == 75
        assert report["por_categoria"] == {"alimentacao": 50, "transporte": 25}
        assert report["por_forma_pagamento"] == {"credito": 50, "pix": 25}
        assert report["limite_geral"] == 0
        assert len(report["gastos"]) == 2
        assert report["limites_categoria"][0]["categoria"] == "transporte"

    def test_category_query_with_limit(self, finance):
        finance.set_category_limit(PHONE, "lazer", 200)
        finance.add_expense(PHONE, 50, "lazer", "pix")
        result = finance.category_query(PHONE, "lazer")
        assert result == {"categoria": "lazer", "total": 50, "limite": 200, "percentual": 25.0}

    def test_category_query_without_limit(self, finance):
        result = finance.category_query(PHONE, "saude")
        assert result["limite"] is None
        assert result["percentual"] is None

    def test_delete_expense(self, finance):
        expense, _ = finance.add_expense(PHONE, 10, "lazer", "pix")
        assert finance.delete_expense(PHONE, expense["id"]) == (True, expense)
        assert finance.delete_expense(PHONE, expense["id"]) == (False, None)

    def test_delete_other_users_expense(self, finance):
        expense, _ = finance.add_expense("111", 10, "lazer", "pix")
        ok, found = finance.delete_expense("222", expense["id"])
        assert ok is False
        assert found is None


class TestMonthStatus:
    """Test suite for month_status and saving tips."""

    def test_status_without_limit(self, finance):
        finance.add_expense(PHONE, 30, "lazer", "pix")
        status = finance.month_status(PHONE)
        assert status.total_gasto == 30
        assert status.percentual_usado == 0
        assert status.alertas == []

    def test_top_three_categories_sorted(self, finance):
        for categoria, valor in [("lazer", 10), ("moradia", 40), ("saude", 20), ("transporte", 30)]:
            finance.add_expense(PHONE, valor, categoria, "pix")
        status = finance.month_status(PHONE)
        assert [c.categoria for c in status.principais_categorias] == ["moradia", "transporte", "saude"]
        assert status.principais_categorias[0].percentual == 40.0

    def test_status_alerts(self, finance):
        finance.set_general_limit(PHONE, 100)
        finance.set_category_limit(PHONE, "lazer", 50)
        finance.set_category_limit(PHONE, "saude", 100)
        finance.add_expense(PHONE, 85, "saude", "pix")
        finance.add_expense(PHONE, 20, "lazer", "pix")

        status = finance.month_status(PHONE)
        assert status.saldo_restante == -5
        assert status.alertas[0] == "🚨 Você excedeu seu limite mensal!"
        assert any("saude" in alerta and "85%" in alerta for alerta in status.alertas)
        assert not any("lazer" in alerta for alerta in status.alertas)

    def test_tip_for_top_category(self):
        tip = FinanceService.saving_tip([CategoryShare(categoria="transporte", valor=10, percentual=100)])
        assert tip in SAVING_TIPS["transporte"]

    def test_tip_without_spending(self):
        assert FinanceService.saving_tip([]) == FIRST_STEPS_TIP
