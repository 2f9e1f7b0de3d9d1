"""
Mensagens enviadas ao usuário (WhatsApp)
"""
from typing import List, Optional

from finapp.core.utils import current_month_key, format_currency_br, format_date_br, percent
from finapp.models.finance import LimitAlert, MonthStatus

CATEGORY_LABELS = {
    "alimentacao": "Alimentação",
    "transporte": "Transporte",
    "saude": "Saúde",
    "educacao": "Educação",
    "lazer": "Lazer",
    "moradia": "Moradia",
    "vestuario": "Vestuário",
    "outros": "Outros",
}

PAYMENT_LABELS = {
    "credito": "Cartão de Crédito",
    "debito": "Cartão de Débito",
    "pix": "PIX",
    "dinheiro": "Dinheiro",
    "cartao": "Cartão",
}

PODIUM = ["🥇", "🥈", "🥉"]


def translate_category(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def translate_payment_method(method: str) -> str:
    return PAYMENT_LABELS.get(method, method)


def add_expense_message(expense: dict) -> str:
    return (
        "✅ Gasto registrado com sucesso!\n\n"
        f"📝 ID: {expense['id']}\n"
        f"💰 Valor: {format_currency_br(expense['valor'])}\n"
        f"🏷️ Categoria: {translate_category(expense['categoria'])}\n"
        f"💳 Pagamento: {translate_payment_method(expense['forma_pagamento'])}\n"
        f"📅 Data: {format_date_br(expense['data'])}"
    )


def delete_expense_message(expense: dict) -> str:
    return (
        "🗑️ Gasto excluído com sucesso!\n\n"
        f"📝 ID: {expense['id']}\n"
        f"💰 Valor: {format_currency_br(expense['valor'])}\n"
        f"🏷️ Categoria: {translate_category(expense['categoria'])}"
    )


def limit_alerts_message(alerts: List[LimitAlert]) -> str:
    """Bloco de alertas anexado à confirmação de um gasto"""
    if not alerts:
        return ""

    lines = []
    for alert in alerts:
        if alert.tipo == "geral":
            alvo = "seu limite mensal geral"
            alvo_pct = "do seu limite mensal geral"
        else:
            label = translate_category(alert.categoria)
            alvo = f'o limite da categoria "{label}"'
            alvo_pct = f'do limite da categoria "{label}"'

        if alert.atingiu_100:
            lines.append(f"🚨 ATENÇÃO: Você excedeu {alvo}!")
        else:
            lines.append(f"⚠️ ALERTA: Você já utilizou {alert.percentual:.1f}% {alvo_pct}!")
        lines.append(
            f"   Gasto: {format_currency_br(alert.valor_gasto)} / Limite: {format_currency_br(alert.valor_limite)}"
        )

    return "\n\n" + "\n".join(lines)


def monthly_report_message(report: dict) -> str:
    """Relatório mensal: total, limite, categorias, pagamentos e últimos gastos"""
    total = report["total_mes"]
    limite = report["limite_geral"]
    lines = ["📊 RELATÓRIO MENSAL DE GASTOS", "", f"💰 Total gasto: {format_currency_br(total)}"]

    if limite > 0:
        remaining = limite - total
        lines.append(f"🎯 Limite mensal: {format_currency_br(limite)}")
        lines.append(f"📈 Utilizado: {percent(total, limite):.1f}%")
        if remaining > 0:
            lines.append(f"✅ Disponível: {format_currency_br(remaining)}")
        else:
            lines.append(f"⚠️ LIMITE EXCEDIDO em {format_currency_br(abs(remaining))}!")

    lines += ["", "📂 POR CATEGORIA:"]
    by_category = sorted(report["por_categoria"].items(), key=lambda item: item[1], reverse=True)
    if not by_category:
        lines.append("Nenhum gasto registrado ainda.")
    for category, amount in by_category:
        lines.append(
            f"• {translate_category(category)}: {format_currency_br(amount)} ({percent(amount, total):.1f}%)"
        )

    lines += ["", "💳 POR FORMA DE PAGAMENTO:"]
    by_payment = sorted(report["por_forma_pagamento"].items(), key=lambda item: item[1], reverse=True)
    for method, amount in by_payment:
        lines.append(
            f"• {translate_payment_method(method)}: {format_currency_br(amount)} ({percent(amount, total):.1f}%)"
        )

    lines += ["", "📋 ÚLTIMOS GASTOS:"]
    recent = sorted(report["gastos"], key=lambda g: g["data"], reverse=True)[:5]
    if not recent:
        lines.append("Nenhum gasto registrado ainda.")
    for expense in recent:
        lines.append(
            f"• [{expense['id']}] {format_currency_br(expense['valor'])} - "
            f"{translate_category(expense['categoria'])} ({format_date_br(expense['data'])})"
        )

    if report["limites_categoria"]:
        lines += ["", "📋 LIMITES POR CATEGORIA:"]
        for limit in report["limites_categoria"]:
            spent = report["por_categoria"].get(limit["categoria"], 0.0)
            valor_limite = limit["valor_limite_mensal"]
            lines.append(
                f"• {translate_category(limit['categoria'])}: {format_currency_br(spent)} / "
                f"{format_currency_br(valor_limite)} ({percent(spent, valor_limite):.1f}%)"
            )

    return "\n".join(lines)


def category_query_message(result: dict) -> str:
    lines = [
        f"📊 Gastos em {translate_category(result['categoria'])}",
        "",
        f"💰 Total gasto: {format_currency_br(result['total'])}",
    ]
    if result["limite"]:
        pct = result["percentual"]
        lines.append(f"🎯 Limite definido: {format_currency_br(result['limite'])}")
        lines.append(f"📈 Utilizado: {pct:.1f}%")
        if pct >= 100:
            lines += ["", "🚨 Limite excedido!"]
        elif pct >= 80:
            lines += ["", "⚠️ Atenção: próximo do limite!"]
    else:
        lines += ["", "ℹ️ Nenhum limite definido para esta categoria."]
    return "\n".join(lines)


def general_limit_message(valor: float, month: Optional[str] = None) -> str:
    return (
        "🎯 Limite mensal definido com sucesso!\n\n"
        f"💰 Valor: {format_currency_br(valor)}\n"
        f"📅 Mês: {month or current_month_key()}\n\n"
        "Você receberá alertas quando se aproximar do limite."
    )


def category_limit_message(limit: dict) -> str:
    return (
        "✅ Limite definido com sucesso!\n\n"
        f"📁 Categoria: {translate_category(limit['categoria'])}\n"
        f"💰 Limite mensal: {format_currency_br(limit['valor_limite_mensal'])}"
    )


def error_message(error: str) -> str:
    return (
        f"❌ Erro: {error}\n\n"
        "💡 Exemplos de comandos:\n"
        '• "Adicionar gasto de R$ 50 em alimentação no cartão"\n'
        '• "Excluir gasto 123"\n'
        '• "Mostrar relatório de gastos do mês"\n'
        '• "Quanto gastei em transporte?"\n'
        '• "Definir limite mensal de R$ 2000"\n'
        '• "Definir limite de R$ 500 para lazer"'
    )


def daily_summary_message(status: MonthStatus, tip: str) -> str:
    """Resumo diário com educação financeira"""
    lines = ["📊 RESUMO FINANCEIRO DO MÊS", "", f"💰 Total gasto: {format_currency_br(status.total_gasto)}"]

    if status.limite_geral > 0:
        lines.append(f"🎯 Limite mensal: {format_currency_br(status.limite_geral)}")
        lines.append(f"📈 Utilizado: {status.percentual_usado:.1f}%")
        if status.saldo_restante > 0:
            lines.append(f"✅ Saldo disponível: {format_currency_br(status.saldo_restante)}")
        else:
            lines.append(f"🚨 Limite excedido em: {format_currency_br(abs(status.saldo_restante))}")
    else:
        lines.append("⚠️ Você ainda não definiu um limite mensal.")

    if status.principais_categorias:
        lines += ["", "📂 PRINCIPAIS GASTOS:"]
        for medal, share in zip(PODIUM, status.principais_categorias):
            lines.append(
                f"{medal} {translate_category(share.categoria)}: "
                f"{format_currency_br(share.valor)} ({share.percentual:.1f}%)"
            )

    if status.alertas:
        lines += ["", "⚠️ ALERTAS:"]
        lines += status.alertas

    lines += ["", "💡 DICA DE ECONOMIA:", tip]

    if status.limite_geral > 0:
        if status.percentual_usado >= 100:
            lines += ["", "🚨 Cuidado! Você excedeu seu limite. Hora de ajustar seus gastos! 💪"]
        elif status.percentual_usado >= 80:
            lines += ["", "⚠️ Atenção! Você está próximo do seu limite. Revise seus gastos! 🎯"]
        else:
            lines += ["", "✨ Parabéns! Você está no controle das suas finanças! Continue assim! 💪"]

    return "\n".join(lines)
