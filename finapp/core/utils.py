"""
Core utilities: currency parsing/formatting, dates, text normalization.
"""
import re
import unicodedata
from datetime import datetime, timedelta
from typing import Any, Optional, Tuple, Union


# Aceita "1.500", "1.500,50", "50,00", "50.5" e "50"
NUMBER_PATTERN = r"\d{1,3}(?:\.\d{3})+(?:,\d{1,2})?|\d+(?:[.,]\d{1,2})?"


def to_float(value: Any) -> Optional[float]:
    """
    Converte um número escrito no formato brasileiro ou americano para float.
    Exemplos:
    "50,00" -> 50.0
    "1.500" -> 1500.0
    "1.500,75" -> 1500.75
    "12.5" -> 12.5
    Retorna None se não houver número.
    """
    if value is None:
        return None

    if isinstance(value, (float, int)):
        return float(value)

    text = str(value).strip()
    match = re.search(NUMBER_PATTERN, text)
    if not match:
        return None

    clean_num = match.group(0)

    # Lógica Brasil vs EUA
    if "," in clean_num:
        clean_num = clean_num.replace(".", "")  # Tira milhar (1.000,00 -> 1000,00)
        clean_num = clean_num.replace(",", ".")  # Decimal (1000,00 -> 1000.00)
    elif re.fullmatch(r"\d{1,3}(?:\.\d{3})+", clean_num):
        clean_num = clean_num.replace(".", "")  # Só milhar (1.500 -> 1500)

    try:
        return float(clean_num)
    except ValueError:
        return None


def format_currency_br(value: float) -> str:
    """Formata float como moeda brasileira (R$ 1.234,56)"""
    sign = "-" if value < 0 else ""
    txt = f"{abs(value):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {txt}"


def format_date_br(value: Union[str, datetime]) -> str:
    """Formata data ISO ou datetime como dd/mm/aaaa"""
    if isinstance(value, str):
        value = parse_iso(value)
    return value.strftime("%d/%m/%Y")


def parse_iso(value: str) -> datetime:
    """Lê datas ISO, inclusive as terminadas em 'Z'"""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def strip_accents(text: str) -> str:
    """Remove acentos: 'alimentação' -> 'alimentacao'"""
    return "".join(
        c for c in unicodedata.normalize("NFKD", text or "") if not unicodedata.combining(c)
    )


def month_bounds(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Primeiro instante e último segundo do mês de `now`"""
    now = now or datetime.now()
    start = datetime(now.year, now.month, 1)
    next_month = datetime(now.year + 1, 1, 1) if now.month == 12 else datetime(now.year, now.month + 1, 1)
    end = next_month - timedelta(seconds=1)
    return start, end


def current_month_key(now: Optional[datetime] = None) -> str:
    """Mês no formato AAAA-MM"""
    return (now or datetime.now()).strftime("%Y-%m")


def percent(part: float, whole: float) -> float:
    """Percentual de part sobre whole (0 quando whole é zero)"""
    if whole <= 0:
        return 0.0
    return part / whole * 100
