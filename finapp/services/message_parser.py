"""
Message Parser - Interpreta comandos em português natural
"""
import logging
import re
from typing import Optional

from finapp.core.utils import NUMBER_PATTERN, strip_accents, to_float
from finapp.models.finance import CATEGORIES, CommandType, ParsedCommand

logger = logging.getLogger(__name__)

# A ordem importa: "excluir gasto 3" e "relatório de gastos" contêm "gasto"
COMMAND_KEYWORDS = [
    ("excluir", ["excluir", "deletar", "remover", "apagar"]),
    ("relatorio", ["relatório", "relatorio", "mostrar", "listar", "resumo", "quanto gastei"]),
    ("limite", ["limite", "orçamento", "orcamento"]),
    ("adicionar", ["adicionar", "registrar", "gastar", "gasto", "gastei", "paguei", "comprei"]),
]

AMOUNT_PATTERNS = [
    re.compile(rf"r\$\s*({NUMBER_PATTERN})"),
    re.compile(rf"({NUMBER_PATTERN})\s*reais"),
    re.compile(rf"({NUMBER_PATTERN})"),
]

CATEGORY_KEYWORDS = {
    "alimentação": "alimentacao",
    "alimentacao": "alimentacao",
    "comida": "alimentacao",
    "restaurante": "alimentacao",
    "mercado": "alimentacao",
    "supermercado": "alimentacao",

    "transporte": "transporte",
    "uber": "transporte",
    "taxi": "transporte",
    "ônibus": "transporte",
    "onibus": "transporte",
    "gasolina": "transporte",
    "combustível": "transporte",
    "combustivel": "transporte",

    "saúde": "saude",
    "saude": "saude",
    "médico": "saude",
    "medico": "saude",
    "farmácia": "saude",
    "farmacia": "saude",
    "remédio": "saude",
    "remedio": "saude",

    "educação": "educacao",
    "educacao": "educacao",
    "curso": "educacao",
    "livro": "educacao",
    "escola": "educacao",

    "lazer": "lazer",
    "cinema": "lazer",
    "diversão": "lazer",
    "diversao": "lazer",
    "entretenimento": "lazer",

    "moradia": "moradia",
    "aluguel": "moradia",
    "condomínio": "moradia",
    "condominio": "moradia",
    "luz": "moradia",
    "água": "moradia",
    "agua": "moradia",

    "vestuário": "vestuario",
    "vestuario": "vestuario",
    "roupa": "vestuario",
    "calçado": "vestuario",
    "calcado": "vestuario",
}

# Débito vem antes de cartão: "cartão de débito" é débito
PAYMENT_KEYWORDS = [
    ("debito", ["débito", "debito"]),
    ("credito", ["cartão", "cartao", "crédito", "credito"]),
    ("pix", ["pix"]),
    ("dinheiro", ["dinheiro", "espécie", "especie"]),
]
DEFAULT_PAYMENT = "credito"


class MessageParser:
    """Parser de comandos baseado em palavras-chave e regex"""

    @classmethod
    def parse(cls, message: str) -> ParsedCommand:
        """Analisa a mensagem e retorna o comando estruturado"""
        normalized = (message or "").lower().strip()
        command_type = cls.detect_command_type(normalized)
        logger.debug(f"Comando detectado: {command_type} <- '{normalized}'")

        if command_type == "adicionar":
            return cls._parse_add_expense(normalized)
        if command_type == "excluir":
            return cls._parse_delete_expense(normalized)
        if command_type == "relatorio":
            return ParsedCommand(type="relatorio", category=cls.extract_report_category(normalized))
        if command_type == "limite":
            return cls._parse_set_limit(normalized)
        return ParsedCommand(type="desconhecido")

    @staticmethod
    def detect_command_type(message: str) -> CommandType:
        for command_type, keywords in COMMAND_KEYWORDS:
            if any(keyword in message for keyword in keywords):
                return command_type
        return "desconhecido"

    @staticmethod
    def extract_amount(message: str) -> Optional[float]:
        """Extrai valor monetário: R$ 50, R$50, 50 reais, 50,00, 1.500,00"""
        for pattern in AMOUNT_PATTERNS:
            match = pattern.search(message)
            if match:
                return to_float(match.group(1))
        return None

    @staticmethod
    def extract_category(message: str) -> str:
        for keyword, category in CATEGORY_KEYWORDS.items():
            if keyword in message:
                return category
        return "outros"

    @staticmethod
    def extract_payment_method(message: str) -> str:
        for method, keywords in PAYMENT_KEYWORDS:
            if any(keyword in message for keyword in keywords):
                return method
        return DEFAULT_PAYMENT

    @staticmethod
    def extract_report_category(message: str) -> Optional[str]:
        """Categoria consultada em 'quanto gastei em alimentação?'"""
        plain = strip_accents(message)
        for category in CATEGORIES:
            if category != "outros" and category in plain:
                return category
        return None

    @classmethod
    def _parse_add_expense(cls, message: str) -> ParsedCommand:
        return ParsedCommand(
            type="adicionar",
            amount=cls.extract_amount(message),
            category=cls.extract_category(message),
            payment_method=cls.extract_payment_method(message),
            description=message,
        )

    @staticmethod
    def _parse_delete_expense(message: str) -> ParsedCommand:
        # "excluir gasto 123" ou "deletar 123"
        match = re.search(r"(?:gasto\s+)?(\d+)", message)
        expense_id = int(match.group(1)) if match else None
        return ParsedCommand(type="excluir", expense_id=expense_id)

    @classmethod
    def _parse_set_limit(cls, message: str) -> ParsedCommand:
        return ParsedCommand(
            type="limite",
            amount=cls.extract_amount(message),
            category=cls.extract_category(message),
        )
