"""
Fixed pt-BR labels shown by the interface.

The keys match the enum values in chacara.schemas.task.
"""

CATEGORY_LABELS: dict[str, str] = {
    "planting": "Plantio & Colheita",
    "maintenance": "Manutenção",
    "animals": "Animais",
    "general": "Geral",
}

RECURRENCE_LABELS: dict[str, str] = {
    "none": "Não repetir",
    "daily": "Diário",
    "weekly": "Semanal",
    "monthly": "Mensal",
    "quarterly": "Trimestral (3 em 3 meses)",
    "semiannual": "Semestral (6 em 6 meses)",
    "yearly": "Anual",
}

URGENCY_LABELS: dict[str, str] = {
    "low": "Baixa",
    "medium": "Média",
    "high": "Alta",
}

# Index 0 is January, matching Task.month_reference
MONTH_NAMES: list[str] = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]
