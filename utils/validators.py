import re
from typing import Any, Dict

# dados bancários e de contribuinte que não podem ir inteiros para o log
SENSITIVE_KEYS = {
    'cnpj', 'cpf', 'agency', 'agency_digit', 'account', 'account_digit',
    'agreement', 'reference_number',
}


def only_digits(value: Any) -> str:
    return re.sub(r'\D', '', str(value or ''))


def mask_value(value: Any) -> str:
    if isinstance(value, str) and len(value.strip()) > 3:
        return value[:3] + "***"
    return "***"


def sanitize_log_data(data: Dict[str, Any]) -> Dict[str, Any]:
    clean = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_KEYS:
            clean[key] = mask_value(value)
        elif isinstance(value, dict):
            clean[key] = sanitize_log_data(value)
        elif isinstance(value, list):
            clean[key] = [sanitize_log_data(item) if isinstance(item, dict) else item for item in value]
        else:
            clean[key] = value
    return clean
