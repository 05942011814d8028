from copy import deepcopy
from typing import Any, Dict


def merge_with_overrides(
    defaults: Dict[str, Any], overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Возвращает новый словарь: значения по умолчанию, поверх которых рекурсивно
    наложены значения из overrides. Исходные словари не изменяются.

    :param defaults: Значения по умолчанию
    :param overrides: Значения из settings.yml
    :return: Новый слитый словарь
    """
    merged = deepcopy(defaults)
    for key, value in overrides.items():
        base = merged.get(key)
        if isinstance(value, dict) and isinstance(base, dict):
            merged[key] = merge_with_overrides(base, value)
        else:
            merged[key] = deepcopy(value)
    return merged
