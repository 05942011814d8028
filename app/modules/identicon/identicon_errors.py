class IdenticonError(Exception):
    """Базовое исключение генерации identicon."""


class InvalidInputError(IdenticonError, ValueError):
    """Входные данные не могут быть преобразованы в identicon (не строка, неполная строка сетки)."""


class ConfigurationError(IdenticonError, ValueError):
    """Недопустимые параметры рендеринга (размер клетки, размер холста, формат)."""
