def truncate_middle(text: str, limit: int, head_len: int = None) -> str:
    """
    Сокращает длинную строку до limit символов, оставляя начало и конец,
    разделённые маркером "......". Короткие строки возвращаются как есть.

    :param text: Исходный текст
    :param limit: Общее количество символов, которое требуется вывести
    :param head_len: Количество символов в начале (по умолчанию половина limit)
    :return: Обрезанная строка с маркером усечения или исходный текст
    """
    if len(text) <= limit:
        return text
    if head_len is None:
        head_len = limit // 2
    tail_len = limit - head_len
    return f"{text[:head_len]}......{text[-tail_len:]}" if tail_len else f"{text[:head_len]}......"


def safe_filename(value: str, replacement: str = "_") -> str:
    """
    Делает строку пригодной для имени файла: заменяет разделители путей
    и управляющие символы. Пустая строка превращается в replacement.

    :param value: Исходная строка
    :param replacement: Символ замены
    :return: Имя файла без расширения
    """
    cleaned = "".join(
        replacement if c in '/\\:*?"<>|' or ord(c) < 32 else c for c in value
    )
    if cleaned in ("", ".", ".."):
        return replacement
    return cleaned
