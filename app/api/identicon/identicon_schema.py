from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from config.constants import IDENTICON_FORMATS, IDENTICON_MAX_SIZE


class IdenticonParams(BaseModel):
    """
    Схема для валидации параметров запроса identicon.
    Поддерживает короткие и полные имена параметров через псевдонимы.
    """
    size: Optional[int] = Field(
        default=None,
        ge=1,
        le=IDENTICON_MAX_SIZE,
        validation_alias=AliasChoices("s", "size"),
    )
    format: Optional[str] = Field(
        default=None,
        pattern=f"^({'|'.join(IDENTICON_FORMATS)})$",
        validation_alias=AliasChoices("f", "format"),
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """
        Приводит формат к нижнему регистру и принимает 'jpg' как 'jpeg'.

        :param v: Входящее значение параметра.
        :return: Нормализованное значение.
        """
        if isinstance(v, str):
            v = v.lower()
            if v == "jpg":
                return "jpeg"
        return v


class IdenticonInfo(BaseModel):
    """Промежуточные данные генерации identicon."""

    hex: List[int]
    colour: List[int]
    grid: List[List[int]]
    pixel_map: List[List[List[int]]]


class IdenticonQuery(IdenticonParams):
    """
    Параметры запроса identicon, где строка передается в query (?v=...).
    Так можно запросить пустую строку и строки со слешем.
    """
    value: str = Field(validation_alias=AliasChoices("v", "value"))
