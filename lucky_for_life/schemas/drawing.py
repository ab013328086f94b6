"""Pydantic schema for a single Lucky for Life drawing."""

from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator

MAIN_MAX = 48
SPECIAL_MAX = 18
PICK_COUNT = 5


class Drawing(BaseModel):
    model_config = ConfigDict(frozen=True)

    draw_date: date
    numbers: tuple[int, ...]
    special_number: int
    sequence_index: int = 0

    @field_validator("numbers")
    @classmethod
    def validate_numbers(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if len(v) != PICK_COUNT:
            raise ValueError(f"Numbers must contain exactly {PICK_COUNT} items")
        if not all(1 <= n <= MAIN_MAX for n in v):
            raise ValueError(f"All numbers must be between 1 and {MAIN_MAX}")
        if len(set(v)) != PICK_COUNT:
            raise ValueError("Numbers must be unique")
        return v

    @field_validator("special_number")
    @classmethod
    def validate_special(cls, v: int) -> int:
        if not 1 <= v <= SPECIAL_MAX:
            raise ValueError(f"Lucky ball must be between 1 and {SPECIAL_MAX}")
        return v

    @property
    def sorted_numbers(self) -> list[int]:
        return sorted(self.numbers)
