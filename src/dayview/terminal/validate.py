# SPDX-License-Identifier: MIT

from typing import Optional

import typer

GRANULARITIES = (5, 10, 15, 20, 30, 60)


def validate_granularity(granularity: int) -> int:
    if granularity not in GRANULARITIES:
        raise typer.BadParameter(
            f"Granularity must be one of {', '.join(map(str, GRANULARITIES))}"
        )
    return granularity


def validate_non_negative(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 0:
        raise typer.BadParameter("Value cannot be negative")
    return value


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value <= 0:
        raise typer.BadParameter("Value must be positive")
    return value
