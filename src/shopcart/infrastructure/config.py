"""Settings for one shopping session, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError

ENV_PREFIX = "SHOPCART_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    laptop_stock: int = 10
    headphones_stock: int = 10
    percentage_discount: Decimal = Decimal("5")
    bogo_products: tuple[str, ...] = field(default=("Laptop",))
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            laptop_stock=_int(env, "LAPTOP_STOCK", defaults.laptop_stock),
            headphones_stock=_int(env, "HEADPHONES_STOCK", defaults.headphones_stock),
            percentage_discount=_decimal(
                env, "PERCENTAGE_DISCOUNT", defaults.percentage_discount
            ),
            bogo_products=_names(env, "BOGO_PRODUCTS", defaults.bogo_products),
            log_level=_log_level(env, "LOG_LEVEL", defaults.log_level),
        )


def _int(env, name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _decimal(env, name: str, default: Decimal) -> Decimal:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise ValidationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


def _names(env, name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _log_level(env, name: str, default: str) -> str:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValidationError(
            f"{ENV_PREFIX}{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
        )
    return level
