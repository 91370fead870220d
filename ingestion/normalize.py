from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from loguru import logger

from app.domain import Amount, DrawResult, PrizeTier
from app.services.tiers import JACKPOT_HIT_COUNT, resolve_tier


# Canonical field -> candidate payload keys, highest priority first. Later keys
# are only consulted when every earlier key is missing or null.
DRAW_FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    "contest_number": ("numero", "concurso"),
    "draw_date": ("dataApuracao", "data"),
    "winning_numbers": ("listaDezenas", "dezenas"),
    "is_rolled_over": ("acumulado", "acumulou"),
    "draw_location_name": ("localSorteio", "local"),
    "draw_location_region": ("nomeMunicipioUFSorteio", "municipioUFSorteio"),
    "next_contest_estimated_prize": ("valorEstimadoProximoConcurso",),
    "next_contest_accumulated_prize": ("valorAcumuladoProximoConcurso",),
    "special_accumulated_prize": ("valorAcumuladoConcursoEspecial",),
    "zero_five_accumulated_prize": ("valorAcumuladoConcurso_0_5",),
    "zero_five_contest_number": ("numeroConcursoFinal_0_5",),
    "next_contest_number": ("numeroConcursoProximo", "proximoConcurso"),
    "next_contest_date": ("dataProximoConcurso",),
    "total_collected": ("valorArrecadado",),
    "prize_tiers": ("listaRateioPremio", "premiacao"),
}

TIER_FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    "description": ("descricaoFaixa", "descricao"),
    "range_code": ("faixa",),
    "winner_count": ("numeroDeGanhadores", "ganhadores"),
    "prize_amount": ("valorPremio",),
}


def _first_present(source: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the value of the first key that is present and not null."""
    for index, key in enumerate(keys):
        value = source.get(key)
        if value is None:
            continue
        if index:
            logger.debug("Field resolved from fallback key '{}' (preferred: '{}')", key, keys[0])
        return value
    return None


def _extract(source: Mapping[str, Any], table: Mapping[str, Sequence[str]]) -> dict[str, Any]:
    return {field: _first_present(source, keys) for field, keys in table.items()}


def _parse_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    # Identifiers with a fractional part are not guessed at.
    if not number.is_finite() or number != number.to_integral_value():
        return None
    return int(number)


def _parse_amount(value: Any) -> Amount | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        logger.debug("Ignoring non-numeric amount: {!r}", value)
        return None


def _parse_flag(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
    return None


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _parse_numbers(value: Any) -> tuple[int, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        return ()
    numbers: list[int] = []
    for item in value:
        if isinstance(item, bool):
            continue
        if isinstance(item, int):
            numbers.append(item)
        elif isinstance(item, str) and item.strip().isdecimal():
            numbers.append(int(item.strip()))
    return tuple(numbers)


def normalize_prize_tier(raw_tier: Mapping[str, Any]) -> PrizeTier:
    values = _extract(raw_tier, TIER_FIELD_SYNONYMS)
    return PrizeTier(
        description=_parse_text(values["description"]),
        range_code=_parse_int(values["range_code"]),
        winner_count=_parse_int(values["winner_count"]),
        prize_amount=_parse_amount(values["prize_amount"]),
    )


def _build_prize_tiers(value: Any) -> tuple[PrizeTier, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        return ()
    return tuple(normalize_prize_tier(item) for item in value if isinstance(item, Mapping))


def _derive_rolled_over(prize_tiers: Sequence[PrizeTier]) -> bool:
    jackpot = resolve_tier(prize_tiers, JACKPOT_HIT_COUNT)
    if jackpot is None:
        return False
    return not jackpot.winner_count


def _select_source(raw: Any) -> Mapping[str, Any] | None:
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        return raw
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if not raw:
            return None
        primary = raw[0]
        return primary if isinstance(primary, Mapping) else None
    return None


def adapt_payload(raw: Any) -> DrawResult | None:
    """Reconcile a raw results payload into a single ``DrawResult``.

    ``raw`` may be one result object or a list whose first element is the
    result. Returns ``None`` when there is nothing usable to adapt.
    """
    source = _select_source(raw)
    if source is None:
        logger.warning("Results payload has no usable draw object ({})", type(raw).__name__)
        return None

    values = _extract(source, DRAW_FIELD_SYNONYMS)
    prize_tiers = _build_prize_tiers(values["prize_tiers"])

    rolled_over = _parse_flag(values["is_rolled_over"])
    is_rolled_over = rolled_over if rolled_over is not None else _derive_rolled_over(prize_tiers)

    return DrawResult(
        contest_number=_parse_int(values["contest_number"]),
        draw_date=values["draw_date"],
        winning_numbers=_parse_numbers(values["winning_numbers"]),
        is_rolled_over=is_rolled_over,
        draw_location_name=_parse_text(values["draw_location_name"]),
        draw_location_region=_parse_text(values["draw_location_region"]),
        next_contest_estimated_prize=_parse_amount(values["next_contest_estimated_prize"]),
        next_contest_accumulated_prize=_parse_amount(values["next_contest_accumulated_prize"]),
        special_accumulated_prize=_parse_amount(values["special_accumulated_prize"]),
        zero_five_accumulated_prize=_parse_amount(values["zero_five_accumulated_prize"]),
        zero_five_contest_number=_parse_int(values["zero_five_contest_number"]),
        next_contest_number=_parse_int(values["next_contest_number"]),
        next_contest_date=values["next_contest_date"],
        total_collected=_parse_amount(values["total_collected"]),
        prize_tiers=prize_tiers,
    )
