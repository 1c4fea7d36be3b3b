from models.maps import PriceLevel

_PRICE_LEVELS = {level.value: level for level in PriceLevel}


def parse_price_level(price_level: int) -> PriceLevel:
    """Map a price tier from the app to a Google price level, unknown tiers are free"""
    return _PRICE_LEVELS.get(price_level, PriceLevel.FREE)


def parse_price_levels(min_price: int | None, max_price: int | None) -> tuple[PriceLevel | None, PriceLevel | None]:
    """Price bounds to send with a nearby search, None when the bound is not set"""
    min_level = parse_price_level(min_price) if min_price is not None and min_price > 0 else None
    max_level = parse_price_level(max_price) if max_price is not None and max_price < 5 else None
    return min_level, max_level
