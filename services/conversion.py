"""
Unit Conversion Service

Functions for converting weight and volume quantities to their canonical
base units (grams and milliliters) and back into presentation units.

Volume-to-weight equivalence assumes water density (1 ML ~ 1 G). That is a
rough approximation; ingredient-specific densities are not modelled.
"""

from constants import WEIGHT_TO_G, VOLUME_TO_ML, BASE_UNITS, DISPLAY_UNITS


def _clean_unit(unit):
    """Lowercase and trim a unit string; None becomes ''."""
    if unit is None:
        return ''
    return str(unit).strip().lower()


def is_weight_unit(unit):
    return _clean_unit(unit) in WEIGHT_TO_G


def is_volume_unit(unit):
    return _clean_unit(unit) in VOLUME_TO_ML


def unit_kind(unit):
    """Return 'weight', 'volume', or None when the unit does not convert."""
    if is_weight_unit(unit):
        return 'weight'
    if is_volume_unit(unit):
        return 'volume'
    return None


def to_grams(amount, unit):
    """Convert a weight amount to grams. Returns None for non-weight units."""
    factor = WEIGHT_TO_G.get(_clean_unit(unit))
    if factor is None:
        return None
    return amount * factor


def to_milliliters(amount, unit):
    """Convert a volume amount to milliliters. Returns None for non-volume units."""
    factor = VOLUME_TO_ML.get(_clean_unit(unit))
    if factor is None:
        return None
    return amount * factor


def to_canonical(amount, unit):
    """
    Convert an amount to its canonical base unit.

    Weight is tried first, then volume.

    Returns:
        (value, base_unit) where base_unit is 'g' or 'ml', or None when the
        unit is not a known weight or volume unit.
    """
    grams = to_grams(amount, unit)
    if grams is not None:
        return grams, BASE_UNITS['weight']

    ml = to_milliliters(amount, unit)
    if ml is not None:
        return ml, BASE_UNITS['volume']

    return None


def to_grams_estimate(amount, unit):
    """Weight in grams, falling back to the volume figure at water density."""
    canonical = to_canonical(amount, unit)
    if canonical is None:
        return None
    return canonical[0]


def _factor(unit):
    """Multiplier from unit to its base, or None."""
    unit = _clean_unit(unit)
    if unit in WEIGHT_TO_G:
        return WEIGHT_TO_G[unit]
    return VOLUME_TO_ML.get(unit)


def from_base(value, unit):
    """Express a base-unit value (G or ML) in the given unit."""
    factor = _factor(unit)
    if factor is None:
        return None
    return value / factor


def convert_amount(amount, from_unit, to_unit):
    """
    Convert an amount between two units of the same kind.

    Returns None if either unit is unknown or the kinds differ
    (weight cannot become volume here).
    """
    if _clean_unit(from_unit) == _clean_unit(to_unit):
        return amount

    from_kind = unit_kind(from_unit)
    if from_kind is None or from_kind != unit_kind(to_unit):
        return None

    return amount * _factor(from_unit) / _factor(to_unit)


def units_compatible(unit_a, unit_b):
    """
    Two units are compatible when they share a canonical base, or when
    neither converts and they are textually identical.
    """
    kind_a = unit_kind(unit_a)
    kind_b = unit_kind(unit_b)
    if kind_a is not None or kind_b is not None:
        return kind_a == kind_b
    return _clean_unit(unit_a) == _clean_unit(unit_b)


def display_unit(base_value, kind, unit_system):
    """
    Pick a presentation unit for a base-unit quantity.

    Args:
        base_value: Quantity in grams (weight) or milliliters (volume)
        kind: 'weight' or 'volume'
        unit_system: 'metric' or 'imperial'

    Returns:
        (quantity, unit) in the largest unit whose threshold the value reaches
    """
    for unit, threshold in DISPLAY_UNITS[(kind, unit_system)]:
        if base_value >= threshold:
            return from_base(base_value, unit), unit
    smallest = DISPLAY_UNITS[(kind, unit_system)][-1][0]
    return from_base(base_value, smallest), smallest
