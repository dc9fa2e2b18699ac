"""
BMI calculation.

BMI = weight_kg / (height_m)^2, with height recorded in centimeters.

This is the only place BMI is computed. Model properties, serializers and
reports all call through here; a BMI value sent by a client is never used.
"""
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

SEVERELY_UNDERWEIGHT = 'Severely Underweight'
UNDERWEIGHT = 'Underweight'
NORMAL = 'Normal'
OVERWEIGHT = 'Overweight'
OBESE_I = 'Obese Class I'
OBESE_II = 'Obese Class II'
OBESE_III = 'Obese Class III'

# (lower bound inclusive, category), highest band first. A boundary value
# belongs to the band it opens.
BMI_BANDS = [
    (Decimal('40'), OBESE_III),
    (Decimal('35'), OBESE_II),
    (Decimal('30'), OBESE_I),
    (Decimal('25'), OVERWEIGHT),
    (Decimal('18.5'), NORMAL),
    (Decimal('16'), UNDERWEIGHT),
]

BMI_CATEGORIES = [
    SEVERELY_UNDERWEIGHT, UNDERWEIGHT, NORMAL, OVERWEIGHT, OBESE_I, OBESE_II, OBESE_III,
]

_ONE_DECIMAL = Decimal('0.1')


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        # str() keeps 70.1 as 70.1 instead of its binary expansion
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not number.is_finite():
        return None
    return number


def compute_bmi(weight_kg, height_cm) -> Optional[float]:
    """
    Calculate BMI from weight (kg) and height (cm).

    Returns the BMI rounded half-up to one decimal place, or None when either
    input is missing, zero, negative or not a number.

        >>> compute_bmi(70, 175)
        22.9
        >>> compute_bmi(70, None) is None
        True
    """
    weight = _to_decimal(weight_kg)
    height = _to_decimal(height_cm)
    if weight is None or height is None or weight <= 0 or height <= 0:
        return None

    height_m = height / Decimal(100)
    bmi = weight / (height_m * height_m)
    return float(bmi.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def classify_bmi(bmi) -> Optional[str]:
    """Map a BMI value to its clinical category; None stays None."""
    value = _to_decimal(bmi)
    if value is None:
        return None
    for lower_bound, category in BMI_BANDS:
        if value >= lower_bound:
            return category
    return SEVERELY_UNDERWEIGHT
