"""
Terrain — Money Units

Converts raw USD amounts into MoneyMetric values and back. A metric is
expressed in the largest unit (B, M, K) in which it is at least 1, rounded
to two decimals. The conversion is monotonic, so ordering between raw
amounts survives normalization.
"""

from ..schemas import MoneyMetric

UNIT_SCALE = {"B": 1e9, "M": 1e6, "K": 1e3}

# Smallest representable value; MoneyMetric.value must stay positive
MIN_VALUE = 0.01


def to_money_metric(amount_usd: float, confidence: str = "medium", range_usd=None) -> MoneyMetric:
    if amount_usd >= UNIT_SCALE["B"]:
        unit = "B"
    elif amount_usd >= UNIT_SCALE["M"]:
        unit = "M"
    else:
        unit = "K"
    scale = UNIT_SCALE[unit]
    value = max(MIN_VALUE, round(amount_usd / scale, 2))
    metric_range = None
    if range_usd is not None:
        low, high = range_usd
        metric_range = [max(MIN_VALUE, round(low / scale, 2)), max(MIN_VALUE, round(high / scale, 2))]
    return MoneyMetric(value=value, unit=unit, confidence=confidence, range=metric_range)


def to_usd(metric: MoneyMetric) -> float:
    return metric.value * UNIT_SCALE[metric.unit]


def to_billions(metric: MoneyMetric) -> float:
    """Normalize a metric to billions for cross-unit comparison."""
    return to_usd(metric) / UNIT_SCALE["B"]
