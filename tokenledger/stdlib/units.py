from decimal import Decimal
import decimal

from tokenledger.config import DECIMALS

MAX_UPPER_PRECISION = 78
CONTEXT = decimal.Context(prec=MAX_UPPER_PRECISION + DECIMALS, rounding=decimal.ROUND_FLOOR)


def _to_decimal(value):
    if type(value) == float:
        value = str(value)

    try:
        return Decimal(value)
    except decimal.InvalidOperation:
        raise ValueError('Cannot parse {!r} as a token amount'.format(value))


def parse_units(value, decimals=DECIMALS) -> int:
    """
    Converts a human-facing token amount into smallest units.

    '1.5' -> 1500000000000000000 with 18 decimals. Precision finer than
    one smallest unit is rejected rather than rounded away.
    """
    d = _to_decimal(value)

    if not d.is_finite():
        raise ValueError('Cannot parse {!r} as a token amount'.format(value))

    scaled = CONTEXT.multiply(d, Decimal(10) ** decimals)

    if scaled != scaled.to_integral_value(rounding=decimal.ROUND_FLOOR):
        raise ValueError('{!r} has more than {} decimal places'.format(value, decimals))

    return int(scaled)


def format_units(amount: int, decimals=DECIMALS) -> str:
    sign = '-' if amount < 0 else ''
    whole, fraction = divmod(abs(amount), 10 ** decimals)

    if decimals == 0:
        return '{}{}'.format(sign, whole)

    fraction = str(fraction).rjust(decimals, '0').rstrip('0') or '0'
    return '{}{}.{}'.format(sign, whole, fraction)


def parse_ether(value) -> int:
    return parse_units(value, DECIMALS)


def format_ether(amount: int) -> str:
    return format_units(amount, DECIMALS)
