from tokenledger.config import UINT256_MAX
from tokenledger.exceptions import InvalidAmount, Overflow, Underflow


def validate(amount):
    # bool is an int subclass, True is not an amount
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(amount=amount)

    if amount < 0 or amount > UINT256_MAX:
        raise InvalidAmount(amount=amount)

    return amount


def add(a: int, b: int) -> int:
    c = a + b
    if c > UINT256_MAX:
        raise Overflow(a=a, b=b)
    return c


def sub(a: int, b: int) -> int:
    # Callers check sufficiency first and raise the domain error themselves
    if b > a:
        raise Underflow(a=a, b=b)
    return a - b
