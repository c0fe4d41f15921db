import secrets
import string
import time

ALPHABET = string.digits + string.ascii_lowercase


def to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


def new_id() -> str:
    """Return a fresh entity id: a millisecond timestamp plus 8 random chars."""
    suffix = "".join(secrets.choice(ALPHABET) for _ in range(8))
    return "lhf_" + to_base36(int(time.time() * 1000)) + suffix
