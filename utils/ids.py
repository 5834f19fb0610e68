import random
import string
import time


def create_id_with_prefix(prefix: str) -> str:
    # millisecond stamp + 6 random chars, e.g. job_1700000000000_a1b2c3
    stamp = int(time.time() * 1000)
    suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{prefix}_{stamp}_{suffix}"
