"""Random password and passcode generation.

Both generators draw from :class:`secrets.SystemRandom` unless a
:class:`random.Random` instance is passed in, which lets tests seed them.
"""

from __future__ import annotations

import random
import secrets
import string
from typing import Optional

PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*()"
PASSWORD_LENGTH = 16

PASSCODE_DIGITS = 6
PASSCODE_SPACE = 10**PASSCODE_DIGITS

_system_random = secrets.SystemRandom()


def generate_password(rng: Optional[random.Random] = None) -> str:
    """Return 16 characters sampled uniformly, with replacement, from the alphabet."""
    rng = rng or _system_random
    return "".join(rng.choice(PASSWORD_ALPHABET) for _ in range(PASSWORD_LENGTH))


def generate_passcode(rng: Optional[random.Random] = None) -> str:
    """Return a uniformly random integer in ``[0, 999999]`` as six zero-padded digits."""
    rng = rng or _system_random
    return f"{rng.randrange(PASSCODE_SPACE):0{PASSCODE_DIGITS}d}"
