"""Random test data for form-filling scenarios."""

import random
import string
from typing import Optional


class TestDataGenerator:
    """Generate e-mails, names, phone numbers and random strings.

    The random source is explicit so tests can seed it:

        generator = TestDataGenerator(random.Random(42))
    """

    # Not a test class
    __test__ = False

    FIRST_NAMES = ("João", "Maria", "Pedro", "Ana", "Carlos", "Julia")
    LAST_NAMES = ("Silva", "Santos", "Oliveira", "Souza", "Lima", "Costa")
    ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _four_digits(self) -> int:
        return self.rng.randrange(1000, 9999)

    def generate_email(self) -> str:
        return f"test{self._four_digits()}@example.com"

    def generate_name(self) -> str:
        first = self.rng.choice(self.FIRST_NAMES)
        last = self.rng.choice(self.LAST_NAMES)
        return f"{first} {last}"

    def generate_phone_number(self) -> str:
        return f"(11) 9{self._four_digits()}-{self._four_digits()}"

    def generate_random_string(self, length: int) -> str:
        """Return ``length`` characters drawn from ``ALPHABET``.

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return "".join(self.rng.choice(self.ALPHABET) for _ in range(length))
