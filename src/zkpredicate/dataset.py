import random
from datetime import date

from faker import Faker

from zkpredicate.constants import DATE_OF_BIRTH, MAX_NUM_OF_ATTRS
from zkpredicate.models import PrivateClaim
from zkpredicate.prover import new_claim

MIN_BIRTH_YEAR = 1930
MAX_BIRTH_YEAR = 2010


def random_birth_year(fake):
    """Generate a random date-of-birth year within the supported range."""
    dob = fake.date_between_dates(
        date_start=date(MIN_BIRTH_YEAR, 1, 1),
        date_end=date(MAX_BIRTH_YEAR, 12, 31),
    )
    return dob.year


def synthetic_attributes(fake, rng):
    attributes = [rng.randint(0, 9999) for _ in range(MAX_NUM_OF_ATTRS)]
    attributes[DATE_OF_BIRTH] = random_birth_year(fake)
    return attributes


def synthetic_claim(seed=None, holder_id=None) -> PrivateClaim:
    """one synthetic holder claim; a seed makes attribute values reproducible"""
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    rng = random.Random(seed)
    return new_claim(synthetic_attributes(fake, rng), holder_id)


def synthetic_holders(num_holders=10, seed=42):
    """list of (holder_id, claim) with deterministic randomness per holder"""
    fake = Faker()
    fake.seed_instance(seed)
    rng = random.Random(seed)
    holders = []
    for holder_id in range(1, num_holders + 1):
        claim = new_claim(synthetic_attributes(fake, rng), holder_id)
        holders.append((holder_id, claim))
    return holders
