from datetime import date

import pytest

from packages.roster.models import Fighter

TODAY = date(2024, 6, 1)


def make_fighter(fid, *, name=None, dob=date(1990, 1, 1), weight_class="Lightweight",
                 gender="Male", ever_champion=False, birth_country="USA"):
    return Fighter(
        id=fid,
        name=name or fid.replace("-", " ").title(),
        dob=dob,
        weight_class=weight_class,
        gender=gender,
        ever_champion=ever_champion,
        birth_country=birth_country,
    )


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def roster():
    """Ten fighters; 'f0'..'f9', names 'F0'..'F9'."""
    return [
        make_fighter(f"f{i}", name=f"F{i}", dob=date(1980 + i, 3, 15),
                     weight_class=["Flyweight", "Lightweight", "Heavyweight"][i % 3],
                     ever_champion=i % 2 == 0)
        for i in range(10)
    ]
