"""
Sample data: US presidents with birth year and birthplace.

The same dataset in three record shapes, each with its own ViewConfig:
  struct  — pydantic models, name rendered bold through a custom formatter
  tuple   — (name, year, city, state)
  list    — lists of strings, every column a string column
"""

from __future__ import annotations

from html import escape

from pydantic import BaseModel

from datatable.config import settings
from datatable.kernel.columns import int_column, string_column
from datatable.kernel.types import Capability, ViewConfig


class President(BaseModel):
    model_config = {"frozen": True}

    name: str
    year: int
    city: str
    state: str


_DATA: list[tuple[str, int, str, str]] = [
    ("George Washington", 1732, "Westmoreland County", "Virginia"),
    ("John Adams", 1735, "Braintree", "Massachusetts"),
    ("Thomas Jefferson", 1743, "Shadwell", "Virginia"),
    ("James Madison", 1751, "Port Conway", "Virginia"),
    ("James Monroe", 1758, "Monroe Hall", "Virginia"),
    ("Andrew Jackson", 1767, "Waxhaws Region", "South/North Carolina"),
    ("John Quincy Adams", 1767, "Braintree", "Massachusetts"),
    ("William Henry Harrison", 1773, "Charles City County", "Virginia"),
    ("Martin Van Buren", 1782, "Kinderhook", "New York"),
    ("Zachary Taylor", 1784, "Barboursville", "Virginia"),
    ("John Tyler", 1790, "Charles City County", "Virginia"),
    ("James Buchanan", 1791, "Cove Gap", "Pennsylvania"),
    ("James K. Polk", 1795, "Pineville", "North Carolina"),
    ("Millard Fillmore", 1800, "Summerhill", "New York"),
    ("Franklin Pierce", 1804, "Hillsborough", "New Hampshire"),
    ("Andrew Johnson", 1808, "Raleigh", "North Carolina"),
    ("Abraham Lincoln", 1809, "Sinking Spring", "Kentucky"),
    ("Ulysses S. Grant", 1822, "Point Pleasant", "Ohio"),
    ("Rutherford B. Hayes", 1822, "Delaware", "Ohio"),
    ("Chester A. Arthur", 1829, "Fairfield", "Vermont"),
    ("James A. Garfield", 1831, "Moreland Hills", "Ohio"),
    ("Benjamin Harrison", 1833, "North Bend", "Ohio"),
    ("Grover Cleveland", 1837, "Caldwell", "New Jersey"),
    ("William McKinley", 1843, "Niles", "Ohio"),
    ("Woodrow Wilson", 1856, "Staunton", "Virginia"),
    ("William Howard Taft", 1857, "Cincinnati", "Ohio"),
    ("Theodore Roosevelt", 1858, "New York City", "New York"),
    ("Warren G. Harding", 1865, "Blooming Grove", "Ohio"),
    ("Calvin Coolidge", 1872, "Plymouth", "Vermont"),
    ("Herbert Hoover", 1874, "West Branch", "Iowa"),
    ("Franklin D. Roosevelt", 1882, "Hyde Park", "New York"),
    ("Harry S. Truman", 1884, "Lamar", "Missouri"),
    ("Dwight D. Eisenhower", 1890, "Denison", "Texas"),
    ("Lyndon B. Johnson", 1908, "Stonewall", "Texas"),
    ("Ronald Reagan", 1911, "Tampico", "Illinois"),
    ("Richard M. Nixon", 1913, "Yorba Linda", "California"),
    ("Gerald R. Ford", 1913, "Omaha", "Nebraska"),
    ("John F. Kennedy", 1917, "Brookline", "Massachusetts"),
    ("George H. W. Bush", 1924, "Milton", "Massachusetts"),
    ("Jimmy Carter", 1924, "Plains", "Georgia"),
    ("George W. Bush", 1946, "New Haven", "Connecticut"),
    ("Bill Clinton", 1946, "Hope", "Arkansas"),
    ("Barack Obama", 1961, "Honolulu", "Hawaii"),
    ("Donald Trump", 1946, "New York City", "New York"),
]

PRESIDENTS: list[President] = [President(name=n, year=y, city=c, state=s) for n, y, c, s in _DATA]
PRESIDENT_TUPLES: list[tuple[str, int, str, str]] = list(_DATA)
PRESIDENT_ROWS: list[list[str]] = [[n, str(y), c, s] for n, y, c, s in _DATA]

SHAPES = ("struct", "tuple", "list")


def _capabilities() -> dict[str, Capability]:
    return {
        "can_hide": Capability(True, settings.HIDE_LABEL),
        "can_sort": Capability(True, settings.SORT_LABEL),
        "can_filter": Capability(True, settings.FILTER_LABEL),
    }


def _bold_name(president: President) -> str:
    return f"<strong>{escape(president.name)}</strong>"


def struct_view() -> ViewConfig:
    return ViewConfig(
        columns=[
            string_column("Name", lambda p: p.name, _bold_name),
            int_column("Year", lambda p: p.year),
            string_column("City", lambda p: p.city),
            string_column("State", lambda p: p.state),
        ],
        **_capabilities(),
    )


def tuple_view() -> ViewConfig:
    return ViewConfig(
        columns=[
            string_column("Name", lambda t: t[0]),
            int_column("Year", lambda t: t[1]),
            string_column("City", lambda t: t[2]),
            string_column("State", lambda t: t[3]),
        ],
        **_capabilities(),
    )


def list_view() -> ViewConfig:
    return ViewConfig(
        columns=[string_column(name, lambda r, i=i: r[i]) for i, name in enumerate(("Name", "Year", "City", "State"))],
        **_capabilities(),
    )


def dataset(shape: str) -> tuple[ViewConfig, list]:
    """ViewConfig and records for one of SHAPES."""
    if shape == "struct":
        return struct_view(), list(PRESIDENTS)
    if shape == "tuple":
        return tuple_view(), list(PRESIDENT_TUPLES)
    if shape == "list":
        return list_view(), [list(row) for row in PRESIDENT_ROWS]
    raise ValueError(f"Unknown shape: {shape}")
