"""
Mock data loaded by the services when they are created with `initialize=True`.

Identifiers are fixed so the persons below can reference the countries, and so
links/bookmarks to a seeded record stay valid across restarts.
"""

from datetime import date
from uuid import UUID

from crud_example.models.country import Country
from crud_example.models.person import Person

USA_ID = UUID("7c1f5e52-3c55-4a9b-8f3a-1b2f0d5b8e01")
CANADA_ID = UUID("2a9d4c77-0c1e-4e6b-9d42-6f1b8a3c5e02")
UK_ID = UUID("d35c0b1e-8f47-4c2a-a6f0-93e2b7d4c103")
INDIA_ID = UUID("51e8a4f2-6b3d-4f09-b7c1-2d8e9f0a6b04")
AUSTRALIA_ID = UUID("9b0e7d3a-1f6c-4a85-8e2d-c4f5a6b7d805")


def mock_countries() -> list[Country]:
    return [
        Country(country_id=USA_ID, country_name="USA"),
        Country(country_id=CANADA_ID, country_name="Canada"),
        Country(country_id=UK_ID, country_name="UK"),
        Country(country_id=INDIA_ID, country_name="India"),
        Country(country_id=AUSTRALIA_ID, country_name="Australia"),
    ]


def mock_persons() -> list[Person]:
    # Fresh instances on every call: each service owns its own list
    return [
        Person(UUID("8082ed0c-396d-4162-ad1e-29a13f929824"), "Aguste", "aleddy0@booking.com",
               date(1993, 1, 2), "Male", UK_ID, "0858 Novick Terrace", False),
        Person(UUID("06d15bad-52f4-498e-b478-acad847abfaa"), "Jasmina", "jsyddie1@miibeian.gov.cn",
               date(1991, 6, 24), "Female", UK_ID, "0742 Fieldstone Lane", True),
        Person(UUID("d3ea677a-0f5b-41ea-8fef-ea2fc41900fd"), "Kendall", "khaquard2@arstechnica.com",
               date(1993, 8, 13), "Male", USA_ID, "7050 Pawling Alley", False),
        Person(UUID("89452edb-bf8c-4283-9ba4-8259fd4a7a76"), "Kilian", "kaizikowitz3@joomla.org",
               date(1991, 6, 17), "Male", CANADA_ID, "233 Buhler Junction", True),
        Person(UUID("f5bd5979-1dc1-432c-b1f1-db5bccb0e56d"), "Dulcinea", "dbus4@pbs.org",
               date(1990, 9, 20), "Female", INDIA_ID, "56 Sundown Point", False),
        Person(UUID("a795e22d-faed-42f0-b134-f3b89b8683e5"), "Corabelle", "cadams5@t-online.de",
               date(1983, 10, 16), "Female", AUSTRALIA_ID, "4489 Hazelcrest Place", False),
        Person(UUID("3c12d8e8-3c1c-4f57-b6a4-c8caac893d7a"), "Faydra", "fbischof6@boston.com",
               date(1998, 7, 10), "Female", USA_ID, "2010 Farragut Pass", True),
        Person(UUID("7b75097b-bff2-459f-8ea8-63742bbd7afb"), "Oby", "oclutheram7@foxnews.com",
               date(1989, 9, 3), "Male", CANADA_ID, "2 Anthes Court", False),
        Person(UUID("6717c42d-16ec-4f15-80d8-4c7413e250cb"), "Seumas", "ssimonitto8@biglobe.ne.jp",
               date(1998, 12, 18), "Male", INDIA_ID, "76779 Norway Maple Crossing", False),
        Person(UUID("6e789c86-c8a6-4f18-821c-2abdb2e95982"), "Freemon", "faugustin9@vimeo.com",
               date(1988, 7, 17), "Male", AUSTRALIA_ID, "8754 Becker Street", True),
    ]
