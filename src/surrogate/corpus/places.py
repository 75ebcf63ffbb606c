"""Address corpora: streets, cities, states and zip codes.

Street names, suffixes and city names come from small curated lists; states
are the fifty US states plus the District of Columbia.  Zip codes are a fixed
sample of real five digit codes, always five characters long.
"""

from __future__ import annotations

__all__ = [
    "STREET_NAMES",
    "STREET_SUFFIXES",
    "CITIES",
    "STATES",
    "STATE_CODES",
    "STATE_NAMES",
    "ZIPCODES",
]

STREET_NAMES: tuple[str, ...] = tuple(
    """
Oak Elm Ash Fir Bay Maple Pine Cedar Walnut Willow Birch Spruce Chestnut
Holly Magnolia Cottonwood Sycamore Poplar Hickory Laurel Juniper Aspen Alder
Beech Cypress Hemlock Linden Redwood Sequoia Palm Briar Brook Meadow Sunset
Ridge Valley River Forest Hill Lake Park Stone Glen Highland King Queen
Liberty Heritage Prairie Harbor Garden Main Church Washington Lincoln Jefferson
Madison Franklin Jackson Center Union Mill Spring North South
""".split()
)

STREET_SUFFIXES: tuple[str, ...] = (
    "St",
    "Ave",
    "Rd",
    "Blvd",
    "Ln",
    "Dr",
    "Ct",
    "Way",
    "Pl",
    "Ter",
    "Cir",
    "Pkwy",
    "Street",
    "Avenue",
    "Road",
    "Lane",
    "Drive",
    "Court",
    "Place",
    "Boulevard",
)

CITIES: tuple[str, ...] = (
    "Ada",
    "Rye",
    "Erie",
    "Troy",
    "Reno",
    "Waco",
    "Mesa",
    "Lima",
    "Provo",
    "Salem",
    "Tulsa",
    "Omaha",
    "Boise",
    "Akron",
    "Tampa",
    "Miami",
    "Dover",
    "Austin",
    "Denver",
    "Boston",
    "Dallas",
    "Durham",
    "Eugene",
    "Fresno",
    "Helena",
    "Topeka",
    "Toledo",
    "Newark",
    "Orlando",
    "Phoenix",
    "Seattle",
    "Chicago",
    "Houston",
    "Lansing",
    "Madison",
    "Atlanta",
    "Raleigh",
    "Spokane",
    "Portland",
    "Richmond",
    "Columbus",
    "Savannah",
    "Brooklyn",
    "Honolulu",
    "Nashville",
    "Charlotte",
    "Milwaukee",
    "Anchorage",
    "Lexington",
    "Baltimore",
    "Cleveland",
    "Pittsburgh",
    "Sacramento",
    "Louisville",
    "Albuquerque",
    "Minneapolis",
    "Springfield",
    "Indianapolis",
    "Philadelphia",
    "San Francisco",
    "Salt Lake City",
    "Colorado Springs",
)

STATES: tuple[tuple[str, str], ...] = (
    ("AL", "Alabama"),
    ("AK", "Alaska"),
    ("AZ", "Arizona"),
    ("AR", "Arkansas"),
    ("CA", "California"),
    ("CO", "Colorado"),
    ("CT", "Connecticut"),
    ("DE", "Delaware"),
    ("DC", "District of Columbia"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("HI", "Hawaii"),
    ("ID", "Idaho"),
    ("IL", "Illinois"),
    ("IN", "Indiana"),
    ("IA", "Iowa"),
    ("KS", "Kansas"),
    ("KY", "Kentucky"),
    ("LA", "Louisiana"),
    ("ME", "Maine"),
    ("MD", "Maryland"),
    ("MA", "Massachusetts"),
    ("MI", "Michigan"),
    ("MN", "Minnesota"),
    ("MS", "Mississippi"),
    ("MO", "Missouri"),
    ("MT", "Montana"),
    ("NE", "Nebraska"),
    ("NV", "Nevada"),
    ("NH", "New Hampshire"),
    ("NJ", "New Jersey"),
    ("NM", "New Mexico"),
    ("NY", "New York"),
    ("NC", "North Carolina"),
    ("ND", "North Dakota"),
    ("OH", "Ohio"),
    ("OK", "Oklahoma"),
    ("OR", "Oregon"),
    ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"),
    ("SC", "South Carolina"),
    ("SD", "South Dakota"),
    ("TN", "Tennessee"),
    ("TX", "Texas"),
    ("UT", "Utah"),
    ("VT", "Vermont"),
    ("VA", "Virginia"),
    ("WA", "Washington"),
    ("WV", "West Virginia"),
    ("WI", "Wisconsin"),
    ("WY", "Wyoming"),
)

STATE_CODES: tuple[str, ...] = tuple(code for code, _ in STATES)
STATE_NAMES: tuple[str, ...] = tuple(name for _, name in STATES)

ZIPCODES: tuple[str, ...] = tuple(
    """
02169 02108 10001 10027 11201 19103 20001 21201 27601 28202 30303 32801
33101 35203 37203 40202 43215 44113 46204 48201 53202 55401 60601 63101
64105 68102 70112 73102 75201 77002 78701 80202 83702 84101 85004 87102
89101 90012 94103 96813 97204 98101 99501 03101 04101 05401 06103 07102
""".split()
)
