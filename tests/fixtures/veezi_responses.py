"""
Mock Veezi API responses for testing.

Realistic PascalCase payloads for the v1/v4 endpoints, used with respx to
mock httpx calls and to build entities directly in unit tests.
"""

import copy


def _session(
    session_id: int,
    film_id: str,
    screen_id: int,
    pre_show: str,
    status: str = "Open",
    seats_available: int = 120,
    attributes: list[str] | None = None,
    sales_cut_off: str | None = None,
    film_package_id: int | None = None,
) -> dict:
    return {
        "Id": session_id,
        "FilmId": film_id,
        "FilmPackageId": film_package_id,
        "Title": FILM_TITLES.get(film_id, "Unknown"),
        "ScreenId": screen_id,
        "Seating": "Allocated",
        "AreComplimentariesAllowed": True,
        "ShowType": "Public",
        "SalesVia": ["KIOSK", "POS", "WWW"],
        "Status": status,
        "PreShowStartTime": pre_show,
        "SalesCutOffTime": sales_cut_off or pre_show,
        "FeatureStartTime": pre_show,
        "FeatureEndTime": pre_show,
        "CleanupEndTime": pre_show,
        "TicketsSoldOut": seats_available == 0,
        "FewTicketsLeft": 0 < seats_available < 10,
        "SeatsAvailable": seats_available,
        "SeatsHeld": 0,
        "SeatsHouse": 4,
        "SeatsSold": 30,
        "FilmFormat": "2D Digital",
        "PriceCardName": "Standard",
        "Attributes": attributes or [],
        "AudioLanguage": None,
    }


FILM_TITLES = {
    "ST00000001": "Dune: Part Two",
    "ST00000002": "Wonka",
    "ST00000003": "Poor Things",
}

# GET v1/session
SESSIONS_RESPONSE = [
    _session(101, "ST00000001", 1, "2024-01-05T18:00:00", attributes=["0000000001"]),
    _session(102, "ST00000002", 2, "2024-01-10T14:30:00"),
    _session(103, "ST00000001", 2, "2024-01-31T21:00:00"),
    _session(104, "ST00000003", 1, "2024-02-01T19:00:00", attributes=["0000000001"]),
    _session(105, "ST00000002", 1, "2023-12-31T23:59:00", film_package_id=7),
]

# GET v1/websession (filtered server-side)
WEB_SESSIONS_RESPONSE = [SESSIONS_RESPONSE[0], SESSIONS_RESPONSE[2]]


def _film(film_id: str, genre: str, distributor: str, duration: int, fmt: str = "2D Digital") -> dict:
    return {
        "Id": film_id,
        "Title": FILM_TITLES[film_id],
        "ShortName": FILM_TITLES[film_id][:10],
        "Synopsis": None,
        "Genre": genre,
        "SignageText": FILM_TITLES[film_id],
        "Distributor": distributor,
        "OpeningDate": "2023-12-01T00:00:00",
        "Rating": "PG-13" if film_id != "ST00000003" else None,
        "Status": "Active",
        "Content": None,
        "Duration": duration,
        "DisplaySequence": 0,
        "NationalCode": None,
        "Format": fmt,
        "IsRestricted": False,
        "People": [
            {"Id": "P1", "FirstName": "Denis", "LastName": "Villeneuve", "Role": "Director"},
            {"Id": "P2", "FirstName": "Timothee", "LastName": "Chalamet", "Role": "Actor"},
            {"Id": "P3", "FirstName": "Zendaya", "LastName": "", "Role": "Actor"},
        ],
        "AudioLanguage": "English",
        "GovernmentFilmTitle": None,
        "FilmPosterUrl": None,
        "FilmPosterThumbnailUrl": "https://example.test/thumb.jpg",
        "BackdropImageUrl": None,
        "FilmTrailerUrl": None,
    }


# GET v4/film
FILMS_RESPONSE = [
    _film("ST00000001", "Sci-Fi", "Warner Bros", 166, "3D Digital"),
    _film("ST00000002", "Family", "Warner Bros", 116),
    _film("ST00000003", "Comedy", "Searchlight", 120),
]

# GET v1/filmpackage
FILM_PACKAGES_RESPONSE = [
    {
        "Id": 1,
        "Title": "Dune Double",
        "Status": "Active",
        "Films": [
            {
                "FilmId": "ST00000001",
                "Title": "Dune: Part Two",
                "SplitPercent": 60.0,
                "TrailerDuration": 10,
                "CleanUpDuration": 15,
                "Order": 2,
            },
            {
                "FilmId": "ST00000002",
                "Title": "Wonka",
                "SplitPercent": 40.0,
                "TrailerDuration": 10,
                "CleanUpDuration": 15,
                "Order": 1,
            },
        ],
    },
    {"Id": 2, "Title": "Late Show", "Status": "Inactive", "Films": []},
]

# GET v1/screen
SCREENS_RESPONSE = [
    {
        "Id": 1,
        "Name": "Screen 1",
        "ScreenNumber": "1",
        "HasCustomLayout": False,
        "TotalSeats": 150,
        "HouseSeats": 4,
    },
    {
        "Id": 2,
        "Name": "Screen 2",
        "ScreenNumber": "2",
        "HasCustomLayout": True,
        "TotalSeats": 80,
        "HouseSeats": 2,
    },
]

# GET v1/site
SITE_RESPONSE = {
    "Name": "Embassy Theatre",
    "ShortName": "Embassy",
    "LegalName": "Embassy Theatre Ltd",
    "NationalCode": None,
    "Address1": "10 Kent Terrace",
    "Address2": None,
    "Address3": "Wellington",
    "PostCode": "6011",
    "Phone1": "04 384 7657",
    "Phone2": None,
    "Fax": None,
    "SalesTaxRegistration": None,
    "TicketMessage1": None,
    "TicketMessage2": None,
    "ReceiptMessage1": None,
    "ReceiptMessage2": None,
    "ReceiptMessage3": None,
    "ReceiptMessage4": None,
    "ReceiptMessage5": None,
    "ReceiptMessage6": None,
    "TimeZoneIdentifier": "New Zealand Standard Time",
    "Country": "New Zealand",
    "Screens": [{"Id": 1}, {"Id": 2}],
}

# GET v1/attribute
ATTRIBUTES_RESPONSE = [
    {
        "Id": "0000000001",
        "Description": "Subtitled",
        "ShortName": "SUB",
        "FontColor": "#FFFFFF",
        "BackgroundColor": "#000000",
        "ShowOnSessionsWithNoComps": False,
    },
    {
        "Id": "0000000002",
        "Description": "Seniors Screening",
        "ShortName": "SEN",
        "FontColor": "#000000",
        "BackgroundColor": "#FFCC00",
        "ShowOnSessionsWithNoComps": True,
    },
]


def payload(data):
    """Deep copy of a fixture, safe to mutate in a test."""
    return copy.deepcopy(data)
