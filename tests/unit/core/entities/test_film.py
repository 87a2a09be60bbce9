"""
Tests unitaires pour Film et FilmPackage.
"""

import pytest

from veezi.core.entities import Film, FilmFormat, FilmPackage, FilmStatus
from tests.fixtures.veezi_responses import FILM_PACKAGES_RESPONSE, FILMS_RESPONSE, payload


@pytest.fixture
def dune() -> Film:
    return Film.model_validate(payload(FILMS_RESPONSE[0]))


@pytest.fixture
def poor_things() -> Film:
    return Film.model_validate(payload(FILMS_RESPONSE[2]))


class TestFilm:
    """Tests for Film decoding and helpers."""

    def test_decoding(self, dune: Film):
        assert dune.id == "ST00000001"
        assert dune.title == "Dune: Part Two"
        assert dune.status is FilmStatus.ACTIVE
        assert dune.format is FilmFormat.DIGITAL_3D
        assert len(dune.people) == 3

    def test_formatted_duration_with_minutes(self, dune: Film):
        assert dune.formatted_duration() == "2h 46m"

    def test_formatted_duration_whole_hours(self, poor_things: Film):
        assert poor_things.formatted_duration() == "2h"

    def test_format_flags(self, dune: Film, poor_things: Film):
        assert dune.is_3d and not dune.is_2d
        assert poor_things.is_2d and not poor_things.is_3d

    def test_is_active(self, dune: Film):
        assert dune.is_active
        assert not dune.model_copy(update={"status": FilmStatus.DELETED}).is_active

    def test_people_by_role(self, dune: Film):
        assert [p.last_name for p in dune.directors()] == ["Villeneuve"]
        assert dune.directors_formatted() == "Denis Villeneuve"
        assert dune.actors_formatted() == "Timothee Chalamet, Zendaya"

    def test_rating_display(self, dune: Film, poor_things: Film):
        assert dune.rating_display() == "PG-13"
        assert poor_things.rating_display() == "NR"

    def test_format_labels(self):
        assert FilmFormat("3D HFR") is FilmFormat.DIGITAL_3D_HFR
        assert FilmFormat("Not a Film") is FilmFormat.NOT_A_FILM


class TestFilmPackage:
    """Tests for FilmPackage decoding."""

    def test_decoding(self):
        package = FilmPackage.model_validate(payload(FILM_PACKAGES_RESPONSE[0]))
        assert package.id == 1
        assert package.status is FilmStatus.ACTIVE
        assert [f.film_id for f in package.films] == ["ST00000001", "ST00000002"]
        assert package.films[0].split_percent == 60.0

    def test_ordered_films(self):
        package = FilmPackage.model_validate(payload(FILM_PACKAGES_RESPONSE[0]))
        assert [f.title for f in package.ordered_films()] == ["Wonka", "Dune: Part Two"]

    def test_empty_package(self):
        package = FilmPackage.model_validate(payload(FILM_PACKAGES_RESPONSE[1]))
        assert package.films == ()
