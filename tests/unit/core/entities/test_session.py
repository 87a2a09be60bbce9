"""
Tests unitaires pour les entites Session et SessionList.

Ces tests verifient:
- Deserialisation depuis le JSON PascalCase de l'API
- Decodage de SalesVia depuis une liste de canaux
- Predicat is_open_for_sales
- Filtres de SessionList (ecran, film, attribut, plage de dates)
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from veezi.core.entities import (
    FilmFormat,
    SalesVia,
    Seating,
    Session,
    SessionList,
    SessionStatus,
    ShowType,
)
from tests.fixtures.veezi_responses import SESSIONS_RESPONSE, payload


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


@pytest.fixture
def session() -> Session:
    return Session.model_validate(payload(SESSIONS_RESPONSE[0]))


@pytest.fixture
def sessions() -> SessionList:
    return SessionList(Session.model_validate(s) for s in payload(SESSIONS_RESPONSE))


class TestSessionDeserialization:
    """Tests for decoding a session payload."""

    def test_fields_are_decoded(self, session: Session):
        assert session.id == 101
        assert session.film_id == "ST00000001"
        assert session.film_package_id is None
        assert session.screen_id == 1
        assert session.seating is Seating.ALLOCATED
        assert session.show_type is ShowType.PUBLIC
        assert session.status is SessionStatus.OPEN
        assert session.film_format is FilmFormat.DIGITAL_2D
        assert session.pre_show_start_time == datetime(2024, 1, 5, 18, 0)
        assert session.attributes == ("0000000001",)

    def test_sales_via_is_decoded_from_channel_list(self, session: Session):
        assert session.sales_via == SalesVia(kiosk=True, pos=True, www=True)
        assert session.sales_via.mx is False
        assert session.sales_via.rsp is False

    def test_sales_via_ignores_unknown_channels(self):
        sales_via = SalesVia.model_validate(["WWW", "CALLCENTER"])
        assert sales_via == SalesVia(www=True)

    def test_session_is_immutable(self, session: Session):
        with pytest.raises(ValidationError):
            session.seats_available = 0

    def test_unknown_status_is_rejected(self):
        data = payload(SESSIONS_RESPONSE[0])
        data["Status"] = "Cancelled"
        with pytest.raises(ValidationError):
            Session.model_validate(data)


class TestIsOpenForSales:
    """Tests for the open-for-sales predicate."""

    def _with(self, session: Session, **changes) -> Session:
        return session.model_copy(update=changes)

    def test_open_with_seats_before_cutoff(self, session: Session):
        open_session = self._with(
            session,
            status=SessionStatus.OPEN,
            sales_cut_off_time=_utc_now() + timedelta(hours=1),
            seats_available=5,
        )
        assert open_session.is_open_for_sales() is True

    def test_no_seats_available(self, session: Session):
        full_session = self._with(
            session,
            status=SessionStatus.OPEN,
            sales_cut_off_time=_utc_now() + timedelta(hours=1),
            seats_available=0,
        )
        assert full_session.is_open_for_sales() is False

    def test_after_cutoff(self, session: Session):
        late_session = self._with(
            session,
            sales_cut_off_time=_utc_now() - timedelta(minutes=1),
            seats_available=5,
        )
        assert late_session.is_open_for_sales() is False

    def test_cutoff_equal_to_now_is_closed(self, session: Session):
        now = datetime(2024, 1, 5, 17, 0)
        edge = self._with(session, sales_cut_off_time=now, seats_available=5)
        assert edge.is_open_for_sales(now=now) is False

    @pytest.mark.parametrize("status", [SessionStatus.CLOSED, SessionStatus.PLANNED])
    def test_status_other_than_open(self, session: Session, status: SessionStatus):
        other = self._with(
            session,
            status=status,
            sales_cut_off_time=_utc_now() + timedelta(hours=1),
            seats_available=5,
        )
        assert other.is_open_for_sales() is False

    def test_aware_cutoff_is_supported(self, session: Session):
        aware = self._with(
            session,
            sales_cut_off_time=datetime.now(timezone.utc) + timedelta(hours=1),
            seats_available=5,
        )
        assert aware.is_open_for_sales() is True


class TestSessionList:
    """Tests for SessionList filters."""

    def test_behaves_as_sequence(self, sessions: SessionList):
        assert len(sessions) == 5
        assert sessions[0].id == 101
        assert [s.id for s in sessions[1:3]] == [102, 103]
        assert isinstance(sessions[1:3], SessionList)

    def test_filter_by_screen(self, sessions: SessionList):
        assert [s.id for s in sessions.filter_by_screen(2)] == [102, 103]

    def test_filter_by_film(self, sessions: SessionList):
        assert [s.id for s in sessions.filter_by_film("ST00000001")] == [101, 103]

    def test_filter_containing_attribute(self, sessions: SessionList):
        assert [s.id for s in sessions.filter_containing_attribute("0000000001")] == [101, 104]

    def test_filter_by_date_range_is_inclusive(self, sessions: SessionList):
        result = sessions.filter_by_date_range(date(2024, 1, 1), date(2024, 1, 31))
        assert [s.id for s in result] == [101, 102, 103]

    def test_filters_do_not_modify_original(self, sessions: SessionList):
        sessions.filter_by_screen(1)
        assert len(sessions) == 5

    def test_equality(self, sessions: SessionList):
        assert sessions == SessionList(list(sessions))
        assert sessions != SessionList()

    def test_open_for_sales(self, sessions: SessionList):
        now = datetime(2024, 1, 1)
        # Cut-off = pre-show: only sessions after `now` remain on sale
        assert [s.id for s in sessions.open_for_sales(now=now)] == [101, 102, 103, 104]
