"""
Test suite for the ride row codec
File: tests/test_row_codec.py
"""

import pytest

from ride_sheets_api.app.schemas.ride import Ride
from ride_sheets_api.app.services import row_codec
from ride_sheets_api.app.services.row_codec import MIN_ROW_LENGTH, ROW_WIDTH, decode, encode

from fake_sheets import make_row


class TestDecode:
    """Sheet row -> Ride."""

    def test_full_row(self):
        row = make_row(
            "R1",
            assigned_to="u1",
            driver="Bob",
            assignment_status="assigned",
            assigned_at="2024-05-01T10:00:00.000Z",
            status="pending",
            cost="42.5",
        )
        ride = decode(row)

        assert ride.id == "R1"
        assert ride.booking_id == "BK-R1"
        assert ride.phone_number == "+15550100"
        assert ride.urgency == "high"
        assert ride.additional_notes == "two suitcases"
        assert ride.status == "pending"
        assert ride.assigned_to == "u1"
        assert ride.driver == "Bob"
        assert ride.assignment_status == "assigned"
        assert ride.assigned_at == "2024-05-01T10:00:00.000Z"
        assert ride.completed_at is None
        assert ride.cost == 42.5

    @pytest.mark.parametrize("length", [0, 1, MIN_ROW_LENGTH - 1])
    def test_short_rows_are_malformed(self, length):
        assert decode(make_row("R1")[:length]) is None

    def test_none_row(self):
        assert decode(None) is None

    def test_missing_trailing_cells_take_defaults(self):
        row = make_row("R1")[:MIN_ROW_LENGTH]
        ride = decode(row)

        assert ride is not None
        assert ride.driver is None
        assert ride.assignment_status == "unassigned"
        assert ride.assigned_at is None
        assert ride.completed_at is None
        assert ride.cost is None

    def test_blank_cells_take_defaults(self):
        row = make_row("R1", urgency="", status="", assigned_to="")
        ride = decode(row)

        assert ride.urgency == "medium"
        assert ride.status == "new"
        assert ride.assigned_to is None

    def test_non_string_cells_are_stringified(self):
        row = make_row("R1", phone_number=5550100, cost=30)
        row[0] = 17
        ride = decode(row)

        assert ride.id == "17"
        assert ride.phone_number == "5550100"
        assert ride.cost == 30.0

    @pytest.mark.parametrize("cell", ["abc", "nan", "inf"])
    def test_unparseable_cost_is_none(self, cell):
        assert decode(make_row("R1", cost=cell)).cost is None

    def test_unknown_enum_values_are_kept(self):
        ride = decode(make_row("R1", status="on-hold", urgency="asap"))
        assert ride.status == "on-hold"
        assert ride.urgency == "asap"


class TestEncode:
    """Ride -> sheet row."""

    def test_width_and_order(self):
        ride = decode(make_row("R1", driver="Bob", cost="12"))
        row = encode(ride)

        assert len(row) == ROW_WIDTH == 20
        assert row[0] == "R1"
        assert row[15] == "Bob"
        assert row[19] == 12

    def test_absent_values_become_blank_cells(self):
        row = encode(Ride(id="R1"))

        assert row[14] == ""
        assert row[15] == ""
        assert row[17] == ""
        assert row[18] == ""
        assert row[19] == ""
        assert row[11] == "medium"
        assert row[13] == "new"
        assert row[16] == "unassigned"

    def test_zero_cost_is_kept(self):
        assert encode(Ride(id="R1", cost=0))[19] == 0

    def test_fractional_cost(self):
        assert encode(Ride(id="R1", cost=19.99))[19] == 19.99

    @pytest.mark.parametrize("cost", [float("nan"), float("inf")])
    def test_non_finite_cost_is_refused(self, cost):
        ride = Ride(id="R1").model_copy(update={"cost": cost})
        with pytest.raises(ValueError, match="non-finite"):
            encode(ride)

    def test_columns_cover_every_ride_field(self):
        attributes = [column.attribute for column in row_codec.RIDE_COLUMNS]
        assert sorted(attributes) == sorted(Ride.model_fields)


class TestRoundTrip:

    def test_decode_encode_decode_is_stable(self):
        rows = [
            make_row("R1"),
            make_row("R2", assigned_to="u2", assignment_status="assigned", cost="7"),
            make_row("R3", completed_at="2024-05-01T11:00:00.000Z", status="completed"),
            make_row("R4")[:MIN_ROW_LENGTH],
        ]
        for row in rows:
            ride = decode(row)
            assert decode(encode(ride)) == ride

    def test_blank_string_normalised_to_none(self):
        ride = Ride(id="R1", driver="", assigned_at="  ")
        assert ride.driver is None
        assert ride.assigned_at is None
        assert decode(encode(ride)) == ride
