import pytest
from carrierpricing.core.errors import InvalidPostcode, QuoteError
from carrierpricing.services.pricing import parse_postcode, is_vehicle_valid

pytestmark = [pytest.mark.unit, pytest.mark.pricing]


@pytest.mark.parametrize("postcode,value", [
    ("0" * 5000 + "1", 1),
    ("00001Y2P0IJ32E8E7", 2 ** 63 - 1),
    ("0", 0),
    ("Z", 35),
    ("z", 35),
    ("10", 36),
    ("1Y2P0IJ32E8E7", 2 ** 63 - 1),
])
def test_parse_postcode(postcode, value):
    assert parse_postcode(postcode) == value


@pytest.mark.parametrize("postcode", ["", " ", "_", "1 0", " 10", "+1", "-1", "1_000", "٣", "Z" * 5000, "1" + "0" * 13])
def test_parse_postcode_rejects(postcode):
    with pytest.raises(InvalidPostcode) as exc:
        parse_postcode(postcode)
    assert isinstance(exc.value, QuoteError)
    assert exc.value.message == "invalid postcode provided"


def test_vehicle_validity():
    assert is_vehicle_valid("small_van")
    assert not is_vehicle_valid("van")
