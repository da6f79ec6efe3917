import pytest

from app.exception.library.library_exception import ValidationError
from app.validate.library_validator import validate_list_name, validate_station_uuid


class TestValidateStationUuid:

    def test_returns_trimmed_value(self):
        assert validate_station_uuid("  960e57c5-0601-11e8-ae97-52543be04c81 ") == "960e57c5-0601-11e8-ae97-52543be04c81"

    @pytest.mark.parametrize("value", [None, "", "   ", 123])
    def test_rejects_missing_or_blank(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_station_uuid(value)

        assert exc_info.value.status_code == 400


class TestValidateListName:

    def test_returns_trimmed_name(self):
        assert validate_list_name("  Favorites Radio ") == "Favorites Radio"

    @pytest.mark.parametrize("value", [None, "", "\t\n", ["name"]])
    def test_rejects_missing_or_blank(self, value):
        with pytest.raises(ValidationError):
            validate_list_name(value)

    def test_rejects_name_over_column_length(self):
        assert validate_list_name("x" * 255) == "x" * 255
        with pytest.raises(ValidationError):
            validate_list_name("x" * 256)


def test_station_uuid_over_column_length():
    assert validate_station_uuid("s" * 255) == "s" * 255
    with pytest.raises(ValidationError):
        validate_station_uuid("s" * 256)
