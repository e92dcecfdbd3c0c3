import pytest

from src.cafe_backoffice.cafe_backoffice.common.validators import require_int, require_number
from src.cafe_backoffice.cafe_backoffice.core.exceptions import ValidationError


def test_require_number_accepts_numeric_json():
    assert require_number("12.5", "amount") == 12.5
    assert require_number(3, "amount") == 3.0


@pytest.mark.parametrize("value", ["abc", None, True, "inf", [1]])
def test_require_number_rejects(value):
    with pytest.raises(ValidationError):
        require_number(value, "amount")


def test_require_int():
    assert require_int("90", "minutes") == 90
    assert require_int(60.0, "minutes") == 60
    with pytest.raises(ValidationError):
        require_int(1.5, "minutes")
