# sr_core/common/tests/test_validation.py
import pytest

from sr_core.common.api.exceptions import MissingFields
from sr_core.common.validation import normalize_email, require_fields


def test_require_fields_lists_blank_and_none_in_keyword_order():
    with pytest.raises(MissingFields) as exc:
        require_fields(email="a@b.cl", phone="  ", center_name=None, plan_id="basico")

    assert exc.value.fields == ["phone", "center_name"]
    assert "phone, center_name" in str(exc.value.detail)


def test_require_fields_accepts_non_string_values():
    require_fields(incident_date=object(), count=0)


def test_normalize_email():
    assert normalize_email("  Clinica@Example.CL ") == "clinica@example.cl"
    assert normalize_email(None) == ""
