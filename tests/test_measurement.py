import json

import pytest

from measurement import MeasurementError, RawMeasurement, normalize_mode


def test_from_dict_camel_case() -> None:
    raw = RawMeasurement.from_dict({
        "firstContentfulPaint": 1200,
        "cumulativeLayoutShift": 0.05,
        "totalElapsed": 2200,
        "linkCount": 3,
        "hasTitle": True,
        "isSecureScheme": True,
    })
    assert raw.first_contentful_paint == 1200
    assert raw.cumulative_layout_shift == 0.05
    assert raw.total_elapsed == 2200
    assert raw.link_count == 3
    assert raw.has_title is True
    assert raw.is_secure_scheme is True
    # absent fields
    assert raw.largest_contentful_paint is None
    assert raw.page_load_at is None
    assert raw.form_count == 0
    assert raw.image_count == 0


def test_from_dict_attribute_names() -> None:
    raw = RawMeasurement.from_dict({"total_elapsed": 900, "button_count": 2, "time_to_first_byte": 120.5})
    assert raw.total_elapsed == 900
    assert raw.button_count == 2
    assert raw.time_to_first_byte == 120.5


def test_to_dict_uses_wire_names(scenario_a) -> None:
    data = scenario_a.to_dict()
    assert data["firstContentfulPaint"] == 1200
    assert data["pageLoadAt"] is None
    assert RawMeasurement.from_dict(data) == scenario_a


def test_missing_total_elapsed_rejected() -> None:
    with pytest.raises(MeasurementError) as exc:
        RawMeasurement.from_dict({"linkCount": 1})
    assert exc.value.field_name == "totalElapsed"


@pytest.mark.parametrize("payload, field_name", [
    ({"totalElapsed": 100, "linkCount": -1}, "linkCount"),
    ({"totalElapsed": 100, "formCount": 1.5}, "formCount"),
    ({"totalElapsed": 100, "firstContentfulPaint": "fast"}, "firstContentfulPaint"),
    ({"totalElapsed": True}, "totalElapsed"),
])
def test_bad_field_types_rejected(payload, field_name) -> None:
    with pytest.raises(MeasurementError) as exc:
        RawMeasurement.from_dict(payload)
    assert exc.value.field_name == field_name


def test_not_an_object() -> None:
    with pytest.raises(MeasurementError):
        RawMeasurement.from_dict([1, 2, 3])


def test_measurement_is_frozen(scenario_a) -> None:
    with pytest.raises(AttributeError):
        scenario_a.link_count = 0


def test_normalize_mode() -> None:
    assert normalize_mode("mobile") == "mobile"
    assert normalize_mode("desktop") == "desktop"
    assert normalize_mode("tablet") == "desktop"
    assert normalize_mode("Mobile") == "desktop"
    assert normalize_mode(None) == "desktop"


@pytest.mark.parametrize("text, field_name", [
    ('{"totalElapsed": Infinity}', "totalElapsed"),
    ('{"totalElapsed": 100, "firstContentfulPaint": NaN}', "firstContentfulPaint"),
    ('{"totalElapsed": 100, "cumulativeLayoutShift": -Infinity}', "cumulativeLayoutShift"),
])
def test_non_finite_numbers_rejected(text, field_name) -> None:
    with pytest.raises(MeasurementError) as exc:
        RawMeasurement.from_dict(json.loads(text))
    assert exc.value.field_name == field_name
    assert "finite" in exc.value.reason
