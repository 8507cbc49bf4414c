import pytest

from measurement import RawMeasurement


@pytest.fixture
def scenario_a() -> RawMeasurement:
    return RawMeasurement(
        link_count=3,
        form_count=0,
        button_count=2,
        has_title=True,
        image_count=5,
        is_secure_scheme=True,
        first_contentful_paint=1200,
        largest_contentful_paint=2000,
        time_to_first_byte=500,
        cumulative_layout_shift=0.05,
        dom_content_loaded_at=1500,
        total_elapsed=2200,
    )
