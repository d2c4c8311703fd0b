import pytest

from services.exceptions import ClassNotFound, SettingsNotConfigured, UnknownTransportTier
from services.fee_schedule import (
    find_class_fee,
    get_school_settings,
    normalize_transport_tier,
    transport_fee_for,
    transport_fees_payload,
)


@pytest.mark.parametrize("label, tier", [
    ("Below 3KM", "Below 3KM"),
    ("Below 3 km", "Below 3KM"),
    ("below 3km", "Below 3KM"),
    ("3-5KM", "3-5KM"),
    ("3 - 5 km", "3-5KM"),
    ("5-10 km", "5-10KM"),
    ("Above 10 KM", "Above 10KM"),
    ("None", "None"),
    ("none", "None"),
    ("", "None"),
    (None, "None"),
])
def test_normalize_transport_tier(label, tier):
    assert normalize_transport_tier(label) == tier


@pytest.mark.parametrize("label", ["Below 2KM", "10-15KM", "Bus"])
def test_unknown_transport_tier(label):
    with pytest.raises(UnknownTransportTier):
        normalize_transport_tier(label)


def test_both_spellings_map_to_same_fee(school_settings):
    assert transport_fee_for("Below 3KM", school_settings) == 200.0
    assert transport_fee_for("Below 3 km", school_settings) == 200.0
    assert transport_fee_for("3-5 km", school_settings) == 350.0
    assert transport_fee_for("Above 10KM", school_settings) == 600.0


def test_unset_tier_and_no_transport_cost_nothing(school_settings):
    assert transport_fee_for("5-10KM", school_settings) == 0.0
    assert transport_fee_for("None", school_settings) == 0.0


def test_transport_fees_payload_reports_unset_as_zero(school_settings):
    assert transport_fees_payload(school_settings) == {
        "below3": 200.0,
        "between3and5": 350.0,
        "between5and10": 0,
        "above10": 600.0,
    }


def test_find_class_fee(school_settings):
    class_fee = find_class_fee(school_settings, "Class 5")
    assert (class_fee.tuition_fee, class_fee.admission_fee) == (800.0, 600.0)


def test_find_class_fee_missing(school_settings):
    with pytest.raises(ClassNotFound) as exc:
        find_class_fee(school_settings, "Class 11")
    assert "Class 11" in str(exc.value)


def test_get_school_settings(db, school_settings):
    assert get_school_settings(db).school_id == "green-valley"


def test_get_school_settings_when_not_configured(db):
    with pytest.raises(SettingsNotConfigured):
        get_school_settings(db)
