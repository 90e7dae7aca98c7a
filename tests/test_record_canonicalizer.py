# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Description: test_record_canonicalizer.py
# -----------------------------------------------------------------------------
import pytest

from canonical.SlateRecordCanonicalizer import (
    build_embedding_text,
    build_location_embedding_text,
    build_organization_embedding_text,
    build_person_embedding_text,
    build_production_embedding_text,
    height_display,
    size_tier,
)
from records.types import (
    LocationRecord,
    OrganizationRecord,
    PersonRecord,
    ProductionRecord,
    RecordKind,
)


def _full_person() -> PersonRecord:
    return PersonRecord(
        name="John Doe",
        headline="Actor",
        bio="Experienced theater performer",
        skills=["acting", "singing"],
        location="Los Angeles, CA",
        age_range=(25, 35),
        gender="male",
        ethnicity=["caucasian"],
        height_cm=180,
        body_type="athletic",
        hair_color="brown",
        eye_color="blue",
        languages=["English", "Spanish"],
        unions=["SAG-AFTRA"],
        experience=["Broadway musical theater", "Regional Shakespeare"],
    )


def test_person_text_contains_labeled_fragments():
    text = build_person_embedding_text(
        PersonRecord(
            name="John Doe",
            headline="Actor",
            age_range=(25, 35),
            location="Los Angeles, CA",
            skills=["acting", "singing"],
        )
    )

    fragments = text.split(". ")
    assert "Name: John Doe" in fragments
    assert "Role: Actor" in fragments
    assert "Age range: 25-35 years old" in fragments
    assert "Location: Los Angeles, CA" in fragments
    assert "Skills and abilities: acting, singing" in fragments


def test_person_text_full_field_order():
    text = build_person_embedding_text(_full_person())

    assert text == (
        "Name: John Doe. Role: Actor. Gender: male. Age range: 25-35 years old. "
        "Ethnicity: caucasian. Height: 180 cm (5'11\"). Build: athletic. Hair: brown. "
        "Eyes: blue. Location: Los Angeles, CA. Skills and abilities: acting, singing. "
        "Languages: English, Spanish. Union membership: SAG-AFTRA. "
        "Background: Experienced theater performer. "
        "Experience: Broadway musical theater. Regional Shakespeare"
    )


def test_person_text_is_deterministic():
    assert build_person_embedding_text(_full_person()) == build_person_embedding_text(_full_person())


def test_person_absent_fields_leave_no_fragments():
    text = build_person_embedding_text(PersonRecord(name="Jane Roe", headline="   ", skills=[]))

    assert text == "Name: Jane Roe"
    for label in ("Role:", "Gender:", "Age range:", "Height:", "Skills and abilities:", "Experience:"):
        assert label not in text


@pytest.mark.parametrize(
    "cm, expected",
    [(180, "180 cm (5'11\")"), (152, "152 cm (5'0\")"), (183, "183 cm (6'0\")")],
)
def test_height_display(cm, expected):
    assert height_display(cm) == expected


@pytest.mark.parametrize(
    "count, tier",
    [(0, "small"), (10, "small"), (11, "medium"), (50, "medium"), (51, "large"), (200, "large"), (201, "enterprise")],
)
def test_size_tier_thresholds(count, tier):
    assert size_tier(count) == tier


def test_organization_text_with_derived_fragments():
    org = OrganizationRecord(
        name="Acme Casting",
        org_type="casting agency",
        description="Boutique casting for indie film",
        services=["casting", "talent scouting"],
        location="New York, NY",
        founded_year=2006,
        employees_count=42,
    )

    text = build_organization_embedding_text(org, current_year=2026)

    assert text == (
        "Organization: Acme Casting. Type: casting agency. Location: New York, NY. "
        "Services: casting, talent scouting. Established 20 years ago (founded 2006). "
        "medium company with 42 employees. Description: Boutique casting for indie film"
    )


def test_organization_minimal_text():
    text = build_organization_embedding_text(OrganizationRecord(name="Solo", org_type="studio"), current_year=2026)
    assert text == "Organization: Solo. Type: studio"


def test_location_text():
    loc = LocationRecord(
        name="Modern Office Space",
        description="Bright, modern office with floor-to-ceiling windows and natural light",
        city="Los Angeles",
        state="CA",
        country="USA",
        amenities=["natural light", "modern furniture"],
        restrictions=["no smoking"],
        max_capacity=50,
        parking_info="Street parking available",
    )

    text = build_location_embedding_text(loc)

    assert "Location: Modern Office Space" in text
    assert "Located in Los Angeles, CA, USA" in text
    assert "Amenities and features: natural light, modern furniture" in text
    assert "Maximum capacity: 50 people" in text
    assert text.endswith("Parking: Street parking available. Restrictions: no smoking")


def test_location_without_optionals():
    loc = LocationRecord(name="Barn", city="Austin", state="TX", country="USA")
    assert build_location_embedding_text(loc) == "Location: Barn. Located in Austin, TX, USA"


def test_production_schedule_variants():
    base = dict(title="Night Shift", production_type="feature film", status="casting")

    both = build_production_embedding_text(ProductionRecord(**base, start_date="2026-11-01", end_date="2027-01-15"))
    start_only = build_production_embedding_text(ProductionRecord(**base, start_date="2026-11-01"))
    end_only = build_production_embedding_text(ProductionRecord(**base, end_date="2027-01-15"))

    assert "Scheduled from 2026-11-01 to 2027-01-15" in both
    assert "Starts on 2026-11-01" in start_only
    assert end_only == "Production: Night Shift. Type: feature film. Status: casting"


def test_production_full_text():
    prod = ProductionRecord(
        title="Night Shift",
        production_type="feature film",
        status="casting",
        description="A thriller set in a hospital",
        location="Atlanta, GA",
        start_date="2026-11-01",
    )
    assert build_production_embedding_text(prod) == (
        "Production: Night Shift. Type: feature film. Status: casting. Starts on 2026-11-01. "
        "Filming location: Atlanta, GA. Description: A thriller set in a hospital"
    )


def test_dispatch_rejects_wrong_record_type():
    with pytest.raises(TypeError):
        build_embedding_text(RecordKind.LOCATION, PersonRecord(name="x"))


def test_dispatch_matches_direct_builder():
    person = _full_person()
    assert build_embedding_text(RecordKind.PERSON, person) == build_person_embedding_text(person)
