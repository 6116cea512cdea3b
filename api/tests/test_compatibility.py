import itertools

import pytest

from friendfinder.services.compatibility import (
    age_score,
    calculate_match_percentage,
    education_score,
    hobbies_score,
    job_score,
    lifestyle_score,
    location_score,
    normalize_interests,
    score_profiles,
)


def _profile(**overrides):
    base = {
        "interests": ["Music", "Travel"],
        "job_title": "Software Engineer",
        "age": 30,
        "location": "Austin, TX",
        "lifestyle": {"drinking": "Socially", "smoking": "Never", "exercise": "Often", "pets": "Dog"},
        "education": "Bachelor's Degree",
    }
    base.update(overrides)
    return base


def _dissimilar_pair():
    a = _profile(
        interests=["Hiking"],
        job_title="Nurse",
        age=25,
        location="Austin, TX",
        lifestyle={"drinking": "Never", "smoking": "Never"},
        education="PhD",
    )
    b = _profile(
        interests=["Gaming"],
        job_title="Chef",
        age=45,
        location="Denver, CO",
        lifestyle={"drinking": "Often", "smoking": "Regularly"},
        education="High School",
    )
    return a, b


def test_identical_profiles_score_100_and_compatible():
    result = score_profiles(_profile(), _profile())
    assert result.score == 100
    assert result.compatible is True
    assert result.to_dict()["breakdown"] == {
        "hobbies": 100.0,
        "job": 100.0,
        "age": 100.0,
        "location": 100.0,
        "lifestyle": 100.0,
        "education": 100.0,
    }


def test_dissimilar_profiles_score_low_and_incompatible():
    a, b = _dissimilar_pair()
    result = score_profiles(a, b)
    assert result.breakdown.hobbies == 0.0
    assert result.breakdown.job == 0.0
    assert result.breakdown.age == 10.0
    assert result.breakdown.location == 30.0
    assert result.breakdown.lifestyle == 0.0
    assert result.breakdown.education == 20.0
    assert result.score == 5
    assert result.compatible is False


def test_partial_overlap_weighted_total():
    a = _profile(interests=["Music", "Travel", "Cooking"], job_title="Teacher", age=30,
                 location="Austin, TX", lifestyle={}, education=None)
    b = _profile(interests=["music", "Hiking"], job_title="Teacher", age=33,
                 location="Dallas, TX", lifestyle={}, education="College")
    result = score_profiles(a, b)
    assert result.breakdown.hobbies == 25.0
    assert result.breakdown.age == 60.0
    assert result.breakdown.location == 50.0
    assert result.breakdown.lifestyle == 50.0
    assert result.breakdown.education == 0.0
    assert result.score == 36
    assert calculate_match_percentage(a, b) == 36


def test_empty_profiles_are_neutral():
    result = score_profiles({}, {})
    assert result.to_dict()["breakdown"] == {
        "hobbies": 50.0,
        "job": 50.0,
        "age": 50.0,
        "location": 50.0,
        "lifestyle": 50.0,
        "education": 50.0,
    }
    assert result.score == 50
    assert result.compatible is False


def test_null_collections_treated_as_empty():
    result = score_profiles({"interests": None, "lifestyle": None}, {"interests": None, "lifestyle": None})
    assert result.breakdown.hobbies == 50.0
    assert result.breakdown.lifestyle == 50.0


def test_hobbies_identical_disjoint_and_empty():
    assert hobbies_score(["Music", "Travel"], ["Music", "Travel"]) == 100.0
    assert hobbies_score(["Music"], ["Travel"]) == 0.0
    assert hobbies_score([], []) == 50.0
    assert hobbies_score(None, None) == 50.0
    assert hobbies_score(["Music"], []) == 0.0
    assert hobbies_score([], ["Music"]) == 0.0


def test_hobbies_jaccard_percentage():
    assert hobbies_score(["a", "b", "c"], ["b", "c", "d"]) == 50.0


def test_hobbies_normalization_accepts_objects_and_ignores_blanks():
    assert normalize_interests([" Music ", {"name": "TRAVEL"}, "", "   ", {"name": None}, None]) == {"music", "travel"}
    assert hobbies_score([{"name": "Music"}, "Travel "], ["music", "travel"]) == 100.0
    assert hobbies_score(["", "  "], []) == 50.0


def test_job_rules():
    assert job_score(None, None) == 50.0
    assert job_score("Teacher", None) == 0.0
    assert job_score("", "Teacher") == 0.0
    assert job_score("Software Engineer", " software engineer ") == 100.0
    assert job_score("Engineer", "Software Engineer") == 50.0
    assert job_score("Software Developer", "Technology Consultant") == 50.0
    assert job_score("Doctor", "Teacher") == 0.0


def test_job_falls_back_to_job_field():
    a = {"job": "Nurse"}
    b = {"jobTitle": "Nurse"}
    assert score_profiles(a, b).breakdown.job == 100.0


@pytest.mark.parametrize(
    "other_age,expected",
    [(30, 100.0), (32, 80.0), (35, 60.0), (40, 40.0), (45, 20.0), (46, 10.0), (70, 10.0)],
)
def test_age_steps(other_age, expected):
    assert age_score(30, other_age) == expected


def test_age_missing_is_neutral_on_either_side():
    assert age_score(None, 30) == 50.0
    assert age_score(30, None) == 50.0
    assert age_score(None, None) == 50.0
    assert age_score(0, 30) == 50.0


@pytest.mark.parametrize(
    "loc_a,loc_b,expected",
    [
        ("Austin, TX", "Austin, TX", 100.0),
        ("Austin, TX", "austin, tx ", 100.0),
        ("Austin, TX", "Austin, CA", 70.0),
        ("Austin, TX", "Dallas, TX", 50.0),
        ("Austin, TX", "Denver, CO", 30.0),
        ("Austin", "Dallas", 30.0),
        ("Austin, TX", "Austin", 70.0),
        ("Austin,", "Dallas,", 30.0),
        (None, None, 50.0),
        ("Austin, TX", None, 0.0),
    ],
)
def test_location_rules(loc_a, loc_b, expected):
    assert location_score(loc_a, loc_b) == expected


def test_lifestyle_counts_only_factors_present_on_both_sides():
    a = {"drinking": "Never", "smoking": "Never"}
    b = {"drinking": "never", "smoking": "Often", "pets": "Cat"}
    assert lifestyle_score(a, b) == 50.0
    assert lifestyle_score({"drinking": "Never"}, {"pets": "Cat"}) == 50.0
    assert lifestyle_score(None, {}) == 50.0
    assert lifestyle_score({"drinking": ""}, {"drinking": "Never"}) == 50.0


def test_education_rules():
    assert education_score(None, None) == 50.0
    assert education_score("College", None) == 0.0
    assert education_score("Bachelor of Science", "bachelor of science ") == 100.0
    assert education_score("Bachelor of Science", "Master of Arts") == 60.0
    assert education_score("High School", "Trade School") == 60.0
    assert education_score("PhD", "High School") == 20.0


def _sample_profiles():
    a, b = _dissimilar_pair()
    return [
        _profile(),
        a,
        b,
        {},
        _profile(interests=[{"name": "Music"}, "Cooking"], age=None, location="Austin"),
        _profile(job_title=None, job="Graphic Designer", lifestyle=None, education="University"),
    ]


def test_scores_are_bounded_and_symmetric():
    for a, b in itertools.product(_sample_profiles(), repeat=2):
        forward = score_profiles(a, b)
        backward = score_profiles(b, a)
        assert isinstance(forward.score, int)
        assert 0 <= forward.score <= 100
        for value in forward.to_dict()["breakdown"].values():
            assert 0.0 <= value <= 100.0
        assert forward == backward


def test_repeated_calls_are_identical():
    a, b = _dissimilar_pair()
    results = [score_profiles(a, b) for _ in range(3)]
    assert results[0] == results[1] == results[2]


def test_total_is_clamped_for_out_of_range_weights():
    heavy = {name: 2.0 for name in ("hobbies", "job", "age", "location", "lifestyle", "education")}
    negative = {name: -1.0 for name in heavy}
    assert score_profiles(_profile(), _profile(), weights=heavy).score == 100
    assert score_profiles(_profile(), _profile(), weights=negative).score == 0


def test_total_rounds_half_up():
    assert score_profiles(_profile(), _profile(), weights={"hobbies": 0.005}).score == 1
    assert score_profiles(_profile(), _profile(), weights={"hobbies": 0.025}).score == 3


def test_compatible_threshold_boundary():
    assert score_profiles(_profile(), _profile(), weights={"hobbies": 0.70}).compatible is True
    assert score_profiles(_profile(), _profile(), weights={"hobbies": 0.69}).compatible is False
    a, b = _dissimilar_pair()
    assert score_profiles(a, b, threshold=5).compatible is True
