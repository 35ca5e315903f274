import json

from foxyapply.data.profile import ApplicantProfile, load_profile


def test_load_profile_maps_store_fields(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(
        json.dumps(
            {
                "email": "applicant@example.com",
                "phoneNumber": "555-0100",
                "positions": ["Backend Engineer", "Platform Engineer"],
                "locations": ["Austin, TX"],
                "remoteOnly": True,
                "profileUrl": "https://www.linkedin.com/in/applicant",
                "yearsExperience": 7,
                "userCity": "Austin",
                "userState": "TX",
                "zipCode": "78701",
                "desiredSalary": 150000,
            }
        )
    )

    profile = load_profile(path)

    assert profile.phone_number == "555-0100"
    assert profile.positions == ["Backend Engineer", "Platform Engineer"]
    assert profile.remote_only is True
    assert profile.years_experience == 7
    assert (profile.city, profile.state, profile.zip_code) == ("Austin", "TX", "78701")
    assert profile.desired_salary == 150000


def test_missing_fields_default_to_empty():
    profile = ApplicantProfile.from_dict({"positions": None, "yearsExperience": None})
    assert profile.positions == []
    assert profile.locations == []
    assert profile.years_experience == 0
    assert profile.phone_number == ""
