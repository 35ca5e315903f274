"""Applicant profile - read-only facts the resolver answers from"""

import json
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ApplicantProfile:
    phone_number: str = ""
    positions: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)
    remote_only: bool = False
    profile_url: str = ""
    years_experience: int = 0
    city: str = ""
    state: str = ""
    zip_code: str = ""
    desired_salary: int = 0
    email: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build a profile from the store's camelCase record. Missing keys default to empty."""
        return cls(
            phone_number=data.get("phoneNumber") or "",
            positions=list(data.get("positions") or []),
            locations=list(data.get("locations") or []),
            remote_only=bool(data.get("remoteOnly", False)),
            profile_url=data.get("profileUrl") or "",
            years_experience=int(data.get("yearsExperience") or 0),
            city=data.get("userCity") or "",
            state=data.get("userState") or "",
            zip_code=data.get("zipCode") or "",
            desired_salary=int(data.get("desiredSalary") or 0),
            email=data.get("email") or "",
        )


def load_profile(path):
    """Load an applicant profile from a JSON file"""
    with open(path, "r", encoding="utf-8") as f:
        return ApplicantProfile.from_dict(json.load(f))
