"""Text field resolution logic"""

from foxyapply.debug.unresolved_collector import record_unresolved_field

PHONE_KEYWORDS = ("phone", "mobile", "telephone", "contact")
LOCATION_KEYWORDS = ("city", "location", "reside")
SALARY_KEYWORDS = ("salary", "wage", "income", "compensation")
LINKEDIN_KEYWORDS = ("linkedin", "linked-in", "linked in")


def contains_any(text, keywords):
    return any(kw in text for kw in keywords)


def resolve_field_value(label_text, input_type, profile, fallback=None):
    """
    Pure function (apart from the optional fallback call): given a field's
    label and input type, return the text to type into it.

    First match wins, more specific cues before generic ones:
      1. phone / mobile / telephone / contact -> phone number
      2. city / location / reside             -> "City, ST"
      3. "have you ever worked"               -> "No"
      4. state                                -> state
      5. salary / wage / income / compensation-> desired salary
      6. experience + year                    -> years of experience
      7. linkedin / linked-in / linked in     -> profile URL
      8. input type "number"                  -> years of experience
      9. fallback(label_text, input_type)     -> its answer, if non-empty
     10. default                              -> years of experience

    Rules 1, 4 and 7 hand back the profile value as stored, so a sparse
    profile can produce an empty answer for them; every other rule yields text.
    """
    label = (label_text or "").strip().lower()
    kind = (input_type or "").strip().lower()
    years = str(profile.years_experience)

    if contains_any(label, PHONE_KEYWORDS):
        return profile.phone_number
    if contains_any(label, LOCATION_KEYWORDS):
        return f"{profile.city}, {profile.state}"
    if "have you ever worked" in label:
        return "No"
    if "state" in label:
        return profile.state
    if contains_any(label, SALARY_KEYWORDS):
        return str(profile.desired_salary)
    if "experience" in label and "year" in label:
        return years
    if contains_any(label, LINKEDIN_KEYWORDS):
        return profile.profile_url

    if kind == "number":
        return years

    if fallback is not None:
        try:
            answer = fallback(label_text, input_type)
            answer = str(answer).strip() if answer is not None else ""
        except Exception as e:
            print(f"  ⚠️ Fallback resolver failed for '{label_text}': {e}")
            answer = ""
        if answer:
            return answer

    record_unresolved_field(label_text=label_text, input_type=input_type, answer=years)
    return years
