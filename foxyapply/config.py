"""Configuration and timing profiles for the Easy Apply campaign"""

# ========================================
# SPEED MODE CONFIGURATION
# ========================================
# Choose one mode (set all others to False):
# - DEV_TEST_SPEED: shorter settle pauses for local testing
# - SUPER_DEV_SPEED: shortest pauses that still let the feed render
# - Production: All False (default, safest)

DEV_TEST_SPEED = False
SUPER_DEV_SPEED = False

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in milliseconds (ms)

TIMING_PROFILES = {
    "default": {
        # Pause between wizard polls (and on engine exit)
        "form_pause_min": 1500,
        "form_pause_max": 2500,
        # Pause after each scroll step over the results feed
        "scroll_pause": 2000,
        # Settle time after navigating to a search page / job page
        "search_settle": 1000,
        "job_settle": 2000,
        # Per-keystroke typing delay
        "key_delay_min": 50,
        "key_delay_max": 150,
    },
    "dev_test": {
        "form_pause_min": 1000,
        "form_pause_max": 1600,
        "scroll_pause": 1200,
        "search_settle": 700,
        "job_settle": 1400,
        "key_delay_min": 40,
        "key_delay_max": 90,
    },
    "super_dev": {
        "form_pause_min": 600,
        "form_pause_max": 900,
        "scroll_pause": 800,
        "search_settle": 500,
        "job_settle": 1000,
        "key_delay_min": 25,
        "key_delay_max": 50,
    },
}


def get_active_timing():
    """Get the active timing profile based on current speed mode settings"""
    if SUPER_DEV_SPEED:
        return TIMING_PROFILES["super_dev"]
    elif DEV_TEST_SPEED:
        return TIMING_PROFILES["dev_test"]
    else:
        return TIMING_PROFILES["default"]


TIMING = get_active_timing()

# ========================================
# SAFETY VALIDATIONS
# ========================================
# The feed and the wizard render asynchronously; below these floors the
# next query runs against half-rendered markup.
_MIN_KEY_DELAY_MS = 25
_MIN_SCROLL_PAUSE_MS = 500
_MIN_FORM_PAUSE_MS = 500

_violations = []

for _name, _profile in TIMING_PROFILES.items():
    if _profile["key_delay_min"] < _MIN_KEY_DELAY_MS:
        _violations.append(f"{_name}.key_delay_min < {_MIN_KEY_DELAY_MS}ms minimum")
    if _profile["scroll_pause"] < _MIN_SCROLL_PAUSE_MS:
        _violations.append(f"{_name}.scroll_pause < {_MIN_SCROLL_PAUSE_MS}ms minimum")
    if _profile["form_pause_min"] < _MIN_FORM_PAUSE_MS:
        _violations.append(f"{_name}.form_pause_min < {_MIN_FORM_PAUSE_MS}ms minimum")
    if _profile["form_pause_min"] > _profile["form_pause_max"]:
        _violations.append(f"{_name}.form_pause_min > form_pause_max")

if _violations:
    print("⚠️ TIMING PROFILE VIOLATIONS - Falling back to default profile:")
    for violation in _violations:
        print(f"  - {violation}")
    TIMING = TIMING_PROFILES["default"]
    DEV_TEST_SPEED = False
    SUPER_DEV_SPEED = False

# ========================================
# SITE / BROWSER
# ========================================
BASE_URL = "https://www.linkedin.com"
SEARCH_URL = BASE_URL + "/jobs/search/"
JOB_VIEW_URL = BASE_URL + "/jobs/view/{job_id}"
LOGIN_URL = BASE_URL + "/login"

BROWSER_DATA_DIR = "./browser_data"
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"

# ========================================
# DISCOVERY
# ========================================
JOBS_PER_PAGE = 25
SCROLL_STEPS = 14
SCROLL_DELTA_PX = 200

RESULTS_CONTAINER_SELECTOR = ".scaffold-layout__list"
JOB_CARD_SELECTOR = "div[data-job-id]"
JOB_LINK_SELECTOR = "a.job-card-container__link"

# ========================================
# WIZARD
# ========================================
MAX_FORM_ITERATIONS = 15

# Lookup budgets (ms)
PRESENCE_TIMEOUT = 4000
CLICK_TIMEOUT = 2000
LABEL_TIMEOUT = 300
ANCESTOR_LEVELS = 4

EASY_APPLY_ENTRY_XPATH = '//*[contains(@aria-label, "Easy Apply to")]'
NEXT_BUTTON_SELECTOR = "button[aria-label='Continue to next step']"
REVIEW_BUTTON_SELECTOR = "button[aria-label='Review your application']"
FOLLOW_LABEL_SELECTOR = "label[for='follow-company-checkbox']"
SUBMIT_BUTTON_SELECTOR = "button[aria-label='Submit application']"
ERROR_ICON_SELECTOR = ".artdeco-inline-feedback__icon"
MODAL_HOST_SELECTOR = ".jobs-easy-apply-modal"

# Auto-generated ids of single-line text inputs inside the wizard
TEXT_INPUT_ID_PREFIX = "single-line-text-form-component-formElement-urn-li-jobs-applyformcommon-easyApplyFormElement-"

LOGGED_IN_SELECTOR = "#caret-small"

# ========================================
# CAMPAIGN
# ========================================
# The site never signals "last page" except by an empty feed; these caps
# bound a run explicitly.
MAX_PAGES = 10
MAX_APPLICATIONS = 100

# ========================================
# OUTPUT
# ========================================
LOG_FILE = "log.jsonl"
FIELD_LOG_FILE = "fields.jsonl"
DEBUG_UNRESOLVED_FILE = "debug_unresolved.jsonl"
RESULTS_DIR = "results"
TIMEZONE = "America/Detroit"

# ========================================
# STARTUP LOGGING
# ========================================
if DEV_TEST_SPEED:
    print("\n" + "=" * 60)
    print("⚙️  DEV TEST SPEED MODE ENABLED")
    print("=" * 60)
    print("For production use, set DEV_TEST_SPEED = False in config.py")
    print("=" * 60 + "\n")
