#!/usr/bin/env python3
"""
LinkedIn Login Helper
Opens the bot's browser profile and waits for you to log into LinkedIn.
Press Ctrl+C when done to save the session.
"""

import sys

import foxyapply.config as config
from foxyapply.browser.session import BrowserSession, is_logged_in
from foxyapply.utils.timing import pause


def main():
    print("Opening browser for LinkedIn login...")
    print("=" * 50)
    print("Instructions:")
    print("1. Log into LinkedIn in the browser that opens")
    print("2. Visit a job search page to verify access")
    print("3. Press Ctrl+C in this terminal when ready")
    print("4. Your session will be saved for future campaign runs")
    print("=" * 50)

    session = BrowserSession()
    try:
        page = session.launch()

        print("\nNavigating to LinkedIn...")
        page.navigate(config.LOGIN_URL)

        print("\n✓ Browser is open. Waiting for login (Ctrl+C to finish)...\n")

        # Poll until the user presses Ctrl+C
        announced = False
        while True:
            if not announced and is_logged_in(page, timeout_ms=5000):
                print("  ✓ Signed-in session detected - press Ctrl+C to save and exit")
                announced = True
            pause(5000)
    except KeyboardInterrupt:
        print("\n\n✓ Session saved! You can now run the campaign.")
        print("Run: python -m foxyapply.main --profile profile.json\n")
        return 0
    except Exception as e:
        print(f"\n✗ Error: {e}\n")
        return 1
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
