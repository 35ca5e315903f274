#!/usr/bin/env python3
"""
Easy Apply campaign - Main Orchestration
Discovers jobs for one of the profile's positions/locations and applies to each.
"""

import argparse
import csv
import os
import sys
import time
from collections import Counter
from dataclasses import asdict
from datetime import datetime
from zoneinfo import ZoneInfo

import foxyapply.config as config
from foxyapply.apply.campaign import FAILED, INCOMPLETE, SKIPPED, SUCCESS, Campaign
from foxyapply.browser.session import BrowserSession, is_logged_in
from foxyapply.data.profile import load_profile
from foxyapply.debug import unresolved_collector


def format_elapsed_time(seconds):
    """Format elapsed time in human-readable format"""
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        mins = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{mins}m {secs}s"
    else:
        hours = int(seconds // 3600)
        mins = int((seconds % 3600) // 60)
        return f"{hours}h {mins}m"


def write_results_csv(outcomes):
    """Write the per-job outcomes to results/job_results_<timestamp>.csv"""
    os.makedirs(config.RESULTS_DIR, exist_ok=True)

    stamp = datetime.now(ZoneInfo(config.TIMEZONE)).strftime("%Y%m%d_%H%M%S")
    csv_filename = os.path.join(config.RESULTS_DIR, f"job_results_{stamp}.csv")

    with open(csv_filename, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["timestamp", "job_id", "status", "reason"])
        writer.writeheader()
        for outcome in outcomes:
            writer.writerow(asdict(outcome))

    return csv_filename


def print_summary(outcomes):
    counts = Counter(outcome.status for outcome in outcomes)
    print(f"\nProcessed {len(outcomes)} jobs:")
    for status in [SUCCESS, INCOMPLETE, SKIPPED, FAILED]:
        if counts[status] > 0:
            print(f"  {status}: {counts[status]}")


def configure_speed(speed):
    if speed == "dev":
        config.DEV_TEST_SPEED = True
        config.SUPER_DEV_SPEED = False
        print("⚡ DEV_TEST_SPEED enabled\n")
    elif speed == "super":
        config.DEV_TEST_SPEED = False
        config.SUPER_DEV_SPEED = True
        print("⚡⚡ SUPER_DEV_SPEED enabled\n")
    else:
        config.DEV_TEST_SPEED = False
        config.SUPER_DEV_SPEED = False

    # Rebuild TIMING dict after config changes
    config.TIMING = config.get_active_timing()


def build_parser():
    parser = argparse.ArgumentParser(
        description="Easy Apply campaign - discover jobs and submit applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m foxyapply.main --profile profile.json
  python -m foxyapply.main --profile profile.json --speed dev --max-pages 2
  python -m foxyapply.main --profile profile.json --llm-fallback --debug-unresolved

Run login.py once first so the browser profile holds a signed-in session.
        """,
    )
    parser.add_argument("--profile", required=True, help="Applicant profile JSON file")
    parser.add_argument(
        "--speed",
        choices=["dev", "super"],
        help="Speed mode: dev or super (shorter settle pauses)",
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        default=config.MAX_PAGES,
        help=f"Result pages to read before stopping (default {config.MAX_PAGES})",
    )
    parser.add_argument(
        "--max-applications",
        type=int,
        default=config.MAX_APPLICATIONS,
        help=f"Jobs to attempt before stopping (default {config.MAX_APPLICATIONS})",
    )
    parser.add_argument(
        "--llm-fallback",
        action="store_true",
        help="Ask a language model for fields no heuristic recognizes (needs LLM_URL or OPENAI_API_KEY)",
    )
    parser.add_argument(
        "--debug-unresolved",
        action="store_true",
        help="Record fields answered with the default value to debug_unresolved.jsonl",
    )
    parser.add_argument("--headless", action="store_true", help="Run the browser headless")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_pages < 1 or args.max_applications < 1:
        parser.error("--max-pages and --max-applications must be at least 1")

    profile = load_profile(args.profile)
    if not profile.positions or not profile.locations:
        parser.error("profile needs at least one position and one location")

    configure_speed(args.speed)

    if args.debug_unresolved:
        # Clear previous debug log to start fresh
        with open(config.DEBUG_UNRESOLVED_FILE, "w", encoding="utf-8"):
            pass
        unresolved_collector.enable()
        print(f"🔍 Debug mode enabled - recording unresolved fields to {config.DEBUG_UNRESOLVED_FILE}\n")

    fallback = None
    if args.llm_fallback:
        from foxyapply.reasoning.llm_fallback import LLMFallback, resolve_llm_config

        fallback = LLMFallback(resolve_llm_config(), profile)
        print(f"🤖 LLM fallback enabled ({fallback.config.model})\n")

    start_time = time.time()
    session = BrowserSession(headless=args.headless)
    try:
        page = session.launch()
        page.navigate(config.BASE_URL + "/feed/")
        if not is_logged_in(page):
            print("\n⚠️  LinkedIn is asking you to log in!")
            print("Run: python login.py\n")
            return 1
        print("✅ Logged in to LinkedIn")

        campaign = Campaign(
            session,
            page,
            profile,
            fallback=fallback,
            max_pages=args.max_pages,
            max_applications=args.max_applications,
        )
        outcomes = campaign.run()
    finally:
        print("\nClosing browser...")
        session.close()
        if fallback is not None:
            fallback.close()

    print("\n" + "=" * 60)
    print("CAMPAIGN COMPLETE")
    print("=" * 60)
    print_summary(outcomes)
    if outcomes:
        print(f"\n📊 CSV summary written to: {write_results_csv(outcomes)}")
    print(f"⏱️  Total time: {format_elapsed_time(time.time() - start_time)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
