"""Timing utilities"""

import time
import random

import foxyapply.config as config


def human_delay(min_ms=300, max_ms=800):
    """Random human-like delay"""
    delay = random.uniform(min_ms, max_ms) / 1000
    time.sleep(delay)


def form_pause():
    """Randomized pause between wizard polls, bounded by the active timing profile"""
    human_delay(config.TIMING["form_pause_min"], config.TIMING["form_pause_max"])


def pause(ms):
    """Fixed pause in milliseconds"""
    time.sleep(ms / 1000)
