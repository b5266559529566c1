#!/usr/bin/env python3
"""
LifeScore Engine Demo

Demonstrates the complete pipeline:
1. Load user records from CSV
2. Calculate LifeScores
3. Estimate global standing (through the cache)
4. Classify score levels
5. Build a leaderboard

Usage:
    python demo.py [csv_file]
    python demo.py  # Uses sample users file
"""

import json
import sys
from pathlib import Path

from lifescore.classifiers.score_level_classifier import ScoreLevelClassifier
from lifescore.parsers.user_csv_parser import UserCSVParser
from lifescore.scoring.leaderboard import build_leaderboard, get_country_rank
from lifescore.scoring.score_calculator import format_score_breakdown
from lifescore.scoring.standing_service import StandingService
from lifescore.storage.kv_store import InMemoryKeyValueStore
from lifescore.storage.standing_cache import StandingCache


def main(csv_path: str = None):
    """Run the demo pipeline."""
    print("=" * 50)
    print("LifeScore Engine Demo")
    print("=" * 50)
    print()

    # Use sample file if none provided
    if csv_path is None:
        csv_path = Path(__file__).parent / "tests" / "fixtures" / "sample_users.csv"
        print(f"Using sample file: {csv_path.name}")
    else:
        csv_path = Path(csv_path)

    if not csv_path.exists():
        print(f"Error: File not found: {csv_path}")
        return 1

    # =========================================================================
    # Step 1: Load users
    # =========================================================================
    print()
    print("[1] Loading users...")

    parser = UserCSVParser()
    try:
        users = parser.parse(csv_path)
    except ValueError as e:
        print(f"    Error parsing CSV: {e}")
        return 1

    print(f"    -> Loaded {len(users)} users")
    if parser.warnings:
        print(f"    -> Warnings: {len(parser.warnings)}")

    # =========================================================================
    # Steps 2-4: Score, estimate standing, classify
    # =========================================================================
    print()
    print("[2] Scoring users...")

    service = StandingService(StandingCache(InMemoryKeyValueStore()))
    classifier = ScoreLevelClassifier()

    for user in users:
        breakdown, standing = service.resolve(user)
        level = classifier.classify(breakdown.total_life_score)

        print()
        print(f"    {user.name or user.id} ({user.country or 'unknown country'})")
        print(f"    -> {format_score_breakdown(breakdown)}")
        print(f"    -> Level: {level.level} - {level.description}")
        print(f"    -> {standing.global_rank_estimate} (top {100 - standing.percentile}%)")
        print(f"    -> Global rank: #{standing.global_rank:,}")
        if user.country:
            rank = get_country_rank(breakdown.total_life_score, user.country)
            print(f"    -> Rank in {user.country}: #{rank:,}")
        for fact in standing.facts:
            print(f"       * {fact}")

    # =========================================================================
    # Step 5: Leaderboard
    # =========================================================================
    print()
    print("[3] Leaderboard...")

    entries = build_leaderboard(users)
    for entry in entries:
        print(f"    #{entry.rank} {entry.name or entry.user_id}: "
              f"{entry.total_life_score:,.0f} XP ({entry.level})")

    # =========================================================================
    # Summary
    # =========================================================================
    print()
    print("Leaderboard (JSON):")
    print("-" * 30)
    print(json.dumps([entry.to_dict() for entry in entries], indent=2))

    return 0


if __name__ == "__main__":
    csv_file = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(main(csv_file))
