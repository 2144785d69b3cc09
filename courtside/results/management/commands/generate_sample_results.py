"""
Management command to print random, valid match results.

Useful to eyeball score lines for each match format and to produce demo data
for the result tables.
"""

import random

from django.core.management.base import BaseCommand, CommandError
from faker import Faker

from courtside.result_core.display import format_score_summary
from courtside.result_core.structure import (
    DoublesParticipants,
    MatchFormat,
    Side,
    SinglesParticipants,
)
from courtside.result_core.validation import validate
from courtside.results.builder import simulate_match_result
from courtside.results.record_to_row import record_to_row


class Command(BaseCommand):
    help = "Generate random match results and print their score lines"

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            choices=[f.value for f in MatchFormat],
            default=MatchFormat.STANDARD_BO3.value,
            help="Match format (default: standard-bo3)",
        )
        parser.add_argument(
            "--count",
            type=int,
            default=5,
            help="Number of results to generate (default: 5)",
        )
        parser.add_argument(
            "--doubles",
            action="store_true",
            help="Generate doubles results (team labels instead of player ids)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Random seed for reproducible output",
        )
        parser.add_argument(
            "--locale",
            type=str,
            default="en_US",
            help="Faker locale for player names (default: en_US)",
        )
        parser.add_argument(
            "--rows",
            action="store_true",
            help="Also print the stored row of each result",
        )

    def handle(self, *args, **options):
        if options["count"] < 1:
            raise CommandError("--count must be at least 1")

        match_format = MatchFormat(options["format"])
        rng = random.Random(options["seed"])
        fake = Faker(options["locale"])
        if options["seed"] is not None:
            fake.seed_instance(options["seed"])

        for _ in range(options["count"]):
            if options["doubles"]:
                home = f"{fake.last_name()} / {fake.last_name()}"
                away = f"{fake.last_name()} / {fake.last_name()}"
                participants = DoublesParticipants()
            else:
                home = fake.name()
                away = fake.name()
                participants = SinglesParticipants(
                    home_id=fake.uuid4(), away_id=fake.uuid4()
                )

            record = simulate_match_result(match_format, participants, rng)
            outcome = validate(record)
            if not outcome:
                raise CommandError(f"Generated an invalid result: {outcome.rejection}")

            winner_name = home if record.winner is Side.HOME else away
            self.stdout.write(
                f"{home} vs {away}: {winner_name} wins {record.result_code} "
                f"({format_score_summary(record)})"
            )
            if options["rows"]:
                row = record_to_row(record)
                filled = {k: v for k, v in row.items() if v is not None}
                self.stdout.write(f"  {filled}")

        self.stdout.write(
            self.style.SUCCESS(f"✓ Generated {options['count']} {match_format.value} results")
        )
