import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from showdown.cards import HAND_SIZE, parse_hand
from showdown.config import Settings
from showdown.errors import DuplicateCard, InvalidBatchRecord, ParseError
from showdown.hand_evaluator import Outcome, compare, evaluate_cards

logger = logging.getLogger(__name__)


@dataclass
class Tally:
    first_wins: int = 0
    second_wins: int = 0
    ties: int = 0
    skipped: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.FIRST_WINS:
            self.first_wins += 1
        elif outcome is Outcome.SECOND_WINS:
            self.second_wins += 1
        else:
            self.ties += 1

    @property
    def total(self) -> int:
        return self.first_wins + self.second_wins + self.ties


def split_record(line: str, line_no: int = 0) -> tuple[list[str], list[str]]:
    tokens = [t.strip('"') for t in line.split()]
    tokens = [t for t in tokens if t]
    if len(tokens) != 2 * HAND_SIZE:
        raise InvalidBatchRecord(line_no, f"expected {2 * HAND_SIZE} cards, got {len(tokens)}")
    return tokens[:HAND_SIZE], tokens[HAND_SIZE:]


def read_records(path: Union[str, Path]) -> Iterator[tuple[int, str]]:
    with open(path) as f:
        for line_no, line in enumerate(f, 1):
            if line.strip():
                yield line_no, line


def judge_record(line_no: int, line: str, check_duplicates: bool = False) -> Outcome:
    hand1_tokens, hand2_tokens = split_record(line, line_no)
    hand1 = parse_hand(hand1_tokens)
    hand2 = parse_hand(hand2_tokens)
    if check_duplicates:
        seen = set()
        dupes = []
        for card in hand1 + hand2:
            if card in seen:
                dupes.append(card)
            seen.add(card)
        if dupes:
            raise DuplicateCard(dupes)
    return compare(evaluate_cards(hand1), evaluate_cards(hand2))


def _judge_safely(args: tuple[int, str, bool]) -> tuple[int, Optional[Outcome], Optional[ParseError]]:
    line_no, line, check_duplicates = args
    try:
        return line_no, judge_record(line_no, line, check_duplicates), None
    except ParseError as e:
        return line_no, None, e


def run_batch(path: Union[str, Path], settings: Optional[Settings] = None) -> Tally:
    """Compare every hand pair in ``path`` and count the outcomes.

    Each non-blank line holds ten card tokens: five for hand 1, then five
    for hand 2. Bad lines raise on the first one found when
    ``settings.on_error`` is "abort" and are counted as skipped otherwise.
    """
    settings = settings or Settings()
    tally = Tally()
    jobs = ((line_no, line, settings.check_duplicates) for line_no, line in read_records(path))

    if settings.workers > 1:
        logger.debug("Evaluating %s with %d workers", path, settings.workers)
        with ProcessPoolExecutor(max_workers=settings.workers) as pool:
            results = list(pool.map(_judge_safely, jobs, chunksize=64))
    else:
        results = map(_judge_safely, jobs)

    for line_no, outcome, error in results:
        if error is not None:
            if settings.on_error == "abort":
                logger.debug("Aborting at line %d: %s", line_no, error)
                raise error
            logger.warning("Skipping line %d: %s", line_no, error)
            tally.skipped += 1
            continue
        tally.record(outcome)

    logger.info(
        "Compared %d hand pairs from %s (%d skipped)", tally.total, path, tally.skipped
    )
    return tally
