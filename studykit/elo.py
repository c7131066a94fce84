"""Elo ratings for one-on-one matches, kept in a plain-text rating log."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

K_FACTOR = 16
INITIAL_RATING = 1000
DEFAULT_LOG = "rating_log.txt"
DUMMY_SCORE_MIN = 1000
DUMMY_SCORE_SPAN = 1001

_USER_NUMBER = re.compile(r"user(\d+)")


class UnknownUserError(LookupError):
    """Raised when a user is not in the rating book."""


class DuplicateUserError(ValueError):
    """Raised when adding a user who already has a rating."""


def _check_winner(winner: int) -> None:
    if winner not in (1, 2):
        raise ValueError(f"winner must be 1 or 2, not {winner!r}")


def elo_rating(rating1: int, rating2: int, winner: int) -> tuple[int, int]:
    """Return both players' ratings after a match won by player 1 or 2."""
    _check_winner(winner)
    expected1 = 1.0 / (1.0 + 10 ** ((rating2 - rating1) / 400.0))
    expected2 = 1.0 / (1.0 + 10 ** ((rating1 - rating2) / 400.0))
    score1, score2 = (1, 0) if winner == 1 else (0, 1)
    return (
        int(rating1 + K_FACTOR * (score1 - expected1)),
        int(rating2 + K_FACTOR * (score2 - expected2)),
    )


@dataclass
class RatingBook:
    """Ratings of users by name."""

    ratings: dict[str, int] = field(default_factory=dict)

    def __contains__(self, username: object) -> bool:
        return username in self.ratings

    def __len__(self) -> int:
        return len(self.ratings)

    @classmethod
    def load(cls, path: str | Path) -> RatingBook:
        """Read a log of "name score" lines; later lines override earlier ones."""
        book = cls()
        with open(path, encoding="utf-8") as log:
            for number, line in enumerate(log, start=1):
                fields = line.split()
                if not fields:
                    continue
                try:
                    book.ratings[fields[0]] = int(fields[1])
                except (IndexError, ValueError):
                    raise ValueError(
                        f"{path}:{number}: expected a name and an integer score"
                    ) from None
        return book

    def save(self, path: str | Path) -> None:
        """Write every rating as a "name score" line, replacing the file."""
        with open(path, "w", encoding="utf-8") as log:
            for username, score in self.ratings.items():
                log.write(f"{username} {score}\n")

    def add_user(self, username: str) -> int:
        """Add a new user at the initial rating and return that rating."""
        if username in self.ratings:
            raise DuplicateUserError(f"user {username!r} already exists")
        self.ratings[username] = INITIAL_RATING
        return INITIAL_RATING

    def rating(self, username: str) -> int:
        """Return a user's current rating."""
        try:
            return self.ratings[username]
        except KeyError:
            raise UnknownUserError(f"user {username!r} does not exist") from None

    def match(self, user1: str, user2: str, winner: int) -> tuple[int, int]:
        """Record a match won by user 1 or 2 and return both new ratings."""
        new_ratings = elo_rating(self.rating(user1), self.rating(user2), winner)
        self.ratings[user1], self.ratings[user2] = new_ratings
        return new_ratings


def generate_dummy_users(
    path: str | Path, count: int = 20, rng: random.Random | None = None
) -> list[tuple[str, int]]:
    """Append numbered dummy users with random scores to a rating log.

    Numbering continues after the highest "user<N>" already in the log.
    The appended (name, score) pairs are returned.
    """
    rng = rng if rng is not None else random.Random()
    highest = 0
    try:
        with open(path, encoding="utf-8") as log:
            for line in log:
                found = _USER_NUMBER.search(line)
                if found:
                    highest = max(highest, int(found.group(1)))
    except FileNotFoundError:
        pass

    added = [
        (f"user{highest + i}", DUMMY_SCORE_MIN + rng.randrange(DUMMY_SCORE_SPAN))
        for i in range(1, count + 1)
    ]
    with open(path, "a", encoding="utf-8") as log:
        for username, score in added:
            log.write(f"{username} {score}\n")
    return added


def _words(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(words: Iterator[str]) -> int | None:
    try:
        return int(next(words))
    except (StopIteration, ValueError):
        return None


def _play(book: RatingBook, words: Iterator[str]) -> None:
    print(
        "원하는 기능을 선택하세요:\n1. 신규 유저 추가\n2. 매치 후 점수 조정\n3. 점수 조회"
    )
    choice = _next_int(words)

    if choice == 1:
        print("신규 유저 이름을 입력하세요: ", end="")
        username = next(words, "")
        try:
            book.add_user(username)
        except DuplicateUserError:
            print("이미 존재하는 사용자입니다.")
        else:
            print(f"{username} 사용자가 추가되었습니다. 초기 점수는 1000점입니다.")
    elif choice == 2:
        print("첫 번째 사용자 이름: ", end="")
        user1 = next(words, "")
        print("두 번째 사용자 이름: ", end="")
        user2 = next(words, "")
        if user1 not in book or user2 not in book:
            print("존재하지 않는 유저입니다.")
            return
        print(
            f"승자를 입력하세요. {user1}이 이겼다면 1, {user2}이 이겼다면 2: ", end=""
        )
        winner = _next_int(words)
        if winner not in (1, 2):
            print("잘못된 입력입니다.")
            return
        first, second = book.match(user1, user2, winner)
        print(f"{user1}의 새로운 점수: {first}")
        print(f"{user2}의 새로운 점수: {second}")
    elif choice == 3:
        print("유저 명을 입력하세요: ", end="")
        username = next(words, "")
        try:
            score = book.rating(username)
        except UnknownUserError:
            print("존재하지 않는 사용자입니다.")
        else:
            print(f"{username}의 현재 점수는 {score}점입니다.")
    else:
        print("잘못된 선택입니다.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one rating operation against the log, or fill it with dummy users."""
    parser = argparse.ArgumentParser(
        prog="studykit-elo", description="Elo match-making ratings."
    )
    parser.add_argument(
        "command", nargs="?", choices=("play", "generate"), default="play"
    )
    parser.add_argument("--log", default=DEFAULT_LOG, help="rating log file")
    parser.add_argument(
        "--count", type=int, default=20, help="dummy users to generate"
    )
    args = parser.parse_args(argv)

    if args.command == "generate":
        try:
            generate_dummy_users(args.log, args.count)
        except OSError:
            print("파일을 열 수 없습니다.", file=sys.stderr)
            return 1
        print(
            f"새로운 {args.count}명의 더미 유저 데이터가 {args.log} 파일에 추가되었습니다."
        )
        return 0

    try:
        book = RatingBook.load(args.log)
    except FileNotFoundError:
        print("파일을 열 수 없습니다.", file=sys.stderr)
        book = RatingBook()

    _play(book, _words(sys.stdin))
    book.save(args.log)
    return 0


if __name__ == "__main__":
    sys.exit(main())