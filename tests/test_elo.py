import io
import random

import pytest

from studykit.elo import (
    INITIAL_RATING,
    K_FACTOR,
    DuplicateUserError,
    RatingBook,
    UnknownUserError,
    elo_rating,
    generate_dummy_users,
    main,
)


def test_equal_ratings_pinned():
    assert elo_rating(1000, 1000, 1) == (1008, 992)


@pytest.mark.parametrize("a,b", [(1000, 1000), (1200, 1100), (950, 1400)])
def test_winner_two_mirrors_winner_one(a, b):
    first, second = elo_rating(b, a, 1)
    assert elo_rating(a, b, 2) == (second, first)


@pytest.mark.parametrize("a,b", [(1000, 1000), (1200, 1150), (1100, 1300)])
def test_winner_gains_and_loser_loses(a, b):
    new_a, new_b = elo_rating(a, b, 1)
    assert new_a > a
    assert new_b < b
    assert new_a - a <= K_FACTOR
    assert b - new_b <= K_FACTOR


def test_upset_gains_more_than_expected_win():
    underdog_gain = elo_rating(1000, 1300, 1)[0] - 1000
    favourite_gain = elo_rating(1300, 1000, 1)[0] - 1300
    assert underdog_gain > favourite_gain


@pytest.mark.parametrize("winner", [0, 3, -1])
def test_invalid_winner(winner):
    with pytest.raises(ValueError):
        elo_rating(1000, 1000, winner)


def test_add_user_starts_at_initial_rating():
    book = RatingBook()
    assert book.add_user("alice") == INITIAL_RATING
    assert book.rating("alice") == INITIAL_RATING
    assert "alice" in book


def test_add_existing_user_fails():
    book = RatingBook({"alice": 1200})
    with pytest.raises(DuplicateUserError):
        book.add_user("alice")
    assert book.rating("alice") == 1200


def test_unknown_user_rating():
    with pytest.raises(UnknownUserError):
        RatingBook().rating("nobody")


def test_match_updates_both_users():
    book = RatingBook({"alice": 1200, "bob": 1100})
    expected = elo_rating(1200, 1100, 2)
    assert book.match("alice", "bob", 2) == expected
    assert (book.rating("alice"), book.rating("bob")) == expected


def test_match_with_unknown_user_changes_nothing():
    book = RatingBook({"alice": 1200})
    with pytest.raises(UnknownUserError):
        book.match("alice", "ghost", 1)
    assert book.ratings == {"alice": 1200}


def test_match_with_invalid_winner_changes_nothing():
    book = RatingBook({"alice": 1200, "bob": 1100})
    with pytest.raises(ValueError):
        book.match("alice", "bob", 5)
    assert book.ratings == {"alice": 1200, "bob": 1100}


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "ratings.txt"
    book = RatingBook({"alice": 1200, "bob": 987, "carol": 1500})
    book.save(path)
    assert RatingBook.load(path) == book


def test_load_skips_blank_lines_and_keeps_last(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text("alice 1200\n\nbob 900\nalice 1250\n", encoding="utf-8")
    book = RatingBook.load(path)
    assert book.ratings == {"alice": 1250, "bob": 900}


def test_load_rejects_malformed_line(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text("alice many\n", encoding="utf-8")
    with pytest.raises(ValueError):
        RatingBook.load(path)


def test_generate_continues_numbering(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text("user7 1200\nuser3 1100\n", encoding="utf-8")
    added = generate_dummy_users(path, 20, random.Random(0))
    assert [name for name, _ in added] == [f"user{7 + i}" for i in range(1, 21)]
    assert all(1000 <= score <= 2000 for _, score in added)
    book = RatingBook.load(path)
    assert len(book) == 22
    assert all(book.rating(name) == score for name, score in added)


def test_generate_into_missing_file(tmp_path):
    path = tmp_path / "fresh.txt"
    added = generate_dummy_users(path, 3, random.Random(1))
    assert [name for name, _ in added] == ["user1", "user2", "user3"]
    assert len(path.read_text(encoding="utf-8").splitlines()) == 3


def test_main_adds_user(tmp_path, monkeypatch):
    path = tmp_path / "ratings.txt"
    path.write_text("bob 1100\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nalice\n"))
    assert main(["--log", str(path)]) == 0
    book = RatingBook.load(path)
    assert book.ratings == {"bob": 1100, "alice": INITIAL_RATING}


def test_main_records_match(tmp_path, monkeypatch):
    path = tmp_path / "ratings.txt"
    path.write_text("alice 1200\nbob 1100\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nalice\nbob\n1\n"))
    assert main(["--log", str(path)]) == 0
    book = RatingBook.load(path)
    assert (book.rating("alice"), book.rating("bob")) == elo_rating(1200, 1100, 1)