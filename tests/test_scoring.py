"""
Tests for heuristic scorers and score aggregation.

Run with: pytest tests/
"""

import random
import string

import pytest

from pwd_strength.blacklist import BlacklistStore, get_store
from pwd_strength.errors import BlacklistNotInitializedError
from pwd_strength.models import HeuristicSignal, PasswordStrength, SignalCategory
from pwd_strength.scoring.calculator import (
    BASE_SCORE,
    STRENGTH_THRESHOLDS,
    ScoreAggregator,
    strength_for,
)
from pwd_strength.scoring.heuristics import (
    BLACKLIST_PENALTY,
    MAX_LENGTH_SCORE,
    MAX_POSITIVE_SCORE,
    MAX_VARIETY_SCORE,
    find_patterns,
    run_scorers,
    score_blacklist,
    score_length,
    score_patterns,
    score_uniqueness,
    score_variety,
)

SYMBOLS = "!#%&*+-=?_~"


def signal(contribution, category=SignalCategory.LENGTH):
    return HeuristicSignal(category=category, contribution=contribution)


def random_password(rng, length, pools):
    """Build a password with one char from each pool and no weak patterns."""
    alphabet = "".join(pools)
    while True:
        chars = [rng.choice(pool) for pool in pools]
        chars += [rng.choice(alphabet) for _ in range(length - len(pools))]
        rng.shuffle(chars)
        candidate = "".join(chars)
        if not find_patterns(candidate):
            return candidate


class TestLengthScorer:
    """Test the length heuristic."""

    def test_empty(self):
        result = score_length("")

        assert result.contribution == 0
        assert result.detail == "Password must be at least 8 characters"

    def test_grows_with_length(self):
        contributions = [score_length("x" * n).contribution for n in range(0, 17)]

        assert contributions == sorted(contributions)
        assert score_length("x" * 8).contribution == 20
        assert score_length("x" * 8).detail is None

    def test_saturates_at_ceiling(self):
        assert score_length("x" * 16).contribution == MAX_LENGTH_SCORE
        assert score_length("x" * 200).contribution == MAX_LENGTH_SCORE


class TestVarietyScorer:
    """Test the character class heuristic."""

    def test_single_class(self):
        result = score_variety("abcdef")

        assert result.contribution == 0
        assert result.detail == "Missing: uppercase, numbers, special characters"

    def test_all_classes(self):
        result = score_variety("aB3!")

        assert result.contribution == 40
        assert result.detail is None

    @pytest.mark.parametrize(
        "password,expected",
        [("", 0), ("a", 0), ("aB", 30), ("aB3", 35), ("aB3 ", 40)],
    )
    def test_increases_with_classes(self, password, expected):
        assert score_variety(password).contribution == expected

    def test_missing_classes_listed_uppercase_first(self):
        assert score_variety("1").detail == "Missing: uppercase, lowercase, special characters"
        assert score_variety("!").detail == "Missing: uppercase, lowercase, numbers"

    def test_non_ascii_digits_are_not_numbers(self):
        result = score_variety("abc١٢٣")

        assert result.contribution == 0
        assert result.detail == "Missing: uppercase, numbers, special characters"

    @pytest.mark.parametrize(
        "password,expected",
        [("aB3!", 40), ("aB3!?", 45), ("ab!?", 35), ("ab!", 30)],
    )
    def test_multiple_special_characters_bonus(self, password, expected):
        assert score_variety(password).contribution == expected

    def test_max_variety_score(self):
        assert score_variety("aB3!?#").contribution == MAX_VARIETY_SCORE


class TestUniquenessScorer:
    """Test the distinct character heuristic."""

    @pytest.mark.parametrize(
        "password,expected",
        [
            ("aaaa", 0),
            ("abcdefg", 0),
            ("abcdefgh", 5),
            ("abcdefghijkl", 10),
            ("abcdefghijklmnop", 15),
        ],
    )
    def test_steps(self, password, expected):
        assert score_uniqueness(password).contribution == expected


class TestPatternScorer:
    """Test repeated, sequential and keyboard pattern detection."""

    def test_repeated_characters(self):
        result = score_patterns("aaaaaaaa")

        assert result.contribution == -60
        assert "repetitive" in result.detail

    def test_sequence_covers_part_of_password(self):
        patterns = find_patterns("xx1234yy")

        assert patterns["sequential"] == {2, 3, 4, 5}
        assert score_patterns("xx1234yy").contribution == -30

    def test_descending_sequence(self):
        assert find_patterns("dcba")["sequential"] == {0, 1, 2, 3}

    def test_sequence_is_case_insensitive(self):
        assert find_patterns("aBcD")["sequential"] == {0, 1, 2, 3}

    def test_direction_change_breaks_sequence(self):
        assert "sequential" not in find_patterns("abcbab")

    def test_keyboard_walk(self):
        patterns = find_patterns("zqwerz")

        assert patterns == {"keyboard": {1, 2, 3, 4}}
        assert score_patterns("zqwerz").contribution == -40

    def test_reverse_keyboard_walk(self):
        assert find_patterns("lkjh")["keyboard"] == {0, 1, 2, 3}

    def test_short_runs_ignored(self):
        assert find_patterns("aab12qw") == {}
        assert score_patterns("aab12qw").contribution == 0

    def test_too_short_for_patterns(self):
        result = score_patterns("aa")

        assert result.contribution == 0
        assert result.detail is None

    def test_detail_lists_kinds(self):
        result = score_patterns("aaa1234")

        assert result.detail == "Password contains repetitive, sequential, keyboard patterns"


class TestBlacklistScorer:
    """Test the blacklist heuristic."""

    def test_blacklisted(self, loaded_blacklist):
        result = score_blacklist("PassWord")

        assert result.contribution == BLACKLIST_PENALTY
        assert result.detail is not None

    def test_not_blacklisted(self, loaded_blacklist):
        result = score_blacklist("unlisted-password")

        assert result.contribution == 0
        assert result.detail is None

    def test_uninitialized_store_fails(self):
        with pytest.raises(BlacklistNotInitializedError):
            score_blacklist("password", BlacklistStore())

    def test_explicit_store(self, make_blacklist):
        store = BlacklistStore()
        store.initialize(make_blacklist("custom.txt", ["hunter2"]))

        assert score_blacklist("hunter2", store).contribution == BLACKLIST_PENALTY
        assert not get_store().is_ready()


class TestRunScorers:
    """Test scorer orchestration."""

    def test_fixed_order(self, loaded_blacklist):
        categories = [s.category for s in run_scorers("Some-Password-9")]

        assert categories == [
            SignalCategory.BLACKLIST,
            SignalCategory.LENGTH,
            SignalCategory.VARIETY,
            SignalCategory.UNIQUENESS,
            SignalCategory.PATTERN,
        ]


class TestAggregator:
    """Test score aggregation and tier mapping."""

    def test_sums_contributions(self):
        aggregator = ScoreAggregator()

        assert aggregator.aggregate([signal(30), signal(25), signal(-5)]) == 50

    def test_clamps_to_range(self):
        aggregator = ScoreAggregator()

        assert aggregator.aggregate([signal(90), signal(60)]) == 100
        assert aggregator.aggregate([signal(10), signal(-60)]) == 0
        assert aggregator.aggregate([]) == BASE_SCORE

    def test_blacklist_penalty_dominates(self):
        # Best possible heuristics plus a blacklist hit must stay WEAK
        assert BASE_SCORE + MAX_POSITIVE_SCORE + BLACKLIST_PENALTY <= 49

        aggregator = ScoreAggregator()
        signals = [
            signal(BLACKLIST_PENALTY, SignalCategory.BLACKLIST),
            signal(MAX_POSITIVE_SCORE),
        ]
        assert strength_for(aggregator.aggregate(signals)) == PasswordStrength.WEAK

    def test_build_evaluation_collects_reasons(self):
        signals = [
            HeuristicSignal(category=SignalCategory.LENGTH, contribution=10, detail="short"),
            HeuristicSignal(category=SignalCategory.VARIETY, contribution=40),
        ]

        evaluation = ScoreAggregator().build_evaluation(signals)

        assert evaluation.score == 50
        assert evaluation.strength == PasswordStrength.MEDIUM
        assert evaluation.reasons == ["short"]
        assert evaluation.signals == signals


class TestStrengthThresholds:
    """Test score to tier mapping."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, PasswordStrength.WEAK),
            (49, PasswordStrength.WEAK),
            (50, PasswordStrength.MEDIUM),
            (69, PasswordStrength.MEDIUM),
            (70, PasswordStrength.STRONG),
            (84, PasswordStrength.STRONG),
            (85, PasswordStrength.EPIC),
            (95, PasswordStrength.EPIC),
            (96, PasswordStrength.GOD),
            (100, PasswordStrength.GOD),
        ],
    )
    def test_boundaries(self, score, expected):
        assert strength_for(score) == expected

    def test_monotonic_partition(self):
        tiers = [strength_for(score) for score in range(0, 101)]

        assert tiers == sorted(tiers)
        assert set(tiers) == set(PasswordStrength)
        assert [minimum for minimum, _ in STRENGTH_THRESHOLDS] == [96, 85, 70, 50]

    def test_tiers_are_ordered(self):
        assert (
            PasswordStrength.WEAK
            < PasswordStrength.MEDIUM
            < PasswordStrength.STRONG
            < PasswordStrength.EPIC
            < PasswordStrength.GOD
        )


class TestScoringProperties:
    """Randomized checks over generated passwords."""

    @pytest.mark.parametrize("seed", range(20))
    def test_long_mixed_passwords_are_strong(self, seed, loaded_blacklist):
        rng = random.Random(seed)
        pools = [string.ascii_lowercase, string.ascii_uppercase, string.digits, SYMBOLS]

        for length in (16, 20, 32):
            password = random_password(rng, length, pools)
            score = ScoreAggregator().aggregate(run_scorers(password))
            assert score >= 70, f"length {length} scored {score}"

    @pytest.mark.parametrize("seed", range(10))
    def test_three_class_passwords_are_strong(self, seed, loaded_blacklist):
        rng = random.Random(seed)
        pools = [string.ascii_lowercase, string.ascii_uppercase, string.digits]

        password = random_password(rng, 16, pools)
        score = ScoreAggregator().aggregate(run_scorers(password))

        assert strength_for(score) >= PasswordStrength.STRONG

    @pytest.mark.parametrize(
        "pools",
        [
            [string.ascii_lowercase, string.ascii_uppercase],
            [string.ascii_lowercase, string.digits],
            [string.ascii_uppercase, SYMBOLS],
        ],
        ids=["lower-upper", "lower-digits", "upper-symbols"],
    )
    @pytest.mark.parametrize("seed", range(20))
    def test_two_class_passwords_are_strong(self, seed, pools, loaded_blacklist):
        rng = random.Random(seed)

        for length in (16, 24):
            password = random_password(rng, length, pools)
            score = ScoreAggregator().aggregate(run_scorers(password))
            assert score >= 70, f"length {length} scored {score}"
