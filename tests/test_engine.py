import random
from conftest import FixedRandom, ScriptedConsole, frozen_clock
from console_apps.engine import RoundEngine, calculate_round_score, distance_feedback
from console_apps.schemas import DifficultyPreset

def make_engine(answers, secret, clock=None):
    console = ScriptedConsole(answers)
    engine = RoundEngine(console, rng=FixedRandom(secret), clock=clock or frozen_clock(100.0, 100.0))
    return engine, console


def test_secret_always_within_range(catalog):
    engine = RoundEngine(ScriptedConsole([]), rng=random.Random(1234))
    for preset in catalog.presets.values():
        draws = [engine.draw_secret(preset) for _ in range(2000)]
        assert min(draws) >= preset.minimum
        assert max(draws) <= preset.maximum


def test_easy_first_guess_base_score():
    # Easy: 8 attempts, x1 multiplier, solved on the first try
    preset = DifficultyPreset(name="Easy", minimum=1, maximum=20, attempt_limit=8, score_multiplier=1)
    score = calculate_round_score(preset, attempts_used=1, elapsed_seconds=45)
    assert score.base == 80
    assert score.time_bonus == 0
    assert score.total == 80


def test_winning_score_is_positive_for_every_attempt(catalog):
    for preset in catalog.presets.values():
        for attempts_used in range(1, preset.attempt_limit + 1):
            for elapsed in (0, 15, 30, 300):
                score = calculate_round_score(preset, attempts_used, elapsed)
                assert score.total >= score.base
                assert score.total > 0


def test_correct_first_guess_wins_with_full_time_bonus(easy):
    engine, console = make_engine(["7"], secret=7)

    assert engine.play_round(easy) == 80 + 30
    assert "Correct! The number was 7. Attempts used: 1. Time: 0s" in console.output
    assert "Round score: 110 (base 80 + time bonus 30)" in console.output


def test_elapsed_time_is_truncated_to_whole_seconds(easy):
    engine, console = make_engine(["7"], secret=7, clock=frozen_clock(100.0, 112.9))

    # 12.9s counts as 12s -> bonus 18
    assert engine.play_round(easy) == 80 + 18
    assert "Time: 12s" in console.output


def test_slow_win_gets_no_time_bonus(easy):
    engine, _ = make_engine(["7"], secret=7, clock=frozen_clock(0.0, 95.0))
    assert engine.play_round(easy) == 80


def test_exhausting_attempts_returns_zero(easy):
    engine, console = make_engine(["1"] * easy.attempt_limit, secret=7)

    assert engine.play_round(easy) == 0
    assert "Out of attempts. The number was 7." in console.output
    assert "Attempts left: 0" in console.output
    assert console.answers == []


def test_bad_input_does_not_use_an_attempt(easy):
    engine, console = make_engine(["abc", "", "0", "21", "3.5", "7.0", "7.000", "1_0", "7"], secret=7)

    # Only the final "7" counts, so it is still a first-try win
    assert engine.play_round(easy) == 110
    assert "Please enter a valid integer." in console.lines
    assert "Please enter a number between 1 and 20." in console.lines
    assert "Attempts used: 1." in console.output


def test_direction_feedback(easy):
    engine, console = make_engine(["15", "2", "7"], secret=7)
    engine.play_round(easy)

    assert "Too high." in console.lines
    assert "Too low." in console.lines


def test_warmer_on_second_miss(medium):
    engine, console = make_engine(["30", "40", "50"], secret=50)

    score = engine.play_round(medium)

    # Distance 20 then 10
    assert "You're getting warmer (closer) than last guess." in console.lines
    # Third attempt on Medium: (7 - 3 + 1) * 2 * 10
    assert score == 100 + 30


def test_colder_and_same_distance(medium):
    engine, console = make_engine(["45", "40", "60", "50"], secret=50)
    engine.play_round(medium)

    assert "Very close!" in console.lines
    assert "You're getting colder (farther) than last guess." in console.lines
    assert "Same distance as last guess." in console.lines


def test_first_miss_far_away_gets_no_proximity_hint(medium):
    engine, console = make_engine(["1", "50"], secret=50)
    engine.play_round(medium)
    assert "Very close!" not in console.lines


def test_distance_feedback_hint_radius():
    assert distance_feedback(1, None, hint_radius=1) == "Very close!"
    assert distance_feedback(2, None, hint_radius=1) is None
    assert distance_feedback(3, 3, hint_radius=1) == "Same distance as last guess."


def test_single_value_range_is_playable():
    preset = DifficultyPreset(name="Fixed", minimum=5, maximum=5, attempt_limit=1, score_multiplier=1)
    console = ScriptedConsole(["5"])
    engine = RoundEngine(console, rng=random.Random(), clock=frozen_clock(0.0, 0.0))

    assert engine.draw_secret(preset) == 5
    assert engine.play_round(preset) == 10 + 30


def test_decimal_looking_guess_is_asked_again(easy):
    engine, console = make_engine(["7.0", "7"], secret=7)

    assert engine.play_round(easy) == 110
    assert console.lines.count("Please enter a valid integer.") == 1
    assert "Attempts used: 1." in console.output
