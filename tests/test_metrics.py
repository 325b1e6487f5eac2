from portfolio_press.core.metrics import reading_minutes, word_count


def test_word_count_splits_on_any_whitespace() -> None:
    assert word_count("one  two\tthree\nfour") == 4
    assert word_count("") == 0


def test_reading_minutes_for_exact_multiple() -> None:
    body = " ".join(["word"] * 400)

    assert reading_minutes(word_count(body), 200) == 2


def test_reading_minutes_rounds_up() -> None:
    assert reading_minutes(401, 200) == 3
    assert reading_minutes(1, 200) == 1


def test_reading_minutes_for_empty_body_is_zero_unless_minimum() -> None:
    assert reading_minutes(0, 200) == 0
    assert reading_minutes(0, 200, minimum=1) == 1
