from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from golf.extensions import db
from golf.hydration import (
    HydrationError,
    all_language_code,
    escape_attribute,
    hydrate,
    latest_successful_language,
)
from golf.models.solution import Solution


def test_no_solutions_is_empty_not_error(app):
    assert latest_successful_language(1, "fizzbuzz") is None
    assert all_language_code(1, "fizzbuzz") is None
    assert hydrate(1, "fizzbuzz") == []


def test_latest_successful_language_picks_most_recent_pass(add_solution):
    add_solution(1, "fizzbuzz", "perl", "say", success=True, submitted=datetime(2017, 1, 1))
    add_solution(1, "fizzbuzz", "ruby", "puts", success=True, submitted=datetime(2017, 3, 1))
    add_solution(1, "fizzbuzz", "bash", "echo", success=False, submitted=datetime(2017, 6, 1))

    assert latest_successful_language(1, "fizzbuzz") == ' data-lang="ruby"'


def test_latest_successful_language_ignores_failures(add_solution):
    add_solution(1, "fizzbuzz", "bash", "echo", success=False)

    assert latest_successful_language(1, "fizzbuzz") is None


def test_latest_successful_language_scoped_to_user_and_hole(add_solution):
    add_solution(2, "fizzbuzz", "lua", "print", success=True)
    add_solution(1, "fibonacci", "php", "echo", success=True)

    assert latest_successful_language(1, "fizzbuzz") is None


def test_all_language_code_one_attribute_per_lang_sorted(add_solution):
    add_solution(1, "fizzbuzz", "python", "print(1)", success=True)
    add_solution(1, "fizzbuzz", "bash", "echo 1")

    assert all_language_code(1, "fizzbuzz") == (
        ' data-bash="echo 1" data-python="print(1)"'
    )


def test_all_language_code_escapes_only_double_quotes(add_solution):
    code = 'puts "<a & b>"\n\'x\''
    add_solution(1, "fizzbuzz", "ruby", code)

    assert all_language_code(1, "fizzbuzz") == (
        ' data-ruby="puts &#34;<a & b>&#34;\n\'x\'"'
    )


def test_escape_attribute():
    assert escape_attribute('x := "a\\"b"') == 'x := &#34;a\\&#34;b&#34;'
    assert escape_attribute("<>&'") == "<>&'"


def test_hydrate_orders_lang_before_code(add_solution):
    add_solution(1, "fizzbuzz", "go", "package main", success=True)

    assert hydrate(1, "fizzbuzz") == [' data-lang="go"', ' data-go="package main"']


def test_store_failure_is_wrapped(app):
    Solution.__table__.drop(db.engine)

    with pytest.raises(HydrationError) as excinfo:
        latest_successful_language(1, "fizzbuzz")
    assert isinstance(excinfo.value.__cause__, OperationalError)
    assert excinfo.value.user_id == 1
    assert excinfo.value.hole_id == "fizzbuzz"

    db.session.rollback()
    with pytest.raises(HydrationError):
        all_language_code(1, "fizzbuzz")


def test_latest_successful_language_breaks_ties_by_lang(add_solution):
    when = datetime(2017, 5, 1)
    add_solution(1, "fizzbuzz", "ruby", "puts", success=True, submitted=when)
    add_solution(1, "fizzbuzz", "bash", "echo", success=True, submitted=when)

    assert latest_successful_language(1, "fizzbuzz") == ' data-lang="bash"'
    assert hydrate(1, "fizzbuzz") == hydrate(1, "fizzbuzz")
