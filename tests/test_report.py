import io

import pytest

from recurkit.digits import count_even_digits
from recurkit.powers import is_power_of_four
from recurkit.report import CheckResult, format_values, print_result, run_check
from recurkit.sequences import sum_absolute_values_of_negative_elements
from recurkit.tribonacci import get_tribonacci_number


def test_run_check_passes_on_matching_value():
    result = run_check("test01", count_even_digits, (1_234_567_890,), 5)
    assert result.actual == 5
    assert result.passed is True


def test_run_check_fails_on_mismatch():
    result = run_check("test02", count_even_digits, (1_234_567_890,), 4)
    assert result.actual == 5
    assert result.passed is False


def test_run_check_keeps_name_and_args():
    result = run_check("test10", is_power_of_four, [4], True)
    assert result.name == "test10"
    assert result.args == (4,)


def test_run_check_with_expected_exception():
    result = run_check("test08", get_tribonacci_number, (-1,), ValueError)
    assert isinstance(result.actual, ValueError)
    assert result.passed is True


def test_run_check_propagates_unexpected_exception():
    with pytest.raises(ValueError):
        run_check("test09", get_tribonacci_number, (-5,), -1)


def test_expected_exception_not_raised_fails():
    result = run_check("test04", get_tribonacci_number, (1,), ValueError)
    assert result.actual == 0
    assert result.passed is False


def test_sequence_argument_check():
    values = [1, -2, -3, 4, -5]
    result = run_check("test01", sum_absolute_values_of_negative_elements, (values,), 10)
    assert result.passed is True


def test_format_values_joins_with_spaces():
    values = [1, -2, -3]
    text = format_values(values)
    assert text.split(" ") == [str(v) for v in values]


def test_format_values_none_and_empty():
    assert format_values(None) == ""
    assert format_values([]) == ""


def test_print_result_pass_output():
    stream = io.StringIO()
    print_result(run_check("test07", count_even_digits, (0,), 1), stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == "test07 --> PASS"
    assert len(lines) == 2
    assert set(lines[1]) == {"-"}


def test_print_result_fail_output_has_details():
    stream = io.StringIO()
    print_result(run_check("test13", is_power_of_four, (2,), True), stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == "test13 --> FAIL"
    assert "yes" in lines[2]
    assert "no" in lines[2]
    assert len(lines) == 4


def test_print_result_defaults_to_stdout(capsys):
    print_result(CheckResult(name="t", args=(1,), expected=0, actual=0))
    captured = capsys.readouterr()
    assert captured.out.startswith("t --> PASS")


def test_check_result_exception_actual_never_equals_value():
    result = CheckResult(name="t", args=(), expected=0, actual=ValueError("x"))
    assert result.passed is False