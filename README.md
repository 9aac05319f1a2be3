# recurkit

A small collection of algorithms on integers and integer sequences, together
with a runner that checks each of them against a fixed set of cases and
prints a pass/fail report.

## Algorithms

| Module | Function | What it does |
| --- | --- | --- |
| `recurkit.digits` | `count_even_digits(number)` | Counts the even decimal digits of an integer. Zero counts as even, and the sign is ignored. |
| `recurkit.digits` | `is_digits_count_odd(number)` | Tells whether an integer has an odd number of decimal digits, sign ignored. |
| `recurkit.powers` | `is_power_of_four(number)` | Tells whether a number is an exact power of four (1, 4, 16, 64, ...). Zero and negative numbers are not. |
| `recurkit.tribonacci` | `get_tribonacci_number(index)` | Returns the tribonacci number at a 1-based index. The series is 0, 0, 1, 1, 2, 4, 7, 13, ... An index below 1 raises `ValueError`. |
| `recurkit.sequences` | `sum_absolute_values_of_negative_elements(values)` | Sums the absolute values of the negative elements. An empty collection or `None` gives 0. |
| `recurkit.sequences` | `binary_search(values, value)` | Tells whether a value is found by halving search over a sequence sorted in ascending order. An empty sequence or `None` gives `False`. |

```python
from recurkit.digits import count_even_digits, is_digits_count_odd
from recurkit.powers import is_power_of_four
from recurkit.tribonacci import get_tribonacci_number
from recurkit.sequences import sum_absolute_values_of_negative_elements, binary_search

count_even_digits(1234567890)                         # 5
is_digits_count_odd(-12345)                           # True
is_power_of_four(256)                                 # True
get_tribonacci_number(20)                             # 19513
sum_absolute_values_of_negative_elements([1, -2, -3]) # 5
binary_search([1, 3, 5, 7], 5)                        # True
```

## Check runner

The package ships with cases for every algorithm. Each case is a
`(name, args, expected)` triple; an exception class as `expected` means the
call must raise it.

- `recurkit.cases_scalar` provides `even_digit_cases()`,
  `power_of_four_cases()`, `odd_digit_count_cases()` and `tribonacci_cases()`.
- `recurkit.runner` provides `negative_sum_cases()` and
  `binary_search_cases()`.
- `recurkit.report` runs a single case with `run_check(name, func, args, expected)`,
  which returns a `CheckResult` (with a `passed` property), and prints it with
  `print_result(result, stream)`. `format_values(values)` joins values with
  single spaces.

To run every suite from the command line:

```
recurkit
```

Or only some of them, by name:

```
recurkit tribonacci binary-search
```

The suites are `even-digits`, `power-of-four`, `odd-digit-count`,
`tribonacci`, `negative-sum` and `binary-search`. Each suite prints its
number of cases, then a `PASS` or `FAIL` line per case; a failing case also
prints its arguments together with the expected and actual values. A final
line reports how many cases passed. The command exits with status 0 if every
case passed and 1 otherwise.

From Python, `run_all` runs every suite and returns the list of results:

```python
import sys
from recurkit.runner import run_all

results = run_all(sys.stdout)
all(result.passed for result in results)
```

## Running the tests

Install with the `test` extra and run pytest:

```
pip install -e .[test]
pytest
```