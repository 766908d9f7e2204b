# algokit

A library of classic contest algorithms in pure Python. Every routine takes
ordinary Python values as arguments and returns Python values; nothing reads
from the console or prints. There are no runtime dependencies.

## Contents

### Multiplicative functions

- `algokit.dirichlet`: `MertensSieve(limit)`, with `mertens(n)` and
  `totient_sum(n)` for large `n` by Du's sieve. `gcd_weighted_sum(n, modulus)`
  gives the sum of `i * j * gcd(i, j)` for `i, j <= n`, modulo a prime above 3.
- `algokit.mobius`: `mobius_prefix`, `count_gcd_pairs`, `lcm_sum`,
  `lcm_table_sum` and `divisor_count_sum`.
- `algokit.min25`: `xor_function_sum(n)`, the prefix sum of the multiplicative
  `f(p^c) = p xor c`, by the min_25 sieve.
- `algokit.powerful`: `sum_power_times_pred(n)` and
  `sum_prime_xor_exponent(n)`, by the powerful number sieve.

### Number theory and arithmetic

- `algokit.factor`: `is_probable_prime` (Miller–Rabin), `pollard_rho` and
  `largest_prime_factor`.
- `algokit.antiprime`: `smallest_with_divisors(n)` and
  `largest_antiprime(limit)`.
- `algokit.powers`: `mersenne_last_digits(p, digits=100)`.
- `algokit.coins`: `CoinCounter(values)`. Its `count(counts, total)` gives
  the number of ways to pay `total` with bounded coins, by inclusion–exclusion.
- `algokit.poly`: `fft`, `multiply_decimal`, `lagrange_eval`, `ntt`,
  `poly_inverse` and `poly_sqrt`, the last three modulo 998244353.
- `algokit.simplex`: `simplex_maximize`, `min_volunteer_cost` and
  `UnboundedError`.

### Offline techniques

- `algokit.cdq`: `inversions_after_deletions` and
  `longest_chain_probabilities`, by divide and conquer.
- `algokit.dynamic_mst`: `dynamic_mst(n, edges, updates)`, the minimum
  spanning forest weight after each edge weight change.
- `algokit.parallel_search`: `kth_smallest_queries(values, queries)`.
- `algokit.mo`: Mo's algorithm and its variants:
  - `same_color_probabilities`;
  - `removed_after_triple_common`, with bitsets;
  - `distinct_with_updates`, with modifications;
  - `max_importance`, with rollback.
- `algokit.histogram`: `largest_rectangle`, `best_min_times_sum` and
  `largest_free_rectangle`.

### Search

- `algokit.puzzles`: `eight_puzzle_moves` (A*), `n_queens`, `count_paths` and
  `permutations_of`.
- `algokit.kshortest`: `max_paths_within_energy`, by A*.
- `algokit.lights`: `min_switches`, meet in the middle.
- `algokit.branch_bound`: `knapsack_max` and `min_assignment_cost`.
- `algokit.egyptian`: `egyptian_fraction(a, b, max_depth=100)`, by iterative
  deepening.
- `algokit.dlx`: `DancingLinks`, with `add_row`, `solve` and `solutions`.
  Also `exact_cover`, `solve_sudoku` and `best_target_sudoku`.
- `algokit.optimize`: `sphere_center` and `weighted_balance_point` (hill
  climbing), and `anneal_balance_point` (simulated annealing).

### Strings

- `algokit.aho_corasick`: `Automaton`, with `count_distinct_matches` and
  `occurrences`, plus `most_frequent_patterns`. Lowercase `a`–`z` only.
- `algokit.hashing`: `HashedString`, with `extend` and `substring_hash`, and
  `merge_words`.
- `algokit.trie`: `RollCall`, whose `call(name)` returns `"OK"`, `"REPEAT"`
  or `"WRONG"`, and `max_xor_path`.
- `algokit.palindromes`: `PalindromicTree`, `palindrome_value` and
  `count_palindromic_splits`.
- `algokit.suffix_array`: `suffix_array`, `lcp_array`, `best_cow_line`,
  `longest_repeat_k` and `lcp_pair_sum`.
- `algokit.suffix_bst`: `SuffixBalancedTree`, with `suffix_array()`.
- `algokit.general_sam`: `GeneralSuffixAutomaton`, with `distinct_substrings`
  and `longest_common_substring`.
- `algokit.subsequence`: `shortest_uncommon(a, b)`.

## Examples

```python
import random

from algokit.dirichlet import MertensSieve
from algokit.dlx import exact_cover
from algokit.factor import largest_prime_factor
from algokit.suffix_array import suffix_array

sieve = MertensSieve(10_000)
print(sieve.mertens(10**6), sieve.totient_sum(10**6))

print(largest_prime_factor(600851475143, random.Random(1)))  # 6857

print(exact_cover([[1, 0, 1], [0, 1, 0], [1, 1, 0]]))  # [1, 2]

print(suffix_array("banana"))  # [5, 3, 1, 0, 4, 2]
```

Randomised routines accept a `random.Random` instance. Pass a seeded one to
get the same result on every run.

## What it does not do

The package has no command-line program. It does not read problem input from
files or standard input, and it does not format answers for output. You parse
the input yourself and pass it to the functions.

## Running the tests

```
pip install -e .[test]
pytest
```