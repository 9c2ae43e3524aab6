"""Sorting example for linkstructs."""

from linkstructs import (
    insertion_sort,
    numeric_compare,
    numeric_key_compare,
    selection_sort,
    string_compare,
)


def main() -> None:
    """Sort plain values and keyed records."""
    words = ["a", "b", "1", "cde", "77", "efg"]
    selection_sort(words, string_compare)
    print(f"Strings: {words}")

    numbers = [5, 2, 4, 6, 1, 3]
    selection_sort(numbers, numeric_compare)
    print(f"Numbers: {numbers}")

    jobs = [
        {"key": 2, "name": "index"},
        {"key": 1, "name": "fetch"},
        {"key": 2, "name": "store"},
    ]
    insertion_sort(jobs, numeric_key_compare)
    print(f"Jobs by priority (stable): {[job['name'] for job in jobs]}")


if __name__ == "__main__":
    main()
