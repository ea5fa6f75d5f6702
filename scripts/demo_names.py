#!/usr/bin/env python
"""Demo: building names with do-notation.

Shows bind_to/bind for generators whose parts are drawn in sequence, and
one_of for picking among constant prefixes.

Run with: uv run python scripts/demo_names.py
"""

from seedgen import (
    Gen,
    bind,
    bind_to,
    char,
    generate_sample,
    map_,
    mk_seed,
    of,
    one_of,
    string,
)

SEED = mk_seed(42)

gen_name: Gen[str] = map_(
    bind(
        bind_to(char("A", "Z"), "first_letter"),
        "rest_letters",
        lambda _: string("a", "z"),
    ),
    lambda scope: f"{scope['first_letter']}{scope['rest_letters']}",
)

gen_full_name: Gen[str] = map_(
    bind(bind_to(gen_name, "first_name"), "last_name", lambda _: gen_name),
    lambda scope: f"{scope['first_name']} {scope['last_name']}",
)

gen_full_name_prefixed: Gen[str] = map_(
    bind(
        bind_to(one_of([of("Dr. "), of("Prof. "), of("")]), "prefix"),
        "name",
        lambda _: gen_full_name,
    ),
    lambda scope: f"{scope['prefix']}{scope['name']}",
)


def main() -> None:
    print("=" * 70)
    print("Demo: names")
    print("=" * 70)

    for label, gen in (
        ("names", gen_name),
        ("full names", gen_full_name),
        ("prefixed full names", gen_full_name_prefixed),
    ):
        print(f"\n--- {label} ---")
        for value in generate_sample(gen, SEED):
            print(f"  {value}")


if __name__ == "__main__":
    main()
