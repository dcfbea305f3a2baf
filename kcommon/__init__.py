#!/usr/bin/env python3

from functools import partial

import click
from tqdm import tqdm

from .display import add_sentinels, format_suffix_table, format_window
from .errors import InvalidArgumentError, InvariantViolationError, KCommonError
from .generalized import GeneralizedText, build_generalized_text
from .rmq import RangeMinTree, SlidingWindowMinimum
from .solver import (
    DEFAULT_WINDOW,
    WINDOWS,
    KCommonSubstrings,
    longest_common_substring,
    solve_k_common_substring,
)
from .stringalg import SuffixArray, build_suffix_array


def read_strings(args, src):
    strings = list(args)
    if src is not None:
        strings.extend(line.rstrip("\n") for line in src)
    return strings


def print_result(result, k, file=None):
    output = partial(click.echo, file=file)
    output(f"k={k} length={result.length}")
    for s in result.substrings:
        output(s)


@click.command()
@click.argument("strings", nargs=-1)
@click.option(
    "--file",
    "src",
    type=click.File(encoding="utf-8"),
    default=None,
    help="Read more strings from a file, one per line.",
)
@click.option("-k", type=int, default=2, show_default=True)
@click.option(
    "--window",
    type=click.Choice(sorted(WINDOWS)),
    default=DEFAULT_WINDOW,
    show_default=True,
    help="How the minimum lcp of the window is tracked.",
)
@click.option("--all-k", is_flag=True, help="Solve every k from 2 to the number of strings.")
@click.option("--show-suffix-array", is_flag=True)
@click.option("--trace", is_flag=True, help="Print every window step to stderr.")
@click.option("--no-color", is_flag=True)
def main(strings, src, k, window, all_k, show_suffix_array, trace, no_color):
    strings = read_strings(strings, src)
    color = not no_color

    try:
        if show_suffix_array or trace:
            gtext = build_generalized_text(strings)
            sa, lcp = build_suffix_array(gtext.text, 0, gtext.alphabet_size)

        if show_suffix_array:
            joined, _ = add_sentinels(strings)
            click.echo(f"text: {joined}")
            click.echo(format_suffix_table(gtext, sa, lcp, color=color))

        on_step = None
        if trace:

            def on_step(lo, hi, window_lcp, owners):
                click.echo(
                    format_window(gtext, sa, lo, hi, window_lcp, color=color),
                    err=True,
                )

        if all_k:
            if len(strings) < 2:
                raise InvalidArgumentError("at least 2 strings are required")
            click.echo(f"Solving k = 2..{len(strings)}", err=True)
            for kk in tqdm(range(2, len(strings) + 1)):
                result = solve_k_common_substring(strings, kk, window, on_step)
                print_result(result, kk)
        else:
            result = solve_k_common_substring(strings, k, window, on_step)
            print_result(result, k)
    except KCommonError as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    # pylint: disable=no-value-for-parameter
    main()
