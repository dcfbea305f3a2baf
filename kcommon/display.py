"""
Text rendering of suffix arrays and window steps, for the command line.
"""
import click

TABLE_HEADER = "------i------SA------LCP--------Suffix"
# one color per owner string, reused when there are more strings
PALETTE = ["green", "red", "blue", "yellow", "magenta", "cyan", "white", "bright_black"]
SENTINEL_MARK = "$"


def owner_color(owner):
    return PALETTE[owner % len(PALETTE)]


def render_suffix(gtext, start, length=None):
    end = len(gtext) if length is None else start + length
    return "".join(
        SENTINEL_MARK if gtext.is_sentinel(j) else gtext.decode(j, 1)
        for j in range(start, end)
    )


def format_suffix_table(gtext, sa, lcp, color=False):
    lines = [TABLE_HEADER]
    for i, (start, l) in enumerate(zip(sa, lcp)):
        line = "% 7d % 7d % 7d %s" % (i, start, l, render_suffix(gtext, start))
        if color:
            line = click.style(line, fg=owner_color(gtext.owner[start]))
        lines.append(line)
    return "\n".join(lines)


def format_window(gtext, sa, lo, hi, window_lcp, color=False):
    """One line describing the window sa[lo..hi]"""
    lcp = "-" if window_lcp is None else window_lcp
    owners = sorted({gtext.owner[sa[i]] for i in range(lo, hi + 1)})
    if color:
        owners = [click.style(str(o), fg=owner_color(o)) for o in owners]
    else:
        owners = [str(o) for o in owners]
    return f"lo: {lo}, hi: {hi}, lcp: {lcp}, strings: {' '.join(owners)}"


def add_sentinels(strings, first="#"):
    """
    Join strings, each one followed by its own one character sentinel.
    Only works while the sentinels stay out of the alphabet.

    returns: the joined string and the offset after each sentinel
    """
    token = ord(first)
    parts = []
    ends = []
    length = 0
    for s in strings:
        parts.append(s)
        parts.append(chr(token))
        token += 1
        length += len(s) + 1
        ends.append(length)
    return "".join(parts), ends
