#!/usr/bin/env python
"""
specfun_cli.py

Evaluate one of the specfun special functions from the command line.

Examples:
    ./specfun_cli.py gamma 5
    ./specfun_cli.py lambert -0.2 --secondary
    ./specfun_cli.py lambert -1e-3 --secondary
    ./specfun_cli.py erf 0 --sweep -pi:pi:5
    ./specfun_cli.py regularized_incomplete_beta 2 3 0 --sweep 0:1:11
    ./specfun_cli.py --list

With --sweep lo:hi:n the last argument is replaced by each point of
linspace(lo, hi, n) and one "arg<TAB>value" line is printed per point.
"""

import argparse
import math
import sys

import numpy as np

import specfun


NAMED_NUMBERS = {
    "pi": math.pi,
    "e": math.e,
    "inf": math.inf,
    "nan": math.nan,
}


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------

def _parse_number(tok: str):
    """Value of tok as a float, or None if it is not a number."""
    t = tok.strip().lower()
    sign = 1.0
    if t[:1] in ("-", "+"):
        if t[:1] == "-":
            sign = -1.0
        t = t[1:]
    if t[:1] in ("-", "+"):
        return None
    if t in NAMED_NUMBERS:
        return sign * NAMED_NUMBERS[t]
    try:
        return sign * float(t)
    except ValueError:
        return None


def _eval_number(tok: str) -> float:
    v = _parse_number(tok)
    if v is None:
        raise SystemExit(f"not a number: {tok!r}")
    return v


def _join_sweep(argv: list[str]) -> list[str]:
    """
    Rewrite "--sweep VALUE" as "--sweep=VALUE" when VALUE starts with a
    minus sign, so argparse does not take "-1e-3:0" for an option.
    """
    out = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if (tok == "--sweep" and i + 1 < len(argv)
                and argv[i + 1].startswith("-")
                and _parse_number(argv[i + 1].split(":")[0]) is not None):
            out.append(f"--sweep={argv[i + 1]}")
            i += 2
            continue
        out.append(tok)
        i += 1
    return out


def _parse_sweep(text: str) -> np.ndarray:
    """
    Parse "lo:hi:n" into linspace(lo, hi, n).

    - "lo:hi"   -> 11 points
    - "lo:hi:n" -> n points (n >= 1)
    """
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise SystemExit(f"sweep must look like lo:hi or lo:hi:n, got {text!r}")
    lo = _eval_number(parts[0])
    hi = _eval_number(parts[1])
    n = 11
    if len(parts) == 3:
        try:
            n = int(parts[2])
        except ValueError:
            raise SystemExit(f"sweep point count must be an integer, got {parts[2]!r}")
    if n < 1:
        raise SystemExit(f"sweep needs at least one point, got {n}")
    return np.linspace(lo, hi, n, dtype=np.float64)


def _fmt(v: float, digits: int) -> str:
    return f"{v:.{digits}g}"


def evaluate(name: str, args: list[float], principal: bool = True) -> float:
    """Look up name in the registry and call it on args."""
    if name not in specfun.FUNCTIONS:
        raise SystemExit(f"unknown function '{name}' (see --list)")
    fun, arity = specfun.FUNCTIONS[name]
    if len(args) != arity:
        raise SystemExit(f"{name} takes {arity} argument(s), got {len(args)}")
    if name in specfun.BRANCHED:
        return float(fun(*args, principal))
    return float(fun(*args))


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def main(argv=None):
    p = argparse.ArgumentParser(
        "specfun",
        description="Evaluate scalar special functions (gamma, beta, erf, ...).",
    )
    p.add_argument("name", nargs="?", help="function name, see --list.")
    p.add_argument(
        "args",
        nargs="*",
        help="numeric arguments (floats, or pi/e/inf/nan).",
    )
    p.add_argument(
        "--secondary",
        action="store_true",
        help="use the secondary branch (lambert, igamma).",
    )
    p.add_argument(
        "--sweep",
        type=str,
        default=None,
        help="lo:hi[:n], replace the last argument by linspace(lo, hi, n).",
    )
    p.add_argument(
        "--digits",
        type=int,
        default=15,
        help="significant digits to print.",
    )
    p.add_argument(
        "--list",
        action="store_true",
        help="list available functions and exit.",
    )
    argv = sys.argv[1:] if argv is None else list(argv)
    args, extras = p.parse_known_args(_join_sweep(argv))

    # argparse reads "-1e-3", "-pi", "-inf" as unknown options
    unknown = [tok for tok in extras if _parse_number(tok) is None]
    if unknown:
        p.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.args.extend(extras)

    if args.list:
        for name, (_, arity) in specfun.FUNCTIONS.items():
            print(f"{name}\t{arity}")
        return

    if args.name is None:
        p.print_usage()
        raise SystemExit("missing function name")

    if args.secondary and args.name not in specfun.BRANCHED:
        print(f"WARNING: --secondary has no effect on {args.name}")

    values = [_eval_number(tok) for tok in args.args]
    principal = not args.secondary

    if args.sweep is None:
        print(_fmt(evaluate(args.name, values, principal), args.digits))
        return

    if not values:
        raise SystemExit("--sweep needs at least one argument to replace")
    for v in _parse_sweep(args.sweep):
        values[-1] = float(v)
        out = evaluate(args.name, values, principal)
        print(f"{_fmt(values[-1], args.digits)}\t{_fmt(out, args.digits)}")


if __name__ == "__main__":
    main()
