from __future__ import annotations

import argparse
import sys

from typing import Callable, Optional

from cigarkit import __version__
from cigarkit.cigar import Cigar, join
from cigarkit.exceptions import CigarParseError, ParamError, InputError
from cigarkit.json import cigar_summary, dumps, dumps_indented
from cigarkit.logger import get_main_logger, get_cli_logger, log_levels
from cigarkit.params import CigarParams
from cigarkit.variant import VariantAllele, cigar_from_variant_alleles


def add_lenient_arg(parser):
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Use the legacy-compatible CIGAR parser, which silently truncates malformed CIGAR strings instead of "
             "reporting an error.")


def add_stats_parser_args(stats_parser):
    stats_parser.add_argument("cigars", nargs="+", type=str, help="CIGAR strings to summarize.")
    add_lenient_arg(stats_parser)
    stats_parser.add_argument(
        "--indent-json", "-i",
        action="store_true",
        help="Indent the JSON output to be more human readable.")


def add_join_parser_args(join_parser):
    join_parser.add_argument(
        "cigars",
        nargs="+",
        type=str,
        help="CIGAR strings of partial alignments to join, in order. Adjacent runs with the same operation are merged "
             "at each join boundary.")
    add_lenient_arg(join_parser)


def add_alleles_parser_args(alleles_parser):
    alleles_parser.add_argument(
        "alleles",
        nargs="+",
        type=str,
        help="Variant alleles as REF:ALT pairs, in alignment order. Use - for an empty allele, e.g. AC:A or -:T")
    alleles_parser.add_argument(
        "--coalesce",
        action="store_true",
        help="Merge all adjacent runs with the same operation, including matches next to substitutions.")


def _parse_cigars(cigar_strs: list[str], params: CigarParams, logger) -> list[Cigar]:
    res: list[Cigar] = []
    for cs in cigar_strs:
        try:
            res.append(Cigar.from_string(cs, lenient=params.lenient, logger_=logger))
        except CigarParseError as e:
            e.log_error(logger)
            raise InputError(f"could not parse CIGAR string '{cs}'") from e
    return res


def _parse_allele(allele_str: str) -> VariantAllele:
    parts = allele_str.split(":")
    if len(parts) != 2:
        raise ParamError(f"invalid variant allele '{allele_str}': expected REF:ALT")
    ref, alt = ("" if p == "-" else p for p in parts)
    return VariantAllele(ref, alt)


def _exec_stats(p_args) -> None:
    params = CigarParams.from_args(p_args)
    logger = get_main_logger(params.log_level)

    summaries = [cigar_summary(c) for c in _parse_cigars(p_args.cigars, params, logger)]
    logger.debug("Summarized %d CIGAR strings", len(summaries))

    print((dumps_indented if params.indent_json else dumps)(summaries).decode("utf-8"))


def _exec_join(p_args) -> None:
    params = CigarParams.from_args(p_args)
    logger = get_main_logger(params.log_level)

    cigars = _parse_cigars(p_args.cigars, params, logger)
    res = join(cigars)
    logger.debug("Joined %d CIGAR strings into %d runs", len(cigars), len(res))

    print(res)


def _exec_alleles(p_args) -> None:
    params = CigarParams.from_args(p_args)
    logger = get_main_logger(params.log_level)

    alleles = [_parse_allele(a) for a in p_args.alleles]
    res = cigar_from_variant_alleles(alleles, coalesce=params.coalesce)
    logger.debug("Built CIGAR from %d variant alleles (coalesce=%s)", len(alleles), params.coalesce)

    print(res)


def main(args: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="A toolkit for parsing, combining and measuring CIGAR strings.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument("--version", "-v", action="version", version=__version__)

    subparsers = parser.add_subparsers()

    def _make_subparser(arg: str, help_text: str, exec_func: Callable, arg_func: Callable):
        sp = subparsers.add_parser(arg, help=help_text)
        sp.add_argument("--log-level", type=str, default="warning", choices=("error", "warning", "info", "debug"))
        sp.set_defaults(func=exec_func)
        arg_func(sp)

    _make_subparser(
        "stats",
        help_text="Print reference/read lengths and soft-clipping for CIGAR strings, as JSON.",
        exec_func=_exec_stats,
        arg_func=add_stats_parser_args)

    _make_subparser(
        "join",
        help_text="Join CIGAR strings of partial alignments into one alignment path.",
        exec_func=_exec_join,
        arg_func=add_join_parser_args)

    _make_subparser(
        "alleles",
        help_text="Build a CIGAR string from variant allele (REF:ALT) pairs.",
        exec_func=_exec_alleles,
        arg_func=add_alleles_parser_args)

    args = args or sys.argv[1:]
    p_args = parser.parse_args(args)

    if not getattr(p_args, "func", None):
        p_args = parser.parse_args(("--help",))

    logger = get_cli_logger(log_levels[p_args.log_level])

    try:
        logger.info(f"cigarkit version {__version__}")
        p_args.func(p_args)
        return 0
    except ParamError as e:
        logger.critical(f"Parameter error: {e}")
        return 1
    except InputError as e:
        logger.critical(f"Input error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
