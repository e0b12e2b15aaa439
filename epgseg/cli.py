# epgseg/cli.py
from __future__ import annotations

import argparse
import logging
import sys
import textwrap

import matplotlib.pyplot as plt

from epgseg.core import DEFAULT_SAMPLING_RATE, CoreError, LoaderConfig, PlotConfig
from epgseg.io.load import SegmentLoader
from epgseg.viz.plot import plot_signal, plot_signal_chunk


logger = logging.getLogger("epgseg")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="epgseg",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Load a segmented EPG recording (<base>.D01, <base>.D02, ...) and plot it.

            SEED is any one segment file; all siblings with the same base name
            in the same folder are concatenated into one continuous signal.
            """
        ),
    )
    p.add_argument("seed", help="Any one .D## segment file of the recording")
    p.add_argument("--rate", type=float, default=DEFAULT_SAMPLING_RATE, help="Sampling rate in Hz (default: 100)")
    p.add_argument("--mode", default="line", help="Plot mode: line or scatter (default: line)")
    p.add_argument("--start", type=float, default=0.0, help="Window start in seconds (default: 0)")
    p.add_argument("--duration", type=float, default=10.0, help="Window length in seconds (default: 10)")
    p.add_argument("--full", action="store_true", help="Plot the whole recording instead of a window")
    p.add_argument("--title", default=None, help="Plot title (only with --full; windows are titled by their range)")
    p.add_argument("--numeric-sort", action="store_true", help="Order segments by suffix number, not file name")
    p.add_argument(
        "--lenient",
        action="store_true",
        help="Drop trailing bytes that do not form a full float32 instead of failing",
    )
    p.add_argument("--output", default=None, help="Save the figure to this path (png, pdf, svg, ...)")
    p.add_argument("--show", action="store_true", help="Open an interactive window")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.title is not None and not args.full:
        parser.error("--title requires --full")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
    )

    try:
        loader = SegmentLoader(
            LoaderConfig(
                sampling_rate=args.rate,
                strict=not args.lenient,
                sort="numeric" if args.numeric_sort else "lexical",
            )
        )
        plot_cfg = PlotConfig(
            mode=args.mode,
            title=args.title if args.title is not None else "EPG Signal",
            start_s=args.start,
            duration=args.duration,
        )

        series = loader.load(args.seed)
        logger.info(
            "Recording '%s': %d segment(s), %d samples, %.3f s",
            series.meta.base_name, len(series.meta.segments), series.n, series.duration,
        )

        if args.full:
            fig = plot_signal(series, mode=plot_cfg.mode, title=plot_cfg.title, output=args.output)
        else:
            fig = plot_signal_chunk(
                series,
                start_s=plot_cfg.start_s,
                duration=plot_cfg.duration,
                mode=plot_cfg.mode,
                output=args.output,
            )
    except CoreError as e:
        logger.error("%s", e)
        return 1

    if args.show:
        plt.show()
    else:
        plt.close(fig)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
