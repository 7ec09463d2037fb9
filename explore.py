import sys
from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}
VERBOSE = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


from mandelview import (
    Color,
    EngineConfig,
    EngineError,
    FanOutPresenter,
    FrameSequencePresenter,
    GifPresenter,
    LastFramePresenter,
    RenderCycle,
    RenderState,
    ScriptedEventSource,
    ViewportConfig,
    build_palette,
    colormap_palette,
    parse_script,
    write_image,
)
from mandelview.config import (
    DEFAULT_ESCAPE_THRESHOLD,
    DEFAULT_MAX_ITERATION,
    DEFAULT_MOVE_RATIO,
    DEFAULT_ZOOM_RATIO,
    IN_SET_COLOR,
    PALETTE_END,
    PALETTE_START,
)
from mandelview.presenters import normalize_format
from mandelview.events import Quit


@dataclass
class OutputConfig:
    frame_dir: Path | None
    gif_path: Path | None
    image_path: Path | None
    image_format: str


def build_parser():
    parser = ArgumentParser(description='Explore the Mandelbrot set through a scripted sequence of pan/zoom/recenter events.')

    parser.add_argument('--width', type=int,
                        dest='width', help='window width in pixels',
                        metavar='WIDTH', default=100)

    parser.add_argument('--height', type=int,
                        dest='height', help='window height in pixels',
                        metavar='HEIGHT', default=100)

    parser.add_argument('--real-range', type=float,
                        dest='real_range', help='initial extent of the window along the real axis',
                        metavar='REAL_RANGE', default=3.0)

    parser.add_argument('--imag-range', type=float,
                        dest='imag_range', help='initial extent of the window along the imaginary axis',
                        metavar='IMAG_RANGE', default=3.0)

    parser.add_argument('--center-real', type=float,
                        dest='center_real', help='real part of the initial window center',
                        metavar='CENTER_REAL', default=-0.5)

    parser.add_argument('--center-imag', type=float,
                        dest='center_imag', help='imaginary part of the initial window center',
                        metavar='CENTER_IMAG', default=0.0)

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iterations', help='maximum number of escape-time iterations per point',
                        metavar='MAX_ITERATIONS', default=DEFAULT_MAX_ITERATION)

    parser.add_argument('--escape-threshold', type=float,
                        dest='escape_threshold', help='escape radius, at least 2.0',
                        metavar='ESCAPE_THRESHOLD', default=DEFAULT_ESCAPE_THRESHOLD)

    parser.add_argument('--palette-start', type=str, default=PALETTE_START.hex,
                        help='Hex color for the first slot of the escape gradient.')
    parser.add_argument('--palette-end', type=str, default=PALETTE_END.hex,
                        help='Hex color the escape gradient walks toward.')
    parser.add_argument('--inside-color', type=str, default=IN_SET_COLOR.hex,
                        help='Hex color for points inside the Mandelbrot set.')
    parser.add_argument('--colormap', type=str, default=None,
                        help='matplotlib colormap to build the palette from instead of the gradient (e.g. "inferno").')

    parser.add_argument('--zoom-ratio', type=float,
                        dest='zoom_ratio', help='factor applied to both extents by each zoom event',
                        metavar='ZOOM_RATIO', default=DEFAULT_ZOOM_RATIO)

    parser.add_argument('--move-ratio', type=float,
                        dest='move_ratio', help='a pan moves the center by extent / MOVE_RATIO',
                        metavar='MOVE_RATIO', default=DEFAULT_MOVE_RATIO)

    parser.add_argument('--events', type=str, default='',
                        help='Scripted input: ticks separated by ";", events by ",". '
                             'Events: up/k down/j left/h right/l plus/p minus/m q quit wheel-up wheel-down click:XxY.')

    parser.add_argument('--frame-dir', dest='frame_dir', type=str,
                        help='Directory in which to store every presented frame.')
    parser.add_argument('--gif', dest='gif', type=str,
                        help='Record every presented frame into this GIF file.')
    parser.add_argument('--output', dest='output', type=str,
                        help='Destination for the last presented frame. Default: frame_final.<format> when no other output is requested.')
    parser.add_argument('--format', type=str,
                        dest='format', help='file format for image-based outputs. Can be any extension supported by Pillow. Default: "png".',
                        metavar='FORMAT', default='png')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging of every presented frame.')

    return parser


def _parse_color(value: str, option: str, parser: ArgumentParser) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as exc:
        parser.error(f"{option}: {exc}")


def resolve_output_config(opt, parser: ArgumentParser) -> OutputConfig:
    image_format = normalize_format(getattr(opt, "format", "png"))

    frame_dir = Path(opt.frame_dir).expanduser().resolve() if opt.frame_dir else None

    gif_path: Path | None = None
    if opt.gif:
        gif_path = Path(opt.gif).expanduser()
        if gif_path.suffix:
            if gif_path.suffix.lower() != ".gif":
                parser.error("GIF outputs must end with .gif.")
        else:
            gif_path = gif_path.with_suffix(".gif")
        gif_path = gif_path.resolve()

    image_path: Path | None = None
    if opt.output:
        output_path = Path(opt.output).expanduser()
        if output_path.exists() and output_path.is_dir():
            parser.error("--output must point to a file, not a directory.")
        expected_suffix = f".{image_format}"
        if output_path.suffix:
            if output_path.suffix.lower() != expected_suffix.lower():
                parser.error(f"--output extension {output_path.suffix} does not match --format {image_format}.")
        else:
            output_path = output_path.with_suffix(expected_suffix)
        image_path = output_path.resolve()
    elif frame_dir is None and gif_path is None:
        image_path = Path(f"frame_final.{image_format}").expanduser().resolve()

    return OutputConfig(
        frame_dir=frame_dir,
        gif_path=gif_path,
        image_path=image_path,
        image_format=image_format,
    )


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    output_config = resolve_output_config(opt, parser)

    try:
        ticks = parse_script(opt.events)
    except ValueError as exc:
        parser.error(f"--events: {exc}")

    engine_config = EngineConfig(
        max_iteration=opt.max_iterations,
        escape_threshold=opt.escape_threshold,
        palette_start=_parse_color(opt.palette_start, "--palette-start", parser),
        palette_end=_parse_color(opt.palette_end, "--palette-end", parser),
        in_set_color=_parse_color(opt.inside_color, "--inside-color", parser),
        zoom_ratio=opt.zoom_ratio,
        move_ratio=opt.move_ratio,
        refresh_delay=0.0,
    )
    viewport_config = ViewportConfig(
        width=opt.width,
        height=opt.height,
        real_range=opt.real_range,
        imag_range=opt.imag_range,
        center_real=opt.center_real,
        center_imag=opt.center_imag,
    )

    last_frame = LastFramePresenter()
    presenters = [last_frame]
    if output_config.frame_dir is not None:
        presenters.append(FrameSequencePresenter(output_config.frame_dir, output_config.image_format))
    if output_config.gif_path is not None:
        presenters.append(GifPresenter(output_config.gif_path))
    presenter = FanOutPresenter(*presenters)

    try:
        try:
            engine_config.validate()
            state = RenderState.from_config(viewport_config)
            if opt.colormap:
                palette = colormap_palette(opt.colormap, engine_config.max_iteration)
            else:
                palette = build_palette(engine_config.palette_start, engine_config.palette_end,
                                        engine_config.max_iteration)
            log("Palette: %r" % (palette,))

            cycle = RenderCycle(state, engine_config, palette, ScriptedEventSource(ticks), presenter, log=log)
            ends_with_quit = any(isinstance(event, Quit) for tick in ticks for event in tick)
            presented = cycle.run(max_ticks=None if ends_with_quit else len(ticks))
            log("Presented %d frame(s) over the session" % presented)
        finally:
            presenter.close()
    except EngineError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if output_config.image_path is not None and last_frame.raster is not None:
        write_image(last_frame.raster, output_config.image_path, output_config.image_format)
        log("Wrote %s" % output_config.image_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
