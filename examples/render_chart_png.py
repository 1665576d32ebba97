#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from PIL import Image

from chartlayout import Axis, ChartConfig, ChartStyle, SteppedAnimation, chart

DEFAULT_ENTRIES = {"Jan": 4.0, "Feb": 7.5, "Mar": 2.0, "Apr": 9.0, "May": 6.5, "Jun": 8.0}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a category chart to PNG (or an animated GIF).")
    p.add_argument("--data", help="JSON object mapping category -> value")
    p.add_argument("--out", default="chart.png")
    p.add_argument("--width", type=int, default=640)
    p.add_argument("--height", type=int, default=360)
    p.add_argument("--mode", choices=("line", "bars", "markers"), default="line")
    p.add_argument("--axis", choices=[a.value for a in Axis], default=Axis.XY.value)
    p.add_argument("--labels-size", type=float, default=14.0)
    p.add_argument("--packed", action="store_true", help="centre categories in equal cells")
    p.add_argument("--zero", action="store_true", help="start the value scale at zero")
    p.add_argument("--animate-frames", type=int, default=0, help="write a GIF with this many grow-in frames")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    entries = json.loads(Path(args.data).read_text(encoding="utf-8")) if args.data else DEFAULT_ENTRIES
    axis = Axis(args.axis)
    padding = (16, 16, 16, 16)

    renderer, view = chart(
        args.width,
        args.height,
        config=ChartConfig(x_packed=args.packed, y_at_zero=args.zero or args.mode == "bars"),
        style=ChartStyle(mode=args.mode),
        labels_size=args.labels_size,
    )

    def paint() -> Image.Image:
        view.clear()
        renderer.draw()
        return Image.fromarray(view.to_rgba())

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if args.animate_frames > 0:
        animation = SteppedAnimation(duration_frames=args.animate_frames)
        renderer.anim(entries, animation)
        renderer.pre_draw(args.width, args.height, *padding, axis, args.labels_size)
        frames = [paint()]
        while animation.tick():
            frames.append(paint())
        frames.append(paint())
        frames[0].save(out_path, save_all=True, append_images=frames[1:], duration=33, loop=0)
    else:
        renderer.render(entries)
        renderer.pre_draw(args.width, args.height, *padding, axis, args.labels_size)
        paint().save(out_path)

    print(out_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
