"""Line-oriented front end for the circle editor."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from pathlib import Path
from typing import TextIO

from .editor import CircleEditor, CollinearPointsError

RANDOM_STEPS = 10
_INT_RE = re.compile(r"[+-]?\d+")

HELP = """commands:
  press X Y       place a point or grab a nearby one
  drag X Y        move the grabbed point
  release         let go of the grabbed point
  radius N        set the point radius (1-50)
  thickness N     set the circle line thickness (1-radius)
  random          move the points randomly ten times
  reset           remove all points
  points          list the points
  save PATH       write the image as a PGM file
  help            show this text
  quit            leave"""


def parse_int(text: str) -> int | None:
    """Parse a signed decimal integer; return None if the text is not one."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return None
    return int(stripped)


class CircleApp:
    """Reads editing commands from a stream and reports on another."""

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        editor: CircleEditor | None = None,
        delay: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.editor = editor if editor is not None else CircleEditor()
        self.delay = delay
        self.rng = rng if rng is not None else random.Random()

    def _say(self, message: str) -> None:
        print(message, file=self.stdout)

    def run(self) -> int:
        """Process commands until end of input or 'quit'; return an exit status."""
        for line in self.stdin:
            words = line.split()
            if not words:
                continue
            command, args = words[0].lower(), words[1:]
            if command in ("quit", "exit"):
                break
            try:
                self._dispatch(command, args)
            except CollinearPointsError:
                self._say("the three points are collinear; cannot draw a circle")
        return 0

    def _ints(self, args: list[str], count: int) -> list[int] | None:
        values = [parse_int(arg) for arg in args]
        if len(values) != count or any(v is None for v in values):
            self._say("invalid number")
            return None
        return values  # type: ignore[return-value]

    def _dispatch(self, command: str, args: list[str]) -> None:
        editor = self.editor
        if command in ("press", "drag"):
            coords = self._ints(args, 2)
            if coords is None:
                return
            (editor.press if command == "press" else editor.drag)(*coords)
        elif command == "release":
            editor.release()
        elif command == "radius":
            values = self._ints(args, 1)
            if values is not None:
                radius, thickness = editor.set_radius(values[0])
                self._say(f"radius {radius} thickness {thickness}")
        elif command == "thickness":
            values = self._ints(args, 1)
            if values is not None:
                self._say(f"thickness {editor.set_thickness(values[0])}")
        elif command == "random":
            self._random_move()
        elif command == "reset":
            editor.reset()
        elif command == "points":
            self._say(" ".join(f"({x}, {y})" for x, y in editor.points) or "no points")
        elif command == "save":
            if len(args) != 1:
                self._say("usage: save PATH")
                return
            Path(args[0]).write_bytes(editor.image.to_pgm())
            self._say(f"saved {args[0]}")
        elif command == "help":
            self._say(HELP)
        else:
            self._say(f"unknown command: {command}")

    def _random_move(self) -> None:
        if len(self.editor.points) < 3:
            self._say("create the circle before moving the points randomly")
            return
        for step in range(RANDOM_STEPS):
            self.editor.randomize(self.rng)
            if step < RANDOM_STEPS - 1 and self.delay > 0:
                time.sleep(self.delay)
        self._say("random move finished")


def main(argv: list[str] | None = None) -> int:
    """Run the editor on standard input and output."""
    parser = argparse.ArgumentParser(description="Draw the circle through three points.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between random moves")
    parser.add_argument("--seed", type=int, default=None)
    options = parser.parse_args(argv)
    editor = CircleEditor(options.width, options.height)
    app = CircleApp(sys.stdin, sys.stdout, editor, options.delay, random.Random(options.seed))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())