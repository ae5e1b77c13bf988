# ---- Entry point ----
import argparse
import sys

from . import config
from .cpu import Chip8
from .errors import Chip8Error, RomLoadError
from .log import set_logs


def build_parser():
    parser = argparse.ArgumentParser(prog="chip8", description="CHIP-8 emulator")
    parser.add_argument("rom", help="Path to CHIP-8 ROM")
    parser.add_argument("--scale", type=int, default=config.scale,
                        help="Pixel scale factor (default %(default)s)")
    parser.add_argument("--clock", type=int, default=config.cpu_hz,
                        help="CPU clock in Hz (default %(default)s)")
    parser.add_argument("--stack-depth", type=int, default=config.STACK_DEPTH,
                        help="Maximum call depth, 0 for unbounded (default %(default)s)")
    parser.add_argument("--tone", type=int, default=440,
                        help="Beep tone frequency in Hz")
    parser.add_argument("--log", action="store_true", help="Log every instruction")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and print the screen at the end")
    parser.add_argument("--steps", type=int, default=1000,
                        help="Instructions to run in headless mode (default %(default)s)")
    return parser


def run_headless(chip, steps, clock=config.cpu_hz, out=None):
    """Run ``steps`` instructions, ticking the timers at the configured ratio."""
    out = sys.stdout if out is None else out
    per_tick = config.steps_per_tick(clock)
    executed = 0
    while executed < steps:
        burst = min(per_tick, steps - executed)
        done = chip.run(burst)
        executed += done
        chip.tick()
        if done < burst:
            # FX0A is waiting and there is no keyboard here
            print("Waiting for key at PC 0x%03X" % chip.pc, file=out)
            break
    print(chip.display.to_text(), file=out)
    return executed


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_logs(args.log)

    stack_depth = args.stack_depth if args.stack_depth > 0 else None
    chip = Chip8(stack_depth=stack_depth)
    try:
        chip.load_rom_file(args.rom)
    except RomLoadError as e:
        print(e, file=sys.stderr)
        return 1

    if args.headless:
        try:
            run_headless(chip, args.steps, clock=args.clock)
        except Chip8Error as e:
            print("Emulation error:", e, file=sys.stderr)
            return 2
        return 0

    import pyglet
    from .audio import Beeper
    from .window import Chip8Window

    Chip8Window(chip, scale=args.scale, clock=args.clock, beeper=Beeper(frequency=args.tone))
    pyglet.app.run()
    if chip.halted:
        print("Emulation error:", chip.error, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
