from .app import LoopingTimerApp

import argparse
import logging
import sys

def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Random looping timer")

    parser.add_argument("--min", dest="minSeconds", default=None, help="Minimum seconds per cycle")
    parser.add_argument("--max", dest="maxSeconds", default=None, help="Maximum seconds per cycle")
    parser.add_argument("--sounds", dest="soundIntensity", default=None, help="Number of sounds to pick from (0-5)")
    parser.add_argument("--colors", dest="colorIntensity", default=None, help="Number of colors to pick from (0-5)")
    parser.add_argument("--arrow", action="store_true", default=None, help="Show a randomly rotated arrow each cycle")
    parser.add_argument("--hide-countdown", dest="hideCountdown", action="store_true", help="Do not display the countdown")

    parser.add_argument("--config", "-c", default=None, help="JSON file with setting overrides")
    parser.add_argument("--sound-dir", dest="soundDirectory", default=None, help="Directory holding sound1.wav .. sound5.wav")
    parser.add_argument("--cycles", type=int, default=None, help="Quit after this many cycles")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every tick")

    return parser

def applyArguments(app: LoopingTimerApp, arguments: argparse.Namespace) -> None:
    config = app.config

    if arguments.minSeconds is not None:
        config.setMinSeconds(arguments.minSeconds)
    if arguments.maxSeconds is not None:
        config.setMaxSeconds(arguments.maxSeconds)
    if arguments.soundIntensity is not None:
        config.setSoundIntensity(arguments.soundIntensity)
    if arguments.colorIntensity is not None:
        config.setColorIntensity(arguments.colorIntensity)
    if arguments.arrow:
        config.setArrowEnabled(True)
    if arguments.hideCountdown:
        config.setShowCountdown(False)

def main(argv=None) -> int:
    arguments = buildParser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # start application
    app = LoopingTimerApp(
        configFile=arguments.config,
        seed=arguments.seed,
        maxCycles=arguments.cycles,
        soundDirectory=arguments.soundDirectory
    )

    applyArguments(app, arguments)
    return app.startLoop()

if __name__ == "__main__":
    sys.exit(main())
