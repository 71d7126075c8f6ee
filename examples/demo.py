# demo.py

import asyncio
import argparse
from colorphrase import COLORS, Logger, PhraseConfig, ColorPhraseError
from colorphrase.display import PhraseConsole, PhraseTerminal


def parse_color(value: str) -> int:
    """Accept a color name from COLORS or an integer such as 0xFFE6454A."""
    if value.upper() in COLORS:
        return COLORS[value.upper()]
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a color: {value}") from None


async def run(terminal: PhraseTerminal, console: PhraseConsole, logger: Logger) -> None:
    while True:
        try:
            pattern = await terminal.get_pattern()
        except EOFError:
            return
        try:
            console.print(terminal.format(pattern))
        except ColorPhraseError as e:
            logger.error(f"Could not format {pattern!r}: {e}")


def main():
    parser = argparse.ArgumentParser(description='ColorPhrase demo')
    parser.add_argument('-s', '--separator', default='<>',
        help='One or two delimiter characters (default: <>)')
    parser.add_argument('--inner', type=parse_color, default=0xFFE6454A,
        help='ARGB color inside the delimiters')
    parser.add_argument('--outer', type=parse_color, default=0xFF666666,
        help='ARGB color outside the delimiters')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args()

    logger = Logger('colorphrase.demo', args.enable_logging, args.log_file)
    try:
        config = PhraseConfig(separator=args.separator, inner_color=args.inner, outer_color=args.outer)
    except ColorPhraseError as e:
        parser.error(str(e))

    terminal = PhraseTerminal(config, logger)
    console = PhraseConsole()
    console.console.print(
        f"Type a pattern, e.g. I'm{config.left}Chinese{config.right},"
        f"I love {config.left}China{config.right}", markup=False
    )
    try:
        asyncio.run(run(terminal, console, logger))
    except KeyboardInterrupt:
        print("\nExiting...")

if __name__ == "__main__":
    main()
