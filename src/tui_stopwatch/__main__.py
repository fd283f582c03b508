import argparse
import locale
import os

from textual import log

from .UI import UI
from .config import StopwatchConfig

def useUserLocale() -> None:
    try:
        locale.setlocale(locale.LC_ALL, '')
    except locale.Error as e:
        log.warning(f'Falling back to the C locale: {e}')

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog='tui-stopwatch',
        description='A stopwatch with a millisecond wall clock, in your terminal.',
    )
    parser.add_argument(
        '--config', metavar='PATH',
        help='JSON file of StopwatchConfig fields.',
    )
    args = parser.parse_args(argv)
    if args.config is None:
        config = StopwatchConfig()
    else:
        config = StopwatchConfig.fromFile(os.path.abspath(args.config))
    useUserLocale()
    UI(config).run()

if __name__ == "__main__":
    main()
