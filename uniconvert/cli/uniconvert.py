import logging
import argparse
import sys
from typing import List, Optional

from uniconvert.converter import InvalidCodepoint, text_to_unicode, unicode_to_text

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
loggers = [logging.getLogger(name) for name in logging.root.manager.loggerDict]
for _logger in loggers:
    _logger.setLevel(logger.level)

OPTIONS_HELP = """Options:
    -h, --help         Print help information
    -t, --text         Convert text to unicode
    -u, --unicode      Convert unicode to text
"""

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='uniconvert',
        usage='%(prog)s [OPTION] [SOURCE]',
        description='Unicode and Text Convert',
        epilog=OPTIONS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    if len(argv) < 2:
        print("Not enough arguments provided.")
        return 0

    # the payload is taken verbatim, even "--" or "-x"
    option, source = argv[0], argv[1]
    if len(argv) > 2:
        logger.debug(f"ignoring extra arguments: {argv[2:]}")

    if option in ("-t", "--text"):
        print(text_to_unicode(source))
    elif option in ("-u", "--unicode"):
        try:
            text = unicode_to_text(source)
        except InvalidCodepoint as e:
            logger.error(f"Cannot decode: {e}")
            return 1
        print(text)
    elif option in ("-h", "--help"):
        parser.print_help()
    else:
        print(f"Unknown option: {option}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
