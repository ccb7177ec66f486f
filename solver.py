import argparse
import codecs
import sys
import time
import requests
from colorama import Fore
import utils
from utils import log_with_time, vlog, is_url
from dictionary import DictionaryIndex
from translator import translate_number, format_solution


DEFAULT_WORDS_FILE = "tests/words.txt"
DEFAULT_NUMBERS_FILE = "tests/numbers.txt"
DOWNLOAD_TIMEOUT = 30


def _clean_lines(lines):
    words = []
    for line in lines:
        w = line.rstrip("\r\n")
        if w:
            words.append(w)
    return words


def load_dictionary(source=DEFAULT_WORDS_FILE, encoding="utf-8"):
    """Read the word list from a local file or an http(s) URL, one word per line."""
    t0 = time.time()
    if is_url(source):
        log_with_time(f"⟳ Downloading dictionary from {source}…")
        resp = requests.get(source, timeout=DOWNLOAD_TIMEOUT)
        resp.raise_for_status()
        resp.encoding = encoding
        words = _clean_lines(resp.text.splitlines())
    else:
        with open(source, "r", encoding=encoding) as f:
            words = _clean_lines(f)
    vlog(f"Dictionary loaded ({len(words)} words)", t0)
    return words


def read_numbers(path=DEFAULT_NUMBERS_FILE, encoding="utf-8"):
    """Yield phone numbers from ``path`` one line at a time, without line endings."""
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            yield line.rstrip("\r\n")


def encode_numbers(numbers, index, count_only=False, out=None):
    """Print every solution for each number. Returns (numbers seen, solutions found)."""
    if out is None:
        out = sys.stdout
    total_numbers = 0
    total_solutions = 0
    for number in numbers:
        total_numbers += 1
        found = 0
        try:
            for _, segments in translate_number(number, index):
                found += 1
                if not count_only:
                    print(format_solution(number, segments), file=out)
        except RecursionError:
            log_with_time(f"Search too deep for {number!r}, solutions after #{found} skipped", color=Fore.YELLOW)
        if count_only:
            print(f"{number}: {found}", file=out)
        total_solutions += found
    return total_numbers, total_solutions


def _encoding_name(value):
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value}")


def build_parser():
    parser = argparse.ArgumentParser(description="Phone number encoder")
    parser.add_argument(
        "words", nargs="?", default=DEFAULT_WORDS_FILE,
        help=f"Word list file or http(s) URL (default: {DEFAULT_WORDS_FILE})",
    )
    parser.add_argument(
        "numbers", nargs="?", default=DEFAULT_NUMBERS_FILE,
        help=f"Phone number list file (default: {DEFAULT_NUMBERS_FILE})",
    )
    parser.add_argument("--file-encoding", type=_encoding_name, default="utf-8", help="Text encoding of the input files (default: utf-8)")
    parser.add_argument("--count", action="store_true", help="Print only the number of solutions per phone number")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def run_solver(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    # RequestException is an OSError, so it is caught first
    try:
        words = load_dictionary(args.words, args.file_encoding)
    except requests.RequestException as e:
        log_with_time(f"Could not download word list {args.words}: {e}", color=Fore.RED)
        return 1
    except (OSError, UnicodeError) as e:
        log_with_time(f"Could not read word list {args.words}: {e}", color=Fore.RED)
        return 1

    t0 = time.time()
    index = DictionaryIndex.build(words)
    vlog(f"Indexed {index.word_count} words under {len(index)} encodings", t0)

    t0 = time.time()
    try:
        total_numbers, total_solutions = encode_numbers(
            read_numbers(args.numbers, args.file_encoding), index, count_only=args.count
        )
    except (OSError, UnicodeError) as e:
        log_with_time(f"Could not read phone numbers {args.numbers}: {e}", color=Fore.RED)
        return 1
    vlog("Translation finished", t0)

    log_with_time(f"Found {total_solutions} solutions for {total_numbers} numbers", color=Fore.GREEN)
    return 0


def main():
    sys.exit(run_solver())


if __name__ == "__main__":
    main()
