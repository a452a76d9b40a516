import sys
import argparse

from porterstem.stemming import Stemmer


def format_trace(word: str, stemmer: Stemmer) -> str:
    """
    Describe the steps that fired for word, e.g. ``agreed -> agre [1b: agreed -> agree, 5a: agree -> agre]``.
    """
    result, removals = stemmer.context(word)
    steps = ", ".join("{}: {} -> {}".format(*removal) for removal in removals)
    return "{} -> {} [{}]".format(word, result, steps)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Stem English text with the Porter algorithm')
    parser.add_argument('infile', help='Input file (default STDIN)', nargs='?',
            type=argparse.FileType('r'), default=sys.stdin)
    parser.add_argument('outfile', help='Output file (default STDOUT)', nargs='?',
            type=argparse.FileType('w'), default=sys.stdout)
    parser.add_argument('-t', '--trace', help='Print the steps applied to each word',
            action="store_true")
    args = parser.parse_args(argv)

    stemmer = Stemmer()
    for line in args.infile:
        if args.trace:
            for word in stemmer.tokenize(line):
                if word:
                    args.outfile.write(format_trace(word, stemmer) + "\n")
        else:
            args.outfile.write(stemmer.stem(line) + "\n")
    args.outfile.flush()


if __name__ == '__main__':
    main()
