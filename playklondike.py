#!/usr/bin/env python

from klondike import Solitaire
import sys

import argparse
import logging


def deal_klondike(seed: str | None=None, reveal_hidden: bool=False) -> str:
    g = Solitaire(seed=seed)
    g.new_game()
    return g.board(reveal_hidden=reveal_hidden)


def main(argv: list[str] | None=None):
    parser = argparse.ArgumentParser(description='Klondike solitaire rules engine')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every move the engine makes or refuses.')

    subs = parser.add_subparsers(dest='command', help='Command to run', required=True, metavar='COMMAND')
    subs: argparse._SubParsersAction

    deal_parser = subs.add_parser('deal', help='Deal a new game and print the board')
    deal_parser: argparse.ArgumentParser
    deal_parser.add_argument('-s', '--seed', type=str, default=None, help='Set the seed for the shuffle. This allows for reproducible deals.')
    deal_parser.add_argument('-r', '--reveal', action='store_true', help='Show the face-down cards of the tableau as well.')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s %(name)s: %(message)s')

    if args.command.lower() == 'deal':
        print(deal_klondike(args.seed, args.reveal), end='')
    else:
        print(f"Unknown command: {args.command}")
        sys.exit(1)

if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
