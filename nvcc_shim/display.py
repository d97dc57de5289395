import sys

from colorama import Fore, Style


def info(msg, *details):
    extra = "".join(f" {Fore.LIGHTBLACK_EX}{d}{Style.RESET_ALL}" for d in details)
    print(f"[i] {msg}{extra}", flush=True)


def warning(msg):
    print(f"{Fore.YELLOW}[w] {msg}{Style.RESET_ALL}", file=sys.stderr)


def error(msg):
    print(f"{Fore.LIGHTRED_EX}[x] {msg}{Style.RESET_ALL}", file=sys.stderr)


def bracketed(items):
    # [[a]], [[b]] keeps tokens with spaces readable
    return "[[" + "]], [[".join(items) + "]]"
