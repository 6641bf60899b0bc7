"""Terminal styling shared by the gogo commands."""
from colorama import Fore, Style

INFO_COLOR = Fore.LIGHTBLACK_EX     # variable listings, verbose output
STDERR_COLOR = Fore.RED             # child process stderr
NOTICE_COLOR = Fore.YELLOW          # no-op notices
ERROR_COLOR = Fore.RED + Style.BRIGHT


def paint(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"
