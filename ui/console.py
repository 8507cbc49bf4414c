"""
console.py - Terminal rendering of audit results using ANSI codes.
"""

from run_result import CATEGORIES, RunResult

# ANSI Colors
C_RESET = "\033[0m"
C_BLUE = "\033[34m"
C_CYAN = "\033[36m"
C_GREEN = "\033[32m"
C_YELLOW = "\033[33m"
C_RED = "\033[31m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"

BAND_COLORS = {"pass": C_GREEN, "warn": C_YELLOW, "fail": C_RED}


def title(text):
    print(f"\n{C_BOLD}{C_BLUE}PAGE AUDIT{C_RESET} | {text}")
    print(f"{C_DIM}{'='*40}{C_RESET}")


def success(text):
    print(f"{C_GREEN}✔{C_RESET} {text}")


def error(text):
    print(f"{C_RED}✖{C_RESET} {text}")


def print_panel(title, lines):
    # Prints a boxed summary
    width = 60
    print(f"\n{C_CYAN}╭{'─'*(width-2)}╮{C_RESET}")
    print(f"{C_CYAN}│{C_RESET} {C_BOLD}{title.center(width-4)}{C_RESET} {C_CYAN}│{C_RESET}")
    print(f"{C_CYAN}├{'─'*(width-2)}┤{C_RESET}")
    for line in lines:
        print(f"{C_CYAN}│{C_RESET} {line.ljust(width-4)} {C_CYAN}│{C_RESET}")
    print(f"{C_CYAN}╰{'─'*(width-2)}╯{C_RESET}\n")


def render_result(result: RunResult, heading: str = ""):
    title(f"{heading or 'Overall Score'} ({result.mode})")
    for name in CATEGORIES:
        print(f"{C_BOLD}{name.capitalize()}{C_RESET}")
        for check in result.categories.get(name, ()):
            if check.passed:
                success(check.label)
            else:
                error(check.label)
    color = BAND_COLORS[result.band]
    print_panel("Score", [
        f"{result.score}% ({result.band})",
        f"{result.passed}/{result.total} checks passed",
    ])
    print(f"{color}{C_BOLD}{result.score}%{C_RESET}")
