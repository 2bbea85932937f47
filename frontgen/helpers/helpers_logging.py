"""Console output helpers for the frontgen CLI.

The core never prints; only the CLI layer calls these. Generation output
has its own helpers so that every subgenerator reports files, notices and
rejections the same way.
"""


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def print_header(msg: str) -> None:
    print(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.ENDC}")


def print_info(msg: str) -> None:
    print(f"{Colors.CYAN}{msg}{Colors.ENDC}")


def print_dim(msg: str) -> None:
    """Print a de-emphasized message (hints, rule codes)."""
    print(f"{Colors.DIM}{msg}{Colors.ENDC}")


def print_success(msg: str) -> None:
    print(f"{Colors.GREEN}✓ {msg}{Colors.ENDC}")


def print_warning(msg: str) -> None:
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.ENDC}")


def print_error(msg: str) -> None:
    print(f"{Colors.RED}❌ {msg}{Colors.ENDC}")


# ---------------------------------------------------------------------------
# Generation output
# ---------------------------------------------------------------------------


def print_notice(msg: str) -> None:
    """Print a non-fatal rule notice; generation still goes ahead."""
    print(f"{Colors.YELLOW}note:{Colors.ENDC} {msg}")


def print_rejection(message: str, reason: str) -> None:
    """Print why a request was refused, with its stable reason code."""
    print_error(message)
    print_dim(f"  rule: {reason}")
    print_error("Operation aborted")


def print_planned(output_path: str, template_id: str) -> None:
    print(f"  {Colors.CYAN}{output_path}{Colors.ENDC}  {Colors.DIM}({template_id}){Colors.ENDC}")


def print_created(output_path: str) -> None:
    print_success(f"Created {output_path}")


def print_skipped(output_path: str) -> None:
    print(f"{Colors.DIM}⊘ Skipped (exists): {output_path}{Colors.ENDC}")
